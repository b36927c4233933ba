"""
Tests for gitvercmp.versioning.normalize module.

Tests canonical key computation including:
- Surface cleanup (tag prefix, `git version`, platform suffixes)
- Alias short-circuit
- Development distance (old -GIT marker and `git describe` suffix)
- Release candidate field
- Padding, truncation and best-effort handling of malformed input
"""

from __future__ import annotations

import pytest

from gitvercmp.versioning import AliasTable
from gitvercmp.versioning.normalize import clean, is_canonical_key, normalize


class TestClean:
    """Tests for the surface cleanup step."""

    def test_strips_tag_prefix(self):
        """Test that a leading 'v' from tag names is removed."""
        assert clean("v1.7.1") == "1.7.1"

    def test_strips_git_version_prefix(self):
        """Test that `git --version` output is reduced to the version."""
        assert clean("git version 1.7.0.2") == "1.7.0.2"

    def test_strips_msysgit_suffix(self):
        """Test that the Git for Windows build suffix is removed."""
        assert clean("1.7.0.2.msysgit.0") == "1.7.0.2"
        assert clean("git version 1.9.5.msysgit.1") == "1.9.5"

    def test_strips_vendor_annotation(self):
        """Test that a trailing parenthesized annotation is removed."""
        assert clean("git version 2.39.3 (Apple Git-145)") == "2.39.3"

    def test_hyphens_become_dots(self):
        """Test that hyphen separators are turned into dots."""
        assert clean("1.4.0-rc1") == "1.4.0.rc1"
        assert clean("1.3-GIT") == "1.3.GIT"

    def test_rc_without_dot(self):
        """Test that the legacy '1.0rcN' spelling gains its dot."""
        assert clean("1.0rc2") == "1.0.rc2"
        assert clean("v1.0rc6") == "1.0.rc6"


class TestNormalize:
    """Tests for canonical key computation."""

    @pytest.mark.parametrize(
        ("raw", "key"),
        [
            ("1.6.0", "001.006.000.000.000.000"),
            ("2.7.1", "002.007.001.000.000.000"),
            ("1.8.5.6", "001.008.005.006.000.000"),
            ("1.6.0.rc2", "001.006.000.000-002.000"),
            ("1.7.1.209.gd60ad81", "001.007.001.000.000.209"),
            ("1.8.5.1.21.gb2a0afd", "001.008.005.001.000.021"),
            ("2.3.0.rc0.36.g63a0e83", "002.003.000.000-000.036"),
            ("1.3.GIT", "001.003.000.000.000.001"),
            ("1.3-GIT", "001.003.000.000.000.001"),
            ("v1.7.1", "001.007.001.000.000.000"),
            ("git version 1.7.0.2", "001.007.000.002.000.000"),
            ("1.7.0.2.msysgit.0", "001.007.000.002.000.000"),
            ("git version 2.39.3 (Apple Git-145)", "002.039.003.000.000.000"),
            ("1.4.0-rc1", "001.004.000.000-001.000"),
        ],
    )
    def test_accepted_formats(self, raw, key):
        """Test every accepted input format."""
        assert normalize(raw) == key

    def test_aliases_short_circuit(self):
        """Test that irregular releases use their precomputed keys."""
        assert normalize("0.99.9h") == "000.099.009.008.000.000"
        assert normalize("1.0.rc1") == "000.099.009.008.000.000"
        assert normalize("v1.0.0b") == "001.000.002.000.000.000"
        assert normalize("1.0rc2") == normalize("0.99.9i")

    def test_alias_table_is_consulted(self):
        """Test that aliases added to a table are used after cleanup."""
        table = AliasTable({"1.0.0c": "001.000.003.000.000.000"})
        assert normalize("v1.0.0c", table) == "001.000.003.000.000.000"
        # Without the table, the letter is dropped
        assert normalize("v1.0.0c") == "001.000.000.000.000.000"

    def test_commit_hash_is_discarded(self):
        """Test that sibling dev builds get the same key."""
        assert normalize("1.7.1.1.gc8c07") == normalize("1.7.1.1.g5f35a")
        assert normalize("1.7.1.1.gc8c07") == "001.007.001.000.000.001"

    def test_rc_dev_build_sorts_after_rc(self):
        """Test that the distance field breaks ties within an RC."""
        assert normalize("2.3.0.rc0") < normalize("2.3.0.rc0.36.g63a0e83")
        assert normalize("2.3.0.rc0.36.g63a0e83") < normalize("2.3.0")

    def test_missing_components_default_to_zero(self):
        """Test that short versions are padded to four components."""
        assert normalize("2") == "002.000.000.000.000.000"
        assert normalize("1.7") == "001.007.000.000.000.000"

    def test_extra_components_are_ignored(self):
        """Test that components beyond the fourth do not matter."""
        assert normalize("1.2.3.4.5.6") == "001.002.003.004.000.000"
        assert normalize("2.43.0.windows.1") == normalize("2.43.0")

    def test_trailing_dot_is_ignored(self):
        """Test that empty trailing components are dropped."""
        assert normalize("1.7.") == normalize("1.7")

    def test_old_dev_marker_has_fixed_distance(self):
        """Test that the pre-1.4 marker always counts as one commit."""
        assert normalize("1.0.GIT") == "001.000.000.000.000.001"
        assert normalize("1.2.GIT") == normalize("1.2.1.gabcdef0")


class TestMalformedInput:
    """Tests for best-effort handling of input that is not a version."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            ".",
            "garbage",
            "g",
            "rc",
            "GIT",
            "1..2",
            "v",
            "-",
            "x.y.z",
            "1.2.rcX",
            "1." + "9" * 5000,
            "9" * 5000 + ".rc" + "1" * 5000,
        ],
    )
    def test_never_raises(self, raw):
        """Test that malformed strings still produce a canonical key."""
        assert is_canonical_key(normalize(raw))

    def test_empty_string(self):
        """Test that an empty string is all zeros."""
        assert normalize("") == "000.000.000.000.000.000"

    def test_letters_read_as_leading_digits(self):
        """Test that '9h'-style components keep their numeric prefix."""
        assert normalize("0.99.9z") == "000.099.009.000.000.000"

    def test_large_numbers_widen_field(self):
        """Test that components above 999 are kept in full."""
        assert normalize("1.2.1000") == "001.002.1000.000.000.000"

    def test_oversized_component_is_truncated(self):
        """Test that very long digit runs are read up to 4000 digits."""
        assert normalize("1." + "9" * 5000) == (
            "001." + "9" * 4000 + ".000.000.000.000"
        )

    def test_non_string_raises_type_error(self):
        """Test that only strings are accepted."""
        with pytest.raises(TypeError):
            normalize(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            normalize(1.7)  # type: ignore[arg-type]


class TestIsCanonicalKey:
    """Tests for the canonical key layout check."""

    def test_valid_keys(self):
        """Test release and RC key layouts."""
        assert is_canonical_key("001.006.000.000.000.000")
        assert is_canonical_key("001.006.000.000-002.000")

    def test_invalid_keys(self):
        """Test that raw versions are not mistaken for keys."""
        assert not is_canonical_key("1.6.0")
        assert not is_canonical_key("001.006.000.000.000")
        assert not is_canonical_key("")
        assert not is_canonical_key("001.006.000.000.000.000\n")

# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Turn Git version strings into canonical, string-comparable keys.

This module does NOT run git or read files. It only rewrites version
strings so that plain `<` and `==` on the results follow Git's release
history.

A canonical key is six integers padded with 0 to three digits:

- the 4 parts of the dotted version (padded with as many .0 as needed)
- '.000' if not an RC, or '-xxx' if an RC ('-' sorts before '.' in ASCII)
- the number of commits since the previous tag (for dev versions)

Examples:
    >>> normalize("1.6.0.rc2")
    '001.006.000.000-002.000'
    >>> normalize("git version 1.7.1.209.gd60ad81")
    '001.007.001.000.000.209'
    >>> normalize("1.3-GIT")
    '001.003.000.000.000.001'

Notes:
    - Any string is accepted. Components that are not numbers are read by
      their leading digits ("9h" -> 9, "beta" -> 0); the result may be
      meaningless but is never an error.
    - The commit hash of a dev version is dropped, so two siblings at the
      same distance from a tag compare equal.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .aliases import GIT_VERSION_ALIASES

if TYPE_CHECKING:
    from .aliases import AliasTable

# Tag prefix, `git --version` prefix, Git for Windows build suffix, and
# vendor annotations such as " (Apple Git-145)"
_SURFACE_RE = re.compile(r"^v|^git version |\.msysgit.*| \(.*\)$")
# Capped below the interpreter's int-from-string digit limit
_LEADING_INT_RE = re.compile(r"\s*(\d{1,4000})")

CANONICAL_KEY_RE = re.compile(r"^\d{3,}(?:\.\d{3,}){3}[.-]\d{3,}\.\d{3,}\Z")

# Dev builds before 1.4 reported "1.x-GIT" with no commit count
_OLD_DEV_MARKER = "GIT"
_OLD_DEV_DISTANCE = 1


def _as_int(text: str) -> int:
    """Read the leading digits of a component; 0 if there are none."""
    m = _LEADING_INT_RE.match(text)
    return int(m.group(1)) if m else 0


def clean(raw: str) -> str:
    """Strip tag/command prefixes and platform suffixes, unify separators.

    Example:
        >>> clean("git version 1.7.0.2.msysgit.0")
        '1.7.0.2'
        >>> clean("v1.0rc2")
        '1.0.rc2'
    """
    version = _SURFACE_RE.sub("", raw)
    version = version.replace("-", ".")
    return version.replace("0rc", "0.rc", 1)


def is_canonical_key(text: str) -> bool:
    """Return True if `text` already has the canonical key layout."""
    return bool(CANONICAL_KEY_RE.match(text))


def normalize(raw: str, aliases: AliasTable | None = None) -> str:
    """Compute the canonical key for a Git version string.

    Args:
        raw: A version number, a git.git tag name, or the output of
            `git --version` / `git describe`.
        aliases: Table whose alias layer is consulted after cleanup.
            Defaults to the built-in GIT_VERSION_ALIASES.

    Returns:
        The canonical key, e.g. '002.003.000.000-000.036' for
        '2.3.0.rc0.36.g63a0e83'.

    Raises:
        TypeError: If `raw` is not a string.
    """
    if not isinstance(raw, str):
        raise TypeError(f"version must be a string, not {type(raw).__name__}")

    version = clean(raw)
    alias = (
        aliases.known_alias(version)
        if aliases is not None
        else GIT_VERSION_ALIASES.get(version)
    )
    if alias is not None:
        return alias

    parts = version.split(".")
    while parts and not parts[-1]:
        parts.pop()

    commits = 0
    rc_field = ".000"

    # commit count since the previous tag
    if parts and parts[-1] == _OLD_DEV_MARKER:  # before 1.4
        parts.pop()
        commits = _OLD_DEV_DISTANCE
    if parts and parts[-1].startswith("g"):  # after 1.4, `git describe`
        parts.pop()
        commits = _as_int(parts.pop()) if parts else 0

    # release candidate number
    if parts and parts[-1].startswith("rc"):
        rc = parts.pop().replace("rc", "", 1)
        rc_field = f"-{_as_int(rc):03d}"

    numbers = [_as_int(p) for p in parts[:4]]
    numbers += [0] * (4 - len(numbers))

    return ".".join(f"{n:03d}" for n in numbers) + rc_field + f".{commits:03d}"

"""
gitvercmp - Compare Git versions

Git's own version numbers changed format several times: lettered pre-1.0
releases, release candidates, `-GIT` development builds, `git describe`
suffixes, Windows build suffixes, and a few releases with two names.
gitvercmp maps all of them onto canonical keys that compare as plain
strings, and offers Git-aware versions of the comparison operators.

Quick Start
-----------
    >>> from gitvercmp import ge_git, cmp_git
    >>> ge_git("git version 2.43.0", "1.7.10")
    True
    >>> from functools import cmp_to_key
    >>> sorted(["2.0.3", "1.9.3", "2.0.0.rc2"], key=cmp_to_key(cmp_git))
    ['1.9.3', '2.0.0.rc2', '2.0.3']

From the shell:

    $ gitvercmp test "$(git --version)" ge 1.7.10

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
config : package
    YAML alias files.
versioning : package
    Normalization, comparison, and installed git detection.
logging : module
    Verbosity-gated logger used by library code.
exceptions : module
    GitVerCmpError and subclasses.

Public API
----------
    from gitvercmp import (
        lt_git, gt_git, le_git, ge_git, eq_git, ne_git, cmp_git,
        GitVersion, GitVersionComparator, AliasTable, normalize,
    )
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Git-aware version comparison"

from gitvercmp.config import build_alias_table
from gitvercmp.exceptions import ConfigError, GitNotFoundError, GitVerCmpError
from gitvercmp.versioning import (
    AliasTable,
    GitVersion,
    GitVersionComparator,
    cmp_git,
    eq_git,
    ge_git,
    git_satisfies,
    gt_git,
    installed_git_version,
    le_git,
    lt_git,
    ne_git,
    normalize,
    normalize_git,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "AliasTable",
    "ConfigError",
    "GitNotFoundError",
    "GitVerCmpError",
    "GitVersion",
    "GitVersionComparator",
    "build_alias_table",
    "cmp_git",
    "eq_git",
    "ge_git",
    "git_satisfies",
    "gt_git",
    "installed_git_version",
    "le_git",
    "lt_git",
    "ne_git",
    "normalize",
    "normalize_git",
]

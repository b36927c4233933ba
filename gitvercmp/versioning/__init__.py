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

"""
Git version normalization and comparison.

Modules
-------
aliases : module
    Known irregular versions and the memoizing AliasTable.
normalize : module
    Canonical key computation.
compare : module
    GitVersionComparator, the *_git functions and GitVersion.
installed : module
    Version of the git executable on this host.

Version formats
---------------
Since the 1.4 series (2006), `git --version` prints:

    1.6.0                   # stable
    1.8.5.6                 # maintenance release
    1.6.0.rc2               # release candidate
    1.7.1.209.gd60ad81      # development version (`git describe`)
    2.3.0.rc0.36.g63a0e83   # development version of a release candidate

Older and irregular forms are also understood: `1.3.GIT` (dev builds
before 1.4), `v1.7.1` (tag names), `git version 1.7.0.2.msysgit.0`,
lettered pre-1.0 releases (`0.99.9h` == `1.0.rc1`) and the doubly tagged
`1.0.0a` / `1.0.0b` (== `1.0.1` / `1.0.2`).

Examples
--------
    >>> from gitvercmp.versioning import eq_git, lt_git
    >>> eq_git("0.99.9l", "1.0rc4")
    True
    >>> lt_git("1.8.5.4.8.g7c9b668", "1.8.5.4.19.g5032098")
    True

Notes
-----
Two dev builds that are siblings (same tag, same distance, different
commit) cannot be ordered; they compare equal:

    >>> eq_git("1.7.1.1.gc8c07", "1.7.1.1.g5f35a")
    True
"""

from .aliases import GIT_VERSION_ALIASES, AliasTable
from .compare import (
    OPERATORS,
    GitVersion,
    GitVersionComparator,
    cmp_git,
    eq_git,
    ge_git,
    get_default_comparator,
    gt_git,
    le_git,
    lt_git,
    ne_git,
    normalize_git,
    relate,
    set_default_comparator,
)
from .installed import git_satisfies, installed_git_version
from .normalize import clean, is_canonical_key, normalize

__all__ = [
    "GIT_VERSION_ALIASES",
    "AliasTable",
    "OPERATORS",
    "GitVersion",
    "GitVersionComparator",
    "clean",
    "cmp_git",
    "eq_git",
    "ge_git",
    "get_default_comparator",
    "git_satisfies",
    "gt_git",
    "installed_git_version",
    "is_canonical_key",
    "le_git",
    "lt_git",
    "ne_git",
    "normalize",
    "normalize_git",
    "relate",
    "set_default_comparator",
]

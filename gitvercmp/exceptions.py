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

"""Exception hierarchy for gitvercmp.

Comparing and normalizing version strings never raises for string input:
a malformed version only degrades the comparison result. The errors below
cover the parts of the library that touch the outside world:

- ConfigError: alias file problems (missing file, YAML parse, bad entries)
- GitNotFoundError: the git executable could not be run

All exceptions inherit from GitVerCmpError, allowing users to catch all
gitvercmp errors with a single except clause if needed.

Example:
    Catching configuration errors:
        ```python
        from gitvercmp.config import build_alias_table
        from gitvercmp.exceptions import ConfigError

        try:
            table = build_alias_table([Path("aliases.yaml")])
        except ConfigError as e:
            print(f"Config error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "GitVerCmpError",
    "ConfigError",
    "GitNotFoundError",
]


class GitVerCmpError(Exception):
    """Base exception for all gitvercmp errors."""

    pass


class ConfigError(GitVerCmpError):
    """Raised for alias configuration errors.

    This exception is raised when there are problems with:

    - Missing alias files
    - YAML parsing (syntax errors, invalid structure)
    - Alias entries that are not string to string mappings
    """

    pass


class GitNotFoundError(GitVerCmpError):
    """Raised when `git --version` cannot be run.

    Covers a missing executable, a non-zero exit status and a timeout.
    """

    pass

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

"""Query the version of the git executable on this host.

`git --version` appeared in 0.99.7 and `git version` in 1.3.0; the output
("git version 2.43.0", "git version 1.7.0.2.msysgit.0", ...) is passed to
the comparator unchanged, since normalization strips the prefix and the
platform suffix.

Example:
    ```python
    from gitvercmp.versioning.installed import git_satisfies

    if not git_satisfies("1.7.10"):
        raise SystemExit("git >= 1.7.10 is required")
    ```
"""

from __future__ import annotations

import shutil
import subprocess

from gitvercmp.exceptions import GitNotFoundError
from gitvercmp.logging import Logger, get_global_logger

from .compare import GitVersionComparator, get_default_comparator


def installed_git_version(
    git: str = "git", *, timeout: float = 10, logger: Logger | None = None
) -> str:
    """Run `git --version` and return its output.

    Args:
        git: Name or path of the git executable.
        timeout: Seconds to wait for the command.
        logger: Logger for progress output. Defaults to the global logger.

    Returns:
        The stripped stdout, e.g. "git version 2.43.0".

    Raises:
        GitNotFoundError: If the executable is missing, exits non-zero,
            times out, or prints nothing.
    """
    logger = logger or get_global_logger()

    executable = shutil.which(git)
    if executable is None:
        raise GitNotFoundError(f"git executable not found: {git}")

    logger.debug("GIT", f"Running: {executable} --version")
    try:
        result = subprocess.run(
            [executable, "--version"],
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as err:
        raise GitNotFoundError(
            f"'{executable} --version' failed with exit code {err.returncode}"
        ) from err
    except subprocess.TimeoutExpired as err:
        raise GitNotFoundError(
            f"'{executable} --version' timed out after {timeout}s"
        ) from err
    except OSError as err:
        raise GitNotFoundError(f"could not run {executable}: {err}") from err

    output = result.stdout.strip()
    if not output:
        raise GitNotFoundError(f"'{executable} --version' printed nothing")
    logger.verbose("GIT", f"Installed: {output}")
    return output


def git_satisfies(
    minimum: str,
    git: str = "git",
    comparator: GitVersionComparator | None = None,
) -> bool:
    """Return True if the installed git is at least `minimum`.

    Raises:
        GitNotFoundError: If git cannot be run.
    """
    comparator = comparator or get_default_comparator()
    return comparator.ge(installed_git_version(git), minimum)

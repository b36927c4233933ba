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

"""Alias configuration loading for gitvercmp.

The seeded alias table covers git.git's own history. Builds from forks or
vendor patches sometimes report versions that should compare as some other
release; alias files let users declare those equivalences.

File Format:
    ```yaml
    aliases:
      "1.0.0c": "1.0.3"                          # compare as another version
      "2.0.0.custom": "002.000.000.000.000.000"  # or give the key directly
    ```

    Quote keys and values: YAML reads an unquoted `1.10` as a number.

Layers:
    1. Seeded GIT_VERSION_ALIASES
    2. Each file passed to build_alias_table(), in order
    3. The file named by the GITVERCMP_ALIASES environment variable

    Later layers win. Keys are cleaned the same way version strings are
    (so "v1.0.0c" and "1.0.0c" are the same key). Targets that are not
    already canonical keys are normalized against the layers loaded so far.

Error Handling:
    - ConfigError: Missing or unreadable file, YAML parse errors, empty
        files, or invalid structure
    - All errors are chained with "from err" for better debugging

Example:
    ```python
    from pathlib import Path
    from gitvercmp.config import build_alias_table
    from gitvercmp.versioning import GitVersionComparator

    table = build_alias_table([Path("aliases.yaml")])
    comparator = GitVersionComparator(table)
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import os
from pathlib import Path
from typing import Any

import yaml

from gitvercmp.exceptions import ConfigError
from gitvercmp.logging import Logger, get_global_logger
from gitvercmp.versioning.aliases import GIT_VERSION_ALIASES, AliasTable
from gitvercmp.versioning.normalize import clean, is_canonical_key, normalize

ALIASES_ENV_VAR = "GITVERCMP_ALIASES"

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Load a YAML file and return the parsed Python object.

    Raises:
        ConfigError: When the file does not exist, cannot be read as UTF-8
            text, is not valid YAML, or is empty.
    """
    if not p.exists():
        raise ConfigError(f"alias file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigError(f"Cannot read alias file: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Alias resolution
# -------------------------------


def _resolve_aliases(
    entries: Mapping[Any, Any], base: Mapping[str, str], source: Path
) -> dict[str, str]:
    """Validate alias entries and turn every target into a canonical key."""
    resolved: dict[str, str] = {}
    for raw, target in entries.items():
        if not isinstance(raw, str) or not isinstance(target, str):
            raise ConfigError(
                f"{source}: alias {raw!r}: {target!r} must map a string to a "
                "string (quote version numbers in YAML)"
            )
        if not raw.strip() or not target.strip():
            raise ConfigError(f"{source}: alias {raw!r}: {target!r} is empty")
        # Block scalars (`|`) keep their trailing newline
        raw, target = raw.strip(), target.strip()

        if is_canonical_key(target):
            key = target
        else:
            key = normalize(target, AliasTable({**base, **resolved}))
        resolved[clean(raw)] = key
    return resolved


def load_alias_file(
    path: Path,
    base: Mapping[str, str] | None = None,
    logger: Logger | None = None,
) -> dict[str, str]:
    """Load one alias file.

    Args:
        path: YAML file with a top-level `aliases` mapping.
        base: Aliases already in effect, used to resolve targets. Defaults
            to the seeded GIT_VERSION_ALIASES.
        logger: Logger for progress output. Defaults to the global logger.

    Returns:
        Mapping of cleaned version string to canonical key.

    Raises:
        ConfigError: On a missing or unreadable file, YAML errors, or invalid
            structure.
    """
    logger = logger or get_global_logger()
    path = Path(path)

    data = _load_yaml_file(path)
    if not isinstance(data, dict) or "aliases" not in data:
        raise ConfigError(f"{path}: expected a top-level 'aliases' mapping")
    entries = data["aliases"] or {}
    if not isinstance(entries, dict):
        raise ConfigError(
            f"{path}: 'aliases' must be a mapping, got {type(entries).__name__}"
        )

    resolved = _resolve_aliases(
        entries, GIT_VERSION_ALIASES if base is None else base, path
    )
    logger.verbose("CONFIG", f"Loaded {len(resolved)} alias(es) from {path}")
    return resolved


def build_alias_table(
    paths: Iterable[Path] = (),
    *,
    env: Mapping[str, str] | None = None,
    logger: Logger | None = None,
) -> AliasTable:
    """Build an AliasTable from the seed table plus alias files.

    Args:
        paths: Alias files, applied in order.
        env: Environment to read GITVERCMP_ALIASES from. Defaults to
            os.environ.
        logger: Logger for progress output. Defaults to the global logger.

    Returns:
        A fresh AliasTable with an empty cache.

    Raises:
        ConfigError: If any alias file cannot be loaded.
    """
    logger = logger or get_global_logger()
    env = os.environ if env is None else env

    files = [Path(p) for p in paths]
    env_path = env.get(ALIASES_ENV_VAR)
    if env_path:
        logger.verbose("CONFIG", f"{ALIASES_ENV_VAR}={env_path}")
        files.append(Path(env_path))

    merged: dict[str, str] = dict(GIT_VERSION_ALIASES)
    for path in files:
        loaded = load_alias_file(path, base=merged, logger=logger)
        for raw, key in loaded.items():
            if raw in GIT_VERSION_ALIASES and GIT_VERSION_ALIASES[raw] != key:
                logger.warning(
                    "CONFIG",
                    f"{path}: {raw!r} overrides built-in alias "
                    f"{GIT_VERSION_ALIASES[raw]} with {key}",
                )
        merged.update(loaded)

    return AliasTable(merged)

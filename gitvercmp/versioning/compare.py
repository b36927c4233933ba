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

"""Git-aware comparison operators.

Every operation normalizes both operands through the comparator's
AliasTable (alias, then memoized key, then a fresh computation) and compares
the two canonical keys as plain strings.

Example:
    Module-level functions use a shared default comparator:
        ```python
        from gitvercmp.versioning.compare import cmp_git, ge_git

        ge_git("2.43.0", "1.7.10")  # True
        sorted(versions, key=cmp_to_key(cmp_git))
        ```

    An isolated comparator owns its own cache:
        ```python
        comparator = GitVersionComparator(AliasTable())
        comparator.eq("0.99.9l", "1.0rc4")  # True
        ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import total_ordering
import operator

from gitvercmp.logging import Logger, get_global_logger

from .aliases import AliasTable
from .normalize import normalize


class GitVersionComparator:
    """Compare Git version strings with a shared, memoizing AliasTable.

    Attributes:
        aliases: The AliasTable consulted and filled by normalize().
    """

    def __init__(
        self, aliases: AliasTable | None = None, logger: Logger | None = None
    ) -> None:
        self.aliases = aliases if aliases is not None else AliasTable()
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger or get_global_logger()

    def _compute(self, raw: str) -> str:
        key = normalize(raw, self.aliases)
        self.logger.debug("NORMALIZE", f"{raw!r} -> {key}")
        return key

    def normalize(self, raw: str) -> str:
        """Return the canonical key for `raw`, memoized per raw string."""
        if not isinstance(raw, str):
            raise TypeError(f"version must be a string, not {type(raw).__name__}")
        return self.aliases.get_or_compute(raw, self._compute)

    sort_key = normalize

    def _relate(self, a: str, b: str, op: Callable[[str, str], bool]) -> bool:
        return op(self.normalize(a), self.normalize(b))

    def cmp(self, a: str, b: str) -> int:
        """Three-way comparison: -1 if a < b, 0 if equal, 1 if a > b."""
        ka, kb = self.normalize(a), self.normalize(b)
        return (ka > kb) - (ka < kb)

    def lt(self, a: str, b: str) -> bool:
        return self._relate(a, b, operator.lt)

    def gt(self, a: str, b: str) -> bool:
        return self._relate(a, b, operator.gt)

    def le(self, a: str, b: str) -> bool:
        return self._relate(a, b, operator.le)

    def ge(self, a: str, b: str) -> bool:
        return self._relate(a, b, operator.ge)

    def eq(self, a: str, b: str) -> bool:
        return self._relate(a, b, operator.eq)

    def ne(self, a: str, b: str) -> bool:
        return self._relate(a, b, operator.ne)

    def sorted(self, versions: Iterable[str], reverse: bool = False) -> list[str]:
        """Sort version strings oldest first (stable for equal keys)."""
        return sorted(versions, key=self.normalize, reverse=reverse)

    def max(self, versions: Iterable[str]) -> str:
        return max(versions, key=self.normalize)

    def min(self, versions: Iterable[str]) -> str:
        return min(versions, key=self.normalize)


# Named the way `operator` names them; used by the CLI `test` command
OPERATORS: dict[str, Callable[[str, str], bool]] = {
    "lt": operator.lt,
    "gt": operator.gt,
    "le": operator.le,
    "ge": operator.ge,
    "eq": operator.eq,
    "ne": operator.ne,
}


def relate(
    a: str, op_name: str, b: str, comparator: GitVersionComparator | None = None
) -> bool:
    """Apply a relational operator by name ("lt", "ge", ...).

    Raises:
        ValueError: If `op_name` is not one of OPERATORS.
    """
    try:
        op = OPERATORS[op_name]
    except KeyError:
        raise ValueError(
            f"unknown operator {op_name!r}; expected one of {', '.join(OPERATORS)}"
        ) from None
    return (comparator or _default_comparator)._relate(a, b, op)


_default_comparator = GitVersionComparator()


def get_default_comparator() -> GitVersionComparator:
    """Return the comparator behind the module-level *_git functions."""
    return _default_comparator


def set_default_comparator(comparator: GitVersionComparator) -> None:
    """Replace the comparator behind the module-level *_git functions."""
    global _default_comparator
    _default_comparator = comparator


def normalize_git(v: str) -> str:
    return _default_comparator.normalize(v)


def cmp_git(v1: str, v2: str) -> int:
    """A Git-aware version of `cmp`, for use with functools.cmp_to_key."""
    return _default_comparator.cmp(v1, v2)


def lt_git(v1: str, v2: str) -> bool:
    return _default_comparator.lt(v1, v2)


def gt_git(v1: str, v2: str) -> bool:
    return _default_comparator.gt(v1, v2)


def le_git(v1: str, v2: str) -> bool:
    return _default_comparator.le(v1, v2)


def ge_git(v1: str, v2: str) -> bool:
    return _default_comparator.ge(v1, v2)


def eq_git(v1: str, v2: str) -> bool:
    return _default_comparator.eq(v1, v2)


def ne_git(v1: str, v2: str) -> bool:
    return _default_comparator.ne(v1, v2)


@total_ordering
@dataclass(frozen=True, eq=False)
class GitVersion:
    """A Git version string paired with its canonical key.

    Equality, hashing and ordering use the key only, so
    `GitVersion.parse("1.0.0a") == GitVersion.parse("1.0.1")`.

    Attributes:
        raw: Version string as supplied (e.g., "git version 2.43.0").
        key: Canonical key (e.g., "002.043.000.000.000.000").
    """

    raw: str
    key: str = field(repr=False)

    @classmethod
    def parse(
        cls, raw: str, comparator: GitVersionComparator | None = None
    ) -> GitVersion:
        return cls(raw, (comparator or _default_comparator).normalize(raw))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GitVersion):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GitVersion):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.raw

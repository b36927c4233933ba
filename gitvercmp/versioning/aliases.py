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

"""Known irregular Git versions and the memoizing key store.

A few Git versions have two tags, or non-standard numbering. The left-hand
side of GIT_VERSION_ALIASES is what `git --version` reported; the right-hand
side is the canonical key it compares as. Before 1.0 the lettered releases
count up in the maintenance field, and the `1.0.rcN` spellings share the key
of the lettered release that carries the same tree.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from threading import Lock

GIT_VERSION_ALIASES: dict[str, str] = {
    "0.99.7a": "000.099.007.001.000.000",
    "0.99.7b": "000.099.007.002.000.000",
    "0.99.7c": "000.099.007.003.000.000",
    "0.99.7d": "000.099.007.004.000.000",
    "0.99.8a": "000.099.008.001.000.000",
    "0.99.8b": "000.099.008.002.000.000",
    "0.99.8c": "000.099.008.003.000.000",
    "0.99.8d": "000.099.008.004.000.000",
    "0.99.8e": "000.099.008.005.000.000",
    "0.99.8f": "000.099.008.006.000.000",
    "0.99.8g": "000.099.008.007.000.000",
    "0.99.9a": "000.099.009.001.000.000",
    "0.99.9b": "000.099.009.002.000.000",
    "0.99.9c": "000.099.009.003.000.000",
    "0.99.9d": "000.099.009.004.000.000",
    "0.99.9e": "000.099.009.005.000.000",
    "0.99.9f": "000.099.009.006.000.000",
    "0.99.9g": "000.099.009.007.000.000",
    "0.99.9h": "000.099.009.008.000.000",  # 1.0.rc1
    "1.0.rc1": "000.099.009.008.000.000",
    "0.99.9i": "000.099.009.009.000.000",  # 1.0.rc2
    "1.0.rc2": "000.099.009.009.000.000",
    "0.99.9j": "000.099.009.010.000.000",  # 1.0.rc3
    "1.0.rc3": "000.099.009.010.000.000",
    "0.99.9k": "000.099.009.011.000.000",
    "0.99.9l": "000.099.009.012.000.000",  # 1.0.rc4
    "1.0.rc4": "000.099.009.012.000.000",
    "0.99.9m": "000.099.009.013.000.000",  # 1.0.rc5
    "1.0.rc5": "000.099.009.013.000.000",
    "0.99.9n": "000.099.009.014.000.000",  # 1.0.rc6
    "1.0.rc6": "000.099.009.014.000.000",
    "1.0.0a": "001.000.001.000.000.000",  # 1.0.1
    "1.0.0b": "001.000.002.000.000.000",  # 1.0.2
}


class AliasTable:
    """Alias lookups plus a process-lifetime cache of computed keys.

    Two layers share one lookup path:

    - aliases: the seeded GIT_VERSION_ALIASES plus anything added with
      add_aliases(). The normalizer consults only this layer, with the
      cleaned-up version string.
    - cache: raw strings (as given by the caller) mapped to the key
      computed for them. Entries are never evicted.

    All access to the underlying dicts is serialized with a lock, so one
    table can be shared between threads. get_or_compute() calls `compute`
    outside the lock; two threads racing on the same raw string both
    compute the same key and the second write is a no-op.

    Example:
        ```python
        table = AliasTable()
        table.known_alias("0.99.9h")  # '000.099.009.008.000.000'
        table.get_or_compute("2.43.0", normalize)
        "2.43.0" in table  # True
        ```
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._lock = Lock()
        self._aliases: dict[str, str] = dict(GIT_VERSION_ALIASES)
        if aliases:
            self._aliases.update(aliases)
        self._cache: dict[str, str] = {}

    def known_alias(self, version: str) -> str | None:
        """Return the alias key for a cleaned-up version, if there is one."""
        with self._lock:
            return self._aliases.get(version)

    def lookup(self, raw: str) -> str | None:
        """Return the alias or memoized key for `raw`, if there is one."""
        with self._lock:
            key = self._aliases.get(raw)
            if key is None:
                key = self._cache.get(raw)
            return key

    def remember(self, raw: str, key: str) -> None:
        """Memoize the key computed for `raw`."""
        with self._lock:
            self._cache.setdefault(raw, key)

    def get_or_compute(self, raw: str, compute: Callable[[str], str]) -> str:
        """Return the known key for `raw`, computing and caching it if needed.

        Args:
            raw: Version string exactly as the caller supplied it.
            compute: Function mapping the raw string to its canonical key.

        Returns:
            The canonical key.
        """
        key = self.lookup(raw)
        if key is None:
            key = compute(raw)
            self.remember(raw, key)
        return key

    def add_aliases(self, aliases: Mapping[str, str]) -> None:
        """Add or replace alias entries.

        Call this before the table is used for comparisons: keys already
        memoized are not recomputed.
        """
        with self._lock:
            self._aliases.update(aliases)

    def aliases(self) -> dict[str, str]:
        """Return a snapshot of the alias layer."""
        with self._lock:
            return dict(self._aliases)

    @property
    def cached_count(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, raw: object) -> bool:
        with self._lock:
            return raw in self._aliases or raw in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._aliases) + len(self._cache)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._aliases) + list(self._cache))

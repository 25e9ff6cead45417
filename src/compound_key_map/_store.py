"""
Insertion-ordered entry storage for CompoundKeyMap.

KeySetStore keeps entries in a private dict keyed by the stored key set
object. Lookups never go through the dict's hashing: they scan the stored
keys and compare each against the requested key set with keys.equivalent(), so the
store only ever relies on set equality between key sets.

Thread safety: NOT thread-safe.
"""

from __future__ import annotations

import typing as _typing

import compound_key_map._keys as _keys
import compound_key_map._types as _types


class KeySetStore:
    """
    Ordered (key set -> value) storage with equivalence lookup.

    Callers locate an entry with find(), which returns the stored key set
    object. All other per-entry operations take that stored object, so an
    update never swaps the stored key for the key set used to find it.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[_types.KeySet, _typing.Any] = {}

    def find(self, keyset: _types.KeySet) -> _types.KeySet | None:
        """
        Scan for a stored key set equivalent to keyset.

        Returns:
            The stored key set object, or None if no entry matches.
        """
        for stored in self._entries:
            if _keys.equivalent(keyset, stored):
                return stored
        return None

    def insert(self, keyset: _types.KeySet, value: _typing.Any) -> None:
        """Append a new entry. The caller guarantees no equivalent key is stored."""
        self._entries[keyset] = value

    def replace(self, stored: _types.KeySet, value: _typing.Any) -> None:
        """Overwrite the value of an existing entry, keeping its position."""
        self._entries[stored] = value

    def remove(self, stored: _types.KeySet) -> None:
        del self._entries[stored]

    def value_of(self, stored: _types.KeySet) -> _typing.Any:
        return self._entries[stored]

    def clear(self) -> None:
        self._entries.clear()

    def items(self) -> _typing.ItemsView[_types.KeySet, _typing.Any]:
        return self._entries.items()

    def __iter__(self) -> _typing.Iterator[_types.KeySet]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

"""
CompoundKeyMap: a mapping whose keys are unordered collections of elements.

Keys may be given as sequences or sets; ["a", "b"], ("b", "a") and
{"a", "b"} all address the same entry. Every key is normalized to a
frozenset and matched against stored keys by set equivalence.

Write semantics:
- Inserting a new key appends an entry (insertion order is iteration order)
- Setting an equivalent key updates the value in place: the entry keeps
  its position and its originally stored key set object

Iteration semantics:
- iter(map) yields (key set, value) entries, like entries()
- keys(), values() and entries() return a fresh generator per call

Thread safety: NOT thread-safe. Mutating a map while iterating over it is
undefined (the underlying dict raises RuntimeError on size change).
"""

from __future__ import annotations

import collections.abc as _abc
import functools as _functools
import logging as _logging
import reprlib as _reprlib
import typing as _typing

import compound_key_map._keys as _keys
import compound_key_map._store as _store
import compound_key_map._types as _ktypes
import compound_key_map.config as config

_logger = _logging.getLogger(__name__)


# Sentinel for an omitted for_each() receiver (None is a valid receiver)
class _UnsetType:
    """Sentinel type marking an omitted argument."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<UNSET>"


_UNSET = _UnsetType()


class CompoundKeyMap(_typing.Generic[_ktypes.K, _ktypes.V]):
    """
    A mapping keyed by unordered collections of hashable elements.

    Example:
        >>> m = CompoundKeyMap([(["foo", "bar"], "baz")])
        >>> m.get({"bar", "foo"})
        'baz'
        >>> m.set(("bar", "foo"), "qux").get(["foo", "bar"])
        'qux'
        >>> len(m)
        1

    Args:
        initial: Iterable of (compound key, value) pairs, loaded in order.
            Equivalent keys collapse into one entry holding the last value.
        settings: Settings to use. None = config.get_settings().

    Raises:
        InvalidKeyError: If any key in initial is not a valid compound key.
    """

    __slots__ = ("_store", "_settings")

    # Mutable container: equality is by content
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        initial: _abc.Iterable[tuple[_ktypes.CompoundKey, _ktypes.V]] | None = None,
        *,
        settings: config.Settings | None = None,
    ) -> None:
        self._store = _store.KeySetStore()
        self._settings = settings if settings is not None else config.get_settings()
        if initial is not None:
            self.update(initial)

    @property
    def settings(self) -> config.Settings:
        """Settings this map was created with."""
        return self._settings

    # =========================================================================
    # Core operations
    # =========================================================================

    def set(
        self,
        keys: _ktypes.CompoundKey,
        value: _ktypes.V,
    ) -> CompoundKeyMap[_ktypes.K, _ktypes.V]:
        """
        Set the value for a compound key.

        If an equivalent key is already stored, its value is replaced in
        place; the stored key set and its position are kept.

        Args:
            keys: The compound key.
            value: The value to store.

        Returns:
            The map itself, for chaining.
        """
        keyset = _keys.normalize(keys)
        stored = self._store.find(keyset)
        if stored is None:
            self._store.insert(keyset, value)
            self._trace("insert %s", keyset)
        else:
            self._store.replace(stored, value)
            self._trace("update %s", stored)
        return self

    def get(
        self,
        keys: _ktypes.CompoundKey,
        default: _typing.Any = None,
    ) -> _typing.Any:
        """
        Get the value for a compound key.

        Args:
            keys: The compound key to look up.
            default: Returned when no equivalent key is stored.

        Returns:
            The stored value, or default if not found.
        """
        stored = self._store.find(_keys.normalize(keys))
        if stored is None:
            return default
        return self._store.value_of(stored)

    def has(self, keys: _ktypes.CompoundKey) -> bool:
        """Check if an equivalent compound key is stored."""
        return self._store.find(_keys.normalize(keys)) is not None

    def delete(self, keys: _ktypes.CompoundKey) -> bool:
        """
        Delete the entry for a compound key.

        Returns:
            True if an entry was removed, False if none matched.
        """
        stored = self._store.find(_keys.normalize(keys))
        if stored is None:
            return False
        self._store.remove(stored)
        self._trace("delete %s", stored)
        return True

    def clear(self) -> None:
        """Remove all entries."""
        count = len(self._store)
        self._store.clear()
        self._trace("clear (%s entries)", count)

    @property
    def size(self) -> int:
        """Number of entries."""
        return len(self._store)

    # =========================================================================
    # Iteration
    # =========================================================================

    def keys(self) -> _typing.Iterator[_ktypes.KeySet]:
        """Yield stored key sets in insertion order."""
        yield from self._store

    def values(self) -> _typing.Iterator[_ktypes.V]:
        """Yield values in insertion order."""
        for _, value in self._store.items():
            yield value

    def entries(self) -> _typing.Iterator[_ktypes.Entry]:
        """Yield (key set, value) pairs in insertion order."""
        yield from self._store.items()

    def items(self) -> _typing.Iterator[_ktypes.Entry]:
        """Alias of entries()."""
        return self.entries()

    def for_each(
        self,
        callback: _abc.Callable[..., _typing.Any],
        this_arg: _typing.Any = _UNSET,
    ) -> None:
        """
        Call callback(value, key, map) for every entry in insertion order.

        Args:
            callback: Called once per entry with the value, the stored key
                set and this map.
            this_arg: If given, callback is bound to it as its receiver and
                called as callback(this_arg, value, key, map).
        """
        if this_arg is not _UNSET:
            callback = _functools.partial(callback, this_arg)
        for key, value in self.entries():
            callback(value, key, self)

    def __iter__(self) -> _typing.Iterator[_ktypes.Entry]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._store)

    # =========================================================================
    # Mapping protocol
    # =========================================================================

    def __getitem__(self, keys: _ktypes.CompoundKey) -> _ktypes.V:
        """Get a value, raising KeyError if no equivalent key is stored."""
        stored = self._store.find(_keys.normalize(keys))
        if stored is None:
            raise KeyError(keys)
        return self._store.value_of(stored)

    def __setitem__(self, keys: _ktypes.CompoundKey, value: _ktypes.V) -> None:
        self.set(keys, value)

    def __delitem__(self, keys: _ktypes.CompoundKey) -> None:
        """Delete an entry, raising KeyError if no equivalent key is stored."""
        if not self.delete(keys):
            raise KeyError(keys)

    def __contains__(self, keys: object) -> bool:
        """Membership test. Objects that are not compound keys are never contained."""
        try:
            return self.has(keys)
        except _keys.InvalidKeyError:
            return False

    def update(
        self,
        other: _abc.Iterable[tuple[_ktypes.CompoundKey, _ktypes.V]],
    ) -> None:
        """
        Set every (compound key, value) pair from other, in order.

        Later pairs win over earlier equivalent keys.
        """
        for keys, value in other:
            self.set(keys, value)

    def copy(self) -> CompoundKeyMap[_ktypes.K, _ktypes.V]:
        """Shallow copy with the same entries, order and stored key sets."""
        return type(self)(self.entries(), settings=self._settings)

    def __eq__(self, other: object) -> bool:
        """Equal to another CompoundKeyMap holding equivalent keys with equal values."""
        if not isinstance(other, CompoundKeyMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in self.entries():
            stored = other._store.find(key)
            if stored is None or other._store.value_of(stored) != value:
                return False
        return True

    @_reprlib.recursive_repr()
    def __repr__(self) -> str:
        limit = self._settings.display.max_repr_entries
        parts = [
            f"{key!r}: {value!r}"
            for _, (key, value) in zip(range(limit), self.entries())
        ]
        if len(self) > limit:
            parts.append("...")
        return f"{type(self).__name__}({{{', '.join(parts)}}})"

    # =========================================================================
    # Helpers
    # =========================================================================

    def _trace(self, message: str, *args: _typing.Any) -> None:
        """Log a mutation at DEBUG when operation tracing is enabled."""
        if self._settings.logging.trace_operations:
            _logger.debug(message, *args)

"""
Key normalization and matching for CompoundKeyMap.

Compound keys may arrive as ordered sequences or unordered sets. Both are
normalized to a frozenset before any lookup, and two normalized keys match
when they hold the same elements.

Example:
    >>> normalize(["b", "a", "a"])
    frozenset({'a', 'b'})
    >>> equivalent(normalize(["a", "b"]), normalize({"b", "a"}))
    True
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

_logger = _logging.getLogger(__name__)

# Iterables that are never treated as a collection of key elements
_SCALAR_ITERABLES = (str, bytes, bytearray)


class InvalidKeyError(TypeError):
    """Raised when a key is neither a sequence nor a set of hashable elements."""

    def __init__(self, key: object, reason: str) -> None:
        self.key = key
        super().__init__(
            f"Invalid compound key {key!r} ({type(key).__name__}): {reason}"
        )


def normalize(keys: _typing.Any) -> frozenset[_typing.Any]:
    """
    Convert a compound key to its canonical frozenset form.

    - frozenset: returned unchanged (same object)
    - other sets: copied into a frozenset so later mutation of the
      caller's set cannot change a stored key
    - sequences and other iterables: consumed into a frozenset,
      duplicates collapse

    Args:
        keys: The compound key to normalize.

    Returns:
        The canonical key set.

    Raises:
        InvalidKeyError: If keys is a string, a mapping, not iterable, or
            contains unhashable elements.
    """
    if isinstance(keys, frozenset):
        return keys

    if isinstance(keys, _SCALAR_ITERABLES):
        _reject(keys, "strings are not compound keys; wrap them in a list or set")
    if isinstance(keys, _abc.Mapping):
        _reject(keys, "mappings are not compound keys")
    if not isinstance(keys, _abc.Iterable):
        _reject(keys, "expected a sequence or set of elements")

    try:
        return frozenset(keys)
    except TypeError as e:
        raise InvalidKeyError(keys, f"elements must be hashable ({e})") from e


def _reject(keys: object, reason: str) -> _typing.NoReturn:
    _logger.debug("Rejecting compound key of type %s: %s", type(keys).__name__, reason)
    raise InvalidKeyError(keys, reason)


def equivalent(a: _abc.Set[_typing.Any], b: _abc.Set[_typing.Any]) -> bool:
    """
    Check whether two canonical key sets hold the same elements.

    Neither set is modified. The check is symmetric, reflexive and
    transitive, so it partitions key sets into equivalence classes.
    """
    if a is b:
        return True
    return len(a) == len(b) and all(element in b for element in a)

"""
Type aliases for CompoundKeyMap.

This module provides type aliases used throughout the package:
- CompoundKey: Any accepted key representation (sequence or set of elements)
- KeySet: The canonical, normalized form of a compound key
- Entry: A stored (KeySet, value) pair
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

K = _typing.TypeVar("K", bound=_abc.Hashable)
V = _typing.TypeVar("V")

# Accepted key input
# Example: ["a", "b"], ("b", "a"), {"a", "b"} and frozenset({"a", "b"}) are all
# the same compound key
CompoundKey: _typing.TypeAlias = _abc.Sequence[K] | _abc.Set[K] | _abc.Iterable[K]

# Canonical stored key
KeySet: _typing.TypeAlias = frozenset[K]

# Stored pair, as yielded by entries()
Entry: _typing.TypeAlias = tuple[frozenset[K], V]

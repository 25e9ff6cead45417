"""
compound_key_map: a mapping keyed by unordered collections of elements.

Keys are normalized to frozensets, so order and representation do not
matter: a list, a tuple and a set holding the same elements address the
same entry.

Example:
    >>> from compound_key_map import CompoundKeyMap
    >>> m = CompoundKeyMap([(["foo", "bar"], "baz")])
    >>> m.get({"bar", "foo"})
    'baz'
    >>> m.has(("bar", "foo"))
    True
"""

import compound_key_map.config as config
from compound_key_map._core import CompoundKeyMap
from compound_key_map._keys import InvalidKeyError, equivalent, normalize

__all__ = [
    "CompoundKeyMap",
    "InvalidKeyError",
    "config",
    "equivalent",
    "normalize",
]

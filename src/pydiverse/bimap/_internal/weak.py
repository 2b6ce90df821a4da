# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import weakref
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydiverse.bimap._internal.bimap import iter_pairs
from pydiverse.bimap._internal.unique import ensure_can_set

K = TypeVar("K")
V = TypeVar("V")


class WeakBiMap(Generic[K, V]):
    """
    A bidirectional map that does not keep its keys and values alive.

    An association stays in the map as long as both its key and its value are
    referenced from somewhere else. When one of them gets garbage collected, the
    association disappears from both views; when exactly that happens is up to the
    garbage collector. Keys and values must support weak references, so ints,
    strings, tuples and ``None`` are rejected with a `TypeError`.

    Like :class:`weakref.WeakKeyDictionary`, lookups use ``__hash__`` and ``__eq__``
    of the objects, which is identity for classes that do not override them. There
    is no size, iteration or ``clear``.
    """

    __slots__ = ["_refs", "_inverse", "__weakref__"]

    # there is no sequence protocol behind __getitem__
    __iter__ = None

    def __init__(self, entries: Mapping[K, V] | Iterable[tuple[K, V]] | None = None):
        # The inverse is only allocated here, it never runs __init__ itself.
        inverse = type(self).__new__(type(self))
        self._link(inverse)
        inverse._link(self)

        for key, value in iter_pairs(entries):
            self.set(key, value)

    def _link(self, inverse: WeakBiMap):
        self._refs: weakref.WeakKeyDictionary[K, weakref.ref[V]] = (
            weakref.WeakKeyDictionary()
        )
        self._inverse = inverse

    def _deref(self, key: K) -> V | None:
        if key not in self._refs:
            return None

        value = self._refs[key]()
        if value is None:
            # the key outlived its value
            del self._refs[key]
        return value

    def inverse(self) -> WeakBiMap[V, K]:
        return self._inverse

    def set(self, key: K, value: V, *, force: bool = False) -> WeakBiMap[K, V]:
        """
        Binds `key` to `value`. See :meth:`BiMap.set` for the meaning of `force`.
        """
        # fails for objects without weak reference support, before anything changes
        key_ref, value_ref = weakref.ref(key), weakref.ref(value)
        ensure_can_set(self, key, value, force=force)

        old_value = self._deref(key)
        if old_value is not None:
            self._inverse._refs.pop(old_value, None)

        self._inverse._refs[value] = key_ref
        self._refs[key] = value_ref
        return self

    def get(self, key: K, default: Any = None) -> V | Any:
        value = self._deref(key)
        return default if value is None else value

    def has(self, key: K) -> bool:
        return self._deref(key) is not None

    def binds(self, key: K, value: V) -> bool:
        bound = self._deref(key)
        return bound is not None and (bound is value or bound == value)

    def delete(self, key: K) -> bool:
        value = self._deref(key)
        if value is None:
            return False

        self._inverse._refs.pop(value, None)
        del self._refs[key]
        return True

    def __contains__(self, key) -> bool:
        return self.has(key)

    def __getitem__(self, key: K) -> V:
        value = self._deref(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise KeyError(key)

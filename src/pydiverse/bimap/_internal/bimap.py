# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

from collections.abc import (
    Callable,
    Hashable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from operator import attrgetter
from typing import Any, Generic, TypeVar

import pandas as pd
import polars as pl

from pydiverse.bimap._internal import errors
from pydiverse.bimap._internal.pipe.pipeable import pipe
from pydiverse.bimap._internal.same_value import SameValueDict
from pydiverse.bimap._internal.unique import ensure_can_set

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class Entry:
    """
    A key-value pair shared by both views of a `BiMap`. One view reads `left` as key
    and `right` as value, its inverse reads them the other way round.
    """

    __slots__ = ["left", "right"]

    def __init__(self):
        self.left = None
        self.right = None

    def __repr__(self):
        return f"Entry({self.left!r}, {self.right!r})"


def iter_pairs(entries: Mapping | Iterable | None) -> Iterable[tuple[Any, Any]]:
    if entries is None:
        return ()
    if isinstance(entries, Mapping):
        return entries.items()
    return entries


class BiMap(MutableMapping[K, V], Generic[K, V]):
    """
    A bidirectional map: both its keys and its values are unique.

    The inverse view returned by :meth:`inverse` is another `BiMap`, backed by the
    same entries with keys and values swapped. Both views share one insertion order.
    Keys and values are compared like dict keys, except that all NaNs are the same
    and ``-0.0`` differs from ``0.0``. Only python floats get this treatment: NaNs of
    other types such as ``numpy.float32("nan")`` keep their own equality. As in any
    dict, ``1``, ``1.0`` and ``True`` are one key, so ``BiMap({"yes": True, "one": 1})``
    raises a :class:`DuplicateValueError`.
    """

    __slots__ = [
        "_entries",
        "_inverse",
        "_order",
        "_key_slot",
        "_value_slot",
        "__weakref__",
    ]

    def __init__(self, entries: Mapping[K, V] | Iterable[tuple[K, V]] | None = None):
        """
        Creates a new bidirectional map.

        :param entries:
            A mapping or an iterable of key-value pairs. The pairs are inserted in
            order with :meth:`set`, so a pair whose value is already bound to another
            key raises a :class:`DuplicateValueError`.

        Examples
        --------
        >>> m = BiMap({"a": 1, "b": 2})
        >>> m.inverse()[2]
        'b'
        >>> BiMap([("a", 1), ("b", 1)])
        Traceback (most recent call last):
        ...
        DuplicateValueError: value `1` is already bound to key `'a'`
        hint: ...
        """
        # The inverse is only allocated here, it never runs __init__ itself.
        inverse = type(self).__new__(type(self))
        order: dict[Entry, None] = {}
        self._link(inverse, order, "left", "right")
        inverse._link(self, order, "right", "left")

        for key, value in iter_pairs(entries):
            self.set(key, value)

    def _link(self, inverse: BiMap, order: dict[Entry, None], key_slot, value_slot):
        self._entries: SameValueDict[Any, Entry] = SameValueDict()
        self._inverse = inverse
        # Dicts keep insertion order, entries hash by identity. Only the shared order
        # knows where an entry that got a new value or key was first inserted.
        self._order = order
        self._key_slot = key_slot
        self._value_slot = value_slot

    @classmethod
    def from_frame(
        cls,
        frame: pl.DataFrame | pl.LazyFrame | pd.DataFrame,
        key: str,
        value: str,
    ) -> BiMap:
        """
        Creates a bidirectional map from two columns of a data frame. The rows are
        inserted in order.
        """
        errors.check_arg_type(
            pl.DataFrame | pl.LazyFrame | pd.DataFrame,
            "BiMap.from_frame",
            "frame",
            frame,
        )
        errors.check_arg_type(str, "BiMap.from_frame", "key", key)
        errors.check_arg_type(str, "BiMap.from_frame", "value", value)

        if isinstance(frame, pd.DataFrame):
            return cls(zip(frame[key].tolist(), frame[value].tolist(), strict=True))

        if isinstance(frame, pl.LazyFrame):
            frame = frame.select(key, value).collect()
        return cls(
            zip(
                frame.get_column(key).to_list(),
                frame.get_column(value).to_list(),
                strict=True,
            )
        )

    def inverse(self) -> BiMap[V, K]:
        return self._inverse

    def set(self, key: K, value: V, *, force: bool = False) -> BiMap[K, V]:
        """
        Binds `key` to `value`.

        :param force:
            If `value` is already bound to another key, the call fails unless `force`
            is set. With `force`, the entry holding `value` is moved to `key` in place
            if `key` is unbound. If `key` is bound too, both conflicting entries are
            removed and a new entry is appended.

        :return:
            The map itself.

        :raises DuplicateValueError:
            If `value` belongs to another key and `force` is not set. The map is not
            modified in that case.
        """
        ensure_can_set(self, key, value, force=force)

        inverse_entries = self._inverse._entries
        entry = self._entries.get(key)
        if entry is None:
            entry = Entry()
            setattr(entry, self._key_slot, key)
            self._order[entry] = None
            self._entries[key] = entry
        elif inverse_entries.get(value) is entry:
            return self
        else:
            del inverse_entries[getattr(entry, self._value_slot)]

        setattr(entry, self._value_slot, value)
        inverse_entries[value] = entry
        return self

    def get(self, key: K, default: Any = None) -> V | Any:
        entry = self._entries.get(key)
        if entry is None:
            return default
        return getattr(entry, self._value_slot)

    def has(self, key: K) -> bool:
        return key in self._entries

    def binds(self, key: K, value: V) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry is self._inverse._entries.get(value)

    def delete(self, key: K) -> bool:
        """
        Removes the entry of `key`. Returns whether there was one.
        """
        entry = self._entries.get(key)
        if entry is None:
            return False

        del self._order[entry]
        del self._inverse._entries[getattr(entry, self._value_slot)]
        del self._entries[key]
        return True

    def clear(self) -> None:
        self._order.clear()
        self._inverse._entries.clear()
        self._entries.clear()

    @property
    def size(self) -> int:
        return len(self._entries)

    def for_each(self, fn: Callable[[V, K, BiMap[K, V]], Any]) -> None:
        """
        Calls ``fn(value, key, self)`` for every entry in insertion order.
        """
        for key, value in self.items():
            fn(value, key, self)

    def copy(self) -> BiMap[K, V]:
        return type(self)(self.items())

    def keys(self) -> BiMapKeysView[K]:
        return BiMapKeysView(self)

    def values(self) -> BiMapValuesView[V]:
        return BiMapValuesView(self)

    def items(self) -> BiMapItemsView[K, V]:
        return BiMapItemsView(self)

    def _iter_slots(self, *slots: str) -> Iterator:
        # The entries are copied right away, so the map may change during iteration.
        return map(attrgetter(*slots), list(self._order))

    def __iter__(self) -> Iterator[K]:
        return self._iter_slots(self._key_slot)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __getitem__(self, key: K) -> V:
        entry = self._entries.get(key)
        if entry is None:
            raise KeyError(key)
        return getattr(entry, self._value_slot)

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        try:
            return all(self.binds(key, value) for key, value in other.items())
        except TypeError:
            # unhashable keys or values are never bound
            return False

    def __copy__(self) -> BiMap[K, V]:
        return self.copy()

    def __reduce__(self):
        return type(self), (list(self.items()),)

    def __rshift__(self, rhs):
        """
        The pipe operator for applying verbs.
        """
        return pipe(self, rhs)

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{items}}})"


class BiMapKeysView(KeysView):
    __slots__ = ()

    def __iter__(self):
        return iter(self._mapping)


class BiMapValuesView(ValuesView):
    __slots__ = ()

    def __contains__(self, value) -> bool:
        try:
            return self._mapping.inverse().has(value)
        except TypeError:
            return False

    def __iter__(self):
        return self._mapping._iter_slots(self._mapping._value_slot)


class BiMapItemsView(ItemsView):
    __slots__ = ()

    def __contains__(self, item) -> bool:
        key, value = item
        try:
            return self._mapping.binds(key, value)
        except TypeError:
            return False

    def __iter__(self):
        mapping = self._mapping
        return mapping._iter_slots(mapping._key_slot, mapping._value_slot)

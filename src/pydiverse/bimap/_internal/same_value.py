from __future__ import annotations

import math
from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)
U = TypeVar("U")


class _Sentinel:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


NAN = _Sentinel("nan")
NEGATIVE_ZERO = _Sentinel("-0.0")


def same_value_key(obj):
    """
    Returns the object under which `obj` is stored in a :class:`SameValueDict`.

    Python dicts consider ``0.0 == -0.0`` and ``nan != nan``. For uniqueness of keys
    and values we want the opposite in both cases: every NaN is the same value and a
    negative zero is different from any other zero. All other objects are left to the
    usual ``__hash__`` / ``__eq__`` protocol.
    """
    if isinstance(obj, float):
        if obj != obj:
            return NAN
        if obj == 0.0 and math.copysign(1.0, obj) < 0:
            return NEGATIVE_ZERO
    return obj


class SameValueDict(Generic[T, U]):
    """
    A dict whose keys are compared with :func:`same_value_key` applied. Only the
    normalized keys are stored, so callers that need the original key objects have to
    keep them in the values.
    """

    __slots__ = ("mapping",)

    def __init__(self):
        self.mapping: dict = {}

    def get(self, key: T, default: U | None = None) -> U | None:
        return self.mapping.get(same_value_key(key), default)

    def pop(self, key: T, *default: U) -> U:
        return self.mapping.pop(same_value_key(key), *default)

    def clear(self):
        self.mapping.clear()

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, key) -> bool:
        return same_value_key(key) in self.mapping

    def __getitem__(self, key: T) -> U:
        return self.mapping[same_value_key(key)]

    def __setitem__(self, key: T, value: U):
        self.mapping[same_value_key(key)] = value

    def __delitem__(self, key: T):
        del self.mapping[same_value_key(key)]

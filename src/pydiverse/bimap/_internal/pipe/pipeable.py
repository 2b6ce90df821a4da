# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import wraps


class Pipeable:
    """
    Functions waiting for a bidirectional map. They are applied left to right, each
    one getting the result of the previous one.
    """

    __slots__ = ["calls"]

    def __init__(self, *calls: Callable):
        self.calls = calls

    def __rshift__(self, other) -> Pipeable:
        if isinstance(other, Pipeable):
            return Pipeable(*self.calls, *other.calls)
        if callable(other):
            return Pipeable(*self.calls, other)

        raise TypeError(
            f"cannot chain instance of type `{type(other).__name__}` in a pipe"
        )

    def __call__(self, obj):
        for call in self.calls:
            obj = call(obj)
        return obj


def verb(fn):
    """
    Decorator for creating verbs.

    A verb is a function taking a bidirectional map as its first argument. `@verb`
    enables calling it with the pipe `>>` syntax, leaving out the map.

    Examples
    --------
    >>> @verb
    ... def swapped(m: BiMap) -> dict:
    ...     return dict(m.inverse().items())
    >>> BiMap({"a": 1, "b": 2}) >> swapped()
    {1: 'a', 2: 'b'}
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        return Pipeable(lambda bimap: fn(bimap, *args, **kwargs))

    return wrapper


def pipe(obj, rhs):
    """
    Applies the right hand side of `obj >> rhs`.
    """

    if isinstance(rhs, Pipeable):
        return rhs(obj)
    if isinstance(rhs, Callable):
        num_params = len(inspect.signature(rhs).parameters)
        if num_params != 1:
            raise TypeError(
                "only functions with one parameter can be used in a pipe, got "
                f"function with {num_params} parameters."
            )
        return rhs(obj)

    raise TypeError(
        f"found instance of invalid type `{type(rhs).__name__}` in the pipe\n"
        "hint: You can use a verb or a Callable taking a single argument in a pipe. "
        "A Callable receives the current map."
    )

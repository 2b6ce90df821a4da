from __future__ import annotations

import typing
from typing import Any


class DuplicateValueError(ValueError):
    """
    Raised when setting a key-value pair whose value is already bound to another key
    and the caller did not pass ``force=True``. The map is left untouched.
    """

    def __init__(self, key: Any, value: Any, bound_key: Any):
        super().__init__(
            f"value `{value!r}` is already bound to key `{bound_key!r}`\n"
            f"hint: Pass `force=True` to bind `{value!r}` to `{key!r}` anyway. This "
            "removes the conflicting entries from the map."
        )
        self.key = key
        self.value = value
        self.bound_key = bound_key

    def __reduce__(self):
        return type(self), (self.key, self.value, self.bound_key)


# Our error message format: The first line is in lowercase letters, without a dot at
# the end. More detail is given in the following lines in normal english sentences.
# To give advice to the user, we write `hint: ...`.


def check_arg_type(
    expected_type: type,
    fn: str,
    param_name: str,
    arg: Any,
):
    if not isinstance(arg, expected_type):
        type_args = typing.get_args(expected_type)
        expected_type_str = (
            expected_type.__name__
            if not type_args
            else " | ".join(t.__name__ for t in type_args)
        )
        raise TypeError(
            f"argument for parameter `{param_name}` of `{fn}` must have type "
            f"`{expected_type_str}`, found `{type(arg).__name__}` instead"
        )

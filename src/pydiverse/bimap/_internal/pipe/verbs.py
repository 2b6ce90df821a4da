# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

from typing import Any, overload

import pandas as pd
import polars as pl

from pydiverse.bimap._internal import errors
from pydiverse.bimap._internal.bimap import BiMap
from pydiverse.bimap._internal.pipe.pipeable import Pipeable, verb
from pydiverse.bimap._internal.targets import (
    Dict,
    DictOfLists,
    ListOfDicts,
    Pandas,
    Polars,
    Target,
)

__all__ = ["export"]


@overload
def export(
    target: Target, *, names: tuple[str, str] = ("key", "value")
) -> Pipeable: ...


@verb
def export(
    bimap: BiMap,
    target: Target | type[Target],
    *,
    names: tuple[str, str] = ("key", "value"),
) -> Any:
    """Convert a bidirectional map to a data frame or plain python objects.

    :param target:
        One of ``Polars``, ``Pandas``, ``Dict``, ``DictOfLists`` or ``ListOfDicts``.
        For polars, one can specify whether a DataFrame or LazyFrame is returned via
        the ``lazy`` keyword parameter.

    :param names:
        The column names used for the keys and the values of the map.

    :return:
        The entries of the map in insertion order. Exporting the inverse view swaps
        the contents of the two columns.

    Examples
    --------
    >>> m = BiMap({"a": 1, "b": 2})
    >>> m >> export(Dict())
    {'a': 1, 'b': 2}
    >>> m.inverse() >> export(DictOfLists(), names=("id", "name"))
    {'id': [1, 2], 'name': ['a', 'b']}
    """

    if isinstance(target, type) and issubclass(target, Target):
        # the user may write a `Target` class without parentheses
        target = target()
    errors.check_arg_type(Target, "export", "target", target)
    errors.check_arg_type(tuple, "export", "names", names)
    if len(names) != 2:
        raise ValueError(
            f"argument for parameter `names` of `export` must contain exactly two "
            f"column names, found {len(names)}"
        )

    key_name, value_name = names
    pairs = list(bimap.items())
    keys = [key for key, _ in pairs]
    values = [value for _, value in pairs]

    if isinstance(target, Polars):
        df = pl.DataFrame({key_name: keys, value_name: values})
        return df.lazy() if target.lazy else df

    elif isinstance(target, Pandas):
        return pd.DataFrame({key_name: keys, value_name: values})

    elif isinstance(target, Dict):
        return dict(zip(keys, values, strict=True))

    elif isinstance(target, DictOfLists):
        return {key_name: keys, value_name: values}

    elif isinstance(target, ListOfDicts):
        return [
            {key_name: key, value_name: value}
            for key, value in zip(keys, values, strict=True)
        ]

    raise AssertionError

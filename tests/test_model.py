from __future__ import annotations

import pytest

from tests.util import ModelRun


class Obj:
    __slots__ = ["i", "__weakref__"]

    def __init__(self, i: int):
        self.i = i

    def __repr__(self):
        return f"Obj({self.i})"


def value_pool() -> list:
    return [
        0,
        -0.0,
        0.0,
        float("nan"),
        float("nan"),
        1,
        True,
        "1",
        "a",
        None,
        (1, 2),
        2.5,
        -1,
    ]


@pytest.mark.parametrize("seed", range(50))
def test_bimap(seed):
    ModelRun(value_pool(), seed=seed).run(200)


@pytest.mark.parametrize("seed", range(50))
def test_weak_bimap(seed):
    ModelRun([Obj(i) for i in range(6)], seed=seed, weak=True).run(200)


@pytest.mark.fuzz
@pytest.mark.parametrize("seed", range(1000, 1020))
def test_bimap_long(seed):
    ModelRun(value_pool(), seed=seed).run(10_000)

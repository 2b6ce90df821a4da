from __future__ import annotations

import pytest

from tests.test_model import Obj, value_pool
from tests.util import ModelRun

it = int(input("number of iterations: "))
commands = int(input("number of commands per iteration: "))
seed = int(input("seed: "))

failures = 0
for i in range(it):
    for weak in (False, True):
        pool = [Obj(j) for j in range(8)] if weak else value_pool()
        try:
            ModelRun(pool, seed=seed + i, weak=weak).run(commands)
        except pytest.fail.Exception as e:
            failures += 1
            print(f"seed {seed + i} (weak={weak}) failed:\n{e}\n")

print(f"{it} iterations, {failures} failures")

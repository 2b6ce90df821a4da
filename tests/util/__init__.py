# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from .model import ModelRun, SimpleBiMap, normalized

__all__ = [
    "ModelRun",
    "SimpleBiMap",
    "normalized",
]

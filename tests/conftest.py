# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
import logging

import pytest

from pydiverse.common.util.structlog import setup_logging

# Setup


def pytest_addoption(parser):
    parser.addoption(
        "--fuzz",
        action="store_true",
        default=False,
        help="run the long randomized model tests",
    )


def pytest_collection_modifyitems(config: pytest.Config, items):
    if not config.getoption("--fuzz"):
        skip = pytest.mark.skip(reason="--fuzz not selected")
        for item in items:
            if "fuzz" in item.keywords:
                item.add_marker(skip)


setup_logging(log_level=logging.INFO)

# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from ._internal.bimap import BiMap
from ._internal.pipe.pipeable import verb
from ._internal.pipe.verbs import export
from ._internal.weak import WeakBiMap
from .errors import *
from .errors import __all__ as __errors
from .targets import *
from .targets import __all__ as __targets
from .version import __version__

__all__ = ["__version__", "BiMap", "WeakBiMap", "verb", "export"] + __errors + __targets

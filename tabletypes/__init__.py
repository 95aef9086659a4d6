# -*- coding: utf-8 -*-

from .collections import (
    Table,
    OrderedSet,
)
from .environ import (
    Environ,
    environ,
)
from .exception import (
    InvalidArgument,
)
from .random import (
    RandomSource,
    default_source,
    set_default_source,
)
from . import operators
from . import logging


__version__ = "0.1.0"


if environ.LOG_LEVEL:
    logging.setdefault(__name__, environ.LOG_LEVEL)

logging.null_config(__name__)

# -*- coding: utf-8 -*-

from .table import (
    Table,
)
from .container import (
    OrderedSet,
)

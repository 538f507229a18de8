# -*- coding: utf-8 -*-
import logging
from importlib.metadata import PackageNotFoundError, version

try:
    version = version("balanced-ma")
except PackageNotFoundError:
    version = "0.0.0"

from balanced_ma.utils import *
from balanced_ma.utils import __all__ as utils_all
from balanced_ma.transform import *
from balanced_ma.transform import __all__ as transform_all

# Engine. Supports bm.moving_average(values, "BSMA", 6)
from balanced_ma.core import moving_average, moving_averages

# Series front end, like ta.ma("bema", close, 20)
from balanced_ma.ma import ma

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "version",
    "moving_average",
    "moving_averages",
    "ma",
]

__all__ += utils_all + transform_all

# -*- coding: utf-8 -*-
from typing import Any, Dict, List, Optional, Sequence, Union

from numpy import floating, integer, ndarray
from pandas import Series

Array = ndarray
DictLike = Dict[str, Any]
Int = Union[int, integer]
IntFloat = Union[Int, float, floating]
MaybeFloat = Optional[float]
SeriesLike = Union[Sequence[Any], ndarray, Series]
SpecList = List[DictLike]

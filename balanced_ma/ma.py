# -*- coding: utf-8 -*-
from numpy import float64
from pandas import Series

from balanced_ma._typing import Any, DictLike, Int, List, Optional, Union
from balanced_ma.core import moving_average
from balanced_ma.transform import (
    DEFAULT_SIZE,
    MIN_LENGTH,
    UnknownVariantError,
    output_name,
    resolve_variant,
    supported_variants,
)
from balanced_ma.utils import check_size, v_bool, v_offset, v_pos_default, v_series


def ma(
    name: Any = None, source: Series = None,
    length: Int = None, offset: Int = None, **kwargs: DictLike
) -> Optional[Union[Series, List[str]]]:
    """Moving Average selector

    Series front end to ``moving_average``.  The result keeps the index
    of *source*; BSlope gaps become NaN.

    Parameters:
        name (str): One of: "sma", "bsma", "wma", "bwma", "ema", "bema",
            "slope", "bslope" (any case). Default: ```"sma"```
        source (Series): Input Series. Default: ```None```
        length (int): Window size (> 0). Default: ```10```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.Series.fillna(value)```
        strict (bool): Raise on bad input instead of returning None.
            Default: ```False```

    Returns:
        (Series): 1 column, named ``{KIND}_{length}``. None when *name* or
        *source* is invalid (strict=False).  Called with neither *name* nor
        *source*: (list) of the supported names.

    Example:
        ``ma()`` lists the supported names.
        ``ma("bema", df["close"], length=20)``
    """
    if name is None and source is None:
        return [v.lower() for v in supported_variants()]

    strict = v_bool(kwargs.pop("strict", None), False)

    # Validate
    variant = resolve_variant("sma" if name is None else name)
    if variant is None:
        if strict:
            raise UnknownVariantError(name)
        return None

    if strict and length is not None:
        check_size(length)
    length = v_pos_default(length, DEFAULT_SIZE)
    source = v_series(source, MIN_LENGTH)
    if source is None:
        return None
    offset = v_offset(offset)

    # Calculate
    result = moving_average(source, variant, length, strict=strict)
    ma = Series(result, index=source.index, dtype=float64)

    # Offset
    if offset != 0:
        ma = ma.shift(offset)

    # Fill
    if "fillna" in kwargs:
        ma = ma.fillna(kwargs["fillna"])

    # Name and Category
    ma.name = output_name(variant, length)
    ma.category = "overlap"

    return ma

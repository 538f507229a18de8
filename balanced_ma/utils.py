# -*- coding: utf-8 -*-
import logging
from numbers import Integral

from numpy import array, float64, ndarray
from pandas import Series, to_numeric
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from balanced_ma._typing import Any, Array, Int, IntFloat, SeriesLike

__all__ = [
    "check_size",
    "to_float_array",
    "v_bool",
    "v_offset",
    "v_pos_default",
    "v_series",
    "v_size",
]

logger = logging.getLogger(__name__)


def v_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def v_offset(value: Int) -> int:
    return int(value) if isinstance(value, Integral) else 0


def v_pos_default(value: IntFloat, default: Int = 0) -> int:
    if isinstance(value, (Integral, float)) and not isinstance(value, bool) and value > 0:
        try:
            return int(value)
        except OverflowError:
            return default
    return default


def v_series(series: Series, length: Int = None) -> Series:
    """Returns *series* when it is a Series with at least *length* rows,
    otherwise None."""
    if series is not None and isinstance(series, Series):
        if series.size >= v_pos_default(length, 0):
            return series
    return None


def check_size(size: Any) -> int:
    """Raises ValueError unless *size* is an integer >= 1."""
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise ValueError(f"size must be an integer, got {size!r}")
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return int(size)


def v_size(size: Any, length: int, strict: bool = False) -> int:
    """Window size clamped to ``[1, length]``.

    Non-integral sizes are truncated, ``inf`` clamps to *length* and
    anything unusable (NaN, -inf, text) becomes 1.  With ``strict=True``
    a non-integer or a size below 1 raises ValueError instead.
    """
    if strict:
        check_size(size)

    try:
        if size > length:
            logger.debug("size %r clamped to sequence length %d", size, length)
            size = length
        size = int(size)
    except (TypeError, ValueError, OverflowError):
        logger.debug("size %r is not a usable number, using 1", size)
        size = 1

    if size < 1:
        logger.debug("size %d raised to 1", size)
        size = 1
    return size


def to_float_array(sequence: SeriesLike, strict: bool = False) -> Array:
    """Coerce *sequence* to a new float64 array.

    Entries that do not parse as numbers become NaN.  With ``strict=True``
    any entry other than None/NaN that fails to parse raises ValueError.
    The caller's object is never modified.
    """
    if isinstance(sequence, (Series, ndarray)) \
            and is_numeric_dtype(sequence.dtype) and not is_bool_dtype(sequence.dtype):
        return array(sequence, dtype=float64)

    raw = Series(list(sequence), dtype=object)
    values = to_numeric(raw, errors="coerce")

    if strict:
        invalid = values.isna() & raw.notna()
        if invalid.any():
            bad = raw[invalid].tolist()[:5]
            raise ValueError(f"non-numeric values in sequence: {bad}")

    return array(values, dtype=float64)

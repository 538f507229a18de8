# -*- coding: utf-8 -*-
"""Transform engine: ``moving_average`` and the batch ``moving_averages``.

The engine never raises on degenerate input unless ``strict=True``:

  * None / empty input        -> []
  * fewer than 4 points       -> the input elements, unchanged
  * unknown variant           -> []
  * size outside [1, len]     -> clamped
  * non-numeric elements      -> NaN, propagated arithmetically
"""
import logging

from numpy import errstate, float64, ndarray
from pandas import DataFrame, RangeIndex, Series

from balanced_ma._typing import Any, DictLike, List, MaybeFloat, SeriesLike, SpecList
from balanced_ma.transform import (
    DEFAULT_SIZE,
    MIN_LENGTH,
    TRANSFORM_REGISTRY,
    UnknownVariantError,
    Variant,
    _as_int,
    _param,
    bslope,
    output_name,
    resolve_output_names,
    resolve_variant,
)
from balanced_ma.utils import check_size, to_float_array, v_size

logger = logging.getLogger(__name__)


def moving_average(
    sequence: SeriesLike, variant: Any, size: int,
    strict: bool = False, extended: bool = False,
) -> List[MaybeFloat]:
    """Moving average (or slope) of a one-dimensional sequence.

    Parameters:
        sequence: values; anything ``pandas.to_numeric`` can read
        variant (str | Variant): SMA, BSMA, WMA, BWMA, EMA, BEMA, Slope or
            BSlope.  Strings match case-insensitively and exactly.
        size (int): window width; radius ``size // 2`` for balanced variants
        strict (bool): raise instead of degrading. Default: ```False```
        extended (bool): BSlope only, return the ``n + 2 * (size // 2)``
            extended layout.  Ignored by every other variant.
            Default: ```False```

    Returns:
        (list): floats, one per input value.  BSlope holds None in the gap
        between its two edge fits.
    """
    if sequence is None:
        return []
    length = len(sequence)
    if length < MIN_LENGTH:
        logger.debug("sequence of %d values returned unchanged", length)
        return list(sequence)

    kind = resolve_variant(variant)
    if kind is None:
        if strict:
            raise UnknownVariantError(variant)
        logger.debug("unknown variant %r, returning empty result", variant)
        return []

    size = v_size(size, length, strict=strict)
    values = to_float_array(sequence, strict=strict)

    if extended and kind is not Variant.BSLOPE:
        logger.debug("extended layout only applies to BSlope, ignored for %s", kind.value)

    with errstate(all="ignore"):
        if kind is Variant.BSLOPE:
            return bslope(values, size, extended=extended)
        result = TRANSFORM_REGISTRY[kind].compute(values, size)

    if isinstance(result, ndarray):
        return result.tolist()
    return list(result)


def moving_averages(sequence: SeriesLike, specs: SpecList, strict: bool = False) -> DataFrame:
    """Several variants over the same input, one DataFrame column each.

    Each spec is a dict like ``{"kind": "bema", "length": 10}`` with
    optional ``prefix``, ``suffix``, ``delimiter`` and ``col_names``.
    Column names default to ``f"{KIND}_{length}"``.  Invalid specs are
    skipped and a duplicate column name replaces the earlier one, unless
    ``strict=True``, which raises ValueError for both.  The input is coerced once.
    """
    if sequence is None:
        return DataFrame()

    index = sequence.index if isinstance(sequence, Series) else RangeIndex(len(sequence))
    values = to_float_array(sequence, strict=strict)

    columns: DictLike = {}
    for spec in specs:
        kind = resolve_variant(spec.get("kind"))
        if kind is None:
            if strict:
                raise UnknownVariantError(spec.get("kind"))
            logger.debug("skipping spec with unknown kind: %r", spec)
            continue

        length = _param(spec, "length", DEFAULT_SIZE)
        if strict:
            check_size(length)
        length = _as_int(length, DEFAULT_SIZE)
        names, error = resolve_output_names([output_name(kind, length)], spec)
        if names is None:
            if strict:
                raise ValueError(error)
            logger.warning(error)
            continue

        if names[0] in columns:
            message = f"duplicate column {names[0]!r}, later spec replaces it"
            if strict:
                raise ValueError(message)
            logger.warning(message)

        result = moving_average(values, kind, length, strict=strict)
        columns[names[0]] = Series(result, index=index, dtype=float64)

    return DataFrame(columns, index=index)

# -*- coding: utf-8 -*-
"""balanced-ma transform -- balanced (centered, edge-extrapolated) variants.

Every balanced variant works on ``half_size = size // 2``:

  1. EdgeStats    average and first-difference slope of the first and the
                  last ``half_size + 1`` points
  2. extend()     prepend / append ``half_size`` points continuing those
                  edge slopes, so edge windows are full width
  3. kernel       the classic kernel with radius ``half_size`` over the
                  extended array (two opposite passes for WMA and EMA)
  4. trim         drop the first ``half_size`` values, keep ``len(values)``

BSlope skips 3 and 4 and returns the two edge fits with a gap between them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from numba import njit
from numpy import arange, concatenate, isnan, ndarray

from ._base import (
    NAN,
    Transform,
    TRANSFORM_REGISTRY,
    Variant,
)
from ._classic import nb_centered_sma, nb_ema, nb_wma


# ===========================================================================
# Edge statistics
# ===========================================================================
# A difference term is skipped when its neighbour is NaN; the sums still
# include every value, so a NaN inside the edge poisons the average.

@njit(cache=True)
def nb_edge_sums(x, half_size):
    n = x.size
    l_diff = 0.0
    l_sum = 0.0
    r_diff = 0.0
    r_sum = 0.0

    for i in range(n):
        if i <= half_size:
            if i < half_size and not isnan(x[i + 1]):
                l_diff += x[i + 1] - x[i]
            l_sum += x[i]
        if i >= n - half_size - 1:
            if i >= n - half_size and not isnan(x[i - 1]):
                r_diff += x[i] - x[i - 1]
            r_sum += x[i]

    return l_diff, l_sum, r_diff, r_sum


@dataclass(frozen=True)
class EdgeStats:
    """Local linear fits at both ends of a sequence."""
    half_size: int
    l_average: float
    l_slope:   float
    r_average: float
    r_slope:   float

    @property
    def l_start(self) -> float:
        """Fitted value at the first input index."""
        return self.l_average - self.l_slope * self.half_size / 2

    @property
    def r_start(self) -> float:
        """Fitted value one step past the last input index."""
        return self.r_average + self.r_slope * self.half_size / 2 + self.r_slope


def edge_stats(values: ndarray, half_size: int) -> EdgeStats:
    l_diff, l_sum, r_diff, r_sum = nb_edge_sums(values, half_size)
    # half_size == 0 has no differences: slope is 0/0
    return EdgeStats(
        half_size=half_size,
        l_average=l_sum / (half_size + 1),
        l_slope=l_diff / half_size if half_size else NAN,
        r_average=r_sum / (half_size + 1),
        r_slope=r_diff / half_size if half_size else NAN,
    )


def extend(values: ndarray, stats: EdgeStats) -> ndarray:
    """Return a new array of ``len(values) + 2 * half_size`` points."""
    h = stats.half_size
    left = stats.l_start - arange(h, 0, -1) * stats.l_slope
    right = stats.r_start + arange(h) * stats.r_slope
    return concatenate((left, values, right))


def _trim(result: ndarray, half_size: int, length: int) -> ndarray:
    return result[half_size:half_size + length]


def _prepare(values: ndarray, size: int):
    half_size = size // 2
    return half_size, extend(values, edge_stats(values, half_size))


# ===========================================================================
# BSMA
# ===========================================================================

def bsma(values: ndarray, size: int) -> ndarray:
    """Balanced SMA: centered mean over [i - half_size, i + half_size]."""
    half_size, extended = _prepare(values, size)
    return _trim(nb_centered_sma(extended, half_size), half_size, values.size)


TRANSFORM_REGISTRY[Variant.BSMA] = Transform(
    variant=Variant.BSMA,
    compute=bsma,
    description="balanced simple moving average",
)


# ===========================================================================
# BWMA
# ===========================================================================
# forward:  classic WMA with window half_size
# backward: the same rule on the reversed array, reversed back
# result:   element-wise mean, which cancels the recency bias

def wma_forward(extended: ndarray, half_size: int) -> ndarray:
    return nb_wma(extended, half_size)


def wma_backward(extended: ndarray, half_size: int) -> ndarray:
    return nb_wma(extended[::-1].copy(), half_size)[::-1]


def bwma(values: ndarray, size: int) -> ndarray:
    """Balanced WMA: mean of a forward and a backward weighted pass."""
    half_size, extended = _prepare(values, size)
    merged = (wma_forward(extended, half_size) + wma_backward(extended, half_size)) / 2
    return _trim(merged, half_size, values.size)


TRANSFORM_REGISTRY[Variant.BWMA] = Transform(
    variant=Variant.BWMA,
    compute=bwma,
    description="balanced weighted moving average",
)


# ===========================================================================
# BEMA
# ===========================================================================
# weight = 2 / (half_size + 1).  The backward recursion is seeded from the
# last extended value and runs toward index 0.

def ema_forward(extended: ndarray, weight: float) -> ndarray:
    return nb_ema(extended, weight)


def ema_backward(extended: ndarray, weight: float) -> ndarray:
    return nb_ema(extended[::-1].copy(), weight)[::-1]


def bema(values: ndarray, size: int) -> ndarray:
    """Balanced EMA: mean of a forward and a backward recursion."""
    half_size, extended = _prepare(values, size)
    weight = 2.0 / (half_size + 1.0)
    merged = (ema_forward(extended, weight) + ema_backward(extended, weight)) / 2
    return _trim(merged, half_size, values.size)


TRANSFORM_REGISTRY[Variant.BEMA] = Transform(
    variant=Variant.BEMA,
    compute=bema,
    description="balanced exponential moving average",
)


# ===========================================================================
# BSlope
# ===========================================================================
# Two runs of 2*half_size+1 points in extended coordinates:
#   left  = l_start + k * l_slope,  k = -half_size .. half_size
#   right = r_start + k * r_slope,  k = -(half_size+1) .. half_size-1
# spliced by input length n (width = 2*half_size+1):
#   n == width   left + right[1:]
#   n <  width   left[:-1] + right[1:]
#   n >  width   left + [None] * (n - 2*half_size - 2) + right
# The default layout trims to the n input positions; extended=True keeps
# the n + 2*half_size layout (plot with a -half_size index offset).

def bslope(values: ndarray, size: int, extended: bool = False) -> List[Optional[float]]:
    """Balanced slope: left and right edge fits with a None gap between."""
    n = values.size
    half_size = size // 2
    stats = edge_stats(values, half_size)

    left = (stats.l_start + arange(-half_size, half_size + 1) * stats.l_slope).tolist()
    right = (stats.r_start + arange(-(half_size + 1), half_size) * stats.r_slope).tolist()

    width = 2 * half_size + 1
    if n == width:
        result = left + right[1:]
    elif n < width:
        result = left[:-1] + right[1:]
    else:
        result = left + [None] * (n - 2 * half_size - 2) + right

    if extended:
        return result
    return result[half_size:half_size + n]


TRANSFORM_REGISTRY[Variant.BSLOPE] = Transform(
    variant=Variant.BSLOPE,
    compute=bslope,
    description="balanced slope (edge extrapolations with a gap)",
)

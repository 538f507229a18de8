# -*- coding: utf-8 -*-
"""balanced-ma transform -- classic (trailing window) variants.

Each section follows the pattern:
  1. numba kernel(s)  ``nb_*``  over a float64 array
  2. a thin wrapper taking (values, size)
  3. TRANSFORM_REGISTRY[Variant.<X>] = Transform(...)

Near the left edge the classic window is shorter than ``size``; nothing is
extrapolated.  Kernels are also reused by the balanced module with the
half-window radius.
"""
from __future__ import annotations

from typing import Optional, Tuple

from numba import njit
from numpy import empty, nan, ndarray

from ._base import (
    Transform,
    TRANSFORM_REGISTRY,
    Variant,
)


# ===========================================================================
# SMA
# ===========================================================================
# window = [max(0, i-size+1), i+1), arithmetic mean of the slice.

@njit(cache=True)
def nb_sma(x, size):
    n = x.size
    result = empty(n)

    for i in range(n):
        start = max(0, i - size + 1)
        end = min(n, i + 1)
        total = 0.0
        for j in range(start, end):
            total += x[j]
        count = end - start
        result[i] = total / count if count > 0 else nan

    return result


# Centered variant used by BSMA: window = [i-radius, i+radius] clamped.
@njit(cache=True)
def nb_centered_sma(x, radius):
    n = x.size
    result = empty(n)

    for i in range(n):
        start = max(0, i - radius)
        end = min(n, i + radius + 1)
        total = 0.0
        for j in range(start, end):
            total += x[j]
        count = end - start
        result[i] = total / count if count > 0 else nan

    return result


def sma(values: ndarray, size: int) -> ndarray:
    """Simple Moving Average over a trailing, edge-shortened window."""
    return nb_sma(values, size)


TRANSFORM_REGISTRY[Variant.SMA] = Transform(
    variant=Variant.SMA,
    compute=sma,
    description="simple moving average",
)


# ===========================================================================
# WMA
# ===========================================================================
# Same window as SMA.  The k-th element of the slice (1-indexed from the
# window start) has weight k, so the most recent point weighs most.
# An empty window (size 0 from the balanced pass) yields NaN.

@njit(cache=True)
def nb_wma(x, size):
    n = x.size
    result = empty(n)

    for i in range(n):
        start = max(0, i - size + 1)
        end = min(n, i + 1)
        num = 0.0
        den = 0.0
        k = 0
        for j in range(start, end):
            k += 1
            num += k * x[j]
            den += k
        result[i] = num / den if den > 0 else nan

    return result


def wma(values: ndarray, size: int) -> ndarray:
    """Weighted Moving Average with linearly increasing weights."""
    return nb_wma(values, size)


TRANSFORM_REGISTRY[Variant.WMA] = Transform(
    variant=Variant.WMA,
    compute=wma,
    description="weighted moving average",
)


# ===========================================================================
# EMA
# ===========================================================================
# ema[0] = x[0];  ema[i] = (x[i] - ema[i-1]) * weight + ema[i-1]
# Strictly left to right.  A NaN poisons every later value.

@njit(cache=True)
def nb_ema(x, weight):
    n = x.size
    result = empty(n)
    if n == 0:
        return result

    prev = x[0]
    for i in range(n):
        prev = (x[i] - prev) * weight + prev
        result[i] = prev

    return result


def ema(values: ndarray, size: int) -> ndarray:
    """Exponential Moving Average, weight = 2 / (size + 1)."""
    return nb_ema(values, 2.0 / (size + 1.0))


TRANSFORM_REGISTRY[Variant.EMA] = Transform(
    variant=Variant.EMA,
    compute=ema,
    description="exponential moving average",
)


# ===========================================================================
# Slope
# ===========================================================================
# One linear fit over the whole input from first differences:
#   slope = sum(x[i+1] - x[i]) / (n - 1)
#   start = mean(x) - slope * (n + 1) / 2
# then out[i] = start + (i + 1) * slope, accumulated step by step so the
# result's mean equals mean(x).  ``size`` is ignored.

@njit(cache=True)
def nb_slope_sums(x):
    n = x.size
    diff = 0.0
    total = 0.0
    for i in range(n):
        if i < n - 1:
            diff += x[i + 1] - x[i]
        total += x[i]
    return diff, total


@njit(cache=True)
def nb_line(start, step, n):
    result = empty(n)
    val = start
    for i in range(n):
        val += step
        result[i] = val
    return result


def slope_stats(values: ndarray) -> Tuple[float, float]:
    """Return (average, slope) of the global first-difference fit."""
    n = values.size
    diff, total = nb_slope_sums(values)
    return total / n, diff / (n - 1)


def slope(values: ndarray, size: Optional[int] = None) -> ndarray:
    """Linear slope: an arithmetic progression centered on the mean."""
    n = values.size
    average, step = slope_stats(values)
    start = average - step * (n + 1) / 2
    return nb_line(start, step, n)


TRANSFORM_REGISTRY[Variant.SLOPE] = Transform(
    variant=Variant.SLOPE,
    compute=slope,
    description="linear slope",
)

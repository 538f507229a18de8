# -*- coding: utf-8 -*-
"""balanced-ma.transform – numerical kernels and the variant registry.

Category modules populate TRANSFORM_REGISTRY at import time.  Functions
here take an already coerced float64 ``ndarray``; input guards, size
clamping and coercion live in ``balanced_ma.core``.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    NAN,
    MIN_LENGTH,
    DEFAULT_SIZE,
    Variant,
    UnknownVariantError,
    Transform,
    TRANSFORM_REGISTRY,
    resolve_variant,
    supported_variants,
    output_name,
    resolve_output_names,
    _param,
    _as_int,
)

# ---------------------------------------------------------------------------
# Category modules – each populates the registry on import
# ---------------------------------------------------------------------------
from ._classic import sma, wma, ema, slope, slope_stats
from ._balanced import (
    EdgeStats,
    edge_stats,
    extend,
    bsma,
    bwma,
    bema,
    bslope,
    wma_forward,
    wma_backward,
    ema_forward,
    ema_backward,
)

__all__ = [
    # base
    "NAN",
    "MIN_LENGTH",
    "DEFAULT_SIZE",
    "Variant",
    "UnknownVariantError",
    "Transform",
    "TRANSFORM_REGISTRY",
    "resolve_variant",
    "supported_variants",
    "output_name",
    "resolve_output_names",
    # classic
    "sma",
    "wma",
    "ema",
    "slope",
    "slope_stats",
    # balanced
    "EdgeStats",
    "edge_stats",
    "extend",
    "bsma",
    "bwma",
    "bema",
    "bslope",
    "wma_forward",
    "wma_backward",
    "ema_forward",
    "ema_backward",
]

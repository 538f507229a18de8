# -*- coding: utf-8 -*-
"""balanced-ma transform – shared base: variants, helpers, registry.

The category modules (``_classic``, ``_balanced``) import from here and
populate ``TRANSFORM_REGISTRY`` at load time.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

NAN = float("nan")

# Shorter inputs are returned unchanged by the engine.
MIN_LENGTH = 4
DEFAULT_SIZE = 10


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _param(params: Dict[str, Any], key: str, default: Any) -> Any:
    """Pull *key* from *params*; treat None as missing → default."""
    value = params.get(key, default)
    return default if value is None else value


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return int(default)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class Variant(Enum):
    """Closed set of transforms.  The ``B`` prefix marks the balanced family."""
    SMA = "SMA"
    BSMA = "BSMA"
    WMA = "WMA"
    BWMA = "BWMA"
    EMA = "EMA"
    BEMA = "BEMA"
    SLOPE = "Slope"
    BSLOPE = "BSlope"

    @property
    def balanced(self) -> bool:
        return self.name.startswith("B")

    @property
    def family(self) -> str:
        """Underlying rule: ``sma``, ``wma``, ``ema`` or ``slope``."""
        return self.name[1:].lower() if self.balanced else self.name.lower()


_VARIANTS_BY_NAME: Dict[str, Variant] = {v.name: v for v in Variant}


class UnknownVariantError(ValueError):
    """Raised in strict mode when a selector matches no variant."""

    def __init__(self, value: Any):
        self.value = value
        names = ", ".join(v.value for v in Variant)
        super().__init__(f"Unknown variant {value!r}; expected one of: {names}")


def resolve_variant(value: Any) -> Optional[Variant]:
    """Map a selector to a ``Variant`` by exact, case-insensitive name.

    Returns None for anything else ("xSMA", "SMA ", 3, None, ...).
    """
    if isinstance(value, Variant):
        return value
    if isinstance(value, str):
        return _VARIANTS_BY_NAME.get(value.upper())
    return None


# ---------------------------------------------------------------------------
# Transform descriptor & registry  (populated by category modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Transform:
    """Immutable descriptor for a single variant."""
    variant:     Variant
    compute:     Callable[..., Any]     # (values: ndarray, size: int) -> ndarray | list
    description: str


# Populated by category modules at import time.
TRANSFORM_REGISTRY: Dict[Variant, Transform] = {}


def supported_variants(balanced: Optional[bool] = None) -> List[str]:
    """Return the canonical names of registered variants.

    balanced=None returns all, True/False filters on the family.
    """
    return [
        v.value for v in Variant
        if v in TRANSFORM_REGISTRY and (balanced is None or v.balanced is balanced)
    ]


# ---------------------------------------------------------------------------
# Output-name helpers
# ---------------------------------------------------------------------------

def output_name(variant: Variant, length: int) -> str:
    return f"{variant.name}_{length}"


def resolve_output_names(
        base_names: List[str], spec: Dict[str, Any]
) -> Tuple[Optional[List[str]], Optional[str]]:
    """Apply prefix / suffix / col_names overrides from *spec*."""
    names = list(base_names)
    delimiter = spec.get("delimiter", "_")
    prefix = spec.get("prefix") or ""
    suffix = spec.get("suffix") or ""
    if prefix:
        prefix = f"{prefix}{delimiter}"
    if suffix:
        suffix = f"{delimiter}{suffix}"
    if prefix or suffix:
        names = [f"{prefix}{n}{suffix}" for n in names]
    col_names = spec.get("col_names")
    if col_names is not None:
        if not isinstance(col_names, tuple):
            col_names = (col_names,)
        if len(col_names) < len(names):
            return None, f"[!] col_names too short: {len(col_names)} < {len(names)}"
        names = list(col_names[: len(names)])
    return names, None

#!/usr/bin/env python3
"""Compare every variant on one synthetic series.

Builds a noisy random walk, computes all classic and balanced variants with
``moving_averages()`` and prints, per variant, how far it sits from the raw
input and from a noise-free reference, split into edge and interior rows.
Balanced variants should track the reference without the trailing lag of
their classic counterparts.
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import balanced_ma as bm


def make_series(rows: int, seed: int, noise: float) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    trend = 100 + rng.standard_normal(rows).cumsum()
    value = trend + rng.normal(0, noise, rows)
    return pd.DataFrame({"trend": trend, "value": value}, index=idx)


def summarize(ref: pd.Series, test: pd.DataFrame, edge: int) -> pd.DataFrame:
    diff = test.sub(ref, axis=0).abs()
    interior = diff.iloc[edge:-edge] if len(diff) > 2 * edge else diff
    edges = pd.concat([diff.iloc[:edge], diff.iloc[-edge:]])
    return pd.DataFrame(
        {
            "nan": test.isna().sum(),
            "max_abs": diff.max(),
            "mean_abs": diff.mean(),
            "mean_abs_edge": edges.mean(),
            "mean_abs_interior": interior.mean(),
        }
    )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=500)
    ap.add_argument("--size", type=int, default=10)
    ap.add_argument("--noise", type=float, default=0.5)
    ap.add_argument("--seed", type=int, default=7)
    args = ap.parse_args()

    df = make_series(args.rows, args.seed, args.noise)
    specs = [{"kind": kind, "length": args.size} for kind in bm.supported_variants()]
    result = bm.moving_averages(df["value"], specs)

    edge = max(args.size // 2, 1)
    print("[i] rows:", args.rows)
    print("[i] size:", args.size, "half size:", args.size // 2)
    print("[i] variants:", ", ".join(result.columns))

    print("\nDistance to noise-free trend:")
    print(summarize(df["trend"], result, edge).sort_values("mean_abs"))

    print("\nDistance to raw input:")
    print(summarize(df["value"], result, edge).sort_values("mean_abs"))


if __name__ == "__main__":
    main()

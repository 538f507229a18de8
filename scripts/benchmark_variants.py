#!/usr/bin/env python3
"""Benchmark moving_average() per variant.

Runs each variant on a synthetic random walk and reports elapsed time.
Warmup runs are not timed; the first call of each kernel includes numba
compilation (or cache load).
"""
from __future__ import annotations

import argparse
import os
import sys
from time import perf_counter
from typing import List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import balanced_ma as bm


def make_values(rows: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return 100 + rng.standard_normal(rows).cumsum()


def parse_variants(value: str | None) -> List[str]:
    if not value:
        return bm.supported_variants()
    return [v.strip() for v in value.split(",") if v.strip()]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=100_000)
    ap.add_argument("--size", type=int, default=20)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--variants", type=str, default="", help="comma-separated variants")
    ap.add_argument("--warmup", type=int, default=1, help="warmup runs (not timed)")
    ap.add_argument("--runs", type=int, default=3, help="timed runs")
    args = ap.parse_args()

    values = make_values(args.rows, args.seed)

    print(f"[i] rows: {args.rows}")
    print(f"[i] size: {args.size}")
    print(f"[i] runs: {max(args.runs, 1)} (warmup: {args.warmup})")

    for variant in parse_variants(args.variants):
        for _ in range(max(args.warmup, 0)):
            bm.moving_average(values, variant, args.size, strict=True)

        times = []
        for _ in range(max(args.runs, 1)):
            start = perf_counter()
            bm.moving_average(values, variant, args.size, strict=True)
            times.append(perf_counter() - start)

        avg = sum(times) / len(times)
        line = f"[i] {variant:>6}: avg seconds: {avg:.4f}"
        if args.rows > 0:
            line += f"  per 100k rows: {avg / args.rows * 100_000:.4f}"
        print(line)


if __name__ == "__main__":
    main()

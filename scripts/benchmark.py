#!/usr/bin/env python3
"""
Population sweep benchmark: recommend sizes over a height/weight grid,
report timing and the distribution of recommended sizes.

Usage:
    python scripts/benchmark.py [brand]
"""

from __future__ import annotations

import sys
import time
from collections import Counter
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import numpy as np

from fitgauge.core.size_guides import collect_size_guide, load_default_index, resolve_gender
from fitgauge.core.size_recommendation import identify_size
from fitgauge.models.schemas import BodyComposition, Gender, Item, UserMeasurements


def main():
    brand = sys.argv[1] if len(sys.argv) > 1 else "Duke"

    print("=" * 70)
    print(f"FitGauge Benchmark: {brand}")
    print("=" * 70)

    # ── Load reference data ──
    print("\n[1] Loading size guides...")
    t0 = time.perf_counter()
    index = load_default_index()
    print(f"    Brands: {', '.join(index.brands())}")
    print(f"    Load time: {(time.perf_counter() - t0) * 1000:.1f} ms")

    item = Item(brand=brand, type="tops", gender="", name=f"{brand} tee",
                available_sizes=["XS", "S", "M", "L", "XL", "2XL"])
    guide = collect_size_guide(index, item)
    print(f"    Guide: {guide.category.value}/{guide.gender.value}" if guide else "    Guide: none")

    # ── Sweep ──
    heights = np.linspace(150, 200, 26)
    weights = np.linspace(45, 130, 35)
    print(f"\n[2] Sweeping {len(heights) * len(weights) * 6} shoppers...")

    by_size: Counter[str] = Counter()
    by_confidence: Counter[str] = Counter()
    timings = []
    for gender in (Gender.male, Gender.female):
        for comp in BodyComposition:
            for h in heights:
                for w in weights:
                    user = UserMeasurements(height=float(h), weight=float(w), gender=gender, body_composition=comp)
                    t1 = time.perf_counter()
                    rec = identify_size(user, guide, resolve_gender(item), item.available_sizes)
                    timings.append(time.perf_counter() - t1)
                    by_size[rec.regular or f"({'too small' if rec.comfortable else 'too large'})"] += 1
                    by_confidence[rec.confidence.value] += 1

    t = np.array(timings) * 1e6
    print(f"    Mean:   {t.mean():.1f} µs")
    print(f"    Median: {np.median(t):.1f} µs")
    print(f"    p99:    {np.percentile(t, 99):.1f} µs")

    # ── Distribution ──
    print("\n[3] Recommended regular size")
    total = sum(by_size.values())
    for size, n in sorted(by_size.items(), key=lambda kv: -kv[1]):
        print(f"    {size:<14s} {n:5d}  ({100 * n / total:5.1f}%)")

    print("\n[4] Confidence")
    for level in ("high", "medium", "low"):
        n = by_confidence.get(level, 0)
        print(f"    {level:<14s} {n:5d}  ({100 * n / total:5.1f}%)")


if __name__ == "__main__":
    main()

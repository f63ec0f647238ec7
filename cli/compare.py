#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
compare.py
----------
Benchmark all planners on the same random grids:
- Generates grids across (sizes x densities x seeds)
- Runs every planner on each grid
- Writes one CSV row per (grid, planner) and prints a per-planner summary

Example:
    python -m cli.compare --sizes 10x10,30x30 --densities 0.1,0.3 --seeds 20 \
        --out results/csv/planner_compare.csv
"""

from __future__ import annotations
import argparse
import os
import sys
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from grids.generator import generate_grid
from grids.model import GridError
from history import timed_search
from planners import PLANNERS

# -------------------- helpers -------------------- #

def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    sizes: List[Tuple[int, int]] = []
    for token in s.split(","):
        token = token.strip().lower()
        if "x" not in token:
            raise ValueError(f"Bad size '{token}', expected like 30x30")
        h, w = token.split("x")
        sizes.append((int(h), int(w)))
    return sizes


def _parse_densities(s: str) -> List[float]:
    vals = []
    for token in s.split(","):
        token = token.strip()
        if token.endswith("%"):
            vals.append(float(token[:-1]) / 100.0)
        else:
            vals.append(float(token))
    return vals


def run_case(grid, rows: int, cols: int, density: float, seed: int, planners: List[str]) -> List[Dict]:
    out = []
    for name in planners:
        result, elapsed_ms = timed_search(name, grid)
        out.append({
            "algorithm": result.algorithm,
            "rows": rows,
            "cols": cols,
            "density": density,
            "seed": seed,
            "success": int(result.success),
            "moves": result.num_moves,
            "expanded": result.num_expanded,
            "time_ms": elapsed_ms,
        })
    return out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compare BFS, DFS, Dijkstra and A* on random grids.")
    ap.add_argument("--sizes", type=str, default="10x10,20x20", help="Comma list like 10x10,30x30")
    ap.add_argument("--densities", type=str, default="0.10,0.25", help="Comma list; '20%%' also accepted")
    ap.add_argument("--seeds", type=int, default=10, help="Grids per (size, density)")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--planners", type=str, default=",".join(PLANNERS), help="Comma list of planners")
    ap.add_argument("--ensure", type=str, default="success", choices=["any", "success", "failure"])
    ap.add_argument("--out", type=str, default=os.path.join("results", "csv", "planner_compare.csv"))
    ap.add_argument("--quiet", action="store_true", help="No progress bar")
    args = ap.parse_args(argv)

    try:
        sizes = _parse_sizes(args.sizes)
        densities = _parse_densities(args.densities)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    planners = [p.strip() for p in args.planners.split(",") if p.strip()]

    rows: List[Dict] = []
    total = len(sizes) * len(densities) * args.seeds
    with tqdm(total=total, desc="Grids", disable=args.quiet) as pbar:
        for (H, W) in sizes:
            for density in densities:
                for k in range(args.seeds):
                    seed = args.seed + k
                    rng = np.random.default_rng(seed)
                    try:
                        grid = generate_grid(H, W, density=density, ensure_status=args.ensure, rng=rng)
                    except GridError as e:
                        tqdm.write(f"skip {H}x{W} d={density} seed={seed}: {e}")
                        pbar.update(1)
                        continue
                    try:
                        rows.extend(run_case(grid, H, W, density, seed, planners))
                    except ValueError as e:
                        print(str(e), file=sys.stderr)
                        return 2
                    pbar.update(1)

    df = pd.DataFrame(rows, columns=["algorithm", "rows", "cols", "density", "seed",
                                     "success", "moves", "expanded", "time_ms"])
    folder = os.path.dirname(args.out)
    if folder:
        os.makedirs(folder, exist_ok=True)
    df.to_csv(args.out, index=False)
    print(f"Saved: {args.out}")

    if not df.empty:
        summary = df.groupby("algorithm").agg(
            success=("success", "mean"),
            moves=("moves", "mean"),
            expanded=("expanded", "mean"),
            time_ms=("time_ms", "mean"),
        )
        print(f"{'planner':9} {'succ':>5} {'moves':>7} {'expanded':>9} {'time[ms]':>9}")
        for name, r in summary.iterrows():
            print(f"{name:9} {r['success']:5.2f} {r['moves']:7.2f} {r['expanded']:9.2f} {r['time_ms']:9.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

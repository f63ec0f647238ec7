#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Run one planner (or all of them) on a grid and print the outcome.

The grid comes from, in order of precedence:
  --map FILE                 ASCII map ('.', '#', 'S', 'G')
  --obstacles "r,c;r,c;..."  explicit obstacle list with --start/--goal
  --density P --seed N       random grid (default)

Example:
    python -m cli.run_search --algorithm a_star --rows 10 --cols 10 \
        --start 0,0 --goal 9,9 --density 0.25 --seed 3 \
        --save-history --plot results/figs/astar.png
"""

from __future__ import annotations
import argparse
import os
import sys
from typing import List, Optional, Tuple

import numpy as np

from grids.generator import generate_grid
from grids.model import GridError, GridSnapshot
from history import HistoryStore, build_run_record, timed_search
from planners import PLANNERS, SearchPreconditionError
from settings import load_settings

# -------------------- helpers -------------------- #

def _parse_coord(s: str) -> Tuple[int, int]:
    token = s.strip().strip("()[]")
    parts = [p for p in token.replace(" ", "").split(",") if p]
    if len(parts) != 2:
        raise ValueError(f"Bad coordinate '{s}', expected like 3,4")
    return int(parts[0]), int(parts[1])


def _parse_coords(s: str) -> List[Tuple[int, int]]:
    return [_parse_coord(tok) for tok in s.split(";") if tok.strip()]


def _build_grid(args, settings) -> GridSnapshot:
    rows = args.rows or settings.rows
    cols = args.cols or settings.cols
    if args.map:
        with open(args.map, "r", encoding="utf-8") as f:
            grid = GridSnapshot.from_text(f.read())
        if args.start or args.goal:
            model_start = _parse_coord(args.start) if args.start else grid.start
            model_goal = _parse_coord(args.goal) if args.goal else grid.goal
            grid = GridSnapshot.from_obstacles(grid.rows, grid.cols, grid.obstacles(),
                                               start=model_start, goal=model_goal)
        return grid
    start = _parse_coord(args.start) if args.start else (0, 0)
    goal = _parse_coord(args.goal) if args.goal else (rows - 1, cols - 1)
    if args.obstacles is not None:
        return GridSnapshot.from_obstacles(rows, cols, _parse_coords(args.obstacles), start=start, goal=goal)
    rng = np.random.default_rng(args.seed)
    return generate_grid(rows, cols, density=args.density, start=start, goal=goal,
                         ensure_status=args.ensure, rng=rng)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run grid pathfinding algorithms.")
    ap.add_argument("--algorithm", type=str, default="a_star",
                    help=f"One of {sorted(PLANNERS)} or 'all'")
    ap.add_argument("--rows", type=int, default=None, help="Grid rows (default: NAVX_ROWS or 10)")
    ap.add_argument("--cols", type=int, default=None, help="Grid cols (default: NAVX_COLS or 10)")
    ap.add_argument("--start", type=str, default=None, help="Start cell as r,c")
    ap.add_argument("--goal", type=str, default=None, help="Goal cell as r,c")
    ap.add_argument("--map", type=str, default=None, help="ASCII map file")
    ap.add_argument("--obstacles", type=str, default=None, help="Obstacle list 'r,c;r,c;...'")
    ap.add_argument("--density", type=float, default=0.2, help="Obstacle density for random grids")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for random grids")
    ap.add_argument("--ensure", type=str, default="any", choices=["any", "success", "failure"],
                    help="Reachability required of random grids")
    ap.add_argument("--save-history", action="store_true", help="Append run records to the history file")
    ap.add_argument("--history", type=str, default=None, help="History file (default: NAVX_HISTORY_PATH)")
    ap.add_argument("--plot", type=str, default=None, help="Save a PNG of the result ('{algo}' is substituted)")
    ap.add_argument("--animate", type=str, default=None,
                    help="Save a GIF replay (visited cells, then the path walk) at NAVX_ANIMATION_MS per frame")
    ap.add_argument("--show-grid", action="store_true", help="Print the grid as ASCII")
    args = ap.parse_args(argv)

    settings = load_settings()
    try:
        grid = _build_grid(args, settings)
    except (GridError, ValueError, OSError) as e:
        print(f"Invalid grid: {e}", file=sys.stderr)
        return 2

    names = list(PLANNERS) if args.algorithm.strip().lower() == "all" else [args.algorithm]
    store = HistoryStore(args.history or settings.history_path) if args.save_history else None

    if args.show_grid:
        print(grid.to_text())

    for name in names:
        try:
            result, elapsed_ms = timed_search(name, grid)
        except SearchPreconditionError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 2

        if result.success:
            print(f"{result.algorithm:9} moves={result.num_moves:4d} expanded={result.num_expanded:5d} "
                  f"time={elapsed_ms:8.3f}ms")
            print(f"  path: {' -> '.join(f'({r},{c})' for r, c in result.path)}")
        else:
            print(f"{result.algorithm:9} No path found. expanded={result.num_expanded:5d} "
                  f"time={elapsed_ms:8.3f}ms")

        if store is not None:
            record = build_run_record(name, grid, result, elapsed_ms)
            rid = store.add(record)
            print(f"  saved run #{rid} to {store.path}")

        if args.plot:
            from viz.render import render_grid, save_figure  # lazy: matplotlib is slow to import
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(max(grid.cols / 2, 3), max(grid.rows / 2, 3)), dpi=100)
            title = f"{result.algorithm}: {'success' if result.success else 'no path'}"
            render_grid(grid, ax=ax, result=result, title=title)
            out = args.plot.replace("{algo}", result.algorithm.lower())
            if len(names) > 1 and "{algo}" not in args.plot:
                root, ext = os.path.splitext(out)
                out = f"{root}_{result.algorithm.lower()}{ext or '.png'}"
            print(f"Saved: {save_figure(fig, out)}")

        if args.animate:
            from viz.render import animate_search
            from matplotlib import animation
            import matplotlib.pyplot as plt
            fig, anim = animate_search(grid, result, interval_ms=settings.animation_ms, title=result.algorithm)
            out = args.animate.replace("{algo}", result.algorithm.lower())
            if len(names) > 1 and "{algo}" not in args.animate:
                root, ext = os.path.splitext(out)
                out = f"{root}_{result.algorithm.lower()}{ext or '.gif'}"
            folder = os.path.dirname(out)
            if folder:
                os.makedirs(folder, exist_ok=True)
            anim.save(out, writer=animation.PillowWriter(fps=max(1, round(1000 / settings.animation_ms))))
            plt.close(fig)
            print(f"Saved: {out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

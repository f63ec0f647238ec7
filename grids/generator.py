#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random grid generation for benchmarks, demos and tests.

- Obstacles are sampled independently per cell at the requested density,
  never on the start or goal cell.
- Reachability is decided with connected-component labeling on the free
  cells (4-connected, the same moves the planners use).
- ensure_status lets callers ask for a solvable or an unsolvable grid.

Dependencies:
    numpy
    scipy.ndimage   (for connected-component labeling)
"""

from __future__ import annotations

from typing import Optional, Set

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from .model import Coord, GridError, GridLike, GridModel, GridSnapshot, CellRole, is_traversable

# 4-connected labeling structure (no diagonals)
STRUCTURE_4 = np.array([
    [0, 1, 0],
    [1, 1, 1],
    [0, 1, 0],
], dtype=np.uint8)

ENSURE_STATUSES = ("any", "success", "failure")


def _free_labels(grid: GridLike) -> np.ndarray:
    free = (np.asarray(grid.roles) != CellRole.OBSTACLE).astype(np.uint8)
    labels, _ = cc_label(free, structure=STRUCTURE_4)
    return labels


def reachable_region(grid: GridLike, start: Coord) -> Set[Coord]:
    """All coordinates in the open 4-connected component containing `start`."""
    if not is_traversable(grid, start):
        return set()
    labels = _free_labels(grid)
    lab = labels[start[0], start[1]]
    return {(int(r), int(c)) for r, c in np.argwhere(labels == lab)}


def is_reachable(grid: GridLike, start: Coord, goal: Coord) -> bool:
    if not (is_traversable(grid, start) and is_traversable(grid, goal)):
        return False
    labels = _free_labels(grid)
    return bool(labels[start[0], start[1]] == labels[goal[0], goal[1]])


def generate_grid(
    rows: int = 10,
    cols: int = 10,
    *,
    density: float = 0.2,
    start: Coord = (0, 0),
    goal: Optional[Coord] = None,
    ensure_status: str = "any",     # "any" | "success" | "failure"
    rng: Optional[np.random.Generator] = None,
    max_tries: int = 200,
) -> GridSnapshot:
    """
    Sample a rows x cols grid with start/goal placed and random obstacles.

    ensure_status:
        "any"     : no guarantee about path existence.
        "success" : start and goal are connected.
        "failure" : start and goal are disconnected.

    Raises GridError if the requested status is not met within max_tries.
    """
    if ensure_status not in ENSURE_STATUSES:
        raise GridError(f"ensure_status must be one of {ENSURE_STATUSES}, got '{ensure_status}'")
    if not 0.0 <= density <= 1.0:
        raise GridError(f"density must be in [0, 1], got {density}")
    if goal is None:
        goal = (rows - 1, cols - 1)

    rng = rng or np.random.default_rng()
    model = GridModel(rows, cols)
    # validates bounds
    model.place_start(start)
    model.place_goal(goal)

    for _ in range(max_tries):
        model.roles[model.roles == CellRole.OBSTACLE] = CellRole.EMPTY
        mask = rng.random((rows, cols)) < density
        mask[start] = False
        mask[goal] = False
        model.roles[mask] = CellRole.OBSTACLE

        if ensure_status == "any":
            return model.snapshot()
        connected = is_reachable(model, start, goal)
        if connected == (ensure_status == "success"):
            return model.snapshot()

    raise GridError(
        f"Could not generate a '{ensure_status}' grid ({rows}x{cols}, density={density}) "
        f"in {max_tries} tries"
    )

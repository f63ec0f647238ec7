#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared pieces of the grid planners:
- SearchResult / SearchStatus (what every planner returns)
- fixed 4-connected neighbor order (up, down, left, right)
- endpoint validation and path reconstruction
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from grids.model import Coord, GridLike, GridModel, GridSnapshot, is_in_bounds, is_traversable

# Up, down, left, right. Every planner expands neighbors in this order.
NEIGHBOR_DELTAS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class SearchPreconditionError(ValueError):
    """search() was invoked with a missing, off-grid or blocked endpoint."""


class SearchStatus(str, Enum):
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one planner run.

    path          : start .. goal inclusive, empty when the goal is unreachable
    visited_order : coordinates in expansion order, no duplicates
    """
    path: Tuple[Coord, ...]
    visited_order: Tuple[Coord, ...]
    algorithm: str = ""

    @property
    def success(self) -> bool:
        return len(self.path) > 0

    @property
    def status(self) -> SearchStatus:
        return SearchStatus.SUCCEEDED if self.path else SearchStatus.EXHAUSTED

    @property
    def num_moves(self) -> int:
        """Path length in edges (0 for a single-cell or empty path)."""
        return max(len(self.path) - 1, 0)

    @property
    def num_expanded(self) -> int:
        return len(self.visited_order)

    def to_dict(self) -> Dict:
        return {
            "algorithm": self.algorithm,
            "status": self.status.value,
            "path": [list(p) for p in self.path],
            "visited_order": [list(p) for p in self.visited_order],
        }


def neighbors(grid: GridLike, coord: Coord) -> Iterator[Coord]:
    """Traversable 4-neighbors of `coord`, in NEIGHBOR_DELTAS order."""
    r, c = coord
    for dr, dc in NEIGHBOR_DELTAS:
        nxt = (r + dr, c + dc)
        if is_traversable(grid, nxt):
            yield nxt


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(parents: Dict[Coord, Optional[Coord]],
                     start: Coord, goal: Coord) -> List[Coord]:
    """Walk predecessors from goal back to start. Empty if goal was never reached."""
    if goal not in parents:
        return []
    path: List[Coord] = []
    node: Optional[Coord] = goal
    while node is not None:
        path.append(node)
        if node == start:
            break
        node = parents[node]
    if path[-1] != start:
        return []
    path.reverse()
    return path


def prepare(grid: GridLike, start: Optional[Coord], goal: Optional[Coord]
            ) -> Tuple[GridSnapshot, Coord, Coord]:
    """
    Snapshot the grid and resolve/validate the endpoints.
    Missing start/goal fall back to the grid's START/GOAL cells.
    """
    if isinstance(grid, GridModel):
        grid = grid.snapshot()
    elif not isinstance(grid, GridSnapshot):
        raise TypeError(f"Expected GridModel or GridSnapshot, got {type(grid).__name__}")

    start = grid.start if start is None else start
    goal = grid.goal if goal is None else goal
    for name, coord in (("start", start), ("goal", goal)):
        if coord is None:
            raise SearchPreconditionError(f"Set both start and goal points ({name} is missing).")
        if not is_in_bounds(grid, coord):
            raise SearchPreconditionError(
                f"{name.capitalize()} {tuple(coord)} is outside the {grid.rows}x{grid.cols} grid.")
        if not is_traversable(grid, coord):
            raise SearchPreconditionError(f"{name.capitalize()} {tuple(coord)} is on an obstacle.")
    return grid, (int(start[0]), int(start[1])), (int(goal[0]), int(goal[1]))

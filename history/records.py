#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run records: one persisted row per algorithm run.

Coordinate fields are stored as JSON text ("[0, 0]", "[[0, 1], [0, 2]]"),
the same text-column layout the history table has always used.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union

from grids.model import Coord, GridLike, GridModel
from planners import Algorithm, SearchResult, resolve_algorithm, search


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _pair(value, name: str) -> Coord:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a [row, col] pair, got {value!r}")
    return int(value[0]), int(value[1])


def _coord_list(items, name: str = "coordinate") -> List[Coord]:
    if not isinstance(items, (list, tuple)):
        raise ValueError(f"{name} must be a list of [row, col] pairs, got {items!r}")
    return [_pair(p, name) for p in items]


@dataclass
class RunRecord:
    algorithm: str
    start: Coord
    goal: Coord
    obstacles: List[Coord]
    path: List[Coord]
    path_length: int            # cells on the path (0 when no path)
    time_taken_ms: float
    created_at: str = field(default_factory=_utc_now)
    id: Optional[int] = None

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "algorithm": self.algorithm,
            "start_point": json.dumps(list(self.start)),
            "goal_point": json.dumps(list(self.goal)),
            "obstacles": json.dumps([list(p) for p in self.obstacles]),
            "path": json.dumps([list(p) for p in self.path]),
            "path_length": int(self.path_length),
            "time_taken": f"{self.time_taken_ms:.2f}",
            "created_at": self.created_at,
        }

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "RunRecord":
        """
        Inverse of to_row(). Coordinate fields may be JSON text or lists.

        Raises ValueError for a missing column or a malformed coordinate.
        """
        def _load(v):
            return json.loads(v) if isinstance(v, str) else v

        missing = [k for k in ("algorithm", "start_point", "goal_point") if row.get(k) is None]
        if missing:
            raise ValueError(f"Run record is missing {', '.join(missing)}")
        return cls(
            algorithm=str(row["algorithm"]),
            start=_pair(_load(row["start_point"]), "start_point"),
            goal=_pair(_load(row["goal_point"]), "goal_point"),
            obstacles=_coord_list(_load(row.get("obstacles") or "[]"), "obstacles"),
            path=_coord_list(_load(row.get("path") or "[]"), "path"),
            path_length=int(row.get("path_length") or 0),
            time_taken_ms=float(row.get("time_taken") or 0.0),
            created_at=row.get("created_at") or _utc_now(),
            id=None if row.get("id") is None else int(row["id"]),
        )


def timed_search(algorithm: Union[str, Algorithm], grid: GridLike,
                 start: Optional[Coord] = None,
                 goal: Optional[Coord] = None) -> Tuple[SearchResult, float]:
    """Run search() and return (result, elapsed milliseconds)."""
    t0 = time.perf_counter()
    result = search(algorithm, grid, start, goal)
    t1 = time.perf_counter()
    return result, (t1 - t0) * 1000.0


def build_run_record(algorithm: Union[str, Algorithm], grid: GridLike,
                     result: SearchResult, elapsed_ms: float,
                     start: Optional[Coord] = None,
                     goal: Optional[Coord] = None) -> RunRecord:
    if isinstance(grid, GridModel):
        grid = grid.snapshot()
    start = start if start is not None else (result.path[0] if result.path else grid.start)
    goal = goal if goal is not None else (result.path[-1] if result.path else grid.goal)
    if start is None or goal is None:
        raise ValueError("Run record needs both start and goal")
    return RunRecord(
        algorithm=resolve_algorithm(algorithm).value,
        start=(int(start[0]), int(start[1])),
        goal=(int(goal[0]), int(goal[1])),
        obstacles=grid.obstacles(),
        path=list(result.path),
        path_length=len(result.path),
        time_taken_ms=float(elapsed_ms),
    )

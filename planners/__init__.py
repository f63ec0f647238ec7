# -*- coding: utf-8 -*-
"""
Planners on grid snapshots with a unified API:
planner.plan(grid: GridSnapshot, start: (r,c) | None, goal: (r,c) | None)
  -> SearchResult(path, visited_order, algorithm)

search(algorithm, grid, start, goal) is the single entry point used by the
CLIs, the history service and the visualizer.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional, Type, Union

from grids.model import Coord, GridLike
from .a_star import AStarPlanner
from .dijkstra import DijkstraPlanner
from .bfs import BFSPlanner
from .dfs import DFSPlanner
from .common import (
    NEIGHBOR_DELTAS,
    SearchPreconditionError,
    SearchResult,
    SearchStatus,
    manhattan,
    neighbors,
    reconstruct_path,
)


class Algorithm(str, Enum):
    BFS = "BFS"
    DFS = "DFS"
    DIJKSTRA = "DIJKSTRA"
    ASTAR = "ASTAR"


# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "bfs": BFSPlanner,
    "dfs": DFSPlanner,
    "dijkstra": DijkstraPlanner,
    "a_star": AStarPlanner,
}

_ALIASES = {
    "astar": "a_star",
    "a*": "a_star",
    "ucs": "dijkstra",
    "uniform_cost": "dijkstra",
}

_BY_ALGORITHM = {
    Algorithm.BFS: "bfs",
    Algorithm.DFS: "dfs",
    Algorithm.DIJKSTRA: "dijkstra",
    Algorithm.ASTAR: "a_star",
}


def resolve_algorithm(name: Union[str, Algorithm]) -> Algorithm:
    """Map a planner name, alias or Algorithm to the Algorithm enum."""
    if isinstance(name, Algorithm):
        return name
    key = str(name).strip().lower().replace("-", "_")
    key = _ALIASES.get(key, key)
    for algo, pname in _BY_ALGORITHM.items():
        if key == pname:
            return algo
    raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")


def get_planner(name: Union[str, Algorithm], **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str or Algorithm
        One of: 'bfs', 'dfs', 'dijkstra', 'a_star' (aliases: 'astar', 'a*', 'ucs')
    kwargs : dict
        Passed to the planner constructor

    Returns
    -------
    planner instance
    """
    algo = resolve_algorithm(name)
    return PLANNERS[_BY_ALGORITHM[algo]](**kwargs)


def search(algorithm: Union[str, Algorithm], grid: GridLike,
           start: Optional[Coord] = None, goal: Optional[Coord] = None) -> SearchResult:
    """Run one algorithm to completion on a snapshot of `grid`."""
    return get_planner(algorithm).plan(grid, start, goal)


__all__ = [
    "Algorithm",
    "AStarPlanner",
    "DijkstraPlanner",
    "BFSPlanner",
    "DFSPlanner",
    "NEIGHBOR_DELTAS",
    "PLANNERS",
    "SearchPreconditionError",
    "SearchResult",
    "SearchStatus",
    "get_planner",
    "manhattan",
    "neighbors",
    "reconstruct_path",
    "resolve_algorithm",
    "search",
]

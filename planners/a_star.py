#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected grids.
- Obstacles are CellRole.OBSTACLE cells; everything else is free.
- Heuristic: Manhattan distance (admissible and consistent here).
- Edge cost: 1 per move.
- Frontier order: lowest f = g + h, then lowest g, then insertion order.

Returns a SearchResult; path is empty when the goal is unreachable.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Set, Tuple
import heapq
import itertools

from grids.model import Coord, GridLike
from .common import SearchResult, manhattan, neighbors, prepare, reconstruct_path

STEP_COST = 1


class AStarPlanner:
    name = "ASTAR"

    @staticmethod
    def _heuristic(a: Coord, b: Coord) -> int:
        return manhattan(a, b)

    def plan(self, grid: GridLike, start: Optional[Coord] = None,
             goal: Optional[Coord] = None) -> SearchResult:
        grid, start, goal = prepare(grid, start, goal)

        seq = itertools.count()
        g: Dict[Coord, int] = {start: 0}
        parents: Dict[Coord, Optional[Coord]] = {start: None}
        closed: Set[Coord] = set()
        visited_order: List[Coord] = []

        pq: List[Tuple[int, int, int, Coord]] = []
        heapq.heappush(pq, (self._heuristic(start, goal), 0, next(seq), start))

        while pq:
            _, g_val, _, node = heapq.heappop(pq)

            # Skip stale entries
            if node in closed:
                continue
            closed.add(node)
            visited_order.append(node)

            if node == goal:
                path = reconstruct_path(parents, start, goal)
                return SearchResult(tuple(path), tuple(visited_order), self.name)

            for nxt in neighbors(grid, node):
                if nxt in closed:
                    continue
                tentative_g = g_val + STEP_COST
                if tentative_g < g.get(nxt, float("inf")):
                    g[nxt] = tentative_g
                    parents[nxt] = node
                    f_val = tentative_g + self._heuristic(nxt, goal)
                    heapq.heappush(pq, (f_val, tentative_g, next(seq), nxt))

        return SearchResult((), tuple(visited_order), self.name)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra (uniform-cost) planner for 4-connected grids.
- Unit edge cost; no heuristic (A* with h=0).
- Heap entries are (g, seq, cell): equal costs pop in insertion order,
  which follows the fixed neighbor order.
- A cell's cost/parent change only on a strictly cheaper path.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Set, Tuple
import heapq
import itertools

from grids.model import Coord, GridLike
from .common import SearchResult, neighbors, prepare, reconstruct_path

STEP_COST = 1


class DijkstraPlanner:
    name = "DIJKSTRA"

    def plan(self, grid: GridLike, start: Optional[Coord] = None,
             goal: Optional[Coord] = None) -> SearchResult:
        grid, start, goal = prepare(grid, start, goal)

        seq = itertools.count()
        dist: Dict[Coord, int] = {start: 0}
        parents: Dict[Coord, Optional[Coord]] = {start: None}
        closed: Set[Coord] = set()
        visited_order: List[Coord] = []

        pq: List[Tuple[int, int, Coord]] = [(0, next(seq), start)]

        while pq:
            d, _, node = heapq.heappop(pq)
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
                nd = d + STEP_COST
                if nd < dist.get(nxt, float("inf")):
                    dist[nxt] = nd
                    parents[nxt] = node
                    heapq.heappush(pq, (nd, next(seq), nxt))

        return SearchResult((), tuple(visited_order), self.name)

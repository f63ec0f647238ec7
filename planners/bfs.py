#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- 4-connected grid, neighbors in up/down/left/right order.
- FIFO frontier; a cell is queued at most once.
- visited_order is dequeue order; stops when the goal is dequeued.
"""

from __future__ import annotations
from typing import Dict, List, Optional
from collections import deque

from grids.model import Coord, GridLike
from .common import SearchResult, neighbors, prepare, reconstruct_path


class BFSPlanner:
    name = "BFS"

    def plan(self, grid: GridLike, start: Optional[Coord] = None,
             goal: Optional[Coord] = None) -> SearchResult:
        grid, start, goal = prepare(grid, start, goal)

        parents: Dict[Coord, Optional[Coord]] = {start: None}
        visited_order: List[Coord] = []
        dq = deque([start])

        while dq:
            node = dq.popleft()
            visited_order.append(node)
            if node == goal:
                path = reconstruct_path(parents, start, goal)
                return SearchResult(tuple(path), tuple(visited_order), self.name)
            for nxt in neighbors(grid, node):
                if nxt in parents:
                    continue
                parents[nxt] = node
                dq.append(nxt)

        return SearchResult((), tuple(visited_order), self.name)

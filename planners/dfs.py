#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search planner (not optimal, but useful as a baseline).
- 4-connected grid.
- LIFO frontier: every unexpanded neighbor is pushed in up, down, left,
  right order, so the right neighbor (pushed last) is explored first and
  one branch is followed to exhaustion before backtracking. This is what
  gives DFS its long, winding paths.
- A cell is marked visited when it is popped and expanded; stale stack
  entries for already expanded cells are skipped, so the search terminates
  on any grid.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Set, Tuple

from grids.model import Coord, GridLike
from .common import SearchResult, neighbors, prepare, reconstruct_path


class DFSPlanner:
    name = "DFS"

    def plan(self, grid: GridLike, start: Optional[Coord] = None,
             goal: Optional[Coord] = None) -> SearchResult:
        """
        Find a path from start to goal using depth-first search.

        Args:
            grid: GridSnapshot (or GridModel, which is snapshotted first)
            start: (row, col) starting position, defaults to the grid's start cell
            goal: (row, col) goal position, defaults to the grid's goal cell

        Returns:
            SearchResult; path is empty if the goal is unreachable
        """
        grid, start, goal = prepare(grid, start, goal)

        parents: Dict[Coord, Optional[Coord]] = {}
        expanded: Set[Coord] = set()
        visited_order: List[Coord] = []
        stack: List[Tuple[Coord, Optional[Coord]]] = [(start, None)]

        while stack:
            node, parent = stack.pop()
            if node in expanded:
                continue
            expanded.add(node)
            parents[node] = parent
            visited_order.append(node)
            if node == goal:
                path = reconstruct_path(parents, start, goal)
                return SearchResult(tuple(path), tuple(visited_order), self.name)

            # Explore neighbors
            for nxt in neighbors(grid, node):
                if nxt not in expanded:
                    stack.append((nxt, node))

        return SearchResult((), tuple(visited_order), self.name)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
model.py
--------
Grid model for the pathfinding visualizer.

Two views of the same data:
- GridModel    : mutable, owned by the caller (UI / CLI), edited cell by cell.
- GridSnapshot : frozen, read-only copy handed to the search algorithms.

Each cell holds exactly one CellRole. The model keeps the invariant that at
most one cell is START and at most one is GOAL; placing a role on a cell
replaces whatever role it had before.

Grid convention: roles[r, c] is the role of row r, column c (0-indexed).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

Coord = Tuple[int, int]


class GridError(ValueError):
    """Bad grid construction (shape, coordinates, map text)."""


class InvalidGridError(GridError):
    """Grid violates the single start / single goal invariant."""


class CellRole(IntEnum):
    EMPTY = 0
    START = 1
    GOAL = 2
    OBSTACLE = 3


# ASCII map symbols used by from_text / to_text
_SYMBOLS = {
    ".": CellRole.EMPTY,
    "S": CellRole.START,
    "G": CellRole.GOAL,
    "#": CellRole.OBSTACLE,
}
_CHARS = {role: ch for ch, role in _SYMBOLS.items()}


def _as_coord(coord) -> Coord:
    r, c = coord
    return (int(r), int(c))


def _find_role(roles: np.ndarray, role: CellRole) -> Optional[Coord]:
    hits = np.argwhere(roles == role)
    if hits.shape[0] == 0:
        return None
    return (int(hits[0, 0]), int(hits[0, 1]))


def _coords_of(roles: np.ndarray, role: CellRole) -> List[Coord]:
    return [(int(r), int(c)) for r, c in np.argwhere(roles == role)]


# ------------------------------- Snapshot ----------------------------------- #

@dataclass(frozen=True)
class GridSnapshot:
    """Immutable rows x cols arrangement of cell roles."""
    roles: np.ndarray   # (rows, cols) int8, read-only

    def __post_init__(self):
        arr = np.array(self.roles, dtype=np.int8, copy=True)
        if arr.ndim != 2 or arr.shape[0] < 1 or arr.shape[1] < 1:
            raise GridError(f"Grid must be a non-empty 2D array, got shape {arr.shape}")
        if arr.min() < CellRole.EMPTY or arr.max() > CellRole.OBSTACLE:
            raise GridError("Grid contains values outside the CellRole range")
        arr.setflags(write=False)
        object.__setattr__(self, "roles", arr)

    @classmethod
    def from_obstacles(cls, rows: int, cols: int,
                       obstacles: Iterable[Coord] = (),
                       start: Optional[Coord] = None,
                       goal: Optional[Coord] = None) -> "GridSnapshot":
        model = GridModel(rows, cols)
        for coord in obstacles:
            model.set_role(coord, CellRole.OBSTACLE)
        if start is not None:
            model.place_start(start)
        if goal is not None:
            model.place_goal(goal)
        return model.snapshot()

    @classmethod
    def from_occupancy(cls, occupancy: np.ndarray,
                       start: Optional[Coord] = None,
                       goal: Optional[Coord] = None) -> "GridSnapshot":
        """Build from a bool occupancy grid (True = obstacle)."""
        occ = np.asarray(occupancy, dtype=bool)
        if occ.ndim != 2:
            raise GridError(f"Occupancy grid must be 2D, got shape {occ.shape}")
        model = GridModel(*occ.shape)
        model.roles[occ] = CellRole.OBSTACLE
        if start is not None:
            model.place_start(start)
        if goal is not None:
            model.place_goal(goal)
        return model.snapshot()

    @classmethod
    def from_text(cls, text: str) -> "GridSnapshot":
        """
        Parse an ASCII map, one row per line:
            '.' empty, '#' obstacle, 'S' start, 'G' goal
        Blank lines and surrounding whitespace are ignored.
        """
        lines = [ln.strip() for ln in text.strip().splitlines() if ln.strip()]
        if not lines:
            raise GridError("Empty map text")
        width = len(lines[0])
        if any(len(ln) != width for ln in lines):
            raise GridError("Map rows have different lengths")
        roles = np.zeros((len(lines), width), dtype=np.int8)
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch not in _SYMBOLS:
                    raise GridError(f"Unknown map symbol {ch!r} at ({r}, {c})")
                roles[r, c] = _SYMBOLS[ch]
        snap = cls(roles)
        validate_grid(snap)
        return snap

    @property
    def shape(self) -> Tuple[int, int]:
        return (int(self.roles.shape[0]), int(self.roles.shape[1]))

    @property
    def rows(self) -> int:
        return int(self.roles.shape[0])

    @property
    def cols(self) -> int:
        return int(self.roles.shape[1])

    @property
    def start(self) -> Optional[Coord]:
        return _find_role(self.roles, CellRole.START)

    @property
    def goal(self) -> Optional[Coord]:
        return _find_role(self.roles, CellRole.GOAL)

    def obstacles(self) -> List[Coord]:
        """Obstacle coordinates in row-major order."""
        return _coords_of(self.roles, CellRole.OBSTACLE)

    def occupancy(self) -> np.ndarray:
        return self.roles == CellRole.OBSTACLE

    def to_text(self) -> str:
        return "\n".join(
            "".join(_CHARS[CellRole(int(v))] for v in row) for row in self.roles
        )

    def __eq__(self, other):
        if not isinstance(other, GridSnapshot):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.roles, other.roles))

    def __hash__(self):
        return hash((self.shape, self.roles.tobytes()))


# -------------------------------- Model ------------------------------------- #

class GridModel:
    """
    Mutable grid edited by the caller. Hand `snapshot()` to the planners;
    never share the model itself with a running search.
    """

    def __init__(self, rows: int = 10, cols: int = 10):
        if rows < 1 or cols < 1:
            raise GridError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.roles = np.zeros((int(rows), int(cols)), dtype=np.int8)

    @property
    def shape(self) -> Tuple[int, int]:
        return (int(self.roles.shape[0]), int(self.roles.shape[1]))

    @property
    def rows(self) -> int:
        return int(self.roles.shape[0])

    @property
    def cols(self) -> int:
        return int(self.roles.shape[1])

    @property
    def start(self) -> Optional[Coord]:
        return _find_role(self.roles, CellRole.START)

    @property
    def goal(self) -> Optional[Coord]:
        return _find_role(self.roles, CellRole.GOAL)

    def _check(self, coord) -> Coord:
        coord = _as_coord(coord)
        if not is_in_bounds(self, coord):
            raise GridError(f"Coordinate {coord} outside {self.rows}x{self.cols} grid")
        return coord

    def set_role(self, coord: Coord, role: CellRole) -> None:
        """Overwrite one cell. START/GOAL are moved, never duplicated."""
        r, c = self._check(coord)
        role = CellRole(role)
        if role in (CellRole.START, CellRole.GOAL):
            self.roles[self.roles == role] = CellRole.EMPTY
        self.roles[r, c] = role

    def place_start(self, coord: Coord) -> None:
        self.set_role(coord, CellRole.START)

    def place_goal(self, coord: Coord) -> None:
        self.set_role(coord, CellRole.GOAL)

    def toggle_obstacle(self, coord: Coord) -> CellRole:
        """Obstacle tool: removes an obstacle, otherwise places one (replacing start/goal)."""
        r, c = self._check(coord)
        if self.roles[r, c] == CellRole.OBSTACLE:
            self.roles[r, c] = CellRole.EMPTY
        else:
            self.roles[r, c] = CellRole.OBSTACLE
        return CellRole(int(self.roles[r, c]))

    def clear_cell(self, coord: Coord) -> None:
        r, c = self._check(coord)
        self.roles[r, c] = CellRole.EMPTY

    def clear(self) -> None:
        self.roles[:] = CellRole.EMPTY

    def find(self, role: CellRole) -> Optional[Coord]:
        return _find_role(self.roles, CellRole(role))

    def obstacles(self) -> List[Coord]:
        return _coords_of(self.roles, CellRole.OBSTACLE)

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(self.roles)

    def __repr__(self):
        return f"GridModel({self.rows}x{self.cols}, start={self.start}, goal={self.goal}, obstacles={len(self.obstacles())})"


GridLike = Union[GridModel, GridSnapshot]


# ---------------------------- Lookup contract ------------------------------- #

def is_in_bounds(grid: GridLike, coord: Coord) -> bool:
    r, c = coord
    rows, cols = grid.roles.shape
    return 0 <= r < rows and 0 <= c < cols


def cell_role(grid: GridLike, coord: Coord) -> Optional[CellRole]:
    """Role at `coord`, or None when the coordinate is off the grid."""
    if not is_in_bounds(grid, coord):
        return None
    r, c = coord
    return CellRole(int(grid.roles[r, c]))


def is_traversable(grid: GridLike, coord: Coord) -> bool:
    if not is_in_bounds(grid, coord):
        return False
    r, c = coord
    return grid.roles[r, c] != CellRole.OBSTACLE


def validate_grid(grid: GridLike) -> None:
    """Raise InvalidGridError if more than one START or GOAL cell exists."""
    for role in (CellRole.START, CellRole.GOAL):
        n = int(np.count_nonzero(grid.roles == role))
        if n > 1:
            raise InvalidGridError(f"Grid has {n} {role.name.lower()} cells; at most one allowed")

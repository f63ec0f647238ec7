# -*- coding: utf-8 -*-
"""
Grid model and generation.
Exposes:
- CellRole, GridModel, GridSnapshot (model.py)
- cell_role / is_in_bounds / is_traversable / validate_grid
- generate_grid, reachable_region (generator.py)
"""

from __future__ import annotations

from .model import (
    Coord,
    CellRole,
    GridError,
    GridLike,
    GridModel,
    GridSnapshot,
    InvalidGridError,
    cell_role,
    is_in_bounds,
    is_traversable,
    validate_grid,
)
from .generator import generate_grid, is_reachable, reachable_region

__all__ = [
    "Coord",
    "CellRole",
    "GridError",
    "GridLike",
    "GridModel",
    "GridSnapshot",
    "InvalidGridError",
    "cell_role",
    "is_in_bounds",
    "is_traversable",
    "validate_grid",
    "generate_grid",
    "is_reachable",
    "reachable_region",
]

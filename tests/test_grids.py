#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from grids import (
    CellRole, GridError, GridModel, GridSnapshot, InvalidGridError,
    cell_role, generate_grid, is_in_bounds, is_reachable, is_traversable,
    reachable_region, validate_grid,
)

MAP = """
S..#.
.#.#.
.#...
...#G
"""


def test_single_start_and_goal_are_moved_not_duplicated():
    model = GridModel(5, 5)
    model.place_start((0, 0))
    model.place_start((2, 3))
    model.place_goal((4, 4))
    model.place_goal((1, 1))
    assert model.start == (2, 3)
    assert model.goal == (1, 1)
    assert np.count_nonzero(model.roles == CellRole.START) == 1
    assert np.count_nonzero(model.roles == CellRole.GOAL) == 1


def test_toggle_obstacle_replaces_start_and_toggles_back():
    model = GridModel(3, 3)
    model.place_start((1, 1))
    assert model.toggle_obstacle((1, 1)) is CellRole.OBSTACLE
    assert model.start is None
    assert model.toggle_obstacle((1, 1)) is CellRole.EMPTY
    assert model.obstacles() == []


def test_placing_start_on_obstacle_clears_obstacle():
    model = GridModel(3, 3)
    model.toggle_obstacle((0, 2))
    model.place_start((0, 2))
    assert cell_role(model, (0, 2)) is CellRole.START
    assert model.obstacles() == []


def test_model_rejects_out_of_bounds_edits():
    model = GridModel(3, 4)
    with pytest.raises(GridError):
        model.place_goal((3, 0))
    with pytest.raises(GridError):
        model.toggle_obstacle((0, -1))
    with pytest.raises(GridError):
        GridModel(0, 5)


def test_lookup_contract_out_of_bounds_is_a_signal_not_an_error():
    grid = GridSnapshot.from_obstacles(2, 2, obstacles=[(0, 1)])
    assert cell_role(grid, (5, 5)) is None
    assert not is_in_bounds(grid, (-1, 0))
    assert not is_traversable(grid, (2, 0))
    assert not is_traversable(grid, (0, 1))
    assert is_traversable(grid, (1, 1))
    assert cell_role(grid, (0, 1)) is CellRole.OBSTACLE


def test_snapshot_is_read_only_and_detached_from_model():
    model = GridModel(3, 3)
    model.place_start((0, 0))
    snap = model.snapshot()
    model.toggle_obstacle((1, 1))
    model.place_start((2, 2))
    assert snap.start == (0, 0)
    assert snap.obstacles() == []
    assert not snap.roles.flags.writeable
    with pytest.raises(ValueError):
        snap.roles[0, 0] = CellRole.OBSTACLE


def test_from_text_and_back():
    grid = GridSnapshot.from_text(MAP)
    assert grid.shape == (4, 5)
    assert grid.start == (0, 0)
    assert grid.goal == (3, 4)
    assert (1, 1) in grid.obstacles()
    assert grid.to_text() == MAP.strip()
    assert GridSnapshot.from_text(grid.to_text()) == grid


def test_from_text_errors():
    with pytest.raises(GridError):
        GridSnapshot.from_text("")
    with pytest.raises(GridError):
        GridSnapshot.from_text("S..\n..")
    with pytest.raises(GridError):
        GridSnapshot.from_text("S.x\n..G")
    with pytest.raises(InvalidGridError):
        GridSnapshot.from_text("S.S\n..G")


def test_validate_grid_flags_two_goals():
    roles = np.zeros((3, 3), dtype=np.int8)
    roles[0, 0] = CellRole.GOAL
    roles[2, 2] = CellRole.GOAL
    with pytest.raises(InvalidGridError):
        validate_grid(GridSnapshot(roles))


def test_from_occupancy_marks_obstacles():
    occ = np.zeros((4, 4), dtype=bool)
    occ[1, :3] = True
    grid = GridSnapshot.from_occupancy(occ, start=(0, 0), goal=(3, 3))
    assert grid.obstacles() == [(1, 0), (1, 1), (1, 2)]
    assert np.array_equal(grid.occupancy(), occ)


# ------------------------------ generator ----------------------------------- #

def test_reachable_region_uses_four_connectivity():
    # diagonal gap does not connect
    grid = GridSnapshot.from_text("""
    S#.
    #..
    ..G
    """)
    assert reachable_region(grid, (0, 0)) == {(0, 0)}
    assert not is_reachable(grid, (0, 0), (2, 2))
    assert reachable_region(grid, (0, 1)) == set()


def test_generate_success_and_failure():
    for seed in range(5):
        rng = np.random.default_rng(seed)
        ok = generate_grid(12, 12, density=0.3, ensure_status="success", rng=rng)
        assert is_reachable(ok, ok.start, ok.goal)
        bad = generate_grid(12, 12, density=0.35, ensure_status="failure", rng=rng)
        assert not is_reachable(bad, bad.start, bad.goal)


def test_generate_keeps_endpoints_free_and_is_seeded():
    a = generate_grid(10, 10, density=0.9, start=(2, 3), goal=(7, 1), rng=np.random.default_rng(3))
    b = generate_grid(10, 10, density=0.9, start=(2, 3), goal=(7, 1), rng=np.random.default_rng(3))
    assert a == b
    assert a.start == (2, 3) and a.goal == (7, 1)


def test_generate_bad_arguments():
    with pytest.raises(GridError):
        generate_grid(5, 5, ensure_status="maybe")
    with pytest.raises(GridError):
        generate_grid(5, 5, density=1.5)
    with pytest.raises(GridError):
        # fully blocked grid can never be solvable
        generate_grid(5, 5, density=1.0, ensure_status="success", max_tries=3)

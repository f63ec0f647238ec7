import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from grids import GridModel, GridSnapshot, generate_grid, reachable_region, is_traversable
from planners import (
    PLANNERS, Algorithm, SearchPreconditionError, SearchStatus,
    get_planner, neighbors, reconstruct_path, search,
)

ALL = list(Algorithm)
OPTIMAL = [Algorithm.BFS, Algorithm.DIJKSTRA, Algorithm.ASTAR]


def _assert_valid_path(grid, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for (r0, c0), (r1, c1) in zip(path[:-1], path[1:]):
        assert abs(r1 - r0) + abs(c1 - c0) == 1
        assert is_traversable(grid, (r1, c1))


# ---------------------------- shared utilities ------------------------------ #

def test_neighbors_fixed_order_up_down_left_right():
    grid = GridSnapshot.from_obstacles(3, 3)
    assert list(neighbors(grid, (1, 1))) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_skip_obstacles_and_edges():
    grid = GridSnapshot.from_obstacles(3, 3, obstacles=[(1, 0)])
    assert list(neighbors(grid, (0, 0))) == [(0, 1)]


def test_reconstruct_path_missing_goal_is_empty():
    parents = {(0, 0): None, (0, 1): (0, 0)}
    assert reconstruct_path(parents, (0, 0), (0, 1)) == [(0, 0), (0, 1)]
    assert reconstruct_path(parents, (0, 0), (5, 5)) == []


# ------------------------------ scenarios ----------------------------------- #

def test_detour_scenario_all_optimal_planners():
    grid = GridSnapshot.from_obstacles(5, 5, obstacles=[(0, 1), (0, 2), (0, 3)],
                                       start=(0, 0), goal=(0, 4))
    expected = [(0, 0), (1, 0), (1, 1), (1, 2), (1, 3), (1, 4), (0, 4)]
    for algo in OPTIMAL:
        res = search(algo, grid)
        assert res.status is SearchStatus.SUCCEEDED
        assert res.num_moves == 6
        assert list(res.path) == expected


def test_detour_scenario_dfs_finds_valid_path():
    grid = GridSnapshot.from_obstacles(5, 5, obstacles=[(0, 1), (0, 2), (0, 3)],
                                       start=(0, 0), goal=(0, 4))
    res = search("dfs", grid)
    assert res.success
    _assert_valid_path(grid, res.path, (0, 0), (0, 4))
    assert res.num_moves >= 6


@pytest.mark.parametrize("algo", ALL)
def test_start_equals_goal(algo):
    grid = GridSnapshot.from_obstacles(4, 4, obstacles=[(1, 1)])
    res = search(algo, grid, (2, 2), (2, 2))
    assert list(res.path) == [(2, 2)]
    assert list(res.visited_order) == [(2, 2)]
    assert res.num_moves == 0


@pytest.mark.parametrize("algo", ALL)
def test_enclosed_goal_explores_start_component(algo):
    grid = GridSnapshot.from_obstacles(5, 5, obstacles=[(3, 4), (4, 3)],
                                       start=(0, 0), goal=(4, 4))
    res = search(algo, grid)
    assert res.path == ()
    assert res.status is SearchStatus.EXHAUSTED
    assert len(res.visited_order) == 22
    assert set(res.visited_order) == reachable_region(grid, (0, 0))


def test_bfs_visit_order_on_open_grid():
    grid = GridSnapshot.from_obstacles(3, 3, start=(0, 0), goal=(2, 2))
    res = search(Algorithm.BFS, grid)
    assert list(res.visited_order) == [
        (0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2), (2, 1), (1, 2), (2, 2)]
    assert list(res.path) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_dfs_explores_last_pushed_neighbor_first():
    grid = GridSnapshot.from_obstacles(3, 3, start=(0, 0), goal=(2, 2))
    res = search(Algorithm.DFS, grid)
    # right is pushed last, so it is popped first; cells are marked on expansion
    expected = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert list(res.visited_order) == expected
    assert list(res.path) == expected


def test_dfs_parent_is_deepest_pusher():
    # (1, 1) is pushed from (0, 1) first, then again from (1, 2); the later entry wins
    grid = GridSnapshot.from_obstacles(2, 3, start=(0, 0), goal=(1, 0))
    res = search(Algorithm.DFS, grid)
    assert list(res.visited_order) == [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0)]
    assert list(res.path) == [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0)]


def test_dijkstra_matches_bfs_order_with_unit_costs():
    grid = GridSnapshot.from_obstacles(3, 3, start=(0, 0), goal=(2, 2))
    bfs = search("bfs", grid)
    dij = search("dijkstra", grid)
    assert dij.visited_order == bfs.visited_order
    assert dij.path == bfs.path


def test_astar_stays_on_straight_corridor():
    grid = GridSnapshot.from_obstacles(10, 10, start=(0, 0), goal=(0, 9))
    res = search("a_star", grid)
    assert list(res.visited_order) == [(0, c) for c in range(10)]
    assert res.num_moves == 9


def test_astar_expands_no_more_than_dijkstra():
    rng = np.random.default_rng(5)
    grid = generate_grid(15, 15, density=0.2, ensure_status="success", rng=rng)
    a = search("a_star", grid)
    d = search("dijkstra", grid)
    assert a.num_moves == d.num_moves
    assert a.num_expanded <= d.num_expanded


# ------------------------------ properties ---------------------------------- #

@pytest.mark.parametrize("seed", range(25))
def test_random_grid_properties(seed):
    rng = np.random.default_rng(seed)
    grid = generate_grid(12, 12, density=0.3, ensure_status="any", rng=rng)
    start, goal = grid.start, grid.goal
    results = {algo: search(algo, grid) for algo in ALL}

    for algo, res in results.items():
        assert len(set(res.visited_order)) == len(res.visited_order)
        assert res.visited_order[0] == start
        if res.path:
            _assert_valid_path(grid, res.path, start, goal)
            assert res.visited_order[-1] == goal
        else:
            assert set(res.visited_order) == reachable_region(grid, start)

    lengths = {results[a].num_moves for a in OPTIMAL}
    assert len(lengths) == 1
    assert {bool(r.path) for r in results.values()} in ({True}, {False})
    if results[Algorithm.BFS].path:
        assert results[Algorithm.DFS].num_moves >= results[Algorithm.BFS].num_moves


@pytest.mark.parametrize("algo", ALL)
def test_repeat_runs_are_identical(algo):
    rng = np.random.default_rng(11)
    grid = generate_grid(20, 20, density=0.25, ensure_status="success", rng=rng)
    first = search(algo, grid)
    second = search(algo, grid)
    assert first.path == second.path
    assert first.visited_order == second.visited_order


def test_model_is_snapshotted_and_untouched():
    model = GridModel(6, 6)
    model.place_start((0, 0))
    model.place_goal((5, 5))
    model.set_role((2, 2), 3)
    before = model.roles.copy()
    for algo in ALL:
        search(algo, model)
    assert np.array_equal(model.roles, before)


def test_paths_are_plain_int_tuples():
    grid = GridSnapshot.from_obstacles(4, 4, start=(0, 0), goal=(3, 3))
    res = search("bfs", grid)
    assert all(type(r) is int and type(c) is int for r, c in res.path)
    d = res.to_dict()
    assert d["path"][0] == [0, 0] and d["status"] == "succeeded"


# ------------------------------ preconditions ------------------------------- #

@pytest.mark.parametrize("algo", ALL)
def test_missing_endpoint_is_rejected(algo):
    grid = GridSnapshot.from_obstacles(4, 4, start=(0, 0))
    with pytest.raises(SearchPreconditionError):
        search(algo, grid)


@pytest.mark.parametrize("algo", ALL)
def test_out_of_bounds_endpoint_is_rejected(algo):
    grid = GridSnapshot.from_obstacles(4, 4)
    with pytest.raises(SearchPreconditionError):
        search(algo, grid, (0, 0), (4, 0))
    with pytest.raises(SearchPreconditionError):
        search(algo, grid, (-1, 0), (3, 3))


@pytest.mark.parametrize("algo", ALL)
def test_endpoint_on_obstacle_is_rejected(algo):
    grid = GridSnapshot.from_obstacles(4, 4, obstacles=[(3, 3)])
    with pytest.raises(SearchPreconditionError):
        search(algo, grid, (0, 0), (3, 3))


def test_get_planner_names_and_aliases():
    assert set(PLANNERS) == {"bfs", "dfs", "dijkstra", "a_star"}
    assert get_planner("A*").name == "ASTAR"
    assert get_planner("astar").name == "ASTAR"
    assert get_planner("UCS").name == "DIJKSTRA"
    assert get_planner(Algorithm.DFS).name == "DFS"
    with pytest.raises(ValueError):
        get_planner("theta_star")

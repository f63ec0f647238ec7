#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from fastapi.testclient import TestClient

from history import HistoryStore
from history.service import create_app
from settings import Settings


@pytest.fixture
def client(tmp_path):
    store = HistoryStore(str(tmp_path / "history.jsonl"))
    app = create_app(store=store, settings=Settings(history_path=store.path))
    return TestClient(app)


def _search_body(**kw):
    body = {
        "algorithm": "BFS",
        "rows": 5, "cols": 5,
        "start": [0, 0], "goal": [0, 4],
        "obstacles": [[0, 1], [0, 2], [0, 3]],
    }
    body.update(kw)
    return body


def test_post_and_list_paths(client):
    row = {
        "algorithm": "DFS",
        "start_point": "[0, 0]",
        "goal_point": "[2, 2]",
        "obstacles": "[[1, 1]]",
        "path": "[[0, 0], [0, 1], [0, 2], [1, 2], [2, 2]]",
        "path_length": 5,
        "time_taken": "0.12",
    }
    r = client.post("/api/path", json=row)
    assert r.status_code == 201
    assert r.json() == {"id": 1}
    r = client.post("/api/path", json=dict(row, algorithm="BFS"))
    assert r.json() == {"id": 2}

    rows = client.get("/api/paths").json()
    assert [x["id"] for x in rows] == [2, 1]
    assert rows[1]["path_length"] == 5
    assert rows[1]["time_taken"] == "0.12"


def test_post_bad_row_is_rejected(client):
    r = client.post("/api/path", json={"algorithm": "BFS", "start_point": "oops", "goal_point": "[1, 1]"})
    assert r.status_code == 422


def test_post_row_with_non_pair_coordinate_is_rejected(client):
    r = client.post("/api/path", json={"algorithm": "BFS", "start_point": "{}", "goal_point": "[1, 1]"})
    assert r.status_code == 422
    r = client.post("/api/path", json={"algorithm": "BFS", "start_point": "[0, 0]", "goal_point": "[1, 1]",
                                       "path": "[[0, 0], 7]"})
    assert r.status_code == 422
    assert client.get("/api/paths").json() == []


def test_delete_paths(client):
    client.post("/api/search", json=_search_body())
    assert len(client.get("/api/paths").json()) == 1
    r = client.delete("/api/paths")
    assert r.json() == {"message": "Logs cleared."}
    assert client.get("/api/paths").json() == []


def test_search_runs_and_stores(client):
    r = client.post("/api/search", json=_search_body(algorithm="ASTAR"))
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "succeeded"
    assert data["path_length"] == 7
    assert data["path"][-1] == [0, 4]
    assert data["id"] == 1
    stored = client.get("/api/paths").json()[0]
    assert stored["algorithm"] == "ASTAR"
    assert stored["obstacles"] == "[[0, 1], [0, 2], [0, 3]]"


def test_search_no_path_is_not_an_error(client):
    body = _search_body(goal=[4, 4], obstacles=[[3, 4], [4, 3]], save=False)
    r = client.post("/api/search", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "exhausted"
    assert data["path"] == []
    assert len(data["visited_order"]) == 22
    assert data["id"] is None


def test_search_invalid_invocation(client):
    assert client.post("/api/search", json=_search_body(start=[9, 9])).status_code == 422
    assert client.post("/api/search", json=_search_body(algorithm="theta")).status_code == 422
    assert client.post("/api/search", json=_search_body(goal=[1])).status_code == 422

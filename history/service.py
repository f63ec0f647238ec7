#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
History API (FastAPI).

    POST   /api/path    store one run record          -> 201 {"id": n}
    GET    /api/paths   all records, newest first
    DELETE /api/paths   clear the history             -> {"message": "Logs cleared."}
    POST   /api/search  run a planner on a submitted grid and store the run

Serve with:  uvicorn history.service:app --port 4000
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from grids.model import GridError, GridSnapshot
from planners import SearchPreconditionError
from settings import Settings, load_settings
from .records import RunRecord, build_run_record, timed_search
from .store import HistoryStore


class PathRow(BaseModel):
    algorithm: str
    start_point: str
    goal_point: str
    obstacles: str = "[]"
    path: str = "[]"
    path_length: int = 0
    time_taken: str = "0.00"


class SearchRequest(BaseModel):
    algorithm: str
    rows: int = Field(10, ge=1, le=500)
    cols: int = Field(10, ge=1, le=500)
    start: List[int] = Field(..., min_length=2, max_length=2)
    goal: List[int] = Field(..., min_length=2, max_length=2)
    obstacles: List[List[int]] = []
    save: bool = True


def create_app(store: Optional[HistoryStore] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    store = store or HistoryStore(settings.history_path)

    app = FastAPI(title="navX history")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
        allow_credentials=True,
    )
    app.state.store = store

    @app.post("/api/path", status_code=201)
    def save_path(row: PathRow):
        try:
            record = RunRecord.from_row(row.model_dump())
        except (KeyError, ValueError, TypeError, IndexError) as e:
            raise HTTPException(status_code=422, detail=f"Bad run record: {e}")
        return {"id": store.add(record)}

    @app.get("/api/paths")
    def list_paths():
        return [rec.to_row() for rec in store.list()]

    @app.delete("/api/paths")
    def clear_paths():
        store.clear()
        return {"message": "Logs cleared."}

    @app.post("/api/search")
    def run_search(req: SearchRequest):
        start, goal = tuple(req.start), tuple(req.goal)
        try:
            obstacles = [tuple(p) for p in req.obstacles]
            grid = GridSnapshot.from_obstacles(req.rows, req.cols, obstacles, start=start, goal=goal)
            result, elapsed_ms = timed_search(req.algorithm, grid)
        except (GridError, SearchPreconditionError, ValueError) as e:
            raise HTTPException(status_code=422, detail=str(e))
        record = build_run_record(req.algorithm, grid, result, elapsed_ms, start=start, goal=goal)
        record_id = store.add(record) if req.save else None
        out = result.to_dict()
        out.update(id=record_id, path_length=record.path_length, time_taken=f"{elapsed_ms:.2f}")
        return out

    return app


app = create_app()

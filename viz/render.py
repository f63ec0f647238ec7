#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
render.py
---------
Matplotlib rendering of grids and search results, plus the replay
animation (expanded cells first, then the walk along the path).
"""

from __future__ import annotations
import os
from typing import Iterator, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation

from grids.model import CellRole, GridLike, GridModel
from planners import SearchResult

# --- Colors ------------------------------------------------------------------
EMPTY_RGB = (1.0, 1.0, 1.0)
OBSTACLE_RGB = (0.47, 0.33, 0.28)
VISITED_RGB = (0.73, 0.87, 0.98)
PATH_COLORS = {
    "BFS": "#2196F3",
    "DFS": "#9C27B0",
    "DIJKSTRA": "#FFC107",
    "ASTAR": "#FF9800",
}


def _roles(grid: GridLike) -> np.ndarray:
    if isinstance(grid, GridModel):
        grid = grid.snapshot()
    return np.asarray(grid.roles)


def _base_rgb(roles: np.ndarray) -> np.ndarray:
    H, W = roles.shape
    rgb = np.empty((H, W, 3), dtype=float)
    rgb[:] = EMPTY_RGB
    rgb[roles == CellRole.OBSTACLE] = OBSTACLE_RGB
    return rgb


def _draw_markers(ax, roles: np.ndarray):
    for role, color, label in ((CellRole.START, "lime", "S"), (CellRole.GOAL, "red", "G")):
        hits = np.argwhere(roles == role)
        for r, c in hits:
            ax.plot(c, r, marker="*", markersize=12, markeredgecolor="k", markerfacecolor=color, lw=0)
            ax.text(c + 0.2, r - 0.2, label, color="k", fontsize=8)


def render_grid(grid: GridLike, ax=None, result: Optional[SearchResult] = None, title=None):
    """
    Render a grid and (optionally) one search result.

    Layers:
      - background (white), obstacles (brown)
      - visited cells (light blue), path line colored per algorithm
      - start (green star), goal (red star)
    """
    roles = _roles(grid)
    H, W = roles.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(W / 2, 3), max(H / 2, 3)), dpi=100)

    rgb = _base_rgb(roles)
    if result is not None:
        for r, c in result.visited_order:
            if roles[r, c] == CellRole.EMPTY:
                rgb[r, c] = VISITED_RGB

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks(np.arange(-0.5, W, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, H, 1), minor=True)
    ax.grid(which="minor", color="#cccccc", lw=0.5)
    ax.set_xticks([]); ax.set_yticks([])

    if result is not None and result.path:
        rr, cc = zip(*result.path)
        ax.plot(cc, rr, color=PATH_COLORS.get(result.algorithm, "lime"), lw=2.5, alpha=0.9)

    _draw_markers(ax, roles)
    if title:
        ax.set_title(title)
    return ax


def replay_frames(result: SearchResult) -> Iterator[Tuple[str, Tuple[int, int]]]:
    """Replay order: every expanded cell, then the walk along the path."""
    for coord in result.visited_order:
        yield ("visit", coord)
    for coord in result.path:
        yield ("walk", coord)


def animate_search(grid: GridLike, result: SearchResult, interval_ms: int = 80, title=None):
    """FuncAnimation replaying replay_frames(result) on top of the grid."""
    roles = _roles(grid)
    H, W = roles.shape
    frames = list(replay_frames(result))

    fig, ax = plt.subplots(figsize=(max(W / 2, 3), max(H / 2, 3)), dpi=100)
    rgb = _base_rgb(roles)
    image = ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])
    _draw_markers(ax, roles)
    (robot,) = ax.plot([], [], marker="o", markersize=10, color="k", lw=0)
    (trail,) = ax.plot([], [], color=PATH_COLORS.get(result.algorithm, "lime"), lw=2.5)
    if title:
        ax.set_title(title)
    walked = []

    def _update(i):
        kind, (r, c) = frames[i]
        if i == 0:
            rgb[:] = _base_rgb(roles)
            walked.clear()
        if kind == "visit":
            if roles[r, c] == CellRole.EMPTY:
                rgb[r, c] = VISITED_RGB
            image.set_data(rgb)
        else:
            walked.append((r, c))
            robot.set_data([c], [r])
            trail.set_data([p[1] for p in walked], [p[0] for p in walked])
        return image, robot, trail

    anim = animation.FuncAnimation(fig, _update, frames=len(frames), interval=interval_ms,
                                   blit=False, repeat=False)
    return fig, anim


def save_figure(fig, path: str) -> str:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path

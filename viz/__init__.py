from .render import animate_search, render_grid, replay_frames, save_figure

__all__ = ["animate_search", "render_grid", "replay_frames", "save_figure"]

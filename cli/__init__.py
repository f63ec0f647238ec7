# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_search : run one planner (or all) on a map, obstacle list or random grid
- history    : list / export / clear saved runs
- compare    : benchmark all planners on random grids, write CSV
"""
__all__ = [
    "run_search",
    "history",
    "compare",
]

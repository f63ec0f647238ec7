# -*- coding: utf-8 -*-
"""CSV export of run history (pandas)."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .records import RunRecord

CSV_COLUMNS = ["Algorithm", "Start", "Goal", "Path", "Path Length", "Time Taken (ms)"]


def records_to_frame(records: Iterable[RunRecord]) -> pd.DataFrame:
    rows = []
    for rec in records:
        row = rec.to_row()
        rows.append({
            "Algorithm": row["algorithm"],
            "Start": row["start_point"],
            "Goal": row["goal_point"],
            "Path": row["path"],
            "Path Length": row["path_length"],
            "Time Taken (ms)": row["time_taken"],
        })
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def export_csv(records: Iterable[RunRecord], path_or_buf) -> pd.DataFrame:
    """Write the history table as CSV; returns the frame that was written."""
    df = records_to_frame(records)
    df.to_csv(path_or_buf, index=False)
    return df

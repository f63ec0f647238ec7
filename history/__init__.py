# -*- coding: utf-8 -*-
"""
Run history: records built from SearchResults, a JSON-lines store and CSV
export. The FastAPI app lives in history.service (imported on demand).
"""

from __future__ import annotations

from .records import RunRecord, build_run_record, timed_search
from .store import HistoryError, HistoryStore
from .export import CSV_COLUMNS, export_csv, records_to_frame

__all__ = [
    "RunRecord",
    "build_run_record",
    "timed_search",
    "HistoryError",
    "HistoryStore",
    "CSV_COLUMNS",
    "export_csv",
    "records_to_frame",
]

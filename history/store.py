#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
JSON-lines run history. One RunRecord row per line; ids auto-increment.
"""

from __future__ import annotations

import json
import os
import threading
from typing import List, Optional

from .records import RunRecord


class HistoryError(RuntimeError):
    """History file could not be parsed."""


class HistoryStore:
    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def _read_rows(self) -> List[dict]:
        if not os.path.exists(self.path):
            return []
        rows = []
        with open(self.path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    row = json.loads(line)
                except json.JSONDecodeError as e:
                    raise HistoryError(f"{self.path}:{lineno}: bad history row ({e.msg})") from e
                if not isinstance(row, dict):
                    raise HistoryError(f"{self.path}:{lineno}: bad history row (expected an object)")
                rows.append(row)
        return rows

    def add(self, record: RunRecord) -> int:
        """Append a record, assign and return its id."""
        with self._lock:
            rows = self._read_rows()
            next_id = max((int(r.get("id") or 0) for r in rows), default=0) + 1
            record.id = next_id
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(json.dumps(record.to_row()) + "\n")
            return next_id

    def list(self) -> List[RunRecord]:
        """All records, newest first."""
        with self._lock:
            rows = self._read_rows()
        records = []
        for r in rows:
            try:
                records.append(RunRecord.from_row(r))
            except (KeyError, TypeError, ValueError, IndexError) as e:
                raise HistoryError(f"{self.path}: bad history row id={r.get('id')} ({e})") from e
        records.sort(key=lambda rec: rec.id or 0, reverse=True)
        return records

    def get(self, record_id: int) -> Optional[RunRecord]:
        for rec in self.list():
            if rec.id == record_id:
                return rec
        return None

    def clear(self) -> None:
        with self._lock:
            if os.path.exists(self.path):
                open(self.path, "w", encoding="utf-8").close()

    def __len__(self):
        with self._lock:
            return len(self._read_rows())

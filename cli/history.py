#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
history.py
----------
Inspect, export or clear the run history.

Example:
    python -m cli.history list --limit 20
    python -m cli.history export --out results/csv/navx_export.csv
    python -m cli.history clear --yes
"""

from __future__ import annotations
import argparse
import os
import sys
from typing import List, Optional

from history import HistoryError, HistoryStore, export_csv
from settings import load_settings


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Manage saved pathfinding runs.")
    ap.add_argument("--history", type=str, default=None, help="History file (default: NAVX_HISTORY_PATH)")
    sub = ap.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Print saved runs, newest first")
    p_list.add_argument("--limit", type=int, default=0, help="Show at most N runs (0 = all)")

    p_export = sub.add_parser("export", help="Write saved runs to CSV")
    p_export.add_argument("--out", type=str, default="navx_export.csv", help="CSV output path")

    p_clear = sub.add_parser("clear", help="Delete all saved runs")
    p_clear.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    args = ap.parse_args(argv)
    store = HistoryStore(args.history or load_settings().history_path)

    try:
        if args.command == "list":
            records = store.list()
            if args.limit > 0:
                records = records[:args.limit]
            if not records:
                print("No history available. Run some simulations to see results here!")
                return 0
            print(f"{'id':>4} {'algorithm':9} {'start':8} {'goal':8} {'len':>4} {'time[ms]':>9}  created")
            for rec in records:
                print(f"{rec.id:4d} {rec.algorithm:9} {str(list(rec.start)):8} {str(list(rec.goal)):8} "
                      f"{rec.path_length:4d} {rec.time_taken_ms:9.2f}  {rec.created_at}")

        elif args.command == "export":
            folder = os.path.dirname(args.out)
            if folder:
                os.makedirs(folder, exist_ok=True)
            df = export_csv(store.list(), args.out)
            print(f"Saved: {args.out} ({len(df)} runs)")

        elif args.command == "clear":
            if not args.yes:
                answer = input("Are you sure you want to delete all history? This cannot be undone. [y/N] ")
                if answer.strip().lower() not in ("y", "yes"):
                    print("Aborted.")
                    return 1
            store.clear()
            print("Logs cleared.")
    except HistoryError as e:
        print(f"History error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

# -*- coding: utf-8 -*-
# Halftopo/halfedge/stats/export.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Export a topology summary (nested dicts/lists from `report.summarize`) to CSV and JSON.

Main Tasks:
-----------
    1. Flatten nested structures into ("dot.path.key", value) rows; lists of dicts
       (the per-group entries) are expanded by position: "groups.0.genus".
    2. Write a 2-column "key,value" CSV, or an indented JSON file (summary or
       check findings).
    3. Convert numpy scalars to plain Python values on the way out.
"""

from typing import Any, Dict, List, Tuple
import csv
import json
import os
import numpy as np


def _plain(x: Any) -> Any:
    """numpy scalars -> Python scalars; everything else unchanged."""
    if isinstance(x, np.generic):
        return x.item()
    return x


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    if isinstance(obj, dict):
        for k in sorted(obj.keys(), key=str):
            _flatten(str(k) if prefix == "" else "{}.{}".format(prefix, k), obj[k], out)
        return
    if isinstance(obj, (list, tuple)) and obj and all(isinstance(i, dict) for i in obj):
        for i, item in enumerate(obj):
            _flatten("{}.{}".format(prefix, i), item, out)
        return
    if isinstance(obj, (list, tuple)):
        out.append((prefix, json.dumps([_plain(i) for i in obj])))
        return
    out.append((prefix, _plain(obj)))


def flatten_summary(summary: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """Return the summary as sorted (key_path, value) rows."""
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)
    return rows


def _ensure_folder(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Write the summary to a 2-column CSV file ("key,value"); returns the path.
    """
    _ensure_folder(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["key", "value"])
        for k, v in flatten_summary(summary):
            w.writerow([k, v])
    return path


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write the summary to an indented JSON file; returns the path.
    """
    _ensure_folder(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, ensure_ascii=False, default=_json_default)
    return path


def _json_default(o: Any) -> Any:
    if isinstance(o, np.generic):
        return o.item()
    return str(o)


def write_findings_json(findings: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write check findings (`checks.run_checks` output) to an indented JSON file;
    returns the path.
    """
    return write_summary_json(findings, path, indent=indent)

# export_sink.py
"""
Text dumps: one file per (workspace, category) under the output folder,
named <workspace>-<category>.txt.

Files are opened in append mode, so running twice into the same folder
accumulates records instead of replacing them.
"""

import json
import os
from typing import Any, Dict, Iterable, List

# category label -> file suffix
KEYS = "Keys"
COMPUTES = "Computes"
ENDPOINTS = "Endpoints"
JOBS = "Jobs"
MODELS = "Models"
STORAGE_KEY = "Storagekey"


def ensure_output_dir(path: str) -> str:
    os.makedirs(path, exist_ok=True)
    return path


def artifact_path(output_dir: str, workspace: str, category: str) -> str:
    return os.path.join(output_dir, f"{workspace}-{category}.txt")


def _fmt_value(val: Any) -> str:
    if val is None:
        return ""
    if isinstance(val, (dict, list, tuple)):
        return json.dumps(val, default=str, separators=(",", ":"))
    return str(val)


def _as_mapping(record: Any) -> Dict[str, Any]:
    if isinstance(record, dict):
        return record
    if hasattr(record, "as_dict"):
        return record.as_dict()
    return {"value": record}


def format_record(record: Any) -> str:
    """
    List-style block, one "key : value" line per field, keys padded to the
    longest key, followed by a blank line.
    """
    data = _as_mapping(record)
    if not data:
        return "\n"
    width = max(len(str(k)) for k in data)
    lines = [f"{str(k).ljust(width)} : {_fmt_value(v)}" for k, v in data.items()]
    return "\n".join(lines) + "\n\n"


def append_records(output_dir: str, workspace: str, category: str, records: Iterable[Any]) -> str:
    """
    Append the records (in the given order) to <workspace>-<category>.txt.
    The file is created even when there is nothing to write.
    """
    path = artifact_path(output_dir, workspace, category)
    items: List[Any] = list(records)
    with open(path, "a", encoding="utf-8") as f:
        for rec in items:
            f.write(format_record(rec))
    return path

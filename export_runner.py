# export_runner.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from console import debug_traceback, info, warn
from export_sink import COMPUTES, ENDPOINTS, JOBS, KEYS, MODELS, STORAGE_KEY, ensure_output_dir
from compute_reader import dump_computes
from endpoint_reader import dump_endpoints
from job_reader import dump_jobs
from key_reader import dump_storage_keys, dump_workspace_keys
from model_reader import dump_models
from workspace_reader import list_workspaces

# Fixed order, one entry per output file
DUMPERS: List[Tuple[str, Callable[..., int]]] = [
    (KEYS, dump_workspace_keys),
    (COMPUTES, dump_computes),
    (ENDPOINTS, dump_endpoints),
    (JOBS, dump_jobs),
    (MODELS, dump_models),
    (STORAGE_KEY, dump_storage_keys),
]


@dataclass
class DumpOutcome:
    category: str
    count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_dumper(category: str, fn: Callable[..., int], client, resource_group: str,
               workspace_name: str, output_dir: str, depth: int = 3) -> DumpOutcome:
    """
    One category for one workspace. Any failure is turned into a warning and
    a failed outcome; nothing propagates to the caller.
    """
    try:
        count = fn(client, resource_group, workspace_name, output_dir, depth=depth)
        return DumpOutcome(category=category, count=count)
    except Exception as e:
        warn(f"{workspace_name}: {category} export failed: {e}", depth)
        debug_traceback()
        return DumpOutcome(category=category, error=str(e))


def run_export(
    client,
    resource_group: str,
    output_dir: str,
    *,
    subscription_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Enumerate workspaces in resource_group and run every dumper for each one.

    Returns:
      {
        "subscription": ..., "resource_group": ..., "output_dir": ...,
        "workspace_count": N,
        "workspaces": { ws_name: { category: count } },
        "failures": [ { workspace, category, error } ]
      }
    """
    ensure_output_dir(output_dir)

    depth = 0
    if subscription_name:
        info(f"Subscription: {subscription_name}", depth)
        depth += 1
    info(f"Resource group: {resource_group}", depth)

    summary: Dict[str, Any] = {
        "subscription": subscription_name,
        "resource_group": resource_group,
        "output_dir": output_dir,
        "workspace_count": 0,
        "workspaces": {},
        "failures": [],
    }

    try:
        workspaces = list_workspaces(client, resource_group)
    except Exception as e:
        warn(f"Listing workspaces in {resource_group} failed: {e}", depth + 1)
        debug_traceback()
        workspaces = []

    summary["workspace_count"] = len(workspaces)
    info(f"{len(workspaces)} Workspace(s)", depth + 1)

    for ws in workspaces:
        name = ws["name"]
        info(f"Workspace: {name}", depth + 2)
        counts: Dict[str, int] = {}
        for category, fn in DUMPERS:
            outcome = run_dumper(category, fn, client, ws["resource_group"], name, output_dir, depth=depth + 3)
            if outcome.ok:
                counts[category] = outcome.count
            else:
                summary["failures"].append({"workspace": name, "category": category, "error": outcome.error})
        summary["workspaces"][name] = counts

    return summary

# workspace_reader.py

from typing import Any, Dict, List

from record_utils import decode, id_to_rg


def list_workspaces(client, resource_group: str) -> List[Dict[str, Any]]:
    """
    Returns the ML workspaces of a resource group, in listing order:
      [ { name, resource_group } ]
    resource_group is taken from the workspace id (ARM keeps its casing there).
    An empty list is a normal result.
    """
    out: List[Dict[str, Any]] = []
    for ws in client.workspaces.list_by_resource_group(resource_group_name=resource_group):
        wire = decode(ws)
        rid = wire.get("id") or ""
        out.append({
            "name": wire.get("name"),
            "resource_group": id_to_rg(rid) or resource_group,
        })
    return out

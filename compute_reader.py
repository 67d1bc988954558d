# compute_reader.py

from typing import Any, Dict, List

from console import info
from export_sink import COMPUTES, append_records
from record_utils import decode_record, identity_type, pick_nested


def _application_endpoints(props: Dict[str, Any]) -> List[str]:
    apps = pick_nested(props, "applications") or []
    out = []
    for app in apps:
        if isinstance(app, dict) and app.get("endpointUri"):
            out.append(app["endpointUri"])
    return out


def project_compute(record: Any) -> Dict[str, Any]:
    """
    Flatten one compute resource. The compute document has two levels:
      properties.{computeType, computeLocation, createdOn, ...}
      properties.properties.{vmSize, state, sshSettings, ...}
    pick_nested checks both, so flat blobs work too.
    """
    wire = decode_record(record)
    props = wire["properties"]

    return {
        "name": wire.get("name"),
        "id": wire.get("id"),
        "type": wire.get("type"),
        "identity": identity_type(wire),
        "location": wire.get("location"),
        "createdOn": pick_nested(props, "createdOn"),
        "modifiedOn": pick_nested(props, "modifiedOn"),
        "computeType": pick_nested(props, "computeType"),
        "computeLocation": pick_nested(props, "computeLocation"),
        "provisioningState": pick_nested(props, "provisioningState"),
        "description": pick_nested(props, "description"),
        "disableLocalAuth": pick_nested(props, "disableLocalAuth"),
        "vmSize": pick_nested(props, "vmSize"),
        "subnet": pick_nested(props, "subnet", "id"),
        "sshPublicAccess": pick_nested(props, "sshSettings", "sshPublicAccess"),
        "sshAdminUserName": pick_nested(props, "sshSettings", "adminUserName"),
        "sshPort": pick_nested(props, "sshSettings", "sshPort"),
        "publicIpAddress": pick_nested(props, "connectivityEndpoints", "publicIpAddress"),
        "privateIpAddress": pick_nested(props, "connectivityEndpoints", "privateIpAddress"),
        "applicationEndpoints": _application_endpoints(props) or None,
        "applicationSharingPolicy": pick_nested(props, "applicationSharingPolicy"),
        "lastOperationTime": pick_nested(props, "lastOperation", "operationTime"),
        "schedules": pick_nested(props, "schedules"),
        "state": pick_nested(props, "state"),
    }


def dump_computes(client, resource_group: str, workspace_name: str, output_dir: str, depth: int = 3) -> int:
    records = [
        project_compute(c)
        for c in client.compute.list(resource_group_name=resource_group, workspace_name=workspace_name)
    ]
    info(f"{COMPUTES}: {len(records)}", depth)
    append_records(output_dir, workspace_name, COMPUTES, records)
    return len(records)

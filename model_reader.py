# model_reader.py

from typing import Any, Dict

from console import info
from export_sink import MODELS, append_records
from record_utils import audit_fields, decode_record, pick


def project_model(record: Any) -> Dict[str, Any]:
    wire = decode_record(record)
    props = wire["properties"]

    out = {
        "name": wire.get("name"),
        "id": wire.get("id"),
        "type": wire.get("type"),
    }
    out.update(audit_fields(wire))
    out.update({
        "description": pick(props, "description"),
        "latestVersion": pick(props, "latestVersion"),
        "provisioningState": pick(props, "provisioningState"),
        "isArchived": pick(props, "isArchived"),
    })
    return out


def dump_models(client, resource_group: str, workspace_name: str, output_dir: str, depth: int = 3) -> int:
    """
    model_containers.list -> <workspace>-Models.txt (one record per container, not per version).
    """
    records = [
        project_model(m)
        for m in client.model_containers.list(resource_group_name=resource_group, workspace_name=workspace_name)
    ]
    info(f"{MODELS}: {len(records)}", depth)
    append_records(output_dir, workspace_name, MODELS, records)
    return len(records)

# endpoint_reader.py

from typing import Any, Dict, Optional

from console import debug, info
from export_sink import ENDPOINTS, append_records
from record_utils import audit_fields, decode, decode_record, identity_type, pick


def project_endpoint(record: Any, keys: Optional[Any] = None) -> Dict[str, Any]:
    """
    Flatten one online endpoint and merge its auth keys (if given).
    """
    wire = decode_record(record)
    props = wire["properties"]
    key_doc = decode(keys)

    out = {
        "name": wire.get("name"),
        "id": wire.get("id"),
        "location": wire.get("location"),
        "identity": identity_type(wire),
        "authMode": pick(props, "authMode"),
        "scoringUri": pick(props, "scoringUri"),
        "swaggerUri": pick(props, "swaggerUri"),
        "provisioningState": pick(props, "provisioningState"),
        "description": pick(props, "description"),
    }
    out.update(audit_fields(wire))
    out["primaryKey"] = key_doc.get("primaryKey")
    out["secondaryKey"] = key_doc.get("secondaryKey")
    return out


def dump_endpoints(client, resource_group: str, workspace_name: str, output_dir: str, depth: int = 3) -> int:
    """
    online_endpoints.list, then one online_endpoints.list_keys per endpoint.
    """
    records = []
    for ep in client.online_endpoints.list(resource_group_name=resource_group, workspace_name=workspace_name):
        wire = decode_record(ep)
        name = wire.get("name")
        debug(f"Fetching keys for endpoint {name}", depth + 1)
        keys = client.online_endpoints.list_keys(
            resource_group_name=resource_group,
            workspace_name=workspace_name,
            endpoint_name=name,
        )
        records.append(project_endpoint(wire, keys))

    info(f"{ENDPOINTS}: {len(records)}", depth)
    append_records(output_dir, workspace_name, ENDPOINTS, records)
    return len(records)

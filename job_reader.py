# job_reader.py

from typing import Any, Dict

from console import info
from export_sink import JOBS, append_records
from record_utils import audit_fields, decode_record, pick


def project_job(record: Any) -> Dict[str, Any]:
    wire = decode_record(record)
    props = wire["properties"]

    out = {
        "name": wire.get("name"),
        "id": wire.get("id"),
        "displayName": pick(props, "displayName"),
        "status": pick(props, "status"),
        "experimentName": pick(props, "experimentName"),
    }
    out.update(audit_fields(wire))
    out.update({
        "jobType": pick(props, "jobType"),
        # Studio link; other services (Tracking, Jupyter...) are left out
        "studioEndpoint": pick(props, "services", "Studio", "endpoint"),
        "command": pick(props, "command"),
        "environmentId": pick(props, "environmentId"),
        "defaultOutputUri": pick(props, "outputs", "default", "uri"),
    })
    return out


def dump_jobs(client, resource_group: str, workspace_name: str, output_dir: str, depth: int = 3) -> int:
    records = [
        project_job(j)
        for j in client.jobs.list(resource_group_name=resource_group, workspace_name=workspace_name)
    ]
    info(f"{JOBS}: {len(records)}", depth)
    append_records(output_dir, workspace_name, JOBS, records)
    return len(records)

from unittest.mock import MagicMock

import pytest

from tests.records import compute_record, job_record, model_record, ws_record


@pytest.fixture
def ml_client():
    """Management client stand-in for one workspace 'space03' in 'ML-RG'."""
    client = MagicMock()
    client.workspaces.list_by_resource_group.return_value = [ws_record("space03")]
    client.workspaces.list_keys.return_value = {"userStorageKey": "uskey==", "appInsightsInstrumentationKey": "ai-key"}
    client.workspaces.list_storage_account_keys.return_value = {"userStorageKey": "uskey=="}
    client.compute.list.return_value = [
        compute_record("ci-1", vmSize="STANDARD_DS3_V2", state="Running"),
        compute_record("ci-2", vmSize="STANDARD_DS11_V2", state="Stopped"),
        compute_record("cluster-1", compute_type="AmlCompute", vmSize="STANDARD_NC6"),
    ]
    client.online_endpoints.list.return_value = []
    client.jobs.list.return_value = [job_record("job-a"), job_record("job-b")]
    client.model_containers.list.return_value = [model_record("m1"), model_record("m2"), model_record("m3")]
    return client

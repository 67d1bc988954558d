from unittest.mock import MagicMock

from azure.mgmt.machinelearningservices.models import (
    CommandJob,
    ComputeInstance,
    ComputeInstanceProperties,
    ComputeResource,
    EndpointAuthKeys,
    JobBase,
    JobService,
    ListStorageAccountKeysResult,
    ManagedServiceIdentity,
    ModelContainer,
    ModelContainerProperties,
    OnlineEndpoint,
    OnlineEndpointProperties,
    SystemData,
    UriFolderJobOutput,
)

from compute_reader import dump_computes, project_compute
from endpoint_reader import dump_endpoints, project_endpoint
from job_reader import project_job
from key_reader import dump_storage_keys
from model_reader import project_model

RG = "ML-RG"
WS = "space03"


def _compute_instance(name: str) -> ComputeResource:
    inner = ComputeInstanceProperties(vm_size="STANDARD_DS3_V2", application_sharing_policy="Personal")
    inner.state = "Running"
    res = ComputeResource(
        location="westeurope",
        identity=ManagedServiceIdentity(type="SystemAssigned"),
        properties=ComputeInstance(compute_location="westeurope", properties=inner),
    )
    res.name = name
    res.id = f"/subscriptions/x/resourceGroups/{RG}/providers/Microsoft.MachineLearningServices/workspaces/{WS}/computes/{name}"
    return res


def _online_endpoint(name: str) -> OnlineEndpoint:
    props = OnlineEndpointProperties(auth_mode="Key", description="fraud scoring")
    props.scoring_uri = f"https://{name}.westeurope.inference.ml.azure.com/score"
    ep = OnlineEndpoint(location="westeurope", properties=props)
    ep.name = name
    ep.system_data = SystemData(created_by="alice@contoso.com")
    return ep


def test_compute_resource_model() -> None:
    rec = project_compute(_compute_instance("ci-1"))
    assert rec["name"] == "ci-1"
    assert rec["id"].endswith("/computes/ci-1")
    assert rec["identity"] == "SystemAssigned"
    assert rec["computeType"] == "ComputeInstance"
    assert rec["computeLocation"] == "westeurope"
    assert rec["vmSize"] == "STANDARD_DS3_V2"
    assert rec["applicationSharingPolicy"] == "Personal"
    assert rec["state"] == "Running"
    assert rec["sshPort"] is None


def test_dump_computes_from_models(tmp_path) -> None:
    client = MagicMock()
    client.compute.list.return_value = [_compute_instance("ci-1"), _compute_instance("ci-2")]
    assert dump_computes(client, RG, WS, str(tmp_path)) == 2
    assert (tmp_path / "space03-Computes.txt").read_text(encoding="utf-8").count("STANDARD_DS3_V2") == 2


def test_online_endpoint_model_with_keys(tmp_path) -> None:
    rec = project_endpoint(_online_endpoint("ep1"), EndpointAuthKeys(primary_key="p1", secondary_key="s1"))
    assert rec["name"] == "ep1"
    assert rec["authMode"] == "Key"
    assert rec["scoringUri"] == "https://ep1.westeurope.inference.ml.azure.com/score"
    assert rec["createdBy"] == "alice@contoso.com"
    assert rec["primaryKey"] == "p1"
    assert rec["secondaryKey"] == "s1"

    client = MagicMock()
    client.online_endpoints.list.return_value = [_online_endpoint("ep1"), _online_endpoint("ep2")]
    client.online_endpoints.list_keys.return_value = EndpointAuthKeys(primary_key="p", secondary_key="s")
    assert dump_endpoints(client, RG, WS, str(tmp_path)) == 2
    names = [c.kwargs["endpoint_name"] for c in client.online_endpoints.list_keys.call_args_list]
    assert names == ["ep1", "ep2"]


def test_job_model() -> None:
    job = JobBase(properties=CommandJob(
        command="python train.py",
        environment_id="azureml:sklearn-env:1",
        experiment_name="churn",
        services={"Studio": JobService(endpoint="https://ml.azure.com/runs/job-a")},
        outputs={"default": UriFolderJobOutput(uri="azureml://datastores/workspaceartifactstore/ExperimentRun/dcid.job-a")},
    ))
    job.name = "job-a"
    job.properties.status = "Completed"

    rec = project_job(job)
    assert rec["name"] == "job-a"
    assert rec["jobType"] == "Command"
    assert rec["status"] == "Completed"
    assert rec["experimentName"] == "churn"
    assert rec["command"] == "python train.py"
    assert rec["environmentId"] == "azureml:sklearn-env:1"
    assert rec["studioEndpoint"] == "https://ml.azure.com/runs/job-a"
    assert rec["defaultOutputUri"].endswith("dcid.job-a")


def test_model_container_model() -> None:
    props = ModelContainerProperties(description="credit model", is_archived=True)
    props.latest_version = "4"
    container = ModelContainer(properties=props)
    container.name = "credit"

    rec = project_model(container)
    assert rec["name"] == "credit"
    assert rec["description"] == "credit model"
    assert rec["isArchived"] is True
    assert rec["latestVersion"] == "4"


def test_storage_keys_model_written_raw(tmp_path) -> None:
    keys = ListStorageAccountKeysResult()
    keys.user_storage_key = "storage-key=="
    client = MagicMock()
    client.workspaces.list_storage_account_keys.return_value = keys

    assert dump_storage_keys(client, RG, WS, str(tmp_path)) == 1
    assert "user_storage_key : storage-key==" in (tmp_path / "space03-Storagekey.txt").read_text(encoding="utf-8")

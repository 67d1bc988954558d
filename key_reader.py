# key_reader.py

from console import info
from export_sink import KEYS, STORAGE_KEY, append_records


def dump_workspace_keys(client, resource_group: str, workspace_name: str, output_dir: str, depth: int = 3) -> int:
    """
    workspaces.list_keys -> <workspace>-Keys.txt, written as returned (no projection).
    """
    keys = client.workspaces.list_keys(resource_group_name=resource_group, workspace_name=workspace_name)
    info(f"{KEYS}: 1", depth)
    append_records(output_dir, workspace_name, KEYS, [keys])
    return 1


def dump_storage_keys(client, resource_group: str, workspace_name: str, output_dir: str, depth: int = 3) -> int:
    """
    workspaces.list_storage_account_keys -> <workspace>-Storagekey.txt, written as returned.
    """
    keys = client.workspaces.list_storage_account_keys(
        resource_group_name=resource_group,
        workspace_name=workspace_name,
    )
    info(f"{STORAGE_KEY}: 1", depth)
    append_records(output_dir, workspace_name, STORAGE_KEY, [keys])
    return 1

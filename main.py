# main.py

import argparse
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

import console
from console import error, info
from export_runner import run_export
from session_context import get_credential, resolve_sessions

# ============================
# Env / Globals
# ============================

load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip() in ("1", "true", "True", "yes", "YES")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="aml-workspace-export",
        description="Export Azure ML workspace metadata (keys, computes, endpoints, jobs, models, storage keys) to text files.",
    )
    p.add_argument("-g", "--resource-group", default=os.getenv("AML_RESOURCE_GROUP"),
                   help="Resource group holding the ML workspaces (env: AML_RESOURCE_GROUP)")
    p.add_argument("-s", "--subscription", default=os.getenv("AZURE_SUBSCRIPTION"),
                   help="Subscription name or id; omit to pick one or more interactively (env: AZURE_SUBSCRIPTION)")
    p.add_argument("-o", "--output-dir", default=os.getenv("OUTPUT_DIR") or os.getcwd(),
                   help="Folder for the <workspace>-<category>.txt files (env: OUTPUT_DIR, default: cwd)")
    p.add_argument("--tenant-id", default=os.getenv("AZURE_TENANT_ID"),
                   help="Tenant for interactive login (env: AZURE_TENANT_ID)")
    p.add_argument("--debug", action="store_true", default=_env_flag("AMLX_DEBUG"),
                   help="Print tracebacks for failed categories (env: AMLX_DEBUG)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.resource_group:
        parser.error("--resource-group is required (or set AML_RESOURCE_GROUP)")

    console.set_debug(args.debug)

    credential = get_credential(args.tenant_id)
    sessions = resolve_sessions(credential, subscription=args.subscription, output_dir=args.output_dir)
    if not sessions:
        error("No subscription selected, nothing to export.")
        return 1

    for ctx in sessions:
        summary = run_export(
            ctx.ml_client(),
            args.resource_group,
            ctx.output_dir,
            subscription_name=ctx.subscription_name,
        )
        failed = len(summary["failures"])
        info(f"Done: {summary['workspace_count']} workspace(s), {failed} failed categories -> {ctx.output_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

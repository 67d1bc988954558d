# session_context.py
"""
Credential + subscription resolution.

Instead of switching a global "current subscription", every subscription the
run should cover becomes its own SessionContext (credential, subscription,
output folder). The caller just loops over them.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from azure.identity import AzureCliCredential, InteractiveBrowserCredential
from azure.mgmt.machinelearningservices import MachineLearningServicesMgmtClient
from azure.mgmt.resource import SubscriptionClient

from console import debug, debug_traceback, info, warn

ARM_SCOPE = "https://management.azure.com/.default"
_GUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


@dataclass
class SessionContext:
    subscription_id: str
    subscription_name: str
    credential: Any
    output_dir: str

    def ml_client(self) -> MachineLearningServicesMgmtClient:
        return MachineLearningServicesMgmtClient(self.credential, self.subscription_id)


def get_credential(tenant_id: Optional[str] = None):
    """
    Reuse an existing `az login` session when there is one, otherwise pop a
    browser login. A failed login is only a warning: the API calls that follow
    will fail on their own and get reported per category.
    """
    cli = AzureCliCredential(tenant_id=tenant_id or "")
    try:
        cli.get_token(ARM_SCOPE)
        debug("Using Azure CLI credential")
        return cli
    except Exception as e:
        info(f"No Azure CLI session ({e.__class__.__name__}), starting interactive login...")

    browser = InteractiveBrowserCredential(tenant_id=tenant_id)
    try:
        browser.get_token(ARM_SCOPE)
    except Exception as e:
        warn(f"Interactive login failed: {e}")
    return browser


def list_subscriptions(credential) -> List[Dict[str, Any]]:
    client = SubscriptionClient(credential)
    subs = []
    for s in client.subscriptions.list():
        subs.append({
            "id": s.subscription_id,
            "name": s.display_name,
            "state": str(s.state) if s.state is not None else None,
        })
    return subs


def _parse_selection(raw: str, count: int) -> List[int]:
    """
    "1,3", "2-4", "all" -> zero-based indexes, in order, without duplicates.
    Bad tokens are warned about and skipped.
    """
    raw = (raw or "").strip()
    if raw.lower() in ("all", "*"):
        return list(range(count))

    seen = set()
    out: List[int] = []
    for tok in [t.strip() for t in raw.split(",") if t.strip()]:
        m = re.fullmatch(r"(\d+)(?:\s*-\s*(\d+))?", tok)
        if not m:
            warn(f"Ignoring selection '{tok}'")
            continue
        start = int(m.group(1))
        end = int(m.group(2)) if m.group(2) else start
        for n in range(start, end + 1):
            if not 1 <= n <= count:
                warn(f"Ignoring selection '{n}' (choose 1-{count})")
                continue
            if n - 1 not in seen:
                seen.add(n - 1)
                out.append(n - 1)
    return out


def select_subscriptions(subscriptions: List[Dict[str, Any]],
                         prompt: Callable[[str], str] = input) -> List[Dict[str, Any]]:
    if not subscriptions:
        warn("No subscriptions visible to the signed-in identity.")
        return []

    info("Available subscriptions:")
    for i, s in enumerate(subscriptions, start=1):
        info(f"{i}) {s['name']} ({s['id']})", 1)
    raw = prompt("Select subscription(s) [e.g. 1,3 or 2-4 or all]: ")
    return [subscriptions[i] for i in _parse_selection(raw, len(subscriptions))]


def _folder_name(name: str) -> str:
    return re.sub(r'[<>:"/\\|?*]', "_", name).strip() or "subscription"


def _looks_like_subscription_id(value: str) -> bool:
    return bool(_GUID_RE.fullmatch(value.strip()))


def resolve_sessions(credential,
                     subscription: Optional[str] = None,
                     output_dir: str = ".",
                     prompt: Callable[[str], str] = input,
                     subscriptions: Optional[List[Dict[str, Any]]] = None) -> List[SessionContext]:
    """
    Named subscription (display name or id) -> one context writing into output_dir.
    A subscription id is used as-is, without listing subscriptions first.
    No subscription -> interactive multi-select, one context per pick, each
    writing into output_dir/<subscription name>.
    """
    if subscriptions is None:
        if subscription and _looks_like_subscription_id(subscription):
            sub_id = subscription.strip()
            return [SessionContext(sub_id, sub_id, credential, output_dir)]
        try:
            subscriptions = list_subscriptions(credential)
        except Exception as e:
            warn(f"Listing subscriptions failed: {e}")
            debug_traceback()
            return []

    if subscription:
        wanted = subscription.strip().lower()
        for s in subscriptions:
            if wanted in ((s.get("name") or "").lower(), (s.get("id") or "").lower()):
                return [SessionContext(s["id"], s["name"], credential, output_dir)]
        warn(f"Subscription '{subscription}' not found.")
        return []

    return [
        SessionContext(s["id"], s["name"], credential, os.path.join(output_dir, _folder_name(s["name"])))
        for s in select_subscriptions(subscriptions, prompt)
    ]

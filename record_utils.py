# record_utils.py
"""
Helpers shared by the readers: turn whatever the management SDK hands back
into a plain REST-shaped dict (camelCase keys) and pull nested values out of it.

Records can arrive as:
  - SDK models (msrest-style, have .serialize())
  - plain dicts (already wire-shaped)
  - a "properties" value that is itself a JSON string

All of them are decoded once, up front, and the projections only ever read dicts.
"""

import json
from typing import Any, Dict, Optional


def decode(value: Any) -> Dict[str, Any]:
    """
    Decode a raw record (or nested property blob) into a dict.
    Returns {} for None / empty strings so callers can chain lookups.
    """
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8") if isinstance(value, bytes) else value
        if not text.strip():
            return {}
        parsed = json.loads(text)
        return parsed if isinstance(parsed, dict) else {"value": parsed}
    if hasattr(value, "serialize"):
        # keep_readonly: name/id/systemData are read-only on the ARM models
        return value.serialize(keep_readonly=True)
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Cannot decode record of type {type(value).__name__}")


def decode_record(record: Any) -> Dict[str, Any]:
    """
    Decode a record and its "properties" document.
    The returned dict always has a dict under "properties".
    """
    wire = dict(decode(record))
    wire["properties"] = decode(wire.get("properties"))
    return wire


def pick(doc: Dict[str, Any], *path: str) -> Any:
    """
    Walk nested keys, returning None as soon as something is missing.
      pick(props, "sshSettings", "sshPort")
    """
    cur: Any = doc
    for key in path:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(key)
        if cur is None:
            return None
    return cur


def pick_nested(props: Dict[str, Any], *path: str) -> Any:
    """
    Look a key up on the property document first, then on its inner
    "properties" document (compute resources nest instance settings there).
    """
    val = pick(props, *path)
    if val is None:
        val = pick(props, "properties", *path)
    return val


def audit_fields(wire: Dict[str, Any]) -> Dict[str, Any]:
    """createdBy/createdAt/lastModifiedBy/lastModifiedAt from systemData."""
    sd = decode(wire.get("systemData"))
    return {
        "createdBy": sd.get("createdBy"),
        "createdAt": sd.get("createdAt"),
        "lastModifiedBy": sd.get("lastModifiedBy"),
        "lastModifiedAt": sd.get("lastModifiedAt"),
    }


def identity_type(wire: Dict[str, Any]) -> Optional[str]:
    ident = wire.get("identity")
    if ident is None:
        return None
    if isinstance(ident, str):
        return ident
    return decode(ident).get("type")


def id_to_rg(resource_id: str) -> str:
    try:
        parts = resource_id.split("/")
        lowered = [p.lower() for p in parts]
        return parts[lowered.index("resourcegroups") + 1]
    except Exception:
        return ""

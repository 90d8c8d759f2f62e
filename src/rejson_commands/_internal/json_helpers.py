"""Internal JSON helper functions not exposed in public API."""

import json
from typing import Any, Dict, Optional

# JSON type names reported by JSON.TYPE and the native type each maps to
JSON_TYPE_NAMES: Dict[str, Optional[type]] = {
    "null": None,
    "boolean": bool,
    "integer": int,
    "number": float,
    "string": str,
    "object": dict,
    "array": list,
}


def dumps_compact(data: Any) -> str:
    """Serialize data to compact JSON text for a command argument.

    Minimal separators keep payloads small; key order is preserved so the
    stored document matches what the caller built.
    """
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def loads_text(text: str) -> Any:
    """Parse JSON text from a bulk reply."""
    return json.loads(text)

from __future__ import annotations

import hashlib
import json
from enum import Enum
from typing import Any, Mapping


def _canonical(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): _canonical(val) for key, val in sorted(value.items(), key=lambda item: str(item[0]))}
    if isinstance(value, (set, frozenset)):
        return sorted((_canonical(item) for item in value), key=lambda item: json.dumps(item, sort_keys=True, default=str))
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    return value


def derive_seed(namespace: str, context: Mapping[str, Any]) -> int:
    payload = {"namespace": namespace, "context": _canonical(context)}
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    digest = hashlib.sha256(serialized.encode("utf-8")).hexdigest()
    return int(digest, 16) % (2**32)


def cast_seed(*, world_seed: int, angler_id: str, location_id: str, cast_number: int) -> int:
    return derive_seed(
        namespace="fishing.cast",
        context={
            "world_seed": int(world_seed),
            "angler_id": str(angler_id),
            "location_id": str(location_id),
            "cast_number": int(cast_number),
        },
    )

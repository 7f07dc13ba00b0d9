from __future__ import annotations

import json
from dataclasses import is_dataclass, asdict
from pathlib import Path
from typing import Any, Mapping


def _to_jsonable(x: Any) -> Any:
    """
    Convert to a JSON-friendly structure, deterministically.
    - dataclasses -> asdict (recursive)
    - Path -> str
    - mappings -> dict with str keys
    - list/tuple -> list; set/frozenset -> sorted list
    """
    if x is None or isinstance(x, (bool, int, float, str)):
        return x

    if isinstance(x, Path):
        return str(x)

    if is_dataclass(x) and not isinstance(x, type):
        return _to_jsonable(asdict(x))

    if isinstance(x, Mapping):
        return {str(k): _to_jsonable(v) for k, v in x.items()}

    if isinstance(x, (list, tuple)):
        return [_to_jsonable(v) for v in x]

    if isinstance(x, (set, frozenset)):
        return sorted((_to_jsonable(v) for v in x), key=lambda z: json.dumps(z, sort_keys=True))

    return str(x)


def canonical_dumps(obj: Any) -> str:
    """Sorted keys, no whitespace, UTF-8 kept as is."""
    return json.dumps(_to_jsonable(obj), sort_keys=True, ensure_ascii=False, separators=(",", ":"))


def canonical_bytes(obj: Any) -> bytes:
    return canonical_dumps(obj).encode("utf-8")

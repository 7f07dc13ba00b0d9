import hashlib
from typing import Any
from .json_canonical import canonical_bytes


def sha256_hex(obj: Any) -> str:
    return hashlib.sha256(canonical_bytes(obj)).hexdigest()

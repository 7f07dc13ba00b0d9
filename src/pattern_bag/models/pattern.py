from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class TfIdf:
    hash: int  # 64-bit token hash, sort key
    value: float


@dataclass(frozen=True)
class Pattern:
    identifier: int
    norm: float  # sqrt of the sum of squared tf_idfs values
    tf_idfs: Tuple[TfIdf, ...]  # sorted ascending by hash, unique hashes

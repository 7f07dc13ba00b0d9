from __future__ import annotations
from typing import Iterable, Sequence, Tuple

from ..models.pattern import Pattern, TfIdf


def sparse_dot(a: Sequence[TfIdf], b: Sequence[TfIdf]) -> float:
    """Dot product of two hash-sorted sparse vectors (two-pointer merge)."""
    total = 0.0
    i, j = 0, 0
    na, nb = len(a), len(b)
    while i < na and j < nb:
        ha, hb = a[i].hash, b[j].hash
        if ha == hb:
            total += a[i].value * b[j].value
            i += 1
            j += 1
        elif ha < hb:
            i += 1
        else:
            j += 1
    return total


def compare(query: Sequence[TfIdf], pattern: Pattern) -> float:
    # normalized by the pattern side only; the query norm is applied once by the caller
    if pattern.norm == 0.0:
        return 0.0
    return sparse_dot(pattern.tf_idfs, query) / pattern.norm


def rank_best(query: Sequence[TfIdf], patterns: Iterable[Pattern]) -> Tuple[int, float]:
    """Best ``(identifier, raw_score)``; ties keep the earliest pattern.

    Returns ``(0, 0.0)`` when nothing scores above zero.
    """
    best = 0
    best_match = 0.0
    for p in patterns:
        match = compare(query, p)
        if match > best_match:
            best_match = match
            best = p.identifier
    return best, best_match

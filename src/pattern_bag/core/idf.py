from __future__ import annotations
import math
from typing import Dict, Mapping, Sequence


def document_frequencies(documents: Sequence[Mapping[int, int]]) -> Dict[int, int]:
    """Number of documents each hash appears in at least once."""
    df: Dict[int, int] = {}
    for counts in documents:
        for h in counts:
            df[h] = df.get(h, 0) + 1
    return df


def build_idf(documents: Sequence[Mapping[int, int]]) -> Dict[int, float]:
    """IDF table ``{hash: ln(N / df)}`` over term-count maps.

    ``df <= N`` always holds here, so every weight is >= 0. A token present
    in every document weighs 0. No documents means an empty table.
    """
    n = len(documents)
    out: Dict[int, float] = {}
    if n == 0:
        return out
    for h, c in document_frequencies(documents).items():
        out[h] = math.log(float(n) / float(c))
    return out

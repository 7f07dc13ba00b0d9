from __future__ import annotations
import math
from typing import Mapping, Tuple

from ..models.pattern import TfIdf


def tf_idf(counts: Mapping[int, int], idfs: Mapping[int, float]) -> Tuple[Tuple[TfIdf, ...], float]:
    """Sparse TF-IDF vector sorted by hash, and its Euclidean norm.

    Hashes unknown to ``idfs`` are kept with weight 0; ``idfs`` is only read.
    """
    square_sum = 0.0
    vec = []
    for h in sorted(counts):
        value = float(counts[h]) * float(idfs.get(h, 0.0))
        square_sum += value * value
        vec.append(TfIdf(hash=h, value=value))
    return tuple(vec), math.sqrt(square_sum)

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..corpus_io import load_corpus
from ..models.match import MatchResult, NO_MATCH
from ..models.pattern import Pattern
from ..utils.hashing import sha256_hex
from .idf import build_idf
from .similarity import rank_best
from .tokens import RegexTokenizer, Tokenizer, tokenize_counts
from .vectorize import tf_idf

log = logging.getLogger(__name__)

_DIGITS = re.compile(r"^\s*\d+\s*$")
_MAX_ID = 2**64 - 1
SCORE_SCALE = 10000
_ULP_SLACK = 1e-12


def parse_identifier(key: Any) -> Optional[int]:
    """Non-negative integer identifier, or None if ``key`` is not one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        idx = key
    elif isinstance(key, str) and _DIGITS.match(key):
        idx = int(key)
    else:
        return None
    if idx < 0 or idx > _MAX_ID:
        return None
    return idx


def coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    # None and anything unreadable count as an empty document
    return ""


def truncate_score(raw: float, query_norm: float) -> float:
    if query_norm <= 0.0 or raw <= 0.0:
        return 0.0
    # relative slack of a few ulps so exact matches do not truncate to 0.9999
    scaled = math.floor(raw * SCORE_SCALE / query_norm * (1.0 + _ULP_SLACK))
    return min(scaled, SCORE_SCALE) / float(SCORE_SCALE)


@dataclass(frozen=True)
class CorpusIndex:
    idfs: Mapping[int, float]
    patterns: Tuple[Pattern, ...]


def build_index(documents: List[Tuple[int, Dict[int, int]]]) -> CorpusIndex:
    idfs = MappingProxyType(build_idf([counts for _, counts in documents]))
    patterns = []
    for idx, counts in documents:
        vec, norm = tf_idf(counts, idfs)
        patterns.append(Pattern(identifier=idx, norm=norm, tf_idfs=vec))
    return CorpusIndex(idfs=idfs, patterns=tuple(patterns))


class BagOfPatterns:
    """Finds the corpus pattern closest to a snippet by TF-IDF similarity.

    The index is built once in the constructor and never mutated, so a
    single instance can serve concurrent ``best_for`` calls.
    """

    def __init__(self, corpus: Mapping[Any, Any], tokenizer: Optional[Tokenizer] = None) -> None:
        self.tokenizer: Tokenizer = tokenizer if tokenizer is not None else RegexTokenizer()
        self.skipped = 0

        documents: List[Tuple[int, Dict[int, int]]] = []
        canonical: Dict[int, str] = {}
        for key, value in corpus.items():
            idx = parse_identifier(key)
            if idx is None:
                self.skipped += 1
                log.debug("skipping corpus entry with malformed identifier %r", key)
                continue
            if idx in canonical:
                self.skipped += 1
                log.debug("skipping corpus entry %r: identifier %d already indexed", key, idx)
                continue
            text = coerce_text(value)
            documents.append((idx, tokenize_counts(self.tokenizer, text)))
            canonical[idx] = text

        self.index = build_index(documents)
        self.fingerprint = sha256_hex(canonical)[:16]
        log.info(
            "built pattern index: patterns=%d terms=%d skipped=%d fingerprint=%s",
            len(self.index.patterns), len(self.index.idfs), self.skipped, self.fingerprint,
        )

    @classmethod
    def from_file(cls, path: Path, tokenizer: Optional[Tokenizer] = None) -> "BagOfPatterns":
        return cls(load_corpus(Path(path)), tokenizer=tokenizer)

    @property
    def idfs(self) -> Mapping[int, float]:
        return self.index.idfs

    @property
    def patterns(self) -> Tuple[Pattern, ...]:
        return self.index.patterns

    def __len__(self) -> int:
        return len(self.index.patterns)

    def best_for(self, snippet: str) -> MatchResult:
        counts = tokenize_counts(self.tokenizer, coerce_text(snippet))
        vec, norm = tf_idf(counts, self.index.idfs)
        if norm == 0.0:
            return NO_MATCH
        best, best_match = rank_best(vec, self.index.patterns)
        return MatchResult(identifier=best, score=truncate_score(best_match, norm))

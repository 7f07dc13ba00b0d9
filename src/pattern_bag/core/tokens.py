from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

# words, or a single non-space symbol ("=====" yields five "=" tokens)
_TOKEN = re.compile(r"[A-Za-z0-9_]+|[^\sA-Za-z0-9_]")


@dataclass(frozen=True)
class Token:
    hash: int
    text: str = ""


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> Sequence[Token]:
        ...


def token_hash(text: str) -> int:
    """First 8 bytes of sha256, big-endian, as an unsigned 64-bit int."""
    return int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest()[:8], "big")


class RegexTokenizer:
    """Deterministic default tokenizer.

    Alphanumeric runs become one token each, every other non-space
    character is a token on its own. Words are lowercased unless
    ``case_sensitive`` is set.
    """

    def __init__(self, case_sensitive: bool = False) -> None:
        self.case_sensitive = case_sensitive

    def tokenize(self, text: str) -> List[Token]:
        out: List[Token] = []
        for raw in _TOKEN.findall(text or ""):
            t = raw if self.case_sensitive else raw.lower()
            out.append(Token(hash=token_hash(t), text=t))
        return out


def term_counts(tokens: Iterable[Token]) -> Dict[int, int]:
    """Count token hashes, collapsing runs of the same hash into one."""
    m: Dict[int, int] = {}
    last: Optional[int] = None
    for tok in tokens:
        h = tok.hash
        if h == last:
            continue
        last = h
        m[h] = m.get(h, 0) + 1
    return m


def tokenize_counts(tokenizer: Tokenizer, text: str) -> Dict[int, int]:
    return term_counts(tokenizer.tokenize(text))

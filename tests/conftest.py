from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from pattern_bag.core.tokens import Token, token_hash


class FakeTokenizer:
    """One token per whitespace-separated word; hashes can be pinned per word."""

    def __init__(self, hashes: Optional[Dict[str, int]] = None) -> None:
        self.hashes = dict(hashes or {})
        self.calls = 0

    def tokenize(self, text: str) -> List[Token]:
        self.calls += 1
        return [Token(hash=self.hashes.get(w, token_hash(w)), text=w) for w in text.split()]


class FailingTokenizer:
    def __init__(self, fail_on: str = "") -> None:
        self.fail_on = fail_on

    def tokenize(self, text: str) -> List[Token]:
        if self.fail_on in text:
            raise RuntimeError("tokenizer exploded")
        return [Token(hash=token_hash(w), text=w) for w in text.split()]


@pytest.fixture
def fake_tokenizer() -> FakeTokenizer:
    return FakeTokenizer()


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def make_failing_tokenizer():
    return FailingTokenizer


@pytest.fixture
def make_fake_tokenizer():
    return FakeTokenizer


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # the CLI reconfigures the root logger; keep tests isolated from that
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)

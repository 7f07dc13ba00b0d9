from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class MatchResult:
    identifier: int  # 0 means no match
    score: float  # [0, 1], truncated to 4 decimals

    def __iter__(self) -> Iterator[Union[int, float]]:
        # allows `identifier, score = bag.best_for(...)`
        yield self.identifier
        yield self.score

    def reliable(self, min_score: float) -> bool:
        return self.identifier != 0 and self.score >= float(min_score)


NO_MATCH = MatchResult(identifier=0, score=0.0)

from .match import MatchResult, NO_MATCH
from .pattern import Pattern, TfIdf

__all__ = ["MatchResult", "NO_MATCH", "Pattern", "TfIdf"]

__version__ = "0.1.0"

from .core.bag import BagOfPatterns, CorpusIndex
from .core.tokens import RegexTokenizer, Token, Tokenizer
from .models import MatchResult, Pattern, TfIdf

__all__ = [
    "BagOfPatterns",
    "CorpusIndex",
    "MatchResult",
    "Pattern",
    "RegexTokenizer",
    "TfIdf",
    "Token",
    "Tokenizer",
]

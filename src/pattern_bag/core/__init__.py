from .bag import BagOfPatterns, CorpusIndex, build_index
from .idf import build_idf, document_frequencies
from .similarity import compare, rank_best, sparse_dot
from .tokens import RegexTokenizer, Token, Tokenizer, term_counts
from .vectorize import tf_idf

__all__ = [
    "BagOfPatterns",
    "CorpusIndex",
    "RegexTokenizer",
    "Token",
    "Tokenizer",
    "build_idf",
    "build_index",
    "compare",
    "document_frequencies",
    "rank_best",
    "sparse_dot",
    "term_counts",
    "tf_idf",
]

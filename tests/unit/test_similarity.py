import math

from pattern_bag.core.similarity import compare, rank_best, sparse_dot
from pattern_bag.models.pattern import Pattern, TfIdf


def _vec(*pairs):
    return tuple(TfIdf(hash=h, value=v) for h, v in pairs)


def _pattern(identifier, *pairs):
    vec = _vec(*pairs)
    return Pattern(identifier=identifier, norm=math.sqrt(sum(t.value * t.value for t in vec)), tf_idfs=vec)


def test_sparse_dot_only_shared_hashes():
    a = _vec((1, 1.0), (3, 2.0), (7, 1.0))
    b = _vec((3, 4.0), (5, 1.0), (7, 2.0))
    assert sparse_dot(a, b) == 10.0
    assert sparse_dot(b, a) == 10.0


def test_disjoint_vectors_score_zero():
    assert sparse_dot(_vec((1, 1.0)), _vec((2, 1.0))) == 0.0
    assert sparse_dot((), _vec((2, 1.0))) == 0.0


def test_compare_divides_by_pattern_norm_only():
    p = _pattern(4, (1, 3.0), (2, 4.0))  # norm 5
    q = _vec((1, 10.0))
    assert math.isclose(compare(q, p), 30.0 / 5.0)


def test_zero_norm_pattern_scores_zero():
    p = Pattern(identifier=1, norm=0.0, tf_idfs=_vec((1, 0.0)))
    assert compare(_vec((1, 1.0)), p) == 0.0


def test_rank_best_ties_keep_first():
    patterns = [_pattern(8, (1, 1.0)), _pattern(3, (1, 1.0)), _pattern(5, (2, 1.0))]
    assert rank_best(_vec((1, 1.0)), patterns) == (8, 1.0)


def test_rank_best_picks_highest():
    patterns = [_pattern(1, (1, 1.0), (2, 1.0)), _pattern(2, (2, 1.0))]
    best, raw = rank_best(_vec((2, 1.0)), patterns)
    assert best == 2
    assert math.isclose(raw, 1.0)


def test_rank_best_no_match_sentinel():
    assert rank_best(_vec((1, 1.0)), []) == (0, 0.0)
    assert rank_best(_vec((1, 1.0)), [_pattern(9, (2, 1.0))]) == (0, 0.0)

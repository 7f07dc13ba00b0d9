from pattern_bag.core.tokens import RegexTokenizer, Token, term_counts, token_hash, tokenize_counts


def test_consecutive_duplicates_count_once():
    a, b = Token(hash=11), Token(hash=22)
    assert term_counts([a, a, a, b]) == term_counts([a, b]) == {11: 1, 22: 1}


def test_non_consecutive_repeats_still_count():
    a, b = Token(hash=11), Token(hash=22)
    assert term_counts([a, b, a]) == {11: 2, 22: 1}


def test_hash_zero_is_a_regular_token():
    z = Token(hash=0)
    assert term_counts([z, z, Token(hash=5)]) == {0: 1, 5: 1}


def test_regex_tokenizer_splits_symbols_one_per_char():
    toks = RegexTokenizer().tokenize("====== header ======")
    assert [t.text for t in toks] == ["="] * 6 + ["header"] + ["="] * 6
    counts = term_counts(toks)
    # one count per run of "="
    assert counts == {token_hash("="): 2, token_hash("header"): 1}


def test_regex_tokenizer_lowercases_by_default():
    lower = RegexTokenizer().tokenize("Disk FULL")
    assert [t.text for t in lower] == ["disk", "full"]
    exact = RegexTokenizer(case_sensitive=True).tokenize("Disk FULL")
    assert [t.text for t in exact] == ["Disk", "FULL"]


def test_regex_tokenizer_empty_and_none():
    t = RegexTokenizer()
    assert t.tokenize("") == []
    assert t.tokenize("   \n\t") == []
    assert t.tokenize(None) == []  # type: ignore[arg-type]


def test_token_hash_is_stable_64_bit():
    h = token_hash("timeout")
    assert h == token_hash("timeout")
    assert 0 <= h < 2**64
    assert h != token_hash("Timeout")


def test_tokenize_counts_uses_given_tokenizer(fake_tokenizer):
    fake_tokenizer.hashes = {"a": 1, "b": 2}
    assert tokenize_counts(fake_tokenizer, "a a b a") == {1: 2, 2: 1}
    assert fake_tokenizer.calls == 1

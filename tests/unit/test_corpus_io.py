import pytest

from pattern_bag.corpus_io import CorpusFormatError, load_corpus, load_snippets


def test_load_json_object(fixtures_dir):
    assert load_corpus(fixtures_dir / "corpus.json") == {
        "1": "error disk full",
        "2": "error disk full",
        "3": "network timeout",
    }


def test_load_jsonl_rows_keep_raw_ids(fixtures_dir):
    corpus = load_corpus(fixtures_dir / "corpus.jsonl")
    assert list(corpus.keys()) == [1, 2, 3, "bad", 4]
    assert corpus[4] == "kernel panic - not syncing"


def test_jsonl_row_without_text_is_none(tmp_path):
    p = tmp_path / "c.jsonl"
    p.write_text('{"id": 5}\n', encoding="utf-8")
    assert load_corpus(p) == {5: None}


def test_jsonl_row_without_id_rejected(tmp_path):
    p = tmp_path / "c.jsonl"
    p.write_text('{"text": "x"}\n', encoding="utf-8")
    with pytest.raises(CorpusFormatError):
        load_corpus(p)


def test_invalid_json_reports_line(tmp_path):
    p = tmp_path / "c.jsonl"
    p.write_text('{"id": 1, "text": "ok"}\n{nope\n', encoding="utf-8")
    with pytest.raises(CorpusFormatError, match=":2:"):
        load_corpus(p)


def test_json_must_be_object(tmp_path):
    p = tmp_path / "c.json"
    p.write_text('["a", "b"]', encoding="utf-8")
    with pytest.raises(CorpusFormatError):
        load_corpus(p)


def test_unsupported_suffix(tmp_path):
    p = tmp_path / "c.txt"
    p.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        load_corpus(p)


def test_load_snippets_defaults_ids(tmp_path):
    p = tmp_path / "s.jsonl"
    p.write_text('{"text": "a"}\n\n{"snippet_id": "z", "text": null}\n', encoding="utf-8")
    assert load_snippets(p) == [
        {"snippet_id": "s0001", "text": "a"},
        {"snippet_id": "z", "text": ""},
    ]

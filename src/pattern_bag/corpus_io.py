from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List


class CorpusFormatError(ValueError):
    pass


def _read_jsonl(path: Path) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for n, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            row = json.loads(line)
        except json.JSONDecodeError as e:
            raise CorpusFormatError(f"{path}:{n}: invalid JSON: {e.msg}") from e
        if not isinstance(row, dict):
            raise CorpusFormatError(f"{path}:{n}: expected a JSON object")
        rows.append(row)
    return rows


def load_corpus(path: Path) -> Dict[Any, Any]:
    """
    Read a pattern corpus as ``{identifier: text}``.

    - ``.json``: a single object ``{"<id>": "<text>", ...}``
    - ``.jsonl``: one ``{"id": ..., "text": ...}`` object per line

    Identifiers are returned as found; the bag decides which ones it accepts.
    """
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CorpusFormatError(f"{path}: invalid JSON: {e.msg}") from e
        if not isinstance(data, dict):
            raise CorpusFormatError(f"{path}: expected a JSON object of id -> text")
        return data
    if suffix == ".jsonl":
        out: Dict[Any, Any] = {}
        for row in _read_jsonl(path):
            if "id" not in row:
                raise CorpusFormatError(f"{path}: row without 'id': {row!r}")
            out[row["id"]] = row.get("text")
        return out
    raise CorpusFormatError(f"{path}: unsupported corpus format {suffix!r} (use .json or .jsonl)")


def load_snippets(path: Path) -> List[Dict[str, str]]:
    """JSONL rows ``{"snippet_id": ..., "text": ...}``; ids default to ``s0001``..."""
    out: List[Dict[str, str]] = []
    for i, row in enumerate(_read_jsonl(path), start=1):
        out.append({
            "snippet_id": str(row.get("snippet_id", f"s{i:04d}")),
            "text": str(row.get("text") or ""),
        })
    return out

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from ..core.bag import BagOfPatterns
from ..core.tokens import Tokenizer
from ..corpus_io import load_corpus, load_snippets
from ..utils.hashing import sha256_hex
from ..utils.json_canonical import canonical_dumps
from ..utils.schema_validator import DEFAULT_SCHEMAS_DIR, SchemaRegistry, validate_payload

log = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    # fixed so that generated manifests are byte-stable
    return "1970-01-01T00:00:00Z"


def score_stats(scores: List[float]) -> Dict[str, float]:
    if not scores:
        return {"mean": 0.0, "p50": 0.0, "p90": 0.0, "min": 0.0, "max": 0.0}
    arr = np.asarray(scores, dtype=np.float64)
    return {
        "mean": round(float(arr.mean()), 4),
        "p50": round(float(np.percentile(arr, 50)), 4),
        "p90": round(float(np.percentile(arr, 90)), 4),
        "min": round(float(arr.min()), 4),
        "max": round(float(arr.max()), 4),
    }


def run_offline(
    corpus_path: Path,
    snippets_path: Path,
    out_dir: Path,
    schemas_dir: Path = DEFAULT_SCHEMAS_DIR,
    config_version: str = "pattern_bag_v1",
    mode: str = "generate",
    min_score: float = 0.0,
    tokenizer: Optional[Tokenizer] = None,
) -> Dict[str, Any]:
    if mode not in ("generate", "check"):
        raise ValueError("mode must be 'generate' or 'check'")

    registry = SchemaRegistry(schemas_dir)
    bag = BagOfPatterns(load_corpus(corpus_path), tokenizer=tokenizer)
    snippets = load_snippets(snippets_path)

    matches: List[Dict[str, Any]] = []
    for row in snippets:
        res = bag.best_for(row["text"])
        payload = {
            "schema_id": "match_result.v1",
            "config_version": config_version,
            "snippet_id": row["snippet_id"],
            "identifier": res.identifier,
            "score": res.score,
            "reliable": res.reliable(min_score),
        }
        validate_payload(payload, "match_result.v1", registry)
        matches.append(payload)

    manifest: Dict[str, Any] = {
        "schema_id": "run_manifest.v1",
        "config_version": config_version,
        "timestamp": _utc_now_iso(),
        "counts": {
            "patterns": len(bag),
            "skipped": bag.skipped,
            "snippets": len(matches),
            "matched": sum(1 for m in matches if m["identifier"] != 0),
            "reliable": sum(1 for m in matches if m["reliable"]),
        },
        "hashes": {
            "corpus": bag.fingerprint,
            "matches": sha256_hex(matches),
        },
        "scores": score_stats([m["score"] for m in matches]),
    }
    validate_payload(manifest, "run_manifest.v1", registry)

    manifest_path = out_dir / "run_manifest.json"

    if mode == "generate":
        out_dir.mkdir(parents=True, exist_ok=True)
        manifest_path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8")
        (out_dir / "matches.json").write_text(canonical_dumps(matches), encoding="utf-8")
        log.info("wrote %d matches to %s", len(matches), out_dir)
    else:
        expected = json.loads(manifest_path.read_text(encoding="utf-8"))
        if expected.get("config_version") != manifest["config_version"]:
            raise AssertionError(
                f"Golden mismatch key=config_version: expected={expected.get('config_version')} "
                f"actual={manifest['config_version']}"
            )
        for k in ("counts", "hashes", "scores"):
            if expected.get(k) != manifest.get(k):
                raise AssertionError(f"Golden mismatch key={k}")
        log.info("golden check passed for %s", out_dir)

    return manifest


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pattern-bag-batch")
    ap.add_argument("--corpus", required=True)
    ap.add_argument("--snippets", required=True)
    ap.add_argument("--out", required=True)
    ap.add_argument("--schemas", default=str(DEFAULT_SCHEMAS_DIR))
    ap.add_argument("--config-version", default="pattern_bag_v1")
    ap.add_argument("--mode", choices=["generate", "check"], default="generate")
    ap.add_argument("--min-score", type=float, default=0.0)
    args = ap.parse_args(argv)

    run_offline(
        corpus_path=Path(args.corpus),
        snippets_path=Path(args.snippets),
        out_dir=Path(args.out),
        schemas_dir=Path(args.schemas),
        config_version=args.config_version,
        mode=args.mode,
        min_score=args.min_score,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

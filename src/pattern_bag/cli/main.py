from __future__ import annotations
import argparse, json, sys
from pathlib import Path

from pattern_bag.batch.runner import run_offline
from pattern_bag.core.bag import BagOfPatterns
from pattern_bag.settings import Settings
from pattern_bag.utils.logs import setup_logging
from pattern_bag.utils.schema_validator import DEFAULT_SCHEMAS_DIR


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pattern-bag", description="TF-IDF best-match against a corpus of known patterns")
    sub = p.add_subparsers(dest="cmd", required=True)

    m = sub.add_parser("match", help="Print the best matching pattern for one snippet")
    m.add_argument("--corpus", default=None, help="corpus .json/.jsonl (defaults to $PATTERN_BAG_CORPUS)")
    src = m.add_mutually_exclusive_group(required=True)
    src.add_argument("--snippet")
    src.add_argument("--snippet-file")
    m.add_argument("--min-score", type=float, default=None)

    b = sub.add_parser("batch", help="Match a JSONL file of snippets and write/check a run manifest")
    b.add_argument("--corpus", required=True)
    b.add_argument("--snippets", required=True)
    b.add_argument("--out", required=True)
    b.add_argument("--schemas", default=str(DEFAULT_SCHEMAS_DIR))
    b.add_argument("--config-version", default="pattern_bag_v1")
    b.add_argument("--mode", choices=["generate", "check"], default="generate")
    b.add_argument("--min-score", type=float, default=None)
    return p


def _match(args: argparse.Namespace, settings: Settings) -> int:
    corpus = args.corpus or settings.corpus_path
    if corpus is None:
        print("pattern-bag: --corpus or PATTERN_BAG_CORPUS is required", file=sys.stderr)
        return 2
    bag = BagOfPatterns.from_file(Path(corpus))
    if args.snippet_file:
        snippet = Path(args.snippet_file).read_text(encoding="utf-8")
    else:
        snippet = args.snippet
    min_score = settings.min_score if args.min_score is None else args.min_score
    res = bag.best_for(snippet)
    out = {"identifier": res.identifier, "score": res.score, "reliable": res.reliable(min_score)}
    print(json.dumps(out, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    setup_logging(settings)
    if args.cmd == "match":
        return _match(args, settings)
    if args.cmd == "batch":
        manifest = run_offline(
            corpus_path=Path(args.corpus),
            snippets_path=Path(args.snippets),
            out_dir=Path(args.out),
            schemas_dir=Path(args.schemas),
            config_version=args.config_version,
            mode=args.mode,
            min_score=settings.min_score if args.min_score is None else args.min_score,
        )
        print(json.dumps(manifest["counts"], sort_keys=True))
        return 0
    return 2


if __name__ == "__main__":
    raise SystemExit(main())

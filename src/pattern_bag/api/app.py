from __future__ import annotations
import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, Response
from pydantic import BaseModel
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from pattern_bag import __version__
from pattern_bag.core.bag import BagOfPatterns
from pattern_bag.metrics import LAT, PATTERNS, mark
from pattern_bag.settings import Settings

log = logging.getLogger(__name__)


class BestForRequest(BaseModel):
    snippet: str


class BestForResponse(BaseModel):
    identifier: int
    score: float
    reliable: bool


class HealthResponse(BaseModel):
    status: str
    version: str
    patterns: int
    fingerprint: str


def build_bag(settings: Settings) -> BagOfPatterns:
    if settings.corpus_path is None:
        log.warning("PATTERN_BAG_CORPUS is not set; serving an empty corpus")
        return BagOfPatterns({})
    return BagOfPatterns.from_file(settings.corpus_path)


def create_app(bag: Optional[BagOfPatterns] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="pattern-bag",
        description="Deterministic TF-IDF matching of text snippets against known patterns.",
        version=__version__,
    )
    # a rebuilt index is swapped in by replacing this reference
    app.state.bag = bag if bag is not None else build_bag(settings)
    app.state.settings = settings
    PATTERNS.set(len(app.state.bag))

    @app.post("/best_for", response_model=BestForResponse)
    def best_for(req: BestForRequest, request: Request):
        t0 = time.perf_counter()
        try:
            res = request.app.state.bag.best_for(req.snippet)
            mark("best_for", res.identifier != 0)
            return BestForResponse(
                identifier=res.identifier,
                score=res.score,
                reliable=res.reliable(request.app.state.settings.min_score),
            )
        finally:
            LAT.labels(endpoint="best_for").observe((time.perf_counter() - t0) * 1000.0)

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request):
        b = request.app.state.bag
        return HealthResponse(status="ok", version=__version__, patterns=len(b), fingerprint=b.fingerprint)

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


app = create_app()

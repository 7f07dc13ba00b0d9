from __future__ import annotations
from prometheus_client import Counter, Gauge, Histogram

QUERIES = Counter("pattern_bag_queries_total", "Total best_for queries", ["endpoint", "outcome"])
LAT = Histogram("pattern_bag_query_latency_ms", "Query latency ms", ["endpoint"])
PATTERNS = Gauge("pattern_bag_patterns", "Patterns in the loaded index")


def mark(endpoint: str, matched: bool) -> None:
    QUERIES.labels(endpoint=endpoint, outcome="match" if matched else "no_match").inc()

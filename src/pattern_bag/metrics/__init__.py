from .prom import LAT, PATTERNS, QUERIES, mark

__all__ = ["LAT", "PATTERNS", "QUERIES", "mark"]

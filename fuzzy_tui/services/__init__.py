"""Business logic services for Fuzzy TUI."""

from .search import BenchmarkResult, SearchService, benchmark_incremental, typing_prefixes

__all__ = [
    "BenchmarkResult",
    "SearchService",
    "benchmark_incremental",
    "typing_prefixes",
]

"""Benchmark of anti-pattern detection on example process graphs."""

from .processes import BENCHMARKS, ProcessBenchmark
from .runner import BenchmarkOutcome, BenchmarkRunner, format_summary

__all__ = [
    'BENCHMARKS',
    'ProcessBenchmark',
    'BenchmarkOutcome',
    'BenchmarkRunner',
    'format_summary'
]

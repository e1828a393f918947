#!/usr/bin/env python3
"""
Benchmark Runner for the Process Anti-Pattern Detector

Seeds each example process graph into Neo4j, runs detection for the
anti-patterns it is labelled with and compares the outcome to the label.
"""

import time
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional
from dataclasses import dataclass

from ..catalogue.anti_patterns import AntiPatternId, get_anti_pattern
from ..detection.detector import AntiPatternDetector, DetectionResult
from .processes import BENCHMARKS, ProcessBenchmark

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkOutcome:
    """Detection outcome of one anti-pattern on one process graph."""
    process_name: str
    anti_pattern_id: AntiPatternId
    anti_pattern_name: str
    expected: bool
    result: DetectionResult

    @property
    def detected(self) -> bool:
        return self.result.detected

    @property
    def correct(self) -> bool:
        return self.result.detected == self.expected

    def to_dict(self) -> Dict[str, Any]:
        return {
            "process": self.process_name,
            "anti_pattern": self.anti_pattern_id.value,
            "expected": self.expected,
            "correct": self.correct,
            "result": self.result.to_dict()
        }


def format_summary(outcome: BenchmarkOutcome) -> str:
    """One-line summary such as ``[Correct] - detected - 3ms (total: 5ms)``."""
    times = outcome.result.execution_times_ms
    summary = (f"[{'Correct' if outcome.correct else 'Incorrect!!!'}] - "
               f"{'detected' if outcome.detected else 'not detected'} - "
               f"{outcome.result.last_time_ms:.0f}ms")
    if len(times) > 1:
        summary += f" (total: {outcome.result.total_time_ms:.0f}ms)"
    return summary


class BenchmarkRunner:
    """Runs the benchmark suite against a live graph client."""

    def __init__(self, client, config: Optional[Dict[str, Any]] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.client = client
        self.config = config or {}
        self.detector = AntiPatternDetector(client)
        self._sleep = sleep

        benchmark_config = self.config.get('benchmark', {})
        self.reset_wait_seconds = benchmark_config.get('reset_wait_seconds', 2)
        self.index_wait_seconds = benchmark_config.get('index_wait_seconds', 5)

    def prepare(self, benchmark: ProcessBenchmark):
        """Replace the database contents with the benchmark's process graph."""
        logger.info(f"Adding graph \"{benchmark.name}\"")
        self.client.reset_database()
        self._sleep(self.reset_wait_seconds)
        self.client.seed_graph(benchmark.construction_query)
        # wait for the database to index the new graph
        self._sleep(self.index_wait_seconds)

    def run_benchmark(self, benchmark: ProcessBenchmark) -> List[BenchmarkOutcome]:
        """Seed one process graph and check each labelled anti-pattern."""
        self.prepare(benchmark)

        outcomes = []
        for anti_pattern_id, expected in benchmark.expected:
            anti_pattern = get_anti_pattern(anti_pattern_id)
            result = self.detector.detect(anti_pattern.template, name=anti_pattern.name)
            outcome = BenchmarkOutcome(
                process_name=benchmark.name,
                anti_pattern_id=anti_pattern_id,
                anti_pattern_name=anti_pattern.name,
                expected=expected,
                result=result
            )
            if not outcome.correct:
                logger.warning(f"{benchmark.name}: {anti_pattern.name} expected "
                               f"{'a match' if expected else 'no match'}")
            outcomes.append(outcome)

        return outcomes

    def run(self, benchmarks: Iterable[ProcessBenchmark] = BENCHMARKS) -> List[BenchmarkOutcome]:
        """Run every benchmark in order."""
        outcomes = []
        for benchmark in benchmarks:
            outcomes.extend(self.run_benchmark(benchmark))

        incorrect = sum(1 for outcome in outcomes if not outcome.correct)
        logger.info(f"Benchmark finished: {len(outcomes) - incorrect}/{len(outcomes)} correct")
        return outcomes

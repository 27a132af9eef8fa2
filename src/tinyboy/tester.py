"""
Automated tester loop: ask a generator for inputs, run them, feed back coverage.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Set, TypeVar

T = TypeVar("T")

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


class InputGenerator(ABC, Generic[T]):
    """Capability a tester drives: hand out inputs, accept feedback for them."""

    @abstractmethod
    def has_more(self) -> bool:
        """Return True if ``generate`` can produce another input."""

    @abstractmethod
    def generate(self) -> Optional[T]:
        """Return the next input, or None when nothing is left."""

    @abstractmethod
    def record(self, input: T, coverage: Iterable[int], state: bytes) -> None:
        """Feedback for an input previously returned by ``generate``."""

    def report_summary(self) -> None:
        """Log end-of-session statistics. Called once when a run finishes."""


@dataclass(frozen=True)
class ExecutionResult:
    # location IDs reached during the run
    coverage: Iterable[int]
    # terminal memory image
    state: bytes


Executor = Callable[[T], ExecutionResult]


@dataclass
class TesterReport:
    runs: int
    covered: Set[int]
    elapsed_s: float
    exhausted: bool


class AutomatedTester(Generic[T]):
    def __init__(
        self,
        generator: InputGenerator[T],
        executor: Executor,
        *,
        log_interval: int = 1000,
    ):
        self.generator = generator
        self.executor = executor
        self.log_interval = log_interval

    def run(self, max_iterations: Optional[int] = None) -> TesterReport:
        covered: Set[int] = set()
        runs = 0
        start = time.perf_counter()

        try:
            while max_iterations is None or runs < max_iterations:
                if not self.generator.has_more():
                    break
                item = self.generator.generate()
                if item is None:
                    break

                result = self.executor(item)
                runs += 1
                coverage = set(result.coverage)
                covered |= coverage
                self.generator.record(item, coverage, result.state)

                if runs % self.log_interval == 0:
                    logging.info(f"runs={runs} | covered={len(covered)}")
        except KeyboardInterrupt:
            logging.info("Interrupted by user")

        elapsed = time.perf_counter() - start
        exhausted = not self.generator.has_more()
        logging.info(
            f"Testing finished: {runs} runs, {len(covered)} locations covered "
            f"in {elapsed:.2f}s"
        )
        self.generator.report_summary()
        return TesterReport(
            runs=runs, covered=covered, elapsed_s=elapsed, exhausted=exhausted
        )

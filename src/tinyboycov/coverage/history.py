"""
Retained coverage history and the acceptance decision for new records.

A record is kept only if its coverage is not subsumed by a record already
kept. Equal coverage counts as subsumed, so the earlier record wins ties.
Keeping a record evicts every earlier record whose coverage it strictly
contains, which keeps the history an antichain under subsumption.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .bitmap import CoverageBitmap, coverage_fingerprint, subsumed_by
from .record import CoverageRecord
from .tracker import GlobalLocationTracker


@dataclass
class HistoryEntry:
    record: CoverageRecord
    generation: int = 0
    new_locations: int = 0


@dataclass(frozen=True)
class HistoryDecision:
    accept: bool
    reason: str
    coverage_fingerprint: str
    new_locations: int
    rare_score: float
    evicted: int = 0


class CoverageHistory:
    def __init__(
        self,
        tracker: GlobalLocationTracker,
        rng: Optional[random.Random] = None,
    ):
        self._tracker = tracker
        self._rng = rng or random.Random()
        self._entries: List[HistoryEntry] = []
        self._covered = CoverageBitmap()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    @property
    def covered(self) -> CoverageBitmap:
        """Union of the coverage of every record seen so far."""
        return self._covered

    def find_subsuming(self, coverage: CoverageBitmap) -> Optional[HistoryEntry]:
        # Cheap rejection: anything outside the union cannot be subsumed
        if not subsumed_by(coverage, self._covered):
            return None
        for entry in self._entries:
            if subsumed_by(coverage, entry.record.coverage):
                return entry
        return None

    def decide_and_update(
        self, record: CoverageRecord, *, generation: int = 0
    ) -> HistoryDecision:
        coverage = record.coverage
        fp = coverage_fingerprint(coverage)
        rare_score = self._tracker.compute_rare_score(coverage)
        new_locations = self._tracker.merge(coverage)

        subsuming = self.find_subsuming(coverage)
        if subsuming is not None:
            logging.debug(
                f"{record.sequence!r} subsumed by {subsuming.record.sequence!r}"
            )
            return HistoryDecision(
                accept=False,
                reason="subsumed",
                coverage_fingerprint=fp,
                new_locations=new_locations,
                rare_score=rare_score,
            )

        kept = [
            e for e in self._entries if not subsumed_by(e.record.coverage, coverage)
        ]
        evicted = len(self._entries) - len(kept)
        kept.append(
            HistoryEntry(
                record=record, generation=generation, new_locations=new_locations
            )
        )
        self._entries = kept
        self._covered = self._covered | coverage

        return HistoryDecision(
            accept=True,
            reason="new_location" if new_locations > 0 else "new_combination",
            coverage_fingerprint=fp,
            new_locations=new_locations,
            rare_score=rare_score,
            evicted=evicted,
        )

    def select_weighted(
        self,
        *,
        k: int = 1,
        exclude: Optional[CoverageRecord] = None,
        eps: float = 1e-9,
    ) -> List[HistoryEntry]:
        """
        Pick ``k`` retained entries with replacement, favouring those that
        reach rarely hit locations. Empty if nothing but ``exclude`` is kept.
        """
        pool = [e for e in self._entries if e.record is not exclude]
        if not pool or k <= 0:
            return []

        weights = [
            self._tracker.compute_rare_score(e.record.coverage) + eps for e in pool
        ]
        return self._rng.choices(pool, weights=weights, k=k)

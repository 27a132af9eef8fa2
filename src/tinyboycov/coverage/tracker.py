"""
Global location hit counter for rare-location prioritization.
"""

from __future__ import annotations

from array import array
from typing import Iterable


class GlobalLocationTracker:
    """
    Tracks location hit counts in a saturating counter map.

    Counters are incremented once per recorded run for each location in the
    run's coverage. The map grows on demand, so the size of the target's
    location universe never has to be known up front.
    """

    def __init__(self, *, initial_size: int = 1024, max_count: int = 0xFFFF):
        if initial_size <= 0:
            raise ValueError("initial_size must be positive")

        self.max_count = max_count
        self.counts = array("H", [0]) * initial_size
        self.distinct = 0

    def _count(self, location_id: int) -> int:
        if location_id >= len(self.counts):
            return 0
        return self.counts[location_id]

    def _grow(self, location_id: int) -> None:
        size = len(self.counts)
        while size <= location_id:
            size *= 2
        self.counts.extend(array("H", [0]) * (size - len(self.counts)))

    def compute_rare_score(self, location_ids: Iterable[int]) -> float:
        score = 0.0
        for location_id in location_ids:
            score += 1.0 / (self._count(location_id) + 1.0)
        return score

    def count_new_locations(self, location_ids: Iterable[int]) -> int:
        return sum(1 for location_id in location_ids if self._count(location_id) == 0)

    def merge(self, location_ids: Iterable[int]) -> int:
        """
        Merge a run's coverage into the global counter map.

        Returns the count of locations that were newly discovered (count was 0).
        """
        new_locations = 0
        for location_id in location_ids:
            if location_id >= len(self.counts):
                self._grow(location_id)
            current = self.counts[location_id]
            if current == 0:
                new_locations += 1
            if current < self.max_count:
                self.counts[location_id] = current + 1
        self.distinct += new_locations
        return new_locations

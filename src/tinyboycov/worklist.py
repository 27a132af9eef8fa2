from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from tinyboy.input_sequence import InputSequence

from .sampling import random_sample


@dataclass(frozen=True)
class Admission:
    admitted: int = 0
    duplicates: int = 0
    evicted: int = 0
    sequences: Tuple[InputSequence, ...] = ()


class Worklist:
    """
    Pending sequences awaiting execution.

    Dispatch is LIFO so freshly admitted mutants run before older entries.
    A sequence is admitted at most once per session: anything pending or
    already dispatched is rejected as a duplicate.

    The ceiling bounds pending entries that came from feedback. Seeds are
    never evicted. Eviction removes entries without reordering the rest.
    """

    def __init__(self, rng: random.Random, ceiling: Optional[int] = None):
        self.rng = rng
        self.ceiling = ceiling

        self._pending: List[InputSequence] = []
        self._members: Set[InputSequence] = set()
        self._seeds: Set[InputSequence] = set()
        self._dispatched: Set[InputSequence] = set()

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, sequence: InputSequence) -> bool:
        return sequence in self._members

    def is_known(self, sequence: InputSequence) -> bool:
        return sequence in self._members or sequence in self._dispatched

    @property
    def dispatched_count(self) -> int:
        return len(self._dispatched)

    @property
    def pending_seeds(self) -> int:
        return len(self._seeds)

    @property
    def pending_mutants(self) -> int:
        return len(self._pending) - len(self._seeds)

    def seed(self, sequences: Iterable[InputSequence]) -> int:
        """Add initial sequences. The ceiling only bounds later admissions."""
        added = 0
        for seq in sequences:
            if self.is_known(seq):
                continue
            self._pending.append(seq)
            self._members.add(seq)
            self._seeds.add(seq)
            added += 1
        return added

    def pop(self) -> Optional[InputSequence]:
        if not self._pending:
            return None
        seq = self._pending.pop()
        self._members.discard(seq)
        self._seeds.discard(seq)
        self._dispatched.add(seq)
        return seq

    def admit(self, candidates: Iterable[InputSequence]) -> Admission:
        batch: List[InputSequence] = []
        batch_members: Set[InputSequence] = set()
        duplicates = 0
        for seq in candidates:
            if self.is_known(seq) or seq in batch_members:
                duplicates += 1
                continue
            batch.append(seq)
            batch_members.add(seq)

        if not batch:
            return Admission(duplicates=duplicates)

        evicted = 0
        if self.ceiling is not None:
            before = len(batch)
            random_sample(batch, self.ceiling, self.rng)
            evicted = before - len(batch)
            overflow = self.pending_mutants + len(batch) - self.ceiling
            if overflow > 0:
                evicted += self._evict_mutants(overflow)

        self._pending.extend(batch)
        self._members.update(batch)
        return Admission(
            admitted=len(batch),
            duplicates=duplicates,
            evicted=evicted,
            sequences=tuple(batch),
        )

    def _evict_mutants(self, count: int) -> int:
        victims = [s for s in self._pending if s not in self._seeds]
        random_sample(victims, count, self.rng)
        dropped = set(victims)
        self._pending = [s for s in self._pending if s not in dropped]
        self._members -= dropped
        return len(dropped)

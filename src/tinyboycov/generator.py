"""
Coverage-guided input generator for the TinyBoy machine.

The generator owns a worklist of pending input sequences. The tester pulls
sequences with ``generate``, runs them, and hands the observed coverage back
through ``record``. Runs whose coverage is subsumed by a retained run are
dropped. Runs that reach something new are retained and expanded into a
batch of mutants, which are pushed onto the worklist ahead of older entries.
"""

from __future__ import annotations

import logging
import random
import secrets
from typing import Dict, Iterable, List, Optional, Union

from tinyboy.input_sequence import InputSequence
from tinyboy.tester import InputGenerator

from .config import GeneratorConfig
from .coverage.bitmap import CoverageBitmap
from .coverage.history import CoverageHistory, HistoryDecision
from .coverage.record import CoverageRecord
from .coverage.tracker import GlobalLocationTracker
from .mutator.sequence_mutator import SequenceMutator
from .sampling import random_sample
from .seeding import Seeder, default_seeder
from .statistics import GeneratorStatistics
from .worklist import Worklist


class TinyBoyInputGenerator(InputGenerator[InputSequence]):
    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        *,
        seeder: Optional[Seeder] = None,
    ):
        self.config = config or GeneratorConfig()
        self.config.validate()

        self.seed = (
            self.config.seed if self.config.seed is not None else secrets.randbits(64)
        )
        self.rng = random.Random(self.seed)

        self.tracker = GlobalLocationTracker()
        self.history = CoverageHistory(self.tracker, rng=self.rng)
        self.mutator = SequenceMutator(
            self.rng, self.config.alphabet, self.config.mutation
        )
        self.worklist = Worklist(self.rng, ceiling=self.config.pool_ceiling)
        self.stats = GeneratorStatistics()

        # Generation of every sequence that is pending or awaiting feedback
        self._generation: Dict[InputSequence, int] = {}
        self._awaiting: Dict[InputSequence, int] = {}

        seeder = seeder or default_seeder(self.config, self.rng)
        self.stats.seeded = self.worklist.seed(self._checked(seeder.seeds()))
        logging.info(
            f"Worklist seeded with {self.stats.seeded} sequences (seed={self.seed})"
        )

    def _checked(self, sequences: Iterable[InputSequence]) -> Iterable[InputSequence]:
        alphabet = set(self.config.alphabet)
        for seq in sequences:
            if len(seq) != self.config.sequence_length:
                raise ValueError(
                    f"seed {seq!r} has length {len(seq)}, "
                    f"expected {self.config.sequence_length}"
                )
            if not alphabet.issuperset(seq):
                raise ValueError(f"seed {seq!r} uses symbols outside the alphabet")
            yield seq

    @property
    def covered(self) -> CoverageBitmap:
        return self.history.covered

    def report_summary(self) -> None:
        self.stats.log_summary(prefix=f"Generator (seed={self.seed})")

    def has_more(self) -> bool:
        return len(self.worklist) > 0

    def generate(self) -> Optional[InputSequence]:
        seq = self.worklist.pop()
        if seq is None:
            return None
        self._awaiting[seq] = self._generation.pop(seq, 0)
        self.stats.dispatched += 1
        return seq

    def record(
        self,
        input: InputSequence,
        coverage: Union[CoverageBitmap, Iterable[int]],
        state: bytes,
    ) -> None:
        if input not in self._awaiting:
            self.stats.ignored_records += 1
            logging.warning(f"Ignoring feedback for undispatched sequence {input!r}")
            return

        generation = self._awaiting.pop(input)
        record = CoverageRecord(
            sequence=input,
            coverage=CoverageBitmap.coerce(coverage),
            state=bytes(state),
        )
        decision = self.history.decide_and_update(record, generation=generation)
        self.stats.record_feedback(
            accepted=decision.accept,
            history_evictions=decision.evicted,
            state_fp=record.state_fp,
        )

        if not decision.accept:
            return

        self._expand(record, generation, decision)

    def _expand(
        self, record: CoverageRecord, generation: int, decision: HistoryDecision
    ) -> None:
        candidates = list(dict.fromkeys(self._mutants(record)))
        random_sample(candidates, self.config.mutants_per_record, self.rng)

        admission = self.worklist.admit(candidates)
        self.stats.admitted += admission.admitted
        self.stats.duplicate_candidates += admission.duplicates
        self.stats.pool_evictions += admission.evicted

        for seq in admission.sequences:
            self._generation[seq] = generation + 1
        if admission.evicted:
            self._generation = {
                s: g for s, g in self._generation.items() if s in self.worklist
            }

        logging.debug(
            f"Retained {record.sequence!r} ({decision.reason}, "
            f"+{decision.new_locations} locations, gen={generation}): "
            f"admitted {admission.admitted}, pending {len(self.worklist)}"
        )

    def _mutants(self, record: CoverageRecord) -> List[InputSequence]:
        # Twice the batch size leaves room for duplicates and sampling
        count = 2 * self.config.mutants_per_record
        partners = [
            e.record.sequence
            for e in self.history.select_weighted(k=count, exclude=record)
        ]
        if not partners:
            partners = [None] * count
        return [
            self.mutator.mutate(record.sequence, partner) for partner in partners
        ]

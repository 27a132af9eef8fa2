"""
Initial worklist population.

Exhaustive enumeration of every sequence of length L over an alphabet of A
symbols yields A^L sequences, which is only tractable for small spaces. The
default seeder enumerates exhaustively while the space fits under
``max_exhaustive_seeds`` and falls back to a bounded set of distinct random
sequences otherwise.
"""

from __future__ import annotations

import itertools
import logging
import random
from abc import ABC, abstractmethod
from typing import Hashable, Iterator, Sequence, Set

from tinyboy.input_sequence import InputSequence

from .config import GeneratorConfig


def enumerate_sequences(
    alphabet: Sequence[Hashable], length: int
) -> Iterator[InputSequence]:
    """
    Yield every sequence of exactly ``length`` symbols drawn from ``alphabet``.

    Each of the ``len(alphabet) ** length`` sequences is produced once.
    """
    for symbols in itertools.product(alphabet, repeat=length):
        yield InputSequence(symbols)


def random_sequence(
    alphabet: Sequence[Hashable], length: int, rng: random.Random
) -> InputSequence:
    return InputSequence(rng.choice(alphabet) for _ in range(length))


class Seeder(ABC):
    @abstractmethod
    def seeds(self) -> Iterator[InputSequence]:
        """Yield the distinct sequences the worklist starts with."""


class ExhaustiveSeeder(Seeder):
    def __init__(self, alphabet: Sequence[Hashable], length: int):
        self.alphabet = tuple(alphabet)
        self.length = length

    def seeds(self) -> Iterator[InputSequence]:
        return enumerate_sequences(self.alphabet, self.length)


class RandomSeeder(Seeder):
    """Bounded set of distinct uniformly random sequences."""

    def __init__(
        self,
        alphabet: Sequence[Hashable],
        length: int,
        count: int,
        rng: random.Random,
    ):
        self.alphabet = tuple(alphabet)
        self.length = length
        # Never ask for more distinct sequences than the space holds
        self.count = min(count, len(self.alphabet) ** length)
        self.rng = rng

    def seeds(self) -> Iterator[InputSequence]:
        seen: Set[InputSequence] = set()
        while len(seen) < self.count:
            seq = random_sequence(self.alphabet, self.length, self.rng)
            if seq in seen:
                continue
            seen.add(seq)
            yield seq


def default_seeder(config: GeneratorConfig, rng: random.Random) -> Seeder:
    space = config.sequence_space
    if space <= config.max_exhaustive_seeds:
        logging.info(f"Seeding: enumerating all {space} sequences")
        return ExhaustiveSeeder(config.alphabet, config.sequence_length)

    logging.info(
        f"Seeding: sequence space {len(config.alphabet)}^{config.sequence_length} "
        f"exceeds {config.max_exhaustive_seeds}, sampling "
        f"{config.random_seed_count} random sequences"
    )
    return RandomSeeder(
        config.alphabet, config.sequence_length, config.random_seed_count, rng
    )

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Optional, Tuple

from tinyboy.control_pad import ALPHABET

from .exceptions import ConfigurationError


@dataclass
class MutationConfig:
    """Relative weights of the sequence mutation strategies."""

    substitute_weight: float = 1.0
    regrow_suffix_weight: float = 0.5
    shift_weight: float = 0.5
    splice_weight: float = 1.0

    # Retries before falling back to plain substitution
    max_attempts: int = 4

    def weights(self) -> dict[str, float]:
        return {
            "substitute": self.substitute_weight,
            "regrow_suffix": self.regrow_suffix_weight,
            "shift": self.shift_weight,
            "splice": self.splice_weight,
        }


@dataclass
class GeneratorConfig:
    alphabet: Tuple[Hashable, ...] = ALPHABET
    sequence_length: int = 10
    # Upper bound on pending sequences once feedback starts admitting mutants
    pool_ceiling: int = 1 << 16
    mutants_per_record: int = 32
    # Enumerate A^L exhaustively only up to this many sequences
    max_exhaustive_seeds: int = 1 << 16
    random_seed_count: int = 4096
    seed: Optional[int] = None
    mutation: MutationConfig = field(default_factory=MutationConfig)

    def __post_init__(self):
        self.alphabet = tuple(self.alphabet)

    @property
    def sequence_space(self) -> int:
        return len(self.alphabet) ** self.sequence_length

    def validate(self) -> None:
        if not self.alphabet:
            raise ConfigurationError("alphabet", "must contain at least one symbol")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ConfigurationError("alphabet", "symbols must be distinct")
        if self.sequence_length <= 0:
            raise ConfigurationError(
                "sequence_length", f"must be positive, got {self.sequence_length}"
            )
        if self.pool_ceiling < 0:
            raise ConfigurationError(
                "pool_ceiling", f"must not be negative, got {self.pool_ceiling}"
            )
        if self.mutants_per_record <= 0:
            raise ConfigurationError(
                "mutants_per_record",
                f"must be positive, got {self.mutants_per_record}",
            )
        if self.max_exhaustive_seeds < 0:
            raise ConfigurationError(
                "max_exhaustive_seeds",
                f"must not be negative, got {self.max_exhaustive_seeds}",
            )
        if self.random_seed_count <= 0:
            raise ConfigurationError(
                "random_seed_count",
                f"must be positive, got {self.random_seed_count}",
            )

        weights = self.mutation.weights()
        for name, weight in weights.items():
            if weight < 0:
                raise ConfigurationError(
                    f"mutation.{name}_weight", f"must not be negative, got {weight}"
                )
        if not any(weights.values()):
            raise ConfigurationError("mutation", "at least one weight must be positive")
        if self.mutation.max_attempts <= 0:
            raise ConfigurationError(
                "mutation.max_attempts",
                f"must be positive, got {self.mutation.max_attempts}",
            )


# Default configuration instance
DEFAULT_CONFIG = GeneratorConfig()

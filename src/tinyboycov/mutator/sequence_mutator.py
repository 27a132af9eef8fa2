"""
Length-preserving mutations of input sequences.

Every strategy builds a new sequence; parents are never modified. A strategy
returns None when it cannot produce something different from the parent, in
which case the executor retries with another strategy and finally falls back
to a single-symbol substitution.
"""

from __future__ import annotations

import random
from typing import Hashable, List, Optional, Sequence

from tinyboy.input_sequence import InputSequence

from ..config import MutationConfig
from .strategy import (
    StrategyExecutor,
    StrategyRegistry,
    StrategySelector,
    register_decorated,
    strategy,
)


class SequenceMutator:
    def __init__(
        self,
        rng: random.Random,
        alphabet: Sequence[Hashable],
        config: Optional[MutationConfig] = None,
    ):
        self.rng = rng
        self.alphabet = tuple(alphabet)
        self.config = config or MutationConfig()

        self.registry = StrategyRegistry()
        register_decorated(self.registry, self)
        self.selector = StrategySelector(rng)
        self.executor = StrategyExecutor(self.selector)

    def _random_symbols(self, count: int) -> List[Hashable]:
        return [self.rng.choice(self.alphabet) for _ in range(count)]

    def _changed(
        self, parent: InputSequence, child: InputSequence
    ) -> Optional[InputSequence]:
        return None if child == parent else child

    # weights

    def _substitute_weight(self, **_) -> float:
        return self.config.substitute_weight

    def _regrow_suffix_weight(self, **_) -> float:
        return self.config.regrow_suffix_weight

    def _shift_weight(self, **_) -> float:
        return self.config.shift_weight

    def _splice_weight(self, **_) -> float:
        return self.config.splice_weight

    def _has_partner(
        self, *, parent: InputSequence, partner: Optional[InputSequence], **_
    ) -> bool:
        return partner is not None and partner != parent and len(parent) > 1

    # strategies

    @strategy(name="substitute", weight="_substitute_weight")
    def substitute(self, *, parent: InputSequence, **_) -> Optional[InputSequence]:
        if len(self.alphabet) < 2:
            return None
        index = self.rng.randrange(len(parent))
        current = parent[index]
        symbol = self.rng.choice([s for s in self.alphabet if s != current])
        return parent.replace(index, symbol)

    @strategy(name="regrow_suffix", weight="_regrow_suffix_weight")
    def regrow_suffix(self, *, parent: InputSequence, **_) -> Optional[InputSequence]:
        cut = self.rng.randrange(len(parent))
        tail = self._random_symbols(len(parent) - cut)
        return self._changed(parent, InputSequence(parent.symbols[:cut] + tuple(tail)))

    @strategy(name="shift", weight="_shift_weight")
    def shift(self, *, parent: InputSequence, **_) -> Optional[InputSequence]:
        count = self.rng.randint(1, max(1, len(parent) // 2))
        return self._changed(
            parent, parent.shifted(count, self._random_symbols(count))
        )

    @strategy(
        name="splice",
        is_applicable="_has_partner",
        weight="_splice_weight",
    )
    def splice(
        self,
        *,
        parent: InputSequence,
        partner: Optional[InputSequence] = None,
        **_,
    ) -> Optional[InputSequence]:
        assert partner is not None
        cut = self.rng.randrange(1, len(parent))
        if self.rng.random() < 0.5:
            child = parent.splice(partner, cut)
        else:
            child = partner.splice(parent, cut)
        return self._changed(parent, child)

    def mutate(
        self,
        parent: InputSequence,
        partner: Optional[InputSequence] = None,
    ) -> InputSequence:
        context = {"parent": parent, "partner": partner}
        return self.executor.execute_with_retry(
            self.registry.collect(context=context),
            max_attempts=self.config.max_attempts,
            fallback=lambda: self.substitute(parent=parent) or parent,
            context=context,
        )

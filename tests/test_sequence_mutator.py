from __future__ import annotations

import random

import pytest

from tinyboy.control_pad import ALPHABET, Button
from tinyboy.input_sequence import InputSequence
from tinyboycov.config import MutationConfig
from tinyboycov.mutator.sequence_mutator import SequenceMutator

PARENT = InputSequence([Button.UP] * 10)
PARTNER = InputSequence([Button.DOWN] * 10)


def _only(name: str) -> MutationConfig:
    weights = {
        "substitute_weight": 0.0,
        "regrow_suffix_weight": 0.0,
        "shift_weight": 0.0,
        "splice_weight": 0.0,
    }
    weights[f"{name}_weight"] = 1.0
    return MutationConfig(**weights)


def test_registers_all_strategies():
    mutator = SequenceMutator(random.Random(0), ALPHABET)
    context = {"parent": PARENT, "partner": PARTNER}
    names = {s.name for s in mutator.registry.collect(context=context)}
    assert names == {"substitute", "regrow_suffix", "shift", "splice"}


def test_zero_weight_strategies_are_not_collected():
    mutator = SequenceMutator(random.Random(0), ALPHABET, _only("shift"))
    context = {"parent": PARENT, "partner": PARTNER}
    assert [s.name for s in mutator.registry.collect(context=context)] == ["shift"]


def test_splice_needs_a_distinct_partner():
    mutator = SequenceMutator(random.Random(0), ALPHABET)
    without = {s.name for s in mutator.registry.collect(
        context={"parent": PARENT, "partner": None}
    )}
    same = {s.name for s in mutator.registry.collect(
        context={"parent": PARENT, "partner": PARENT}
    )}
    with_partner = {s.name for s in mutator.registry.collect(
        context={"parent": PARENT, "partner": PARTNER}
    )}
    assert "splice" not in without
    assert "splice" not in same
    assert "splice" in with_partner


@pytest.mark.parametrize("_iteration", range(50))
def test_mutants_preserve_length_alphabet_and_differ(_iteration):
    rng = random.Random(_iteration)
    mutator = SequenceMutator(rng, ALPHABET)
    child = mutator.mutate(PARENT, PARTNER if _iteration % 2 else None)
    assert len(child) == len(PARENT)
    assert set(child) <= set(ALPHABET)
    assert child != PARENT


def test_parent_is_left_untouched():
    parent = InputSequence([Button.LEFT, Button.RIGHT] * 5)
    before = parent.symbols
    mutator = SequenceMutator(random.Random(7), ALPHABET)
    for _ in range(20):
        mutator.mutate(parent, PARTNER)
    assert parent.symbols == before


def test_substitute_changes_exactly_one_position():
    mutator = SequenceMutator(random.Random(1), ALPHABET, _only("substitute"))
    for _ in range(20):
        child = mutator.mutate(PARENT)
        assert sum(a != b for a, b in zip(PARENT, child)) == 1


def test_splice_mixes_parent_and_partner():
    mutator = SequenceMutator(random.Random(2), ALPHABET, _only("splice"))
    for _ in range(20):
        child = mutator.mutate(PARENT, PARTNER)
        assert set(child) == {Button.UP, Button.DOWN}


def test_shift_keeps_the_unshifted_remainder():
    parent = InputSequence(
        Button[name]
        for name in "UP UP DOWN LEFT RIGHT RIGHT DOWN UP LEFT LEFT".split()
    )
    mutator = SequenceMutator(random.Random(3), ALPHABET, _only("shift"))
    for _ in range(20):
        child = mutator.mutate(parent)
        assert len(child) == len(parent)
        n = len(parent)
        assert any(
            child.symbols[: n - count] == parent.symbols[count:]
            for count in range(1, n // 2 + 1)
        )


def test_falls_back_to_substitution_without_a_partner():
    mutator = SequenceMutator(random.Random(4), ALPHABET, _only("splice"))
    child = mutator.mutate(PARENT)
    assert sum(a != b for a, b in zip(PARENT, child)) == 1


def test_single_symbol_alphabet_returns_parent():
    parent = InputSequence([Button.UP] * 4)
    mutator = SequenceMutator(random.Random(5), (Button.UP,))
    assert mutator.mutate(parent) == parent

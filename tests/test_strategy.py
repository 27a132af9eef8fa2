from __future__ import annotations

import random

from tinyboycov.mutator.strategy import (
    Strategy,
    StrategyExecutor,
    StrategyRegistry,
    StrategySelector,
    register_decorated,
    strategy,
)


class _Holder:
    def __init__(self, enabled: bool, gated_weight: float = 1.0):
        self.enabled = enabled
        self.gated_weight = gated_weight

    def _is_enabled(self, **_):
        return self.enabled

    def _gated_weight(self, **_):
        return self.gated_weight

    @strategy(name="always")
    def always(self, **_):
        return "always"

    @strategy(name="gated", is_applicable="_is_enabled", weight="_gated_weight")
    def gated(self, **_):
        return "gated"


def test_register_decorated_collects_methods_and_respects_applicability():
    registry = StrategyRegistry()
    register_decorated(registry, _Holder(enabled=False))
    assert [s.name for s in registry.collect()] == ["always"]

    registry = StrategyRegistry()
    register_decorated(registry, _Holder(enabled=True))
    assert {s.name for s in registry.collect()} == {"always", "gated"}


def test_collect_drops_zero_weight_strategies():
    registry = StrategyRegistry()
    register_decorated(registry, _Holder(enabled=True, gated_weight=0.0))
    assert [s.name for s in registry.collect()] == ["always"]


def test_weight_is_resolved_to_a_bound_method():
    registry = StrategyRegistry()
    holder = _Holder(enabled=True, gated_weight=2.5)
    register_decorated(registry, holder)
    gated = next(s for s in registry.collect() if s.name == "gated")
    assert gated.score() == 2.5
    assert gated.run() == "gated"


def test_selector_never_picks_zero_weight():
    heavy = Strategy(name="heavy", weight=lambda **_: 1.0)
    zero = Strategy(name="zero", weight=lambda **_: 0.0)
    selector = StrategySelector(random.Random(0))
    for _ in range(100):
        assert selector.select([heavy, zero]).name == "heavy"


def test_selector_returns_none_for_empty_pool():
    assert StrategySelector(random.Random(0)).select([]) is None


def test_executor_retries_then_falls_back():
    calls = []

    def failing(**_):
        calls.append("failing")
        return None

    executor = StrategyExecutor(StrategySelector(random.Random(0)))
    result = executor.execute_with_retry(
        [Strategy(name="failing", run=failing)],
        fallback=lambda: "fallback",
    )
    assert result == "fallback"
    assert calls == ["failing"]


def test_executor_returns_first_non_none_result():
    executor = StrategyExecutor(StrategySelector(random.Random(0)))
    result = executor.execute_with_retry(
        [
            Strategy(name="none", run=lambda **_: None),
            Strategy(name="ok", run=lambda **ctx: ctx["value"] * 2),
        ],
        fallback=lambda: "fallback",
        context={"value": 21},
    )
    assert result == 42

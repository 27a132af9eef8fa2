from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence


Runner = Callable[..., Any]
WeightFn = Callable[..., float]
PredicateFn = Callable[..., bool]


@dataclass(slots=True, frozen=True)
class Strategy:
    """
    Strategy is metadata plus three callables:
    - run(**ctx): executes the strategy using keyword-only context
    - is_applicable(**ctx): availability check given context
    - weight(**ctx): dynamic weight for selection
    """

    name: str

    is_applicable: PredicateFn | None = None
    weight: WeightFn | None = None
    run: Runner | None = None

    def applicable(self, /, **ctx: Any) -> bool:
        """Return True if the strategy is usable in the provided context."""

        if self.is_applicable is None:
            return True
        return bool(self.is_applicable(**ctx))

    def score(self, /, **ctx: Any) -> float:
        """Return a non-negative weight for selection.

        If unset, defaults to 1.0. Negative values are treated as 0.
        """

        if self.weight is None:
            return 1.0
        w = float(self.weight(**ctx))
        return w if w > 0 else 0.0


def strategy(
    *,
    name: Optional[str] = None,
    is_applicable: PredicateFn | str | None = None,
    weight: WeightFn | str | None = None,
) -> Callable[[Runner], Runner]:
    def decorator(fn: Runner) -> Runner:
        spec = {
            "name": name or fn.__name__,
            "is_applicable": is_applicable,
            "weight": weight,
        }
        setattr(fn, "_strategy_spec", spec)
        return fn

    return decorator


def _resolve_callable(obj: Any, value: Any, *, label: str, strategy_name: str) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        resolved = getattr(obj, value)
    else:
        candidate = getattr(obj, getattr(value, "__name__", ""), None)
        if getattr(candidate, "__func__", None) is value:
            resolved = candidate
        else:
            resolved = value

    if resolved is not None and not callable(resolved):
        raise TypeError(
            f"strategy {label} must be callable or None, "
            f"got {type(resolved).__name__} for {strategy_name}"
        )
    return resolved


def register_decorated(registry: "StrategyRegistry", obj: Any) -> None:
    for name in dir(obj):
        attr = getattr(obj, name)
        spec = getattr(attr, "_strategy_spec", None)
        if spec is None:
            continue
        if not callable(attr):
            continue

        resolved = dict(spec)
        resolved["is_applicable"] = _resolve_callable(
            obj,
            resolved.get("is_applicable"),
            label="is_applicable",
            strategy_name=resolved["name"],
        )
        resolved["weight"] = _resolve_callable(
            obj,
            resolved.get("weight"),
            label="weight",
            strategy_name=resolved["name"],
        )

        registry.register(Strategy(run=attr, **resolved))


class StrategyRegistry:
    __slots__ = ("_strategies",)

    def __init__(self) -> None:
        self._strategies: list[Strategy] = []

    def register(self, strategy: Strategy) -> None:
        self._strategies.append(strategy)

    def collect(self, *, context: Optional[Mapping[str, Any]] = None) -> list[Strategy]:
        """Return strategies applicable in ``context`` with a positive weight."""

        ctx = dict(context or {})
        return [
            s for s in self._strategies if s.applicable(**ctx) and s.score(**ctx) > 0
        ]


class StrategySelector:
    """Pick a strategy with probability proportional to its weight."""

    __slots__ = ("rng",)

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def select(
        self,
        strategies: Sequence[Strategy],
        *,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Strategy]:
        if not strategies:
            return None

        ctx = dict(context or {})
        weights = [s.score(**ctx) for s in strategies]
        if sum(weights) <= 0:
            return self.rng.choice(list(strategies))

        return self.rng.choices(list(strategies), weights=weights, k=1)[0]


class StrategyExecutor:
    """Execute strategies with retry and fallback semantics.

    Each strategy's runner is invoked until one returns a non-None result.
    """

    __slots__ = ("selector",)

    def __init__(self, selector: StrategySelector) -> None:
        self.selector = selector

    def execute_with_retry(
        self,
        strategies: Sequence[Strategy],
        *,
        max_attempts: Optional[int] = None,
        fallback: Runner,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        pool: list[Strategy] = list(strategies)
        attempts_left = max_attempts if max_attempts is not None else len(pool)
        ctx = dict(context or {})

        while pool and attempts_left > 0:
            attempts_left -= 1
            strat = self.selector.select(pool, context=ctx)
            if strat is None:
                break

            result = strat.run(**ctx)
            if result is not None:
                return result

            # None result => remove and retry
            pool.remove(strat)

        return fallback()

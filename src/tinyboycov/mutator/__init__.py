from .sequence_mutator import SequenceMutator
from .strategy import (
    Strategy,
    StrategyExecutor,
    StrategyRegistry,
    StrategySelector,
    register_decorated,
    strategy,
)

__all__ = [
    "SequenceMutator",
    "Strategy",
    "StrategyExecutor",
    "StrategyRegistry",
    "StrategySelector",
    "register_decorated",
    "strategy",
]

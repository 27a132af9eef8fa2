"""
Immutable input sequences fed to the TinyBoy control pad.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator, Tuple


class InputSequence:
    """
    Fixed sequence of control symbols, one per step.

    Instances are values: equality and hashing are element-wise and every
    helper returns a new sequence instead of modifying this one.
    """

    __slots__ = ("_symbols", "_hash")

    def __init__(self, symbols: Iterable[Hashable]):
        self._symbols: Tuple[Hashable, ...] = tuple(symbols)
        self._hash = hash(self._symbols)

    @property
    def symbols(self) -> Tuple[Hashable, ...]:
        return self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._symbols)

    def __getitem__(self, index: int) -> Hashable:
        return self._symbols[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, InputSequence):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        names = ", ".join(getattr(s, "name", repr(s)) for s in self._symbols)
        return f"InputSequence([{names}])"

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_hash"):
            raise AttributeError("InputSequence is immutable")
        object.__setattr__(self, name, value)

    def replace(self, index: int, symbol: Hashable) -> InputSequence:
        """Return a copy with the symbol at ``index`` replaced."""
        symbols = list(self._symbols)
        symbols[index] = symbol
        return InputSequence(symbols)

    def splice(self, other: InputSequence, cut: int) -> InputSequence:
        """Prefix of this sequence up to ``cut`` followed by the rest of ``other``."""
        if len(other) != len(self):
            raise ValueError("cannot splice sequences of different lengths")
        return InputSequence(self._symbols[:cut] + other._symbols[cut:])

    def shifted(self, count: int, tail: Iterable[Hashable]) -> InputSequence:
        """Drop the first ``count`` symbols and append ``tail`` in their place."""
        tail = tuple(tail)
        if len(tail) != count:
            raise ValueError("tail length must match shift count")
        return InputSequence(self._symbols[count:] + tail)

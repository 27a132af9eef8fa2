"""
Compact coverage bitmaps and the subsumption relation over them.
"""

from __future__ import annotations

import hashlib
from typing import Iterable, Iterator, Union


class CoverageBitmap:
    """
    Immutable set of covered location IDs, stored as the bits of an int.

    Location IDs are opaque non-negative integers; nothing here depends on
    the size of the target's location universe.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0):
        if bits < 0:
            raise ValueError("coverage bits must not be negative")
        object.__setattr__(self, "_bits", bits)

    @classmethod
    def from_ids(cls, location_ids: Iterable[int]) -> CoverageBitmap:
        bits = 0
        for location_id in location_ids:
            if location_id < 0:
                raise ValueError(f"location id must not be negative: {location_id}")
            bits |= 1 << location_id
        return cls(bits)

    @classmethod
    def coerce(cls, coverage: Union[CoverageBitmap, Iterable[int]]) -> CoverageBitmap:
        if isinstance(coverage, CoverageBitmap):
            return coverage
        return cls.from_ids(coverage)

    @property
    def bits(self) -> int:
        return self._bits

    def __setattr__(self, name, value):
        raise AttributeError("CoverageBitmap is immutable")

    def __contains__(self, location_id: int) -> bool:
        return location_id >= 0 and (self._bits >> location_id) & 1 == 1

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def __len__(self) -> int:
        return self._bits.bit_count()

    def __bool__(self) -> bool:
        return self._bits != 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoverageBitmap):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __or__(self, other: CoverageBitmap) -> CoverageBitmap:
        return self.union(other)

    def __repr__(self) -> str:
        return f"CoverageBitmap({sorted(self)})"

    def union(self, other: CoverageBitmap) -> CoverageBitmap:
        return CoverageBitmap(self._bits | other._bits)

    def difference(self, other: CoverageBitmap) -> CoverageBitmap:
        return CoverageBitmap(self._bits & ~other._bits)

    def issubset(self, other: CoverageBitmap) -> bool:
        return self._bits & ~other._bits == 0


def subsumed_by(lhs: CoverageBitmap, rhs: CoverageBitmap) -> bool:
    """
    Return True if every location covered by ``lhs`` is also covered by ``rhs``.

    Vacuously true when ``lhs`` is empty. Reflexive and transitive, but not
    symmetric: two equal bitmaps subsume each other.
    """
    return lhs.issubset(rhs)


def coverage_fingerprint(coverage: CoverageBitmap) -> str:
    bits = coverage.bits
    h = hashlib.blake2b(digest_size=16)
    h.update(bits.to_bytes((bits.bit_length() + 7) // 8, "little"))
    return h.hexdigest()

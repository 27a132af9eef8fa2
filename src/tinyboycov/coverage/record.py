from __future__ import annotations

import hashlib
from dataclasses import dataclass

from tinyboy.input_sequence import InputSequence

from .bitmap import CoverageBitmap


def state_fingerprint(state: bytes) -> str:
    return hashlib.blake2b(bytes(state), digest_size=16).hexdigest()


@dataclass(frozen=True)
class CoverageRecord:
    sequence: InputSequence
    coverage: CoverageBitmap
    # Terminal memory image; opaque, only ever fingerprinted
    state: bytes

    @property
    def state_fp(self) -> str:
        return state_fingerprint(self.state)

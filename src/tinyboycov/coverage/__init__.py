"""
Coverage feedback: bitmaps, records, retained history and global counts.
"""

from .bitmap import CoverageBitmap, coverage_fingerprint, subsumed_by
from .history import CoverageHistory, HistoryDecision, HistoryEntry
from .record import CoverageRecord, state_fingerprint
from .tracker import GlobalLocationTracker

__all__ = [
    "CoverageBitmap",
    "CoverageHistory",
    "CoverageRecord",
    "GlobalLocationTracker",
    "HistoryDecision",
    "HistoryEntry",
    "coverage_fingerprint",
    "state_fingerprint",
    "subsumed_by",
]

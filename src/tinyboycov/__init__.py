"""
Coverage-guided input generation for the TinyBoy machine.
"""

from .config import DEFAULT_CONFIG, GeneratorConfig, MutationConfig
from .coverage import CoverageBitmap, CoverageRecord, subsumed_by
from .exceptions import ConfigurationError, TinyBoyCovException
from .generator import TinyBoyInputGenerator
from .sampling import random_sample
from .seeding import (
    ExhaustiveSeeder,
    RandomSeeder,
    Seeder,
    default_seeder,
    enumerate_sequences,
)
from .statistics import GeneratorStatistics
from .worklist import Worklist

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "CoverageBitmap",
    "CoverageRecord",
    "ExhaustiveSeeder",
    "GeneratorConfig",
    "GeneratorStatistics",
    "MutationConfig",
    "RandomSeeder",
    "Seeder",
    "TinyBoyCovException",
    "TinyBoyInputGenerator",
    "Worklist",
    "default_seeder",
    "enumerate_sequences",
    "random_sample",
    "subsumed_by",
]

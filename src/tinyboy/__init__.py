"""
Collaborator surface of the TinyBoy machine used by input generators.
"""

from .control_pad import ALPHABET, Button
from .input_sequence import InputSequence
from .tester import (
    AutomatedTester,
    ExecutionResult,
    Executor,
    InputGenerator,
    TesterReport,
)

__all__ = [
    "ALPHABET",
    "AutomatedTester",
    "Button",
    "ExecutionResult",
    "Executor",
    "InputGenerator",
    "InputSequence",
    "TesterReport",
]

from __future__ import annotations

import pytest

from tinyboy.control_pad import Button
from tinyboy.input_sequence import InputSequence
from tinyboy.tester import ExecutionResult

GRID = 5

MOVES = {
    Button.UP: (0, -1),
    Button.DOWN: (0, 1),
    Button.LEFT: (-1, 0),
    Button.RIGHT: (1, 0),
}


def walk_maze(sequence: InputSequence) -> ExecutionResult:
    """
    Toy deterministic target: walk a 5x5 grid from the top-left corner.

    Location ``y * 5 + x`` is covered when a cell is visited and location
    ``25 + y * 5 + x`` when the walker bumps into a wall from that cell.
    The end state is the final position.
    """
    x, y = 0, 0
    covered = {0}
    for button in sequence:
        dx, dy = MOVES[button]
        nx, ny = x + dx, y + dy
        if 0 <= nx < GRID and 0 <= ny < GRID:
            x, y = nx, ny
            covered.add(y * GRID + x)
        else:
            covered.add(GRID * GRID + y * GRID + x)
    return ExecutionResult(coverage=covered, state=bytes([x, y]))


@pytest.fixture
def maze_executor():
    return walk_maze


@pytest.fixture
def make_sequence():
    def fn(*names: str) -> InputSequence:
        return InputSequence(Button[name] for name in names)

    return fn

#!/usr/bin/env python3
"""Fill a square matrix with natural numbers in an inward clockwise spiral.

>>> fill(3).tolist()
[[1, 2, 3], [8, 9, 4], [7, 6, 5]]
"""
import logging
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np


GRID_DTYPE = np.int64

logger = logging.getLogger(__name__)


class InvalidSizeError(ValueError):
    """Matrix order is not a positive number."""

    def __init__(self, size):
        super().__init__(f"size must be positive, got {size}")
        self.size = size


class Direction(Enum):
    """Cursor direction, value is the (dx, dy) step."""
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


# phase order of a single lap
LAP = (Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP)


@dataclass
class SpiralState:
    """Cursor, borders of the unfilled ring and the last written value.

    x is the column and y is the row; right and down are exclusive.
    """
    size: int
    x: int = 0
    y: int = 0
    left: int = 0
    right: Optional[int] = None
    up: int = 0
    down: Optional[int] = None
    counter: int = 0

    def __post_init__(self):
        if self.right is None:
            self.right = self.size
        if self.down is None:
            self.down = self.size

    @property
    def done(self):
        return self.counter >= self.size ** 2

    def turn(self, direction):
        """Shrink the consumed border and put the cursor on the next phase start."""
        if direction is Direction.RIGHT:
            self.up += 1
            self.x -= 1
            self.y += 1
        elif direction is Direction.DOWN:
            self.down -= 1
            self.x -= 1
            self.y -= 1
        elif direction is Direction.LEFT:
            self.left += 1
            self.x += 1
            self.y -= 1
        elif direction is Direction.UP:
            self.right -= 1
            self.x += 1
            self.y += 1


def can_move(direction, state):
    """Check the cursor against the border in front of it."""
    if direction is Direction.RIGHT:
        return state.x < state.right
    elif direction is Direction.DOWN:
        return state.y < state.down
    elif direction is Direction.LEFT:
        return state.x >= state.left
    elif direction is Direction.UP:
        return state.y >= state.up
    raise ValueError(f"Unknown direction {direction!r}")


def fill_phase(grid, state, direction):
    """Write consecutive numbers along one direction, return cells written."""
    written = 0
    while can_move(direction, state):
        state.counter += 1
        grid[state.y, state.x] = state.counter
        state.x += direction.dx
        state.y += direction.dy
        written += 1
    return written


def fill(size):
    """Return a size x size spiral matrix.

    Raises:
        TypeError: if size is not an integer
        InvalidSizeError: if size <= 0
    """
    if isinstance(size, bool):
        raise TypeError("size must be an integer, got bool")
    size = operator.index(size)
    if size <= 0:
        raise InvalidSizeError(size)
    logger.debug(f"Filling spiral matrix of order {size}")

    grid = np.zeros((size, size), dtype=GRID_DTYPE)
    state = SpiralState(size)
    while not state.done:
        for direction in LAP:
            fill_phase(grid, state, direction)
            state.turn(direction)
    return grid

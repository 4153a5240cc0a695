"""
Lights Out - Grid Engine
Implements the toggle rule, puzzle generation and win detection
"""

from enum import Enum
import operator
import random
from typing import List, Optional, Tuple, Union

Grid = List[List[bool]]
Move = Tuple[int, int]

MIN_SIZE = 3
MAX_SIZE = 7
DEFAULT_SIZE = 5

# Offsets toggled by a move: the tile itself and its orthogonal neighbours
MOVE_OFFSETS = [(0, 0), (-1, 0), (1, 0), (0, -1), (0, 1)]


class Difficulty(Enum):
    """Enumeration for shuffle difficulty tiers"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union[str, "Difficulty", None]) -> Optional["Difficulty"]:
        """Convert a string (or None) into a Difficulty, rejecting unknown names"""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty: {value!r} (expected one of {names})") from None


DEFAULT_DIFFICULTY = Difficulty.MEDIUM

# Shuffle presets: (factor applied to size squared, factor applied to size)
SHUFFLE_FACTORS = {
    Difficulty.EASY: (0.6, 2),
    Difficulty.MEDIUM: (1.0, 3),
    Difficulty.HARD: (1.6, 4),
}


def validate_size(size: int) -> int:
    """Check that a board size lies in the supported range"""
    if isinstance(size, bool):
        raise ValueError(f"Board size must be an integer, got {size!r}")
    try:
        size = operator.index(size)
    except TypeError:
        raise ValueError(f"Board size must be an integer, got {size!r}") from None
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}")
    return size


def create_empty_grid(size: int) -> Grid:
    """Create a size x size grid with every tile off"""
    size = validate_size(size)
    return [[False for _ in range(size)] for _ in range(size)]


def clone_grid(grid: Grid) -> Grid:
    """Deep copy a grid so the copy can be mutated independently"""
    return [row[:] for row in grid]


def in_bounds(grid: Grid, row: int, col: int) -> bool:
    """Check if a coordinate lies on the grid"""
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def toggle_cell(grid: Grid, row: int, col: int) -> bool:
    """
    Flip a single tile

    Returns True if the tile was on the grid, False if it was skipped
    """
    if not in_bounds(grid, row, col):
        return False
    grid[row][col] = not grid[row][col]
    return True


def apply_move(grid: Grid, row: int, col: int) -> Grid:
    """
    Apply a move at (row, col)

    Toggles the tile and each of its up/down/left/right neighbours that exist.
    The grid is modified in place and returned for chaining. A move is its own
    inverse: applying it twice restores the previous state.
    """
    for dr, dc in MOVE_OFFSETS:
        toggle_cell(grid, row + dr, col + dc)
    return grid


def is_solved(grid: Grid) -> bool:
    """Check if every tile is off"""
    return not any(any(row) for row in grid)


def count_lit(grid: Grid) -> int:
    """Count the tiles that are on"""
    return sum(sum(1 for cell in row if cell) for row in grid)


def shuffle_count_for(difficulty: Union[str, Difficulty, None], size: int) -> int:
    """
    Number of random moves used to scramble a board

    Args:
        difficulty: easy/medium/hard, or None for the default of size squared
        size: Board size

    Returns:
        Shuffle move count, floored to an integer
    """
    difficulty = Difficulty.parse(difficulty)
    if difficulty is None:
        return size * size
    area_factor, edge_factor = SHUFFLE_FACTORS[difficulty]
    return int(max(size * size * area_factor, size * edge_factor))


def random_moves(size: int, count: int, rng=None) -> List[Move]:
    """Pick `count` uniformly random moves on a size x size board"""
    rng = rng or random
    return [(rng.randrange(size), rng.randrange(size)) for _ in range(count)]


def generate_puzzle(size: int, shuffle_count: int, rng=None) -> Grid:
    """
    Generate a solvable puzzle

    Starts from the all-off grid and applies random moves. Every move is its
    own inverse, so replaying the same moves in reverse order solves the board.
    """
    grid = create_empty_grid(size)
    for row, col in random_moves(len(grid), shuffle_count, rng):
        apply_move(grid, row, col)
    return grid

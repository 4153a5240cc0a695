"""
Lights Out - Game Session
Holds the state of one puzzle: grid, starting position, move count and clock
"""

from enum import Enum
import time
from typing import Optional, Union

from .grid import (
    DEFAULT_DIFFICULTY, DEFAULT_SIZE, Difficulty, Grid,
    clone_grid, generate_puzzle, shuffle_count_for, validate_size
)


class GameState(Enum):
    """Enumeration for different game states"""
    READY = "ready"
    PLAYING = "playing"
    WON = "won"


def format_time(total_seconds: int) -> str:
    """Format seconds as MM:SS"""
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    return f"{minutes:02d}:{seconds:02d}"


class GameSession:
    """
    Snapshot of a single game

    Sessions are treated as values: command handlers build a new session with
    `copy()` instead of changing the one they were given.
    """

    def __init__(self, size: int, difficulty: Optional[Difficulty], grid: Grid,
                 initial_grid: Optional[Grid] = None):
        self.size = size
        self.difficulty = difficulty
        self.grid = grid
        self.initial_grid = clone_grid(grid) if initial_grid is None else initial_grid
        self.moves = 0
        self.started_at: Optional[float] = None
        self.stopped_at: Optional[float] = None
        self.state = GameState.READY
        self.message: Optional[str] = None

    def copy(self) -> "GameSession":
        """Deep copy the session, including both grids"""
        other = GameSession(self.size, self.difficulty, clone_grid(self.grid),
                            clone_grid(self.initial_grid))
        other.moves = self.moves
        other.started_at = self.started_at
        other.stopped_at = self.stopped_at
        other.state = self.state
        other.message = self.message
        return other

    def is_timer_running(self) -> bool:
        """Check if the clock is counting"""
        return self.started_at is not None and self.stopped_at is None

    def __eq__(self, other):
        if not isinstance(other, GameSession):
            return NotImplemented
        return (self.size, self.difficulty, self.grid, self.initial_grid, self.moves,
                self.started_at, self.stopped_at, self.state, self.message) == \
               (other.size, other.difficulty, other.grid, other.initial_grid, other.moves,
                other.started_at, other.stopped_at, other.state, other.message)

    def __repr__(self):
        return (f"GameSession(size={self.size}, difficulty={self.difficulty}, "
                f"moves={self.moves}, state={self.state.value})")


def new_session(size: int = DEFAULT_SIZE,
                difficulty: Union[str, Difficulty, None] = DEFAULT_DIFFICULTY,
                rng=None) -> GameSession:
    """Create a freshly shuffled session"""
    size = validate_size(size)
    difficulty = Difficulty.parse(difficulty)
    grid = generate_puzzle(size, shuffle_count_for(difficulty, size), rng)
    return GameSession(size, difficulty, grid)


def elapsed_seconds(session: GameSession, now: Optional[float] = None) -> int:
    """
    Whole seconds on the session clock

    Returns 0 before the first move. Once the clock is stopped the value is
    frozen at the stop time.
    """
    if session.started_at is None:
        return 0
    if session.stopped_at is not None:
        end = session.stopped_at
    else:
        end = time.time() if now is None else now
    return max(0, int(end - session.started_at))

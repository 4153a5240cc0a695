"""
Lights Out - Command Dispatch
Turns player actions into new game sessions without touching the old ones
"""

import time
from typing import NamedTuple, Optional, Union

from .grid import Difficulty, apply_move, clone_grid, is_solved, validate_size
from .session import GameSession, GameState, elapsed_seconds, format_time, new_session


class Click(NamedTuple):
    """Player clicked the tile at (row, col)"""
    row: int
    col: int


class NewGame(NamedTuple):
    """Shuffle a new puzzle with the current size and difficulty"""


class Reset(NamedTuple):
    """Return to the starting position of the current puzzle"""


class Resize(NamedTuple):
    """Switch board size and shuffle"""
    size: int


class SetDifficulty(NamedTuple):
    """Switch difficulty and shuffle"""
    difficulty: Union[str, Difficulty, None]


Command = Union[Click, NewGame, Reset, Resize, SetDifficulty]


def win_message(session: GameSession) -> str:
    """Notification text shown when the board is cleared"""
    return f"You win! {session.moves} moves • {format_time(elapsed_seconds(session))}"


def _click(session: GameSession, row: int, col: int, now: float) -> GameSession:
    result = session.copy()

    # Timer starts with the first move after a shuffle or reset
    if result.state == GameState.READY:
        result.started_at = now
        result.state = GameState.PLAYING

    apply_move(result.grid, row, col)
    result.moves += 1

    if is_solved(result.grid):
        # Each win reports the time since the first move
        if result.started_at is not None:
            result.stopped_at = now
        result.state = GameState.WON
        result.message = win_message(result)
    elif result.state == GameState.WON:
        # Play may continue after a win; the clock is not restarted
        result.state = GameState.PLAYING
        result.message = None

    return result


def _reset(session: GameSession) -> GameSession:
    return GameSession(session.size, session.difficulty, clone_grid(session.initial_grid),
                       clone_grid(session.initial_grid))


def dispatch(session: GameSession, command: Command, now: Optional[float] = None,
             rng=None) -> GameSession:
    """
    Apply a command to a session

    Args:
        session: Current session (left unchanged)
        command: Click, NewGame, Reset, Resize or SetDifficulty
        now: Timestamp used for the clock, defaults to time.time()
        rng: Random source for shuffles, defaults to the random module

    Returns:
        The session after the command
    """
    if isinstance(command, Click):
        return _click(session, command.row, command.col, time.time() if now is None else now)
    elif isinstance(command, NewGame):
        return new_session(session.size, session.difficulty, rng)
    elif isinstance(command, Reset):
        return _reset(session)
    elif isinstance(command, Resize):
        return new_session(validate_size(command.size), session.difficulty, rng)
    elif isinstance(command, SetDifficulty):
        return new_session(session.size, Difficulty.parse(command.difficulty), rng)
    raise ValueError(f"Unknown command: {command!r}")

"""
Lights Out package initialization
"""

from .grid import (
    Difficulty, create_empty_grid, clone_grid, apply_move, is_solved,
    shuffle_count_for, generate_puzzle
)
from .session import GameSession, GameState, new_session, elapsed_seconds, format_time
from .commands import Click, NewGame, Reset, Resize, SetDifficulty, dispatch

__all__ = [
    'Difficulty', 'create_empty_grid', 'clone_grid', 'apply_move', 'is_solved',
    'shuffle_count_for', 'generate_puzzle',
    'GameSession', 'GameState', 'new_session', 'elapsed_seconds', 'format_time',
    'Click', 'NewGame', 'Reset', 'Resize', 'SetDifficulty', 'dispatch'
]

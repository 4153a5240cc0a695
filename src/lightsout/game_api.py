"""
Lights Out Game API
Provides a clean interface for scripts and agents to interact with the game
"""

import numpy as np
from typing import Dict, List, Optional, Any
import json
import numbers
import random

from .grid import count_lit, is_solved
from .session import GameState, elapsed_seconds, format_time, new_session
from .commands import Click, NewGame, Reset, Resize, SetDifficulty, dispatch


class LightsOutAPI:
    """
    API for driving a Lights Out game from code
    Validates coordinates and keeps a history of every action taken
    """

    def __init__(self, size: int = 5, difficulty: Optional[str] = "medium",
                 seed: Optional[int] = None):
        """
        Initialize the game API

        Args:
            size: Board size (3..7)
            difficulty: easy, medium, hard or None for the default shuffle
            seed: Optional seed so shuffles can be reproduced
        """
        self.rng = random.Random(seed)
        self.session = new_session(size, difficulty, self.rng)
        self.action_history: List[Dict[str, Any]] = []

    @property
    def size(self) -> int:
        return self.session.size

    def new_game(self) -> Dict[str, Any]:
        """Shuffle a new puzzle and return its state"""
        return self._run(NewGame())

    def reset_game(self) -> Dict[str, Any]:
        """Return to the starting position of the current puzzle"""
        return self._run(Reset())

    def resize(self, size: int) -> Dict[str, Any]:
        """Change board size and shuffle"""
        return self._run(Resize(size))

    def set_difficulty(self, difficulty: Optional[str]) -> Dict[str, Any]:
        """Change difficulty and shuffle"""
        return self._run(SetDifficulty(difficulty))

    def take_action(self, row: int, col: int) -> Dict[str, Any]:
        """
        Click the tile at the specified coordinates

        Args:
            row: Row coordinate (0-indexed)
            col: Column coordinate (0-indexed)

        Returns:
            Updated game state with action result
        """
        if not self._is_valid_coordinate(row, col):
            return {
                'success': False,
                'error': f'Invalid coordinates: ({row}, {col})',
                'state': self.get_game_state()
            }

        row, col = int(row), int(col)
        state_before = self.session.state.value
        self.session = dispatch(self.session, Click(row, col), rng=self.rng)
        self.action_history.append({
            'row': row,
            'col': col,
            'moves': self.session.moves,
            'game_state_before': state_before,
            'game_state_after': self.session.state.value
        })

        return {
            'success': True,
            'coordinates': (row, col),
            'state': self.get_game_state()
        }

    def get_game_state(self) -> Dict[str, Any]:
        """
        Get the current complete game state

        Returns:
            Game state information
        """
        session = self.session
        seconds = elapsed_seconds(session)
        return {
            'board_size': session.size,
            'difficulty': session.difficulty.value if session.difficulty else None,
            'grid': [[int(cell) for cell in row] for row in session.grid],
            'lit_count': count_lit(session.grid),
            'moves': session.moves,
            'elapsed_seconds': seconds,
            'elapsed_time': format_time(seconds),
            'game_state': session.state.value,
            'is_solved': is_solved(session.grid),
            'is_won': session.state == GameState.WON,
            'message': session.message,
            'action_count': len(self.action_history)
        }

    def get_board_array(self) -> np.ndarray:
        """
        Get the board as a numpy array

        Returns:
            2D float32 array, 1.0 for lit tiles and 0.0 for dark ones
        """
        return np.array(self.session.grid, dtype=np.float32)

    def export_game_state(self) -> str:
        """
        Export current game state as JSON string

        Returns:
            JSON string of game state
        """
        return json.dumps(self.get_game_state(), indent=2, ensure_ascii=False)

    def get_action_history(self) -> List[Dict[str, Any]]:
        """
        Get the history of all actions taken

        Returns:
            List of action records
        """
        return self.action_history.copy()

    def _run(self, command) -> Dict[str, Any]:
        self.session = dispatch(self.session, command, rng=self.rng)
        self.action_history.clear()
        return self.get_game_state()

    def _is_valid_coordinate(self, row: int, col: int) -> bool:
        """Check if coordinates are valid"""
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                return False
        return 0 <= row < self.session.size and 0 <= col < self.session.size

"""
Unit tests for the grid engine
Tests the toggle rule, puzzle generation and win detection
"""

import random

import numpy as np
import pytest
from lightsout.grid import (
    Difficulty, apply_move, clone_grid, count_lit, create_empty_grid, generate_puzzle,
    is_solved, random_moves, shuffle_count_for, toggle_cell, validate_size
)


def lit_cells(grid):
    """Set of coordinates that are on"""
    return {(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell}


class TestGridCreation:
    """Test cases for empty grid creation"""

    @pytest.mark.parametrize("size", [3, 4, 5, 6, 7])
    def test_empty_grid_dimensions(self, size):
        """Test grid is size x size and all off"""
        grid = create_empty_grid(size)

        assert len(grid) == size
        assert all(len(row) == size for row in grid)
        assert all(cell is False for row in grid for cell in row)

    @pytest.mark.parametrize("size", [3, 4, 5, 6, 7])
    def test_empty_grid_is_solved(self, size):
        """Test a fresh grid already counts as solved"""
        assert is_solved(create_empty_grid(size))

    def test_rows_are_independent(self):
        """Test rows do not share storage"""
        grid = create_empty_grid(3)
        grid[0][0] = True

        assert grid[1][0] is False
        assert grid[2][0] is False

    @pytest.mark.parametrize("size", [0, 2, 8, -1])
    def test_out_of_range_size_rejected(self, size):
        """Test sizes outside 3..7 raise"""
        with pytest.raises(ValueError):
            create_empty_grid(size)

    @pytest.mark.parametrize("size", [np.int64(4), np.int32(7), np.uint8(3)])
    def test_numpy_integer_size_accepted(self, size):
        """Test numpy integer sizes are normalised to plain ints"""
        assert type(validate_size(size)) is int
        grid = create_empty_grid(size)
        assert len(grid) == int(size)

    def test_non_integer_size_rejected(self):
        """Test float and bool sizes are rejected"""
        with pytest.raises(ValueError):
            validate_size(4.0)
        with pytest.raises(ValueError):
            validate_size(True)
        with pytest.raises(ValueError):
            validate_size("5")


class TestClone:
    """Test cases for grid cloning"""

    def test_clone_equal_in_value(self):
        """Test clone matches the original"""
        grid = apply_move(create_empty_grid(4), 1, 2)

        assert clone_grid(grid) == grid

    def test_clone_independent_storage(self):
        """Test mutating the clone leaves the original alone"""
        grid = apply_move(create_empty_grid(4), 1, 2)
        snapshot = [row[:] for row in grid]

        copy = clone_grid(grid)
        apply_move(copy, 0, 0)
        copy[3][3] = True

        assert grid == snapshot
        assert copy != grid


class TestApplyMove:
    """Test cases for the toggle rule"""

    def test_center_move_on_3x3(self):
        """Test center move lights the plus shape"""
        grid = apply_move(create_empty_grid(3), 1, 1)

        assert lit_cells(grid) == {(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)}

    def test_corner_move_on_3x3(self):
        """Test corner move lights the corner and its two neighbours"""
        grid = apply_move(create_empty_grid(3), 0, 0)

        assert lit_cells(grid) == {(0, 0), (0, 1), (1, 0)}
        for r, c in [(0, 2), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2)]:
            assert grid[r][c] is False

    @pytest.mark.parametrize("size", [3, 5, 7])
    def test_toggled_cell_counts(self, size):
        """Test corner, edge and interior moves toggle 3, 4 and 5 tiles"""
        last = size - 1
        assert count_lit(apply_move(create_empty_grid(size), 0, 0)) == 3
        assert count_lit(apply_move(create_empty_grid(size), last, last)) == 3
        assert count_lit(apply_move(create_empty_grid(size), 0, 1)) == 4
        assert count_lit(apply_move(create_empty_grid(size), 1, last)) == 4
        assert count_lit(apply_move(create_empty_grid(size), 1, 1)) == 5

    def test_move_returns_same_grid(self):
        """Test the grid is changed in place"""
        grid = create_empty_grid(3)
        assert apply_move(grid, 2, 2) is grid

    def test_move_turns_lit_tiles_off(self):
        """Test toggling flips on tiles back off"""
        grid = [[True] * 3 for _ in range(3)]
        apply_move(grid, 1, 1)

        assert lit_cells(grid) == {(0, 0), (0, 2), (2, 0), (2, 2)}

    def test_move_outside_grid_is_tolerated(self):
        """Test neighbour toggles beyond the edge are skipped"""
        grid = create_empty_grid(3)
        apply_move(grid, -1, 0)

        assert lit_cells(grid) == {(0, 0)}

    def test_toggle_cell_reports_bounds(self):
        """Test toggle_cell only flips tiles on the grid"""
        grid = create_empty_grid(3)

        assert toggle_cell(grid, 2, 2) is True
        assert toggle_cell(grid, 3, 0) is False
        assert lit_cells(grid) == {(2, 2)}

    def test_move_is_involution(self):
        """Test applying a move twice restores the grid on random boards"""
        rng = random.Random(7)
        for size in range(3, 8):
            grid = [[rng.random() < 0.5 for _ in range(size)] for _ in range(size)]
            for row in range(size):
                for col in range(size):
                    before = clone_grid(grid)
                    apply_move(grid, row, col)
                    apply_move(grid, row, col)
                    assert grid == before

    def test_move_is_deterministic(self):
        """Test the same move from the same state gives the same result"""
        start = apply_move(create_empty_grid(5), 2, 3)

        first = apply_move(clone_grid(start), 4, 0)
        second = apply_move(clone_grid(start), 4, 0)

        assert first == second


class TestIsSolved:
    """Test cases for win detection"""

    def test_single_lit_tile_not_solved(self):
        """Test one lit tile means not solved"""
        grid = create_empty_grid(5)
        grid[4][4] = True

        assert is_solved(grid) is False

    def test_is_solved_does_not_mutate(self):
        """Test win check leaves the grid alone"""
        grid = apply_move(create_empty_grid(4), 0, 3)
        before = clone_grid(grid)

        is_solved(grid)

        assert grid == before


class TestShuffleCount:
    """Test cases for the difficulty shuffle formula"""

    @pytest.mark.parametrize("difficulty,size,expected", [
        ("easy", 3, 6),      # max(5.4, 6)
        ("easy", 5, 15),     # max(15.0, 10)
        ("easy", 7, 29),     # max(29.4, 14)
        ("medium", 3, 9),    # max(9, 9)
        ("medium", 4, 16),
        ("hard", 3, 14),     # max(14.4, 12)
        ("hard", 5, 40),     # max(40, 20)
        ("hard", 7, 78),     # max(78.4, 28)
    ])
    def test_shuffle_counts(self, difficulty, size, expected):
        """Test shuffle counts per difficulty"""
        assert shuffle_count_for(difficulty, size) == expected

    @pytest.mark.parametrize("size", [3, 5, 7])
    def test_unspecified_difficulty_uses_area(self, size):
        """Test None difficulty falls back to size squared"""
        assert shuffle_count_for(None, size) == size * size

    def test_accepts_enum_and_mixed_case(self):
        """Test enum members and mixed case strings are understood"""
        assert shuffle_count_for(Difficulty.HARD, 5) == 40
        assert shuffle_count_for(" Easy ", 3) == 6

    def test_unknown_difficulty_rejected(self):
        """Test unknown difficulty names raise"""
        with pytest.raises(ValueError, match="Unknown difficulty"):
            shuffle_count_for("nightmare", 5)

    def test_counts_are_integers(self):
        """Test every count is an int"""
        for difficulty in Difficulty:
            for size in range(3, 8):
                assert isinstance(shuffle_count_for(difficulty, size), int)


class TestGeneratePuzzle:
    """Test cases for puzzle generation"""

    def test_random_moves_in_bounds(self):
        """Test random moves stay on the board"""
        moves = random_moves(4, 200, random.Random(3))

        assert len(moves) == 200
        assert all(0 <= r < 4 and 0 <= c < 4 for r, c in moves)

    def test_zero_shuffles_gives_empty_grid(self):
        """Test no shuffle moves leaves the board dark"""
        assert is_solved(generate_puzzle(5, 0, random.Random(1)))

    def test_same_seed_same_puzzle(self):
        """Test seeded generation is reproducible"""
        assert generate_puzzle(6, 30, random.Random(11)) == generate_puzzle(6, 30, random.Random(11))

    @pytest.mark.parametrize("size", [3, 4, 5, 6, 7])
    @pytest.mark.parametrize("seed", [0, 1, 2, 42])
    def test_reverse_replay_solves_puzzle(self, size, seed):
        """Test replaying the recorded shuffle moves in reverse clears the board"""
        count = shuffle_count_for("hard", size)
        grid = generate_puzzle(size, count, random.Random(seed))
        moves = random_moves(size, count, random.Random(seed))

        for row, col in reversed(moves):
            apply_move(grid, row, col)

        assert is_solved(grid)

    def test_uses_module_random_by_default(self):
        """Test generation draws from the random module when no rng is passed"""
        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(random, "randrange", lambda n: 1)
            grid = generate_puzzle(3, 1)

        assert lit_cells(grid) == {(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)}

    def test_invalid_size_rejected(self):
        """Test generation validates the size"""
        with pytest.raises(ValueError):
            generate_puzzle(9, 10)

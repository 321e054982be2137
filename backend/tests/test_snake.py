"""
Tests for the Snake obstacle: spawning, movement, turning and wall bounce.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, GRID_SIZE, SNAKE_LENGTH
from domain.coordinate import Coordinate
from domain.snake import Snake, spawn_snake, advance_all


def horizontal_snake(start_x, y, direction=RIGHT, length=SNAKE_LENGTH, snake_id=1):
    body = tuple(Coordinate(start_x + i, y) for i in range(length))
    return Snake(id=snake_id, body=body, direction=direction)


def vertical_snake(x, start_y, direction=DOWN, length=SNAKE_LENGTH, snake_id=1):
    body = tuple(Coordinate(x, start_y + i) for i in range(length))
    return Snake(id=snake_id, body=body, direction=direction)


class TestSpawn:
    """Tests for spawn_snake()."""

    def test_spawn_lays_body_on_bottom_row(self, scripted_rng):
        """New snakes lie horizontally on the bottom row heading RIGHT."""
        snake = spawn_snake(scripted_rng(ints=[5]), snake_id=42)

        assert snake.id == 42
        assert snake.direction == RIGHT
        assert len(snake.body) == SNAKE_LENGTH
        assert snake.body[0] == Coordinate(5, GRID_SIZE - 1)
        assert snake.head == Coordinate(13, GRID_SIZE - 1)
        assert all(segment.y == GRID_SIZE - 1 for segment in snake.body)

    def test_spawn_body_is_contiguous(self, scripted_rng):
        snake = spawn_snake(scripted_rng(ints=[0]), snake_id=1)
        xs = [segment.x for segment in snake.body]
        assert xs == list(range(0, SNAKE_LENGTH))

    def test_spawn_always_fits_on_board(self):
        """Whatever column is drawn, the whole body stays on the board."""
        rng = random.Random(1234)
        for _ in range(200):
            snake = spawn_snake(rng, snake_id=1)
            assert all(segment.in_bounds() for segment in snake.body)


class TestAdvance:
    """Tests for Snake.advance()."""

    def test_moves_straight_without_turn(self, scripted_rng):
        snake = horizontal_snake(0, 10)
        moved = snake.advance(scripted_rng(floats=[0.5]))

        assert moved.direction == RIGHT
        assert moved.head == Coordinate(9, 10)
        assert moved.body[0] == Coordinate(1, 10)
        assert len(moved.body) == SNAKE_LENGTH

    def test_advance_leaves_snake_untouched(self, scripted_rng):
        snake = horizontal_snake(0, 10)
        snake.advance(scripted_rng())
        assert snake.head == Coordinate(8, 10)

    def test_turns_when_roll_below_probability(self, scripted_rng):
        snake = horizontal_snake(0, 10)
        moved = snake.advance(scripted_rng(floats=[0.1], choices=[UP]))

        assert moved.direction == UP
        assert moved.head == Coordinate(8, 9)

    def test_no_turn_at_exactly_probability(self, scripted_rng):
        rng = scripted_rng(floats=[0.2])
        moved = horizontal_snake(0, 10).advance(rng)
        assert moved.direction == RIGHT
        assert rng.seen_choices == []

    @pytest.mark.parametrize("heading,reverse", [
        (UP, DOWN),
        (DOWN, UP),
        (LEFT, RIGHT),
        (RIGHT, LEFT),
    ])
    def test_turn_candidates_exclude_reverse(self, scripted_rng, heading, reverse):
        """A turn may keep the heading but never picks the direct reverse."""
        rng = scripted_rng(floats=[0.0], choices=[heading])
        snake = Snake(id=1, body=(Coordinate(12, 12),), direction=heading)

        snake.advance(rng)

        candidates = rng.seen_choices[0]
        assert reverse not in candidates
        assert heading in candidates
        assert len(candidates) == 3

    def test_body_length_constant_over_many_ticks(self):
        rng = random.Random(7)
        snakes = (horizontal_snake(3, 24), horizontal_snake(10, 5, snake_id=2))
        for _ in range(300):
            snakes = advance_all(snakes, rng)
            assert all(len(s.body) == SNAKE_LENGTH for s in snakes)


class TestBounce:
    """Tests for wall bounce arithmetic."""

    def test_right_wall_bounce(self, scripted_rng):
        """Head at the last column heading RIGHT reverses and lands two left of x=25."""
        snake = horizontal_snake(GRID_SIZE - SNAKE_LENGTH, 5)
        assert snake.head == Coordinate(24, 5)

        moved = snake.advance(scripted_rng())

        assert moved.direction == LEFT
        assert moved.head == Coordinate(23, 5)
        assert moved.head.in_bounds()

    def test_left_wall_bounce(self, scripted_rng):
        body = tuple(Coordinate(8 - i, 5) for i in range(SNAKE_LENGTH))
        snake = Snake(id=1, body=body, direction=LEFT)
        assert snake.head == Coordinate(0, 5)

        moved = snake.advance(scripted_rng())

        assert moved.direction == RIGHT
        assert moved.head == Coordinate(1, 5)

    def test_top_wall_bounce(self, scripted_rng):
        body = tuple(Coordinate(7, 8 - i) for i in range(SNAKE_LENGTH))
        snake = Snake(id=1, body=body, direction=UP)

        moved = snake.advance(scripted_rng())

        assert moved.direction == DOWN
        assert moved.head == Coordinate(7, 1)

    def test_bottom_wall_bounce(self, scripted_rng):
        snake = vertical_snake(7, GRID_SIZE - SNAKE_LENGTH)
        assert snake.head == Coordinate(7, 24)

        moved = snake.advance(scripted_rng())

        assert moved.direction == UP
        assert moved.head == Coordinate(7, 23)

    def test_turn_into_wall_bounces_off(self, scripted_rng):
        """A freshly spawned snake that turns DOWN bounces back UP."""
        snake = horizontal_snake(0, GRID_SIZE - 1)
        moved = snake.advance(scripted_rng(floats=[0.05], choices=[DOWN]))

        assert moved.direction == UP
        assert moved.head == Coordinate(8, 23)

    def test_only_heading_axis_is_corrected(self, scripted_rng):
        """A head already off the other axis is left there."""
        snake = Snake(id=1, body=(Coordinate(23, -1), Coordinate(24, -1)), direction=RIGHT)

        moved = snake.advance(scripted_rng())

        assert moved.direction == LEFT
        assert moved.head == Coordinate(23, -1)
        assert not moved.head.in_bounds()


class TestAdvanceAll:
    """Tests for advance_all()."""

    def test_advances_every_snake_from_same_snapshot(self, scripted_rng):
        first = horizontal_snake(0, 3, snake_id=1)
        second = horizontal_snake(0, 4, snake_id=2)

        moved = advance_all((first, second), scripted_rng())

        assert [s.id for s in moved] == [1, 2]
        assert moved[0].head == Coordinate(9, 3)
        assert moved[1].head == Coordinate(9, 4)

    def test_empty(self, scripted_rng):
        assert advance_all((), scripted_rng()) == ()

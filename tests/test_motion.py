from __future__ import annotations

from collections import deque

import pytest

from gridsnake.model import Direction, Snake
from gridsnake.motion import advance, detect_collision, next_head, wrap

N = 20


@pytest.mark.parametrize(
    "head, direction, expected",
    [
        ((0, 7), Direction.LEFT, (N - 1, 7)),
        ((N - 1, 7), Direction.RIGHT, (0, 7)),
        ((7, 0), Direction.UP, (7, N - 1)),
        ((7, N - 1), Direction.DOWN, (7, 0)),
        ((5, 5), Direction.RIGHT, (6, 5)),
    ],
)
def test_next_head_wraps_at_every_edge(head, direction, expected):
    assert next_head(head, direction, N) == expected


def test_wrap_handles_negative_coordinates():
    assert wrap(-1, -1, N) == (N - 1, N - 1)
    assert wrap(N, N, N) == (0, 0)


def test_neutral_direction_keeps_head_in_place():
    body = deque([(10, 10)])
    moved = advance(body, Direction.NONE, N)
    assert moved[0] == (10, 10)


def test_advance_prepends_and_keeps_tail():
    body = deque([(5, 5), (4, 5)])
    moved = advance(body, Direction.RIGHT, N)
    assert list(moved) == [(6, 5), (5, 5), (4, 5)]
    assert list(body) == [(5, 5), (4, 5)]


def test_single_tick_scenario_on_default_board():
    snake = Snake([(10, 10)], Direction.RIGHT)
    snake.step(N, food=(0, 0))
    assert list(snake.body) == [(11, 10)]


def test_head_off_right_edge_reenters_at_zero():
    snake = Snake([(19, 10)], Direction.RIGHT)
    snake.step(N, food=(0, 0))
    assert snake.head == (0, 10)


def test_self_collision_on_any_body_segment():
    # head at index 0 moved onto segment k > 0
    body = deque([(3, 4), (4, 4), (5, 4), (5, 5), (4, 5), (3, 5), (2, 5)])
    body.appendleft((4, 5))
    assert detect_collision(body, [])


def test_no_collision_on_open_board():
    assert not detect_collision(deque([(1, 1), (0, 1), (0, 0)]), [(5, 5)])


def test_obstacle_collision():
    assert detect_collision(deque([(5, 5), (4, 5)]), [(9, 9), (5, 5)])


def test_snake_turning_into_itself_collides():
    snake = Snake([(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)], Direction.LEFT)
    snake.request_direction(Direction.DOWN)
    snake.step(N, food=(0, 0))
    assert snake.head == (5, 6)
    assert detect_collision(snake.body, [])


def test_moving_into_vacated_tail_cell_is_safe():
    snake = Snake([(5, 5), (6, 5), (6, 6), (5, 6)], Direction.LEFT)
    snake.request_direction(Direction.DOWN)
    snake.step(N, food=(0, 0))
    assert snake.head == (5, 6)
    assert not detect_collision(snake.body, [])


def test_growth_keeps_pre_move_tail():
    snake = Snake([(5, 5), (4, 5), (3, 5)], Direction.RIGHT)
    before = len(snake)
    old_tail = snake.tail
    ate = snake.step(N, food=(6, 5))
    assert ate
    assert len(snake) == before + 1
    assert snake.tail == old_tail
    assert list(snake.body) == [(6, 5), (5, 5), (4, 5), (3, 5)]


def test_reversal_is_rejected():
    snake = Snake([(5, 5), (4, 5)], Direction.RIGHT)
    assert not snake.request_direction(Direction.LEFT)
    assert snake.next_dir == Direction.RIGHT
    snake.step(N, food=(0, 0))
    assert snake.dir == Direction.RIGHT


def test_quick_double_turn_cannot_reverse():
    snake = Snake([(5, 5), (4, 5)], Direction.RIGHT)
    assert snake.request_direction(Direction.UP)
    # still travelling right until the next step applies UP
    assert not snake.request_direction(Direction.LEFT)
    snake.step(N, food=(0, 0))
    assert snake.head == (5, 4)


def test_any_direction_allowed_from_rest():
    for direction in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT):
        snake = Snake([(10, 10)])
        assert snake.request_direction(direction)


def test_neutral_request_is_ignored():
    snake = Snake([(10, 10)], Direction.UP)
    assert not snake.request_direction(Direction.NONE)
    assert snake.next_dir == Direction.UP


def test_snake_needs_a_segment():
    with pytest.raises(ValueError):
        Snake([])

import random

import pytest

from quadkit.snake import Direction, SnakeGame


def new_game():
    game = SnakeGame(rng=random.Random(11))
    game.fruit = (game.squares - 1, game.squares - 1)
    return game


def test_initial_state():
    game = new_game()
    assert game.head == (0, 0)
    assert game.direction is Direction.RIGHT
    assert game.score == 0
    assert game.speed == pytest.approx(0.3)
    assert not game.game_over


def test_tick_waits_for_speed_interval():
    game = new_game()
    assert game.tick(0.2) is False
    assert game.head == (0, 0)


def test_tick_moves_head_in_direction():
    game = new_game()
    assert game.tick(1.0) is True
    assert game.head == (Direction.RIGHT.dx, Direction.RIGHT.dy)
    assert len(game.body) == 0


def test_cannot_reverse():
    game = new_game()
    game.steer(Direction.LEFT)
    assert game.direction is Direction.RIGHT
    game.steer(Direction.DOWN)
    assert game.direction is Direction.DOWN


@pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN, Direction.RIGHT])
def test_steering_into_opposite_is_ignored(direction):
    game = new_game()
    game.steer(direction)
    assert game.direction is direction
    game.steer(direction.opposite)
    assert game.direction is direction


def test_eating_fruit_grows_and_speeds_up():
    game = new_game()
    game.fruit = (1, 0)
    game.tick(1.0)
    assert game.score == 100
    assert game.speed == pytest.approx(0.3 * 0.9)
    assert list(game.body) == [(0, 0)]
    assert 0 <= game.fruit[0] < game.squares
    assert 0 <= game.fruit[1] < game.squares


def test_leaving_board_ends_game():
    game = new_game()
    game.steer(Direction.UP)
    game.tick(1.0)
    assert game.game_over
    assert game.tick(5.0) is False


def test_running_into_body_ends_game():
    game = new_game()
    now = 0.0
    for x in range(1, 5):
        game.fruit = (x, 0)
        now += 1.0
        game.tick(now)
    assert len(game.body) == 4
    for direction in (Direction.DOWN, Direction.LEFT, Direction.UP):
        game.fruit = (game.squares - 1, game.squares - 1)
        game.steer(direction)
        now += 1.0
        game.tick(now)
    assert game.game_over


def test_reset_restores_start():
    game = new_game()
    game.steer(Direction.UP)
    game.tick(1.0)
    assert game.game_over
    game.reset(2.0)
    assert not game.game_over
    assert game.head == (0, 0)
    assert game.last_update == 2.0
    assert game.direction is Direction.RIGHT


def test_invalid_board_size():
    with pytest.raises(ValueError):
        SnakeGame(squares=0)
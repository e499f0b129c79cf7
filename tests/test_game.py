import pytest

from gridsnake.config import Config
from gridsnake.game import Game, GameState
from gridsnake.geometry import Command, Direction, Point
from gridsnake.snake import MoveOutcome, Snake


def run_until_end(game, limit=50):
    for _ in range(limit):
        if game.state is GameState.END:
            return
        game.advance(Command.NONE)


def test_new_game_starts_at_menu():
    game = Game(Config(seed=1))
    assert game.state is GameState.START
    assert game.score == 0
    assert game.tick == 0
    assert not game.snake.occupies(game.apple)


def test_one_step_up_truncates_tail(game):
    assert game.advance(Command.UP) is MoveOutcome.ALIVE
    assert game.snake.head == Point(10, 9)
    assert list(game.snake.body) == [Point(10, 10), Point(10, 11)]
    assert game.score == 0


def test_eating_grows_by_one_and_scores(game):
    game.apple = Point(10, 9)
    before = len(game.snake.body)
    game.advance(Command.UP)
    assert game.score == 1
    assert len(game.snake.body) == before + 1
    assert not game.snake.occupies(game.apple)


def test_plain_move_keeps_length(game):
    before = len(game.snake.body)
    game.advance(Command.LEFT)
    assert len(game.snake.body) == before


@pytest.mark.parametrize(
    "turns",
    [
        [Command.UP],
        [Command.LEFT],
        [Command.RIGHT],
        [Command.LEFT, Command.DOWN],
    ],
)
def test_every_wall_ends_the_run(game, turns):
    for command in turns:
        game.advance(command)
    run_until_end(game)
    assert game.state is GameState.END
    head = game.snake.head
    assert not (0 <= head.x < 20 and 0 <= head.y < 20)


def test_repeated_crashes_always_end(game):
    for command in (Command.UP, Command.LEFT, Command.RIGHT, Command.UP):
        game.advance(command)
        run_until_end(game)
        assert game.state is GameState.END
        game.restart()
        game.apple = Point(0, 0)
        assert game.state is GameState.RUN


def test_reversal_is_a_self_collision(game):
    assert game.advance(Command.DOWN) is MoveOutcome.COLLIDED
    assert game.state is GameState.END


def test_non_direction_keeps_heading(game):
    game.advance(Command.LEFT)
    game.advance(Command.CONFIRM)
    assert game.snake.head == Point(8, 10)
    assert game.direction is Direction.LEFT


def test_turn_between_ticks_is_remembered():
    game = Game(Config(tick_delay=3, seed=3))
    game.choose(GameState.RUN)
    game.apple = Point(0, 0)
    assert game.advance(Command.LEFT) is None
    assert game.advance(Command.NONE) is None
    assert game.advance(Command.NONE) is MoveOutcome.ALIVE
    assert game.snake.head == Point(9, 10)


def test_advance_outside_run_does_nothing():
    game = Game(Config(tick_delay=1, seed=3))
    head = game.snake.head
    assert game.advance(Command.LEFT) is None
    assert game.snake.head == head


def test_back_keeps_progress(game):
    game.advance(Command.LEFT)
    game.back()
    assert game.state is GameState.START
    game.choose(GameState.RUN)
    assert game.state is GameState.RUN
    assert game.snake.head == Point(9, 10)


def test_choosing_run_after_game_over_starts_fresh(game):
    game.score = 4
    game.advance(Command.DOWN)
    game.back()
    game.choose(GameState.RUN)
    assert game.state is GameState.RUN
    assert game.score == 0
    assert game.snake.head == Point(10, 10)


def test_back_from_exit_is_ignored(game):
    game.back()
    game.choose(GameState.EXIT)
    game.back()
    assert game.state is GameState.EXIT
    assert not game.running


def test_choose_only_from_menu(game):
    game.choose(GameState.HELP)
    assert game.state is GameState.RUN


def test_choose_rejects_non_menu_state(game):
    game.back()
    with pytest.raises(ValueError):
        game.choose(GameState.END)


def test_snapshot_is_detached(game):
    snap = game.snapshot()
    game.advance(Command.UP)
    assert snap.head == Point(10, 10)
    assert snap.body == (Point(10, 11), Point(10, 12))
    assert snap.state is GameState.RUN


def nearly_full_game():
    """5x5 board with the snake on 24 cells and the apple on the last one."""
    game = Game(Config(grid_size=5, initial_length=1, tick_delay=1, seed=2))
    game.choose(GameState.RUN)
    last, head = Point(4, 4), Point(3, 4)
    body = [Point(x, y) for y in range(5) for x in range(5) if Point(x, y) not in (last, head)]
    game.snake = Snake(head, body, grid_size=5, heading=Direction.RIGHT)
    game.direction = Direction.RIGHT
    game.apple = last
    return game


def test_filling_the_board_ends_the_round():
    game = nearly_full_game()
    assert game.advance(Command.RIGHT) is MoveOutcome.ALIVE
    assert game.state is GameState.END
    assert game.won and game.over
    assert game.score == 1
    assert len(game.snake) == 25
    # no new apple was asked for
    assert game.apple == Point(4, 4)


def test_new_round_after_filling_the_board():
    game = nearly_full_game()
    game.advance(Command.RIGHT)
    game.restart()
    assert not game.won
    assert game.state is GameState.RUN
    assert len(game.snake) == 1

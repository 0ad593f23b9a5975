import pytest

from minesboomer.board import Board
from minesboomer.game import Difficulty, Game
from minesboomer.geometry import Point, Size
from minesboomer.multiplayer import Multiplayer


def new_multy_game(difficulty):
    return Multiplayer("", "1", "2", difficulty)


def game_with_mines(mines, size=Size(width=10, height=10)):
    game = Game(Board.new(mines, size), mines, Difficulty.EASY)
    return Multiplayer.with_game(game, "", "1", "2")


def coordinates_for_non_mine(board):
    for coordinates, cell in board:
        if not cell.is_mine():
            return coordinates
    return Point.zero()


def coordinates_for_mine(board):
    for coordinates, cell in board:
        if cell.is_mine() and not cell.is_cleared():
            return coordinates
    return Point.zero()


def test_get_board_size():
    mult = new_multy_game(Difficulty.EASY)
    assert mult.board_dimensions == Size(width=10, height=10)
    assert mult.difficulty is Difficulty.EASY
    assert mult.board is mult.game.board


@pytest.mark.parametrize("mines, expected", [(11, 6), (41, 21), (99, 50)])
def test_total_mines_to_win(mines, expected):
    mult = game_with_mines(mines, Size(width=16, height=30))
    assert mult.total_mines_to_win() == expected


@pytest.mark.parametrize(
    "difficulty, expected",
    [(Difficulty.EASY, 11), (Difficulty.MEDIUM, 51), (Difficulty.HARD, 126)],
)
def test_total_mines_to_win_for_difficulties(difficulty, expected):
    assert new_multy_game(difficulty).total_mines_to_win() == expected


def test_switch_player_after_selecting_non_mine():
    mult = new_multy_game(Difficulty.EASY)
    assert mult.current_player.name == "1"
    mult.player_selected(coordinates_for_non_mine(mult.game.board))
    assert mult.current_player.name == "2"


def test_does_not_switch_player_after_selecting_mine():
    mult = new_multy_game(Difficulty.EASY)
    assert mult.current_player.name == "1"
    mine = coordinates_for_mine(mult.game.board)
    mult.player_selected(mine)
    assert mult.current_player.name == "1"
    assert mult.local_player.has_mine(mine)


def test_selecting_cleared_cell_keeps_turn():
    mult = new_multy_game(Difficulty.EASY)
    point = coordinates_for_non_mine(mult.game.board)
    mult.player_selected(point)
    mult.player_selected(point)
    assert mult.current_player.name == "2"


def test_selecting_outside_board_changes_nothing():
    mult = new_multy_game(Difficulty.EASY)
    mult.player_selected(Point(50, 50))
    assert mult.current_player.name == "1"
    assert mult.local_player.score() == 0


def test_remaining_to_win():
    mult = game_with_mines(11)
    assert mult.current_player.name == "1"
    for _ in range(3):
        mult.player_selected(coordinates_for_mine(mult.game.board))
    assert mult.remaining_to_win() == 3
    assert mult.local_to_win() == 3


def test_is_win():
    mult = game_with_mines(11)
    assert mult.current_player.name == "1"
    for _ in range(3):
        mult.player_selected(coordinates_for_mine(mult.game.board))
    assert not mult.did_game_finish()
    assert mult.winner() is None
    for _ in range(3):
        mult.player_selected(coordinates_for_mine(mult.game.board))
    assert mult.did_game_finish()
    assert mult.winner().name == "1"


def test_is_win_second_player():
    mult = game_with_mines(11)
    assert mult.current_player.name == "1"
    for _ in range(3):
        mult.player_selected(coordinates_for_mine(mult.game.board))
    mult.player_selected(coordinates_for_non_mine(mult.game.board))
    assert not mult.did_game_finish()

    for _ in range(5):
        mult.player_selected(coordinates_for_mine(mult.game.board))
    assert not mult.did_game_finish()

    mult.player_selected(coordinates_for_mine(mult.game.board))
    assert mult.did_game_finish()
    assert mult.winner().name == "2"
    assert mult.local_to_win() == 3


def test_player_winning():
    mult = new_multy_game(Difficulty.EASY)
    assert mult.player_winning() is None

    mult.player_selected(coordinates_for_mine(mult.game.board))
    assert mult.player_winning().name == "1"

    mult.player_selected(coordinates_for_non_mine(mult.game.board))
    mult.player_selected(coordinates_for_mine(mult.game.board))
    mult.player_selected(coordinates_for_mine(mult.game.board))
    assert mult.player_winning().name == "2"


def test_with_game_keeps_given_game():
    game = Game.new(Difficulty.MEDIUM)
    mult = Multiplayer.with_game(game, "abc", "host", "guest")
    assert mult.game is game
    assert mult.game_id == "abc"
    assert mult.local_player.is_active
    assert not mult.remote_player.is_active
    assert mult.current_player.name == "host"
    assert mult.remote_player.name == "guest"
import pytest

from connectn.board import EMPTY, Board, is_token, line_wins


def _put(board, cells, token):
    for i, j in cells:
        board.cells[i][j] = token
        board.free -= 1


def test_new_board_is_empty():
    board = Board(6, 7)
    assert board.rows == 6
    assert board.columns == 7
    assert board.free == 42
    assert all(c == EMPTY for row in board.cells for c in row)
    assert len(board.cells) == 6
    assert all(len(row) == 7 for row in board.cells)


def test_invalid_dimensions_raise():
    with pytest.raises(ValueError):
        Board(0, 5)
    with pytest.raises(ValueError):
        Board(4, -1)


@pytest.mark.parametrize("c,expected", [("$", True), ("#", True), (".", False), ("X", False)])
def test_is_token(c, expected):
    assert is_token(c) is expected


def test_line_wins():
    assert line_wins(["$", "$", "$"], 3) is True
    assert line_wins(["#", "#", "#", "#"], 4) is True
    assert line_wins(["$", "#", "$"], 3) is False
    assert line_wins([".", ".", "."], 3) is False
    assert line_wins(["$", "$", "$", "#"], 3) is True


def test_empty_board_has_no_win():
    assert Board(6, 7).check_win(4) is False


def test_horizontal_win():
    board = Board(6, 7)
    _put(board, [(5, 1), (5, 2), (5, 3), (5, 4)], "$")
    assert board.check_win(4) is True
    assert board.check_win(5) is False


def test_vertical_win():
    board = Board(6, 7)
    _put(board, [(2, 6), (3, 6), (4, 6), (5, 6)], "#")
    assert board.check_win(4) is True


def test_diagonal_win():
    board = Board(6, 7)
    _put(board, [(2, 0), (3, 1), (4, 2), (5, 3)], "$")
    assert board.check_win(4) is True


def test_anti_diagonal_win():
    board = Board(6, 7)
    _put(board, [(5, 0), (4, 1), (3, 2), (2, 3)], "#")
    assert board.check_win(4) is True


def test_mixed_tokens_do_not_win():
    board = Board(6, 7)
    _put(board, [(5, 0), (5, 1), (5, 2)], "$")
    _put(board, [(5, 3)], "#")
    assert board.check_win(4) is False


def test_square_wins_only_inspects_its_square():
    board = Board(6, 7)
    _put(board, [(5, 3), (5, 4), (5, 5), (5, 6)], "$")
    assert board.square_wins(2, 3, 4) is True
    assert board.square_wins(2, 0, 4) is False


def test_connect_larger_than_board_never_wins():
    board = Board(4, 4)
    _put(board, [(0, j) for j in range(4)], "$")
    assert board.check_win(5) is False


def test_check_win_rejects_non_positive():
    with pytest.raises(ValueError):
        Board(4, 4).check_win(0)


def test_is_playable_tracks_free_cells():
    board = Board(1, 2)
    assert board.is_playable() is True
    _put(board, [(0, 0), (0, 1)], "$")
    assert board.is_playable() is False


def test_copy_is_independent():
    board = Board(4, 5)
    _put(board, [(3, 2)], "$")
    clone = board.copy()
    assert clone.cells == board.cells
    assert clone.free == board.free
    clone.cells[3][3] = "#"
    assert board.cells[3][3] == EMPTY


def test_playable_positions():
    board = Board(3, 4)
    assert board.playable_positions() == [True] * 4
    _put(board, [(0, 1), (1, 1), (2, 1)], "#")
    assert board.playable_positions() == [True, False, True, True]


def test_render_single_cell():
    assert Board(1, 1).render() == "| . |\n-----\n"


def test_render_shape():
    board = Board(3, 4)
    _put(board, [(2, 0)], "$")
    lines = board.render().splitlines()
    assert len(lines) == 2 * board.rows
    assert lines[1] == "-----" * board.columns
    assert lines[4].startswith("| $ |")
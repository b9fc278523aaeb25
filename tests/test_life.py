import pytest

from pixelworks.life import Board
from pixelworks.surface import Surface


def _live(board):
    return {
        (i, j)
        for i in range(board.height)
        for j in range(board.width)
        if board.cells[i][j]
    }


def test_new_board_is_dead():
    board = Board(3, 4)
    assert _live(board) == set()
    assert len(board.cells) == 3 and len(board.cells[0]) == 4


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Board(-1, 2)


def test_is_alive_outside_is_false():
    board = Board(2, 2)
    board.cells[0][0] = True
    assert board.is_alive(0, 0)
    assert not board.is_alive(-1, 0)
    assert not board.is_alive(0, 2)
    assert not board.is_alive(2, 0)


def test_blinker_oscillates():
    board = Board(5, 5)
    for j in (1, 2, 3):
        board.cells[2][j] = True
    board.step()
    assert _live(board) == {(1, 2), (2, 2), (3, 2)}
    board.step()
    assert _live(board) == {(2, 1), (2, 2), (2, 3)}


def test_birth_needs_three_neighbours():
    board = Board(3, 3)
    board.cells[0][0] = True
    board.cells[0][2] = True
    board.cells[2][0] = True
    assert board.alive(1, 1)
    board.cells[2][0] = False
    assert not board.alive(1, 1)


def test_live_cell_with_three_neighbours_dies():
    board = Board(4, 4)
    for i, j in ((1, 1), (1, 2), (2, 1), (2, 2)):
        board.cells[i][j] = True
    assert not board.alive(1, 1)
    board.step()
    assert _live(board) == set()


def test_draw_paints_cells():
    board = Board(2, 2)
    board.cells[0][1] = True
    surface = Surface(4, 4)
    surface.put_pixel(0, 2, surface.map_rgb(1, 2, 3))
    board.draw(surface, 2)
    white = surface.map_rgb(255, 255, 255)
    assert surface.get_pixel(0, 2) == 0
    assert surface.get_pixel(1, 3) == 0
    assert surface.get_pixel(2, 0) == white
    assert surface.get_pixel(0, 0) == white
import random

import pytest

from minefield.board import Board


def _board(cols=3, rows=3, mines=()):
    board = Board(cols, rows, 0, rng=random.Random(1))
    board.place_mines_at(mines)
    return board


@pytest.mark.parametrize("cols,rows,mines", [(9, 9, 10), (16, 16, 40), (4, 3, 12), (5, 5, 0)])
def test_random_placement_has_exact_mine_count(cols, rows, mines):
    board = Board(cols, rows, mines, rng=random.Random(7))
    assert sum(t.mine for t in board.tiles) == mines
    assert len(board.tiles) == cols * rows


def test_reset_keeps_mine_count_and_clears_state():
    board = Board(8, 8, 10, rng=random.Random(3))
    board.flag_at(0, 0)
    board.reset()
    assert sum(t.mine for t in board.tiles) == 10
    assert not any(t.flagged or t.revealed for t in board.tiles)
    assert not board.game_over


@pytest.mark.parametrize("cols,rows,mines", [(0, 3, 0), (3, -1, 0), (2, 2, 5), (2, 2, -1)])
def test_invalid_dimensions_rejected(cols, rows, mines):
    with pytest.raises(ValueError):
        Board(cols, rows, mines)


def test_neighbor_counts_match_grid():
    board = Board(6, 5, 0)
    for tile in board.tiles:
        on_x_edge = tile.x in (0, board.cols - 1)
        on_y_edge = tile.y in (0, board.rows - 1)
        expected = (2 if on_x_edge else 3) * (2 if on_y_edge else 3) - 1
        assert len(tile.neighbors) == expected


def test_flood_reveal_wins_when_one_mine_in_corner():
    board = _board(mines=[(0, 0)])
    board.reveal_at(2, 2)
    assert not board.game_over
    assert board.is_win()
    assert not board.tile(0, 0).revealed
    assert board.tile(1, 1).adjacent_mines == 1


def test_reveal_numbered_tile_does_not_flood():
    board = _board(mines=[(0, 0)])
    board.reveal_at(1, 1)
    assert [t.revealed for t in board.tiles].count(True) == 1
    assert not board.is_win()


def test_reveal_mine_ends_game_and_shows_all_mines():
    board = _board(mines=[(0, 0), (2, 2)])
    board.reveal_at(0, 0)
    assert board.game_over
    assert board.tile(0, 0).revealed
    assert board.tile(2, 2).revealed
    assert not board.tile(1, 1).revealed


def test_actions_ignored_after_game_over():
    board = _board(mines=[(0, 0)])
    board.reveal_at(0, 0)
    board.reveal_at(2, 2)
    board.flag_at(1, 1)
    assert not board.tile(2, 2).revealed
    assert not board.tile(1, 1).flagged


def test_flood_stops_at_flag():
    board = _board(cols=4, rows=1, mines=[])
    board.flag_at(1, 0)
    board.reveal_at(3, 0)
    assert board.tile(2, 0).revealed
    assert board.tile(1, 0).flagged
    assert not board.tile(0, 0).revealed
    assert not board.is_win()


def test_flagged_start_tile_not_revealed():
    board = _board(mines=[(0, 0)])
    board.flag_at(2, 2)
    board.reveal_at(2, 2)
    assert not board.tile(2, 2).revealed


def test_remaining_mines_tracks_flags():
    board = _board(mines=[(0, 0), (1, 0)])
    flags = [(0, 1), (1, 1), (2, 1)]
    for x, y in flags:
        board.flag_at(x, y)
    assert board.remaining_mines() == board.mine_count - len(flags)
    board.flag_at(0, 1)
    assert board.remaining_mines() == board.mine_count - len(flags) + 1


def test_out_of_bounds_actions_ignored():
    board = _board(mines=[(0, 0)])
    board.reveal_at(-1, 0)
    board.reveal_at(3, 0)
    board.flag_at(0, 3)
    assert not any(t.revealed or t.flagged for t in board.tiles)


def test_tile_out_of_bounds_raises():
    board = _board()
    with pytest.raises(IndexError):
        board.tile(-1, 0)
    with pytest.raises(IndexError):
        board.tile(0, 3)


def test_place_mines_at_rejects_off_board():
    board = _board()
    with pytest.raises(ValueError):
        board.place_mines_at([(5, 5)])


def test_place_mines_at_sets_mine_count():
    board = _board(mines=[(0, 0), (0, 0), (2, 1)])
    assert board.mine_count == len({(0, 0), (2, 1)})
    assert sum(t.mine for t in board.tiles) == board.mine_count


def test_tile_coordinates():
    board = Board(4, 3, 0)
    for y in range(3):
        for x in range(4):
            assert (board.tile(x, y).x, board.tile(x, y).y) == (x, y)


def test_mine_free_board_won_by_single_click():
    board = Board(5, 4, 0)
    board.reveal_at(2, 2)
    assert board.is_win()
    assert all(t.revealed for t in board.tiles)
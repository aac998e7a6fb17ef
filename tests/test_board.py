import unittest

from tetris_board import Board
from tetris_piece import I, O, T, Piece


def fill_row(board, y, value=O, skip=()):
    for x in range(board.cols):
        if x not in skip:
            board.grid[y][x] = value


class TestBoard(unittest.TestCase):
    def setUp(self):
        self.board = Board(10, 20)

    def test_given_new_board_when_queried_then_empty_and_clear(self):
        self.assertTrue(self.board.is_clear())
        self.assertFalse(self.board.is_occupied(0, 0))
        self.assertEqual(self.board.full_rows(), [])

    def test_given_piece_outside_walls_or_floor_when_checking_then_collides(self):
        self.assertTrue(self.board.collides(Piece.of(I, -1, 0)))
        self.assertTrue(self.board.collides(Piece.of(I, 7, 0)))
        self.assertTrue(self.board.collides(Piece.of(O, 0, 19)))
        self.assertFalse(self.board.collides(Piece.of(O, 8, 18)))

    def test_given_piece_above_top_when_checking_then_only_walls_matter(self):
        fill_row(self.board, 0)
        self.assertFalse(self.board.collides(Piece.of(O, 4, -2)))
        self.assertTrue(self.board.collides(Piece.of(O, 4, -1)))

    def test_given_piece_when_committed_then_cells_hold_kind_id(self):
        self.board.commit(Piece.of(T, 0, 18))
        self.assertEqual(self.board[1, 18], T)
        self.assertEqual([self.board[x, 19] for x in range(3)], [T, T, T])
        self.assertEqual(self.board.filled(), 4)

    def test_given_piece_partly_above_top_when_committed_then_hidden_cells_skipped(self):
        self.board.commit(Piece.of(O, 0, -1))
        self.assertEqual(self.board.filled(), 2)
        self.assertEqual(self.board[0, 0], O)

    def test_given_full_rows_when_scanning_then_bottom_to_top(self):
        fill_row(self.board, 19)
        fill_row(self.board, 15)
        fill_row(self.board, 17, skip=(4,))
        self.assertEqual(self.board.full_rows(), [19, 15])

    def test_given_adjacent_full_rows_when_compacting_then_rows_above_drop_by_count(self):
        fill_row(self.board, 19)
        fill_row(self.board, 18)
        self.board[0, 17] = T
        before = self.board.filled()
        self.board.clear_and_compact(self.board.full_rows())
        self.assertEqual(self.board.filled(), before - 20)
        self.assertEqual(self.board[0, 19], T)
        self.assertEqual(self.board.full_rows(), [])

    def test_given_split_full_rows_when_compacting_then_gaps_close(self):
        self.board[0, 16] = T
        fill_row(self.board, 17)
        self.board[1, 18] = I
        fill_row(self.board, 19)
        self.board.clear_and_compact([19, 17])
        self.assertEqual(self.board[0, 18], T)
        self.assertEqual(self.board[1, 19], I)
        self.assertEqual(self.board.filled(), 2)

    def test_given_row_below_cleared_row_when_compacting_then_it_stays(self):
        fill_row(self.board, 19, skip=(9,))
        fill_row(self.board, 18)
        below = list(self.board.grid[19])
        self.board.clear_and_compact([18])
        self.assertEqual(self.board.grid[19], below)
        self.assertEqual(self.board.grid[0], [0] * 10)

    def test_given_all_cleared_when_checking_then_perfect_clear(self):
        fill_row(self.board, 19)
        self.board.clear_and_compact([19])
        self.assertTrue(self.board.is_clear())

    def test_given_snapshot_when_board_changes_then_snapshot_unchanged(self):
        snap = self.board.rows_snapshot()
        self.board[3, 3] = O
        self.assertEqual(snap[3][3], 0)


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from connectn.engine import Board, Move, Position, Tile
from connectn.evaluation import MAX_SCORE, MIN_SCORE, Evaluation, evaluate, evaluate_last_move


def drawn_board() -> Board:
    """Full 6x7 board without four in a row: XXOOXXO, colours flipped every row."""

    pattern = np.array([1, 1, -1, -1, 1, 1, -1], dtype=np.int8)
    grid = np.stack([pattern if r % 2 == 0 else -pattern for r in range(6)])
    return Board.from_array(grid)


class TestEvaluate(unittest.TestCase):
    def test_empty_board(self):
        self.assertEqual(evaluate(Board()), Evaluation(None, 0))
        self.assertFalse(evaluate(Board()).is_terminal)

    def test_single_tile_score(self):
        board = Board()
        board.place(Move(Position(3, 5), Tile.NEGATIVE))
        # Four directions, run length 1 each.
        self.assertEqual(evaluate(board), Evaluation(None, -40))

    def test_longer_lines_weigh_more(self):
        board = Board()
        board.place(Move(Position(0, 5), Tile.POSITIVE))
        board.place(Move(Position(1, 5), Tile.POSITIVE))
        pair = evaluate(board).score

        spread = Board()
        spread.place(Move(Position(0, 5), Tile.POSITIVE))
        spread.place(Move(Position(4, 5), Tile.POSITIVE))
        self.assertGreater(pair, evaluate(spread).score)

    def test_horizontal_win_scenario(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        grid[5, :3] = 1
        board = Board.from_array(grid)
        self.assertIsNone(evaluate(board).result)

        self.assertTrue(board.place(Move(Position(3, 5), Tile.POSITIVE)))
        self.assertEqual(evaluate(board), Evaluation(1, MAX_SCORE))
        self.assertEqual(evaluate_last_move(board, Position(3, 5)), Evaluation(1, MAX_SCORE))

    def test_vertical_and_diagonal_wins(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        grid[2:, 6] = -1
        self.assertEqual(evaluate(Board.from_array(grid)), Evaluation(-1, MIN_SCORE))

        grid = np.zeros((6, 7), dtype=np.int8)
        for i in range(4):
            grid[5 - i, i] = 1
        self.assertEqual(evaluate(Board.from_array(grid)).result, 1)

        grid = np.zeros((6, 7), dtype=np.int8)
        for i in range(4):
            grid[2 + i, 1 + i] = -1
        board = Board.from_array(grid)
        self.assertEqual(evaluate(board).result, -1)
        self.assertEqual(evaluate_last_move(board, Position(2, 3)).result, -1)

    def test_connection_length_three(self):
        grid = np.zeros((4, 4), dtype=np.int8)
        grid[3, 1:4] = 1
        self.assertEqual(evaluate(Board.from_array(grid, n=3)).result, 1)
        self.assertIsNone(evaluate(Board.from_array(grid, n=4)).result)

    def test_full_board_draw(self):
        board = drawn_board()
        self.assertEqual(evaluate(board), Evaluation(0, 0))
        self.assertEqual(evaluate_last_move(board, Position(0, 0)), Evaluation(0, 0))

    def test_colour_swap_negates_score(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        grid[5] = [1, 1, 1, -1, 0, 0, 0]
        grid[4, 0] = -1
        board = Board.from_array(grid)
        swapped = Board.from_array(-grid)

        # Each X: 1000 for the horizontal three plus 3 * 10; each O: -40.
        ev = evaluate(board)
        self.assertEqual(ev, Evaluation(None, 3010))
        self.assertEqual(evaluate(swapped), Evaluation(None, -3010))


class TestEvaluateLastMove(unittest.TestCase):
    def test_empty_or_out_of_range(self):
        board = Board()
        self.assertEqual(evaluate_last_move(board, Position(0, 5)), Evaluation(None, 0))
        self.assertEqual(evaluate_last_move(board, Position(10, 10)), Evaluation(None, 0))

    def test_only_lines_through_position(self):
        board = Board()
        board.place(Move(Position(0, 5), Tile.POSITIVE))
        board.place(Move(Position(6, 5), Tile.NEGATIVE))
        board.place(Move(Position(1, 5), Tile.POSITIVE))
        # Horizontal run of 2 plus three singleton directions.
        self.assertEqual(evaluate_last_move(board, Position(1, 5)), Evaluation(None, 100 + 30))


if __name__ == "__main__":
    unittest.main()

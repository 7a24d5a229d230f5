import unittest

from typer.testing import CliRunner

from connectn.agents import HumanAgent, MinimaxAgent, MonteCarloAgent, RandomAgent
from connectn.cli import _parse_column, app, build_agent
from connectn.engine import Tile


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_play_quiet(self):
        result = self.runner.invoke(
            app,
            [
                "play",
                "--positive", "minimax",
                "--negative", "random",
                "--rows", "4",
                "--cols", "5",
                "--connect", "3",
                "--depth", "2",
                "--seed", "3",
                "--quiet",
            ],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("result:", result.output)

    def test_play_with_board_output(self):
        result = self.runner.invoke(
            app,
            ["play", "--positive", "random", "--negative", "mcts", "--rows", "3", "--cols", "3",
             "--connect", "3", "--simulations", "20", "--seed", "1"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("It is Random X's turn", result.output)

    def test_play_human_reads_columns(self):
        # Column 7 is off the board and is re-asked; "x" is not a number.
        result = self.runner.invoke(
            app,
            ["play", "--positive", "human", "--negative", "random", "--rows", "2", "--cols", "2",
             "--connect", "2", "--seed", "0"],
            input="x\n7\n0\n0\n1\n1\n",
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Enter a column index.", result.output)

    def test_series(self):
        result = self.runner.invoke(
            app,
            ["series", "--first", "random", "--second", "minimax", "--games", "2", "--rows", "4",
             "--cols", "4", "--connect", "3", "--depth", "1"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("draws", result.output)

    def test_series_rejects_human(self):
        result = self.runner.invoke(app, ["series", "--first", "human"])
        self.assertEqual(result.exit_code, 2)

    def test_bad_parameters(self):
        result = self.runner.invoke(app, ["play", "--positive", "robot"])
        self.assertNotEqual(result.exit_code, 0)
        result = self.runner.invoke(app, ["play", "--rows", "3", "--cols", "3", "--connect", "5"])
        self.assertNotEqual(result.exit_code, 0)


class TestHelpers(unittest.TestCase):
    def test_parse_column(self):
        self.assertEqual(_parse_column(" 3 "), 3)
        self.assertIsNone(_parse_column(""))
        self.assertIsNone(_parse_column("three"))

    def test_build_agent(self):
        common = dict(depth=2, simulations=10, exploration=1.0, seed=0, verbose=False)
        self.assertIsInstance(build_agent("human", Tile.POSITIVE, **common), HumanAgent)
        self.assertIsInstance(build_agent("random", Tile.POSITIVE, **common), RandomAgent)
        self.assertIsInstance(build_agent("minimax", Tile.NEGATIVE, **common), MinimaxAgent)
        agent = build_agent("mcts", Tile.NEGATIVE, **common)
        self.assertIsInstance(agent, MonteCarloAgent)
        self.assertEqual(agent.tile, Tile.NEGATIVE)
        with self.assertRaises(ValueError):
            build_agent("robot", Tile.POSITIVE, **common)


if __name__ == "__main__":
    unittest.main()

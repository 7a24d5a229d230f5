"""Connect-N package (engine + evaluation + agents + CLI)."""

from connectn.engine import Board, ConnectNConfig, Move, Position, Shape, Tile, generate_valid_positions
from connectn.evaluation import Evaluation, evaluate, evaluate_last_move
from connectn.game import Game, GameOutcome

__all__ = [
    "Board",
    "ConnectNConfig",
    "Evaluation",
    "Game",
    "GameOutcome",
    "Move",
    "Position",
    "Shape",
    "Tile",
    "evaluate",
    "evaluate_last_move",
    "generate_valid_positions",
]

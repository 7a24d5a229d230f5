"""Text rendering for boards and move lists."""

from __future__ import annotations

from typing import List, Sequence

from connectn.engine import Board, Move, tile_symbol


def render_board(board: Board) -> str:
    rows, cols = board.shape
    full_line = "+" + "-" * (4 * cols - 1) + "+"
    inner_line = "|" + "+".join("---" for _ in range(cols)) + "|"

    lines: List[str] = [full_line]
    for r, row in enumerate(board.to_array()):
        cells = [f" {tile_symbol(int(v))} " for v in row]
        lines.append("|" + "|".join(cells) + "|")
        lines.append(inner_line if r != rows - 1 else full_line)
    lines.append(" " + " ".join(f"{c:^3}" for c in range(cols)))
    return "\n".join(lines)


def format_move_history(moves: Sequence[Move]) -> str:
    parts = []
    for ply, m in enumerate(moves):
        parts.append(f"{ply}:{m.tile.symbol}@({m.position.col},{m.position.row})")
    return " ".join(parts)

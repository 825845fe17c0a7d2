from __future__ import annotations

import re

from wordgrid.errors import InvalidBoard

Board = list[list[str]]

_TILE_RE = re.compile(r"[a-z]+")


def validate_board(board: Board) -> None:
    """Raise InvalidBoard unless the board is non-empty, rectangular and lowercase."""
    if not isinstance(board, (list, tuple)):
        raise InvalidBoard("bad board: expected a list of rows")
    if not board:
        raise InvalidBoard("bad board: no rows")
    if not all(isinstance(row, (list, tuple)) for row in board):
        raise InvalidBoard("bad board: rows must be lists of tiles")
    width = len(board[0])
    if width == 0:
        raise InvalidBoard("bad board: first row is empty")
    for r, row in enumerate(board):
        if len(row) != width:
            raise InvalidBoard(f"bad board: row {r} has {len(row)} cells, expected {width}")
        for c, cell in enumerate(row):
            if not isinstance(cell, str) or not _TILE_RE.fullmatch(cell):
                raise InvalidBoard(f"bad board: cell ({r},{c}) is {cell!r}, expected lowercase letters")


def neighbors(rows: int, cols: int) -> list[list[int]]:
    """Adjacency lists over flattened cell indices (row * cols + col)."""
    adj: list[list[int]] = []
    for idx in range(rows * cols):
        r, c = divmod(idx, cols)
        cell_adj = []
        for nr in range(max(0, r - 1), min(rows - 1, r + 1) + 1):
            for nc in range(max(0, c - 1), min(cols - 1, c + 1) + 1):
                if nr == r and nc == c:
                    continue
                cell_adj.append(nr * cols + nc)
        adj.append(cell_adj)
    return adj


def parse_row(text: str) -> list[str]:
    """Split a row like "cat" or "qu,a,t" into tiles."""
    text = text.strip()
    if "," in text:
        return [tile.strip() for tile in text.split(",")]
    return list(text)

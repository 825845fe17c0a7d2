from __future__ import annotations

import logging

from wordgrid.board import Board, neighbors, validate_board
from wordgrid.errors import BranchAnomaly
from wordgrid.lexicon import Lexicon, default_provider
from wordgrid.metrics import StageTimer
from wordgrid.scoring import Ranking, aggregate

logger = logging.getLogger("wordgrid")


def _search(cells: list[str], adjacency: list[list[int]], start: int, lexicon: Lexicon) -> set[str]:
    """DFS from one starting cell with lower-bound prefix pruning.

    ``visited`` is a bitmask passed by value, so a cell is only marked for
    the path that reached it.
    """

    def dfs(idx: int, sofar: str, visited: int) -> set[str]:
        try:
            candidate = sofar + cells[idx]
            adj = adjacency[idx]
        except IndexError as exc:
            raise BranchAnomaly(f"cell index {idx} outside board of {len(cells)} cells") from exc

        found: set[str] = set()
        match = lexicon.lower_bound(candidate)
        if match is None:
            return found
        if not match.startswith(candidate):
            return found
        if match == candidate:
            found.add(candidate)

        visited |= 1 << idx
        for nidx in adj:
            if not (visited & (1 << nidx)):
                found |= dfs(nidx, candidate, visited)
        return found

    return dfs(start, "", 0)


def words_from(board: Board, row: int, col: int, lexicon: Lexicon) -> set[str]:
    """All lexicon words reachable on a simple path starting at (row, col)."""
    rows, cols = len(board), len(board[0])
    if not (0 <= row < rows and 0 <= col < cols):
        raise BranchAnomaly(f"start ({row},{col}) outside {rows}x{cols} board")
    cells = [tile for board_row in board for tile in board_row]
    return _search(cells, neighbors(rows, cols), row * cols + col, lexicon)


def solve(
    board: Board,
    lexicon: Lexicon | None = None,
    ranking: Ranking | str = Ranking.LEXICOGRAPHIC,
    max_results: int = 0,
    timer: StageTimer | None = None,
) -> list[str]:
    """Find every lexicon word on the board.

    Raises InvalidBoard before any search if the board is malformed, and
    DictionaryUnavailable if no lexicon was passed and the configured word
    list cannot be read. Results are unique and ordered by ``ranking``;
    ``max_results`` > 0 truncates them.
    """
    timer = timer or StageTimer()

    with timer.stage("validate"):
        validate_board(board)
    rows, cols = len(board), len(board[0])

    with timer.stage("lexicon"):
        if lexicon is None:
            lexicon = default_provider().get()

    with timer.stage("search"):
        cells = [tile for board_row in board for tile in board_row]
        adjacency = neighbors(rows, cols)
        per_cell: list[set[str]] = []
        for start in range(rows * cols):
            try:
                per_cell.append(_search(cells, adjacency, start, lexicon))
            except BranchAnomaly as exc:
                logger.debug("Dropped branch from cell %d: %s", start, exc)

    with timer.stage("rank"):
        result = aggregate(per_cell, ranking)

    logger.info("Board %dx%d: found %d words", rows, cols, len(result))
    return result[:max_results] if max_results > 0 else result

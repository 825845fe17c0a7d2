"""Command-line word finder: print every dictionary word on a board."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from wordgrid.board import Board, parse_row, validate_board
from wordgrid.errors import WordGridError
from wordgrid.lexicon import LexiconProvider
from wordgrid.scoring import Ranking, score_word
from wordgrid.settings import settings
from wordgrid.solver import solve


def read_board_file(path: Path) -> Board:
    """Read a board from a JSON list of rows, or from text with one row per line.

    Blank lines and # comments are skipped in the text form.
    """
    text = path.read_text(encoding="utf-8")
    if text.lstrip().startswith("["):
        return json.loads(text)
    rows: Board = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        rows.append(parse_row(line))
    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find all dictionary words on a Boggle board")
    parser.add_argument(
        "rows",
        nargs="*",
        metavar="ROW",
        help="Board rows, e.g. 'cat' 'dog' or 'qu,a,t' for multi-letter tiles",
    )
    parser.add_argument("--board-file", type=Path, metavar="FILE", help="JSON or one-row-per-line board file")
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=settings.DICTIONARY_PATH,
        help="Word list with one word per line",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=settings.MIN_WORD_LENGTH,
        help="Ignore dictionary words shorter than this",
    )
    parser.add_argument(
        "--ranking",
        choices=[r.value for r in Ranking],
        default=settings.RANKING,
        help="alpha: dictionary order; score: highest Boggle score first",
    )
    parser.add_argument("--scores", action="store_true", help="Print each word's Boggle score")
    parser.add_argument("--limit", type=int, default=settings.MAX_RESULTS, help="Max words to print (0 = all)")
    parser.add_argument(
        "--log-level",
        type=str,
        default="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.rows and not args.board_file:
        parser.error("provide board rows or --board-file")
    if args.rows and args.board_file:
        parser.error("board rows cannot be combined with --board-file")
    try:
        ranking = Ranking(args.ranking)
    except ValueError:
        parser.error(f"unknown ranking {args.ranking!r}")

    level = getattr(logging, args.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        if args.board_file:
            board = read_board_file(args.board_file)
        else:
            board = [parse_row(row) for row in args.rows]
        validate_board(board)
        lexicon = LexiconProvider(args.dictionary, args.min_length).get()
        words = solve(board, lexicon, ranking=ranking, max_results=args.limit)
    except (WordGridError, OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1

    for word in words:
        if args.scores:
            print(f"{word}\t{score_word(word)}")
        else:
            print(word)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

#!/usr/bin/env python3
"""Build a Konane board and print the capture-jump destinations from one point as JSON."""

import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from konane import Board, Piece
from konane.validation import BoardDataError, validate_placement

DEFAULT_QUERY = (1, 2)


def load_config(path: Optional[str]) -> Dict:
    if not path:
        return {}
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    cfg = yaml.safe_load(cfg_path.read_text()) or {}
    if not isinstance(cfg, dict):
        raise BoardDataError(f"config {path} must be a mapping")
    return cfg


def build_board(cfg: Dict) -> Board:
    start = cfg.get("start", "default")
    if start == "default":
        board = Board.default()
    elif start == "empty":
        board = Board.create_empty()
    else:
        raise BoardDataError(f"unknown start layout {start!r}")
    for entry in cfg.get("placements") or []:
        validate_placement(entry)
        row, col, name = entry
        board.set(row, col, Piece.from_name(str(name)))
    return board


def run_query(board: Board, row: int, col: int) -> Dict[str, object]:
    piece = board.get(row, col)
    moves = board.possible_moves(row, col)
    return {
        "source": [row, col],
        "piece": piece.name if piece is not None else None,
        "moves": None if moves is None else [[r, c] for r, c in moves],
    }


def parse_placement(parser: argparse.ArgumentParser, value: str) -> Tuple[int, int, str]:
    parts = value.split(",")
    if len(parts) != 3:
        parser.error(f"--set expects ROW,COL,PIECE, got {value!r}")
    try:
        return int(parts[0]), int(parts[1]), parts[2]
    except ValueError:
        parser.error(f"--set row and col must be integers, got {value!r}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Query Konane capture moves from a board point.")
    parser.add_argument("--config", type=str, default=None, help="YAML file with start/placements/query")
    parser.add_argument("--start", choices=["default", "empty"])
    parser.add_argument("--set", dest="placements", action="append", default=[], metavar="ROW,COL,PIECE")
    parser.add_argument("--row", type=int)
    parser.add_argument("--col", type=int)
    parser.add_argument("--all", action="store_true", help="List moves for every occupied point")
    parser.add_argument("--show-board", action="store_true")
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    if args.start is not None:
        cfg["start"] = args.start
    extra = [parse_placement(parser, value) for value in args.placements]
    if extra:
        cfg["placements"] = list(cfg.get("placements") or []) + [list(entry) for entry in extra]
    board = build_board(cfg)

    query = cfg.get("query", DEFAULT_QUERY)
    row = args.row if args.row is not None else int(query[0])
    col = args.col if args.col is not None else int(query[1])

    output = run_query(board, row, col)
    if args.all:
        output["all_moves"] = {
            f"{r},{c}": [[tr, tc] for tr, tc in moves] for (r, c), moves in board.all_moves().items()
        }
    if args.show_board:
        output["board"] = board.render().splitlines()
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()

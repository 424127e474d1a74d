from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Any, Dict

import orjson

from symmetrica.engine.game import GameState, replay
from symmetrica.engine.notation import records_to_string, string_to_moves
from symmetrica.settings import RulesConfig


def summarize(state: GameState) -> Dict[str, Any]:
    size = state.config.board_size
    return {
        "board_size": size,
        "scores": {p.name.lower(): s for p, s in state.scores.items()},
        "to_move": state.current_player.name.lower(),
        "bonus_turn": state.bonus_turn_active,
        "game_over": state.game_over,
        "winner": state.winner.name.lower() if state.winner is not None else None,
        "moves": records_to_string(state.history, size),
        "board": state.board.to_rows(),
    }


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="symmetrica-replay")
    p.add_argument("moves", nargs="?", default=None, help="space separated moves, e.g. 'd5 e2-g8 f6:e5'")
    p.add_argument("--file", default=None, help="read moves from a text file instead")
    p.add_argument("--size", type=int, default=15)
    p.add_argument("--threshold", type=int, default=4)
    args = p.parse_args(argv)

    if args.file is None and args.moves is None:
        p.error("give a move list or --file")

    try:
        text = pathlib.Path(args.file).read_text(encoding="utf-8") if args.file else args.moves
        # pydantic ValidationError is a ValueError
        rules = RulesConfig(board_size=args.size, win_threshold=args.threshold)
        state = replay(string_to_moves(text, rules.board_size), rules)
    except (OSError, ValueError) as e:
        print(f"replay failed: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(orjson.dumps(summarize(state), option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

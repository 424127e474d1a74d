from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import Any, Dict, List, Optional, TextIO

from symmetrica.engine.board import BLACK, WHITE, Board
from symmetrica.engine.game import GameSession, GameState
from symmetrica.engine.notation import FILES, move_to_notation, notation_to_move, notation_to_position
from symmetrica.engine.shapes import shape_at
from symmetrica.engine.symmetry import is_symmetric
from symmetrica.logging_setup import setup_logging_from_config
from symmetrica.settings import RulesConfig, load_rules
from symmetrica.tools.diag import CONFIG_PATH, ensure_config, load_config, log_event

logger = logging.getLogger(__name__)

PLAYER_NAMES = {BLACK: "Black", WHITE: "White"}


def render_board(board: Board) -> str:
    n = board.size
    rows = board.to_rows()
    lines = ["    " + " ".join(FILES[:n])]
    # highest row on top, like a printed diagram
    for r in range(n - 1, -1, -1):
        lines.append(f"{r + 1:3d} " + " ".join(rows[r]))
    return "\n".join(lines)


def render_status(state: GameState) -> str:
    scores = ", ".join(f"{PLAYER_NAMES[p]}={state.score(p)}" for p in (BLACK, WHITE))
    if state.game_over:
        return f"Scores: {scores}. {PLAYER_NAMES[state.winner]} wins."
    bonus = " (bonus turn)" if state.bonus_turn_active else ""
    return f"Scores: {scores}. To move: {PLAYER_NAMES[state.current_player]}{bonus}"


def read_config(args: argparse.Namespace) -> Dict[str, Any]:
    if args.config is None:
        ensure_config()
        return load_config(CONFIG_PATH)
    return load_config(pathlib.Path(args.config))


def build_rules(cfg: Dict[str, Any], args: argparse.Namespace) -> RulesConfig:
    base = load_rules(cfg)
    overrides = {}
    if args.size is not None:
        overrides["board_size"] = args.size
    if args.threshold is not None:
        overrides["win_threshold"] = args.threshold
    if not overrides:
        return base
    return RulesConfig(**{**base.model_dump(), **overrides})


def describe_shape(state: GameState, cell: str, size: int) -> str:
    try:
        pos = notation_to_position(cell, size)
    except ValueError as e:
        return f"Input error: {e}"
    shape = shape_at(state.board, pos)
    if shape is None:
        return f"{cell.strip()} is empty."
    kind = "symmetric" if is_symmetric(shape.positions) else "not symmetric"
    return f"{PLAYER_NAMES[shape.color]} shape at {cell.strip()}: {shape.size} stone(s), {kind}."


def play(session: GameSession, inp: TextIO, out: TextIO) -> Optional[GameState]:
    """Run a hot-seat game reading one command per line from `inp`."""
    size = session.state.config.board_size
    while True:
        state = session.state
        print(render_board(state.board), file=out)
        print(render_status(state), file=out)
        if state.game_over:
            log_event("cli", "game_over", winner=state.winner.name, moves=len(state.history))
            return state
        print(f"{PLAYER_NAMES[state.current_player]} move: ", end="", file=out)
        line = inp.readline()
        if not line:
            return None
        text = line.strip()
        if not text:
            continue
        if text.lower() in ("q", "quit", "exit"):
            print("Game ended by player.", file=out)
            return None
        if text.lower().startswith("shape "):
            print(describe_shape(state, text[6:], size), file=out)
            continue
        if text.lower() == "undo":
            if session.can_undo():
                session.undo()
            else:
                print("Nothing to undo.", file=out)
            continue
        try:
            move, _ = notation_to_move(text, size)
        except ValueError as e:
            print("Input error:", e, file=out)
            continue
        outcome = session.play(move)
        if not outcome.ok:
            print("Illegal move:", outcome.error.value.replace("_", " "), file=out)
            continue
        record = outcome.state.history[-1]
        log_event("cli", "move", player=record.player.name, move=move_to_notation(move, record.points, size))
        if outcome.scoring is not None:
            log_event(
                "cli", "scored", player=record.player.name, points=outcome.scoring.points,
                shapes=[s.size for s in outcome.scoring.shapes], total=outcome.state.score(record.player),
            )
            print(
                f"{PLAYER_NAMES[record.player]} scores {outcome.scoring.points} "
                f"from {len(outcome.scoring.shapes)} shape(s).",
                file=out,
            )


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="symmetrica")
    p.add_argument("--size", type=int, default=None, help="board size (12-19)")
    p.add_argument("--threshold", type=int, default=None, help="points needed to win")
    p.add_argument("--config", default=None, help="path to a config.toml")
    args = p.parse_args(argv)

    try:
        cfg = read_config(args)
        rules = build_rules(cfg, args)
        setup_logging_from_config(cfg)
    except (OSError, ValueError) as e:
        p.error(f"bad configuration: {e}")
    logger.info("Starting game with %s", rules)

    print("Moves: d5 (drop), e2-g8 (jump), f6:e5 (push). 'shape d5' inspects, 'undo' steps back, 'quit' exits.")
    play(GameSession(rules), sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()

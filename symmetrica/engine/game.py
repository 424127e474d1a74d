"""Game state and the turn state machine.

Every transition builds a new GameState; old values stay valid, so history,
undo and replay need nothing beyond keeping them around.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ..settings import RulesConfig
from .board import Board, Occupant, BLACK, WHITE
from .errors import GameAlreadyOver, MoveError
from .moves import Move, apply_move, validate_move
from .scoring import ScoringResult, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AwaitingMove:
    player: Occupant


@dataclass(frozen=True)
class GameOver:
    winner: Occupant


Phase = Union[AwaitingMove, GameOver]


@dataclass(frozen=True)
class MoveRecord:
    player: Occupant
    move: Move
    points: int = 0


@dataclass(frozen=True)
class GameState:
    board: Board
    config: RulesConfig = field(default_factory=RulesConfig)
    current_player: Occupant = BLACK
    scores: Mapping[Occupant, int] = field(default_factory=lambda: {BLACK: 0, WHITE: 0})
    history: Tuple[MoveRecord, ...] = ()
    bonus_turn_active: bool = False
    game_over: bool = False
    winner: Optional[Occupant] = None

    def __post_init__(self) -> None:
        # each state owns a read-only copy; no two states share a scores dict
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return GameOver(self.winner)
        return AwaitingMove(self.current_player)

    def score(self, player: Occupant) -> int:
        return self.scores[player]


@dataclass(frozen=True)
class Accepted:
    state: GameState
    scoring: Optional[ScoringResult]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    move: Move
    player: Occupant
    error: MoveError

    @property
    def ok(self) -> bool:
        return False


MoveOutcome = Union[Accepted, Rejected]


def new_game(config: Optional[RulesConfig] = None) -> GameState:
    cfg = config or RulesConfig()
    return GameState(board=Board.empty(cfg.board_size), config=cfg)


def submit_move(state: GameState, move: Move) -> MoveOutcome:
    """Validate, apply and score one move for the player to move.

    Scoring runs once per accepted move. A score grants a bonus turn to the
    same player unless it reaches the win threshold.
    """
    if state.game_over:
        raise GameAlreadyOver(f"game already won by {state.winner.name}")
    player = state.current_player
    error = validate_move(state.board, player, move)
    if error is not None:
        logger.debug("rejected %s for %s: %s", move, player.name, error.value)
        return Rejected(move, player, error)

    board = apply_move(state.board, player, move)
    result = evaluate(board, player, state.config.min_shape_size)
    history = state.history + (MoveRecord(player, move, result.points),)

    if not result.scored:
        return Accepted(
            replace(state, board=board, current_player=player.opponent, history=history, bonus_turn_active=False),
            None,
        )

    board = board.clear(result.removed_stones)
    scores = dict(state.scores)
    scores[player] += result.points
    logger.info("%s scored %d (total %d)", player.name, result.points, scores[player])
    if scores[player] >= state.config.win_threshold:
        logger.info("%s wins with %d", player.name, scores[player])
        nxt = replace(
            state, board=board, scores=scores, history=history,
            bonus_turn_active=False, game_over=True, winner=player,
        )
    else:
        nxt = replace(state, board=board, scores=scores, history=history, bonus_turn_active=True)
    return Accepted(nxt, result)


def board_view(state: GameState) -> Tuple[Tuple[Occupant, ...], ...]:
    return state.board.view()


def is_game_over(state: GameState) -> bool:
    return state.game_over


def get_winner(state: GameState) -> Optional[Occupant]:
    return state.winner


def replay(moves: Iterable[Union[Move, MoveRecord]], config: Optional[RulesConfig] = None) -> GameState:
    """Rebuild a game from its move sequence."""
    state = new_game(config)
    for i, item in enumerate(moves):
        move = item.move if isinstance(item, MoveRecord) else item
        if state.game_over:
            raise ValueError(f"move {i + 1} ({move}) follows the end of the game")
        outcome = submit_move(state, move)
        if not outcome.ok:
            raise ValueError(f"move {i + 1} ({move}) rejected: {outcome.error.value}")
        state = outcome.state
    return state


class GameSession:
    """Holds the line of states of one game, with undo and redo."""

    def __init__(self, config: Optional[RulesConfig] = None) -> None:
        self.states: List[GameState] = [new_game(config)]
        self.cursor = 0

    @property
    def state(self) -> GameState:
        return self.states[self.cursor]

    def play(self, move: Move) -> MoveOutcome:
        outcome = submit_move(self.state, move)
        if outcome.ok:
            # a new move discards any redo branch
            del self.states[self.cursor + 1:]
            self.states.append(outcome.state)
            self.cursor += 1
        return outcome

    def can_undo(self) -> bool:
        return self.cursor > 0

    def can_redo(self) -> bool:
        return self.cursor < len(self.states) - 1

    def undo(self) -> GameState:
        if not self.can_undo():
            raise IndexError("nothing to undo")
        self.cursor -= 1
        return self.state

    def redo(self) -> GameState:
        if not self.can_redo():
            raise IndexError("nothing to redo")
        self.cursor += 1
        return self.state

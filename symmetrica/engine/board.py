from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from functools import lru_cache
from typing import Iterable, List, Sequence, Tuple

from .errors import InvalidPositionError
from .geometry import Position

MIN_SIZE = 12
MAX_SIZE = 19


class Occupant(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Occupant":
        if self is Occupant.BLACK:
            return Occupant.WHITE
        if self is Occupant.WHITE:
            return Occupant.BLACK
        raise ValueError("EMPTY has no opponent")


BLACK = Occupant.BLACK
WHITE = Occupant.WHITE
EMPTY = Occupant.EMPTY

_DIAGRAM = {".": EMPTY, "-": EMPTY, "B": BLACK, "X": BLACK, "W": WHITE, "O": WHITE}
_GLYPH = {EMPTY: ".", BLACK: "B", WHITE: "W"}


@lru_cache(maxsize=None)
def board_masks(size: int) -> Tuple[int, int, int]:
    """(full, not_first_col, not_last_col) masks for a size x size bitboard."""
    full = (1 << (size * size)) - 1
    first_col = 0
    for r in range(size):
        first_col |= 1 << (r * size)
    last_col = first_col << (size - 1)
    return full, full & ~first_col, full & ~last_col


def dilate(bb: int, size: int) -> int:
    """`bb` grown by one king step in every direction, without column wrap."""
    full, not_first, not_last = board_masks(size)
    # A shift towards higher columns must not land in column 0, and vice versa.
    east = (bb << 1) & not_first
    west = (bb >> 1) & not_last
    row = bb | east | west
    return (row | (row << size) | (row >> size)) & full


@dataclass(frozen=True)
class Board:
    size: int
    black: int = 0
    white: int = 0

    @classmethod
    def empty(cls, size: int) -> "Board":
        if size < MIN_SIZE or size > MAX_SIZE:
            raise ValueError(f"Board size must be between {MIN_SIZE} and {MAX_SIZE}")
        return cls(size)

    @classmethod
    def from_rows(cls, rows: Sequence[str], size: int | None = None) -> "Board":
        """Build a board from a text diagram, row 0 first.

        Rows may be shorter than the board; missing cells are empty.
        """
        widths = [len(r.replace(" ", "")) for r in rows]
        n = size if size is not None else max(MIN_SIZE, len(rows), *widths)
        board = cls.empty(n)
        black = white = 0
        for r, line in enumerate(rows):
            for c, ch in enumerate(line.replace(" ", "")):
                if ch not in _DIAGRAM:
                    raise ValueError(f"bad diagram glyph {ch!r} at {(r, c)}")
                if r >= n or c >= n:
                    raise InvalidPositionError((r, c), n)
                occ = _DIAGRAM[ch]
                if occ is BLACK:
                    black |= board._bit((r, c))
                elif occ is WHITE:
                    white |= board._bit((r, c))
        return replace(board, black=black, white=white)

    def is_on_board(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.size and 0 <= c < self.size

    def _bit(self, pos: Position) -> int:
        return 1 << (pos[0] * self.size + pos[1])

    def _check(self, pos: Position) -> None:
        if not self.is_on_board(pos):
            raise InvalidPositionError(pos, self.size)

    def get(self, pos: Position) -> Occupant:
        self._check(pos)
        bit = self._bit(pos)
        if self.black & bit:
            return BLACK
        if self.white & bit:
            return WHITE
        return EMPTY

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) is EMPTY

    def set(self, pos: Position, occupant: Occupant) -> "Board":
        """Return a new board with `pos` holding `occupant`."""
        occupant = Occupant(occupant)
        self._check(pos)
        bit = self._bit(pos)
        black = self.black & ~bit
        white = self.white & ~bit
        if occupant is BLACK:
            black |= bit
        elif occupant is WHITE:
            white |= bit
        return replace(self, black=black, white=white)

    def clear(self, positions: Iterable[Position]) -> "Board":
        mask = 0
        for pos in positions:
            self._check(pos)
            mask |= self._bit(pos)
        return replace(self, black=self.black & ~mask, white=self.white & ~mask)

    def stones(self, color: Occupant) -> int:
        if color is BLACK:
            return self.black
        if color is WHITE:
            return self.white
        full, _, _ = board_masks(self.size)
        return full & ~(self.black | self.white)

    def count(self, color: Occupant) -> int:
        return self.stones(color).bit_count()

    def positions_of(self, bb: int) -> List[Position]:
        out = []
        while bb:
            lsb = bb & -bb
            i = lsb.bit_length() - 1
            out.append(divmod(i, self.size))
            bb ^= lsb
        return out

    def positions(self, color: Occupant) -> List[Position]:
        return self.positions_of(self.stones(color))

    def view(self) -> Tuple[Tuple[Occupant, ...], ...]:
        """Read-only snapshot of the grid, row 0 first."""
        return tuple(
            tuple(self.get((r, c)) for c in range(self.size)) for r in range(self.size)
        )

    def to_rows(self) -> List[str]:
        return ["".join(_GLYPH[occ] for occ in row) for row in self.view()]

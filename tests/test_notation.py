"""
Tests for the move notation.
"""

import pytest

from symmetrica.engine.board import BLACK, WHITE
from symmetrica.engine.game import MoveRecord
from symmetrica.engine.moves import Drop, Jump, Push
from symmetrica.engine.notation import (
    is_valid_notation,
    move_to_notation,
    notation_to_move,
    notation_to_position,
    position_to_notation,
    records_to_string,
    string_to_moves,
)


class TestCells:
    def test_position_to_notation(self):
        assert position_to_notation((0, 0)) == "a1"
        assert position_to_notation((4, 3)) == "d5"
        assert position_to_notation((18, 18)) == "s19"
        assert position_to_notation((11, 0), size=12) == "a12"

    def test_notation_to_position(self):
        assert notation_to_position("a1") == (0, 0)
        assert notation_to_position("d5") == (4, 3)
        assert notation_to_position("D5") == (4, 3)
        assert notation_to_position("l12", size=12) == (11, 11)

    def test_invalid(self):
        with pytest.raises(ValueError):
            position_to_notation((12, 0), size=12)
        for bad in ("t1", "a0", "a20", "5d", "", "a"):
            with pytest.raises(ValueError):
                notation_to_position(bad)
        with pytest.raises(ValueError):
            notation_to_position("m1", size=12)


class TestMoves:
    def test_examples(self):
        assert notation_to_move("d5") == (Drop((4, 3)), 0)
        assert notation_to_move("e2-g8") == (Jump((1, 4), (7, 6)), 0)
        assert notation_to_move("f6:e5") == (Push((5, 5), (4, 4)), 0)
        assert notation_to_move("d5(2)") == (Drop((4, 3)), 2)
        assert notation_to_move(" j10-j11(1) ") == (Jump((9, 9), (10, 9)), 1)

    def test_move_to_notation(self):
        assert move_to_notation(Drop((4, 3))) == "d5"
        assert move_to_notation(Jump((1, 4), (7, 6))) == "e2-g8"
        assert move_to_notation(Push((5, 5), (4, 4)), points=3) == "f6:e5(3)"

    def test_bad_moves(self):
        for bad in ("d5-", "d5:", "d5(x)", "d5--e6", "pass"):
            with pytest.raises(ValueError):
                notation_to_move(bad)
        with pytest.raises(ValueError):
            move_to_notation("d5")


def test_records_and_move_lists():
    records = [
        MoveRecord(BLACK, Drop((4, 3))),
        MoveRecord(WHITE, Push((4, 3), (5, 3)), 0),
        MoveRecord(BLACK, Jump((0, 0), (1, 1)), 2),
    ]
    text = records_to_string(records)
    assert text == "d5 d5:d6 a1-b2(2)"
    assert string_to_moves(text) == [r.move for r in records]
    assert string_to_moves("") == []


def test_is_valid_notation():
    assert is_valid_notation("")
    assert is_valid_notation("d5 e2-g8 f6:e5(1)")
    assert not is_valid_notation("d5 zz")
    assert not is_valid_notation("m1", size=12)

"""Tests for Position and Direction."""

import pytest

from kingfall.core.position import Direction, Position, is_straight_line


class TestPosition:
    def test_value_equality(self) -> None:
        assert Position(3, 4) == Position(3, 4)
        assert Position(3, 4) != Position(4, 3)
        assert hash(Position(3, 4)) == hash(Position(3, 4))

    def test_translate(self) -> None:
        assert Position(3, 4).translate(Direction(-1, 1)) == Position(2, 5)

    def test_no_bounds_validation(self) -> None:
        assert Position(-1, 9).translate(Direction(1, -1)) == Position(0, 8)

    def test_str_is_one_based(self) -> None:
        assert str(Position(0, 7)) == "(1, 8)"

    def test_immutable(self) -> None:
        pos = Position(1, 1)
        with pytest.raises(AttributeError):
            pos.row = 2  # type: ignore[misc]


class TestDirection:
    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            (Position(0, 4), Direction(-1, 0)),
            (Position(7, 4), Direction(1, 0)),
            (Position(4, 0), Direction(0, -1)),
            (Position(4, 7), Direction(0, 1)),
            (Position(1, 1), Direction(-1, -1)),
            (Position(6, 2), Direction(1, -1)),
            (Position(4, 4), Direction(0, 0)),
        ],
    )
    def test_between_is_capped_unit_step(
        self, target: Position, expected: Direction
    ) -> None:
        assert Direction.between(Position(4, 4), target) == expected

    def test_walk_reaches_target(self) -> None:
        origin, target = Position(7, 0), Position(2, 5)
        direction = Direction.between(origin, target)
        current = origin
        for _ in range(5):
            current = current.translate(direction)
        assert current == target


class TestStraightLine:
    def test_aligned(self) -> None:
        assert is_straight_line(Position(0, 0), Position(0, 7))
        assert is_straight_line(Position(0, 0), Position(7, 0))
        assert is_straight_line(Position(0, 0), Position(7, 7))
        assert is_straight_line(Position(0, 7), Position(7, 0))

    def test_not_aligned(self) -> None:
        assert not is_straight_line(Position(0, 0), Position(1, 2))
        assert not is_straight_line(Position(4, 4), Position(7, 5))

"""Tests for the Snek module."""

import pytest

from snekhaus.geometry import Direction, Pos, Size
from snekhaus.snek import Snek

SIZE = Size(10, 10)


class TestSnekCreate:
    def test_odd_length(self):
        snek = Snek.create(SIZE, 3)
        assert snek.head == (6, 5)
        assert list(snek.body) == [(3, 5), (4, 5), (5, 5)]
        assert snek.direction == Direction.EAST
        assert snek.pending_growth == 0

    def test_even_length(self):
        snek = Snek.create(SIZE, 4)
        assert snek.head == (7, 5)
        assert list(snek.body) == [(3, 5), (4, 5), (5, 5), (6, 5)]

    def test_length_counts_head(self):
        assert Snek.create(SIZE, 3).length == 4

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snek.create(SIZE, 0)

    def test_too_wide(self):
        with pytest.raises(ValueError, match="does not fit"):
            Snek.create(Size(4, 4), 4)

    def test_body_never_contains_head(self):
        snek = Snek.create(SIZE, 5)
        assert snek.head not in snek.body


class TestSnekDirection:
    def test_turn(self):
        snek = Snek.create(SIZE, 3)
        assert snek.change_direction(Direction.NORTH)
        assert snek.direction == Direction.NORTH

    def test_ignore_same_direction(self):
        snek = Snek.create(SIZE, 3)
        assert not snek.change_direction(Direction.EAST)
        assert snek.direction == Direction.EAST

    def test_ignore_reversal(self):
        snek = Snek.create(SIZE, 3)
        assert not snek.change_direction(Direction.WEST)
        assert snek.direction == Direction.EAST

    def test_ignore_reversal_vertical(self):
        snek = Snek((5, 5), direction=Direction.NORTH)
        snek.change_direction(Direction.SOUTH)
        assert snek.direction == Direction.NORTH


class TestSnekMovement:
    def test_advance_without_growth(self):
        snek = Snek.create(SIZE, 3)
        old_head = snek.head
        old_body = list(snek.body)
        vacated = snek.advance(SIZE)
        assert snek.head == (7, 5)
        assert snek.body[-1] == old_head
        assert list(snek.body) == old_body[1:] + [old_head]
        assert vacated == old_body[0]
        assert len(snek.body) == 3

    def test_advance_with_growth(self):
        snek = Snek.create(SIZE, 3)
        snek.grow(2)
        assert snek.advance(SIZE) is None
        assert len(snek.body) == 4
        assert snek.pending_growth == 1
        snek.advance(SIZE)
        assert len(snek.body) == 5
        assert snek.pending_growth == 0
        assert snek.advance(SIZE) is not None
        assert len(snek.body) == 5

    def test_advance_wraps(self):
        snek = Snek((9, 5), body=[(8, 5)])
        snek.advance(SIZE)
        assert snek.head == (0, 5)
        assert list(snek.body) == [(9, 5)]

    def test_next_head_does_not_move(self):
        snek = Snek.create(SIZE, 3)
        assert snek.next_head(SIZE) == (7, 5)
        assert snek.head == (6, 5)

    def test_growth_stacks(self):
        snek = Snek((5, 5), direction=Direction.NORTH)
        snek.grow(3)
        snek.grow(2)
        assert snek.pending_growth == 5

    def test_negative_growth_rejected(self):
        with pytest.raises(ValueError):
            Snek((5, 5)).grow(-1)


class TestSnekCollision:
    def _snek(self):
        return Snek(
            (5, 5),
            body=[(5, 6), (5, 7), (6, 7)],
            direction=Direction.NORTH,
        )

    def test_collides_with_body(self):
        snek = self._snek()
        assert snek.collides_with_body((5, 6))
        assert snek.collides_with_body((6, 7))
        assert not snek.collides_with_body((5, 5))
        assert not snek.collides_with_body((4, 6))

    def test_collides_with_head(self):
        snek = self._snek()
        assert snek.collides_with_head((5, 5))
        assert not snek.collides_with_head((5, 6))

    def test_occupies(self):
        snek = self._snek()
        assert snek.occupies((5, 5))
        assert snek.occupies(Pos(6, 7))
        assert not snek.occupies((0, 0))

    def test_self_collision(self):
        snek = Snek.create(SIZE, 3)
        assert not snek.self_collision()
        snek.body.append(snek.head)
        assert snek.self_collision()


class TestSnekSerialization:
    def test_to_dict(self):
        snek = Snek.create(SIZE, 2)
        d = snek.to_dict()
        assert d["head"] == [6, 5]
        assert d["body"] == [[4, 5], [5, 5]]
        assert d["direction"] == "east"
        assert d["pending_growth"] == 0

"""Tests for direction and rotation arithmetic."""

import pytest

from convert import I8, U8, ConversionError
from dirns import displace, displacement, facing_of, reverse, turn
from grid_types import DIRNS, FACINGS, Direction, Rotation

UP, LEFT, DOWN, RIGHT = Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT
CCW, CW = Rotation.CCW, Rotation.CW


class TestDisplacement:
    """Tests for direction displacements."""

    def test_unit_displacements(self) -> None:
        assert displacement(UP) == (-1, 0)
        assert displacement(LEFT) == (0, -1)
        assert displacement(DOWN) == (1, 0)
        assert displacement(RIGHT) == (0, 1)

    def test_facing_order_matches_displacements(self) -> None:
        assert FACINGS == (UP, LEFT, DOWN, RIGHT)
        assert tuple(displacement(d) for d in FACINGS) == DIRNS

    def test_displacement_narrowed(self) -> None:
        assert displacement(DOWN, kind=I8) == (1, 0)

    def test_negative_displacement_unsigned_fails(self) -> None:
        with pytest.raises(ConversionError):
            displacement(UP, kind=U8)

    def test_facing_of_inverts_displacement(self) -> None:
        for d in FACINGS:
            assert facing_of(displacement(d)) == d

    def test_facing_of_rejects_non_unit(self) -> None:
        with pytest.raises(ValueError, match="Not a unit displacement"):
            facing_of((1, 1))
        with pytest.raises(ValueError):
            facing_of((0, 0))


class TestDisplace:
    """Tests for moving points along a direction."""

    def test_displace_one_step(self) -> None:
        assert displace(RIGHT, (2, 3), 1) == (2, 4)
        assert displace(UP, (2, 3), 1) == (1, 3)

    def test_displace_many_steps(self) -> None:
        assert displace(DOWN, (0, 0), 10) == (10, 0)
        assert displace(LEFT, (5, 5), 5) == (5, 0)

    def test_displace_negative_distance(self) -> None:
        assert displace(RIGHT, (2, 3), -2) == (2, 1)

    def test_displace_zero_is_identity(self) -> None:
        assert displace(UP, (4, 4), 0) == (4, 4)

    def test_displace_does_not_clip(self) -> None:
        assert displace(UP, (0, 0), 3) == (-3, 0)

    def test_displace_result_must_fit_kind(self) -> None:
        assert displace(DOWN, (250, 0), 5, kind=U8) == (255, 0)
        with pytest.raises(ConversionError):
            displace(DOWN, (250, 0), 6, kind=U8)
        with pytest.raises(ConversionError):
            displace(UP, (0, 0), 1, kind=U8)


class TestTurn:
    """Tests for quarter-turn rotation."""

    def test_single_turns(self) -> None:
        assert turn(UP, CCW, 1) == LEFT
        assert turn(UP, CW, 1) == RIGHT
        assert turn(LEFT, CCW, 1) == DOWN
        assert turn(RIGHT, CW, 1) == DOWN

    def test_negative_multiples_of_four(self) -> None:
        assert turn(RIGHT, CW, -8) == RIGHT
        assert turn(RIGHT, CCW, -8) == RIGHT

    def test_negative_turns(self) -> None:
        assert turn(RIGHT, CW, -9) == UP
        assert turn(RIGHT, CCW, -9) == DOWN

    def test_full_cycle_ccw(self) -> None:
        """Counter-clockwise walks the facings in order."""
        d = UP
        seen = []
        for _ in range(4):
            seen.append(d)
            d = turn(d, CCW, 1)
        assert seen == [UP, LEFT, DOWN, RIGHT]
        assert d == UP

    def test_zero_is_identity(self) -> None:
        for d in FACINGS:
            for r in Rotation:
                assert turn(d, r, 0) == d

    @pytest.mark.parametrize("k", range(-13, 14))
    def test_inverse_law(self, k: int) -> None:
        """Turning k one way then k the other returns to the start."""
        for d in FACINGS:
            assert turn(turn(d, CCW, k), CW, k) == d
            assert turn(turn(d, CW, k), CCW, k) == d

    @pytest.mark.parametrize("k", range(-13, 14))
    def test_count_is_modular(self, k: int) -> None:
        for d in FACINGS:
            for r in Rotation:
                assert turn(d, r, k) == turn(d, r, k % 4)

    @pytest.mark.parametrize("n", range(0, 14))
    def test_negative_clockwise_is_counter_clockwise(self, n: int) -> None:
        for d in FACINGS:
            assert turn(d, CW, -n) == turn(d, CCW, n)

    def test_huge_counts(self) -> None:
        assert turn(UP, CCW, 2**62 + 1) == LEFT
        assert turn(UP, CW, -(2**62) - 1) == LEFT

    def test_count_outside_i64_fails(self) -> None:
        with pytest.raises(ConversionError):
            turn(UP, CW, 2**63)

    def test_reverse(self) -> None:
        assert reverse(UP) == DOWN
        assert reverse(LEFT) == RIGHT
        assert reverse(DOWN) == UP
        assert reverse(RIGHT) == LEFT

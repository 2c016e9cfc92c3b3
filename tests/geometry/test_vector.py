import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from fibspiral.geometry.vector import Vector2, add, scale, sub

_coordinates = st.floats(
    min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False
)
_vectors = st.builds(Vector2, _coordinates, _coordinates)


class TestVector2Arithmetic:
    """Cover the value semantics every geometry builder relies on."""

    @given(a=_vectors, b=_vectors)
    def test_sub_undoes_add(self, a: Vector2, b: Vector2) -> None:
        """Adding then subtracting the same vector returns the original within tolerance."""
        result = sub(add(a, b), b)

        assert result.x == pytest.approx(a.x, abs=1e-6)
        assert result.y == pytest.approx(a.y, abs=1e-6)

    def test_operators_match_functions(self) -> None:
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, 4.0)

        assert a + b == add(a, b) == Vector2(4.0, 6.0)
        assert a - b == sub(a, b) == Vector2(-2.0, -2.0)
        assert a * 3.0 == scale(a, 3.0) == Vector2(3.0, 6.0)
        assert 3.0 * a == Vector2(3.0, 6.0)
        assert -a == Vector2(-1.0, -2.0)

    def test_operations_return_new_values(self) -> None:
        """Vectors are immutable; arithmetic never touches the operands."""
        a = Vector2(1.0, -1.0)
        b = a + (2.0, 4.0)

        assert a == Vector2(1.0, -1.0)
        assert b == Vector2(3.0, 3.0)
        with pytest.raises(AttributeError):
            a.x = 5.0  # type: ignore[misc]


class TestVector2Conversion:
    @pytest.mark.parametrize(
        "value",
        [(7.0, -2.0), [7.0, -2.0], np.array([7.0, -2.0]), Vector2(7.0, -2.0)],
        ids=["tuple", "list", "array", "vector"],
    )
    def test_from_value_matches_direct_construction(self, value) -> None:
        assert Vector2.from_value(value) == Vector2(7.0, -2.0)

    @pytest.mark.parametrize("value", [(1.0,), (1.0, 2.0, 3.0), []])
    def test_from_value_rejects_wrong_arity(self, value) -> None:
        with pytest.raises(ValueError, match="two components"):
            Vector2.from_value(value)

    def test_tuple_operand_on_the_left(self) -> None:
        assert (1.0, 5.0) + Vector2(1.0, -2.0) == Vector2(2.0, 3.0)
        assert (1.0, 5.0) - Vector2(1.0, -2.0) == Vector2(0.0, 7.0)

    def test_unpacks_like_a_point(self) -> None:
        x, y = Vector2(4.0, 2.0)

        assert (x, y) == (4.0, 2.0)
        assert Vector2(4.0, 2.0).to_tuple() == (4.0, 2.0)


class TestVector2Rotation:
    def test_quarter_turn(self) -> None:
        rotated = Vector2(1.0, 0.0).rotate(math.pi / 2)

        assert rotated.is_close(Vector2(0.0, 1.0))

    @given(theta=st.floats(min_value=-10, max_value=10))
    def test_rotation_preserves_length(self, theta: float) -> None:
        v = Vector2(3.0, 4.0)

        assert math.hypot(*v.rotate(theta)) == pytest.approx(5.0)

    def test_lerp_endpoints(self) -> None:
        a = Vector2(0.0, 0.0)
        b = Vector2(10.0, -4.0)

        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b
        assert a.lerp(b, 0.5) == Vector2(5.0, -2.0)

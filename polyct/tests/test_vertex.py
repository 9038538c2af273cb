"""Tests for the coordinate Vertex and the lift transform."""
import numpy

from polyct._vertex import Vertex, lift


class TestVertex:
    """Tests for Vertex construction and promotion."""

    def test_trivial_vertex(self):
        """The default vertex has no coordinates."""
        v = Vertex()
        assert v.dimension == 0
        assert v.x == ()
        assert v.x_a.shape == (0,)

    def test_new_vertex(self):
        v = Vertex([1.0, 2.0, 3.0])
        assert v.dimension == 3
        assert v.x == (1.0, 2.0, 3.0)
        numpy.testing.assert_array_equal(v.x_a, [1.0, 2.0, 3.0])

    def test_promote_appends_coordinate(self):
        v = Vertex((1.0,)).promote(-2.0)
        assert v.x == (1.0, -2.0)
        assert v.dimension == 2

    def test_promote_leaves_original(self):
        v = Vertex((1.0,))
        v.promote(5.0)
        assert v.x == (1.0,)

    def test_equality_and_hash(self):
        """Vertices with equal coordinates are interchangeable as keys."""
        a = Vertex((0.0, 1.0))
        b = Vertex([0.0, 1.0])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
        assert a != Vertex((1.0, 0.0))

    def test_not_equal_to_tuple(self):
        assert Vertex((1.0,)) != (1.0,)

    def test_repr(self):
        assert repr(Vertex((1.0,))) == "Vertex((1.0,))"


class TestLift:
    """Tests for lift(h)."""

    def test_lift_promotes(self):
        f = lift(3.0)
        assert f(Vertex((1.0, 2.0))).x == (1.0, 2.0, 3.0)

    def test_lift_is_reusable(self):
        f = lift(0.0)
        assert f(Vertex()).x == (0.0,)
        assert f(Vertex((1.0,))).x == (1.0, 0.0)

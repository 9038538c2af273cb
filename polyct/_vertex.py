import numpy


"""Vertex objects"""
class Vertex:
    """Vertex carrying the coordinates of a polytope embedded in R^n, where n
    grows by one with every extrusion or cone that promotes it"""
    def __init__(self, x=()):
        """
        :param x: tuple, vector of vertex coordinates (empty for the vertex
                  of a point)
        """
        self.x = tuple(x)
        self.x_a = numpy.array(self.x, dtype=float)  # Array version of the hashed tuple

    def __hash__(self):
        return hash(self.x)

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.x == other.x

    def __repr__(self):
        return "Vertex({})".format(self.x)

    @property
    def dimension(self):
        return len(self.x)

    def promote(self, h):
        """Copy of the vertex lifted into the next dimension at height h"""
        return Vertex(self.x + (h,))


def lift(h):
    """
    Transform for `Polytope.extrude` and `Polytope.cone` promoting every
    vertex to height h in the new dimension.

    ex. P.extrude(lift(-1.0), lift(1.0))
    """
    def transform(v):
        return v.promote(h)
    return transform

"""
Builders for common polytopes with `Vertex` coordinates.

The bounds of a shape are given the same way as the domain of a hyperct
complex: a list of (lower, upper) tuples, one per dimension, defaulting to the
unit hyperrectangle [0, 1]^dim.
"""
from polyct._polytope import Polytope
from polyct._vertex import Vertex, lift


def _bounds(dim, domain):
    if domain is None:
        return [(0, 1), ] * dim
    if len(domain) != dim:
        raise ValueError("domain has {} bounds, expected one per dimension "
                         "({})".format(len(domain), dim))
    return list(domain)


def point(vertex=None):
    """The 0-dimensional polytope, by default on the trivial vertex"""
    if vertex is None:
        vertex = Vertex()
    return Polytope(vertex)


def hypercube(dim, domain=None):
    """
    Generate the n dimensional hyperrectangle [x_l, x_u]^dim containing
    2**dim vertices by repeated extrusion of a point.

    :param dim: int, dimension of the hypercube, dim >= 0
    :param domain: list of tuples, optional, the bounds [(x_l, x_u), ...]
    :return: Polytope with Vertex coordinates
    """
    if dim < 0:
        raise ValueError("dim must be non-negative, got {}".format(dim))
    P = point()
    for lb, ub in _bounds(dim, domain):
        P = P.extrude(lift(lb), lift(ub))
    return P


def bipyramid(dim, domain=None):
    """
    Generate a double pyramid in dim dimensions: a hyperrectangle over the
    first dim - 1 bounds coned over the last bound, with the apex at the
    centre of the domain.

    ex. bipyramid(3) is two square pyramids sharing their apex (0.5, 0.5, 0.5)

    :param dim: int, dimension of the bipyramid, dim >= 1
    :param domain: list of tuples, optional, the bounds [(x_l, x_u), ...]
    :return: Polytope with Vertex coordinates, the apex is the last vertex
    """
    if dim < 1:
        raise ValueError("dim must be at least 1, got {}".format(dim))
    bounds = _bounds(dim, domain)
    base = hypercube(dim - 1, bounds[:-1])
    apex = Vertex([(lb + ub) / 2.0 for lb, ub in bounds])
    lb, ub = bounds[-1]
    return base.cone(apex, lift(lb), lift(ub))

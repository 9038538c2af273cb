from polyct._polytope import Polytope
from polyct._vertex import Vertex, lift
from polyct._shapes import point, hypercube, bipyramid

__all__ = ['Polytope', 'Vertex', 'lift', 'point', 'hypercube', 'bipyramid']

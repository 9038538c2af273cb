"""
Incidence complex representation of polytopes of arbitrary dimension.

A polytope is stored as a list of vertices together with, for every dimension
k, a list of elements. An element is the tuple of indices of its bounding
elements one dimension lower (vertices for k = 0), ex. an edge bounded by the
4th and 5th vertices is (4, 5) and a square face bounded by the first four
edges is (0, 1, 2, 3).

Vertices are never inspected by this module, they are caller supplied values
(coordinates, labels, etc.) which are only ever passed through the transform
functions handed to `Polytope.extrude` and `Polytope.cone`.

Important methods:
    Construction:
        Polytope(vertex), Polytope.extrude, Polytope.cone
    Queries:
        Polytope.dimension, Polytope.vertices, Polytope.elements,
        Polytope.f_vector, Polytope.euler_characteristic,
        Polytope.incidence_matrix
"""
# Std. Library
import logging
# Required modules:
import numpy


class Polytope:
    def __init__(self, vertex):
        """
        The 0-dimensional polytope (a point) with a single vertex and no
        elements. Higher dimensional polytopes are built from this using
        `extrude` and `cone`.

        :param vertex: object, the value attached to the only vertex
        """
        self._vertices = (vertex,)
        self._elements = ()

    @classmethod
    def _from_lists(cls, vertices, elements):
        """Freeze the working lists of a construction into a new polytope"""
        P = cls.__new__(cls)
        P._vertices = tuple(vertices)
        P._elements = tuple(tuple(elems) for elems in elements)
        return P

    def __repr__(self):
        return "{}(dimension={}, f_vector={})".format(
            type(self).__name__, self.dimension(), self.f_vector().tolist())

    # %% Accessors
    def dimension(self):
        """Dimension of the polytope, the number of element dimensions"""
        return len(self._elements)

    def vertices(self):
        return self._vertices

    def elements(self, d):
        """
        Return the elements of dimension d (d = 0 are the edges, d = 1 the
        faces etc.).

        :param d: int, element dimension, 0 <= d < self.dimension()
        :return: tuple of elements, every element a tuple of indices into
                 the elements of dimension d - 1 (the vertices for d = 0)
        """
        if not 0 <= d < len(self._elements):
            raise IndexError("No elements of dimension {} in a polytope of "
                             "dimension {}".format(d, len(self._elements)))
        return self._elements[d]

    # %% Construction
    def _replicate_vertices(self, pull_in, push_out):
        vertices = []
        for v in self._vertices:
            vertices.append(pull_in(v))
            vertices.append(push_out(v))
        return vertices

    def _replicate_elements(self):
        # Replicas of element j land at 2*j and 2*j + 1 so that the bounds
        # of the next dimension up can be relabelled the same way vertices are
        elements = []
        for elems in self._elements:
            new_elems = []
            for e in elems:
                new_elems.append(tuple(2 * b for b in e))
                new_elems.append(tuple(2 * b + 1 for b in e))
            elements.append(new_elems)
        return elements

    def extrude(self, pull_in, push_out):
        """
        Extrude the polytope into the next dimension (a prism).

        Two replicas of the polytope are created by applying the functions
        pull_in and push_out to every vertex. Every entity of the original
        is then linked to its own replica with an element one dimension
        higher (vertices via edges, edges via faces etc.). Iterated
        extrusion of a point gives segments, rectangles, hypercubes.

        :param pull_in: function, v -> v' applied to build the first replica
        :param push_out: function, v -> v' applied to build the second replica
        :return: Polytope, new polytope of dimension self.dimension() + 1
        """
        vertices = self._replicate_vertices(pull_in, push_out)
        elements = self._replicate_elements()
        elements.append([])  # The new top dimension

        # Link the replicas of every vertex with an edge
        offset = len(elements[0])
        elements[0].extend((2 * i, 2 * i + 1)
                           for i in range(len(self._vertices)))

        # An element's link is bounded by the links of its own bounds
        # together with its two replicas
        for d, elems in enumerate(self._elements):
            links = [tuple(offset + b for b in e) + (2 * i, 2 * i + 1)
                     for i, e in enumerate(elems)]
            offset = len(elements[d + 1])
            elements[d + 1].extend(links)

        P = Polytope._from_lists(vertices, elements)
        logging.debug("Extruded polytope to dimension {} with f-vector "
                      "{}".format(P.dimension(), P.f_vector().tolist()))
        return P

    def cone(self, apex, pull_in, push_out):
        """
        Construct a double cone (a bipyramid) over the polytope in the next
        dimension.

        Two replicas of the polytope are created by applying the functions
        pull_in and push_out to every vertex. Each replica is then joined
        to the apex independently: every replicated entity is linked to the
        apex with an element one dimension higher.

        :param apex: object, the value attached to the new apex vertex, which
                     is always the last vertex of the result
        :param pull_in: function, v -> v' applied to build the first replica
        :param push_out: function, v -> v' applied to build the second replica
        :return: Polytope, new polytope of dimension self.dimension() + 1
        """
        vertices = self._replicate_vertices(pull_in, push_out)
        elements = self._replicate_elements()
        elements.append([])  # The new top dimension

        apex_index = len(vertices)
        vertices.append(apex)

        # Join every replicated vertex to the apex with an edge
        offset = len(elements[0])
        for i in range(len(self._vertices)):
            elements[0].append((2 * i, apex_index))
            elements[0].append((2 * i + 1, apex_index))

        # Each replica keeps to the links of its own lineage, so the two
        # cones only meet at the apex
        for d, elems in enumerate(self._elements):
            links = []
            for i, e in enumerate(elems):
                links.append(tuple(offset + 2 * b for b in e) + (2 * i,))
                links.append(tuple(offset + 2 * b + 1 for b in e)
                             + (2 * i + 1,))
            offset = len(elements[d + 1])
            elements[d + 1].extend(links)

        P = Polytope._from_lists(vertices, elements)
        logging.debug("Coned polytope to dimension {} with f-vector "
                      "{}".format(P.dimension(), P.f_vector().tolist()))
        return P

    # %% Combinatorial queries
    def f_vector(self):
        """
        Number of entities per dimension, ex. (8, 12, 6, 1) for a cube.

        :return: ndarray of shape (dimension + 1,), the vertex count followed
                 by the element count of every dimension
        """
        counts = [len(self._vertices)]
        counts.extend(len(elems) for elems in self._elements)
        return numpy.array(counts, dtype=int)

    def euler_characteristic(self):
        """Alternating sum of the f-vector"""
        f = self.f_vector()
        signs = (-1) ** numpy.arange(f.shape[0])
        return int(numpy.dot(signs, f))

    def incidence_matrix(self, d):
        """
        Incidence matrix between the elements of dimension d and their
        bounding entities.

        :param d: int, element dimension, 0 <= d < self.dimension()
        :return: ndarray of shape (len(elements(d)), n_lower) where n_lower is
                 the number of vertices for d = 0 and len(elements(d - 1))
                 otherwise. Entry [j, b] is 1 if element j is bounded by b.
        """
        elems = self.elements(d)
        if d == 0:
            n_lower = len(self._vertices)
        else:
            n_lower = len(self._elements[d - 1])

        M = numpy.zeros((len(elems), n_lower), dtype=numpy.int8)
        for j, e in enumerate(elems):
            M[j, list(e)] = 1
        return M

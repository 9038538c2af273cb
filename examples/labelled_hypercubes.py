"""
Hypercubes with string labelled vertices and their incidence matrices.

Vertices need not be coordinates: here every vertex is a string recording
which side of each extrusion it was pulled to.
"""
from polyct import Polytope, hypercube

P = Polytope("")
for d in range(1, 5):
    P = P.extrude(lambda x: x + "-", lambda x: x + "+")
    print(f"{d}-cube f-vector: {P.f_vector().tolist()}")

print(f"\nVertices of the 4-cube: {' '.join(P.vertices())}")

# Edge/vertex incidence of the unit square
H = hypercube(2)
print("\nSquare edge-vertex incidence:")
print(H.incidence_matrix(0))

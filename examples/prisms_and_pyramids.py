"""
Build a square from a point, then extend it independently into a cube and a
double pyramid.

Demonstrates chaining extrude/cone with coordinate vertices and inspecting the
resulting incidence complex.
"""
from polyct import Polytope, Vertex, lift

# --- Point -> segment -> square ---
P = Polytope(Vertex())
segment = P.extrude(lift(-1.0), lift(1.0))
square = segment.extrude(lift(-1.0), lift(1.0))
print(f"Square: {square}")
for i, e in enumerate(square.elements(0)):
    print(f"  edge {i}: {[square.vertices()[b].x for b in e]}")

# --- The same square yields a cube and a bipyramid ---
cube = square.extrude(lift(-1.0), lift(1.0))
print(f"\nCube: {cube}")
print(f"  Euler characteristic: {cube.euler_characteristic()}")

pyramids = square.cone(Vertex((0.0, 0.0, 0.0)), lift(-1.0), lift(1.0))
print(f"\nDouble pyramid: {pyramids}")
print(f"  apex: {pyramids.vertices()[-1]}")
faces = pyramids.elements(1)
for c, cell in enumerate(pyramids.elements(2)):
    print(f"  cell {c} face sizes: {[len(faces[f]) for f in cell]}")

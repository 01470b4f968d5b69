# examples/circle_pair.py
from conic_geom import Conic, intersect_conic_matrices

a = Conic.circle(center=(0.0, 0.0), radius=1.0)
b = Conic.circle(center=(1.0, 0.0), radius=1.0)

result = intersect_conic_matrices(a, b)

for p in result.distinct_points():
    print("point:", p, "residuals:", a.evaluate(*p), b.evaluate(*p))
print("pencil members:", len(result.degenerate_conic_matrices))

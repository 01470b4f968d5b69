# examples/ellipse_pair.py
import numpy as np

from conic_geom import Conic, intersect_conic_matrices
from conic_geom.profiler import Profiler

a = Conic.ellipse(center=(0.0, 0.0), radius_x=2.0, radius_y=1.0, rotation=np.pi / 4)
b = Conic.ellipse(center=(0.0, 0.0), radius_x=2.0, radius_y=1.0, rotation=-np.pi / 4)

prof = Profiler()
result = intersect_conic_matrices(a, b, profiler=prof)

for p in result.distinct_points(1e-6):
    print("point:", p)
for name, stats in prof.stats.summary().items():
    print(f"{name:>10s}: {stats['mean_us']:.1f} us")

# examples/tangent_circles.py
import logging

from conic_geom import Conic, RealRay, intersect_conic_matrices

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

a = Conic.circle((0.0, 0.0), 1.0)
b = Conic.circle((1.5, 0.0), 0.5)

events = []
result = intersect_conic_matrices(a, b, trace=lambda event, payload: events.append(event))

print("events:", events)
print("touching at:", result.distinct_points())
for i, collection in enumerate(result.intersection_collections):
    for s in collection:
        if isinstance(s, RealRay):
            print(f"member {i}: real line through {s.position} along {s.direction}")
        else:
            print(f"member {i}: real point {s}")

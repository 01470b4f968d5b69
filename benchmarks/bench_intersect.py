"""
Microbenchmark: time per intersection for circle and ellipse pairs.
Run:
  python benchmarks/bench_intersect.py
"""
import time
import numpy as np
from conic_geom import Conic, intersect_conic_matrices
from conic_geom.profiler import Profiler

def make_pairs(n: int, kind: str):
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    pairs = []
    for _ in range(n):
        c0 = rng.uniform(-1.0, 1.0, size=2)
        c1 = c0 + rng.uniform(-1.5, 1.5, size=2)
        if kind == "circle":
            a = Conic.circle(c0, float(rng.uniform(0.5, 1.5)))
            b = Conic.circle(c1, float(rng.uniform(0.5, 1.5)))
        else:
            a = Conic.ellipse(c0, *rng.uniform(0.5, 2.0, size=2), rotation=float(rng.uniform(0, np.pi)))
            b = Conic.ellipse(c1, *rng.uniform(0.5, 2.0, size=2), rotation=float(rng.uniform(0, np.pi)))
        pairs.append((a, b))
    return pairs

def run(kind: str, n: int = 500):
    prof = Profiler()
    pairs = make_pairs(n, kind)

    # warmup
    for a, b in pairs[:20]:
        intersect_conic_matrices(a, b)

    found = 0
    t0 = time.perf_counter()
    for a, b in pairs:
        found += len(intersect_conic_matrices(a, b, profiler=prof).distinct_points(1e-6))
    t1 = time.perf_counter()

    per_pair = (t1 - t0) / n
    return per_pair, found, prof.stats.summary()

if __name__ == "__main__":
    for kind in ["circle", "ellipse"]:
        per_pair, found, summary = run(kind)
        print(f"{kind:8s}  pair={1e6*per_pair:8.1f} us  pairs/s={1/per_pair:8.1f}  points={found}")
        for k in ["cubic", "decompose", "extract", "pairs"]:
            if k in summary:
                print(" ", k, summary[k])
        print()

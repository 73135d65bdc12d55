"""
Microbenchmark: time per packing call vs number of circles.
Run:
  python benchmarks/bench_pack.py
"""
import time
from bottle_pack.packer import CirclePacker
from bottle_pack.profiler import Profiler
from bottle_pack.types import PackingRequest, Size


def run(n: int, radius: float, repeats: int = 5):
    prof = Profiler()
    request = PackingRequest(n, Size(290, 345), 85.0, radius)

    placed = 0
    t0 = time.perf_counter()
    for seed in range(repeats):
        packer = CirclePacker(rng=seed, profiler=prof)
        placed += len(packer.pack(request))
    t1 = time.perf_counter()

    per_call = (t1 - t0) / repeats
    return per_call, placed / repeats, prof.stats.summary()


if __name__ == "__main__":
    for n, radius in [(17, 20.0), (30, 20.0), (50, 10.0), (200, 5.0), (500, 3.0)]:
        per_call, placed, summary = run(n, radius)
        print(f"N={n:4d} r={radius:4.1f}  pack={1e3*per_call:8.3f} ms  placed={placed:6.1f}")
        for k in ["random", "grid", "placed_random", "placed_grid", "dropped"]:
            if k in summary:
                print(" ", k, summary[k])
        print()

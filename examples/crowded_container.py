# examples/crowded_container.py
from bottle_pack import PackingConfig, pack
from bottle_pack.invariants import min_pairwise_distance

points = pack(40, (200, 240), corner_radius=60, circle_radius=18, rng=1)
print("placed:", len(points), "of 40")
print("closest pair:", min_pairwise_distance(points))

strict = PackingConfig(strict=True)
try:
    pack(40, (200, 240), corner_radius=60, circle_radius=18, rng=1, config=strict)
except ValueError as err:
    print("strict:", err)

# examples/bottle_layout.py
from bottle_pack import Bottle

bottle = Bottle(size=(290, 345))
placements = bottle.populate(rng=7)

print("spheres:", len(placements), "of", bottle.total)
for p in placements:
    print(f"[{p.id:2d}] {p.kind:8s} @ ({p.position.x:6.1f}, {p.position.y:6.1f})")
print("boundary vertices:", len(bottle.boundary_outline()))

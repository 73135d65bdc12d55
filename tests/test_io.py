import json

import pytest
from bottle_pack.config import PackingConfig
from bottle_pack.io.json_io import (
    bottle_from_json,
    config_from_json,
    config_to_json,
    layout_to_json,
    load_bottle,
    load_request,
    request_from_json,
    request_to_json,
    save_layout,
)
from bottle_pack.layout import Bottle, SphereKind
from bottle_pack.types import PackingRequest, Size


def test_request_round_trip():
    req = PackingRequest(17, Size(290, 345), 85.0, 20.0)
    data = request_to_json(req)
    assert data == {
        "count": 17,
        "container": [290, 345],
        "corner_radius": 85.0,
        "circle_radius": 20.0,
    }
    assert request_from_json(data) == req


def test_request_defaults_corner_radius():
    req = request_from_json({"count": 2, "container": [100, 100], "circle_radius": 5})
    assert req.corner_radius == 0.0
    assert req.container_size == Size(100.0, 100.0)


@pytest.mark.parametrize("data", [
    {"container": [100, 100], "circle_radius": 5},
    {"count": 2, "circle_radius": 5},
    {"count": 2, "container": [100, 100]},
    {"count": 2, "container": [100], "circle_radius": 5},
    {"count": 2.5, "container": [100, 100], "circle_radius": 5},
    {"count": True, "container": [100, 100], "circle_radius": 5},
    {"count": None, "container": [100, 100], "circle_radius": 5},
    {"count": 2, "container": 5, "circle_radius": 5},
    {"count": 2, "container": {"w": 100, "h": 100}, "circle_radius": 5},
    {"count": 2, "container": [100, "wide"], "circle_radius": 5},
    {"count": 2, "container": [100, 100], "circle_radius": None},
    {"count": 2, "container": [100, 100], "corner_radius": "round", "circle_radius": 5},
])
def test_malformed_request_raises(data):
    with pytest.raises(ValueError):
        request_from_json(data)


def test_load_request_from_file(tmp_path):
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"count": 3, "container": [200, 300], "circle_radius": 10}))
    req = load_request(str(path))
    assert req.count == 3
    assert req.circle_radius == 10.0


def test_config_defaults_and_overrides():
    assert config_from_json({}) == PackingConfig()
    cfg = config_from_json({"max_random_attempts": 50, "strict": True})
    assert cfg.max_random_attempts == 50
    assert cfg.strict
    assert cfg.spacing_factor == pytest.approx(2.2)


def test_config_to_json_writes_only_changes():
    assert config_to_json(PackingConfig()) == {}
    cfg = PackingConfig(strict=True, margin_buffer=1.0)
    data = config_to_json(cfg)
    assert data == {"margin_buffer": 1.0, "strict": True}
    assert config_from_json(data) == cfg


def test_bottle_from_json():
    bottle = bottle_from_json({
        "size": [300, 400],
        "sphere_radius": 15,
        "kinds": [{"name": "red", "quantity": 4}, {"name": "blue", "quantity": 2}],
        "config": {"verify": True},
    })
    assert bottle.size == Size(300.0, 400.0)
    assert bottle.corner_radius == 85.0
    assert bottle.sphere_radius == 15.0
    assert bottle.kinds == (SphereKind("red", 4), SphereKind("blue", 2))
    assert bottle.config.verify


@pytest.mark.parametrize("data", [
    {"corner_radius": 10},
    {"size": [100, 100], "kinds": [{"name": "x"}]},
    {"size": [100, 100], "kinds": [{"name": "x", "quantity": -1}]},
    {"size": [100, 100], "kinds": [{"name": "x", "quantity": None}]},
    {"size": 5},
    {"size": [100, 100], "sphere_radius": None},
    {"size": [100, 100], "config": {"max_random_attempts": "many"}},
])
def test_malformed_bottle_raises(data):
    with pytest.raises(ValueError):
        bottle_from_json(data)


def test_layout_export(tmp_path):
    bottle = Bottle((290, 345))
    placements = bottle.populate(rng=3)

    data = layout_to_json(bottle, placements, segments_per_corner=2)
    assert data["size"] == [290.0, 345.0]
    assert len(data["boundary"]) == 12
    assert len(data["spheres"]) == len(placements)
    first = data["spheres"][0]
    assert first["id"] == 1
    assert first["position"] == [placements[0].position.x, placements[0].position.y]

    path = tmp_path / "layout.json"
    save_layout(bottle, placements, str(path))
    saved = json.loads(path.read_text())
    assert [s["kind"] for s in saved["spheres"]] == [p.kind for p in placements]


def test_load_bottle_and_populate(tmp_path):
    path = tmp_path / "bottle.json"
    path.write_text(json.dumps({"size": [290, 345]}))
    bottle = load_bottle(str(path))
    assert bottle.total == 17
    assert len(bottle.populate(rng=2025)) == 17


def test_malformed_field_is_named_in_error():
    with pytest.raises(ValueError, match="Count must be a number, got None"):
        request_from_json({"count": None, "container": [100, 100], "circle_radius": 5})
    with pytest.raises(ValueError, match="Container must be"):
        request_from_json({"count": 2, "container": 5, "circle_radius": 5})


def test_whole_float_count_is_accepted():
    req = request_from_json({"count": 3.0, "container": [100, 100], "circle_radius": 5})
    assert req.count == 3
    assert isinstance(req.count, int)

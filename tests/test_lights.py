import pytest

from comboboxes.color import Color
from comboboxes.lights import (
    MAX_LIGHTS,
    AmbientLight,
    PointLight2d,
    PointLightsUniform,
    build_lights_uniform,
    update_lights,
)
from comboboxes.material import ColorMaterialCustom


def test_default_uniform_matches_source_defaults():
    u = PointLightsUniform()
    assert u.lights_num == 0
    assert u.ambient == (30.0, 30.0, 30.0, 1.0)
    assert len(u.positions) == MAX_LIGHTS == len(u.colors)
    assert all(p == (0.0, 0.0, 0.0, 0.0) for p in u.positions)


def test_build_skips_tiny_lights_and_stores_radius():
    lights = [
        (PointLight2d(radius=0.001, color=Color.WHITE), (9.0, 9.0, 9.0)),
        (PointLight2d(radius=150.0, color=Color.WHITE), (1.0, 2.0, 3.0)),
    ]
    u = build_lights_uniform(AmbientLight(Color.rgb(0.2, 0.2, 0.2)), lights)
    assert u.lights_num == 1
    assert u.positions[0] == (1.0, 2.0, 3.0, 150.0)
    assert u.colors[0] == Color.WHITE.as_linear_rgba()
    assert u.ambient == Color.rgb(0.2, 0.2, 0.2).as_linear_rgba()


def test_too_many_lights_raises():
    lights = [(PointLight2d(radius=1.0), (0.0, 0.0, 0.0))] * (MAX_LIGHTS + 1)
    with pytest.raises(ValueError):
        build_lights_uniform(AmbientLight(), lights)


def test_bright_unchanged_ambient_skips_update():
    material = ColorMaterialCustom()
    lights = [(PointLight2d(radius=5.0), (0.0, 0.0, 0.0))]
    assert update_lights([material], AmbientLight(), lights, False) is False
    assert material.lights.lights_num == 0


def test_dim_ambient_updates_each_material_independently():
    first, second = ColorMaterialCustom(), ColorMaterialCustom()
    lights = [(PointLight2d(radius=5.0), (4.0, 5.0, 0.0))]
    ambient = AmbientLight(Color.rgb(0.1, 0.1, 0.1))
    assert update_lights([first, second], ambient, lights, False) is True
    assert first.lights == second.lights
    assert first.lights.lights_num == 1
    first.lights.lights_num = 0
    assert second.lights.lights_num == 1


def test_changed_bright_ambient_still_updates():
    material = ColorMaterialCustom()
    ambient = AmbientLight(Color.WHITE * 30.0)
    assert update_lights([material], ambient, [], True) is True
    assert material.lights.ambient == ambient.color.as_linear_rgba()
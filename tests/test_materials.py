import random

import pytest

import materials.lambertian as lambertian_module
import materials.metal as metal_module
from core.errors import ConfigurationError
from core.ray import Ray
from core.utils import reflect
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.isotropic import Isotropic
from materials.lambertian import Lambertian
from materials.material import Material
from materials.metal import Metal
from materials.textures import CheckerTexture

UP = Vector3(0, 1, 0)


def make_record(normal=UP, front_face=True, p=None):
    return HitRecord(p=p or Vector3(0, 0, 0), normal=normal, t=1.0, front_face=front_face)


def test_lambertian_scatters_into_the_normal_hemisphere(rng):
    material = Lambertian(Vector3(0.2, 0.4, 0.6))
    rec = make_record()
    ray_in = Ray(Vector3(0, 1, -1), Vector3(0, -1, 1), time=0.3)
    for _ in range(200):
        attenuation, scattered = material.scatter(ray_in, rec, rng)
        assert attenuation == Vector3(0.2, 0.4, 0.6)
        assert scattered.direction.dot(rec.normal) >= 0
        assert scattered.origin is rec.p
        assert scattered.time == 0.3


def test_lambertian_degenerate_direction_falls_back_to_normal(monkeypatch, rng):
    monkeypatch.setattr(lambertian_module, "random_unit_vector", lambda r: -UP)
    attenuation, scattered = Lambertian(Vector3(1, 1, 1)).scatter(
        Ray(Vector3(0, 1, 0), -UP), make_record(), rng)
    assert scattered.direction == UP


def test_lambertian_samples_its_texture(rng):
    checker = CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1))
    material = Lambertian(checker)
    even, _ = material.scatter(Ray(Vector3(0, 1, 0), -UP), make_record(p=Vector3(0.1, 0.1, 0.1)), rng)
    odd, _ = material.scatter(Ray(Vector3(0, 1, 0), -UP), make_record(p=Vector3(-0.1, 0.1, 0.1)), rng)
    assert even == Vector3(1, 0, 0)
    assert odd == Vector3(0, 0, 1)


def test_polished_metal_is_a_mirror(rng):
    metal = Metal(Vector3(0.9, 0.8, 0.7), 0.0)
    attenuation, scattered = metal.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), make_record(), rng)
    assert attenuation == Vector3(0.9, 0.8, 0.7)
    expected = Vector3(1, 1, 0).normalize()
    assert scattered.direction.x == pytest.approx(expected.x)
    assert scattered.direction.y == pytest.approx(expected.y)


def test_metal_absorbs_rays_fuzzed_into_the_surface(monkeypatch, rng):
    monkeypatch.setattr(metal_module, "random_in_unit_sphere", lambda r: Vector3(0, -0.9, 0))
    metal = Metal(Vector3(1, 1, 1), 1.0)
    assert metal.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), make_record(), rng) is None


def test_metal_absorbs_when_perturbed_direction_is_tangent(monkeypatch, rng):
    reflected_y = reflect(Vector3(1, -1, 0).normalize(), UP).y
    monkeypatch.setattr(metal_module, "random_in_unit_sphere", lambda r: Vector3(0, -reflected_y, 0))
    metal = Metal(Vector3(1, 1, 1), 1.0)
    assert metal.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), make_record(), rng) is None


def test_metal_samples_its_texture(rng):
    metal = Metal(CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1)), 0.0)
    ray_in = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
    even, _ = metal.scatter(ray_in, make_record(p=Vector3(0.1, 0.1, 0.1)), rng)
    odd, _ = metal.scatter(ray_in, make_record(p=Vector3(-0.1, 0.1, 0.1)), rng)
    assert even == Vector3(1, 0, 0)
    assert odd == Vector3(0, 0, 1)


def test_metal_fuzz_is_clamped():
    assert Metal(Vector3(1, 1, 1), 3.0).fuzz == 1.0
    assert Metal(Vector3(1, 1, 1), -1.0).fuzz == 0.0


def test_dielectric_total_internal_reflection_ignores_the_draw(fixed_rng):
    glass = Dielectric(1.5)
    # Leaving the glass at a grazing angle: 1.5 * sin(theta) > 1
    incoming = Vector3(1, -0.1, 0)
    rec = make_record(front_face=False)
    expected = reflect(incoming.normalize(), UP)
    for draw in (0.0, 0.5, 0.999999):
        attenuation, scattered = glass.scatter(Ray(Vector3(0, 0.1, 0), incoming), rec, fixed_rng(draw))
        assert attenuation == Vector3(1, 1, 1)
        assert scattered.direction.x == pytest.approx(expected.x)
        assert scattered.direction.y == pytest.approx(expected.y)
        assert scattered.direction.y > 0


def test_dielectric_total_internal_reflection_for_many_draws():
    glass = Dielectric(1.5)
    rng = random.Random(7)
    rec = make_record(front_face=False)
    for _ in range(200):
        _, scattered = glass.scatter(Ray(Vector3(0, 0.1, 0), Vector3(1, -0.1, 0)), rec, rng)
        assert scattered.direction.dot(UP) > 0


def test_dielectric_chooses_by_schlick_reflectance(fixed_rng):
    glass = Dielectric(1.5)
    ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
    rec = make_record(front_face=True)
    # Reflectance at normal incidence is 0.04
    _, refracted = glass.scatter(ray_in, rec, fixed_rng(0.5))
    assert refracted.direction.y == pytest.approx(-1.0)
    _, reflected = glass.scatter(ray_in, rec, fixed_rng(0.01))
    assert reflected.direction.y == pytest.approx(1.0)


def test_dielectric_tint(fixed_rng):
    ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
    clear, _ = Dielectric(1.5).scatter(ray_in, make_record(), fixed_rng(0.5))
    assert clear == Vector3(1, 1, 1)
    tinted, _ = Dielectric(1.5, tint=Vector3(0.8, 1.0, 0.9)).scatter(ray_in, make_record(), fixed_rng(0.5))
    assert tinted == Vector3(0.8, 1.0, 0.9)


def test_dielectric_rejects_bad_index():
    with pytest.raises(ConfigurationError):
        Dielectric(0.0)
    with pytest.raises(ConfigurationError):
        Dielectric(-1.5)


def test_isotropic_scatters_from_the_hit_point(rng):
    fog = Isotropic(Vector3(0.3, 0.3, 0.3))
    rec = make_record(p=Vector3(1, 2, 3))
    attenuation, scattered = fog.scatter(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0), time=0.7), rec, rng)
    assert attenuation == Vector3(0.3, 0.3, 0.3)
    assert scattered.origin == Vector3(1, 2, 3)
    assert scattered.direction.length() < 1.0
    assert scattered.time == 0.7


def test_emission():
    light = DiffuseLight(Vector3(4, 4, 4))
    rec = make_record()
    assert light.scatter(Ray(Vector3(0, 1, 0), -UP), rec) is None
    assert light.emitted(0.5, 0.5, Vector3(0, 0, 0)) == Vector3(4, 4, 4)
    assert Lambertian(Vector3(1, 1, 1)).emitted(0.5, 0.5, Vector3(0, 0, 0)) == Vector3(0, 0, 0)


def test_material_base_is_abstract():
    with pytest.raises(NotImplementedError):
        Material().scatter(Ray(Vector3(0, 0, 0), UP), make_record())

import random

import pytest

from camera.camera import Camera
from core.errors import ConfigurationError
from core.vector import Vector3


def pinhole(**kwargs):
    params = dict(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1), vup=Vector3(0, 1, 0),
                  vfov=90.0, aspect_ratio=2.0, aperture=0.0, focus_dist=1.0)
    params.update(kwargs)
    return Camera(**params)


def test_basis_is_orthonormal():
    cam = Camera(Vector3(12, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 20, 1.5, 0.1, 10)
    for a, b in ((cam.u, cam.v), (cam.v, cam.w), (cam.u, cam.w)):
        assert a.dot(b) == pytest.approx(0.0, abs=1e-12)
    for axis in (cam.u, cam.v, cam.w):
        assert axis.length() == pytest.approx(1.0)


def test_pinhole_rays(rng, vec_close):
    cam = pinhole()
    center = cam.get_ray(0.5, 0.5, rng)
    assert center.origin == Vector3(0, 0, 0)
    vec_close(center.direction, (0, 0, -1))
    vec_close(cam.get_ray(0.0, 0.0, rng).direction, (-2, -1, -1))
    vec_close(cam.get_ray(1.0, 1.0, rng).direction, (2, 1, -1))
    assert center.time == 0.0


def test_lens_rays_converge_on_the_focus_plane(rng, vec_close):
    cam = pinhole(aperture=2.0, focus_dist=1.0)
    origins = set()
    for _ in range(50):
        ray = cam.get_ray(0.25, 0.75, rng)
        offset = ray.origin - Vector3(0, 0, 0)
        assert offset.length() < 1.0
        assert offset.z == pytest.approx(0.0)
        origins.add(ray.origin.to_tuple())
        vec_close(ray.at(1.0), (-1.0, 0.5, -1.0), tol=1e-9)
    assert len(origins) > 1


def test_shutter_interval_sampling(rng):
    cam = pinhole(time0=0.25, time1=0.75)
    times = [cam.get_ray(0.5, 0.5, rng).time for _ in range(100)]
    assert all(0.25 <= t <= 0.75 for t in times)
    assert len(set(times)) > 1
    assert pinhole(time0=0.4, time1=0.4).get_ray(0.5, 0.5, rng).time == 0.4


def test_same_generator_state_gives_same_ray():
    cam = pinhole(aperture=0.5, time0=0.0, time1=1.0)
    a = cam.get_ray(0.3, 0.6, random.Random(11))
    b = cam.get_ray(0.3, 0.6, random.Random(11))
    assert a.origin == b.origin and a.direction == b.direction and a.time == b.time


@pytest.mark.parametrize("kwargs", [
    {"vfov": 0.0},
    {"vfov": 180.0},
    {"aspect_ratio": 0.0},
    {"aperture": -0.1},
    {"focus_dist": 0.0},
    {"time0": 1.0, "time1": 0.0},
    {"look_at": Vector3(0, 0, 0)},
    {"vup": Vector3(0, 0, 1)},
])
def test_invalid_camera_settings(kwargs):
    with pytest.raises(ConfigurationError):
        pinhole(**kwargs)

# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.errors import ConfigurationError
from core.utils import default_rng, degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Thin-lens camera with a shutter interval.

    The basis (u, v, w) is derived once from look_from/look_at/vup. An
    aperture of zero gives a pinhole camera; time0 == time1 disables
    motion blur.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        if not 0 < vfov < 180:
            raise ConfigurationError(f"Vertical field of view must be in (0, 180) degrees, got {vfov}")
        if not aspect_ratio > 0:
            raise ConfigurationError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ConfigurationError(f"Aperture cannot be negative, got {aperture}")
        if not focus_dist > 0:
            raise ConfigurationError(f"Focus distance must be positive, got {focus_dist}")
        if time1 < time0:
            raise ConfigurationError(f"Shutter closes ({time1}) before it opens ({time0})")

        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        # Compute viewport dimensions based on fov
        h = math.tan(degrees_to_radians(vfov) / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        if self.w.near_zero() or self.u.near_zero():
            raise ConfigurationError("look_from, look_at and vup must span a non-degenerate view")
        self.v = self.w.cross(self.u)

        # Scale by focus distance so the focal plane is the viewport
        self.origin = look_from
        self.horizontal = self.u * (viewport_width * focus_dist)
        self.vertical = self.v * (viewport_height * focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng=None) -> Ray:
        """Ray through normalized viewport coordinates (s, t) in [0, 1]."""
        if rng is None:
            rng = default_rng()

        origin = self.origin
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = origin + self.u * rd.x + self.v * rd.y

        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     origin)

        time = self.time0
        if self.time1 > self.time0:
            time = rng.uniform(self.time0, self.time1)
        return Ray(origin, direction, time)

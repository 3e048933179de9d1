# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from core.errors import ConfigurationError
from geometry.hittable import Hittable, HitRecord

def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates for a point on the unit sphere centered at the origin.
    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1,
    both normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

def _solve_sphere(ray: Ray, center: Vector3, radius: float,
                  t_min: float, t_max: float) -> Optional[float]:
    """Nearest root of |O + tD - C|^2 = r^2 inside (t_min, t_max)."""
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0 or a == 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None
    return root

def _check_radius(radius: float):
    if not radius > 0:
        raise ConfigurationError(f"Sphere radius must be positive, got {radius}")

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        _check_radius(radius)
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        root = _solve_sphere(ray, self.center, self.radius, t_min, t_max)
        if root is None:
            return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

class MovingSphere(Hittable):
    """
    A sphere whose center travels linearly from center0 at time0 to
    center1 at time1. Used for motion blur.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        _check_radius(radius)
        if time1 == time0:
            raise ConfigurationError(
                "MovingSphere needs a non-empty time interval; use Sphere for static geometry")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        return self.center0 + (self.center1 - self.center0) * (
            (time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        center = self.center(ray.time)
        root = _solve_sphere(ray, center, self.radius, t_min, t_max)
        if root is None:
            return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))

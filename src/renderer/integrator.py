# renderer/integrator.py
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from core.utils import default_rng
from geometry.hittable import Hittable

# Rays start slightly off their originating surface to avoid shadow acne.
T_MIN = 0.001
INFINITY = float('inf')

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def sky_color(ray: Ray) -> Vector3:
    """Vertical white-to-blue gradient standing in for an ambient sky dome."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world: Hittable, depth: int, rng=None,
              background: Optional[Vector3] = None) -> Vector3:
    """
    Returns the radiance seen along the ray. If the ray hits an object, the
    material scatter is followed recursively for at most `depth` bounces.

    `background` replaces the sky gradient with a constant color, which is
    what scenes lit only by emissive materials want (usually black).
    """
    if depth <= 0:
        return BLACK  # Exceeded recursion depth

    if rng is None:
        rng = default_rng()

    rec = world.hit(ray, T_MIN, INFINITY, rng)
    if rec is None:
        return sky_color(ray) if background is None else background

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return emitted

    attenuation, scattered = scatter_result
    return emitted + attenuation * ray_color(scattered, world, depth - 1, rng, background)

# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import clamp, default_rng, reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties. `fuzz` in [0, 1] blurs the
    mirror reflection; values outside that range are clamped.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.albedo = as_texture(albedo)
        self.fuzz = clamp(fuzz, 0.0, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Vector3, Ray]]:
        if rng is None:
            rng = default_rng()
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected
        if self.fuzz > 0:
            direction = reflected + random_in_unit_sphere(rng) * self.fuzz
        scattered = Ray(rec.p, direction, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo.value(rec.u, rec.v, rec.p), scattered

        return None  # Absorb the ray if it does not scatter forward

# materials/isotropic.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import default_rng, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly."""
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.albedo = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Tuple[Vector3, Ray]:
        if rng is None:
            rng = default_rng()
        scattered = Ray(rec.p, random_in_unit_sphere(rng), ray_in.time)
        return self.albedo.value(rec.u, rec.v, rec.p), scattered

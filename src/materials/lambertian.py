# materials/lambertian.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import default_rng, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.albedo = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Tuple[Vector3, Ray]:
        if rng is None:
            rng = default_rng()
        # Normal plus a random unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # Catch degenerate scatter direction.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.albedo.value(rec.u, rec.v, rec.p)
        return attenuation, scattered

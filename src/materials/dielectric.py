# materials/dielectric.py
import math
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.errors import ConfigurationError
from core.utils import default_rng, reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

WHITE = Vector3(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Refractive material (glass, water, diamond) with index of refraction
    `ir`. Chooses between reflection and refraction with Schlick's Fresnel
    approximation. Clear unless given a `tint` color or texture.
    """
    def __init__(self, ir: float, tint: Optional[Union[Vector3, Texture]] = None):
        if not ir > 0:
            raise ConfigurationError(f"Index of refraction must be positive, got {ir}")
        self.ir = ir
        self.tint = as_texture(WHITE if tint is None else tint)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Tuple[Vector3, Ray]:
        if rng is None:
            rng = default_rng()
        attenuation = self.tint.value(rec.u, rec.v, rec.p)

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return attenuation, Ray(rec.p, direction, ray_in.time)

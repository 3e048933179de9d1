# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Light source material. It absorbs every incoming ray and emits the
    radiance of its texture instead, so a light sphere is seen but never
    bounced off. Radiance above 1.0 is what lets it illuminate a dark scene.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.emit = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Vector3, Ray]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Radiance leaving the surface at (u, v) / p.

        Returns:
            Vector3: The texture value, unclamped.
        """
        return self.emit.value(u, v, p)

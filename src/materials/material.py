# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

BLACK = Vector3(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable once built and may be shared by any number of
    primitives.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """Radiance emitted at the surface point. Non-emitters are black."""
        return BLACK

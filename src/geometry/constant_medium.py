# geometry/constant_medium.py
import math
from typing import Optional, Union
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from core.errors import ConfigurationError
from core.utils import default_rng
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture

INFINITY = float('inf')

# Gap between the entry hit and the start of the exit search.
EXIT_EPSILON = 1e-4

class ConstantMedium(Hittable):
    """
    A homogeneous participating medium (fog, smoke) filling a boundary shape.

    A ray travelling through the medium scatters after a free path drawn
    from an exponential distribution with mean 1/density. The boundary
    must be closed and convex for the entry/exit search to be meaningful.
    """
    def __init__(self, boundary: Hittable, density: float,
                 albedo: Union[Vector3, Texture]):
        if not density > 0:
            raise ConfigurationError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -INFINITY, INFINITY, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + EXIT_EPSILON, INFINITY, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        if t_enter < 0:
            t_enter = 0.0

        if rng is None:
            rng = default_rng()
        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping the logarithm finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())

        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        # Isotropic scattering ignores the normal; any unit vector will do.
        rec.normal = Vector3(1.0, 0.0, 0.0)
        rec.front_face = True
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)

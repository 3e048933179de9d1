# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "u", "v")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, facing the incoming ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray hit the outward side
        self.material = material
        self.u = u              # Surface texture coordinates
        self.v = v

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        `outward_normal` must be unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        """
        Returns the closest intersection with t in (t_min, t_max), or None.
        `rng` is only consumed by stochastic surfaces such as participating media.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Returns a box enclosing the object over [time0, time1], or None
        when the object has no finite extent.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

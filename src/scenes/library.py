# scenes/library.py
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from camera.camera import Camera
from core.errors import ConfigurationError
from core.utils import random_vector
from core.vector import Vector3
from geometry.constant_medium import ConstantMedium
from geometry.sphere import MovingSphere, Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, ImageTexture, NoiseTexture

@dataclass
class Scene:
    """A world plus the camera placement that frames it."""
    world: HittableList
    look_from: Vector3
    look_at: Vector3
    vup: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))
    vfov: float = 20.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0
    time1: float = 0.0
    background: Optional[Vector3] = None  # None means the sky gradient

    def make_camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.look_from, self.look_at, self.vup, self.vfov,
                      aspect_ratio, self.aperture, self.focus_dist,
                      self.time0, self.time1)

def _scattered_spheres(world: HittableList, rng: random.Random, moving: bool):
    """The 22x22 grid of small spheres around the three feature spheres."""
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
                if moving:
                    center1 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                    world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, material))
                else:
                    world.add(Sphere(center, 0.2, material))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

def _feature_spheres(world: HittableList):
    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

def random_scene(rng: random.Random, texture: Optional[str] = None) -> Scene:
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5))))
    _scattered_spheres(world, rng, moving=False)
    _feature_spheres(world)
    return Scene(world, look_from=Vector3(12, 2, 3), look_at=Vector3(0, 0, 0),
                 aperture=0.1, focus_dist=10.0)

def moving_spheres(rng: random.Random, texture: Optional[str] = None) -> Scene:
    world = HittableList()
    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))
    _scattered_spheres(world, rng, moving=True)
    _feature_spheres(world)
    return Scene(world, look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0),
                 aperture=0.1, focus_dist=10.0, time0=0.0, time1=1.0)

def two_spheres(rng: random.Random, texture: Optional[str] = None) -> Scene:
    checker = Lambertian(CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9)))
    # One material shared by both spheres
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, checker),
        Sphere(Vector3(0, 10, 0), 10, checker),
    ])
    return Scene(world, look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0))

def two_perlin_spheres(rng: random.Random, texture: Optional[str] = None) -> Scene:
    marble = Lambertian(NoiseTexture(4.0, seed=rng.getrandbits(32)))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
    ])
    return Scene(world, look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0))

def earth(rng: random.Random, texture: Optional[str] = None) -> Scene:
    if texture is None:
        raise ConfigurationError("The earth scene needs an image texture (--texture PATH)")
    globe = Sphere(Vector3(0, 0, 0), 2, Lambertian(ImageTexture(texture)))
    return Scene(HittableList([globe]), look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0))

def simple_light(rng: random.Random, texture: Optional[str] = None) -> Scene:
    marble = Lambertian(NoiseTexture(4.0, seed=rng.getrandbits(32)))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
        # Brighter than 1.0 so it can light its surroundings
        Sphere(Vector3(0, 7, 0), 2, DiffuseLight(Vector3(4, 4, 4))),
    ])
    return Scene(world, look_from=Vector3(26, 3, 6), look_at=Vector3(0, 2, 0),
                 background=Vector3(0, 0, 0))

def smoke(rng: random.Random, texture: Optional[str] = None) -> Scene:
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5))))
    # The boundary spheres only shape the media; they are not added on their own
    dark = Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0, 0, 0)))
    light = Sphere(Vector3(4, 1, 0), 1.0, Lambertian(Vector3(0, 0, 0)))
    world.add(ConstantMedium(dark, 1.5, Vector3(0, 0, 0)))
    world.add(ConstantMedium(light, 1.5, Vector3(1, 1, 1)))
    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    return Scene(world, look_from=Vector3(13, 2, 3), look_at=Vector3(0, 1, 0))

SceneBuilder = Callable[..., Scene]

SCENES: Dict[str, SceneBuilder] = {
    "random": random_scene,
    "moving_spheres": moving_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "smoke": smoke,
}

def build_scene(name: str, seed: Optional[int] = None, texture: Optional[str] = None) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown scene {name!r}; choose one of {', '.join(sorted(SCENES))}") from None
    return builder(random.Random(seed), texture=texture)

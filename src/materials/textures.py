# materials/textures.py
import math
from typing import Optional
import numpy as np
from PIL import Image, UnidentifiedImageError
from core.utils import clamp
from core.vector import Vector3
from core.errors import TextureLoadError

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color at surface coordinates (u, v) and world-space point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures in space."""
    def __init__(self, even, odd, scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class Perlin:
    """Gradient noise over random unit vectors on a 256-cell lattice."""
    POINT_COUNT = 256

    def __init__(self, seed: Optional[int] = None):
        rng = np.random.default_rng(seed)
        vectors = rng.uniform(-1.0, 1.0, size=(self.POINT_COUNT, 3))
        vectors /= np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ranvec = [Vector3(*row) for row in vectors.tolist()]
        self.perm_x = rng.permutation(self.POINT_COUNT).tolist()
        self.perm_y = rng.permutation(self.POINT_COUNT).tolist()
        self.perm_z = rng.permutation(self.POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        # Hermite smoothing of the fractional parts
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    gradient = self.ranvec[
                        self.perm_x[(i + di) & 255] ^
                        self.perm_y[(j + dj) & 255] ^
                        self.perm_z[(k + dk) & 255]]
                    weight = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu)) *
                              (dj * vv + (1 - dj) * (1 - vv)) *
                              (dk * ww + (1 - dk) * (1 - ww)) *
                              gradient.dot(weight))
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)

class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.scale = scale
        self.noise = Perlin(seed)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        phase = self.scale * p.z + 10 * self.noise.turbulence(p)
        return Vector3(1, 1, 1) * (0.5 * (1 + math.sin(phase)))

class ImageTexture(Texture):
    """A texture from an image file, addressed by (u, v) in [0, 1]."""
    def __init__(self, image_path: str):
        try:
            with Image.open(image_path) as img:
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                # Convert to numpy array for faster access
                self.data = np.asarray(img, dtype=np.float32) / 255.0
        except (OSError, UnidentifiedImageError) as e:
            raise TextureLoadError(f"Error loading texture {image_path}: {e}") from e
        self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

def as_texture(albedo) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(albedo, Texture):
        return albedo
    return SolidColor(albedo)

# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def _gamma_kernel(linear, output):
    height, width, channels = linear.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = linear[y, x, c]
                # NaN, infinities and negatives cannot be displayed
                if not math.isfinite(v) or v < 0.0:
                    v = 0.0
                v = math.sqrt(v)
                if v > 0.999:
                    v = 0.999
                output[y, x, c] = int(256.0 * v)

def gamma_correct(linear: np.ndarray) -> np.ndarray:
    """
    Convert averaged linear radiance to 8-bit sRGB-ish values.
    Gamma 2 (square root), then clamp to [0, 0.999] and scale to 0-255.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    output = np.empty(linear.shape, dtype=np.uint8)
    _gamma_kernel(linear, output)
    return output

def reinhard_tone_mapping(linear: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    Useful for scenes with bright emitters, where plain gamma clips.
    """
    # Infinite radiance saturates to the white point instead of going black
    linear = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    scaled = np.nan_to_num(linear, nan=0.0, posinf=1e30) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return (mapped * 255).clip(0, 255).astype("uint8")

TONE_MAPPERS = {
    "gamma": gamma_correct,
    "reinhard": reinhard_tone_mapping,
}

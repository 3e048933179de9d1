# renderer/output.py
import os
import numpy as np
from PIL import Image

from core.errors import ConfigurationError

def check_output_path(path: str) -> str:
    """
    Raises ConfigurationError unless Pillow can write the format named by
    the file extension. Run before rendering so a bad path fails fast.
    """
    extension = os.path.splitext(path)[1].lower()
    image_format = Image.registered_extensions().get(extension)
    if image_format is None or image_format not in Image.SAVE:
        raise ConfigurationError(f"Cannot write images with extension {extension!r}: {path}")
    return path

def save_image(pixels: np.ndarray, path: str) -> str:
    """
    Write an 8-bit (height, width, 3) image. The format follows the file
    extension (PNG, PPM, JPEG, ...). Returns the path written.
    """
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) uint8 array, got {pixels.dtype} {pixels.shape}")
    check_output_path(path)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(pixels).save(path)
    return path

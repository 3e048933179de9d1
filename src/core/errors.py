# core/errors.py

class ConfigurationError(ValueError):
    """Raised when a primitive, material, camera or renderer is built with
    parameters that would make the simulation numerically undefined."""


class TextureLoadError(ValueError):
    """Raised when an image texture cannot be read from disk."""

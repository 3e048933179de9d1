# renderer/settings.py
from dataclasses import dataclass
from typing import Optional

from core.errors import ConfigurationError
from renderer.output import check_output_path
from renderer.tone_mapping import TONE_MAPPERS

# Quality presets trade noise for render time.
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 20},
    "final": {"samples": 500, "bounces": 50},
}

@dataclass
class RenderSettings:
    scene: str = "random"
    width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 32
    max_depth: int = 20
    workers: int = 1
    tile: int = 16
    seed: Optional[int] = None
    output: str = "output/render.png"
    tone_map: str = "gamma"
    texture: Optional[str] = None
    preview: bool = False

    @property
    def height(self) -> int:
        return max(1, round(self.width / self.aspect_ratio))

    def apply_quality(self, level: str) -> "RenderSettings":
        try:
            quality = QUALITY_LEVELS[level]
        except KeyError:
            raise ConfigurationError(
                f"Unknown quality level {level!r}; choose one of {', '.join(QUALITY_LEVELS)}") from None
        self.samples_per_pixel = quality["samples"]
        self.max_depth = quality["bounces"]
        return self

    def validate(self) -> "RenderSettings":
        if not self.aspect_ratio > 0:
            raise ConfigurationError(f"Aspect ratio must be positive, got {self.aspect_ratio}")
        if self.tone_map not in TONE_MAPPERS:
            raise ConfigurationError(f"Unknown tone mapper {self.tone_map!r}")
        check_output_path(self.output)
        return self

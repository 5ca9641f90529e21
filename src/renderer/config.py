# renderer/config.py
import math
import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple
from core.errors import ConfigError
from core.vector import Vector3

@dataclass(frozen=True)
class RenderConfig:
    """
    Every knob of a render in one place. Defaults reproduce the demo image.
    """
    image_width: int = 300
    aspect_ratio: float = 1.5
    samples_per_pixel: int = 10
    max_depth: int = 30
    thread_count: int = 20

    # Camera placement
    look_from: Tuple[float, float, float] = (13.0, 2.0, 3.0)
    look_at: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    vup: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    vfov: float = 20.0
    aperture: float = 0.1
    focus_dist: float = 10.0

    grid_extent: int = 3
    seed: Optional[int] = None
    output: str = "image.ppm"

    def __post_init__(self):
        for name in ("aspect_ratio", "vfov", "aperture", "focus_dist"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigError(f"{name} must be a finite number, got {getattr(self, name)}")
        for name in ("look_from", "look_at", "vup"):
            if not all(math.isfinite(c) for c in getattr(self, name)):
                raise ConfigError(f"{name} must have finite components, got {getattr(self, name)}")
        if tuple(self.look_from) == tuple(self.look_at):
            raise ConfigError(f"look_from and look_at must differ, both are {self.look_from}")
        if self.image_width <= 0:
            raise ConfigError(f"image_width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ConfigError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_height <= 0:
            raise ConfigError(
                f"image_width {self.image_width} and aspect_ratio {self.aspect_ratio} "
                "give an empty image")
        if self.samples_per_pixel <= 0:
            raise ConfigError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ConfigError(f"max_depth must not be negative, got {self.max_depth}")
        if self.thread_count <= 0:
            raise ConfigError(f"thread_count must be positive, got {self.thread_count}")
        if not 0 < self.vfov < 180:
            raise ConfigError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if self.aperture < 0:
            raise ConfigError(f"aperture must not be negative, got {self.aperture}")
        if self.focus_dist <= 0:
            raise ConfigError(f"focus_dist must be positive, got {self.focus_dist}")
        if self.grid_extent < 0:
            raise ConfigError(f"grid_extent must not be negative, got {self.grid_extent}")

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)

    def camera_vectors(self) -> Tuple[Vector3, Vector3, Vector3]:
        return Vector3(*self.look_from), Vector3(*self.look_at), Vector3(*self.vup)

    def with_overrides(self, **overrides) -> "RenderConfig":
        """Copy with the given fields replaced; None means keep the current value."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ=None) -> "RenderConfig":
        """Defaults overridden by RT_* environment variables."""
        if environ is None:
            environ = os.environ
        fields = {
            "image_width": ("RT_WIDTH", int),
            "aspect_ratio": ("RT_ASPECT_RATIO", float),
            "samples_per_pixel": ("RT_SAMPLES", int),
            "max_depth": ("RT_MAX_DEPTH", int),
            "thread_count": ("RT_THREADS", int),
            "seed": ("RT_SEED", int),
            "output": ("RT_OUTPUT", str),
        }
        overrides = {}
        for field, (var, convert) in fields.items():
            raw = environ.get(var)
            if raw is None or raw == "":
                continue
            try:
                overrides[field] = convert(raw)
            except ValueError as e:
                raise ConfigError(f"{var}={raw!r} is not a valid {convert.__name__}") from e
        return cls(**overrides)

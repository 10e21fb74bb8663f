# config.py
from pathtracer.camera.camera import Camera
from pathtracer.errors import ConfigurationError

# Named render presets; each entry sets samples per pixel, bounce limit and width.
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 4, "width": 200},
    "balanced": {"samples": 10, "bounces": 10, "width": 400},
    "high_quality": {"samples": 100, "bounces": 50, "width": 800},
}

DEFAULT_QUALITY = "balanced"


def apply_quality(camera: Camera, name: str) -> Camera:
    """Copy the settings of preset `name` onto `camera` and return it."""
    try:
        quality = QUALITY_LEVELS[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}") from None
    camera.samples_per_pixel = quality["samples"]
    camera.max_depth = quality["bounces"]
    camera.image_width = quality["width"]
    return camera


def parse_tile_grid(text: str):
    """Parse "ROWSxCOLS" (or a single number N for an N x N grid)."""
    parts = text.lower().split("x")
    try:
        if len(parts) == 1:
            rows = cols = int(parts[0])
        elif len(parts) == 2:
            rows, cols = int(parts[0]), int(parts[1])
        else:
            raise ValueError(text)
    except ValueError:
        raise ConfigurationError(f"tile grid must look like ROWSxCOLS, got {text!r}") from None
    if rows <= 0 or cols <= 0:
        raise ConfigurationError(f"tile grid must be positive, got {text!r}")
    return rows, cols

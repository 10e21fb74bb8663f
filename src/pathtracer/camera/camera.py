# camera/camera.py
import math
import numbers

from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import as_vector, degrees_to_radians, random_in_unit_disk
from pathtracer.errors import ConfigurationError


class Camera:
    """
    A positionable thin-lens camera.

    The constructor arguments are the user-facing configuration. Derived state
    (image height, pixel deltas, basis vectors, defocus disk) is computed by
    initialize(), which the renderer calls once before dispatching work.
    Changing any configuration attribute marks the derived state stale.
    """

    _CONFIG_FIELDS = (
        "aspect_ratio", "image_width", "samples_per_pixel", "max_depth",
        "vfov", "lookfrom", "lookat", "vup", "defocus_angle", "focus_dist",
    )

    def __init__(self, aspect_ratio: float = 16.0 / 9.0, image_width: int = 400,
                 samples_per_pixel: int = 10, max_depth: int = 10, vfov: float = 90.0,
                 lookfrom=None, lookat=None, vup=None,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0):
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.samples_per_pixel = samples_per_pixel  # Random samples for each pixel
        self.max_depth = max_depth                  # Maximum number of ray bounces
        self.vfov = vfov                            # Vertical view angle in degrees
        self.lookfrom = lookfrom if lookfrom is not None else Vector3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Vector3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)  # Camera-relative "up"
        self.defocus_angle = defocus_angle          # Cone angle through each pixel, degrees
        self.focus_dist = focus_dist                # Distance to the plane of perfect focus
        self._initialized = False

    def __setattr__(self, name, value):
        if name in Camera._CONFIG_FIELDS:
            if name in ("lookfrom", "lookat", "vup"):
                value = as_vector(value)
            object.__setattr__(self, "_initialized", False)
        object.__setattr__(self, name, value)

    @property
    def initialized(self) -> bool:
        return self._initialized

    def validate(self):
        """Raise ConfigurationError if the configuration cannot be rendered."""
        if not isinstance(self.image_width, numbers.Integral) or self.image_width <= 0:
            raise ConfigurationError(f"image_width must be a positive integer, got {self.image_width!r}")
        if not isinstance(self.samples_per_pixel, numbers.Integral) or self.samples_per_pixel <= 0:
            raise ConfigurationError(f"samples_per_pixel must be a positive integer, got {self.samples_per_pixel!r}")
        if not isinstance(self.max_depth, numbers.Integral) or self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")
        if not math.isfinite(self.aspect_ratio) or self.aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be positive, got {self.aspect_ratio!r}")
        if not 0 < self.vfov < 180:
            raise ConfigurationError(f"vfov must lie in (0, 180) degrees, got {self.vfov!r}")
        if not math.isfinite(self.defocus_angle) or self.defocus_angle < 0:
            raise ConfigurationError(f"defocus_angle must be >= 0, got {self.defocus_angle!r}")
        if not math.isfinite(self.focus_dist) or self.focus_dist <= 0:
            raise ConfigurationError(f"focus_dist must be positive, got {self.focus_dist!r}")
        for name in ("lookfrom", "lookat", "vup"):
            v = getattr(self, name)
            if v is None or not v.is_finite():
                raise ConfigurationError(f"{name} must be a finite vector, got {v!r}")
        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ConfigurationError("lookfrom and lookat must be distinct points")
        if self.vup.cross(view).near_zero():
            raise ConfigurationError("vup must not be parallel to the viewing direction")

    def initialize(self):
        """Validate the configuration and compute the derived viewing state."""
        self.validate()

        image_height = int(self.image_width / self.aspect_ratio)
        image_height = max(1, image_height)

        center = self.lookfrom

        # Determine viewport dimensions.
        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        # Use the real pixel ratio, not the requested one, so pixels stay square.
        viewport_width = viewport_height * (self.image_width / image_height)

        # Orthonormal basis for the camera frame.
        w = (self.lookfrom - self.lookat).normalize()
        u = self.vup.cross(w).normalize()
        v = w.cross(u)

        viewport_u = u * viewport_width    # Across the horizontal viewport edge
        viewport_v = -v * viewport_height  # Down the vertical viewport edge

        pixel_delta_u = viewport_u / self.image_width
        pixel_delta_v = viewport_v / image_height

        viewport_upper_left = center - w * self.focus_dist - viewport_u / 2 - viewport_v / 2
        pixel00_loc = viewport_upper_left + (pixel_delta_u + pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))

        derived = {
            "image_height": image_height,
            "center": center,
            "u": u,
            "v": v,
            "w": w,
            "pixel_delta_u": pixel_delta_u,
            "pixel_delta_v": pixel_delta_v,
            "pixel00_loc": pixel00_loc,
            "defocus_disk_u": u * defocus_radius,
            "defocus_disk_v": v * defocus_radius,
            "pixel_samples_scale": 1.0 / self.samples_per_pixel,
        }
        for name, value in derived.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "_initialized", True)
        return self

    def _require_initialized(self):
        if not self._initialized:
            self.initialize()

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Camera ray originating from the defocus disk and directed at a randomly
        sampled point around pixel (i, j).
        """
        self._require_initialized()
        offset = sample_square(rng)
        pixel_sample = (self.pixel00_loc +
                        self.pixel_delta_u * (i + offset.x) +
                        self.pixel_delta_v * (j + offset.y))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng) -> Vector3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def __repr__(self) -> str:
        return (f"Camera(image_width={self.image_width}, aspect_ratio={self.aspect_ratio}, "
                f"samples_per_pixel={self.samples_per_pixel}, max_depth={self.max_depth}, "
                f"vfov={self.vfov}, lookfrom={self.lookfrom!r}, lookat={self.lookat!r})")


def sample_square(rng) -> Vector3:
    """Random point in the [-0.5, 0.5] x [-0.5, 0.5] unit square."""
    return Vector3(rng.random() - 0.5, rng.random() - 0.5, 0)

# core/utils.py
import math
from typing import Optional

from pathtracer.core.vector import Vector3

# Every sampler takes an explicit generator (numpy.random.Generator or
# anything exposing uniform()/random()) so that no random state is shared
# between render workers.


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_vector(rng, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(low, high),
                   rng.uniform(low, high),
                   rng.uniform(low, high))


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1, 1)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector on the surface of the unit sphere.
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Tiny samples lose precision when normalized.
        if p.length_squared() > 1e-160:
            return p.normalize()


def random_in_unit_disk(rng) -> Vector3:
    """Random point in the z=0 unit disk, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n using Snell's
    law. etai_over_etat is the ratio of refractive indices across the surface.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel


def as_vector(value) -> Optional[Vector3]:
    """Accepts a Vector3 or any 3-sequence of numbers."""
    if value is None or isinstance(value, Vector3):
        return value
    x, y, z = value
    return Vector3(float(x), float(y), float(z))

# renderer/integrator.py
import math
from pathtracer.core.vector import Color
from pathtracer.core.ray import Ray
from pathtracer.core.interval import Interval
from pathtracer.geometry.hittable import Hittable

# Lower bound on hit distance; avoids re-hitting the surface a ray leaves from.
SHADOW_ACNE_EPSILON = 0.001

BLACK = Color(0.0, 0.0, 0.0)
SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def background(ray: Ray) -> Color:
    """Vertical white to sky-blue gradient seen by rays that miss everything."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - a) + SKY_BLUE * a


def ray_color(ray: Ray, world: Hittable, depth: int, max_depth: int, rng) -> Color:
    """
    Radiance carried back along `ray`. Each bounce multiplies in the surface
    attenuation; once `depth` reaches `max_depth` no more light is gathered.
    """
    if depth >= max_depth:
        return BLACK

    rec = world.hit(ray, Interval(SHADOW_ACNE_EPSILON, math.inf))
    if rec is None:
        return background(ray)

    result = rec.material.scatter(ray, rec, rng)
    if result is None:
        return BLACK
    scattered, attenuation = result
    return attenuation * ray_color(scattered, world, depth + 1, max_depth, rng)

import numpy as np
import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.lambertian import Lambertian


class ScriptedRng:
    """Stands in for numpy.random.Generator, replaying fixed draws."""

    def __init__(self, uniforms=(), randoms=()):
        self.uniforms = list(uniforms)
        self.randoms = list(randoms)

    def uniform(self, low=0.0, high=1.0):
        return self.uniforms.pop(0)

    def random(self):
        return self.randoms.pop(0)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def unit_sphere_world():
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))))
    return world

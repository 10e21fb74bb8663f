# scenes.py
import sys

from pathtracer.core.vector import Vector3
from pathtracer.camera.camera import Camera
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.presets import DielectricPresets, DiffusePresets, MetalPresets


def _add(world: HittableList, sphere: Sphere, label: str, verbose: bool):
    world.add(sphere)
    if verbose:
        print(f"Added {label} at ({sphere.center.x}, {sphere.center.y}, {sphere.center.z}) "
              f"with radius {sphere.radius}", file=sys.stderr)


def default_scene(verbose: bool = False) -> HittableList:
    """A grey sphere resting on a large ground sphere."""
    world = HittableList()
    _add(world, Sphere(Vector3(0, 0, -1), 0.5, DiffusePresets.grey()), "grey sphere", verbose)
    _add(world, Sphere(Vector3(0, -100.5, -1), 100, DiffusePresets.grey()), "ground sphere", verbose)
    return world


def showcase_scene(verbose: bool = False) -> HittableList:
    """Diffuse, hollow glass and fuzzy metal spheres side by side."""
    world = HittableList()
    ground = DiffusePresets.ground()
    glass = DielectricPresets.glass()

    _add(world, Sphere(Vector3(0, -100.5, -1), 100, ground), "ground sphere", verbose)
    _add(world, Sphere(Vector3(0, 0, -1.2), 0.5, DiffusePresets.matte_blue()), "diffuse sphere", verbose)
    _add(world, Sphere(Vector3(-1, 0, -1), 0.5, glass), "glass sphere", verbose)
    _add(world, Sphere(Vector3(-1, 0, -1), 0.4, DielectricPresets.air_bubble(glass.ref_idx)),
         "air bubble", verbose)
    _add(world, Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.brushed_metal()), "metal sphere", verbose)
    return world


def material_spheres_scene(verbose: bool = False) -> HittableList:
    """Three spheres, one per material kind, sharing materials with their copies."""
    world = HittableList()
    gold = MetalPresets.gold()
    _add(world, Sphere(Vector3(0, -1000, 0), 1000, Lambertian(Vector3(0.5, 0.5, 0.5))),
         "ground sphere", verbose)
    _add(world, Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()), "glass sphere", verbose)
    _add(world, Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))),
         "diffuse sphere", verbose)
    _add(world, Sphere(Vector3(4, 1, 0), 1.0, gold), "gold sphere", verbose)
    _add(world, Sphere(Vector3(4, 0.3, 2), 0.3, gold), "small gold sphere", verbose)
    return world


def default_camera() -> Camera:
    return Camera()


def showcase_camera() -> Camera:
    return Camera(vfov=20, lookfrom=Vector3(-2, 2, 1), lookat=Vector3(0, 0, -1),
                  vup=Vector3(0, 1, 0), defocus_angle=10.0, focus_dist=3.4)


def material_spheres_camera() -> Camera:
    return Camera(vfov=20, lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0),
                  vup=Vector3(0, 1, 0), defocus_angle=0.6, focus_dist=10.0)


# name -> (world factory, camera factory)
SCENES = {
    "default": (default_scene, default_camera),
    "showcase": (showcase_scene, showcase_camera),
    "materials": (material_spheres_scene, material_spheres_camera),
}

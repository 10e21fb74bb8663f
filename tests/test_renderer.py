import numpy as np
import pytest

from pathtracer.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError, RenderError
from pathtracer.geometry import Hittable, HittableList, Sphere
from pathtracer.materials import Dielectric, Lambertian, Metal
from pathtracer.renderer import Renderer, partition, render, render_tile


class ExplodingWorld(Hittable):
    """Fails for rays through the right half of the image."""

    def hit(self, ray, ray_t):
        if ray.direction.x > 0.5:
            raise ZeroDivisionError("boom")
        return None


@pytest.fixture
def world():
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.8, 0.8, 0.0))))
    world.add(Sphere(Vector3(0, 0, -1.2), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, Dielectric(1.5)))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.3)))
    return world


def small_camera(**overrides):
    settings = dict(image_width=12, aspect_ratio=2.0, samples_per_pixel=2, max_depth=4)
    settings.update(overrides)
    return Camera(**settings)


class TestRenderer:

    def test_output_shape(self, world):
        image = Renderer(small_camera(), tiles=(2, 3), executor="thread", seed=1, verbose=False).render(world)
        assert image.shape == (6, 12, 3)
        assert image.dtype == np.uint8

    def test_same_seed_is_byte_identical(self, world):
        first = render(small_camera(), world, tiles=(2, 2), executor="thread", seed=42, verbose=False)
        second = render(small_camera(), world, tiles=(2, 2), executor="thread", seed=42, verbose=False)
        assert first.tobytes() == second.tobytes()

    def test_result_independent_of_worker_count(self, world):
        one = render(small_camera(), world, tiles=(3, 2), workers=1, executor="thread", seed=9, verbose=False)
        many = render(small_camera(), world, tiles=(3, 2), workers=6, executor="thread", seed=9, verbose=False)
        assert np.array_equal(one, many)

    def test_process_pool_matches_thread_pool(self, world):
        threaded = render(small_camera(), world, tiles=(2, 2), executor="thread", seed=3, verbose=False)
        forked = render(small_camera(), world, tiles=(2, 2), workers=2, executor="process", seed=3,
                        verbose=False)
        assert np.array_equal(threaded, forked)

    def test_tiles_assembled_in_place(self, world):
        camera = small_camera()
        image = Renderer(camera, tiles=(2, 3), executor="thread", seed=5, verbose=False).render(world)
        tiles = partition(camera.image_width, camera.image_height, 2, 3)
        seeds = np.random.SeedSequence(5).spawn(len(tiles))
        for tile, seed in zip(tiles, seeds):
            expected = render_tile(tile, camera, world, seed)
            assert np.array_equal(image[tile.y0:tile.y1, tile.x0:tile.x1], expected)

    def test_empty_world_is_sky_gradient(self):
        image = render(small_camera(samples_per_pixel=1), HittableList(), tiles=(1, 1),
                       executor="thread", seed=0, verbose=False)
        # Top rows are bluer than bottom rows, red falls off going up.
        assert image[0, :, 0].mean() < image[-1, :, 0].mean()
        assert (image[:, :, 2] == 255).all()

    def test_progress_goes_to_stderr(self, world, capsys):
        render(small_camera(samples_per_pixel=1), world, tiles=(1, 2), executor="thread", seed=0)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Tiles remaining: 0" in captured.err
        assert "Done." in captured.err


class TestRendererErrors:

    @pytest.mark.parametrize("options", [
        {"tiles": (0, 2)},
        {"workers": 0},
        {"executor": "gpu"},
        {"seed": -1},
    ])
    def test_invalid_options(self, world, options):
        with pytest.raises(ConfigurationError):
            Renderer(small_camera(), verbose=False, **options).render(world)

    def test_invalid_camera_fails_before_rendering(self):
        with pytest.raises(ConfigurationError):
            Renderer(small_camera(samples_per_pixel=0), executor="thread", verbose=False).render(ExplodingWorld())

    def test_render_tile_requires_initialized_camera(self, world):
        camera = small_camera()
        tile = partition(camera.image_width, 6, 1, 1)[0]
        with pytest.raises(ConfigurationError):
            render_tile(tile, camera, world, np.random.SeedSequence(0))
        assert not camera.initialized

    def test_tile_failure_is_reported(self):
        renderer = Renderer(small_camera(samples_per_pixel=1), tiles=(1, 2), executor="thread",
                            seed=0, verbose=False)
        with pytest.raises(RenderError) as info:
            renderer.render(ExplodingWorld())
        assert isinstance(info.value.__cause__, ZeroDivisionError)
        assert info.value.tile.index == 1

from pathtracer.renderer.raytracer import Renderer, render, render_tile
from pathtracer.renderer.integrator import ray_color, background
from pathtracer.renderer.tiles import Tile, partition
from pathtracer.renderer.color import encode_pixels
from pathtracer.renderer.image import save_image, write_ppm

__all__ = [
    "Renderer", "render", "render_tile", "ray_color", "background",
    "Tile", "partition", "encode_pixels", "save_image", "write_ppm",
]

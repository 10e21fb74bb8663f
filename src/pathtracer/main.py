# main.py
import argparse
import sys

from pathtracer.config import DEFAULT_QUALITY, QUALITY_LEVELS, apply_quality, parse_tile_grid
from pathtracer.errors import ConfigurationError, RenderError
from pathtracer.renderer.image import save_image, write_ppm
from pathtracer.renderer.raytracer import DEFAULT_TILE_GRID, EXECUTORS, Renderer
from pathtracer.scenes import SCENES


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a sphere scene with a Monte Carlo path tracer.")
    p.add_argument("--scene", choices=sorted(SCENES), default="default")
    p.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=DEFAULT_QUALITY)
    p.add_argument("--width", type=int, help="image width in pixels (overrides --quality)")
    p.add_argument("--samples", type=int, help="samples per pixel (overrides --quality)")
    p.add_argument("--max-depth", type=int, help="bounce limit (overrides --quality)")
    p.add_argument("--tiles", default="%dx%d" % DEFAULT_TILE_GRID, help="tile grid as ROWSxCOLS")
    p.add_argument("--workers", type=int, help="worker count, defaults to the CPU count")
    p.add_argument("--executor", choices=sorted(EXECUTORS), default="process")
    p.add_argument("--seed", type=int, help="seed for reproducible renders")
    p.add_argument("--output", "-o", help="output file; .ppm is written as text, other "
                                          "extensions through Pillow. Defaults to PPM on stdout")
    p.add_argument("--quiet", "-q", action="store_true", help="no progress output")
    return p


class Application:
    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.verbose = not args.quiet

        world_factory, camera_factory = SCENES[args.scene]
        self.camera = apply_quality(camera_factory(), args.quality)
        if args.width is not None:
            self.camera.image_width = args.width
        if args.samples is not None:
            self.camera.samples_per_pixel = args.samples
        if args.max_depth is not None:
            self.camera.max_depth = args.max_depth

        self.renderer = Renderer(
            self.camera,
            tiles=parse_tile_grid(args.tiles),
            workers=args.workers,
            executor=args.executor,
            seed=args.seed,
            verbose=self.verbose,
        )
        # Fail on bad settings before the scene is built.
        self.renderer.plan()

        if self.verbose:
            print(f"\n=== Creating World: {args.scene} ===", file=sys.stderr)
        self.world = world_factory(verbose=self.verbose)

    def run(self):
        image = self.renderer.render(self.world)
        if self.args.output:
            save_image(image, self.args.output)
            if self.verbose:
                print(f"Wrote {self.args.output}", file=sys.stderr)
        else:
            write_ppm(image, sys.stdout)
            sys.stdout.flush()
        return image


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        app = Application(args)
        app.run()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except RenderError as e:
        print(f"\nRender failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

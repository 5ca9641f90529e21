# main.py
import argparse
import random
import sys
import time
from core.errors import ConfigError, ImageWriteError, RenderError
from core.log import get_logger
from camera.camera import Camera
from geometry.scenes import random_scene, single_sphere_scene
from renderer.config import RenderConfig
from renderer.image_writer import save_image
from renderer.raytracer import Renderer

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a scene of spheres with a path tracer and write it as an image.")
    parser.add_argument("--width", type=int, dest="image_width", help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, help="width / height")
    parser.add_argument("--samples", type=int, dest="samples_per_pixel", help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum bounces per path")
    parser.add_argument("--threads", type=int, dest="thread_count", help="worker threads")
    parser.add_argument("--seed", type=int, help="fix the random source for reproducible output")
    parser.add_argument("--grid-extent", type=int, help="half-size of the small sphere grid")
    parser.add_argument("-o", "--output", help="output file (.ppm is written as text)")
    parser.add_argument("--scene", choices=("random", "single"), default="random")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser

def build_camera(config: RenderConfig) -> Camera:
    look_from, look_at, vup = config.camera_vectors()
    return Camera(look_from, look_at, vup, config.vfov, config.aspect_ratio,
                  aperture=config.aperture, focus_dist=config.focus_dist)

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger("raytracer", args.log_level)

    try:
        config = RenderConfig.from_env().with_overrides(
            image_width=args.image_width,
            aspect_ratio=args.aspect_ratio,
            samples_per_pixel=args.samples_per_pixel,
            max_depth=args.max_depth,
            thread_count=args.thread_count,
            seed=args.seed,
            grid_extent=args.grid_extent,
            output=args.output,
        )
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.scene == "single":
        world = single_sphere_scene()
    else:
        world = random_scene(random.Random(config.seed), config.grid_extent)
    camera = build_camera(config)

    start = time.perf_counter()
    try:
        image = Renderer(config).render(world, camera)
    except RenderError as e:
        logger.error("Render failed: %s", e)
        return 1
    elapsed = time.perf_counter() - start
    logger.info("Processing time: %.2fs", elapsed)

    try:
        save_image(config.output, image)
    except ImageWriteError as e:
        logger.error("Error: %s", e)
        return 1

    logger.info("Ray tracing completed.")
    return 0

if __name__ == "__main__":
    sys.exit(main())

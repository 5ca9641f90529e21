"""End-to-end rendering through the threaded scheduler."""

import random

import numpy as np
import pytest

from core.errors import RenderError
from geometry.scenes import random_scene, single_sphere_scene
from main import build_camera
from renderer.config import RenderConfig
from renderer.raytracer import Renderer


def render_random(config):
    world = random_scene(random.Random(config.seed), config.grid_extent)
    return Renderer(config).render(world, build_camera(config))


def test_buffer_shape_and_type(tiny_config):
    image = render_random(tiny_config)
    assert image.pixels.shape == (4, 8, 3)
    assert image.pixels.dtype == np.uint8


def test_seeded_render_is_reproducible(tiny_config):
    first = render_random(tiny_config)
    second = render_random(tiny_config)
    assert first.tobytes() == second.tobytes()


def test_seeded_render_ignores_thread_count(tiny_config):
    single = render_random(tiny_config.with_overrides(thread_count=1))
    many = render_random(tiny_config.with_overrides(thread_count=4))
    assert single.tobytes() == many.tobytes()


def test_more_threads_than_rows_still_fills_image(tiny_config):
    config = tiny_config.with_overrides(thread_count=50, aspect_ratio=8.0)
    image = Renderer(config).render(single_sphere_scene(), build_camera(config))
    assert image.height == 1
    # Every pixel sees either sky or a lit surface, never the untouched zero
    assert image.pixels.reshape(-1, 3).sum(axis=1).min() > 0


@pytest.fixture
def single_sphere_config():
    return RenderConfig(
        image_width=21,
        aspect_ratio=1.0,
        samples_per_pixel=4,
        max_depth=5,
        thread_count=4,
        look_from=(0.0, 0.0, 3.0),
        look_at=(0.0, 0.0, 0.0),
        vfov=40.0,
        aperture=0.0,
        focus_dist=3.0,
        seed=1,
    )


def test_single_sphere_center_is_shaded_and_corners_are_sky(single_sphere_config):
    config = single_sphere_config
    image = Renderer(config).render(single_sphere_scene(), build_camera(config))

    # Sky blue channel is always 1.0, which encodes as 255
    for row, col in ((0, 0), (0, 20), (20, 0), (20, 20)):
        r, g, b = image.get_pixel(row, col)
        assert b == 255
        assert r <= g <= b

    # One diffuse bounce (albedo 0.5) into the sky: sqrt(0.5) * 256 -> 181
    r, g, b = image.get_pixel(10, 10)
    assert b == 181
    assert r < 181 and g < 181


def test_worker_failure_aborts_render(tiny_config):
    class BrokenCamera:
        def get_ray(self, u, v, rng):
            raise ZeroDivisionError("broken lens")

    with pytest.raises(RenderError):
        Renderer(tiny_config).render(single_sphere_scene(), BrokenCamera())

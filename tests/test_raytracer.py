"""Tests for ray_color, row partitioning and progress reporting."""

import threading

import pytest

from conftest import assert_vec_close
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from renderer.raytracer import RenderProgress, partition_rows, ray_color, sky_color

ALBEDO = Vector3(0.5, 0.4, 0.3)


def sphere_world():
    return HittableList([Sphere(Vector3(0, 0, -1), 0.5, Lambertian(ALBEDO))])


class TestRayColor:

    def test_zero_depth_is_black(self, rng):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        for world in (sphere_world(), HittableList()):
            assert tuple(ray_color(ray, world, 0, rng)) == (0.0, 0.0, 0.0)

    def test_negative_depth_is_black(self, rng):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert tuple(ray_color(ray, HittableList(), -3, rng)) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("direction, expected", [
        (Vector3(0, 1, 0), (0.5, 0.7, 1.0)),
        (Vector3(0, -1, 0), (1.0, 1.0, 1.0)),
        (Vector3(1, 0, 0), (0.75, 0.85, 1.0)),
    ])
    def test_empty_world_returns_sky(self, rng, direction, expected):
        ray = Ray(Vector3(0, 0, 0), direction * 3)
        color = ray_color(ray, HittableList(), 10, rng)
        assert_vec_close(color, expected, tol=1e-12)
        assert_vec_close(color, tuple(sky_color(ray)))

    def test_budget_spent_on_first_bounce_is_black(self, rng):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert tuple(ray_color(ray, sphere_world(), 1, rng)) == (0.0, 0.0, 0.0)

    def test_one_bounce_into_sky_is_tinted_by_albedo(self, rng):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        for _ in range(30):
            color = ray_color(ray, sphere_world(), 2, rng)
            # A convex sphere cannot be hit twice, so the path ends in the sky
            assert color.z == pytest.approx(ALBEDO.z)
            assert 0 < color.x <= ALBEDO.x
            assert 0 < color.y <= ALBEDO.y

    def test_huge_depth_does_not_recurse(self, rng):
        # Two facing mirrors bounce until the budget runs out
        from materials.metal import Metal
        mirror = Metal(Vector3(0.9, 0.9, 0.9), 0.0)
        world = HittableList([
            Sphere(Vector3(0, 0, -1001), 1000, mirror),
            Sphere(Vector3(0, 0, 1001), 1000, mirror),
        ])
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, 5000, rng)
        assert tuple(color) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("height, workers", [
    (12, 4), (10, 3), (200, 20), (7, 7), (5, 8), (1, 1), (97, 6),
])
def test_partition_covers_every_row_once(height, workers):
    bands = partition_rows(height, workers)
    rows = [row for band in bands for row in band]
    assert rows == list(range(height))
    assert len(bands) == min(height, workers)
    sizes = [len(band) for band in bands]
    assert max(sizes) - min(sizes) <= 1
    assert all(size > 0 for size in sizes)


def test_partition_gives_remainder_to_first_bands():
    assert [len(b) for b in partition_rows(10, 3)] == [4, 3, 3]


def test_progress_counts_every_row_across_threads():
    progress = RenderProgress(400)

    def work():
        for _ in range(100):
            progress.advance()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert progress.completed == 400

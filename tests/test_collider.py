import pygame
import pytest

from catdefense.collider import (
    is_circle_overlap,
    is_point_in_bitmap,
    is_point_in_rect,
    is_rect_overlap,
)
from catdefense.point import Point


@pytest.fixture
def bitmap():
    surface = pygame.Surface((4, 4), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    surface.set_at((1, 2), (255, 0, 0, 255))
    return surface


def test_opaque_pixel_is_inside_bitmap(bitmap):
    assert is_point_in_bitmap(Point(1, 2), bitmap) is True


def test_transparent_pixel_is_outside_bitmap(bitmap):
    assert is_point_in_bitmap(Point(2, 1), bitmap) is False


def test_fractional_coordinates_truncate(bitmap):
    assert is_point_in_bitmap(Point(1.9, 2.7), bitmap) is True


def test_point_in_rect_includes_top_left():
    assert is_point_in_rect(Point(10, 20), Point(10, 20), Point(5, 5)) is True


def test_point_in_rect_excludes_far_edges():
    assert is_point_in_rect(Point(15, 22), Point(10, 20), Point(5, 5)) is False
    assert is_point_in_rect(Point(12, 25), Point(10, 20), Point(5, 5)) is False


def test_point_in_rect_interior():
    assert is_point_in_rect(Point(12, 22), Point(10, 20), Point(5, 5)) is True


def test_rect_overlap_true_for_intersecting():
    assert is_rect_overlap(Point(0, 0), Point(10, 10), Point(5, 5), Point(15, 15)) is True


def test_rect_overlap_false_for_touching_edges():
    assert is_rect_overlap(Point(0, 0), Point(10, 10), Point(10, 0), Point(20, 10)) is False


def test_rect_overlap_is_symmetric():
    a = (Point(0, 0), Point(4, 4))
    b = (Point(3, -2), Point(8, 1))
    assert is_rect_overlap(*a, *b) == is_rect_overlap(*b, *a)


def test_rect_contained_overlaps():
    assert is_rect_overlap(Point(0, 0), Point(100, 100), Point(40, 40), Point(60, 60)) is True


def test_circle_overlap_close_circles():
    assert is_circle_overlap(Point(0, 0), 2, Point(1, 1), 2) is True


def test_touching_circles_do_not_overlap():
    assert is_circle_overlap(Point(0, 0), 1, Point(2, 0), 1) is False


def test_distant_circles_do_not_overlap():
    assert is_circle_overlap(Point(0, 0), 1, Point(50, 50), 1) is False
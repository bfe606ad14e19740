"""
Unit tests for pageflow/borders/geometry.py - rounded rectangle paths
"""
import math

import pytest

from pageflow.borders.geometry import (
    KAPPA,
    clamp_radius,
    rect_path,
    rounded_rect_path,
    rounded_rect_up_path,
    rounded_rect_mid_path,
    rounded_rect_down_path,
)


def count_curves(commands):
    return sum(1 for cmd in commands if cmd[0] == "C")


class TestKappa:
    """Test the bezier circle constant."""

    def test_value(self):
        assert KAPPA == pytest.approx(4 * (math.sqrt(2) - 1) / 3)
        assert KAPPA == pytest.approx(0.5522847, rel=1e-6)


class TestClampRadius:
    """Test radius clamping against width and segment height."""

    def test_radius_within_limits(self):
        assert clamp_radius(8, 400, 100) == 8

    def test_radius_limited_by_width(self):
        assert clamp_radius(50, 40, 300) == 20

    def test_radius_limited_by_segment_height(self):
        assert clamp_radius(8, 400, 6) == 3

    def test_none_radius_is_zero(self):
        assert clamp_radius(None, 100, 100) == 0

    def test_negative_height_never_gives_negative_radius(self):
        assert clamp_radius(8, 100, -20) == 0


class TestRoundedRectPath:
    """Test the closed rounded rectangle."""

    def test_four_corners_and_closed(self):
        commands = rounded_rect_path(10, 20, 100, 50, 5)
        assert count_curves(commands) == 4
        assert commands[0] == ("M", 15, 20)
        assert commands[-1] == ("Z",)

    def test_zero_radius_collapses_curves_onto_corners(self):
        commands = rounded_rect_path(0, 0, 100, 50, 0)
        curves = [cmd for cmd in commands if cmd[0] == "C"]
        corner_points = {(cmd[5], cmd[6]) for cmd in curves}
        assert corner_points == {(100, 0), (100, 50), (0, 50), (0, 0)}


class TestSegmentPaths:
    """Test the top, middle and bottom pieces."""

    def test_up_is_open_at_the_bottom(self):
        commands = rounded_rect_up_path(50, 100, 400, 150, 8)
        assert commands[0] == ("M", 50, 250)
        assert commands[-1] == ("L", 450, 250)
        assert count_curves(commands) == 2
        assert ("Z",) not in commands

    def test_up_top_edge_sits_at_y(self):
        commands = rounded_rect_up_path(50, 100, 400, 150, 8)
        assert ("L", 442, 100) in commands

    def test_mid_has_two_vertical_strokes(self):
        commands = rounded_rect_mid_path(50, 20, 400, 240, 8)
        assert commands == [
            ("M", 50, 260),
            ("L", 50, 20),
            ("M", 450, 260),
            ("L", 450, 20),
        ]
        assert count_curves(commands) == 0

    def test_down_is_open_at_the_top(self):
        commands = rounded_rect_down_path(50, 20, 400, 80, 8)
        assert commands[0] == ("M", 450, 20)
        assert commands[-1] == ("L", 50, 20)
        assert count_curves(commands) == 2

    def test_down_bottom_edge_sits_at_y_plus_h(self):
        commands = rounded_rect_down_path(50, 20, 400, 80, 8)
        assert ("L", 58, 100) in commands

    def test_radius_clamped_per_segment(self):
        # 10pt high segment cannot carry an 8pt radius
        commands = rounded_rect_up_path(0, 0, 100, 10, 8)
        assert commands[1] == ("L", 0, 5)


class TestRectPath:
    def test_plain_rectangle(self):
        assert rect_path(1, 2, 3, 4) == [
            ("M", 1, 2), ("L", 4, 2), ("L", 4, 6), ("L", 1, 6), ("Z",),
        ]

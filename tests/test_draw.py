import math

import numpy as np
import pytest

from canvasui.ui import Surface, DrawClear, DrawConfig
from canvasui.ui.draw import arc_sweep, ellipse_points


def test_arc_sweep():
    assert arc_sweep(0, math.tau) == math.tau
    assert arc_sweep(0, 3 * math.pi) == math.tau
    assert arc_sweep(0, math.pi / 2) == pytest.approx(math.pi / 2)
    assert arc_sweep(0, math.pi / 2, anticlockwise=True) == pytest.approx(-1.5 * math.pi)
    assert arc_sweep(math.tau, 0, anticlockwise=True) == -math.tau


def test_ellipse_points_full_turn():
    points = ellipse_points(0, 0, 2, 1, 0, 0, math.tau, segments=16)
    assert points.shape == (16, 2)
    assert points[0] == pytest.approx([2, 0])
    assert np.abs(points[:, 1]).max() == pytest.approx(1)


def test_ellipse_points_rotation():
    points = ellipse_points(0, 0, 2, 1, math.pi / 2, 0, math.tau, segments=8)
    # Major axis now vertical
    assert points[0] == pytest.approx([0, 2], abs=1e-12)


def test_short_arc_uses_min_segments():
    points = ellipse_points(0, 0, 1, 1, 0, 0, 0.01, segments=64, min_segments=2)
    assert len(points) == 3


def test_segment_count_is_configurable():
    surface = Surface(100, 100, config=DrawConfig(ellipse_segments=12))
    ctx = surface.get_context()
    ctx.begin_path()
    ctx.ellipse(50, 50, 10, 10, 0, 0, math.tau)
    ctx.fill()
    assert len(ctx.batch.fills[0].points) == 12


def test_transform_applies_to_paths():
    ctx = Surface(100, 100).get_context()
    ctx.translate(10, 20)
    ctx.fill_rect(0, 0, 5, 5)
    assert ctx.batch.fills[0].points[0] == pytest.approx([10, 20])


def test_save_restore():
    ctx = Surface(100, 100).get_context()
    ctx.save()
    ctx.fill_style = "rgba(1, 2, 3, 0.5)"
    ctx.translate(5, 5)
    ctx.restore()
    assert ctx.fill_style == "rgba(0, 0, 0, 1)"
    assert np.array_equal(ctx.transform, np.identity(3))

    # Unbalanced restore is ignored
    ctx.restore()


def test_reset_transform():
    ctx = Surface(100, 100).get_context()
    ctx.translate(10, 10)
    ctx.rotate(1.0)
    ctx.reset_transform()
    assert np.array_equal(ctx.transform, np.identity(3))

    ctx.fill_rect(1, 2, 3, 4)
    assert ctx.batch.fills[0].points[0] == pytest.approx([1, 2])


def test_invalid_style_rejected():
    ctx = Surface(100, 100).get_context()
    with pytest.raises(ValueError):
        ctx.fill_style = "not a color"
    assert ctx.fill_style == "rgba(0, 0, 0, 1)"


def test_line_width_ignores_non_positive():
    ctx = Surface(100, 100).get_context()
    ctx.line_width = 4
    ctx.line_width = 0
    ctx.line_width = -2
    assert ctx.line_width == 4


def test_empty_path_paints_nothing():
    ctx = Surface(100, 100).get_context()
    ctx.begin_path()
    ctx.fill()
    ctx.stroke()
    assert len(ctx.batch) == 0


def test_full_clear_drops_previous_commands():
    surface = Surface(100, 50)
    ctx = surface.get_context()
    ctx.fill_rect(0, 0, 10, 10)

    ctx.clear_rect(10, 10, 5, 5)
    assert len(ctx.batch) == 2

    ctx.clear_rect(0, 0, 100, 50)
    assert ctx.batch.commands == [DrawClear(0.0, 0.0, 100.0, 50.0)]


def test_clear_under_transform_is_kept():
    surface = Surface(100, 50)
    ctx = surface.get_context()
    ctx.fill_rect(0, 0, 10, 10)
    ctx.translate(1, 0)
    ctx.clear_rect(0, 0, 100, 50)
    assert len(ctx.batch) == 2

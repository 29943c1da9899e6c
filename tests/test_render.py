import numpy as np
import pytest

from complexmath.core import Complex
from complexmath.iterators import pick_shader
from complexmath.render import render_grid, _colorize_continuous


def test_shader_render_shape_and_dtype():
    img = render_grid(shader=pick_shader("sqrt"), width=8, height=6, color_mode="continuous")
    assert img.shape == (6, 8, 3)
    assert img.dtype == np.uint8


def test_map_render_iters_grayscale():
    img = render_grid(
        map_name="quadratic", c=Complex(-0.8, 0.156),
        xmin=-1.5, xmax=1.5, ymin=-1.0, ymax=1.0,
        width=12, height=10, max_iter=30, color_mode="iters",
    )
    assert img.shape == (10, 12, 3)
    # grayscale: all three channels equal
    assert np.array_equal(img[..., 0], img[..., 1])
    assert np.array_equal(img[..., 1], img[..., 2])
    # the window contains both escaping and bounded points
    assert img.min() < img.max()


def test_map_render_with_cmap():
    img = render_grid(
        map_name="quadratic", c=Complex(-0.8, 0.156),
        width=6, height=6, max_iter=20, color_mode="iters", cmap="magma",
    )
    assert img.shape == (6, 6, 3)
    assert img.dtype == np.uint8


def test_step_fn_bound_to_z0():
    calls = []

    def step(z0):
        calls.append(z0)
        return 3, z0

    render_grid(step_fn=step, width=4, height=3, max_iter=10, color_mode="iters")
    assert len(calls) == 12
    assert all(isinstance(z, Complex) for z in calls)


def test_rows_run_top_to_bottom():
    """Row 0 is y = ymax, last row is y = ymin."""
    seen = []

    def shader(z):
        seen.append(z)
        return z

    render_grid(shader=shader, xmin=-1, xmax=1, ymin=-2, ymax=2, width=2, height=3, color_mode="continuous")
    assert seen[0] == Complex(-1, 2)
    assert seen[-1] == Complex(1, -2)


def test_auto_falls_back_to_continuous_for_shaders():
    shader = pick_shader("identity")
    auto = render_grid(shader=shader, width=5, height=5, color_mode="auto")
    cont = render_grid(shader=shader, width=5, height=5, color_mode="continuous")
    assert np.array_equal(auto, cont)


def test_non_finite_pixels_are_black():
    rgb = _colorize_continuous([1.0, np.nan, np.inf], [0.0, 0.0, 1.0])
    assert rgb.shape == (3, 3)
    assert np.all(rgb[1] == 0)
    assert np.all(rgb[2] == 0)
    assert np.any(rgb[0] != 0)


def test_needs_exactly_one_source():
    with pytest.raises(ValueError):
        render_grid(width=2, height=2)
    with pytest.raises(ValueError):
        render_grid(map_name="quadratic", shader=pick_shader("sqrt"), width=2, height=2)


def test_unknown_color_mode():
    with pytest.raises(ValueError):
        render_grid(shader=pick_shader("sqrt"), width=2, height=2, color_mode="neon")

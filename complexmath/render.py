import inspect

import numpy as np

from complexmath.core import Complex, ZERO
from complexmath.iterators import pick_iterator


def _colorize_iters(iters, max_iter, cmap=None):
    """Map iteration counts to grayscale RGB, or through a matplotlib colormap."""
    iters = np.asarray(iters, dtype=np.float32)
    norm = iters / max(max_iter, 1)
    # invert so interior is dark, exterior bright (looks nicer)
    norm = 1.0 - norm

    if cmap is not None:
        import matplotlib

        rgba = matplotlib.colormaps[cmap](norm)
        return (255 * rgba[..., :3]).clip(0, 255).astype(np.uint8)

    gray = (255 * norm).clip(0, 255).astype(np.uint8)
    return np.stack([gray, gray, gray], axis=-1)


def _colorize_continuous(re, im):
    """
    Domain colouring from the real/imaginary parts of the last value.
    Red follows log-magnitude, green follows the argument.
    Pixels with a non-finite value come out black.
    """
    re = np.asarray(re, dtype=np.float32)
    im = np.asarray(im, dtype=np.float32)

    finite = np.isfinite(re) & np.isfinite(im)
    re = np.where(finite, re, 0.0)
    im = np.where(finite, im, 0.0)

    mag = np.hypot(re, im)
    ang = np.arctan2(im, re)

    # log magnitude for dynamic range
    mag_log = np.log1p(mag)
    mag_norm = mag_log / (mag_log.max() + 1e-9)

    # angle in [0,1]
    ang_norm = (ang + np.pi) / (2 * np.pi)

    r = (mag_norm * 255).clip(0, 255).astype(np.uint8)
    g = (ang_norm * 255).clip(0, 255).astype(np.uint8)
    b = ((1 - mag_norm) * 255).clip(0, 255).astype(np.uint8)

    rgb = np.stack([r, g, b], axis=-1)
    rgb[~finite] = 0
    return rgb


def render_grid(
    *,
    # exactly one of map_name (+c), step_fn or shader
    map_name=None,
    c=ZERO,
    step_fn=None,
    shader=None,
    power=2.0,

    xmin=-2.5, xmax=2.5,
    ymin=-2.5, ymax=2.5,
    width=512, height=512,
    max_iter=300,
    escape_radius=10.0,
    color_mode="auto",
    cmap=None,
):
    """
    Evaluate every pixel of a window on the complex plane and colour it.

    Row 0 is the top of the image (y = ymax).

      render_grid(map_name="quadratic", c=Complex(-0.8, 0.156), ...)
      render_grid(step_fn=..., ...)       step_fn(z0) or step_fn(z0, c, max_iter, escape_radius)
      render_grid(shader=..., ...)        shader(z0) -> Complex

    color_mode:
      "iters"       -> by escape iteration count (grayscale or cmap)
      "continuous"  -> domain colouring of the last value
      "auto"        -> iters if they vary; otherwise continuous
    """
    given = [x is not None for x in (map_name, step_fn, shader)]
    if sum(given) != 1:
        raise ValueError("Provide exactly one of map_name, step_fn or shader.")

    if map_name is not None:
        iterator = pick_iterator(map_name, power=power)

        def _step(z0):
            return iterator(z0, c, max_iter, escape_radius)
    elif step_fn is not None:
        sig = inspect.signature(step_fn)
        if len(sig.parameters) == 1:
            # Already bound or only takes z0
            def _step(z0):
                return step_fn(z0)
        else:
            def _step(z0):
                return step_fn(z0, c, max_iter, escape_radius)
    else:
        def _step(z0):
            return 0, shader(z0)

    xs = np.linspace(xmin, xmax, width)
    ys = np.linspace(ymax, ymin, height)

    iters = np.zeros((height, width), dtype=np.int32)
    last_re = np.zeros((height, width), dtype=np.float32)
    last_im = np.zeros((height, width), dtype=np.float32)

    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            n, last = _step(Complex(x, y))
            iters[j, i] = n
            last_re[j, i] = last.re
            last_im[j, i] = last.im

    if color_mode == "iters":
        return _colorize_iters(iters, max_iter, cmap)

    if color_mode == "continuous":
        return _colorize_continuous(last_re, last_im)

    if color_mode != "auto":
        raise ValueError(f"Unknown color_mode: {color_mode}")

    if np.std(iters) < 1e-6:
        return _colorize_continuous(last_re, last_im)
    return _colorize_iters(iters, max_iter, cmap)

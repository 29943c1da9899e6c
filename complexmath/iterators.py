import numpy as np

from complexmath.core import (
    Complex,
    ZERO,
    add,
    exp,
    log,
    modulus,
    mul,
    nth_root,
    pow_complex,
    pow_complex_base,
    pow_real,
    sqrt_complex,
)
from complexmath.utils import parse_complex


def _is_finite(z: Complex) -> bool:
    return bool(np.isfinite(z.re) and np.isfinite(z.im))


def iterate_map(
    z0: Complex,
    c: Complex = ZERO,
    max_iter: int = 200,
    mode: str = "quadratic",
    power: float = 2.0,
    escape_radius: float = 1e6,
):
    """
    Iterate a complex map starting from z0.

    mode:
        "quadratic" -> z_{n+1} = z_n * z_n + c
        "power"     -> z_{n+1} = z_n ** power + c   (De Moivre, principal branch)
        "exp"       -> z_{n+1} = exp(z_n) + c
        "log"       -> z_{n+1} = log(z_n) + c
    """
    if mode == "quadratic":
        step = lambda z: mul(z, z)
    elif mode == "power":
        step = lambda z: pow_real(z, power)
    elif mode == "exp":
        step = exp
    elif mode == "log":
        step = lambda z: log(z, 0)
    else:
        raise ValueError(f"Unknown mode: {mode}")

    z = z0
    traj = []

    for _ in range(max_iter):
        z = add(step(z), c)
        traj.append(z)

        if not _is_finite(z) or modulus(z) > escape_radius:
            break

    return traj


def pick_iterator(map_name: str, power: float = 2.0):
    """Return an iterator function that matches the renderer's expected signature:
    iterator(z0, c, max_iter, escape_radius) -> (n_iters, last_z)
    """
    mode = map_name.lower()
    if mode not in ("quadratic", "power", "exp", "log"):
        raise ValueError(f"Unknown map name: {map_name}")

    def iterator(z0, c, max_iter, escape_radius):
        traj = iterate_map(z0=z0, c=c, max_iter=max_iter, mode=mode, power=power, escape_radius=escape_radius)
        n = len(traj)
        last = traj[-1] if n > 0 else z0
        return n, last

    return iterator


def _as_complex(value) -> Complex:
    if isinstance(value, Complex):
        return value
    if isinstance(value, (list, tuple)):
        return Complex(*value)
    if isinstance(value, str):
        return parse_complex(value)
    return Complex.from_complex(value)


def pick_shader(name: str, **params):
    """
    Return a single-step shader(z) -> Complex for domain colouring.

    name / params:
        "identity"
        "sqrt"
        "exp"
        "log"       k=0
        "power"     n=2.0
        "root"      n=3, k=0
        "cpow"      w=(0, 1), k=0     z ** w
        "base_pow"  base=e            base ** z
    """
    name = name.lower()

    if name == "identity":
        return lambda z: z
    if name == "sqrt":
        return sqrt_complex
    if name == "exp":
        return exp
    if name == "log":
        k = int(params.get("k", 0))
        return lambda z: log(z, k)
    if name == "power":
        n = float(params.get("n", 2.0))
        return lambda z: pow_real(z, n)
    if name == "root":
        n = int(params.get("n", 3))
        k = int(params.get("k", 0))
        return lambda z: nth_root(z, n, k)
    if name == "cpow":
        w = _as_complex(params.get("w", (0.0, 1.0)))
        k = int(params.get("k", 0))
        return lambda z: pow_complex(z, w, k)
    if name == "base_pow":
        base = float(params.get("base", np.e))
        return lambda z: pow_complex_base(base, z)

    raise ValueError(f"Unknown shader: {name}")

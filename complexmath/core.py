"""
Complex-number arithmetic on pairs of single-precision floats.

Every function here is pure: it takes `Complex` (or `Polar`) values and
returns a new value, never touching its arguments. Components are stored as
`numpy.float32` so results match what a float32 shading host would compute.

Zero handling:
- div, log, sqrt_complex and nth_root return (0, 0) at a zero divisor/modulus
  instead of producing Inf/NaN.
- Everything else (n <= 0 in pow_complex_base, n == 0 in nth_root, ...) is left
  unguarded and propagates non-finite values silently.

Multi-valued functions (log, pow_complex, nth_root) take an integer branch
index k; k = 0 is the principal branch.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterator, List

import numpy as np


def _quiet(fn):
    """Silence numpy float warnings so NaN/Inf propagate without noise."""
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        with np.errstate(all="ignore"):
            return fn(*args, **kwargs)
    return wrapper


@dataclass(frozen=True, repr=False)
class Complex:
    """z = re + im*i, both components float32."""

    re: float = 0.0
    im: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "re", np.float32(self.re))
        object.__setattr__(self, "im", np.float32(self.im))

    @classmethod
    def from_complex(cls, c: complex) -> "Complex":
        c = complex(c)
        return cls(c.real, c.imag)

    def __complex__(self):
        return complex(float(self.re), float(self.im))

    def __iter__(self) -> Iterator[np.float32]:
        yield self.re
        yield self.im

    def __repr__(self):
        return f"Complex({float(self.re):+g} {float(self.im):+g}i)"

    # operator sugar, all routed through the module functions
    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return add(self, other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return sub(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return sub(other, self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return mul(self, other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return div(self, other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return div(other, self)

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __abs__(self):
        return modulus(self)


@dataclass(frozen=True, repr=False)
class Polar:
    """(r, theta) with theta in radians."""

    r: float = 0.0
    theta: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "r", np.float32(self.r))
        object.__setattr__(self, "theta", np.float32(self.theta))

    def __iter__(self) -> Iterator[np.float32]:
        yield self.r
        yield self.theta

    def __repr__(self):
        return f"Polar(r={float(self.r):g}, theta={float(self.theta):g})"


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)

_TWO_PI = np.float32(2.0 * np.pi)
_E = np.float32(np.e)


def _coerce(value):
    if isinstance(value, Complex):
        return value
    if isinstance(value, (int, float, np.integer, np.floating)):
        return Complex(value, 0.0)
    if isinstance(value, (complex, np.complexfloating)):
        return Complex.from_complex(value)
    return NotImplemented


# -----------------------------
# Magnitude / angle
# -----------------------------

@_quiet
def modulus(z: Complex) -> np.float32:
    """|z| = sqrt(re^2 + im^2), without intermediate underflow or overflow."""
    return np.float32(np.hypot(z.re, z.im))


def argument(z: Complex) -> np.float32:
    """Angle from the positive real axis, in (-pi, pi]. argument(0) == 0."""
    return np.float32(np.arctan2(z.im, z.re))


def to_polar(z: Complex) -> Polar:
    m = modulus(z)
    if m == 0:
        return Polar(0.0, 0.0)
    return Polar(m, argument(z))


@_quiet
def from_polar(p: Polar) -> Complex:
    # a = r*cos(theta); b = r*sin(theta)
    return Complex(p.r * np.cos(p.theta), p.r * np.sin(p.theta))


# -----------------------------
# Arithmetic
# -----------------------------

@_quiet
def add(z: Complex, w: Complex) -> Complex:
    return Complex(z.re + w.re, z.im + w.im)


@_quiet
def sub(z: Complex, w: Complex) -> Complex:
    return Complex(z.re - w.re, z.im - w.im)


@_quiet
def mul(z: Complex, w: Complex) -> Complex:
    # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    re = z.re * w.re - z.im * w.im
    im = z.re * w.im + z.im * w.re
    return Complex(re, im)


@_quiet
def mul_imag(z: Complex, c: float) -> Complex:
    """
    Multiply z by the pure imaginary number c*i.

        (a + bi) * ci = -bc + aci
    """
    c = np.float32(c)
    return Complex(-z.im * c, z.re * c)


@_quiet
def div(z: Complex, w: Complex) -> Complex:
    """
    z / w via the conjugate of w:

        ((ac + bd) + (bc - ad)i) / (c^2 + d^2)

    Returns (0, 0) when w is zero.
    """
    d = w.re * w.re + w.im * w.im
    if d == 0:
        return ZERO
    re = (z.re * w.re + z.im * w.im) / d
    im = (z.im * w.re - z.re * w.im) / d
    return Complex(re, im)


# -----------------------------
# Logarithm / powers / roots
# -----------------------------

@_quiet
def log(z: Complex, k: int = 0) -> Complex:
    """
    k-th branch of the natural logarithm: ln|z| + i(arg(z) + 2*pi*k).

    log(0) is undefined; (0, 0) is returned instead.
    """
    r = modulus(z)
    if r == 0:
        return ZERO
    return Complex(np.log(r), argument(z) + _TWO_PI * np.float32(k))


@_quiet
def pow_real(z: Complex, n: float) -> Complex:
    """z^n by De Moivre: r^n * (cos(n*theta) + i*sin(n*theta))."""
    n = np.float32(n)
    r = np.power(modulus(z), n)
    theta = n * argument(z)
    return Complex(r * np.cos(theta), r * np.sin(theta))


@_quiet
def pow_complex_base(n: float, z: Complex) -> Complex:
    """
    n^z for a real base n:

        n^(a + bi) = n^a * (cos(b*ln(n)) + i*sin(b*ln(n)))

    n must be positive; otherwise the result is NaN.
    """
    n = np.float32(n)
    r = np.power(n, z.re)
    theta = z.im * np.log(n)
    return Complex(r * np.cos(theta), r * np.sin(theta))


def exp(z: Complex) -> Complex:
    return pow_complex_base(_E, z)


def pow_complex(z: Complex, w: Complex, k: int = 0) -> Complex:
    """z^w = e^(w * log(z, k))."""
    return exp(mul(w, log(z, k)))


@_quiet
def sqrt_complex(z: Complex) -> Complex:
    """Principal square root (half-angle form)."""
    r = modulus(z)
    if r == 0:
        return ZERO
    theta = np.float32(0.5) * argument(z)
    s = np.sqrt(r)
    return Complex(s * np.cos(theta), s * np.sin(theta))


@_quiet
def nth_root(z: Complex, n: int, k: int = 0) -> Complex:
    """
    k-th of the n roots of z:

        r^(1/n) * (cos((theta + 2*pi*k)/n) + i*sin((theta + 2*pi*k)/n))

    k runs over 0..n-1; the n roots form a regular n-gon around the origin.
    n == 0 is not checked.
    """
    r = modulus(z)
    if r == 0:
        return ZERO
    n = np.float32(n)
    r_root = np.power(r, np.float32(1.0) / n)
    theta_root = argument(z) / n + (_TWO_PI * np.float32(k)) / n
    return Complex(r_root * np.cos(theta_root), r_root * np.sin(theta_root))


def roots(z: Complex, n: int) -> List[Complex]:
    """All n roots of z, ordered by branch index."""
    return [nth_root(z, n, k) for k in range(n)]

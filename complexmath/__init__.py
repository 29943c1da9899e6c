from complexmath.core import (
    Complex,
    Polar,
    ZERO,
    ONE,
    I,
    modulus,
    argument,
    to_polar,
    from_polar,
    add,
    sub,
    mul,
    mul_imag,
    div,
    log,
    pow_real,
    pow_complex_base,
    pow_complex,
    exp,
    sqrt_complex,
    nth_root,
    roots,
)

__version__ = "0.1.0"

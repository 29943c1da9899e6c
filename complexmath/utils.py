from complexmath.core import Complex


def parse_complex(s: str) -> Complex:
    """
    Parse strings like '0.3+0.5j', '-0.4-0.6i' or '2' into a Complex.
    """
    s = s.strip().lower().replace(" ", "")
    if s.endswith("i"):
        s = s[:-1] + "j"
    try:
        if s.endswith("j"):
            return Complex.from_complex(complex(s))
        # allow plain real numbers too
        return Complex(float(s), 0.0)
    except ValueError:
        raise ValueError(f"Cannot parse complex number: {s!r}") from None

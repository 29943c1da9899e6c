import pytest

from complexmath.core import Complex
from complexmath.utils import parse_complex


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.3+0.5j", Complex(0.3, 0.5)),
        ("-0.4-0.6j", Complex(-0.4, -0.6)),
        (" 1 - 2i ", Complex(1, -2)),
        ("2", Complex(2, 0)),
        ("-1.5", Complex(-1.5, 0)),
        ("3j", Complex(0, 3)),
    ],
)
def test_parse_complex(text, expected):
    assert parse_complex(text) == expected


def test_parse_complex_rejects_garbage():
    with pytest.raises(ValueError):
        parse_complex("one plus i")

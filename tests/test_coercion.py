import math

import pytest

from utils.coercion import clamp_int, safe_float_optional, safe_int


def test_safe_int():
    assert safe_int("12.0") == 12
    assert safe_int("abc", 7) == 7
    assert safe_int(None) == 0
    assert safe_int(math.nan, 3) == 3


def test_safe_float_optional():
    assert safe_float_optional("45.5") == 45.5
    assert safe_float_optional("") is None
    assert safe_float_optional("north") is None
    assert safe_float_optional(float("nan")) is None


def test_clamp_int():
    assert clamp_int(80, -50, 50) == 50
    assert clamp_int(-80.0, -50, 50) == -50
    assert clamp_int("12.6", -50, 50) == 13
    with pytest.raises(ValueError):
        clamp_int(float("nan"), -50, 50)
    with pytest.raises(ValueError):
        clamp_int("abc", -50, 50)

import math
import struct

import pytest

from protocore.vecfuncs import (
    all_true,
    any_true,
    clamp,
    dot,
    fract,
    length,
    lengthsq,
    lerp,
    maxcomp,
    mincomp,
    normalize,
    product,
    sign,
    sq,
    vabs,
    vmax,
    vmin,
    vsum,
)
from protocore.vectors import bvec, dvec, ivec, uvec, vec


def test_vsum_is_additive():
    a = ivec(4, -7, 11)
    b = ivec(2, 9, -3)
    assert vsum(a + b) == vsum(a) + vsum(b)


def test_vsum_wraps_like_unsigned_32_bit():
    assert vsum(uvec(0xFFFFFFFF, 1)) == 0


def test_vsum_float_is_single_precision():
    r = vsum(vec(0.1, 0.2, 0.3))
    assert struct.unpack("<f", struct.pack("<f", r))[0] == r


def test_product_with_ones_returns_other_component():
    assert product(ivec(17, 1, 1)) == 17
    assert product(dvec(1.0, 2.5)) == 2.5


def test_mincomp_maxcomp():
    v = ivec(3, -8, 12, 5)
    assert mincomp(v) == -8
    assert maxcomp(v) == 12


def test_sq_matches_self_multiplication():
    v = ivec(-3, 4, 9)
    assert sq(v) == v * v


def test_vabs():
    assert vabs(ivec(-3, 4)) == ivec(3, 4)
    assert vabs(uvec(5, 6)) == uvec(5, 6)


def test_vmin_vmax():
    a = ivec(1, 5, 7)
    b = ivec(3, 2, 7)
    assert vmin(a, b) == ivec(1, 2, 7)
    assert vmax(a, b) == ivec(3, 5, 7)


def test_clamp():
    assert clamp(ivec(-5, 5, 1), ivec(0, 0, 0), ivec(2, 2, 2)) == ivec(0, 2, 1)
    assert clamp(dvec(-5.0, 0.5), 0.0, 1.0) == dvec(0.0, 0.5)


def test_sign():
    assert sign(vec(-2.0, 0.0, 3.0)) == vec(-1.0, 0.0, 1.0)


def test_fract_lies_in_unit_interval():
    v = dvec(2.75, -0.25, 7.0)
    f = fract(v)
    for comp, frac in zip(v, f):
        assert 0.0 <= frac < 1.0
        assert float(comp - frac).is_integer()


def test_fract_of_infinity_is_nan():
    f = fract(dvec(math.inf, 1.5))
    assert math.isnan(f.x)


def test_lerp_endpoints():
    a = dvec(1.0, -2.0, 4.0)
    b = dvec(5.0, 6.0, -1.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, dvec(0.0, 1.0, 0.0)) == dvec(1.0, 6.0, 4.0)


def test_dot_and_lengthsq_agree():
    v = dvec(1.5, -2.0, 3.0)
    assert dot(v, v) == lengthsq(v)


def test_length_of_axis_vector():
    assert length(dvec(0.0, 7.0)) == 7.0


def test_normalize_has_unit_length():
    n = normalize(dvec(3.0, 4.0, 12.0))
    assert length(n) == pytest.approx(1.0)


def test_normalize_zero_is_nan():
    n = normalize(vec(0.0, 0.0))
    assert [math.isnan(c) for c in n] == [True, True]


def test_all_any():
    assert all_true(bvec(True, True, True))
    assert not all_true(bvec(True, False))
    assert any_true(bvec(False, True))
    assert not any_true(bvec(False, False, False, False))


def test_real_only_functions_reject_integers():
    with pytest.raises(TypeError):
        sign(ivec(1, 2))
    with pytest.raises(TypeError):
        dot(ivec(1, 2), ivec(3, 4))


def test_bool_functions_reject_numbers():
    with pytest.raises(TypeError):
        all_true(ivec(1, 1))
    with pytest.raises(TypeError):
        vsum(bvec(True, False))


def test_mismatched_operands_raise():
    with pytest.raises(TypeError):
        vmin(ivec(1, 2), ivec(1, 2, 3))
    with pytest.raises(TypeError):
        vmax(ivec(1, 2), uvec(1, 2))
import math

import pytest

from protocore.vectors import ScalarKind, Vector, bvec, dvec, ivec, uvec, vec


def test_components_length_and_access():
    v = vec(1.5, 2.5, 3.5)
    assert tuple(v) == (1.5, 2.5, 3.5)
    assert len(v) == 3
    assert v.x == 1.5 and v.y == 2.5 and v.z == 3.5
    assert v[2] == 3.5
    with pytest.raises(AttributeError):
        _ = v.w


def test_float_kind_rounds_to_single_precision():
    x = vec(0.1, 0.0).x
    assert x != 0.1
    assert x == pytest.approx(0.1, rel=1e-7)
    assert dvec(0.1, 0.0).x == 0.1


def test_float_overflow_becomes_infinity():
    assert vec(1e300, -1e300) == vec(math.inf, -math.inf)


def test_int_components_wrap_at_32_bits():
    assert tuple(ivec(2**31, -(2**31) - 1)) == (-(2**31), 2**31 - 1)
    assert tuple(uvec(-1, 2**32)) == (2**32 - 1, 0)


def test_composition_from_smaller_vectors():
    assert vec(vec(1, 2), 3) == vec(1, 2, 3)
    four = vec(vec(1, 2), vec(3, 4))
    assert tuple(four) == (1.0, 2.0, 3.0, 4.0)
    assert four.xyz() == vec(1, 2, 3)
    assert four.xy() == vec(1, 2)


def test_size_limits():
    with pytest.raises(ValueError):
        vec(1)
    with pytest.raises(ValueError):
        vec(1, 2, 3, 4, 5)


def test_splat_broadcasts():
    s = Vector.splat(2, 3, ScalarKind.INT)
    assert s == ivec(2, 2, 2)
    assert s.kind is ScalarKind.INT


def test_swizzle_needs_larger_vector():
    with pytest.raises(ValueError):
        vec(1, 2).xy()
    with pytest.raises(ValueError):
        vec(1, 2, 3).xyz()


def test_conversion_truncates_toward_zero():
    assert vec(1.9, -1.9).convert(ScalarKind.INT) == ivec(1, -1)
    assert ivec(3, -4).convert(ScalarKind.DOUBLE) == dvec(3.0, -4.0)


def test_conversion_to_or_from_bool_is_rejected():
    with pytest.raises(TypeError):
        vec(1, 0).convert(ScalarKind.BOOL)
    with pytest.raises(TypeError):
        bvec(True, False).convert(ScalarKind.INT)


def test_non_finite_to_integer_is_rejected():
    with pytest.raises(ValueError):
        vec(math.nan, 1).convert(ScalarKind.INT)


def test_arithmetic_invariants():
    a = ivec(3, -5, 7)
    b = ivec(11, 2, -4)
    assert (a + b) - b == a
    assert a * b == b * a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert 1 - a == -(a - 1)
    assert -(-a) == a


def test_integer_addition_overflow_wraps():
    assert ivec(2**31 - 1, 0) + 1 == ivec(-(2**31), 1)


def test_integer_division_truncates():
    assert ivec(-7, 7) / ivec(2, 2) == ivec(-3, 3)
    a = ivec(-9, 9, 10)
    assert (a * 4) / 4 == a


def test_integer_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ivec(1, 2) / ivec(1, 0)
    with pytest.raises(ZeroDivisionError):
        uvec(1, 2) / 0


def test_float_division_by_zero_follows_ieee():
    assert vec(1, -1) / vec(0, 0) == vec(math.inf, -math.inf)
    assert math.isnan((vec(0, 1) / 0).x)


def test_unsigned_negation_wraps():
    assert -uvec(1, 0) == uvec(2**32 - 1, 0)


def test_bitwise_invariants():
    a = ivec(0b1100, -3)
    b = ivec(0b1010, 5)
    assert a & b == b & a
    assert (a ^ b) ^ b == a
    assert ~~a == a
    assert ~ivec(0, 0) == ivec(-1, -1)
    assert (a | b) & a == a


def test_shift_round_trip_and_range():
    a = ivec(1, 3)
    assert (a << ivec(4, 4)) >> ivec(4, 4) == a
    assert (uvec(5, 6) << 2) >> 2 == uvec(5, 6)
    with pytest.raises(ValueError):
        a << 32
    with pytest.raises(ValueError):
        a >> -1


def test_bitwise_not_defined_for_floats():
    with pytest.raises(TypeError):
        vec(1, 2) & vec(1, 2)
    with pytest.raises(TypeError):
        ~vec(1, 2)


def test_comparisons_return_bool_vectors():
    a = vec(1, 2)
    b = vec(2, 2)
    assert a.lt(b) == bvec(True, False)
    assert a.le(b) == bvec(True, True)
    assert a.gt(b) == a.le(b).logical_not()
    assert a.ge(b) == a.lt(b).logical_not()
    assert a.eq(b) == a.ne(b).logical_not()
    assert a.lt(b).kind is ScalarKind.BOOL


def test_bool_vectors_support_only_equality_and_logic():
    t = bvec(True, False)
    assert t.eq(bvec(True, True)) == bvec(True, False)
    with pytest.raises(TypeError):
        t.gt(bvec(False, False))
    with pytest.raises(TypeError):
        t + t
    with pytest.raises(TypeError):
        -t


def test_logical_operations():
    a = bvec(True, False, True)
    b = bvec(True, True, False)
    assert a.logical_and(b) == b.logical_and(a)
    assert a.logical_or(b) == a.logical_not().logical_and(b.logical_not()).logical_not()
    assert a.logical_and(a.logical_not()) == bvec(False, False, False)
    with pytest.raises(TypeError):
        vec(1, 0).logical_and(vec(1, 1))


def test_mismatched_operands_raise():
    with pytest.raises(TypeError):
        vec(1, 2) + ivec(1, 2)
    with pytest.raises(TypeError):
        vec(1, 2) + vec(1, 2, 3)
    with pytest.raises(TypeError):
        vec(1, 2) + "x"


def test_equal_vectors_hash_equally():
    assert hash(ivec(1, 2)) == hash(ivec(1, 2))
    assert ivec(1, 2) != uvec(1, 2)
    assert {vec(1, 2): "a"}[vec(1.0, 2.0)] == "a"
"""Vector engine - creation, indexing, element-wise and scalar operators"""
import operator

import numpy as np
import pytest

from py_linalg import Vector
from py_linalg.number import FLOAT32, FLOAT64, INT16, INT64, UINT8
from py_linalg.errors import (
    DimensionMismatch,
    IndexOutOfRange,
    PyLinalgTypeError,
    PyLinalgValueError,
)


class TestCreation:
    """Test basic vector creation"""

    @pytest.mark.parametrize("initial,expected_len,expected_dtype", [
        ([1, 2, 3], 3, INT64),
        ([1.5, 2.5, 3.5], 3, FLOAT64),
        ([], 0, FLOAT64),
        ([1], 1, INT64),
    ])
    def test_creation_from_list(self, initial, expected_len, expected_dtype):
        v = Vector(initial)
        assert len(v) == expected_len
        assert v.dtype == expected_dtype
        assert list(v) == initial

    def test_creation_with_dtype(self):
        v = Vector([1, 2, 3], dtype="int16")
        assert v.dtype == INT16
        assert all(type(x) is np.int16 for x in v)

    def test_creation_from_generator(self):
        v = Vector(x * 2 for x in range(3))
        assert list(v) == [0, 2, 4]

    def test_new(self):
        v = Vector.new(4, 2.0)
        assert v == Vector([2.0, 2.0, 2.0, 2.0])
        assert v.dtype == FLOAT64

    def test_new_empty(self):
        assert len(Vector.new(0, 1.0)) == 0

    def test_new_negative_length_raises(self):
        with pytest.raises(PyLinalgValueError):
            Vector.new(-1, 1)

    def test_zeros(self):
        v = Vector.zeros(3, "uint8")
        assert v == Vector([0, 0, 0], dtype="uint8")
        assert v.dtype == UINT8

    def test_random(self):
        v = Vector.random(10, rng=np.random.default_rng(0))
        assert len(v) == 10
        assert v.dtype == FLOAT64
        assert all(0.0 <= x < 1.0 for x in v)

    def test_random_seeded_is_reproducible(self):
        a = Vector.random(8, "int16", np.random.default_rng(5))
        b = Vector.random(8, "int16", np.random.default_rng(5))
        assert a == b
        assert a.dtype == INT16


class TestCopy:
    """Copies never alias storage"""

    def test_copy_mutation_independence(self):
        v1 = Vector([1, 2, 3])
        v2 = v1.copy()
        v2[0] = 999
        assert v1[0] == 1
        assert v2[0] == 999

    def test_content_is_a_copy(self):
        v = Vector([1, 2, 3])
        content = v.content
        content[0] = 100
        assert v[0] == 1


class TestIndexing:
    """Bounds-checked reads and writes"""

    def test_read(self):
        v = Vector([10, 20, 30])
        assert v[0] == 10
        assert v[2] == 30
        assert v[-1] == 30

    @pytest.mark.parametrize("index", [3, 100, -4])
    def test_read_out_of_range(self, index):
        with pytest.raises(IndexOutOfRange):
            Vector([10, 20, 30])[index]

    def test_write(self):
        v = Vector([10, 20, 30])
        v[1] = 5
        assert v == Vector([10, 5, 30])
        assert type(v[1]) is np.int64

    def test_write_out_of_range(self):
        v = Vector([10, 20, 30])
        with pytest.raises(IndexOutOfRange):
            v[3] = 1
        assert v == Vector([10, 20, 30])

    def test_write_incompatible_value(self):
        v = Vector([1, 2])
        with pytest.raises(PyLinalgTypeError):
            v[0] = 2.5

    def test_slice_returns_vector(self):
        v = Vector([1, 2, 3, 4])
        s = v[1:3]
        assert isinstance(s, Vector)
        assert s == Vector([2, 3])
        s[0] = 100
        assert v[1] == 2

    def test_non_integer_index(self):
        with pytest.raises(PyLinalgTypeError):
            Vector([1, 2])["a"]


class TestElementwise:
    """Vector OP Vector"""

    def test_scenario_addition(self):
        assert Vector([1, 2, 3]) + Vector([10, 20, 30]) == Vector([11, 22, 33])

    @pytest.mark.parametrize("op", [operator.add, operator.sub, operator.mul])
    def test_elementwise_law(self, op):
        a = Vector([3, -4, 5, 0])
        b = Vector([2, 7, -1, 9])
        result = op(a, b)
        assert len(result) == 4
        for i in range(4):
            assert result[i] == op(int(a[i]), int(b[i]))

    def test_float_division(self):
        assert Vector([1.0, 2.0]) / Vector([4.0, 8.0]) == Vector([0.25, 0.25])

    def test_integer_division_truncates(self):
        assert Vector([7, -7, 9]) / Vector([2, 2, -4]) == Vector([3, -3, -2])

    def test_integer_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector([1, 2]) / Vector([1, 0])

    def test_float_division_by_zero_is_ieee(self):
        with np.errstate(divide="ignore", invalid="ignore"):
            result = Vector([1.0, -1.0, 0.0]) / Vector([0.0, 0.0, 0.0])
        assert result[0] == np.inf
        assert result[1] == -np.inf
        assert np.isnan(result[2])

    def test_unsigned_wraps(self):
        a = Vector([250], dtype="uint8")
        b = Vector([10], dtype="uint8")
        assert a + b == Vector([4], dtype="uint8")

    @pytest.mark.parametrize("op", [operator.add, operator.sub, operator.mul, operator.truediv])
    def test_length_mismatch(self, op):
        with pytest.raises(DimensionMismatch):
            op(Vector([1, 2, 3]), Vector([1, 2]))

    def test_dtype_mismatch(self):
        with pytest.raises(PyLinalgTypeError):
            Vector([1, 2]) + Vector([1.0, 2.0])

    def test_operands_unchanged(self):
        a = Vector([1, 2, 3])
        b = Vector([4, 5, 6])
        result = a * b
        result[0] = 0
        assert a == Vector([1, 2, 3])
        assert b == Vector([4, 5, 6])

    def test_empty_vectors(self):
        assert Vector([]) + Vector([]) == Vector([])


class TestScalarBroadcast:
    """Vector OP scalar and scalar OP Vector"""

    def test_add(self):
        assert Vector([1, 2, 3]) + 2 == Vector([3, 4, 5])
        assert 2 + Vector([1, 2, 3]) == Vector([3, 4, 5])

    def test_sub(self):
        assert Vector([5, 6, 7]) - 1 == Vector([4, 5, 6])
        assert 10 - Vector([1, 2, 3]) == Vector([9, 8, 7])

    def test_mul(self):
        assert Vector([1.5, 2.0]) * 2 == Vector([3.0, 4.0])
        assert 2 * Vector([1.5, 2.0]) == Vector([3.0, 4.0])

    def test_div_order_vector_over_scalar(self):
        assert Vector([2, 3, 4]) / 2 == Vector([1, 1, 2])

    def test_div_order_scalar_over_vector(self):
        assert 12 / Vector([2, 3, 4]) == Vector([6, 4, 3])

    def test_div_is_not_commutative(self):
        v = Vector([2, 4])
        assert v / 4 == Vector([0, 1])
        assert 4 / v == Vector([2, 1])
        assert v / 4 != 4 / v

    def test_scalar_is_coerced_to_dtype(self):
        result = Vector([1.0, 2.0], dtype="float32") + 1
        assert result.dtype == FLOAT32
        assert all(type(x) is np.float32 for x in result)

    def test_non_integral_scalar_on_integer_vector(self):
        with pytest.raises(PyLinalgTypeError):
            Vector([1, 2]) + 0.5

    def test_scalar_out_of_range(self):
        with pytest.raises(PyLinalgValueError):
            Vector([1], dtype="int8") + 300

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) + "a"


class TestNegation:
    """Unary minus"""

    def test_negation(self):
        assert -Vector([1, -2, 0]) == Vector([-1, 2, 0])

    def test_negation_unsigned_raises(self):
        with pytest.raises(PyLinalgTypeError):
            -Vector([1, 2], dtype="uint16")


class TestEquality:
    """Structural equality"""

    def test_reflexive(self):
        v = Vector([1, 2, 3])
        assert v == v

    def test_symmetric(self):
        a = Vector([1.0, 2.0])
        b = Vector([1.0, 2.0])
        assert a == b
        assert b == a

    def test_length_sensitive(self):
        assert Vector([1, 2]) != Vector([1, 2, 3])
        assert Vector([1, 2, 3]) != Vector([1, 2])

    def test_element_sensitive(self):
        assert Vector([1, 2, 3]) != Vector([1, 2, 4])

    def test_numeric_equality_across_dtypes(self):
        assert Vector([1, 2]) == Vector([1.0, 2.0])

    def test_not_equal_to_list(self):
        assert Vector([1, 2]) != [1, 2]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1, 2]))


class TestPowf:
    """Element-wise power returns a new vector"""

    def test_float_powf(self):
        v = Vector([1.0, 4.0, 9.0])
        result = v.powf(0.5)
        assert result == Vector([1.0, 2.0, 3.0])
        assert v == Vector([1.0, 4.0, 9.0])

    def test_integer_powf_truncates(self):
        result = Vector([2, 3, 4]).powf(0.5)
        assert result == Vector([1, 1, 2])
        assert result.dtype == INT64

    def test_pow_operator(self):
        assert Vector([1.0, 2.0, 3.0]) ** 2 == Vector([1.0, 4.0, 9.0])

    def test_powf_rejects_non_number(self):
        with pytest.raises(PyLinalgTypeError):
            Vector([1.0]).powf("2")


class TestReductions:
    """dot and sum"""

    def test_dot(self):
        assert Vector([1, 2, 3]).dot(Vector([4, 5, 6])) == 32

    def test_matmul_is_dot(self):
        assert Vector([1.0, 2.0]) @ Vector([3.0, 4.0]) == 11.0

    def test_dot_mismatch(self):
        with pytest.raises(DimensionMismatch):
            Vector([1, 2]) @ Vector([1, 2, 3])

    def test_sum(self):
        assert Vector([1, 2, 3, 4]).sum() == 10
        assert Vector([]).sum() == 0


class TestBooleanBehavior:
    """Test truthiness of vectors"""

    def test_empty_vector_is_falsy(self):
        assert not Vector([])

    def test_nonempty_vector_warns(self):
        with pytest.warns(UserWarning):
            assert bool(Vector([0]))

"""Free constructors"""
import numpy as np
import pytest

import py_linalg as la
from py_linalg import Matrix, Vector
from py_linalg.errors import PyLinalgTypeError, ShapeMismatch


class TestVectorConstructors:

    def test_vector_from(self):
        v = la.vector_from([1.0, 3.0, 3.0, 7.0])
        assert v == Vector([1.0, 3.0, 3.0, 7.0])

    def test_vector_from_copies(self):
        values = [1, 2, 3]
        v = la.vector_from(values)
        values[0] = 100
        assert v[0] == 1

    def test_new_vector(self):
        assert la.new_vector(12, 6.0) == Vector([6.0] * 12)

    def test_random_vector(self):
        a = la.random_vector(12, rng=np.random.default_rng(7))
        b = la.random_vector(12, rng=np.random.default_rng(7))
        assert len(a) == 12
        assert a == b


class TestMatrixConstructors:

    def test_matrix_from(self):
        m = la.matrix_from(2, 2, [1, 2, 3, 4])
        assert m == Matrix(2, 2, [1, 2, 3, 4])

    def test_matrix_from_wrong_count(self):
        with pytest.raises(ShapeMismatch):
            la.matrix_from(3, 5, [1.0, 3.0, 3.0, 7.0])

    def test_new_matrix(self):
        m = la.new_matrix(3, 5, 3.0)
        assert m.shape == (3, 5)
        assert m.get_vector() == [3.0] * 15

    def test_identity(self):
        m = la.identity(5)
        assert m.trace() == 5.0
        assert m.get(0, 1) == 0.0

    def test_zeros(self):
        assert la.zeros(3, 5) == Matrix.new(3, 5, 0.0)

    def test_zeros_like_matrix(self):
        m = la.zeros_like(Matrix.new(3, 5, 3.0))
        assert m == la.zeros(3, 5)

    def test_zeros_like_vector(self):
        v = la.zeros_like(Vector([1, 2, 3], dtype="int16"))
        assert v == Vector([0, 0, 0], dtype="int16")
        assert v.dtype == la.INT16

    def test_zeros_like_rejects_other_types(self):
        with pytest.raises(PyLinalgTypeError):
            la.zeros_like([1, 2, 3])

    def test_random_matrix(self):
        m = la.random_matrix(3, 5, "uint32", np.random.default_rng(8))
        assert m.shape == (3, 5)
        assert m.dtype == la.UINT32

"""Free constructors for Vector and Matrix."""

from .errors import PyLinalgTypeError
from .matrix import Matrix
from .vector import Vector


def vector_from(values, dtype=None):
	""" Copy ``values`` into a new Vector """
	return Vector(values, dtype=dtype)


def new_vector(length, default, dtype=None):
	return Vector.new(length, default, dtype)


def random_vector(length, dtype=None, rng=None):
	return Vector.random(length, dtype, rng)


def matrix_from(rows, cols, values, dtype=None):
	""" Wrap exactly ``rows * cols`` row-major ``values`` in a new Matrix """
	return Matrix(rows, cols, values, dtype=dtype)


def new_matrix(rows, cols, default, dtype=None):
	return Matrix.new(rows, cols, default, dtype)


def identity(size, dtype=None):
	return Matrix.identity(size, dtype)


def zeros(rows, cols, dtype=None):
	return Matrix.zeros(rows, cols, dtype)


def zeros_like(other):
	"""
	All-zero container with the same shape and dtype as ``other``.

	Accepts a Matrix (returns a Matrix) or a Vector (returns a Vector).
	"""
	if isinstance(other, Matrix):
		return Matrix.zeros_like(other)
	if isinstance(other, Vector):
		return Vector.zeros(len(other), other.dtype)
	raise PyLinalgTypeError(f"zeros_like expects a Matrix or Vector, not {type(other).__name__}")


def random_matrix(rows, cols, dtype=None, rng=None):
	return Matrix.random(rows, cols, dtype, rng)

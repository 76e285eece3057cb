import numbers
import warnings

import numpy as np

from .errors import DimensionMismatch
from .errors import IndexOutOfRange
from .errors import PyLinalgTypeError
from .errors import PyLinalgValueError
from .display import _vector_repr
from .display import _vector_str
from .number import Number
from .number import as_number
from .number import infer_number

from typing import Any
from typing import List


def _check_length(length):
	if not isinstance(length, int) or isinstance(length, bool):
		raise PyLinalgValueError(f"Length must be an int, not {type(length).__name__}")
	if length < 0:
		raise PyLinalgValueError(f"Length must be non-negative, got {length}")


def _is_scalar(value):
	return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


# ============================================================
# Main backend
# ============================================================

class Vector():
	""" Dense, fixed-length vector over a single numeric dtype """
	_dtype = None  # Number instance (private)
	_underlying = None

	__hash__ = None
	# numpy scalars on the left must defer to our reflected operators
	__array_ufunc__ = None

	def __init__(self, initial=(), dtype=None):
		"""
		Copy ``initial`` into a new vector.

		Every element is validated against ``dtype`` (inferred from the
		values when not given).
		"""
		values = list(initial)
		self._dtype = as_number(dtype) if dtype is not None else infer_number(values)
		coerce = self._dtype.coerce
		self._underlying = [coerce(x) for x in values]

	@classmethod
	def _adopt(cls, values: List[Any], dtype: Number) -> "Vector":
		""" Adopt an already-coerced list without copying or validating """
		vec = cls.__new__(cls)
		vec._dtype = dtype
		vec._underlying = values
		return vec

	@classmethod
	def new(cls, length, default, dtype=None):
		""" create a new vector of length * default """
		_check_length(length)
		number = as_number(dtype) if dtype is not None else infer_number([default])
		return cls._adopt([number.coerce(default)] * length, number)

	@classmethod
	def zeros(cls, length, dtype=None):
		number = as_number(dtype) if dtype is not None else infer_number(())
		return cls.new(length, number.zero(), number)

	@classmethod
	def random(cls, length, dtype=None, rng=None):
		"""
		Uniformly random vector: [0, 1) for float dtypes, the full range
		of the type for integer dtypes. Unseeded unless ``rng`` is given.
		"""
		_check_length(length)
		number = as_number(dtype) if dtype is not None else infer_number(())
		return cls._adopt(number.random(length, rng), number)

	@property
	def dtype(self) -> Number:
		return self._dtype

	@property
	def content(self) -> List[Any]:
		""" copy of the elements as a list """
		return list(self._underlying)

	def tolist(self):
		return list(self._underlying)

	def copy(self):
		return self._adopt(list(self._underlying), self._dtype)

	def __repr__(self):
		return _vector_repr(self)

	def __str__(self):
		return _vector_str(self)

	def __iter__(self):
		return iter(self._underlying)

	def __len__(self):
		return len(self._underlying)

	def __bool__(self):
		"""
		True if the vector is not empty.

		Warns, since 'if vec' is easily mistaken for an element-wise test.
		"""
		if self._underlying:
			warnings.warn(
				"Vector is being used in a boolean context (e.g., 'if vector:'). "
				"This checks for emptiness (len > 0), not element values.",
				stacklevel=2
			)
		return bool(self._underlying)

	def _normalize_index(self, key):
		n = len(self._underlying)
		if isinstance(key, bool) or not isinstance(key, int):
			raise PyLinalgTypeError(f"Vector indices must be integers or slices, not {type(key).__name__}")
		if key < 0:
			key += n
		if not 0 <= key < n:
			raise IndexOutOfRange(f"Index {key} out of range for vector length {n}")
		return key

	def __getitem__(self, key):
		""" Single integer index returns a scalar; a slice returns a new Vector """
		if isinstance(key, slice):
			return self._adopt(self._underlying[key], self._dtype)
		return self._underlying[self._normalize_index(key)]

	def __setitem__(self, key, value):
		key = self._normalize_index(key)
		self._underlying[key] = self._dtype.coerce(value)


	""" Comparison Operators
		# __eq__ ==
		# __ne__ !=
	"""
	def __eq__(self, other):
		if not isinstance(other, Vector):
			return NotImplemented
		if len(self) != len(other):
			return False
		return all(x == y for x, y in zip(self._underlying, other._underlying))


	""" Math operations """
	def _check_compatible(self, other, op_symbol: str):
		if len(self) != len(other):
			raise DimensionMismatch(
				f"Cannot apply '{op_symbol}' to vectors of different lengths: {len(self)} and {len(other)}"
			)
		if self._dtype != other._dtype:
			raise PyLinalgTypeError(
				f"Unsupported operand dtypes for '{op_symbol}': {self._dtype!r} and {other._dtype!r}"
			)

	def _elementwise_operation(self, other, op_func, op_symbol: str, reflected=False):
		"""
		Apply ``op_func`` element-wise against another vector or a bare scalar.

		``op_func`` is a bound Number method (add, sub, mul, div). When
		``reflected`` is set the scalar is the left operand.
		"""
		from .matrix import Matrix

		if isinstance(other, Matrix):
			return other._fold_rows(self, op_func, op_symbol)

		if isinstance(other, Vector):
			self._check_compatible(other, op_symbol)
			return self._adopt(
				[op_func(x, y) for x, y in zip(self._underlying, other._underlying)],
				self._dtype
			)

		if not _is_scalar(other):
			return NotImplemented
		scalar = self._dtype.coerce(other)
		if reflected:
			return self._adopt([op_func(scalar, x) for x in self._underlying], self._dtype)
		return self._adopt([op_func(x, scalar) for x in self._underlying], self._dtype)

	def _unary_operation(self, op_func):
		return self._adopt([op_func(x) for x in self._underlying], self._dtype)

	def __add__(self, other):
		return self._elementwise_operation(other, self._dtype.add, '+')

	def __sub__(self, other):
		return self._elementwise_operation(other, self._dtype.sub, '-')

	def __mul__(self, other):
		return self._elementwise_operation(other, self._dtype.mul, '*')

	def __truediv__(self, other):
		return self._elementwise_operation(other, self._dtype.div, '/')

	def __neg__(self):
		return self._unary_operation(self._dtype.neg)

	def __radd__(self, other):
		return self._elementwise_operation(other, self._dtype.add, '+', reflected=True)

	def __rsub__(self, other):
		return self._elementwise_operation(other, self._dtype.sub, '-', reflected=True)

	def __rmul__(self, other):
		return self._elementwise_operation(other, self._dtype.mul, '*', reflected=True)

	def __rtruediv__(self, other):
		return self._elementwise_operation(other, self._dtype.div, '/', reflected=True)

	def __pow__(self, other):
		if not _is_scalar(other):
			return NotImplemented
		return self.powf(other)

	def powf(self, pow):
		"""
		Raise every element to ``pow``.

		The power is taken in double precision and narrowed back to the
		vector's dtype (integers truncate toward zero).

		Returns
		-------
		Vector
			New vector of the same dtype and length
		"""
		if not _is_scalar(pow):
			raise PyLinalgTypeError(f"Exponent must be a real number, not {type(pow).__name__}")
		number = self._dtype
		return self._unary_operation(lambda x: number.from_double(number.powf(x, pow)))

	def dot(self, other):
		""" Inner product, accumulated left to right from zero """
		if not isinstance(other, Vector):
			raise PyLinalgTypeError(f"dot expects a Vector, not {type(other).__name__}")
		self._check_compatible(other, '@')
		number = self._dtype
		acc = number.zero()
		for x, y in zip(self._underlying, other._underlying):
			acc = number.add(acc, number.mul(x, y))
		return acc

	def __matmul__(self, other):
		""" v @ w is the dot product; v @ M is the same as v * M """
		from .matrix import Matrix

		if isinstance(other, Matrix):
			return self * other
		if isinstance(other, Vector):
			return self.dot(other)
		return NotImplemented

	def sum(self):
		number = self._dtype
		acc = number.zero()
		for x in self._underlying:
			acc = number.add(acc, x)
		return acc

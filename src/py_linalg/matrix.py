import operator
import warnings

from .errors import DimensionMismatch
from .errors import IndexOutOfRange
from .errors import NotSquare
from .errors import PyLinalgTypeError
from .errors import PyLinalgValueError
from .errors import ShapeMismatch
from .display import _matrix_repr
from .display import _matrix_str
from .number import Number
from .vector import Vector
from .vector import _is_scalar

from typing import Any
from typing import List
from typing import Tuple


def _check_dims(rows, cols):
	for label, value in (("rows", rows), ("cols", cols)):
		if not isinstance(value, int) or isinstance(value, bool):
			raise PyLinalgValueError(f"Matrix {label} must be an int, not {type(value).__name__}")
		if value < 0:
			raise PyLinalgValueError(f"Matrix {label} must be non-negative, got {value}")


class Matrix():
	"""
	Dense matrix stored row-major in a single backing Vector.

	Element (r, c) lives at flat index ``r * cols + c``. Operators always
	return new matrices; only ``set``, ``transpose`` and ``reshape`` mutate.
	"""
	_rows = 0
	_cols = 0
	_content = None  # backing Vector, exclusively owned

	__hash__ = None
	__array_ufunc__ = None

	def __init__(self, rows, cols, initial=(), dtype=None):
		"""
		Wrap exactly ``rows * cols`` values given in row-major order.

		Raises
		------
		ShapeMismatch
			If the number of values is not ``rows * cols``
		"""
		_check_dims(rows, cols)
		if dtype is None and isinstance(initial, Vector):
			dtype = initial.dtype
		content = Vector(initial, dtype=dtype)
		if len(content) != rows * cols:
			raise ShapeMismatch(
				f"Cannot fill a {rows}x{cols} matrix with {len(content)} elements"
			)
		self._rows = rows
		self._cols = cols
		self._content = content

	@classmethod
	def _adopt(cls, rows: int, cols: int, content: Vector) -> "Matrix":
		""" Take ownership of ``content`` without copying or validating """
		mat = cls.__new__(cls)
		mat._rows = rows
		mat._cols = cols
		mat._content = content
		return mat

	@classmethod
	def new(cls, rows, cols, default, dtype=None):
		_check_dims(rows, cols)
		return cls._adopt(rows, cols, Vector.new(rows * cols, default, dtype))

	@classmethod
	def zeros(cls, rows, cols, dtype=None):
		_check_dims(rows, cols)
		return cls._adopt(rows, cols, Vector.zeros(rows * cols, dtype))

	@classmethod
	def zeros_like(cls, other):
		if not isinstance(other, Matrix):
			raise PyLinalgTypeError(f"zeros_like expects a Matrix, not {type(other).__name__}")
		return cls.zeros(other._rows, other._cols, other.dtype)

	@classmethod
	def identity(cls, size, dtype=None):
		""" size x size zeros with ones on the main diagonal """
		mat = cls.zeros(size, size, dtype)
		one = mat.dtype.one()
		for n in range(size):
			mat._content._underlying[n * size + n] = one
		return mat

	@classmethod
	def random(cls, rows, cols, dtype=None, rng=None):
		_check_dims(rows, cols)
		return cls._adopt(rows, cols, Vector.random(rows * cols, dtype, rng))

	#-----------------------------------------------------
	# Introspection
	#-----------------------------------------------------

	@property
	def rows(self) -> int:
		return self._rows

	@property
	def cols(self) -> int:
		return self._cols

	@property
	def shape(self) -> Tuple[int, int]:
		return (self._rows, self._cols)

	@property
	def dtype(self) -> Number:
		return self._content.dtype

	def get_rows(self):
		return self._rows

	def get_cols(self):
		return self._cols

	def get_vector(self) -> List[Any]:
		""" flattened row-major content, as a list copy """
		return self._content.tolist()

	def to_vector(self) -> Vector:
		return self._content.copy()

	def copy(self):
		return self._adopt(self._rows, self._cols, self._content.copy())

	def __repr__(self):
		return _matrix_repr(self)

	def __str__(self):
		return _matrix_str(self)

	def __bool__(self):
		""" True if the matrix has any elements (warns, like Vector) """
		if self._content._underlying:
			warnings.warn(
				"Matrix is being used in a boolean context (e.g., 'if matrix:'). "
				"This checks for emptiness, not element values.",
				stacklevel=2
			)
		return bool(self._content._underlying)

	#-----------------------------------------------------
	# Element access
	#-----------------------------------------------------

	def _check_position(self, r, c):
		for value in (r, c):
			if isinstance(value, bool) or not isinstance(value, int):
				raise PyLinalgTypeError(f"Matrix indices must be integers, not {type(value).__name__}")
		if not (0 <= r < self._rows and 0 <= c < self._cols):
			raise IndexOutOfRange(
				f"Matrix index ({r}, {c}) out of bounds for {self._rows}x{self._cols} matrix"
			)

	def get(self, r, c):
		self._check_position(r, c)
		return self._content._underlying[r * self._cols + c]

	def set(self, r, c, value):
		self._check_position(r, c)
		self._content._underlying[r * self._cols + c] = self.dtype.coerce(value)

	def row(self, r) -> Vector:
		if isinstance(r, bool) or not isinstance(r, int):
			raise PyLinalgTypeError(f"Row index must be an integer, not {type(r).__name__}")
		if not 0 <= r < self._rows:
			raise IndexOutOfRange(f"Row {r} out of bounds for {self._rows}x{self._cols} matrix")
		start = r * self._cols
		return Vector._adopt(self._content._underlying[start:start + self._cols], self.dtype)

	def column(self, c) -> Vector:
		if isinstance(c, bool) or not isinstance(c, int):
			raise PyLinalgTypeError(f"Column index must be an integer, not {type(c).__name__}")
		if not 0 <= c < self._cols:
			raise IndexOutOfRange(f"Column {c} out of bounds for {self._rows}x{self._cols} matrix")
		return Vector._adopt(self._content._underlying[c::self._cols], self.dtype)

	def __getitem__(self, key):
		""" m[r, c] returns a scalar; m[r] returns row r as a new Vector """
		if isinstance(key, tuple):
			if len(key) != 2:
				raise PyLinalgTypeError(f"Matrix indexing takes (row, col), got {len(key)} indices")
			return self.get(*key)
		return self.row(key)

	def __setitem__(self, key, value):
		if not isinstance(key, tuple) or len(key) != 2:
			raise PyLinalgTypeError("Matrix assignment takes a (row, col) index")
		self.set(key[0], key[1], value)

	#-----------------------------------------------------
	# Structural operations
	#-----------------------------------------------------

	def reshape(self, rows, cols):
		"""
		Reinterpret the row-major buffer as ``rows x cols`` in place.

		The element count must not change; storage is untouched.
		"""
		_check_dims(rows, cols)
		if rows * cols != self._rows * self._cols:
			raise ShapeMismatch(
				f"Cannot reshape {self._rows}x{self._cols} matrix to {rows}x{cols}: "
				f"element count must stay {self._rows * self._cols}"
			)
		self._rows = rows
		self._cols = cols

	def transposed(self) -> "Matrix":
		""" New cols x rows matrix with element (r, c) moved to (c, r) """
		rows, cols = self._rows, self._cols
		src = self._content._underlying
		out = [None] * len(src)
		for r in range(rows):
			for c in range(cols):
				out[c * rows + r] = src[r * cols + c]
		return self._adopt(cols, rows, Vector._adopt(out, self.dtype))

	def transpose(self):
		""" In-place transpose (the shape swaps for non-square matrices) """
		t = self.transposed()
		self._rows, self._cols, self._content = t._rows, t._cols, t._content

	@property
	def T(self):
		return self.transposed()

	def trace(self):
		""" Sum of the main diagonal """
		if self._rows != self._cols:
			raise NotSquare(f"Trace requires a square matrix, got {self._rows}x{self._cols}")
		number = self.dtype
		acc = number.zero()
		for n in range(self._rows):
			acc = number.add(acc, self._content._underlying[n * self._cols + n])
		return acc

	def powf(self, pow):
		""" New matrix with every element raised to ``pow`` (see Vector.powf) """
		return self._adopt(self._rows, self._cols, self._content.powf(pow))

	def __pow__(self, other):
		if not _is_scalar(other):
			return NotImplemented
		return self.powf(other)

	#-----------------------------------------------------
	# Comparison
	#-----------------------------------------------------

	def __eq__(self, other):
		if not isinstance(other, Matrix):
			return NotImplemented
		if self.shape != other.shape:
			return False
		return self._content == other._content

	#-----------------------------------------------------
	# Math operations
	#-----------------------------------------------------

	def _check_dtype(self, other, op_symbol: str):
		if self.dtype != other.dtype:
			raise PyLinalgTypeError(
				f"Unsupported operand dtypes for '{op_symbol}': {self.dtype!r} and {other.dtype!r}"
			)

	def _elementwise(self, other, vector_op, op_symbol: str):
		""" Same-shape matrices: delegate to the backing vectors """
		if self.shape != other.shape:
			raise DimensionMismatch(
				f"Cannot apply '{op_symbol}' to matrices of different dimensions: "
				f"{self._rows}x{self._cols} and {other._rows}x{other._cols}"
			)
		return self._adopt(self._rows, self._cols, vector_op(self._content, other._content))

	def _product(self, other, op_func, op_symbol: str):
		"""
		out[n, m] = sum over k of op_func(self[n, k], other[k, m]).

		Cells are produced row by row, each from a fresh zero with k
		ascending, so floating-point rounding is reproducible.
		"""
		if self._cols != other._rows:
			raise DimensionMismatch(
				f"Cannot apply '{op_symbol}' to {self._rows}x{self._cols} and "
				f"{other._rows}x{other._cols} matrices: inner dimensions differ"
			)
		self._check_dtype(other, op_symbol)
		number = self.dtype
		add = number.add
		lhs = self._content._underlying
		rhs = other._content._underlying
		inner = self._cols
		out_cols = other._cols

		out = []
		for n in range(self._rows):
			for m in range(out_cols):
				acc = number.zero()
				for k in range(inner):
					acc = add(acc, op_func(lhs[n * inner + k], rhs[k * out_cols + m]))
				out.append(acc)
		return self._adopt(self._rows, out_cols, Vector._adopt(out, number))

	def _fold_rows(self, vector, op_func, op_symbol: str):
		"""
		out[r] = sum over c of op_func(self[r, c], vector[c]).

		The vector is broadcast across each row and the matrix element is
		always the left operand, so ``v OP M`` equals ``M OP v``. Only '*'
		is a true matrix-vector product.
		"""
		if self._cols != len(vector):
			raise DimensionMismatch(
				f"Cannot apply '{op_symbol}' to a {self._rows}x{self._cols} matrix and "
				f"a vector of length {len(vector)}"
			)
		self._check_dtype(vector, op_symbol)
		number = self.dtype
		add = number.add
		flat = self._content._underlying
		vec = vector._underlying
		cols = self._cols

		out = []
		for r in range(self._rows):
			acc = number.zero()
			row = flat[r * cols:(r + 1) * cols]
			for a, b in zip(row, vec):
				acc = add(acc, op_func(a, b))
			out.append(acc)
		return Vector._adopt(out, number)

	def _scalar_operation(self, other, method_name: str):
		""" Broadcast a bare scalar through the backing vector """
		if not _is_scalar(other):
			return NotImplemented
		content = getattr(self._content, method_name)(other)
		return self._adopt(self._rows, self._cols, content)

	def __add__(self, other):
		if isinstance(other, Matrix):
			return self._elementwise(other, operator.add, '+')
		if isinstance(other, Vector):
			return self._fold_rows(other, self.dtype.add, '+')
		return self._scalar_operation(other, '__add__')

	def __sub__(self, other):
		if isinstance(other, Matrix):
			return self._elementwise(other, operator.sub, '-')
		if isinstance(other, Vector):
			return self._fold_rows(other, self.dtype.sub, '-')
		return self._scalar_operation(other, '__sub__')

	def __mul__(self, other):
		if isinstance(other, Matrix):
			return self._product(other, self.dtype.mul, '*')
		if isinstance(other, Vector):
			return self._fold_rows(other, self.dtype.mul, '*')
		return self._scalar_operation(other, '__mul__')

	def __truediv__(self, other):
		if isinstance(other, Matrix):
			result = self._product(other, self.dtype.div, '/')
			warnings.warn(
				"Matrix / Matrix sums element quotients (A[n, k] / B[k, m] over k); "
				"it is not multiplication by an inverse.",
				stacklevel=2
			)
			return result
		if isinstance(other, Vector):
			return self._fold_rows(other, self.dtype.div, '/')
		return self._scalar_operation(other, '__truediv__')

	def __matmul__(self, other):
		if isinstance(other, (Matrix, Vector)):
			return self * other
		return NotImplemented

	def __neg__(self):
		return self._adopt(self._rows, self._cols, -self._content)

	def __radd__(self, other):
		return self._scalar_operation(other, '__radd__')

	def __rsub__(self, other):
		return self._scalar_operation(other, '__rsub__')

	def __rmul__(self, other):
		return self._scalar_operation(other, '__rmul__')

	def __rtruediv__(self, other):
		return self._scalar_operation(other, '__rtruediv__')

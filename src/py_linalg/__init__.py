"""
py-linalg: small dense linear algebra over fixed-width numeric types

Main classes:
    - Vector: 1D vector of a single numeric dtype
    - Matrix: 2D row-major matrix backed by one Vector

Supported dtypes (numpy scalar kinds):
    - float32, float64
    - int8, int16, int32, int64
    - uint8, uint16, uint32, uint64, usize

Every operator returns a new container; only Matrix.set, Matrix.transpose,
Matrix.reshape and vector item assignment mutate in place.
"""

from .errors import (
	PyLinalgError,
	PyLinalgTypeError,
	PyLinalgValueError,
	IndexOutOfRange,
	DimensionMismatch,
	ShapeMismatch,
	NotSquare,
)
from .number import (
	Number,
	as_number,
	infer_number,
	FLOAT32,
	FLOAT64,
	INT8,
	INT16,
	INT32,
	INT64,
	UINT8,
	UINT16,
	UINT32,
	UINT64,
	USIZE,
)
from .vector import Vector
from .matrix import Matrix
from .constructors import (
	vector_from,
	new_vector,
	random_vector,
	matrix_from,
	new_matrix,
	identity,
	zeros,
	zeros_like,
	random_matrix,
)

__version__ = "0.1.0"
__all__ = [
	"Vector",
	"Matrix",
	"Number",
	"as_number",
	"infer_number",
	"FLOAT32",
	"FLOAT64",
	"INT8",
	"INT16",
	"INT32",
	"INT64",
	"UINT8",
	"UINT16",
	"UINT32",
	"UINT64",
	"USIZE",
	"vector_from",
	"new_vector",
	"random_vector",
	"matrix_from",
	"new_matrix",
	"identity",
	"zeros",
	"zeros_like",
	"random_matrix",
	"PyLinalgError",
	"PyLinalgTypeError",
	"PyLinalgValueError",
	"IndexOutOfRange",
	"DimensionMismatch",
	"ShapeMismatch",
	"NotSquare",
]

class PyLinalgError(Exception):
    """Base exception for py-linalg library."""
    pass


class PyLinalgTypeError(PyLinalgError, TypeError):
    """Raised for unsupported scalar kinds or mixed-dtype operands."""
    pass


class PyLinalgValueError(PyLinalgError, ValueError):
    """Raised for invalid sizes or scalars that do not fit the dtype."""
    pass


class IndexOutOfRange(PyLinalgError, IndexError):
    """Raised when a position, row or column lies outside the container."""
    pass


class DimensionMismatch(PyLinalgValueError):
    """Raised when two operands of a binary operator have incompatible shapes."""
    pass


class ShapeMismatch(PyLinalgValueError):
    """Raised when a reshape or construction changes the element count."""
    pass


class NotSquare(PyLinalgValueError):
    """Raised when a square-only operation is applied to a non-square matrix."""
    pass

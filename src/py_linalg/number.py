"""
Numeric capability for Vector / Matrix.

Every container stores scalars of exactly one numpy kind and performs all
arithmetic through the matching Number, so each operator is written once
and works for every supported width:
  - Floats follow IEEE semantics (numpy scalar arithmetic)
  - Integers compute exactly, then wrap to the type's width
  - Integer division truncates toward zero
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Type
import math
import numbers

import numpy as np

from .errors import PyLinalgTypeError
from .errors import PyLinalgValueError


@dataclass(frozen=True)
class Number:
    """
    Describes a scalar type usable as a Vector / Matrix element.

    Attributes
    ----------
    kind : Type[numpy.generic]
        numpy scalar type (numpy.float64, numpy.int8, ...)

    Notes
    -----
    - Number holds no instance data; it is the arithmetic for one kind
    - All binary operations assume both operands already have ``kind``
      (use ``coerce`` first)
    - ``powf`` always answers in double precision; narrowing back to
      ``kind`` is done by the caller through ``from_double``

    Examples
    --------
    >>> int(INT8.add(np.int8(127), np.int8(1)))
    -128
    >>> int(INT32.div(np.int32(-7), np.int32(2)))
    -3
    >>> float(FLOAT64.powf(np.float64(2.0), 10))
    1024.0
    """

    kind: Type[np.generic]

    def __repr__(self):
        return f"<{self.name}>"

    @property
    def name(self) -> str:
        return np.dtype(self.kind).name

    @property
    def is_integer(self) -> bool:
        return issubclass(self.kind, np.integer)

    @property
    def is_signed(self) -> bool:
        """True for signed integers and floats (the kinds that support negation)."""
        return issubclass(self.kind, (np.signedinteger, np.floating))

    def zero(self):
        return self.kind(0)

    def one(self):
        return self.kind(1)

    # --------------------------------------------------------
    # Ring arithmetic
    # --------------------------------------------------------

    def _wrap(self, value: int):
        """Two's complement wrap of an exact Python int into ``kind``."""
        bits = np.iinfo(self.kind).bits
        value &= (1 << bits) - 1
        if self.is_signed and value >= 1 << (bits - 1):
            value -= 1 << bits
        return self.kind(value)

    def add(self, a, b):
        if self.is_integer:
            return self._wrap(int(a) + int(b))
        return a + b

    def sub(self, a, b):
        if self.is_integer:
            return self._wrap(int(a) - int(b))
        return a - b

    def mul(self, a, b):
        if self.is_integer:
            return self._wrap(int(a) * int(b))
        return a * b

    def div(self, a, b):
        if not self.is_integer:
            return a / b
        if b == 0:
            raise ZeroDivisionError(f"integer division by zero in {self!r} arithmetic")
        quotient = abs(int(a)) // abs(int(b))
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self._wrap(quotient)

    def neg(self, a):
        if not self.is_signed:
            raise PyLinalgTypeError(f"Cannot negate unsigned {self!r} values")
        if self.is_integer:
            return self._wrap(-int(a))
        return -a

    # --------------------------------------------------------
    # Powers
    # --------------------------------------------------------

    def powf(self, a, pow: float) -> np.float64:
        """Raise ``a`` (widened to double) to ``pow``. Never narrows."""
        return np.power(np.float64(a), np.float64(pow))

    def from_double(self, value: float):
        """
        Narrow a double back to ``kind``.

        Floats round to the target width. Integers truncate toward zero,
        saturate at the type bounds, and map NaN to zero.
        """
        value = float(value)
        if not self.is_integer:
            return self.kind(value)
        if math.isnan(value):
            return self.zero()
        info = np.iinfo(self.kind)
        if value <= info.min:
            return self.kind(info.min)
        if value >= info.max:
            return self.kind(info.max)
        return self.kind(math.trunc(value))

    # --------------------------------------------------------
    # Validation / generation
    # --------------------------------------------------------

    def coerce(self, value: Any):
        """
        Validate (and convert) a scalar before writing it into a container.

        Raises
        ------
        PyLinalgTypeError
            If value is not a real number, or is non-integral for an
            integer kind
        PyLinalgValueError
            If value does not fit the integer kind's range
        """
        if type(value) is self.kind:
            return value
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise PyLinalgTypeError(
                f"Incompatible value {value!r} for {self!r} container"
            )
        if not self.is_integer:
            return self.kind(value)

        if isinstance(value, numbers.Integral):
            ivalue = int(value)
        else:
            fvalue = float(value)
            if not fvalue.is_integer():
                raise PyLinalgTypeError(
                    f"Cannot store non-integral value {value!r} in {self!r} container"
                )
            ivalue = int(fvalue)

        info = np.iinfo(self.kind)
        if not info.min <= ivalue <= info.max:
            raise PyLinalgValueError(
                f"Value {value!r} out of range for {self!r} [{info.min}, {info.max}]"
            )
        return self.kind(ivalue)

    def random(self, length: int, rng: Optional[np.random.Generator] = None) -> List[Any]:
        """
        Draw ``length`` uniform values: [0, 1) for floats, the full
        inclusive range for integers. Unseeded unless ``rng`` is given.
        """
        if rng is None:
            rng = np.random.default_rng()
        if self.is_integer:
            info = np.iinfo(self.kind)
            drawn = rng.integers(info.min, info.max, size=length, dtype=self.kind, endpoint=True)
        else:
            drawn = rng.random(size=length, dtype=self.kind)
        return [self.kind(x) for x in drawn]


FLOAT32 = Number(np.float32)
FLOAT64 = Number(np.float64)
INT8 = Number(np.int8)
INT16 = Number(np.int16)
INT32 = Number(np.int32)
INT64 = Number(np.int64)
UINT8 = Number(np.uint8)
UINT16 = Number(np.uint16)
UINT32 = Number(np.uint32)
UINT64 = Number(np.uint64)
USIZE = Number(np.uintp)

DEFAULT_NUMBER = FLOAT64

SUPPORTED_NUMBERS = (
    FLOAT32, FLOAT64,
    INT8, INT16, INT32, INT64,
    UINT8, UINT16, UINT32, UINT64,
    USIZE,
)

_BY_KIND = {n.kind: n for n in SUPPORTED_NUMBERS}
_BY_NAME = {n.name: n for n in SUPPORTED_NUMBERS}
_BY_NAME.update({"usize": USIZE, "float": FLOAT64, "int": INT64})


def as_number(dtype: Any) -> Number:
    """
    Resolve a dtype name, kind or Number to a Number.

    Accepts a Number, a numpy scalar type, a numpy.dtype, a dtype name
    ("float32", "usize", ...) or the Python ``float`` / ``int`` types.

    Examples
    --------
    >>> as_number("int16")
    <int16>
    >>> as_number(float)
    <float64>
    """
    if isinstance(dtype, Number):
        return dtype
    if dtype is float:
        return FLOAT64
    if dtype is int:
        return INT64
    if isinstance(dtype, str):
        try:
            return _BY_NAME[dtype]
        except KeyError:
            raise PyLinalgTypeError(f"Unsupported dtype name {dtype!r}") from None
    try:
        kind = np.dtype(dtype).type
    except TypeError:
        raise PyLinalgTypeError(f"Unsupported dtype {dtype!r}") from None
    number = _BY_KIND.get(kind)
    if number is None:
        raise PyLinalgTypeError(f"Unsupported dtype {np.dtype(kind).name!r}")
    return number


def infer_kind(value: Any) -> Type[np.generic]:
    """
    Infer the numpy kind for a single scalar.

    Python ints count as int64 and Python floats as float64.
    """
    if isinstance(value, (bool, np.bool_)):
        raise PyLinalgTypeError(f"Boolean value {value!r} is not a supported scalar")
    if isinstance(value, np.generic):
        kind = type(value)
        if kind not in _BY_KIND:
            raise PyLinalgTypeError(f"Unsupported scalar type {np.dtype(kind).name!r}")
        return kind
    if isinstance(value, numbers.Integral):
        return np.int64
    if isinstance(value, numbers.Real):
        return np.float64
    raise PyLinalgTypeError(f"Unsupported scalar {value!r} of type {type(value).__name__}")


def infer_number(values: Iterable[Any]) -> Number:
    """
    Infer a Number from an iterable of scalars.

    Mixed kinds promote with numpy's rules; an empty iterable gives
    DEFAULT_NUMBER.

    Examples
    --------
    >>> infer_number([1, 2, 3])
    <int64>
    >>> infer_number([1, 2.5])
    <float64>
    >>> infer_number([np.int8(1), np.int16(2)])
    <int16>
    """
    kinds = {infer_kind(v) for v in values}
    if not kinds:
        return DEFAULT_NUMBER
    if len(kinds) == 1:
        return _BY_KIND[kinds.pop()]
    return as_number(np.result_type(*kinds))

"""Display and repr logic for Vector and Matrix."""

from __future__ import annotations
from typing import List
import math


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _format_scalar(value, dtype) -> str:
	"""Integral floats keep a trailing .0 so the dtype stays visible."""
	if dtype.is_integer:
		return str(int(value))
	value = float(value)
	if math.isfinite(value) and value == int(value):
		return f"{value:.1f}"
	return f"{value:g}"


def _preview(values, max_preview: int) -> list:
	"""Symmetric head/tail preview with a '...' marker."""
	if len(values) > max_preview * 2:
		return list(values[:max_preview]) + [...] + list(values[-max_preview:])
	return list(values)


def _format_values(values, dtype, max_preview: int = MAX_HEAD_COLS) -> List[str]:
	return ['...' if v is ... else _format_scalar(v, dtype) for v in _preview(values, max_preview)]


def _vector_str(vec) -> str:
	"""Compact form: [1,2,3]"""
	return "[" + ",".join(_format_values(vec._underlying, vec.dtype)) + "]"


def _vector_repr(vec) -> str:
	body = ", ".join(_format_values(vec._underlying, vec.dtype))
	return f"Vector([{body}], dtype={vec.dtype!r})"


def _matrix_str(mat) -> str:
	"""Bracketed row block, numbers right-aligned on a shared width."""
	if mat.rows == 0 or mat.cols == 0:
		return "[]"

	flat = mat._content._underlying
	row_ids = _preview(range(mat.rows), MAX_HEAD_ROWS)

	lines = []
	for r in row_ids:
		if r is ...:
			lines.append(None)
			continue
		row = flat[r * mat.cols:(r + 1) * mat.cols]
		lines.append(_format_values(row, mat.dtype))

	width = max(len(s) for cells in lines if cells is not None for s in cells)

	out = []
	for cells in lines:
		if cells is None:
			out.append(" ...")
		else:
			out.append("[" + ", ".join(s.rjust(width) for s in cells) + "]")
	return "[" + ",\n ".join(out) + "]"


def _matrix_repr(mat) -> str:
	return f"Matrix({mat.rows}x{mat.cols}, dtype={mat.dtype!r})\n{_matrix_str(mat)}"

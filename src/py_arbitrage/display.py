"""Display and repr logic for Vector and Table."""

from __future__ import annotations
from datetime import date
from typing import List


# How many rows/columns to show at each end before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5

_ELLIPSIS = '...'
_MARKER = object()


def _needs_quoting(name: str) -> bool:
	"""A name needs quoting if it contains anything outside [A-Za-z0-9_]
	OR has leading/trailing whitespace."""
	if not name:
		return False
	if name != name.strip():
		return True
	return not all(c.isalnum() or c == "_" for c in name)


def _type_name(values) -> str:
	kinds = {type(v) for v in values}
	if len(kinds) == 1:
		return kinds.pop().__name__
	if kinds and kinds <= {int, float}:
		return 'float'
	return 'object' if kinds else 'empty'


def _is_numeric(values) -> bool:
	return bool(values) and all(
		isinstance(v, (int, float)) and not isinstance(v, bool) for v in values
	)


def _truncate(values, limit=MAX_HEAD_ROWS) -> list:
	"""Symmetric preview with an ellipsis marker in the middle."""
	if len(values) > limit * 2:
		return list(values[:limit]) + [_MARKER] + list(values[-limit:])
	return list(values)


def _format_value(v) -> str:
	if isinstance(v, float):
		return f"{v:.1f}" if v.is_integer() else f"{v:g}"
	if isinstance(v, date):
		return v.isoformat()
	if isinstance(v, str):
		return repr(v)
	return str(v)


def _format_column(values) -> List[str]:
	"""Formatted cells of one column, truncated for display."""
	return [
		_ELLIPSIS if v is _MARKER else _format_value(v)
		for v in _truncate(values)
	]


def _header_text(name) -> str:
	if name is None:
		return ""
	name = str(name)
	return repr(name) if _needs_quoting(name) else name


def _align(cells: List[str], width: int, numeric: bool) -> List[str]:
	return [s.rjust(width) if numeric else s.ljust(width) for s in cells]


def _repr_vector(v) -> str:
	"""Pretty repr for a Vector."""
	values = v._underlying
	numeric = _is_numeric(values)
	formatted = _format_column(values)
	header = _header_text(v._name)

	width = max([len(s) for s in formatted] + [len(header)])

	lines = []
	if v._name is not None:
		lines.extend(_align([header], width, numeric))
	lines.extend(_align(formatted, width, numeric))
	lines.append("")
	lines.append(f"# {len(values)} element vector <{_type_name(values)}>")
	return "\n".join(lines)


def _repr_table(tbl) -> str:
	"""Pretty repr for a Table, row labels first."""
	names = list(tbl._columns)
	nrows, ncols = tbl.shape

	if ncols == 0:
		return f"# {nrows}×0 table"

	truncated = ncols > MAX_HEAD_COLS * 2
	if truncated:
		shown = names[:MAX_HEAD_COLS] + [_MARKER] + names[-MAX_HEAD_COLS:]
	else:
		shown = names

	label_cells = _format_column(tbl._row_labels)
	columns = [(label_cells, "", False)]
	for name in shown:
		if name is _MARKER:
			columns.append(([_ELLIPSIS] * len(label_cells), _ELLIPSIS, False))
			continue
		values = tbl._columns[name]
		columns.append((_format_column(values), _header_text(name), _is_numeric(values)))

	aligned = []
	for cells, header, numeric in columns:
		width = max([len(s) for s in cells] + [len(header)])
		aligned.append(_align([header] + cells, width, numeric))

	lines = []
	for r in range(len(label_cells) + 1):
		lines.append("  ".join(col[r] for col in aligned).rstrip())

	types = [_type_name(tbl._columns[name]) for name in names]
	if truncated:
		types = types[:MAX_HEAD_COLS] + [_ELLIPSIS] + types[-MAX_HEAD_COLS:]
	lines.append("")
	lines.append(f"# {nrows}×{ncols} table <{', '.join(types)}>")
	return "\n".join(lines)


def _printr(obj) -> str:
	"""Entry point used by Vector.__repr__ and Table.__repr__."""
	from .table import Table
	if isinstance(obj, Table):
		return _repr_table(obj)
	return _repr_vector(obj)

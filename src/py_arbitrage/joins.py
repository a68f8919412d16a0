"""
Row-wise and column-wise table composition.

Both joins build new tables; their operands are never modified.
"""

import warnings

from .errors import ArbitrageTypeError
from .errors import ArbitrageValueError
from .errors import ColumnMismatchError
from .errors import DimensionMismatchError
from .kinds import Kind
from .kinds import kind_of
from .naming import _next_column_name
from .table import ROW_LABELS
from .table import Table
from .table import as_table
from .vectorize import _vectorize


def _rbind_pair(x, y):
	if set(x._columns) != set(y._columns):
		missing = [name for name in x._columns if name not in y._columns]
		extra = [name for name in y._columns if name not in x._columns]
		raise ColumnMismatchError(
			f"rbind needs identical column sets; missing from right: {missing}, "
			f"missing from left: {extra}"
		)
	columns = {name: values + y._columns[name] for name, values in x._columns.items()}
	return Table._from_parts(columns, x._row_labels + y._row_labels)


def rbind(x, y, *more):
	"""
	Stack the rows of two or more tables.

	Column order follows ``x``. Row labels are concatenated as they are,
	duplicates included.

	Raises
	------
	ColumnMismatchError
		If the tables do not have exactly the same column names.

	Examples
	--------
	>>> t = rbind(make_table([1, 2], [4, 5]), make_table([3], [6]))
	>>> t[0], t[1], t.row_labels
	([1, 2, 3], [4, 5, 6], [0, 1, 0])
	"""
	result = _rbind_pair(as_table(x), as_table(y))
	for z in more:
		result = _rbind_pair(result, as_table(z))
	return result


# ============================================================
# cbind
# ============================================================

def _operand_kind(x, side):
	kind = kind_of(x)
	if kind is Kind.FUNCTION:
		raise ArbitrageTypeError(f"cbind {side} operand must be a table or a sequence, not a function")
	return Kind.TABLE if kind is Kind.TABLE else Kind.SEQUENCE


def _merge_columns(columns, extra, labels):
	"""Add the columns of ``extra`` whose names are not taken yet."""
	merged = dict(columns)
	dropped = []
	for name, values in extra.items():
		if name in merged:
			dropped.append(name)
		else:
			merged[name] = values
	if dropped:
		warnings.warn(
			f"cbind kept the left-hand column(s) {dropped}; "
			"same-named columns from the right-hand operand were dropped.",
			stacklevel=3
		)
	return Table._from_parts(merged, labels)


def _check_rows(left, right):
	if left != right:
		raise DimensionMismatchError(
			f"cbind needs the same number of rows on both sides, got {left} and {right}."
		)


def cbind(x, y, names=None):
	"""
	Join two operands column-wise.

	Parameters
	----------
	x, y : table or sequence
		Any pairing of tables and sequences. Scalars count as one-element
		sequences.
	names : optional
		Column names for sequence operands: two names when both operands
		are sequences, otherwise one.

	Returns
	-------
	Table
		- table + table: ``x``'s columns, then ``y``'s columns not already in ``x``
		- sequence + sequence: a two-column table
		- table + sequence: ``x`` with ``y`` appended (default name: next integer)
		- sequence + table: ``x`` as the first column, labelled like ``y``,
		  followed by ``y``'s other columns

	Raises
	------
	DimensionMismatchError
		If the row counts / lengths differ.
	"""
	kx = _operand_kind(x, 'left')
	ky = _operand_kind(y, 'right')
	names = None if names is None else list(_vectorize(names))

	if kx is Kind.TABLE and ky is Kind.TABLE:
		x, y = as_table(x), as_table(y)
		_check_rows(len(x), len(y))
		return _merge_columns(x._columns, y._columns, x._row_labels)

	if kx is Kind.SEQUENCE and ky is Kind.SEQUENCE:
		x, y = tuple(_vectorize(x)), tuple(_vectorize(y))
		_check_rows(len(x), len(y))
		if names is None:
			names = [0, 1]
		if len(names) != 2 or names[0] == names[1] or ROW_LABELS in names:
			raise ArbitrageValueError(f"cbind of two sequences needs two distinct names, got {names}")
		return Table._from_parts({names[0]: x, names[1]: y}, tuple(range(len(x))))

	if kx is Kind.TABLE:
		x, y = as_table(x), tuple(_vectorize(y))
		_check_rows(len(x), len(y))
		name = _single_name(names, _next_column_name(x._columns))
		if name in x._columns:
			raise ArbitrageValueError(f"Column '{name}' already exists")
		columns = dict(x._columns)
		columns[name] = y
		return Table._from_parts(columns, x._row_labels)

	x, y = tuple(_vectorize(x)), as_table(y)
	_check_rows(len(x), len(y))
	name = _single_name(names, 0)
	return _merge_columns({name: x}, y._columns, y._row_labels)


def _single_name(names, default):
	if names is None:
		return default
	if len(names) != 1:
		raise ArbitrageValueError(f"Expected one column name, got {names}")
	if names[0] == ROW_LABELS:
		raise ArbitrageValueError(f"'{ROW_LABELS}' is reserved and cannot name a column")
	return names[0]

from collections.abc import Mapping

from .naming import _build_column_map
from .errors import ArbitrageIndexError, ArbitrageKeyError, ArbitrageTypeError, ArbitrageValueError
from .errors import ColumnLengthMismatchError, DimensionMismatchError


ROW_LABELS = 'row_labels'


def _missing_col_error(name, context="Table"):
	return ArbitrageKeyError(f"Column '{name}' not found in {context}")


class Row:
	"""Lightweight view of one table row with name and attribute access."""
	__slots__ = ('_table', '_index')

	def __init__(self, table, index):
		self._table = table
		self._index = index

	@property
	def label(self):
		return self._table._row_labels[self._index]

	def keys(self):
		return list(self._table._columns)

	def __getattr__(self, attr):
		"""Access column values by sanitized attribute name."""
		# Slots are unset on copies made through __new__.
		if attr.startswith('_'):
			raise AttributeError(attr)
		name = self._table._column_map.get(attr.lower(), _NOT_FOUND)
		if name is _NOT_FOUND:
			raise AttributeError(f"Row has no attribute '{attr}'")
		return self._table._columns[name][self._index]

	def __getitem__(self, name):
		try:
			return self._table._columns[name][self._index]
		except KeyError:
			raise _missing_col_error(name, "Row") from None

	def __iter__(self):
		idx = self._index
		for values in self._table._columns.values():
			yield values[idx]

	def __len__(self):
		return len(self._table._columns)

	def as_dict(self):
		return {name: values[self._index] for name, values in self._table._columns.items()}

	def __repr__(self):
		cells = ', '.join(f"{name}={value!r}" for name, value in self.as_dict().items())
		return f"Row({self.label!r}: {cells})"


_NOT_FOUND = object()


class Table:
	""" Named columns of the same length, sharing one sequence of row labels """

	def __init__(self, columns=None, row_labels=None):
		"""
		Parameters
		----------
		columns : Mapping
			Column name -> values. Scalars become one-element columns.
		row_labels : sequence, optional
			One label per row. Defaults to ``0..n-1``.
		"""
		from .vectorize import _vectorize

		columns = {} if columns is None else columns
		if not isinstance(columns, Mapping):
			raise ArbitrageTypeError(f"Table columns must be a mapping, not {type(columns).__name__}")

		materialized = {}
		for name, values in columns.items():
			if name == ROW_LABELS:
				raise ArbitrageValueError(f"'{ROW_LABELS}' is reserved and cannot name a column")
			materialized[name] = tuple(_vectorize(values))

		lengths = {len(values) for values in materialized.values()}
		if len(lengths) > 1:
			detail = ', '.join(f"{name!r}: {len(values)}" for name, values in materialized.items())
			raise ColumnLengthMismatchError(f"All columns must have the same length ({detail})")

		if row_labels is None:
			nrows = lengths.pop() if lengths else 0
			labels = tuple(range(nrows))
		else:
			labels = tuple(_vectorize(row_labels))
			if lengths and len(labels) != next(iter(lengths)):
				raise DimensionMismatchError(
					f"Got {len(labels)} row labels for {next(iter(lengths))} rows."
				)

		self._init_parts(materialized, labels)

	@classmethod
	def _from_parts(cls, columns, row_labels):
		"""Wrap already validated tuples without copying or checking them."""
		instance = cls.__new__(cls)
		instance._init_parts(columns, row_labels)
		return instance

	def _init_parts(self, columns, row_labels):
		self._columns = columns
		self._row_labels = row_labels
		self._column_map = _build_column_map(columns)

	#-----------------------------------------------------
	# Shape
	#-----------------------------------------------------

	def __len__(self):
		return len(self._row_labels)

	@property
	def shape(self):
		return (len(self._row_labels), len(self._columns))

	@property
	def column_names(self):
		return list(self._columns)

	@property
	def row_labels(self):
		return list(self._row_labels)

	#-----------------------------------------------------
	# Access
	#-----------------------------------------------------

	def __contains__(self, name):
		return name in self._columns

	def __getitem__(self, name):
		""" Column values by exact name, as a new list """
		try:
			return list(self._columns[name])
		except KeyError:
			raise _missing_col_error(name) from None
		except TypeError:
			raise ArbitrageTypeError(f"Column names must be hashable, not {type(name).__name__}") from None

	def __dir__(self):
		base_attrs = object.__dir__(self)
		return sorted(set(base_attrs + list(self._column_map.keys())))

	def __getattr__(self, attr):
		"""Access columns by sanitized attribute name."""
		# Guard against lookups before _init_parts has run (copy, pickle).
		if attr.startswith('_'):
			raise AttributeError(attr)
		name = self._column_map.get(attr.lower(), _NOT_FOUND)
		if name is not _NOT_FOUND:
			return list(self._columns[name])
		raise AttributeError(f"{self.__class__.__name__!s} object has no attribute '{attr}'")

	def row(self, index):
		if not -len(self) <= index < len(self):
			raise ArbitrageIndexError(f"Row {index} out of range for table with {len(self)} rows")
		return Row(self, index % len(self))

	def __iter__(self):
		""" Iterate over rows """
		for i in range(len(self)):
			yield Row(self, i)

	def items(self):
		return [(name, list(values)) for name, values in self._columns.items()]

	#-----------------------------------------------------
	# Derived tables (never mutate self)
	#-----------------------------------------------------

	def copy(self):
		return Table._from_parts(dict(self._columns), self._row_labels)

	def with_column(self, name, values):
		"""
		Return a new table with ``name`` set to ``values``.

		Values are recycled against the row count, so a scalar fills the column.
		"""
		from .vectorize import _recycle

		if name == ROW_LABELS:
			raise ArbitrageValueError(f"'{ROW_LABELS}' is reserved and cannot name a column")
		if not self._columns and not self._row_labels:
			return Table({name: values})
		labels, values = _recycle(self._row_labels, values)
		if len(labels) != len(self):
			raise DimensionMismatchError(
				f"Column '{name}' has {len(values)} values, table has {len(self)} rows."
			)
		columns = dict(self._columns)
		columns[name] = tuple(values)
		return Table._from_parts(columns, self._row_labels)

	def rename_column(self, old_name, new_name):
		if old_name not in self._columns:
			raise _missing_col_error(old_name)
		if new_name != old_name and new_name in self._columns:
			raise ArbitrageValueError(f"Column '{new_name}' already exists")
		if new_name == ROW_LABELS:
			raise ArbitrageValueError(f"'{ROW_LABELS}' is reserved and cannot name a column")
		columns = {
			(new_name if name == old_name else name): values
			for name, values in self._columns.items()
		}
		return Table._from_parts(columns, self._row_labels)

	def to_dict(self):
		""" The plain keyed-record form: row_labels plus one list per column """
		record = {ROW_LABELS: list(self._row_labels)}
		for name, values in self._columns.items():
			record[name] = list(values)
		return record

	def __eq__(self, other):
		if not isinstance(other, Table):
			return NotImplemented
		return (
			self._row_labels == other._row_labels
			and list(self._columns.items()) == list(other._columns.items())
		)

	__hash__ = None

	def __repr__(self):
		from .display import _printr
		return _printr(self)


# ============================================================
# Functional API
# ============================================================

def _is_record_table(x):
	if not isinstance(x, Mapping) or ROW_LABELS not in x or len(x) < 2:
		return False
	lengths = set()
	for values in x.values():
		if isinstance(values, (str, bytes, Mapping)) or not hasattr(values, '__len__'):
			return False
		lengths.add(len(values))
	return len(lengths) == 1


def is_table(x):
	"""
	True for a ``Table``, or for a keyed record holding ``row_labels`` and
	one or more columns, all of the same length.
	"""
	return isinstance(x, Table) or _is_record_table(x)


def as_table(x):
	"""Coerce a table or keyed record into a ``Table``."""
	if isinstance(x, Table):
		return x
	if _is_record_table(x):
		columns = {name: values for name, values in x.items() if name != ROW_LABELS}
		return Table(columns, row_labels=x[ROW_LABELS])
	raise ArbitrageTypeError(f"Expected a table, not {type(x).__name__}")


def make_table(*columns, row_labels=None, column_names=None):
	"""
	Build a table from equal-length column sequences.

	Examples
	--------
	>>> make_table([1, 2, 3], [4, 5, 6], column_names=['a', 'b'])['b']
	[4, 5, 6]
	"""
	from .vectorize import _vectorize

	columns = [_vectorize(col) for col in columns]
	if column_names is None:
		column_names = list(range(len(columns)))
	else:
		column_names = list(_vectorize(column_names))
		if len(column_names) != len(columns):
			raise ArbitrageValueError(
				f"Got {len(column_names)} column names for {len(columns)} columns."
			)
	if len(set(column_names)) != len(column_names):
		raise ArbitrageValueError(f"Column names must be unique: {column_names}")

	if len({len(col) for col in columns}) > 1:
		raise ColumnLengthMismatchError(
			f"All columns must have the same length, got {[len(col) for col in columns]}"
		)
	return Table(dict(zip(column_names, columns)), row_labels=row_labels)


def row_count(x):
	return len(as_table(x))


def column_count(x):
	return as_table(x).shape[1]


def column_names(x):
	return as_table(x).column_names


def row_labels(x):
	return as_table(x).row_labels

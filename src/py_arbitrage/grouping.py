"""
Partition / grouping engine.

Rows are grouped by a parallel key sequence. Groups come out in ascending
key order (not first-occurrence order), and within a group rows keep the
order they had in the input:

>>> partition([1, 2, 3, 4, 5, 6], ['b', 'b', 'c', 'c', 'c', 'a'])
[[6], [1, 2], [3, 4, 5]]

The implementation sorts once by key with a stable sort, then scans the
sorted positions, closing a group whenever the key changes.
"""

from .errors import ArbitrageTypeError
from .errors import LengthMismatchError
from .kinds import Kind
from .kinds import kind_of
from .sequence import order
from .sequence import select
from .table import as_table
from .vectorize import _vectorize


def _grouping_target(x):
	kind = kind_of(x)
	if kind is Kind.TABLE:
		return as_table(x)
	if kind is Kind.SEQUENCE:
		return _vectorize(x)
	raise ArbitrageTypeError(f"Can only group a sequence or a table, not {type(x).__name__}")


def _group_positions(keys):
	"""
	(key, positions) pairs in ascending key order.

	Positions inside each group are ascending too, because ``order`` is stable.
	"""
	groups = []
	current_key = None
	buffer = None
	for i in order(keys):
		k = keys[i]
		if buffer is None or k != current_key:
			if buffer is not None:
				groups.append((current_key, buffer))
			current_key = k
			buffer = []
		buffer.append(i)
	if buffer is not None:
		groups.append((current_key, buffer))
	return groups


def partition_items(x, key):
	"""
	Group ``x`` by ``key`` and return ``(key, group)`` pairs.

	Parameters
	----------
	x : sequence or table
	key : sequence
		One key per element (or per table row).

	Returns
	-------
	list of (key, list | Table)
		Ascending by key. Table groups keep their row labels.

	Raises
	------
	LengthMismatchError
		If ``key`` does not have one entry per element / row.
	"""
	target = _grouping_target(x)
	keys = _vectorize(key)
	if len(keys) != len(target):
		raise LengthMismatchError(
			f"Key has length {len(keys)}, but the grouped value has {len(target)} rows."
		)
	return [(k, select(target, positions)) for k, positions in _group_positions(keys)]


def partition(x, key):
	return [group for _, group in partition_items(x, key)]


def tapply(x, key, fn):
	""" Apply ``fn`` to every group of ``x``, in ascending key order """
	return [fn(group) for group in partition(x, key)]


def _composite_key(key):
	"""
	Collapse a multi-column key into one tuple per row.

	A key is multi-column when it is a table, or a sequence whose elements
	are all non-tuple sequences (the key columns). Tuples are already
	composite keys and are left alone.
	"""
	if kind_of(key) is Kind.TABLE:
		return [tuple(row) for row in as_table(key)]

	columns = _vectorize(key)
	is_matrix = bool(columns) and all(
		kind_of(col) is Kind.SEQUENCE and not isinstance(col, tuple)
		for col in columns
	)
	if not is_matrix:
		return columns

	columns = [_vectorize(col) for col in columns]
	if len({len(col) for col in columns}) > 1:
		raise LengthMismatchError(
			f"Key columns must share one length, got {[len(col) for col in columns]}"
		)
	return list(zip(*columns))


def by(x, key, fn):
	"""
	Apply ``fn`` to every group of a table.

	``key`` may be a single key sequence or several key columns (a list of
	sequences, or a table); several columns group by their value tuples.

	Examples
	--------
	>>> t = make_table([2020, 2020, 2021], [1, 2, 1], [10, 20, 30])
	>>> by(t, [t[0], t[1]], lambda g: sum(g[2]))
	[10, 20, 30]
	"""
	return tapply(x, _composite_key(key), fn)

"""
Sequence algebra: higher-order traversal, indexing, ordering and set operations.

Functions here accept anything ``_vectorize`` accepts and return plain lists.
Where a function also accepts a table it works row-wise, and ``select`` /
``filter`` on a table return a new ``Table``.

Some names (``map``, ``filter``, ``zip``) deliberately mirror their R
counterparts and shadow the builtins inside this module; the builtins are
reached through ``builtins`` here.
"""

import builtins

from .errors import ArbitrageIndexError
from .errors import ArbitrageTypeError
from .errors import DimensionMismatchError
from .kinds import Kind
from .kinds import _is_bool_mask
from .kinds import _is_hashable
from .kinds import kind_of
from .table import Table
from .table import as_table
from .vectorize import _recycle
from .vectorize import _vectorize
from .vectorize import c


_MISSING = object()


def _elements(x):
	"""Rows of a table, elements of anything else."""
	if kind_of(x) is Kind.TABLE:
		return list(as_table(x))
	return _vectorize(x)


# ============================================================
# Higher-order traversal
# ============================================================

def map(x, f):
	return [f(v) for v in _elements(x)]


def filter(x, pred):
	""" Keep the elements (or table rows) for which ``pred`` holds """
	if kind_of(x) is Kind.TABLE:
		return select(x, pred)
	return [v for v in _vectorize(x) if pred(v)]


def fold(x, f, initial=_MISSING):
	"""
	Reduce ``x`` with ``f(accumulator, element, index)``.

	Without ``initial`` the first element seeds the accumulator and folding
	starts at index 1.
	"""
	values = _elements(x)
	start = 0
	if initial is _MISSING:
		if not values:
			raise ArbitrageTypeError("fold() of an empty sequence with no initial value")
		acc = values[0]
		start = 1
	else:
		acc = initial
	for i in range(start, len(values)):
		acc = f(acc, values[i], i)
	return acc


def do_call(f, args):
	return f(*_vectorize(args))


def mapply(f, *seqs):
	"""
	Apply ``f`` position-wise across recycled sequences.

	>>> mapply(lambda a, b: a + b, [1, 2, 3], [4, 4, 5, 5, 6, 6])
	[5, 6, 8, 6, 8, 9]
	"""
	if not seqs:
		return []
	return [f(*row) for row in builtins.zip(*_recycle(*seqs))]


def zip(*seqs):
	"""
	Rows built from the i-th element of every sequence.

	A single argument is taken as the list of sequences itself, so
	``zip(a, b) == zip([a, b])``.
	"""
	if len(seqs) == 1:
		seqs = _vectorize(seqs[0])
	vectors = [_vectorize(s) for s in seqs]
	if len({len(v) for v in vectors}) > 1:
		raise DimensionMismatchError(
			f"zip needs sequences of one length, got {[len(v) for v in vectors]}"
		)
	return [list(row) for row in builtins.zip(*vectors)]


def t(x):
	""" Transpose a list of equal-length sequences, or a table into row lists """
	if kind_of(x) is Kind.TABLE:
		return [list(row) for row in as_table(x)]
	return zip(x)


# ============================================================
# Indexing
# ============================================================

def which(x, cond):
	"""
	Indices of the elements (or table rows) satisfying ``cond``.

	``cond`` is either a predicate or a boolean mask with one entry per
	element.

	Examples
	--------
	>>> which([1, 2, 3, 4, 5, 6], lambda v: v > 3)
	[3, 4, 5]
	>>> which(['a', 'b', 'c'], [True, False, True])
	[0, 2]
	"""
	items = _elements(x)
	kind = kind_of(cond)

	if kind is Kind.FUNCTION:
		return [i for i, v in enumerate(items) if cond(v)]

	if kind is Kind.SEQUENCE:
		mask = _vectorize(cond)
		if not mask or _is_bool_mask(mask):
			if len(mask) != len(items):
				raise DimensionMismatchError(
					f"Boolean mask has length {len(mask)}, target has length {len(items)}."
				)
			return [i for i, flag in enumerate(mask) if flag]

	raise ArbitrageTypeError(
		f"which() needs a predicate or a boolean mask, not {type(cond).__name__}"
	)


def _resolve_indices(x, idx, n):
	if kind_of(idx) is Kind.FUNCTION:
		return which(x, idx)

	indices = _vectorize(idx)
	if _is_bool_mask(indices):
		return which(x, indices)

	for i in indices:
		if isinstance(i, bool) or not isinstance(i, int):
			raise ArbitrageTypeError(
				f"Indices must be integers, a boolean mask or a predicate, got {i!r}"
			)
		if not 0 <= i < n:
			raise ArbitrageIndexError(f"Index {i} out of range for length {n}")
	return indices


def select(x, idx):
	"""
	Gather elements of ``x`` (or rows of a table) by index.

	``idx`` may be a sequence of indices, a boolean mask or a predicate.
	Selecting from a table gathers every column and the row labels alike.

	Examples
	--------
	>>> select([10, 11, 12, 13, 14], [4, 0])
	[14, 10]
	>>> select([10, 11, 12, 13, 14], lambda v: v > 12)
	[13, 14]
	"""
	kind = kind_of(x)
	if kind is Kind.FUNCTION:
		raise ArbitrageTypeError("select() needs a sequence or a table, not a function")

	if kind is Kind.TABLE:
		table = as_table(x)
		indices = _resolve_indices(table, idx, len(table))
		columns = {
			name: tuple(values[i] for i in indices)
			for name, values in table._columns.items()
		}
		labels = tuple(table._row_labels[i] for i in indices)
		return Table._from_parts(columns, labels)

	values = _vectorize(x)
	indices = _resolve_indices(values, idx, len(values))
	return [values[i] for i in indices]


# ============================================================
# Ordering and deduplication
# ============================================================

def order(x, decreasing=False):
	"""
	Stable permutation that sorts ``x``.

	Ties keep their original relative order in both directions.

	>>> order([13, 12, 15, 22, 19, 11])
	[5, 1, 0, 2, 4, 3]
	>>> order([13, 12, 15, 22, 19, 11], decreasing=True)
	[3, 4, 2, 0, 1, 5]
	"""
	if kind_of(x) is Kind.TABLE:
		raise ArbitrageTypeError("order() a column of the table, not the table itself")
	values = _vectorize(x)
	try:
		return sorted(range(len(values)), key=values.__getitem__, reverse=decreasing)
	except TypeError as e:
		raise ArbitrageTypeError(f"order() needs mutually comparable values: {e}") from e


def _same_value(a, b):
	"""Value equality that stays a single bool for elementwise types like Vector."""
	from .vector import Vector
	if isinstance(a, Vector) or isinstance(b, Vector):
		return isinstance(a, Vector) and isinstance(b, Vector) and a.to_list() == b.to_list()
	return bool(a == b)


def unique(x):
	""" First occurrence of every distinct value, in order """
	seen = set()
	out = []

	# Fast path: hashable
	try:
		for v in _vectorize(x):
			if v not in seen:
				seen.add(v)
				out.append(v)
		return out
	except TypeError:
		pass

	# Slow path: unhashables
	out = []
	for v in _vectorize(x):
		if not builtins.any(_same_value(v, y) for y in out):
			out.append(v)
	return out


def tabulate(x):
	"""
	Count occurrences of every distinct value, keyed in first-occurrence order.

	>>> tabulate(['a', 'b', 'a'])
	{'a': 2, 'b': 1}
	"""
	counts = {}
	for v in _vectorize(x):
		if not _is_hashable(v):
			raise ArbitrageTypeError(f"tabulate() needs hashable values, got {type(v).__name__}")
		counts[v] = counts.get(v, 0) + 1
	return counts


# ============================================================
# Set operations
# ============================================================

def _membership(xs):
	"""Predicate testing membership in ``xs`` by value equality."""
	values = _vectorize(xs)
	try:
		lookup = set(values)
	except TypeError:
		lookup = None

	def contains(v):
		if lookup is not None and _is_hashable(v):
			return v in lookup
		return builtins.any(_same_value(v, y) for y in values)

	return contains


def within(x, xs):
	""" Boolean list parallel to ``x``: is each element a member of ``xs`` """
	contains = _membership(xs)
	return [contains(v) for v in _vectorize(x)]


def setdiff(a, b):
	""" Distinct elements of ``a`` not in ``b``, in first-occurrence order of ``a`` """
	contains = _membership(b)
	return [v for v in unique(a) if not contains(v)]


def intersection(a, b):
	""" Distinct elements of ``a`` also in ``b``, in first-occurrence order of ``a`` """
	contains = _membership(b)
	return [v for v in unique(a) if contains(v)]


def union(a, b):
	""" Distinct elements of ``a`` then ``b``, in first-occurrence order """
	return unique(c(a, b))


# ============================================================
# Products
# ============================================================

def cartesian_product(x, y):
	"""
	Every pairing of the distinct values of ``x`` with those of ``y``.

	>>> cartesian_product([1, 2], [3, 4, 5])
	[[1, 3], [1, 4], [1, 5], [2, 3], [2, 4], [2, 5]]
	"""
	ys = unique(y)
	return [[a, b] for a in unique(x) for b in ys]


def expand_grid(xs, ys):
	"""
	Grid of all ``(x, y)`` rows with ``x`` varying fastest.

	>>> expand_grid([1, 2], [3, 4])
	[[1, 3], [2, 3], [1, 4], [2, 4]]
	"""
	xs = _vectorize(xs)
	return [[x, y] for y in _vectorize(ys) for x in xs]

"""
Vectorization and recycling primitives.

Everything in py-arbitrage funnels its arguments through ``_vectorize`` and
aligns them with ``_recycle``. These two rules are what give the library its
R flavour: a scalar is a vector of length one, and a shorter vector is
repeated end-to-end to match a longer one whenever its length divides evenly.

>>> _recycle([1, 2], [1, 2, 3, 4], 3)
[[1, 2, 1, 2], [1, 2, 3, 4], [3, 3, 3, 3]]
"""

import math

from .errors import ArbitrageValueError
from .errors import IncompatibleLengthError
from .kinds import Kind
from .kinds import kind_of
from .table import as_table


def _vectorize(x):
	"""
	Coerce any value into an ordered sequence.

	Lists and tuples pass through unchanged, other sequences (ranges,
	generators, Vectors) are materialized into a list, and anything else,
	tables included, becomes a one-element list.
	"""
	if isinstance(x, (list, tuple)):
		return x
	if kind_of(x) is Kind.SEQUENCE:
		return list(x)
	return [x]


def _recycle(*seqs):
	"""
	Repeat shorter sequences so all of them share the longest length.

	Raises
	------
	IncompatibleLengthError
		If some length does not evenly divide the longest one.
	"""
	vectors = [_vectorize(s) for s in seqs]
	if not vectors:
		return []

	target = max(len(v) for v in vectors)
	out = []
	for i, v in enumerate(vectors):
		n = len(v)
		if n == target:
			out.append(list(v))
		elif n and target % n == 0:
			out.append(list(v) * (target // n))
		else:
			raise IncompatibleLengthError(
				f"Argument {i} has length {n}, which does not divide the longest length {target}."
			)
	return out


def c(*xs):
	""" Concatenate the vectorized arguments into one list """
	return [v for x in xs for v in _vectorize(x)]


def rep(x, times):
	"""
	Repeat ``x`` ``times`` times.

	A sequence is repeated as a whole, not element by element:

	>>> rep([1, 2], 2)
	[1, 2, 1, 2]
	"""
	if isinstance(times, bool) or not isinstance(times, int) or times < 0:
		raise ArbitrageValueError(f"times must be a non-negative integer, not {times!r}")
	return list(_vectorize(x)) * times


def seq(from_, to=None, by=1):
	"""
	Arithmetic progression from ``from_`` towards ``to`` in steps of ``by``.

	With a single argument, returns ``0..from_-1``. The sign of ``by`` is
	flipped when it points away from ``to``. The number of values is
	``|ceil((to - from_) / by)| + 1``, so the last value can overshoot ``to``
	when the distance is not a multiple of ``by``:

	>>> seq(1, 10, 4)
	[1, 5, 9, 13]

	The count uses ``by`` as given, before any sign flip, so a step pointing the
	wrong way can yield one value fewer than the same step pointing the right way:

	>>> seq(1, 10, -4)
	[1, 5, 9]
	"""
	if to is None:
		if from_ != int(from_):
			raise ArbitrageValueError(f"seq(n) needs a whole number, not {from_!r}")
		return list(range(int(from_)))

	if by == 0:
		raise ArbitrageValueError("seq step 'by' must be non-zero")

	length_out = abs(math.ceil((to - from_) / by)) + 1
	if (from_ > to and by > 0) or (from_ < to and by < 0):
		by = -by
	return [from_ + i * by for i in range(length_out)]


def length(x):
	""" Row count for tables, element count for everything else """
	if kind_of(x) is Kind.TABLE:
		return len(as_table(x))
	return len(_vectorize(x))

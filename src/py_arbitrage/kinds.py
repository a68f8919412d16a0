"""
Value kinds for py-arbitrage.

Every polymorphic operation dispatches on exactly one of these kinds:

  - SCALAR    a single value, including strings, bytes and plain mappings
  - SEQUENCE  an ordered collection (list, tuple, Vector, range, iterator, ...)
  - TABLE     a ``Table`` or a keyed record carrying ``row_labels``
  - FUNCTION  a callable used as a predicate or mapper

Examples
--------
>>> kind_of([1, 2])
<Kind.SEQUENCE: 'sequence'>
>>> kind_of('abc')
<Kind.SCALAR: 'scalar'>
"""

from __future__ import annotations
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from .table import Table, is_table


class Kind(Enum):
	SCALAR = 'scalar'
	SEQUENCE = 'sequence'
	TABLE = 'table'
	FUNCTION = 'function'


_SCALAR_TYPES = (str, bytes, bytearray, Mapping)


def kind_of(x: Any) -> Kind:
	if isinstance(x, Table) or is_table(x):
		return Kind.TABLE
	if isinstance(x, _SCALAR_TYPES):
		return Kind.SCALAR
	if isinstance(x, Iterable):
		return Kind.SEQUENCE
	if callable(x):
		return Kind.FUNCTION
	return Kind.SCALAR


def is_sequence(x: Any) -> bool:
	return kind_of(x) is Kind.SEQUENCE


def _is_hashable(x: Any) -> bool:
	try:
		hash(x)
		return True
	except TypeError:
		return False


def _is_bool_mask(xs) -> bool:
	return bool(xs) and {type(x) for x in xs} == {bool}

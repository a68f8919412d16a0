"""Column names as attributes, and positional default names."""

from __future__ import annotations
import re


_INVALID_RUN = re.compile(r'[^a-z0-9_]+')


def _attribute_name(name) -> str | None:
	"""Identifier form of a column name, or None if nothing usable is left.

	``"Unit Price"`` -> ``unit_price``, ``2020`` -> ``c2020``.
	"""
	sanitized = _INVALID_RUN.sub('_', str(name).lower()).strip('_')
	if not sanitized:
		return None
	if sanitized[0].isdigit():
		return "c" + sanitized
	return sanitized


def _build_column_map(names) -> dict[str, object]:
	"""Map attribute names to the original column names.

	Clashing attribute names get ``__2``, ``__3``, ... suffixes; columns whose
	name sanitizes to nothing are reachable as ``col{idx}_``.
	"""
	column_map = {}
	for idx, name in enumerate(names):
		base = _attribute_name(name)
		if base is None:
			attr = f'col{idx}_'
		else:
			attr = base
			suffix = 2
			while attr in column_map:
				attr = f"{base}__{suffix}"
				suffix += 1
		column_map[attr] = name
	return column_map


def _next_column_name(names) -> int:
	"""The positional default name for a column appended after ``names``."""
	taken = set(names)
	candidate = len(taken)
	while candidate in taken:
		candidate += 1
	return candidate

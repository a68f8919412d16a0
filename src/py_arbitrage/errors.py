class ArbitrageError(Exception):
	"""Base exception for py-arbitrage library."""
	pass


class ArbitrageTypeError(ArbitrageError, TypeError):
	"""Raised for arguments of the wrong kind."""
	pass


class ArbitrageValueError(ArbitrageError, ValueError):
	"""Raised for invalid argument values."""
	pass


class ArbitrageIndexError(ArbitrageError, IndexError):
	"""Raised for out-of-range selections."""
	pass


class ArbitrageKeyError(ArbitrageError, KeyError):
	"""Raised when a column name is missing."""
	pass


class ColumnLengthMismatchError(ArbitrageValueError):
	"""Raised when table columns have differing lengths."""
	pass


class ColumnMismatchError(ArbitrageValueError):
	"""Raised when tables stacked by rows have different column sets."""
	pass


class DimensionMismatchError(ArbitrageValueError):
	"""Raised when operands have incompatible row or element counts."""
	pass


class IncompatibleLengthError(DimensionMismatchError):
	"""Raised when sequence lengths cannot be recycled to a common length."""
	pass


class LengthMismatchError(DimensionMismatchError):
	"""Raised when a grouping key does not have one entry per row."""
	pass


class ProbabilityError(ArbitrageValueError):
	"""Raised when sampling weights do not sum to one."""
	pass

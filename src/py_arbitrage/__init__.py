"""
py-arbitrage: R-style vectorized operations over plain Python sequences

Every function accepts scalars, sequences or tables and treats a scalar as a
one-element vector. Binary operations align their arguments with R's
recycling rule: a shorter sequence is repeated end-to-end when its length
divides the longer one, and anything else is an error.

Main pieces:
    - _vectorize / _recycle: the coercion and broadcasting primitives
    - Sequence algebra: map, fold, filter, order, unique, which, select, set ops
    - Table: immutable named columns sharing one sequence of row labels
    - partition / tapply / by: grouping in ascending key order
    - rbind / cbind: row-wise and column-wise table composition
    - Vector: operator-overloading wrapper over the functional API

Zero external dependencies - pure Python stdlib only.
"""

from .errors import (
	ArbitrageError,
	ArbitrageIndexError,
	ArbitrageKeyError,
	ArbitrageTypeError,
	ArbitrageValueError,
	ColumnLengthMismatchError,
	ColumnMismatchError,
	DimensionMismatchError,
	IncompatibleLengthError,
	LengthMismatchError,
	ProbabilityError,
)
from .kinds import Kind, kind_of, is_sequence
from .table import (
	Row,
	Table,
	as_table,
	column_count,
	column_names,
	is_table,
	make_table,
	row_count,
	row_labels,
)
from .vectorize import _recycle, _vectorize, c, length, rep, seq
from .sequence import (
	cartesian_product,
	do_call,
	expand_grid,
	filter,
	fold,
	intersection,
	map,
	mapply,
	order,
	select,
	setdiff,
	t,
	tabulate,
	union,
	unique,
	which,
	within,
	zip,
)
from .grouping import by, partition, partition_items, tapply
from .joins import cbind, rbind
from .arith import (
	add,
	all,
	any,
	ceiling,
	cumprod,
	cumsum,
	divide,
	exp,
	floor,
	inner_product,
	is_equal,
	log,
	max,
	mean,
	min,
	multiply,
	paste,
	prod,
	round,
	sqrt,
	subtract,
	sum,
)
from .probability import runif, sample
from .vector import Vector

__version__ = "0.1.0"
__all__ = [
	"Vector",
	"Table",
	"Row",
	"Kind",
	"kind_of",
	"is_sequence",
	# tables
	"make_table",
	"is_table",
	"as_table",
	"row_count",
	"column_count",
	"column_names",
	"row_labels",
	# vectorization
	"c",
	"rep",
	"seq",
	"length",
	# sequence algebra
	"map",
	"filter",
	"fold",
	"do_call",
	"mapply",
	"zip",
	"t",
	"which",
	"select",
	"order",
	"unique",
	"tabulate",
	"within",
	"setdiff",
	"intersection",
	"union",
	"cartesian_product",
	"expand_grid",
	# grouping and joins
	"partition",
	"partition_items",
	"tapply",
	"by",
	"rbind",
	"cbind",
	# arithmetic
	"add",
	"subtract",
	"multiply",
	"divide",
	"is_equal",
	"inner_product",
	"sum",
	"prod",
	"mean",
	"min",
	"max",
	"any",
	"all",
	"cumsum",
	"cumprod",
	"paste",
	"log",
	"exp",
	"sqrt",
	"floor",
	"ceiling",
	"round",
	# probability
	"sample",
	"runif",
	# errors
	"ArbitrageError",
	"ArbitrageTypeError",
	"ArbitrageValueError",
	"ArbitrageIndexError",
	"ArbitrageKeyError",
	"ColumnLengthMismatchError",
	"ColumnMismatchError",
	"DimensionMismatchError",
	"IncompatibleLengthError",
	"LengthMismatchError",
	"ProbabilityError",
]

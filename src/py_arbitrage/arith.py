"""
Elementwise arithmetic and reducers.

Thin wrappers over ``_recycle``, ``map`` and ``fold``. Reducer names follow R
and shadow the builtins inside this module.
"""

import builtins
import math
import operator
from itertools import accumulate

from .errors import ArbitrageValueError
from .sequence import fold
from .sequence import map
from .sequence import mapply
from .vectorize import _vectorize
from .vectorize import c


# ============================================================
# Binary operations (recycled)
# ============================================================

def add(x, y):
	return mapply(operator.add, x, y)


def subtract(x, y):
	return mapply(operator.sub, x, y)


def multiply(x, y):
	return mapply(operator.mul, x, y)


def divide(x, y):
	return mapply(operator.truediv, x, y)


def is_equal(x, y):
	""" Recycled elementwise ``==`` """
	return mapply(operator.eq, x, y)


def inner_product(x, y):
	return sum(multiply(x, y))


# ============================================================
# Reducers
# ============================================================

def sum(x):
	return fold(x, lambda acc, v, i: acc + v, 0)


def prod(x):
	return fold(x, lambda acc, v, i: acc * v, 1)


def mean(x):
	values = _vectorize(x)
	if not values:
		raise ArbitrageValueError("mean() of an empty sequence")
	return sum(values) / len(values)


def min(*xs):
	values = c(*xs)
	if not values:
		raise ArbitrageValueError("min() of an empty sequence")
	return builtins.min(values)


def max(*xs):
	values = c(*xs)
	if not values:
		raise ArbitrageValueError("max() of an empty sequence")
	return builtins.max(values)


def any(x):
	return builtins.any(_vectorize(x))


def all(x):
	return builtins.all(_vectorize(x))


def cumsum(x):
	return list(accumulate(_vectorize(x), operator.add))


def cumprod(x):
	return list(accumulate(_vectorize(x), operator.mul))


def paste(x, collapse=","):
	""" Join the string form of every element with ``collapse`` """
	return collapse.join(str(v) for v in _vectorize(x))


# ============================================================
# Unary math
# ============================================================

def log(x, base=math.e):
	return map(x, lambda v: math.log(v, base))


def exp(x):
	return map(x, math.exp)


def sqrt(x):
	return map(x, math.sqrt)


def floor(x):
	return map(x, math.floor)


def ceiling(x):
	return map(x, math.ceil)


def round(x, digits=0):
	return map(x, lambda v: builtins.round(v, digits))

import operator
import warnings

from . import arith
from . import grouping
from . import sequence
from .errors import ArbitrageTypeError
from .sequence import mapply
from .vectorize import _vectorize
from .vectorize import rep


class MethodProxy:
	"""Proxy that defers method calls to each element in a Vector."""
	def __init__(self, vector, method_name):
		self._vector = vector
		self._method_name = method_name

	def __call__(self, *args, **kwargs):
		method = self._method_name
		results = []
		for elem in self._vector._underlying:
			if elem is None:
				results.append(None)
			else:
				results.append(getattr(elem, method)(*args, **kwargs))
		return Vector(results)


# ============================================================
# Vector
# ============================================================

class Vector():
	""" Immutable vector with R-style recycling on every elementwise operator """
	_underlying = ()
	_name = None

	def __init__(self, initial=(), name=None):
		"""
		Parameters
		----------
		initial : any
			Anything ``_vectorize`` accepts; a scalar becomes a one-element vector.
		name : optional
			Display name.
		"""
		self._underlying = tuple(_vectorize(initial))
		self._name = name

	@property
	def name(self):
		return self._name

	def copy(self, new_values=None, name=...):
		# Sentinel (...) distinguishes "keep the name" from name=None (clear it)
		use_name = self._name if name is ... else name
		values = self._underlying if new_values is None else new_values
		return Vector(values, name=use_name)

	def rename(self, new_name):
		"""Return a copy of this vector under a new name"""
		return self.copy(name=new_name)

	def to_list(self):
		return list(self._underlying)

	def __repr__(self):
		from .display import _printr
		return _printr(self)

	def __iter__(self):
		""" iterate over the underlying tuple """
		return iter(self._underlying)

	def __len__(self):
		""" length of the underlying tuple """
		return len(self._underlying)

	def __getitem__(self, key):
		""" Get item(s) from self. Behavior varies by input type:
			# Int: a single value
			# Slice: a Vector of the slice
			# Index list, boolean mask or predicate: a Vector gathered by select()
		"""
		if isinstance(key, int) and not isinstance(key, bool):
			return self._underlying[key]
		if isinstance(key, slice):
			return self.copy(self._underlying[key])
		return self.copy(sequence.select(self._underlying, key))

	def __bool__(self):
		"""
		Standard Python truthiness: returns True if the vector is not empty.

		Note: Emits a warning for boolean vectors because users often mistakenly
		use 'if vec' when they mean 'if vec.any()'.
		"""
		is_non_empty = bool(self._underlying)
		if is_non_empty and all(isinstance(x, bool) for x in self._underlying):
			warnings.warn(
				"Vector is being used in a boolean context (e.g., 'if vector:'). "
				"This checks for emptiness (len > 0), not element-wise truth. "
				"Use .any() or .all() for element-wise checks.",
				stacklevel=2
			)
		return is_non_empty

	__hash__ = None

	""" Comparison Operators
		# __eq__ ==
		# __ge__ >=
		# __gt__ >
		# __lt__ <
		# __le__ <=
		# __ne__ !=
	"""
	def _elementwise_operation(self, other, op_func, op_symbol: str):
		"""Apply ``op_func`` position-wise after recycling self and other."""
		if isinstance(other, Vector):
			other = other._underlying
		try:
			result = mapply(op_func, self._underlying, other)
		except TypeError as e:
			raise ArbitrageTypeError(
				f"Unsupported operand type(s) for '{op_symbol}': {e}"
			) from e
		return Vector(result)

	def _reflected_operation(self, other, op_func, op_symbol: str):
		return self._elementwise_operation(other, lambda y, x: op_func(x, y), op_symbol)

	def __eq__(self, other):
		return self._elementwise_operation(other, operator.eq, '==')

	def __ge__(self, other):
		return self._elementwise_operation(other, operator.ge, '>=')

	def __gt__(self, other):
		return self._elementwise_operation(other, operator.gt, '>')

	def __le__(self, other):
		return self._elementwise_operation(other, operator.le, '<=')

	def __lt__(self, other):
		return self._elementwise_operation(other, operator.lt, '<')

	def __ne__(self, other):
		return self._elementwise_operation(other, operator.ne, '!=')

	def __and__(self, other):
		return self._elementwise_operation(other, operator.and_, '&')

	def __or__(self, other):
		return self._elementwise_operation(other, operator.or_, '|')

	def __xor__(self, other):
		return self._elementwise_operation(other, operator.xor, '^')

	def __rand__(self, other):
		return self._reflected_operation(other, operator.and_, '&')

	def __ror__(self, other):
		return self._reflected_operation(other, operator.or_, '|')

	def __rxor__(self, other):
		return self._reflected_operation(other, operator.xor, '^')

	""" Math operations """
	def _unary_operation(self, op_func):
		return self.copy(tuple(op_func(x) for x in self._underlying))

	def __add__(self, other):
		return self._elementwise_operation(other, operator.add, '+')

	def __sub__(self, other):
		return self._elementwise_operation(other, operator.sub, '-')

	def __mul__(self, other):
		return self._elementwise_operation(other, operator.mul, '*')

	def __truediv__(self, other):
		return self._elementwise_operation(other, operator.truediv, '/')

	def __floordiv__(self, other):
		return self._elementwise_operation(other, operator.floordiv, '//')

	def __mod__(self, other):
		return self._elementwise_operation(other, operator.mod, '%')

	def __pow__(self, other):
		return self._elementwise_operation(other, operator.pow, '**')

	def __radd__(self, other):
		return self._reflected_operation(other, operator.add, '+')

	def __rsub__(self, other):
		return self._reflected_operation(other, operator.sub, '-')

	def __rmul__(self, other):
		return self._reflected_operation(other, operator.mul, '*')

	def __rtruediv__(self, other):
		return self._reflected_operation(other, operator.truediv, '/')

	def __rfloordiv__(self, other):
		return self._reflected_operation(other, operator.floordiv, '//')

	def __rmod__(self, other):
		return self._reflected_operation(other, operator.mod, '%')

	def __rpow__(self, other):
		return self._reflected_operation(other, operator.pow, '**')

	def __neg__(self):
		return self._unary_operation(operator.neg)

	def __pos__(self):
		return self._unary_operation(operator.pos)

	def __abs__(self):
		return self._unary_operation(operator.abs)

	def __invert__(self):
		""" Logical not for booleans, bitwise invert otherwise """
		return self._unary_operation(lambda x: not x if isinstance(x, bool) else ~x)

	"""
	Sequence algebra
	"""
	def order(self, decreasing=False):
		return Vector(sequence.order(self._underlying, decreasing))

	def sort_values(self, reverse=False):
		""" Stable sort. Returns a new Vector with the same name. """
		return self[sequence.order(self._underlying, reverse)]

	def unique(self):
		return self.copy(sequence.unique(self._underlying))

	def which(self, cond):
		return Vector(sequence.which(self._underlying, cond))

	def select(self, idx):
		return self.copy(sequence.select(self._underlying, idx))

	def map(self, f):
		return Vector(sequence.map(self._underlying, f))

	def filter(self, pred):
		return self.copy(sequence.filter(self._underlying, pred))

	def fold(self, f, *initial):
		return sequence.fold(self._underlying, f, *initial)

	def rep(self, times):
		return self.copy(rep(self._underlying, times))

	def within(self, xs):
		return Vector(sequence.within(self._underlying, xs))

	def partition(self, key):
		return [self.copy(group) for group in grouping.partition(self._underlying, key)]

	def tapply(self, key, fn):
		return grouping.tapply(self._underlying, key, lambda group: fn(self.copy(group)))

	"""
	Reducers
	"""
	def sum(self):
		return arith.sum(self._underlying)

	def mean(self):
		return arith.mean(self._underlying)

	def min(self):
		return arith.min(self._underlying)

	def max(self):
		return arith.max(self._underlying)

	def any(self):
		return arith.any(self._underlying)

	def all(self):
		return arith.all(self._underlying)

	def cumsum(self):
		return self.copy(arith.cumsum(self._underlying))

	def __getattr__(self, name):
		"""Proxy attribute access to the elements' common type.

		- Properties are evaluated immediately and return a Vector
		- Methods return a MethodProxy that waits for () to be called
		"""
		if name.startswith('__'):
			raise AttributeError(name)
		kinds = {type(x) for x in self._underlying if x is not None}
		if len(kinds) != 1:
			raise AttributeError(f"Vector of mixed or no element types has no attribute '{name}'")
		element_kind = kinds.pop()

		cls_attr = getattr(element_kind, name, None)
		if cls_attr is None:
			raise AttributeError(f"'{element_kind.__name__}' object has no attribute '{name}'")

		if callable(cls_attr):
			return MethodProxy(self, name)
		return Vector(tuple(
			getattr(x, name) if x is not None else None
			for x in self._underlying
		))

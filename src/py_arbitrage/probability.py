"""
Random draws.

Both functions take an optional ``rng``: any object with a ``random()``
method returning floats in ``[0, 1)``, such as ``random.Random(seed)``.
Without one they draw from the ``random`` module.
"""

import random

from .errors import ArbitrageValueError
from .errors import DimensionMismatchError
from .errors import ProbabilityError
from .vectorize import _vectorize


PROBABILITY_TOLERANCE = 1e-12


def _draw_index(weights, total, rng):
	"""Index drawn with probability weights[i] / total."""
	p = rng.random() * total
	running = 0.0
	for i, w in enumerate(weights):
		running += w
		if p < running:
			return i
	# Rounding can leave p just past the last boundary.
	return max(i for i, w in enumerate(weights) if w > 0)


def sample(x, size, prob=None, replace=True, rng=None):
	"""
	Draw ``size`` elements from ``x``.

	Parameters
	----------
	x : sequence
		The sample space.
	size : int
		Number of draws.
	prob : sequence, optional
		One probability per element, summing to 1. Uniform by default.
	replace : bool
		Draw with replacement (default). Without replacement every draw
		removes the drawn element and renormalizes the remaining weights.
	rng : optional
		Source of uniform floats.

	Examples
	--------
	>>> sample([1, 2, 3], 4, prob=[0, 1, 0])
	[2, 2, 2, 2]
	"""
	rng = random if rng is None else rng
	space = list(_vectorize(x))
	if prob is None:
		weights = [1 / len(space)] * len(space) if space else []
	else:
		weights = [float(w) for w in _vectorize(prob)]

	if len(weights) != len(space):
		raise DimensionMismatchError(
			f"x has {len(space)} elements but prob has {len(weights)}."
		)
	if any(w < 0 for w in weights):
		raise ProbabilityError("Probabilities must be non-negative")
	total = sum(weights)
	if abs(1 - total) > PROBABILITY_TOLERANCE:
		raise ProbabilityError(f"Sum of probabilities must equal 1, got {total}")
	if isinstance(size, bool) or not isinstance(size, int) or size < 0:
		raise ArbitrageValueError(f"size must be a non-negative integer, not {size!r}")

	if replace:
		return [space[_draw_index(weights, total, rng)] for _ in range(size)]

	if size > len(space):
		raise ArbitrageValueError(
			f"Cannot draw {size} elements without replacement from {len(space)}."
		)
	drawn = []
	for _ in range(size):
		total = sum(weights)
		if total <= 0:
			raise ProbabilityError("Too few elements with non-zero probability to sample without replacement")
		idx = _draw_index(weights, total, rng)
		drawn.append(space.pop(idx))
		weights.pop(idx)
	return drawn


def runif(n, min=0, max=1, rng=None):
	""" ``n`` uniform draws from ``[min, max)`` """
	rng = random if rng is None else rng
	return [min + (max - min) * rng.random() for _ in range(n)]

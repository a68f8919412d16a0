"""Vector: creation, indexing, recycled operators, proxies and methods"""
import warnings

import pytest
from py_arbitrage import Vector, order
from py_arbitrage.vectorize import _recycle
from py_arbitrage.errors import (
    ArbitrageIndexError,
    ArbitrageTypeError,
    IncompatibleLengthError,
)


class TestCreation:
    """Test basic vector creation"""

    @pytest.mark.parametrize("initial,expected", [
        ([1, 2, 3], [1, 2, 3]),
        ((1, 2), [1, 2]),
        (range(3), [0, 1, 2]),
        (5, [5]),
        ('abc', ['abc']),
        ([], []),
    ])
    def test_creation(self, initial, expected):
        assert Vector(initial).to_list() == expected

    def test_default_is_empty(self):
        v = Vector()
        assert len(v) == 0
        assert not v

    def test_name(self):
        assert Vector([1], name='x').name == 'x'

    def test_source_list_is_not_shared(self):
        source = [1, 2]
        v = Vector(source)
        source.append(3)
        assert v.to_list() == [1, 2]

    def test_copy_keeps_name(self):
        v = Vector([1, 2], name='x')
        assert v.copy().name == 'x'
        assert v.copy(name=None).name is None
        assert v.copy([3]).to_list() == [3]

    def test_rename(self):
        v = Vector([1], name='x')
        assert v.rename('y').name == 'y'
        assert v.name == 'x'

    def test_passes_through_functional_api(self):
        assert order(Vector([3, 1, 2])) == [1, 2, 0]
        assert _recycle(Vector([1]), [1, 2]) == [[1, 1], [1, 2]]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1]))


class TestIndexing:
    """Ints, slices, index lists, masks and predicates"""

    @pytest.fixture
    def v(self):
        return Vector([10, 20, 30, 40], name='n')

    def test_int(self, v):
        assert v[0] == 10
        assert v[-1] == 40

    def test_slice(self, v):
        s = v[1:3]
        assert isinstance(s, Vector)
        assert s.to_list() == [20, 30]
        assert s.name == 'n'

    def test_index_list(self, v):
        assert v[[3, 0]].to_list() == [40, 10]

    def test_mask_from_comparison(self, v):
        assert v[v > 15].to_list() == [20, 30, 40]

    def test_predicate(self, v):
        assert v[lambda x: x < 25].to_list() == [10, 20]

    def test_out_of_range_list(self, v):
        with pytest.raises(ArbitrageIndexError):
            v[[4]]


class TestOperators:
    """Every binary operator recycles"""

    def test_scalar(self):
        assert (Vector([1, 2, 3]) + 1).to_list() == [2, 3, 4]

    def test_recycled(self):
        assert (Vector([1, 2, 3, 4]) * [1, 10]).to_list() == [1, 20, 3, 40]

    def test_vector_operand(self):
        assert (Vector([1, 2]) - Vector([1, 1])).to_list() == [0, 1]

    def test_incompatible(self):
        with pytest.raises(IncompatibleLengthError):
            Vector([1, 2, 3]) + [1, 2]

    @pytest.mark.parametrize("expr,expected", [
        (lambda v: 10 - v, [9, 8]),
        (lambda v: 10 / v, [10.0, 5.0]),
        (lambda v: 2 ** v, [2, 4]),
        (lambda v: 7 // v, [7, 3]),
        (lambda v: 7 % v, [0, 1]),
        (lambda v: 1 + v, [2, 3]),
        (lambda v: 3 * v, [3, 6]),
    ])
    def test_reflected(self, expr, expected):
        assert expr(Vector([1, 2])).to_list() == expected

    @pytest.mark.parametrize("expr,expected", [
        (lambda v: v == 2, [False, True, False]),
        (lambda v: v != 2, [True, False, True]),
        (lambda v: v < 2, [True, False, False]),
        (lambda v: v <= 2, [True, True, False]),
        (lambda v: v > 2, [False, False, True]),
        (lambda v: v >= 2, [False, True, True]),
    ])
    def test_comparisons(self, expr, expected):
        assert expr(Vector([1, 2, 3])).to_list() == expected

    def test_boolean_operators(self):
        a = Vector([True, True, False])
        assert (a & [True, False, False]).to_list() == [True, False, False]
        assert (a | False).to_list() == [True, True, False]
        assert (a ^ True).to_list() == [False, False, True]
        assert (True & a).to_list() == [True, True, False]

    def test_unary(self):
        assert (-Vector([1, -2])).to_list() == [-1, 2]
        assert abs(Vector([-1, 2])).to_list() == [1, 2]
        assert (~Vector([True, False])).to_list() == [False, True]
        assert (~Vector([0])).to_list() == [-1]

    def test_unsupported_operands(self):
        with pytest.raises(ArbitrageTypeError):
            Vector([1, 'a']) + 1


class TestBooleanBehavior:
    """Truthiness checks emptiness"""

    def test_bool_vector_warns(self):
        with pytest.warns(UserWarning, match="boolean context"):
            assert bool(Vector([False]))

    def test_non_bool_vector_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert bool(Vector([0]))


class TestMethodProxy:
    """Unknown attributes proxy to the element type"""

    def test_method(self):
        assert Vector(['a', 'b']).upper().to_list() == ['A', 'B']

    def test_method_with_arguments(self):
        assert Vector(['a-b', 'c']).split('-').to_list() == [['a', 'b'], ['c']]

    def test_property(self):
        assert Vector([complex(1, 2), complex(3, 4)]).imag.to_list() == [2.0, 4.0]

    def test_none_is_skipped(self):
        assert Vector(['a', None]).upper().to_list() == ['A', None]

    def test_mixed_types(self):
        with pytest.raises(AttributeError):
            Vector([1, 'a']).upper

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            Vector(['a']).nonexistent


class TestMethods:
    """Methods forwarding to the functional API"""

    def test_order_and_sort(self):
        v = Vector([3, 1, 2], name='x')
        assert v.order().to_list() == [1, 2, 0]
        s = v.sort_values()
        assert s.to_list() == [1, 2, 3]
        assert s.name == 'x'
        assert v.sort_values(reverse=True).to_list() == [3, 2, 1]

    def test_unique(self):
        assert Vector([2, 1, 2]).unique().to_list() == [2, 1]

    def test_which_select(self):
        v = Vector([5, 6, 7])
        assert v.which(lambda x: x > 5).to_list() == [1, 2]
        assert v.select([2]).to_list() == [7]

    def test_map_filter_fold(self):
        v = Vector([1, 2, 3])
        assert v.map(lambda x: x * 10).to_list() == [10, 20, 30]
        assert v.filter(lambda x: x != 2).to_list() == [1, 3]
        assert v.fold(lambda acc, x, i: acc + x) == 6
        assert v.fold(lambda acc, x, i: acc + x, 100) == 106

    def test_rep_within(self):
        v = Vector([1, 2])
        assert v.rep(2).to_list() == [1, 2, 1, 2]
        assert v.within([2]).to_list() == [False, True]

    def test_partition_tapply(self):
        v = Vector([1, 2, 3, 4], name='x')
        groups = v.partition(['b', 'a', 'b', 'a'])
        assert [g.to_list() for g in groups] == [[2, 4], [1, 3]]
        assert all(g.name == 'x' for g in groups)
        assert v.tapply(['b', 'a', 'b', 'a'], lambda g: g.sum()) == [6, 4]

    def test_reducers(self):
        v = Vector([1, 2, 3, 4])
        assert v.sum() == 10
        assert v.mean() == 2.5
        assert v.min() == 1
        assert v.max() == 4
        assert v.cumsum().to_list() == [1, 3, 6, 10]
        assert Vector([False, True]).any()
        assert not Vector([False, True]).all()

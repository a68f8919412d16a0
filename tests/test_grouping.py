"""partition / tapply / by"""
import pytest
from py_arbitrage import Table, make_table
from py_arbitrage.grouping import by, partition, partition_items, tapply
from py_arbitrage.errors import (
    ArbitrageTypeError,
    DimensionMismatchError,
    LengthMismatchError,
)


KEY = ['b', 'b', 'c', 'c', 'c', 'a']


class TestPartition:
    """Groups come out in ascending key order"""

    def test_scenario(self):
        assert partition([1, 2, 3, 4, 5, 6], KEY) == [[6], [1, 2], [3, 4, 5]]

    def test_items_carry_keys(self):
        items = partition_items([1, 2, 3, 4, 5, 6], KEY)
        assert [k for k, _ in items] == ['a', 'b', 'c']

    def test_numeric_keys(self):
        assert partition([10, 20, 30, 40], [2, 1, 2, 1]) == [[20, 40], [10, 30]]

    def test_within_group_order_is_input_order(self):
        assert partition(['p', 'q', 'r', 's'], [1, 0, 1, 0]) == [['q', 's'], ['p', 'r']]

    def test_tuple_keys(self):
        groups = partition([1, 2, 3], [(1, 'b'), (1, 'a'), (1, 'b')])
        assert groups == [[2], [1, 3]]

    def test_empty(self):
        assert partition([], []) == []

    @pytest.mark.parametrize("x,key", [
        ([1, 2, 3, 4, 5, 6], KEY),
        ([5, 3, 5, 1], [0, 0, 0, 0]),
        (list(range(10)), [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]),
        (['x'], ['only']),
    ])
    def test_totality(self, x, key):
        groups = partition(x, key)
        flat = [v for group in groups for v in group]
        assert sorted(flat) == sorted(x)
        assert len(groups) == len(set(key))

    @pytest.mark.parametrize("key", [
        ['c', 'a', 'b'],
        ['b', 'c', 'a'],
        ['a', 'b', 'c'],
    ])
    def test_group_order_ignores_key_arrangement(self, key):
        items = partition_items(['x', 'y', 'z'], key)
        assert [k for k, _ in items] == ['a', 'b', 'c']

    def test_table_groups_keep_labels(self):
        t = make_table([1, 2, 3, 4], ['x', 'y', 'x', 'y'], column_names=['v', 'k'])
        groups = partition(t, t['k'])
        assert all(isinstance(g, Table) for g in groups)
        assert groups[0]['v'] == [1, 3]
        assert groups[0].row_labels == [0, 2]
        assert groups[1]['v'] == [2, 4]
        assert groups[1].row_labels == [1, 3]

    def test_table_source_untouched(self):
        t = make_table([1, 2, 3], column_names=['v'])
        before = t.to_dict()
        partition(t, [3, 2, 1])
        assert t.to_dict() == before

    def test_key_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            partition([1, 2, 3], ['a', 'b'])

    def test_key_length_mismatch_is_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            partition(make_table([1, 2]), [1])

    @pytest.mark.parametrize("x", [5, len])
    def test_ungroupable_target(self, x):
        with pytest.raises(ArbitrageTypeError):
            partition(x, [1])

    def test_incomparable_keys(self):
        with pytest.raises(ArbitrageTypeError):
            partition([1, 2], [1, 'a'])


class TestTapply:
    """One result per group, ascending by key"""

    def test_sum_per_group(self):
        assert tapply([1, 2, 3, 4, 5, 6], KEY, sum) == [6, 3, 12]

    def test_table_groups(self):
        t = make_table([1, 2, 3, 4], ['x', 'y', 'x', 'y'], column_names=['v', 'k'])
        assert tapply(t, t['k'], lambda g: sum(g['v'])) == [4, 6]


class TestBy:
    """Grouping tables by one or several key columns"""

    @pytest.fixture
    def sales(self):
        return make_table(
            [2021, 2020, 2020, 2021],
            [1, 1, 1, 2],
            [1, 2, 3, 4],
            column_names=['year', 'month', 'amount'],
        )

    def test_single_key(self, sales):
        assert by(sales, sales['year'], lambda g: len(g)) == [2, 2]

    def test_key_columns(self, sales):
        result = by(sales, [sales['year'], sales['month']], lambda g: sum(g['amount']))
        assert result == [5, 1, 4]

    def test_key_table(self, sales):
        keys = make_table(sales['year'], sales['month'])
        assert by(sales, keys, lambda g: sum(g['amount'])) == [5, 1, 4]

    def test_key_record(self, sales):
        keys = {'row_labels': [0, 1, 2, 3], 'y': sales['year'], 'm': sales['month']}
        assert by(sales, keys, lambda g: g.row_labels) == [[1, 2], [0], [3]]

    def test_key_columns_of_unequal_length(self, sales):
        with pytest.raises(LengthMismatchError):
            by(sales, [[1, 2, 3, 4], [1, 2]], len)

    def test_sequence_input(self):
        assert by([1, 2, 3], [[0, 1, 0], ['a', 'a', 'a']], list) == [[1, 3], [2]]

"""Kind dispatch: scalar / sequence / table / function"""
import pytest
from py_arbitrage import Kind, kind_of, is_sequence, make_table, Vector


def _plain_function(x):
    return x


@pytest.mark.parametrize("value,expected", [
    (1, Kind.SCALAR),
    (2.5, Kind.SCALAR),
    (None, Kind.SCALAR),
    ('abc', Kind.SCALAR),
    (b'abc', Kind.SCALAR),
    ({'a': 1}, Kind.SCALAR),
    ([1, 2], Kind.SEQUENCE),
    ((1, 2), Kind.SEQUENCE),
    (range(3), Kind.SEQUENCE),
    (Vector([1]), Kind.SEQUENCE),
    (make_table([1, 2]), Kind.TABLE),
    ({'row_labels': [0], 'a': [1]}, Kind.TABLE),
    (_plain_function, Kind.FUNCTION),
    (len, Kind.FUNCTION),
    (lambda x: x, Kind.FUNCTION),
])
def test_kind_of(value, expected):
    assert kind_of(value) is expected


def test_record_with_uneven_columns_is_a_scalar():
    assert kind_of({'row_labels': [0, 1], 'a': [1]}) is Kind.SCALAR


def test_is_sequence():
    assert is_sequence([1])
    assert not is_sequence('abc')
    assert not is_sequence(make_table([1]))

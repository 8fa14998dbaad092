from types import MappingProxyType

import pytest

from .. import collection
from ..exceptions import (
    AggregateError,
    InvalidArgumentError,
    MissingValueError,
)
from ..mapping import (
    require_empty,
    require_for_all_keys,
    require_for_all_values,
    require_non_empty,
    require_size,
    require_size_exclusive,
    require_size_greater_than,
    require_size_greater_than_or_equal,
    require_size_inclusive,
    require_size_less_than,
    require_size_less_than_or_equal,
    require_size_minimum_exclusive_maximum_inclusive,
    require_size_minimum_inclusive_maximum_exclusive,
    require_there_exists_key,
    require_there_exists_value,
)

mappings = [{k: str(k) for k in range(i)} for i in range(4)]


def test_empty():
    empty = {}
    assert require_empty(empty, 'map') is empty
    assert require_empty(MappingProxyType({}), 'map') == {}
    with pytest.raises(InvalidArgumentError) as raised:
        require_empty({1: 1}, 'map')
    assert str(raised.value) == "map must be empty; its size is '1'."
    assert require_non_empty({1: 1}, 'map') == {1: 1}
    with pytest.raises(InvalidArgumentError) as raised:
        require_non_empty({}, 'map')
    assert str(raised.value) == 'map must be non-empty.'


@pytest.mark.parametrize('func', [
    require_empty,
    require_non_empty,
    lambda v, n: require_size(v, 0, n),
    lambda v, n: require_for_all_keys(v, lambda k: k, n),
    lambda v, n: require_there_exists_value(v, lambda k: k, n),
])
def test_arguments(func):
    with pytest.raises(MissingValueError, match='^value'):
        func(None, 'map')
    with pytest.raises(MissingValueError, match='^name'):
        func({}, None)
    with pytest.raises(InvalidArgumentError, match='non-blank'):
        func({1: 1}, ' ')
    # a collection is not a mapping
    with pytest.raises(InvalidArgumentError, match='must be a mapping'):
        func([], 'map')


@pytest.mark.parametrize('adapter,func', [
    (require_size_less_than, collection.require_size_less_than),
    (require_size_less_than_or_equal,
     collection.require_size_less_than_or_equal),
    (require_size, collection.require_size),
    (require_size_greater_than_or_equal,
     collection.require_size_greater_than_or_equal),
    (require_size_greater_than, collection.require_size_greater_than),
])
def test_size(adapter, func):
    for limit in range(4):
        for m in mappings:
            try:
                expected = func(m, limit, 'map')
            except InvalidArgumentError as e:
                with pytest.raises(InvalidArgumentError) as raised:
                    adapter(m, limit, 'map')
                assert str(raised.value) == str(e)
                assert str(e).startswith('map size must be ')
            else:
                assert adapter(m, limit, 'map') is expected


@pytest.mark.parametrize('adapter,pred', [
    (require_size_exclusive, lambda s, lo, hi: lo < s < hi),
    (require_size_inclusive, lambda s, lo, hi: lo <= s <= hi),
    (require_size_minimum_exclusive_maximum_inclusive,
     lambda s, lo, hi: lo < s <= hi),
    (require_size_minimum_inclusive_maximum_exclusive,
     lambda s, lo, hi: lo <= s < hi),
])
def test_size_range(adapter, pred):
    for minimum in range(4):
        for maximum in range(4):
            for m in mappings:
                if pred(len(m), minimum, maximum):
                    assert adapter(m, minimum, maximum, 'map') is m
                else:
                    with pytest.raises(InvalidArgumentError):
                        adapter(m, minimum, maximum, 'map')


def test_keys(fail_negative):
    m = {-1: 'a', 0: 'b', -2: 'c'}
    with pytest.raises(AggregateError) as raised:
        require_for_all_keys(m, fail_negative, 'map')
    assert str(raised.value) == """\
Every key of map must meet the requirement:
0: bad -1
2: bad -2"""
    assert fail_negative.calls == [-1, 0, -2]
    assert require_there_exists_key(m, fail_negative, 'map') is m
    with pytest.raises(AggregateError) as raised:
        require_there_exists_key({-1: 0}, fail_negative, 'map')
    assert str(raised.value).startswith(
        'At least one key of map must exist that meets the requirement:\n')


def test_values(fail_negative):
    m = {'a': 1, 'b': -1}
    with pytest.raises(AggregateError) as raised:
        require_for_all_values(m, fail_negative, 'map')
    assert str(raised.value) == \
        'Every value of map must meet the requirement:\n1: bad -1'
    assert require_there_exists_value(m, fail_negative, 'map') is m
    with pytest.raises(AggregateError) as raised:
        require_there_exists_value({'a': -1}, fail_negative, 'map')
    assert str(raised.value) == \
        'At least one value of map must exist that meets the ' \
        'requirement:\n0: bad -1'

from types import MappingProxyType

import pytest

from ..exceptions import (
    AggregateError,
    InvalidArgumentError,
    MissingValueError,
    RequirementError,
)


def test_requirementerror_repr():
    e = InvalidArgumentError('count', -1, 'not acceptable')
    assert repr(e) == \
        "InvalidArgumentError('count', -1, 'not acceptable', None)"


def test_requirementerror_properties():
    e = InvalidArgumentError(
        'count', -1, "{__name__} must exceed '{minimum}'; it is '{__value__}'.",
        dict(minimum=0),
    )
    assert e.name == 'count'
    assert e.value == -1
    assert e.msg == "count must exceed '0'; it is '-1'."
    assert str(e) == e.msg
    # the value-error message slot has the template
    assert e.args[0].startswith('{__name__}')
    assert isinstance(e.context, MappingProxyType)
    assert e.context['minimum'] == 0
    with pytest.raises(TypeError):
        e.context['minimum'] = 1
    assert e.caused_by is None


def test_requirementerror_verbatim_msg():
    # no context, no interpolation
    e = InvalidArgumentError(None, 5, 'braces {are} kept')
    assert str(e) == 'braces {are} kept'
    assert e.context == {}


def test_requirementerror_caused_by():
    cause = KeyError('some')
    e = InvalidArgumentError(
        'x', 1, 'failed\n{__itemized_causes__}', dict(__caused_by__=cause))
    assert e.caused_by == (cause,)
    assert str(e) == "failed\n  - 'some'"

    causes = [ValueError('one'), ValueError('two')]
    e = InvalidArgumentError('x', 1, 'msg', dict(__caused_by__=causes))
    assert e.caused_by == tuple(causes)


def test_error_kinds():
    # both kinds are value errors, but neither is the other
    for cls in (MissingValueError, InvalidArgumentError, AggregateError):
        assert issubclass(cls, RequirementError)
        assert issubclass(cls, ValueError)
    assert not issubclass(MissingValueError, InvalidArgumentError)
    assert not issubclass(InvalidArgumentError, MissingValueError)
    assert issubclass(AggregateError, InvalidArgumentError)

    with pytest.raises(MissingValueError):
        try:
            raise MissingValueError('value', None, 'missing')
        except InvalidArgumentError:  # pragma: no cover
            pytest.fail('missing value was reported as invalid')


def test_aggregateerror():
    errors = {0: ValueError('bad 0'), 2: ValueError('bad 2')}
    e = AggregateError(
        'items', [0, 1, 2], 'report:\n{report}',
        dict(report='whatever', errors=errors,
             __caused_by__=list(errors.values())),
    )
    assert e.errors == errors
    assert isinstance(e.errors, MappingProxyType)
    assert e.caused_by == tuple(errors.values())
    assert str(e) == 'report:\nwhatever'
    # without a record of errors
    assert AggregateError('items', [], 'msg').errors == {}

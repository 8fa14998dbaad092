# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Require a value, or a value derived from it, to be within bounds

All functions compare with the native operators of the compared type. No
type checks or conversions are performed; comparing incompatible types
raises ``TypeError`` as usual.

Each function takes an optional accessor ``get``. If given, the bounds apply
to ``get(value)`` instead of ``value``, and ``field`` names the derived
value in messages::

    >>> require_less_than([1, 2], 3, 'items', get=len, field='size')
    [1, 2]
    >>> require_less_than([1, 2, 3], 3, 'items', get=len, field='size')
    Traceback (most recent call last):
    ...
    require.exceptions.InvalidArgumentError: items size must be less than '3'; it is '3'.

The checked value itself is returned in either case.
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

__all__ = [
    'require_less_than',
    'require_less_than_or_equal',
    'require_equal',
    'require_greater_than_or_equal',
    'require_greater_than',
    'require_bound_exclusive',
    'require_bound_inclusive',
    'require_bound_minimum_exclusive_maximum_inclusive',
    'require_bound_minimum_inclusive_maximum_exclusive',
]

from typing import (
    Any,
    Callable,
)

from .base import (
    _require,
    _require_non_blank,
    _require_not_none,
    require_name,
)


def _require_ordered(
        value,
        get: Callable | None,
        name: str,
        field: str | None,
        condition: Callable[[Any], bool],
        expectation: str,
        **bounds):
    # argument validation order: value, accessor, bounds, labels
    _require_not_none(value, 'value')
    if get is not None:
        _require(
            callable(get),
            get,
            'get',
            "{__name__} must be callable; it is '{__value__}'.",
        )
    for bound_name, bound in bounds.items():
        _require_not_none(bound, bound_name)
    require_name(name)
    if get is not None or field is not None:
        _require_non_blank(field, 'field')

    # evaluated exactly once, for the decision and the message
    actual = value if get is None else get(value)
    subject = '{__name__}' if field is None else '{__name__} {field}'
    return _require(
        condition(actual),
        value,
        name,
        f"{subject} must be {expectation}; it is '{{actual}}'.",
        field=field,
        actual=actual,
        **bounds,
    )


def require_less_than(value, maximum, name: str, *,
                      get: Callable | None = None,
                      field: str | None = None):
    """Return the given value, if it is less than ``maximum``

    Parameters
    ----------
    value:
      Value to check. Must not be ``None``.
    maximum:
      Exclusive upper bound. Must not be ``None``.
    name: str
      Label of ``value`` in error messages.
    get: callable, optional
      Accessor. If given, ``get(value)`` is compared instead of ``value``.
    field: str, optional
      Label of the derived value. Required if ``get`` is given.

    Raises
    ------
    MissingValueError
      if ``value``, ``maximum``, ``name``, or (with ``get``) ``field`` is
      ``None``
    InvalidArgumentError
      if a label is blank, or the (derived) value is not less than
      ``maximum``
    """
    return _require_ordered(
        value, get, name, field,
        lambda actual: actual < maximum,
        "less than '{maximum}'",
        maximum=maximum,
    )


def require_less_than_or_equal(value, maximum, name: str, *,
                               get: Callable | None = None,
                               field: str | None = None):
    """Return the given value, if it is less than or equal to ``maximum``

    See ``require_less_than()`` for a description of all parameters.
    """
    return _require_ordered(
        value, get, name, field,
        lambda actual: actual <= maximum,
        "less than or equal to '{maximum}'",
        maximum=maximum,
    )


def require_equal(value, target, name: str, *,
                  get: Callable | None = None,
                  field: str | None = None):
    """Return the given value, if it is equal to ``target``

    See ``require_less_than()`` for a description of all parameters.
    """
    return _require_ordered(
        value, get, name, field,
        lambda actual: actual == target,
        "equal to '{target}'",
        target=target,
    )


def require_greater_than_or_equal(value, minimum, name: str, *,
                                  get: Callable | None = None,
                                  field: str | None = None):
    """Return the given value, if it is greater than or equal to ``minimum``

    See ``require_less_than()`` for a description of all parameters.
    """
    return _require_ordered(
        value, get, name, field,
        lambda actual: actual >= minimum,
        "greater than or equal to '{minimum}'",
        minimum=minimum,
    )


def require_greater_than(value, minimum, name: str, *,
                         get: Callable | None = None,
                         field: str | None = None):
    """Return the given value, if it is greater than ``minimum``

    See ``require_less_than()`` for a description of all parameters.
    """
    return _require_ordered(
        value, get, name, field,
        lambda actual: actual > minimum,
        "greater than '{minimum}'",
        minimum=minimum,
    )


def require_bound_exclusive(value, minimum, maximum, name: str, *,
                            get: Callable | None = None,
                            field: str | None = None):
    """Return the given value, if it is between both bounds, exclusively

    See ``require_less_than()`` for a description of all other parameters.
    """
    return _require_ordered(
        value, get, name, field,
        lambda actual: minimum < actual < maximum,
        "greater than '{minimum}' and less than '{maximum}'",
        minimum=minimum,
        maximum=maximum,
    )


def require_bound_inclusive(value, minimum, maximum, name: str, *,
                            get: Callable | None = None,
                            field: str | None = None):
    """Return the given value, if it is between both bounds, inclusively"""
    return _require_ordered(
        value, get, name, field,
        lambda actual: minimum <= actual <= maximum,
        "greater than or equal to '{minimum}' "
        "and less than or equal to '{maximum}'",
        minimum=minimum,
        maximum=maximum,
    )


def require_bound_minimum_exclusive_maximum_inclusive(
        value, minimum, maximum, name: str, *,
        get: Callable | None = None,
        field: str | None = None):
    """Return the given value, if ``minimum < value <= maximum``"""
    return _require_ordered(
        value, get, name, field,
        lambda actual: minimum < actual <= maximum,
        "greater than '{minimum}' and less than or equal to '{maximum}'",
        minimum=minimum,
        maximum=maximum,
    )


def require_bound_minimum_inclusive_maximum_exclusive(
        value, minimum, maximum, name: str, *,
        get: Callable | None = None,
        field: str | None = None):
    """Return the given value, if ``minimum <= value < maximum``"""
    return _require_ordered(
        value, get, name, field,
        lambda actual: minimum <= actual < maximum,
        "greater than or equal to '{minimum}' and less than '{maximum}'",
        minimum=minimum,
        maximum=maximum,
    )

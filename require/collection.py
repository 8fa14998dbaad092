# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Requirements for collections: emptiness, size, and elements

A collection is any sized, iterable container (``list``, ``tuple``, ``set``,
``dict``, ...). Size bounds must be non-negative integers.
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

from collections.abc import Collection
from typing import (
    Any,
    Callable,
)

from .aggregate import (
    require_for_all as _require_for_all,
    require_there_exists as _require_there_exists,
)
from .base import (
    _require,
    _require_not_none,
    require_name,
)
from .bound import (
    require_bound_exclusive,
    require_bound_inclusive,
    require_bound_minimum_exclusive_maximum_inclusive,
    require_bound_minimum_inclusive_maximum_exclusive,
    require_equal,
    require_greater_than,
    require_greater_than_or_equal,
    require_less_than,
    require_less_than_or_equal,
)
from .number import INT


def _require_collection(value, name: str, abc: type = Collection,
                        kind: str = 'collection'):
    _require_not_none(value, 'value')
    require_name(name)
    return _require(
        isinstance(value, abc),
        value,
        name,
        "{__name__} must be a {kind}; it is '{__value__!r}'.",
        kind=kind,
    )


def _require_sizes(value, name: str, **bounds):
    _require_collection(value, name)
    for bound_name, bound in bounds.items():
        INT.require_zero_or_positive(bound, bound_name)


def require_empty(value: Collection, name: str) -> Collection:
    """Return the given collection, if it has no elements"""
    _require_collection(value, name)
    return _require(
        len(value) == 0,
        value,
        name,
        "{__name__} must be empty; its size is '{size}'.",
        size=len(value),
    )


def require_non_empty(value: Collection, name: str) -> Collection:
    """Return the given collection, if it has at least one element"""
    _require_collection(value, name)
    return _require(
        len(value) > 0,
        value,
        name,
        "{__name__} must be non-empty.",
    )


def require_size_less_than(value, maximum: int, name: str):
    """Return the given collection, if its size is less than ``maximum``"""
    _require_sizes(value, name, maximum=maximum)
    return require_less_than(value, maximum, name, get=len, field='size')


def require_size_less_than_or_equal(value, maximum: int, name: str):
    _require_sizes(value, name, maximum=maximum)
    return require_less_than_or_equal(
        value, maximum, name, get=len, field='size')


def require_size(value, size: int, name: str):
    """Return the given collection, if it has exactly ``size`` elements"""
    _require_sizes(value, name, size=size)
    return require_equal(value, size, name, get=len, field='size')


def require_size_greater_than_or_equal(value, minimum: int, name: str):
    _require_sizes(value, name, minimum=minimum)
    return require_greater_than_or_equal(
        value, minimum, name, get=len, field='size')


def require_size_greater_than(value, minimum: int, name: str):
    """Return the given collection, if its size is greater than ``minimum``"""
    _require_sizes(value, name, minimum=minimum)
    return require_greater_than(value, minimum, name, get=len, field='size')


def require_size_exclusive(value, minimum: int, maximum: int, name: str):
    """Return the given collection, if ``minimum < len(value) < maximum``"""
    _require_sizes(value, name, minimum=minimum, maximum=maximum)
    return require_bound_exclusive(
        value, minimum, maximum, name, get=len, field='size')


def require_size_inclusive(value, minimum: int, maximum: int, name: str):
    """Return the given collection, if ``minimum <= len(value) <= maximum``"""
    _require_sizes(value, name, minimum=minimum, maximum=maximum)
    return require_bound_inclusive(
        value, minimum, maximum, name, get=len, field='size')


def require_size_minimum_exclusive_maximum_inclusive(
        value, minimum: int, maximum: int, name: str):
    _require_sizes(value, name, minimum=minimum, maximum=maximum)
    return require_bound_minimum_exclusive_maximum_inclusive(
        value, minimum, maximum, name, get=len, field='size')


def require_size_minimum_inclusive_maximum_exclusive(
        value, minimum: int, maximum: int, name: str):
    _require_sizes(value, name, minimum=minimum, maximum=maximum)
    return require_bound_minimum_inclusive_maximum_exclusive(
        value, minimum, maximum, name, get=len, field='size')


def require_for_all(value: Collection, check: Callable[[Any], Any],
                    name: str) -> Collection:
    """Return the given collection, if every element meets a requirement

    See ``require.aggregate.require_for_all()`` for details.
    """
    _require_collection(value, name)
    return _require_for_all(value, check, name)


def require_there_exists(value: Collection, check: Callable[[Any], Any],
                         name: str) -> Collection:
    """Return the given collection, if any element meets a requirement

    See ``require.aggregate.require_there_exists()`` for details.
    """
    _require_collection(value, name)
    return _require_there_exists(value, check, name)

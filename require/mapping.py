# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Requirements for mappings: emptiness, size, keys, and values"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

from collections.abc import Mapping
from typing import (
    Any,
    Callable,
)

from . import collection as _collection
from .aggregate import (
    require_for_all,
    require_there_exists,
)
from .collection import _require_collection


def _require_mapping(value, name: str) -> Mapping:
    return _require_collection(value, name, abc=Mapping, kind='mapping')


def require_empty(value: Mapping, name: str) -> Mapping:
    """Return the given mapping, if it has no keys"""
    _require_mapping(value, name)
    return _collection.require_empty(value, name)


def require_non_empty(value: Mapping, name: str) -> Mapping:
    """Return the given mapping, if it has at least one key"""
    _require_mapping(value, name)
    return _collection.require_non_empty(value, name)


def require_size_less_than(value: Mapping, maximum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_less_than(value, maximum, name)


def require_size_less_than_or_equal(value: Mapping, maximum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_less_than_or_equal(value, maximum, name)


def require_size(value: Mapping, size: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size(value, size, name)


def require_size_greater_than_or_equal(
        value: Mapping, minimum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_greater_than_or_equal(
        value, minimum, name)


def require_size_greater_than(value: Mapping, minimum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_greater_than(value, minimum, name)


def require_size_exclusive(
        value: Mapping, minimum: int, maximum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_exclusive(value, minimum, maximum, name)


def require_size_inclusive(
        value: Mapping, minimum: int, maximum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_inclusive(value, minimum, maximum, name)


def require_size_minimum_exclusive_maximum_inclusive(
        value: Mapping, minimum: int, maximum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_minimum_exclusive_maximum_inclusive(
        value, minimum, maximum, name)


def require_size_minimum_inclusive_maximum_exclusive(
        value: Mapping, minimum: int, maximum: int, name: str):
    _require_mapping(value, name)
    return _collection.require_size_minimum_inclusive_maximum_exclusive(
        value, minimum, maximum, name)


def require_for_all_keys(value: Mapping, check: Callable[[Any], Any],
                         name: str) -> Mapping:
    """Return the given mapping, if every key meets a requirement"""
    _require_mapping(value, name)
    return require_for_all(
        value, check, name, get=Mapping.keys, field='key')


def require_there_exists_key(value: Mapping, check: Callable[[Any], Any],
                             name: str) -> Mapping:
    """Return the given mapping, if at least one key meets a requirement"""
    _require_mapping(value, name)
    return require_there_exists(
        value, check, name, get=Mapping.keys, field='key')


def require_for_all_values(value: Mapping, check: Callable[[Any], Any],
                           name: str) -> Mapping:
    """Return the given mapping, if every value meets a requirement"""
    _require_mapping(value, name)
    return require_for_all(
        value, check, name, get=Mapping.values, field='value')


def require_there_exists_value(value: Mapping, check: Callable[[Any], Any],
                               name: str) -> Mapping:
    """Return the given mapping, if at least one value meets a requirement"""
    _require_mapping(value, name)
    return require_there_exists(
        value, check, name, get=Mapping.values, field='value')

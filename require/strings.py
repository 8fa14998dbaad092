# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Requirements for strings: emptiness, blankness, patterns, and length

A string is blank if it is empty or consists of whitespace only.

No type conversion is performed. Any value that is not a ``str`` fails
every requirement in this module.
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

import re

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
from .exceptions import InvalidArgumentError


def _require_str(value, name: str) -> str:
    _require_not_none(value, 'value')
    require_name(name)
    # do not perform a blind conversion ala str(), as almost
    # anything can be converted and the result is most likely
    # unintended
    return _require(
        isinstance(value, str),
        value,
        name,
        "{__name__} must be a str; it is '{__value__!r}'.",
    )


def require_empty(value: str, name: str) -> str:
    """Return the given string, if it is empty"""
    _require_str(value, name)
    return _require(not value, value, name, "{__name__} must be empty.")


def require_non_empty(value: str, name: str) -> str:
    """Return the given string, if it is not empty"""
    _require_str(value, name)
    return _require(value, value, name, "{__name__} must be non-empty.")


def require_blank(value: str, name: str) -> str:
    """Return the given string, if it is empty or whitespace-only"""
    _require_str(value, name)
    return _require(
        not value.strip(),
        value,
        name,
        "{__name__} must be blank; it is '{__value__}'.",
    )


def require_non_blank(value: str, name: str) -> str:
    """Return the given string, if it contains a non-whitespace character"""
    _require_str(value, name)
    return _require(
        value.strip(),
        value,
        name,
        "{__name__} must be non-blank; it is '{__value__}'.",
    )


def require_match(value: str, pattern: str | re.Pattern, name: str) -> str:
    """Return the given string, if it matches a regular expression entirely

    Parameters
    ----------
    value: str
      String to check.
    pattern: str or re.Pattern
      Regular expression. A string must be non-empty and compile.
    name: str
      Label of ``value`` in error messages.

    Raises
    ------
    MissingValueError
      if ``value``, ``pattern``, or ``name`` is ``None``
    InvalidArgumentError
      if ``name`` is blank, ``pattern`` is not a valid regular expression,
      or ``value`` does not match it. A compilation error is chained as the
      cause.
    """
    _require_str(value, name)
    _require_not_none(pattern, 'pattern')
    if not isinstance(pattern, re.Pattern):
        require_non_empty(pattern, 'pattern')
        try:
            pattern = re.compile(pattern)
        except re.error as e:
            raise InvalidArgumentError(
                'pattern',
                pattern,
                "{__name__} must be a valid regular expression; "
                "it is '{__value__}'.",
                dict(__caused_by__=e),
            ) from e
    return _require(
        pattern.fullmatch(value) is not None,
        value,
        name,
        "{__name__} must match '{pattern}'; it is '{__value__}'.",
        pattern=pattern.pattern,
    )


def require_length_less_than(value: str, maximum: int, name: str) -> str:
    """Return the given string, if its length is less than ``maximum``"""
    _require_str(value, name)
    return require_less_than(value, maximum, name, get=len, field='length')


def require_length_less_than_or_equal(
        value: str, maximum: int, name: str) -> str:
    _require_str(value, name)
    return require_less_than_or_equal(
        value, maximum, name, get=len, field='length')


def require_length(value: str, length: int, name: str) -> str:
    """Return the given string, if it has exactly the given length"""
    _require_str(value, name)
    return require_equal(value, length, name, get=len, field='length')


def require_length_greater_than_or_equal(
        value: str, minimum: int, name: str) -> str:
    _require_str(value, name)
    return require_greater_than_or_equal(
        value, minimum, name, get=len, field='length')


def require_length_greater_than(value: str, minimum: int, name: str) -> str:
    """Return the given string, if its length is greater than ``minimum``"""
    _require_str(value, name)
    return require_greater_than(value, minimum, name, get=len, field='length')


def require_length_exclusive(
        value: str, minimum: int, maximum: int, name: str) -> str:
    """Return the given string, if ``minimum < len(value) < maximum``"""
    _require_str(value, name)
    return require_bound_exclusive(
        value, minimum, maximum, name, get=len, field='length')


def require_length_inclusive(
        value: str, minimum: int, maximum: int, name: str) -> str:
    """Return the given string, if ``minimum <= len(value) <= maximum``"""
    _require_str(value, name)
    return require_bound_inclusive(
        value, minimum, maximum, name, get=len, field='length')


def require_length_minimum_exclusive_maximum_inclusive(
        value: str, minimum: int, maximum: int, name: str) -> str:
    _require_str(value, name)
    return require_bound_minimum_exclusive_maximum_inclusive(
        value, minimum, maximum, name, get=len, field='length')


def require_length_minimum_inclusive_maximum_exclusive(
        value: str, minimum: int, maximum: int, name: str) -> str:
    _require_str(value, name)
    return require_bound_minimum_inclusive_maximum_exclusive(
        value, minimum, maximum, name, get=len, field='length')

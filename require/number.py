# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Requirements for numbers of a particular type: sign, and parsing

Each supported type has a ``RequireNumber`` instance::

    >>> INT.require_positive(3, 'count')
    3
    >>> DECIMAL.require_number('0.10', 'price')
    Decimal('0.10')

Parsing a string into a number is also available via module-level
functions, e.g. ``require_int()``.
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

__all__ = [
    'RequireNumber',
    'INT',
    'FLOAT',
    'DECIMAL',
    'FRACTION',
    'require_int',
    'require_float',
    'require_decimal',
    'require_fraction',
]

from decimal import Decimal
from fractions import Fraction
from typing import Callable

from .base import (
    _require,
    _type_name,
    require_not_none,
)
from .exceptions import InvalidArgumentError


class RequireNumber:
    """Sign requirements and parsing for one numeric type

    Values are compared against the type's zero with the type's native
    operators. Values of another type are rejected, no conversion is
    performed.
    """
    def __init__(self,
                 dtype: type,
                 parse: Callable[[str], object] | None = None,
                 exclude: tuple = ()):
        """
        Parameters
        ----------
        dtype: type
          Numeric type. ``dtype(0)`` must give the type's zero.
        parse: callable, optional
          Converts a ``str`` into a ``dtype`` instance, and raises on
          failure. Defaults to ``dtype`` itself.
        exclude: tuple, optional
          Subtypes of ``dtype`` that are not accepted as values, such as
          ``bool`` for ``int``.
        """
        self._dtype = dtype
        self._zero = dtype(0)
        self._parse = dtype if parse is None else parse
        self._exclude = exclude

    def __repr__(self):
        return f'{self.__class__.__name__}({_type_name(self._dtype)})'

    @property
    def type_name(self) -> str:
        return _type_name(self._dtype)

    def _require_type(self, value, name: str):
        require_not_none(value, name)
        return _require(
            isinstance(value, self._dtype)
            and not isinstance(value, self._exclude),
            value,
            name,
            "{__name__} must be a {type}; it is '{__value__!r}'.",
            type=self.type_name,
        )

    def require_positive(self, value, name: str):
        """Return the given value, if it is greater than zero"""
        self._require_type(value, name)
        return _require(
            value > self._zero,
            value,
            name,
            "{__name__} must be positive; it is '{__value__}'.",
        )

    def require_zero_or_positive(self, value, name: str):
        """Return the given value, if it is not less than zero"""
        self._require_type(value, name)
        return _require(
            value >= self._zero,
            value,
            name,
            "{__name__} must be zero or positive; it is '{__value__}'.",
        )

    def require_zero(self, value, name: str):
        """Return the given value, if it is zero"""
        self._require_type(value, name)
        return _require(
            value == self._zero,
            value,
            name,
            "{__name__} must be zero; it is '{__value__}'.",
        )

    def require_zero_or_negative(self, value, name: str):
        """Return the given value, if it is not greater than zero"""
        self._require_type(value, name)
        return _require(
            value <= self._zero,
            value,
            name,
            "{__name__} must be zero or negative; it is '{__value__}'.",
        )

    def require_negative(self, value, name: str):
        """Return the given value, if it is less than zero"""
        self._require_type(value, name)
        return _require(
            value < self._zero,
            value,
            name,
            "{__name__} must be negative; it is '{__value__}'.",
        )

    def require_number(self, value: str, name: str):
        """Return the given string parsed as a number of this type

        Unlike all other ``require_*()`` functions this does not return
        the given value, but the parsed number.

        Raises
        ------
        MissingValueError
          if ``value`` or ``name`` is ``None``
        InvalidArgumentError
          if ``value`` is not a ``str``, or cannot be parsed. The parser's
          exception is chained as the cause.
        """
        require_not_none(value, name)
        _require(
            isinstance(value, str),
            value,
            name,
            "{__name__} must be a str; it is '{__value__!r}'.",
        )
        try:
            return self._parse(value)
        except Exception as e:
            raise InvalidArgumentError(
                name,
                value,
                "{__name__} must be a {type}; it is '{__value__}'.",
                dict(type=self.type_name, __caused_by__=e),
            ) from e


INT = RequireNumber(int, exclude=(bool,))
FLOAT = RequireNumber(float)
DECIMAL = RequireNumber(Decimal)
FRACTION = RequireNumber(Fraction)

require_int = INT.require_number
require_float = FLOAT.require_number
require_decimal = DECIMAL.require_number
require_fraction = FRACTION.require_number

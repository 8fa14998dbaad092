"""Precondition validation with uniform, descriptive error messages

This package provides functions that check a value against a condition and
return the value unchanged, if the condition holds. In a nutshell, each
``require_*()`` function:

- takes the value to check, any bounds or requirements, and a label
  (``name``) that identifies the value in error messages
- validates its own arguments first: labels must be non-blank strings,
  and required arguments must not be ``None``
- returns the checked value on success, such that it can be used inline::

      self.size = require_greater_than(size, 0, 'size')

On failure, two distinguishable exception types are raised. Both derive from
:class:`~require.RequirementError`, and thereby from ``ValueError``:

- :class:`~require.MissingValueError` when a required argument was ``None``
- :class:`~require.InvalidArgumentError` when a present value violates the
  requirement. :class:`~require.AggregateError` is a variant reporting all
  failing elements of a sequence.

Generic requirements are available at the package level. Requirements for
particular kinds of values are organized in modules:
:mod:`require.strings`, :mod:`require.number`, :mod:`require.collection`,
and :mod:`require.mapping`.

.. currentmodule:: require
.. autosummary::
   :toctree: generated

    require
    require_name
    require_not_none
    require_none

    require_less_than
    require_less_than_or_equal
    require_equal
    require_greater_than_or_equal
    require_greater_than
    require_bound_exclusive
    require_bound_inclusive
    require_bound_minimum_exclusive_maximum_inclusive
    require_bound_minimum_inclusive_maximum_exclusive

    require_for_all
    require_there_exists

    RequirementError
    MissingValueError
    InvalidArgumentError
    AggregateError
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

import logging

from .exceptions import (
    # this is the key type, almost all consuming code will want to
    # have this for `except` clauses
    RequirementError,
    MissingValueError,
    InvalidArgumentError,
    AggregateError,
)
from .base import (
    require,
    require_name,
    require_none,
    require_not_none,
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
from .aggregate import (
    require_for_all,
    require_there_exists,
)


lgr = logging.getLogger('require')

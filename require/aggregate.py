# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Require every, or at least one, element of a sequence to meet a requirement

A requirement for an element is any callable that takes the element and
raises an exception if the element does not meet it. Any ``require_*()``
function can be used this way::

    require_for_all(
        counts,
        lambda c: require_greater_than(c, 0, 'count'),
        'counts',
    )

Both functions evaluate the requirement exactly once for each element, in
sequence order, and report all failing elements at once. They are the only
functions that catch exceptions.
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

__all__ = ['require_for_all', 'require_there_exists']

import logging
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    Tuple,
)

from more_itertools import partition

from .base import (
    _require,
    _require_non_blank,
    _require_not_none,
    require_name,
)
from .exceptions import AggregateError

lgr = logging.getLogger('require.aggregate')


def _check_elements(
        elements: Iterable,
        check: Callable[[Any], Any],
) -> List[Tuple[int, Exception | None]]:
    outcomes = []
    for index, element in enumerate(elements):
        try:
            check(element)
        except Exception as e:
            lgr.debug('Element %i failed requirement: %r', index, e)
            outcomes.append((index, e))
        else:
            outcomes.append((index, None))
    return outcomes


def _require_aggregate(values, check, name, get, field, quantifier, header):
    _require_not_none(values, 'values')
    if get is not None:
        _require(
            callable(get),
            get,
            'get',
            "{__name__} must be callable; it is '{__value__}'.",
        )
    _require_not_none(check, 'check')
    _require(
        callable(check),
        check,
        'check',
        "{__name__} must be callable; it is '{__value__}'.",
    )
    require_name(name)
    _require_non_blank(field, 'field')

    outcomes = _check_elements(
        values if get is None else get(values),
        check,
    )
    passed, failed = partition(lambda o: o[1] is not None, outcomes)
    passed = list(passed)
    errors = dict(failed)
    if quantifier(passed, errors):
        return values
    raise AggregateError(
        name,
        values,
        header + ':\n{report}',
        dict(
            field=field,
            report='\n'.join(f'{i}: {e}' for i, e in errors.items()),
            errors=errors,
            __caused_by__=list(errors.values()),
        ),
    )


def require_for_all(values, check: Callable[[Any], Any], name: str, *,
                    get: Callable | None = None,
                    field: str = 'element'):
    """Return the given values, if every element meets a requirement

    An empty sequence always meets this requirement.

    Parameters
    ----------
    values:
      Sequence (or any iterable) of elements to check. Must not be ``None``.
    check: callable
      Receives each element. Must raise an exception (of any type) for an
      element that does not meet the requirement. Its return value is
      ignored.
    name: str
      Label of ``values`` in error messages.
    get: callable, optional
      Accessor. If given, the elements are taken from ``get(values)``, for
      example ``dict.keys``.
    field: str, optional
      Label of an element in error messages.

    Raises
    ------
    MissingValueError
      if ``values``, ``check``, ``name``, or ``field`` is ``None``
    AggregateError
      if any element failed ``check``. The error message lists every
      failure, one per line, prefixed with the element's index.
    """
    return _require_aggregate(
        values, check, name, get, field,
        lambda passed, errors: not errors,
        'Every {field} of {__name__} must meet the requirement',
    )


def require_there_exists(values, check: Callable[[Any], Any], name: str, *,
                         get: Callable | None = None,
                         field: str = 'element'):
    """Return the given values, if at least one element meets a requirement

    An empty sequence never meets this requirement.

    See ``require_for_all()`` for a description of all parameters.

    Raises
    ------
    AggregateError
      if no element passed ``check``. The error message lists the failures
      of all elements.
    """
    return _require_aggregate(
        values, check, name, get, field,
        lambda passed, errors: bool(passed),
        'At least one {field} of {__name__} must exist that meets the '
        'requirement',
    )

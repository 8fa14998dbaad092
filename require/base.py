# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Core assertion, label validation, and presence checks

Every other ``require_*()`` function is built on the primitives in this
module. All of them return the checked value unchanged on success, such
that they can be used inline::

    self.name = require_not_none(name, 'name')
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

__all__ = ['require', 'require_name', 'require_not_none', 'require_none']

from typing import Any

from .exceptions import (
    InvalidArgumentError,
    MissingValueError,
)


def _type_name(t: type) -> str:
    # builtins go unqualified: 'int', but 'decimal.Decimal'
    if t.__module__ == 'builtins':
        return t.__qualname__
    return f'{t.__module__}.{t.__qualname__}'


def _require(expression, value, name: str | None, msg: str, **ctx):
    """Return ``value`` if ``expression`` holds, raise otherwise

    This is the internal workhorse. No argument is validated. ``msg`` is a
    message template for ``InvalidArgumentError``, and ``ctx`` its
    interpolation context.
    """
    if not expression:
        raise InvalidArgumentError(name, value, msg, ctx)
    return value


def _require_not_none(value, name: str):
    """Like ``require_not_none()``, but without validating ``name``"""
    if value is None:
        raise MissingValueError(name, value, '{__name__} must be non-null.', {})
    return value


def _require_non_blank(text, name: str) -> str:
    _require_not_none(text, name)
    _require(
        isinstance(text, str),
        text,
        name,
        "{__name__} must be a str; it is a '{type}'.",
        type=_type_name(type(text)),
    )
    return _require(
        text.strip() != '',
        text,
        name,
        "{__name__} must be non-blank; it is '{__value__}'.",
    )


def require_name(name: str | None) -> str:
    """Return the given label, if it is a non-blank string

    Labels are the names used to identify a value in error messages. Every
    ``require_*()`` function validates its labels with this function before
    evaluating its actual condition.

    Raises
    ------
    MissingValueError
      if ``name`` is ``None``
    InvalidArgumentError
      if ``name`` is not a ``str``, or is empty or whitespace-only
    """
    return _require_non_blank(name, 'name')


def require(expression, value, on_failure: str | BaseException):
    """Return the given value, if the given expression is true

    Parameters
    ----------
    expression:
      Condition to evaluate for truth.
    value:
      Returned unchanged, if ``expression`` is true.
    on_failure: str or BaseException
      Description of the failure to report, if ``expression`` is false.
      An exception instance is raised as-is. A message is raised as
      an ``InvalidArgumentError`` carrying ``value``; it must be non-blank.

    Raises
    ------
    MissingValueError
      if ``on_failure`` is ``None``, regardless of ``expression``
    InvalidArgumentError
      if ``on_failure`` is a blank message, or of an unsupported type
    """
    _require_not_none(on_failure, 'on_failure')
    if isinstance(on_failure, str):
        _require_non_blank(on_failure, 'message')
        # no context, the message is not a template
        on_failure = InvalidArgumentError(None, value, on_failure)
    elif not isinstance(on_failure, BaseException):
        raise InvalidArgumentError(
            'on_failure',
            on_failure,
            "{__name__} must be a str or an exception; it is '{__value__}'.",
            {},
        )
    if not expression:
        raise on_failure
    return value


def require_not_none(value: Any, name: str) -> Any:
    """Return the given value, if it is not ``None``

    Raises
    ------
    MissingValueError
      if ``value`` or ``name`` is ``None``
    InvalidArgumentError
      if ``name`` is blank
    """
    require_name(name)
    return _require_not_none(value, name)


def require_none(value: Any, name: str) -> None:
    """Return the given value, if it is ``None``"""
    require_name(name)
    return _require(
        value is None,
        value,
        name,
        "{__name__} must be null; it is '{__value__}'.",
    )

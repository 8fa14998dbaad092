# emacs: -*- mode: python; py-indent-offset: 4; tab-width: 4; indent-tabs-mode: nil -*-
# ex: set sts=4 ts=4 sw=4 et:
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the require package for the
#   copyright and license terms.
#
# ## ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Exceptions raised by failed requirements"""

from __future__ import annotations

from textwrap import indent
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Tuple,
)


class RequirementError(ValueError):
    # we derive from ValueError, because a violated precondition is an
    # argument of the right type with an inappropriate value. Consuming code
    # that already guards calls with `except ValueError` keeps working
    """Base class of all exceptions raised by ``require_*()`` functions

    Instances carry the label of the checked value, the value itself, and a
    message. Subclasses identify the kind of failure.
    """
    def __init__(self,
                 name: str | None,
                 value: Any,
                 msg: str,
                 ctx: Dict[str, Any] | None = None):
        """
        Parameters
        ----------
        name: str or None
          Label of the value in violation of a requirement. Can be ``None``
          for failures that were described by a caller-provided message only.
        value:
          The value that is in violation of a requirement.
        msg: str
          A message describing the violation. If ``ctx`` is given too, the
          message can contain keyword placeholders in Python's ``format()``
          syntax that will be applied on-access.
        ctx: dict, optional
          Mapping with context information on the violation. This information
          is used to interpolate a message, but may also contain additional
          key-value mappings. A recognized key is ``'__caused_by__'``, with
          a value of one exception (or a list of exceptions) that led to the
          error being raised.
        """
        # `msg` goes first into `.args`, where `ValueError` would have it
        super().__init__(msg, name, value, ctx)

    @property
    def msg(self) -> str:
        """Obtain an (interpolated) message on the requirement violation

        Without a context the message is returned verbatim. Otherwise the
        template is interpolated with the context, plus the following
        standard placeholders:

        - ``__name__``: the label of the checked value
        - ``__value__``: the value reported to have caused the error
        - ``__itemized_causes__``: an indented bullet list str with on
          item for each error in the ``caused_by`` report of the error.
        """
        msg_tmpl = self.args[0]
        if self.args[3] is None:
            return msg_tmpl
        ctx = dict(self.context)
        ctx['__name__'] = self.name
        ctx['__value__'] = self.value
        if self.caused_by:
            ctx['__itemized_causes__'] = indent(
                '\n'.join(f'- {str(c)}' for c in self.caused_by),
                "  ",
            )
        return msg_tmpl.format(**ctx)

    @property
    def name(self) -> str | None:
        """Get the label of the value that violated the requirement"""
        return self.args[1]

    @property
    def value(self):
        """Get the value that violated the requirement"""
        return self.args[2]

    @property
    def context(self) -> MappingProxyType:
        """Get a requirement violation's context

        This is a mapping of key/value-pairs matching the ``ctx`` constructor
        argument.
        """
        return MappingProxyType(self.args[3] or {})

    @property
    def caused_by(self) -> Tuple[Exception, ...] | None:
        """Returns a tuple of any underlying exceptions that caused a violation
        """
        cb = self.context.get('__caused_by__', None)
        if cb is None:
            return None
        elif isinstance(cb, Exception):
            return (cb,)
        else:
            return tuple(cb)

    def __str__(self):
        return self.msg

    def __repr__(self):
        # rematch constructor arg-order, because we put `msg` first into
        # `.args`
        return '{0}({2!r}, {3!r}, {1!r}, {4!r})'.format(
            self.__class__.__name__,
            *self.args,
        )


class MissingValueError(RequirementError):
    """A required argument was not given, i.e. it was ``None``

    This is never raised for a value that is present but wrong, and
    ``InvalidArgumentError`` is never raised for an absent value.
    """
    pass


class InvalidArgumentError(RequirementError):
    """A present value failed a requirement"""
    pass


class AggregateError(InvalidArgumentError):
    """Requirement violation of a whole sequence, caused by its elements

    The individual element failures are available via ``errors``, a read-only
    mapping of a zero-based element index to the exception raised for the
    element at that index. It is taken from the ``'errors'`` key of the
    error context.
    """
    @property
    def errors(self) -> MappingProxyType[int, Exception]:
        # read-only access
        return MappingProxyType(self.context.get('errors', {}))

from __future__ import annotations

from typing import (
    Any,
    Callable,
    List,
)


class CountingCheck:
    """Requirement for an element that records every element it is called with

    An element fails, if ``fails(element)`` is true. The failure is reported
    as a ``ValueError`` with the message ``'bad {element}'``.
    """
    def __init__(self, fails: Callable[[Any], bool]):
        self._fails = fails
        self.calls: List[Any] = []

    def __call__(self, element):
        self.calls.append(element)
        if self._fails(element):
            raise ValueError(f'bad {element}')
        return element

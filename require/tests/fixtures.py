"""Collection of fixtures for facilitation test implementations
"""
import logging

import pytest

from .utils import CountingCheck


@pytest.fixture(autouse=False, scope="function")
def fail_negative():
    """Returns a ``CountingCheck`` that rejects negative elements"""
    yield CountingCheck(lambda e: e < 0)


@pytest.fixture(autouse=False, scope="function")
def fail_all():
    """Returns a ``CountingCheck`` that rejects every element"""
    yield CountingCheck(lambda e: True)


@pytest.fixture(autouse=False, scope="function")
def aggregate_debug_log(caplog):
    """Captures the DEBUG log records of the aggregate checker"""
    with caplog.at_level(logging.DEBUG, logger='require.aggregate'):
        yield caplog

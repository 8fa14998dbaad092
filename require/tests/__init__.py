"""Tooling for test implementations

.. currentmodule:: require.tests
.. autosummary::
   :toctree: generated

   CountingCheck
"""

from .utils import CountingCheck

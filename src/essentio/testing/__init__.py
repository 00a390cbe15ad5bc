"""Test utilities for essentio applications::

    from essentio.testing import TestClient
"""

from essentio.testing.client import TestClient

__all__ = ["TestClient"]

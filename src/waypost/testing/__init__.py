"""Test utilities for waypost applications::

    from waypost.testing import TestClient
"""

from waypost.testing.client import TestClient

__all__ = ["TestClient"]

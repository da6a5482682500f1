"""
Infrastructure layer for faunaset.

Contains abstractions for external systems:
- FaunaClient: REST API access over requests
- ResourceClient: the interface set handles depend on

These provide clean interfaces that can be mocked for testing.
"""

from .client import FaunaClient, ResourceClient

__all__ = [
    'FaunaClient',
    'ResourceClient',
]

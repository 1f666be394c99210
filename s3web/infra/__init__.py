"""
Infrastructure layer for s3web.

Contains abstractions for external systems:
- MetadataClient: HTTP access to a remote's metadata document

These provide clean interfaces that can be mocked for testing.
"""

from .http_client import MetadataClient

__all__ = [
    'MetadataClient',
]

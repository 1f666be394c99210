"""
Service layer for s3web.

Contains logic that orchestrates domain objects and infrastructure:
- CommitService: Listing, filtering, ordering and lookup of commits

Services are the primary API for the remote adapter and commands.
"""

from .commit_service import CommitService, parse_metadata, sort_commits

__all__ = [
    'CommitService',
    'parse_metadata',
    'sort_commits',
]

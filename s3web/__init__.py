"""
s3web - Commit remotes served from static HTTP object trees.

A remote is a read-only tree of objects published over plain HTTP (for
example an S3 bucket website). Its commits are listed, one JSON object
per line, in a metadata document named ``titan`` at the tree root.

Quick Start:
    import s3web

    registry = s3web.create_registry()
    remote = registry.get("s3web")

    # Identifier <-> stored properties
    properties = remote.from_url("s3web://bucket.example.com/data", {})
    identifier, options = remote.to_url(properties)

    # Newest commits first, optionally filtered by tags
    for commit in remote.list_commits(properties, {}, ["env=prod"]):
        print(commit.id, commit.timestamp)

    # Single commit, or None
    commit = remote.get_commit(properties, {}, "abc123")

Domain Objects:
    Location - HTTP address of a remote, and its s3web:// identifier
    Commit - One record of the metadata document
    Tag - key or key=value filter over commit tags

Services:
    CommitService - Fetch, parse, filter and order commits
"""

__version__ = "0.1.0"

# Domain objects
from .domain import Location, Commit, Tag

# Services and infrastructure
from .services import CommitService
from .infra import MetadataClient

# Remote adapter and registry
from .remote import Remote, S3WebRemote
from .registry import RemoteRegistry, create_registry

# Errors
from .errors import (
    RemoteError,
    IdentifierError,
    InvalidFormatError,
    InvalidSchemeError,
    CredentialsNotAllowedError,
    MissingHostError,
    UnsupportedOptionError,
    ValidationError,
    FetchError,
    TransportError,
    RemoteResponseError,
    UnknownRemoteError,
)

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "Location",
    "Commit",
    "Tag",
    # Services
    "CommitService",
    "MetadataClient",
    # Remote
    "Remote",
    "S3WebRemote",
    "RemoteRegistry",
    "create_registry",
    # Errors
    "RemoteError",
    "IdentifierError",
    "InvalidFormatError",
    "InvalidSchemeError",
    "CredentialsNotAllowedError",
    "MissingHostError",
    "UnsupportedOptionError",
    "ValidationError",
    "FetchError",
    "TransportError",
    "RemoteResponseError",
    "UnknownRemoteError",
]

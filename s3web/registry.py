"""
Remote registry for s3web.

Remotes are looked up by type name in a RemoteRegistry. The registry is
an ordinary object built once at process start; nothing registers
itself on import.

Example:
    registry = create_registry()
    remote = registry.get("s3web")
"""

import logging
from typing import Dict, Iterator, List

from .errors import UnknownRemoteError
from .remote import Remote, S3WebRemote

logger = logging.getLogger(__name__)


class RemoteRegistry:
    """Mapping from type name to remote adapter."""

    def __init__(self):
        self._remotes: Dict[str, Remote] = {}

    def register(self, remote: Remote) -> None:
        """
        Add a remote under its type name.

        Raises:
            ValueError: a remote with the same type name is already registered
        """
        type_name = remote.type()
        if type_name in self._remotes:
            raise ValueError(f"remote type '{type_name}' is already registered")
        self._remotes[type_name] = remote
        logger.debug(f"Registered remote type '{type_name}'")

    def get(self, type_name: str) -> Remote:
        """
        Look up a remote by type name.

        Raises:
            UnknownRemoteError: nothing is registered under type_name
        """
        try:
            return self._remotes[type_name]
        except KeyError:
            raise UnknownRemoteError(type_name) from None

    def types(self) -> List[str]:
        """Registered type names, sorted."""
        return sorted(self._remotes)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._remotes

    def __len__(self) -> int:
        return len(self._remotes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.types())


def create_registry() -> RemoteRegistry:
    """Build a registry holding the built-in remote types."""
    registry = RemoteRegistry()
    registry.register(S3WebRemote())
    return registry

"""
Remote adapter for s3web.

S3WebRemote exposes the contract a host expects from a remote type,
working on plain dicts:

- properties: the stored remote configuration, {"location": "http://..."}
- parameters: per-call configuration; s3web accepts none

Example:
    remote = S3WebRemote()
    properties = remote.from_url("s3web://host/path", {})
    remote.validate_remote(properties)
    for commit in remote.list_commits(properties, {}, ["env=prod"]):
        print(commit.id)
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Tuple, Union

from .domain import Commit, Location, Tag, tags_from_strings
from .domain.location import IDENTIFIER_SCHEME
from .errors import ValidationError
from .services import CommitService
from .validation import validate_fields

LOCATION_PROPERTY = 'location'


class Remote(Protocol):
    """Capabilities a remote type provides to the host."""

    def type(self) -> str:
        """Return the type name the remote is registered under."""

    def from_url(self, url: str, additional_properties: Mapping[str, str]) -> Dict[str, Any]:
        """Translate an identifier into remote properties."""

    def to_url(self, properties: Mapping[str, Any]) -> Tuple[str, Dict[str, str]]:
        """Translate remote properties back into an identifier and options."""

    def get_parameters(self, properties: Mapping[str, Any]) -> Dict[str, Any]:
        """Return default per-call parameters for a remote."""

    def validate_remote(self, properties: Mapping[str, Any]) -> None:
        """Raise ValidationError if properties are not acceptable."""

    def validate_parameters(self, parameters: Mapping[str, Any]) -> None:
        """Raise ValidationError if parameters are not acceptable."""

    def list_commits(
        self,
        properties: Mapping[str, Any],
        parameters: Mapping[str, Any],
        tags: Iterable[Union[Tag, str]],
    ) -> List[Commit]:
        """List matching commits, newest first."""

    def get_commit(
        self,
        properties: Mapping[str, Any],
        parameters: Mapping[str, Any],
        commit_id: str,
    ) -> Optional[Commit]:
        """Return one commit, or None if it does not exist."""


class S3WebRemote:
    """Remote backed by a read-only static HTTP object tree."""

    def __init__(self, service: Optional[CommitService] = None):
        """
        Initialize S3WebRemote.

        Args:
            service: Commit service (created if not provided)
        """
        self.service = service or CommitService()

    def type(self) -> str:
        return IDENTIFIER_SCHEME

    def from_url(
        self,
        url: str,
        additional_properties: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Translate an ``s3web://`` identifier into remote properties.

        Raises:
            IdentifierError: see Location.from_identifier
        """
        location = Location.from_identifier(url, additional_properties)
        return {LOCATION_PROPERTY: location.url}

    def to_url(self, properties: Mapping[str, Any]) -> Tuple[str, Dict[str, str]]:
        """Translate remote properties into an identifier; s3web has no options."""
        return self._location(properties).to_identifier(), {}

    def get_parameters(self, properties: Mapping[str, Any]) -> Dict[str, Any]:
        return {}

    # describe_parameters is the name hosts use for the same query
    describe_parameters = get_parameters

    def validate_remote(self, properties: Mapping[str, Any]) -> None:
        validate_fields(properties, [LOCATION_PROPERTY])

    def validate_parameters(self, parameters: Mapping[str, Any]) -> None:
        validate_fields(parameters, [])

    def list_commits(
        self,
        properties: Mapping[str, Any],
        parameters: Optional[Mapping[str, Any]] = None,
        tags: Iterable[Union[Tag, str]] = (),
    ) -> List[Commit]:
        """
        List the remote's commits that match every tag, newest first.

        Args:
            properties: Remote properties holding the location
            parameters: Per-call parameters (unused)
            tags: Tag objects or "key" / "key=value" strings

        Raises:
            ValidationError: properties have no location
            FetchError: the metadata document could not be retrieved
        """
        return self.service.list_commits(self._location(properties), tags_from_strings(tags))

    def get_commit(
        self,
        properties: Mapping[str, Any],
        parameters: Optional[Mapping[str, Any]],
        commit_id: str,
    ) -> Optional[Commit]:
        """
        Return the commit with the given id, or None if it does not exist.

        Raises:
            ValidationError: properties have no location
            FetchError: the metadata document could not be retrieved
        """
        return self.service.get_commit(self._location(properties), commit_id)

    def _location(self, properties: Mapping[str, Any]) -> Location:
        url = properties.get(LOCATION_PROPERTY)
        if not isinstance(url, str):
            raise ValidationError(LOCATION_PROPERTY, "missing required")
        return Location.from_url(url)

    def __repr__(self) -> str:
        return "S3WebRemote()"

"""
Location domain object for s3web.

A Location is the canonical HTTP address of the root of a remote's
object tree. Users write it in a compact identifier form:

    s3web://host[:port][/path]   <->   http://host[:port][/path]

The translation only swaps the scheme; host, port and path are kept
exactly as written (an empty path stays empty). User info is never
allowed and s3web defines no extra options.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit

from ..errors import (
    CredentialsNotAllowedError,
    InvalidFormatError,
    InvalidSchemeError,
    MissingHostError,
    UnsupportedOptionError,
)

IDENTIFIER_SCHEME = "s3web"
TRANSFER_SCHEME = "http"

# Name of the metadata document at the root of every remote
METADATA_FILE = "titan"


def _has_control_chars(text: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7f for ch in text)


def _split(text: str):
    """Split a URI, raising InvalidFormatError when it is malformed."""
    # urlsplit silently drops tabs and newlines and strips leading spaces
    if _has_control_chars(text):
        raise InvalidFormatError(text, "contains control characters")
    if text != text.lstrip():
        raise InvalidFormatError(text, "has leading whitespace")
    try:
        parts = urlsplit(text)
        # Accessing .port validates it
        parts.port
    except ValueError as e:
        raise InvalidFormatError(text, str(e)) from e
    # Spaces are allowed in the path but not in the host
    if any(ch.isspace() for ch in parts.netloc):
        raise InvalidFormatError(text, "invalid character in host")
    return parts


@dataclass(frozen=True)
class Location:
    """
    Canonical address of a remote object tree.

    Attributes:
        netloc: Host with optional ":port", as written by the user
        path: Path below the host, possibly empty
        scheme: Transfer scheme, always "http"
    """

    netloc: str
    path: str = ""
    scheme: str = TRANSFER_SCHEME

    @classmethod
    def from_identifier(
        cls,
        identifier: str,
        extra_options: Optional[Mapping[str, str]] = None,
    ) -> 'Location':
        """
        Translate an ``s3web://`` identifier into a Location.

        Checks run in a fixed order and the first failure is raised.

        Args:
            identifier: Identifier such as "s3web://host:8080/path"
            extra_options: Adapter options; must be empty

        Returns:
            Location using the http scheme

        Raises:
            InvalidFormatError: identifier is not a valid URI
            InvalidSchemeError: scheme is not "s3web"
            CredentialsNotAllowedError: identifier contains user info
            MissingHostError: host name is empty
            UnsupportedOptionError: extra_options is not empty
        """
        parts = _split(identifier)

        if parts.scheme != IDENTIFIER_SCHEME:
            raise InvalidSchemeError(parts.scheme)

        if '@' in parts.netloc:
            raise CredentialsNotAllowedError()

        if not parts.hostname:
            raise MissingHostError()

        if extra_options:
            raise UnsupportedOptionError(sorted(extra_options)[0])

        return cls(netloc=parts.netloc, path=parts.path)

    @classmethod
    def from_url(cls, url: str) -> 'Location':
        """
        Rebuild a Location from its stored ``http://`` form.

        Raises:
            InvalidFormatError: url is not a valid URI
            InvalidSchemeError: scheme is not "http"
            CredentialsNotAllowedError: url contains user info
            MissingHostError: host name is empty
        """
        parts = _split(url)
        if parts.scheme != TRANSFER_SCHEME:
            raise InvalidSchemeError(parts.scheme)
        if '@' in parts.netloc:
            raise CredentialsNotAllowedError()
        if not parts.hostname:
            raise MissingHostError()
        return cls(netloc=parts.netloc, path=parts.path)

    def to_identifier(self) -> str:
        """Return the ``s3web://`` identifier for this Location."""
        return f"{IDENTIFIER_SCHEME}://{self.netloc}{self.path}"

    @property
    def url(self) -> str:
        """The http URL of the object tree root."""
        return f"{self.scheme}://{self.netloc}{self.path}"

    @property
    def metadata_url(self) -> str:
        """The URL of the metadata document."""
        return f"{self.url.rstrip('/')}/{METADATA_FILE}"

    @property
    def host(self) -> str:
        return urlsplit(self.url).hostname or ""

    @property
    def port(self) -> Optional[int]:
        return urlsplit(self.url).port

    def __str__(self) -> str:
        return self.url

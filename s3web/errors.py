"""
Error hierarchy for s3web.

Every error raised by the library derives from RemoteError and carries
the exit code the command line should use for it:

- IdentifierError and its subclasses: the identifier could not be
  translated into a Location
- ValidationError: a property or parameter set has the wrong fields
- FetchError: the metadata document could not be retrieved
- UnknownRemoteError: no remote registered under a type name

A missing metadata document and an unknown commit id are not errors;
they are reported as empty results.
"""

from typing import Optional

from .exit_codes import (
    API_ERROR,
    CONFIG_ERROR,
    DATA_ERROR,
    GENERAL_ERROR,
    NETWORK_ERROR,
    USAGE_ERROR,
)


class RemoteError(Exception):
    """Base class for all s3web errors."""

    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class IdentifierError(RemoteError):
    """Raised when an identifier cannot be turned into a Location."""

    def __init__(self, message: str):
        super().__init__(message, USAGE_ERROR)


class InvalidFormatError(IdentifierError):
    """The identifier is not a syntactically valid URI."""

    def __init__(self, identifier: str, reason: str = "malformed URI"):
        super().__init__(f"invalid remote identifier {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason


class InvalidSchemeError(IdentifierError):
    """The identifier uses a scheme other than the s3web one."""

    def __init__(self, scheme: str):
        super().__init__(f"invalid remote scheme {scheme!r}")
        self.scheme = scheme


class CredentialsNotAllowedError(IdentifierError):
    """The identifier embeds a user name or password."""

    def __init__(self):
        super().__init__("remote username and password cannot be specified")


class MissingHostError(IdentifierError):
    """The identifier has no host name."""

    def __init__(self):
        super().__init__("missing remote host name")


class UnsupportedOptionError(IdentifierError):
    """An extra option was supplied; s3web defines none."""

    def __init__(self, key: str):
        super().__init__(f"invalid property '{key}'")
        self.key = key


class ValidationError(RemoteError):
    """A property or parameter set is missing a field or has an extra one."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"{reason} field '{field}'", DATA_ERROR)
        self.field = field
        self.reason = reason


class FetchError(RemoteError):
    """Base class for failures while retrieving the metadata document."""

    def __init__(self, message: str, url: str, exit_code: int):
        super().__init__(message, exit_code)
        self.url = url


class TransportError(FetchError):
    """The HTTP request could not be completed."""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"failed to get '{url}'{detail}", url, NETWORK_ERROR)


class RemoteResponseError(FetchError):
    """The remote answered with a non-success status other than 404."""

    def __init__(self, url: str, status: int, body: str):
        super().__init__(f"failed to get '{url}' ({status}): {body}", url, API_ERROR)
        self.status = status
        self.body = body


class UnknownRemoteError(RemoteError):
    """No remote is registered under the requested type name."""

    def __init__(self, type_name: str):
        super().__init__(f"no remote registered for type '{type_name}'", CONFIG_ERROR)
        self.type_name = type_name

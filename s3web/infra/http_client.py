"""
HTTP client infrastructure for s3web.

Retrieves a remote's metadata document with a single GET:
- 404 means the remote has no commits yet and is not an error
- Connection failures raise TransportError
- Any other status >= 300 raises RemoteResponseError with the body

No retries, authentication or caching; each call is one request.
"""

import logging
from typing import Optional

import requests

from ..domain import Location
from ..errors import RemoteResponseError, TransportError

logger = logging.getLogger(__name__)

USER_AGENT = 's3web'


class MetadataClient:
    """
    Client for the metadata document of a static HTTP remote.

    Example:
        client = MetadataClient()
        data = client.fetch(Location.from_identifier("s3web://host/path"))
        if data is None:
            print("no commits yet")
    """

    def __init__(self, user_agent: str = USER_AGENT):
        """
        Initialize MetadataClient.

        Args:
            user_agent: User-Agent header sent with each request
        """
        self.headers = {'User-Agent': user_agent}

    def fetch(self, location: Location) -> Optional[bytes]:
        """
        Fetch the metadata document of a remote.

        Args:
            location: Root of the remote object tree

        Returns:
            The document body, or None if the remote has no document

        Raises:
            TransportError: the request could not be completed
            RemoteResponseError: the remote answered with an error status
        """
        url = location.metadata_url
        logger.debug(f"GET {url}")

        try:
            response = requests.get(url, headers=self.headers)
        except requests.RequestException as e:
            raise TransportError(url, e) from e

        try:
            logger.debug(f"GET {url} -> {response.status_code}")

            if response.status_code == 404:
                return None

            if response.status_code >= 300:
                try:
                    body = response.text
                except requests.RequestException as e:
                    raise TransportError(url, e) from e
                raise RemoteResponseError(url, response.status_code, body)

            try:
                return response.content
            except requests.RequestException as e:
                raise TransportError(url, e) from e
        finally:
            response.close()

"""
Commit service for s3web.

Resolves commits from a remote's metadata document:
- Parses the document line by line, skipping lines that do not decode
- Filters commits by tags
- Orders commits newest first
- Looks up a single commit by id

The document is fetched again on every call; nothing is cached.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Union

from ..domain import Commit, LineResult, Location, Tag, match_tags, parse_line
from ..infra import MetadataClient

logger = logging.getLogger(__name__)


def parse_metadata(data: Union[bytes, str]) -> Iterator[LineResult]:
    """
    Decode a metadata document into one LineResult per non-blank line.

    Bytes are decoded as UTF-8 with replacement characters, so invalid
    bytes only spoil the line they appear in.

    Args:
        data: Raw document body

    Yields:
        LineResult for each non-blank line, in document order
    """
    if isinstance(data, bytes):
        data = data.decode('utf-8', errors='replace')

    # Only "\n" ends a line; JSON strings may contain a raw U+2028
    for line_number, line in enumerate(data.split('\n'), start=1):
        if line.strip():
            yield parse_line(line, line_number)


def valid_commits(results: Iterable[LineResult]) -> Iterator[Commit]:
    """Yield the commits of successful results, logging the others."""
    for result in results:
        if result.ok:
            yield result.commit
        else:
            logger.debug(f"Skipping metadata line {result.line_number}: {result.error}")


def sort_commits(commits: Iterable[Commit]) -> List[Commit]:
    """
    Order commits newest first.

    Commits with a valid timestamp come first, by descending timestamp.
    Commits without one follow. Equal or missing timestamps keep their
    input order.

    Returns:
        New sorted list
    """
    dated, undated = [], []
    for commit in commits:
        (undated if commit.timestamp is None else dated).append(commit)

    # sorted() stays stable with reverse=True
    dated = sorted(dated, key=lambda commit: commit.timestamp, reverse=True)
    return dated + undated


class CommitService:
    """
    Service for listing and looking up commits on a remote.

    Example:
        service = CommitService()
        location = Location.from_identifier("s3web://host/path")

        for commit in service.list_commits(location, [Tag.parse("env=prod")]):
            print(commit.id)

        commit = service.get_commit(location, "abc123")
    """

    def __init__(self, client: Optional[MetadataClient] = None):
        """
        Initialize CommitService.

        Args:
            client: Metadata client (created if not provided)
        """
        self.client = client or MetadataClient()

    def list_commits(self, location: Location, tags: Iterable[Tag] = ()) -> List[Commit]:
        """
        List the commits of a remote that match every tag.

        Args:
            location: Remote to read
            tags: Tags every returned commit must match; empty keeps all

        Returns:
            Matching commits, newest first. Empty if the remote has no
            metadata document.

        Raises:
            TransportError: the document could not be fetched
            RemoteResponseError: the remote answered with an error status
        """
        tags = list(tags)
        data = self.client.fetch(location)
        if data is None:
            logger.debug(f"No metadata at {location.metadata_url}")
            return []

        commits = [
            commit for commit in valid_commits(parse_metadata(data))
            if match_tags(commit.properties, tags)
        ]
        return sort_commits(commits)

    def get_commit(self, location: Location, commit_id: str) -> Optional[Commit]:
        """
        Find a commit by id.

        Args:
            location: Remote to read
            commit_id: Id to look for

        Returns:
            The first commit with that id, or None if there is none
        """
        for commit in self.list_commits(location):
            if commit.id == commit_id:
                return commit
        return None

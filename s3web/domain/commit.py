"""
Commit domain object for s3web.

A commit is one line of a remote's metadata document:

    {"id": "<string>", "properties": {"timestamp": "<RFC3339>", "tags": {...}, ...}}

Lines are decoded one at a time into LineResult values so that a
corrupted line can be skipped without losing the rest of the document.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .value import JsonObject, get_object, is_json_object


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an RFC3339 timestamp.

    Accepts a trailing "Z" or a numeric offset; naive values are taken
    as UTC.

    Returns:
        Timezone-aware datetime, or None if value is not a valid timestamp
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Commit:
    """
    A commit listed in the metadata document.

    Attributes:
        id: Commit identifier, unique within a document
        properties: Arbitrary metadata attached to the commit
    """

    id: str
    properties: JsonObject = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> 'Commit':
        """
        Build a Commit from a decoded JSON value.

        Raises:
            ValueError: data is not an object, or its id or properties
                are missing or of the wrong type
        """
        if not is_json_object(data):
            raise ValueError("record is not a JSON object")

        commit_id = data.get('id')
        if not isinstance(commit_id, str) or not commit_id:
            raise ValueError("missing or invalid 'id'")

        properties = data.get('properties')
        if not is_json_object(properties):
            raise ValueError("missing or invalid 'properties'")

        return cls(id=commit_id, properties=properties)

    @property
    def timestamp(self) -> Optional[datetime]:
        """Parsed ``properties["timestamp"]``, or None if absent or invalid."""
        return parse_timestamp(self.properties.get('timestamp'))

    @property
    def tags(self) -> JsonObject:
        """The ``properties["tags"]`` mapping, or {} if absent."""
        return get_object(self.properties, 'tags')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'properties': self.properties,
        }

    def to_jsonl(self) -> str:
        """Convert to single-line JSON, the metadata document format."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"Commit(id={self.id!r})"


@dataclass(frozen=True)
class LineResult:
    """
    Outcome of decoding one metadata line.

    Exactly one of commit and error is set.
    """

    line_number: int
    commit: Optional[Commit] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.commit is not None


def parse_line(line: str, line_number: int = 0) -> LineResult:
    """
    Decode a single metadata line.

    Args:
        line: Raw line; surrounding whitespace is ignored
        line_number: 1-based position in the document, for diagnostics

    Returns:
        LineResult holding either the commit or the reason it was rejected
    """
    try:
        data = json.loads(line.strip())
    except (ValueError, RecursionError) as e:
        return LineResult(line_number, error=f"invalid JSON: {e}")

    try:
        return LineResult(line_number, commit=Commit.from_dict(data))
    except ValueError as e:
        return LineResult(line_number, error=str(e))

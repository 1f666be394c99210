"""
Domain layer for s3web.

Contains pure domain objects with no I/O or side effects:
- Location: Canonical HTTP address of a remote, and its s3web:// form
- Commit: One record of the metadata document
- Tag: Key or key=value filter over commit tags

These objects are immutable and provide serialization methods for
JSONL output.
"""

from .location import Location, IDENTIFIER_SCHEME, METADATA_FILE
from .commit import Commit, LineResult, parse_line, parse_timestamp
from .tag import Tag, match_tags, tags_from_strings
from .value import JsonValue, JsonObject

__all__ = [
    'Location',
    'IDENTIFIER_SCHEME',
    'METADATA_FILE',
    'Commit',
    'LineResult',
    'parse_line',
    'parse_timestamp',
    'Tag',
    'match_tags',
    'tags_from_strings',
    'JsonValue',
    'JsonObject',
]

"""
Tag domain object for s3web.

Tags filter commits by the nested ``tags`` mapping in their properties:
- Presence tags: "archived" matches any commit with an "archived" tag
- Value tags: "env=prod" matches only when the "env" tag equals "prod"

Tags are immutable value objects.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .value import JsonObject, get_object


@dataclass(frozen=True)
class Tag:
    """
    Query predicate over a commit's tags.

    Examples:
        Tag.parse("archived")   -> Tag(key="archived", value=None)
        Tag.parse("env=prod")   -> Tag(key="env", value="prod")

    Attributes:
        key: Tag key that must be present
        value: Required value; None or "" only requires presence
    """

    key: str
    value: Optional[str] = None

    @classmethod
    def parse(cls, tag_string: str) -> 'Tag':
        """
        Parse a tag string into a Tag.

        Args:
            tag_string: "key" or "key=value"

        Returns:
            Parsed Tag object
        """
        tag_string = tag_string.strip()
        if '=' in tag_string:
            key, value = tag_string.split('=', 1)
            # "key=" is a presence tag, same as "key"
            return cls(key=key.strip(), value=value.strip() or None)
        return cls(key=tag_string)

    def matches(self, commit_tags: JsonObject) -> bool:
        """
        Check this tag against a commit's tag mapping.

        Args:
            commit_tags: The ``properties["tags"]`` mapping of a commit

        Returns:
            True if the key is present and, when a value is required,
            the stored value is exactly equal to it
        """
        if self.key not in commit_tags:
            return False
        if not self.value:
            return True
        return commit_tags[self.key] == self.value

    def __str__(self) -> str:
        if not self.value:
            return self.key
        return f"{self.key}={self.value}"


def match_tags(properties: JsonObject, tags: Iterable[Tag]) -> bool:
    """
    Return True if a commit's properties satisfy every tag.

    An empty tag set matches everything. A non-empty set never matches
    a commit whose ``tags`` property is missing or not a mapping.
    """
    commit_tags = get_object(properties, 'tags')
    return all(tag.matches(commit_tags) for tag in tags)


def tags_from_strings(tags: Iterable[Union[Tag, str]]) -> list:
    """Convert a mix of Tag objects and tag strings to Tag objects."""
    return [tag if isinstance(tag, Tag) else Tag.parse(tag) for tag in tags]

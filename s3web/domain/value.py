"""
JSON value typing for commit properties.

Commit properties are arbitrary JSON. In Python that is the closed
family str, int, float, bool, None, list and str-keyed dict, which is
what json.loads produces; JsonValue names it so property access is
typed at the boundary instead of relying on Any.
"""

from typing import Any, Dict, List, Union

JsonValue = Union[str, int, float, bool, None, List['JsonValue'], Dict[str, 'JsonValue']]
JsonObject = Dict[str, JsonValue]


def is_json_object(value: Any) -> bool:
    """Return True if value is a JSON object (a dict with str keys)."""
    return isinstance(value, dict) and all(isinstance(k, str) for k in value)


def get_object(container: JsonObject, key: str) -> JsonObject:
    """
    Return container[key] if it is a JSON object, otherwise an empty dict.

    Used for nested mappings such as ``properties["tags"]`` where a
    missing or mistyped value should read as "nothing there".
    """
    value = container.get(key)
    if is_json_object(value):
        return value
    return {}

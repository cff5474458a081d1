"""
Public case transcoding entry points.

Decode wire payloads with map_snake_to_camel once at the API boundary; encode request
bodies with map_camel_to_snake once when building them. All four functions are
synchronous, re-entrant and never raise for structurally valid input.
"""
from typing import Any

from utils.special_cases import DEFAULT_REGISTRY, Direction
from utils.walker import convert_key, walk


def snake_to_camel_string(s: str) -> str:
    """Convert a single snake_case key to camelCase (registered special cases first)."""
    return convert_key(s, Direction.SNAKE_TO_CAMEL, DEFAULT_REGISTRY)


def camel_to_snake_string(s: str) -> str:
    """Convert a single camelCase key to snake_case (registered special cases first)."""
    return convert_key(s, Direction.CAMEL_TO_SNAKE, DEFAULT_REGISTRY)


def map_snake_to_camel(obj: Any) -> Any:
    """Recursively convert plain dict keys from snake_case to camelCase, e.g. for API responses."""
    return walk(obj, Direction.SNAKE_TO_CAMEL)


def map_camel_to_snake(obj: Any) -> Any:
    """Recursively convert plain dict keys from camelCase to snake_case; ``requestBody`` is kept verbatim."""
    return walk(obj, Direction.CAMEL_TO_SNAKE)


def transcode(obj: Any, direction: Direction) -> Any:
    if direction is Direction.SNAKE_TO_CAMEL:
        return map_snake_to_camel(obj)
    return map_camel_to_snake(obj)


def transcode_string(s: str, direction: Direction) -> str:
    if direction is Direction.SNAKE_TO_CAMEL:
        return snake_to_camel_string(s)
    return camel_to_snake_string(s)

"""Case transcoding between snake_case wire payloads and camelCase application state."""
from utils.special_cases import DEFAULT_REGISTRY, Direction, SpecialCaseRegistry
from utils.transcoding import (
    camel_to_snake_string,
    map_camel_to_snake,
    map_snake_to_camel,
    snake_to_camel_string,
    transcode,
    transcode_string,
)
from utils.walker import NodeKind, classify, is_plain_map, walk

__all__ = [
    "snake_to_camel_string",
    "camel_to_snake_string",
    "map_snake_to_camel",
    "map_camel_to_snake",
    "transcode",
    "transcode_string",
    "walk",
    "classify",
    "is_plain_map",
    "NodeKind",
    "Direction",
    "SpecialCaseRegistry",
    "DEFAULT_REGISTRY",
]

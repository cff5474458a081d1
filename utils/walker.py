"""
Structural key rewriting over arbitrary value trees.

Values are classified up front into scalars, sequences, plain maps and opaque objects.
Only plain map keys are rewritten; opaque objects (datetimes, models, custom classes)
and scalars are returned as the same object. Traversal uses an explicit work stack,
so nesting depth is not limited by the interpreter recursion limit.

A container that is already on the current path (a cycle) is emitted as the original
object and not descended into. Shared, non-cyclic references are rewritten at every
place they occur.
"""
from __future__ import annotations

import logging
from collections import OrderedDict, defaultdict
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from utils.case import to_camel, to_snake
from utils.special_cases import DEFAULT_REGISTRY, Direction, SpecialCaseRegistry

logger = logging.getLogger(__name__)

# Wire-contract key holding a pre-formed request fragment; kept verbatim when encoding
REQUEST_BODY_KEY = "requestBody"

DEFAULT_EXEMPT_KEYS: dict[Direction, frozenset[str]] = {
    Direction.CAMEL_TO_SNAKE: frozenset({REQUEST_BODY_KEY}),
    Direction.SNAKE_TO_CAMEL: frozenset(),
}

CONVERTERS: dict[Direction, Callable[[str], str]] = {
    Direction.SNAKE_TO_CAMEL: to_camel,
    Direction.CAMEL_TO_SNAKE: to_snake,
}

_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes, bytearray)
_MAP_TYPES = (dict, OrderedDict, defaultdict)
_SEQUENCE_TYPES = (list, tuple)


class NodeKind(str, Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAP = "map"
    OPAQUE = "opaque"


def classify(value: Any) -> NodeKind:
    """Classify by exact type; subclasses of dict/list/tuple (named tuples, custom mappings) are opaque."""
    kind = type(value)
    if kind in _MAP_TYPES:
        return NodeKind.MAP
    if kind in _SEQUENCE_TYPES:
        return NodeKind.SEQUENCE
    if isinstance(value, _SCALAR_TYPES):
        return NodeKind.SCALAR
    return NodeKind.OPAQUE


def is_plain_map(value: Any) -> bool:
    return classify(value) is NodeKind.MAP


class _Frame:
    """One container being rebuilt: pending source entries plus the partially built result."""

    __slots__ = ("key", "source", "entries", "result")

    def __init__(self, key: Any, source: Any, entries: Iterator[tuple[Any, Any, bool]], result: Any):
        self.key = key
        self.source = source
        self.entries = entries
        self.result = result

    def attach(self, key: Any, value: Any) -> None:
        if isinstance(self.result, dict):
            self.result[key] = value
        else:
            self.result.append(value)

    def finish(self) -> Any:
        if type(self.source) is tuple:
            return tuple(self.result)
        return self.result


def convert_key(key: Any, direction: Direction, registry: SpecialCaseRegistry = DEFAULT_REGISTRY) -> Any:
    """Rename one key: registry override first, then the generic converter. Non-string keys pass through."""
    if not isinstance(key, str):
        return key
    override = registry.lookup(key, direction)
    if override is not None:
        return override
    return CONVERTERS[direction](key)


def _open(
    key: Any,
    node: Any,
    kind: NodeKind,
    direction: Direction,
    registry: SpecialCaseRegistry,
    exempt: frozenset[str],
) -> _Frame:
    # Entries are (emitted_key, value, descend); snapshots guard against mutation mid-walk
    if kind is NodeKind.MAP:
        entries = iter([
            (k, v, False) if k in exempt else (convert_key(k, direction, registry), v, True)
            for k, v in list(node.items())
        ])
        return _Frame(key, node, entries, {})
    return _Frame(key, node, iter([(None, v, True) for v in node]), [])


def walk(
    value: Any,
    direction: Direction,
    registry: SpecialCaseRegistry = DEFAULT_REGISTRY,
    exempt_keys: Optional[frozenset[str]] = None,
) -> Any:
    """
    Return a copy of ``value`` with every plain map key rewritten for ``direction``.
    Exempt keys keep both their spelling and their value verbatim.
    """
    root_kind = classify(value)
    if root_kind not in (NodeKind.MAP, NodeKind.SEQUENCE):
        return value
    exempt = DEFAULT_EXEMPT_KEYS[direction] if exempt_keys is None else frozenset(exempt_keys)

    on_path: set[int] = {id(value)}
    stack = [_open(None, value, root_kind, direction, registry, exempt)]
    while True:
        frame = stack[-1]
        entry = next(frame.entries, None)
        if entry is None:
            stack.pop()
            on_path.discard(id(frame.source))
            result = frame.finish()
            if not stack:
                return result
            stack[-1].attach(frame.key, result)
            continue

        key, child, descend = entry
        child_kind = classify(child)
        if not descend or child_kind not in (NodeKind.MAP, NodeKind.SEQUENCE):
            frame.attach(key, child)
        elif id(child) in on_path:
            logger.debug("Cycle detected at key %r; keeping original reference", key)
            frame.attach(key, child)
        else:
            on_path.add(id(child))
            stack.append(_open(key, child, child_kind, direction, registry, exempt))

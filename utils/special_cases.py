"""
Identifiers whose snake/camel pairing cannot be derived by the generic converter.
Matching is exact and case-sensitive; nested keys around a registered field still use the generic algorithm.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Optional


class Direction(str, Enum):
    SNAKE_TO_CAMEL = "snake_to_camel"
    CAMEL_TO_SNAKE = "camel_to_snake"


# SAML service configuration fields (federated identity provider contract)
SAML_FIELDS: tuple[tuple[str, str], ...] = (
    ("idpEntityId", "idp_entity_id"),
    ("idpSingleSignOnServiceUrl", "idp_single_sign_on_service_url"),
    ("idpX509cert", "idp_x509cert"),
    ("spNameIDFormat", "sp_name_id_format"),
    ("spPrivateKey", "sp_private_key"),
    ("spX509cert", "sp_x509cert"),
)


class SpecialCaseRegistry:
    """Static bidirectional table of (camel_form, snake_form) pairs."""

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()):
        to_snake: dict[str, str] = {}
        to_camel: dict[str, str] = {}
        for camel, snake in pairs:
            if to_snake.get(camel, snake) != snake or to_camel.get(snake, camel) != camel:
                raise ValueError(f"Conflicting special case for {camel!r} / {snake!r}")
            to_snake[camel] = snake
            to_camel[snake] = camel
        for camel in to_snake:
            if to_camel.get(camel, camel) != camel:
                raise ValueError(f"{camel!r} is registered as both a camel and a snake form")
        self._targets = MappingProxyType({
            Direction.CAMEL_TO_SNAKE: MappingProxyType({**to_snake, **{s: s for s in to_camel}}),
            Direction.SNAKE_TO_CAMEL: MappingProxyType({**to_camel, **{c: c for c in to_snake}}),
        })

    def lookup(self, key: str, direction: Direction) -> Optional[str]:
        """
        Return the registered spelling of ``key`` for ``direction``, or None to fall back to the converter.
        A key already in the target form maps to itself so the generic converter never touches it.
        """
        if not isinstance(key, str):
            return None
        return self._targets[direction].get(key)

    def pairs(self) -> list[tuple[str, str]]:
        return [
            (camel, snake)
            for camel, snake in self._targets[Direction.CAMEL_TO_SNAKE].items()
            if camel != snake
        ]

    def __contains__(self, key: object) -> bool:
        return any(key in table for table in self._targets.values())

    def __len__(self) -> int:
        return len(self.pairs())


DEFAULT_REGISTRY = SpecialCaseRegistry(SAML_FIELDS)

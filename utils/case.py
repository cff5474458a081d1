"""
Identifier case conversion between snake_case (wire) and camelCase (application state).
Both functions are total: non-string input, and strings outside the ASCII
letters/digits/separators domain, are returned as-is.
"""
import re

# Keys outside this domain (paths, media types, non-ASCII) pass through unchanged
_IDENTIFIER = re.compile(r"[A-Za-z0-9_-]*")
_SEPARATORS = re.compile(r"[_-]")
_LEADING_SEPARATORS = re.compile(r"^[_-]+")
# Acronym followed by a capitalized word: "HTTPSConnection" -> "HTTPS_Connection"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_camel(s: str) -> str:
    """
    Convert a snake_case (or kebab-case) identifier to camelCase.

    Leading separators are kept as underscores and the first word is emitted unchanged.
    Empty segments from doubled or trailing separators stay as literal underscores:
    "_private_key" -> "_privateKey", "test__double__underscore" -> "test_Double_Underscore".
    """
    if not isinstance(s, str) or not _IDENTIFIER.fullmatch(s):
        return s
    match = _LEADING_SEPARATORS.match(s)
    prefix = "_" * len(match.group(0)) if match else ""
    head, *rest = _SEPARATORS.split(s[len(prefix):])
    parts = [prefix, head]
    for segment in rest:
        parts.append(segment[0].upper() + segment[1:] if segment else "_")
    return "".join(parts)


def to_snake(s: str) -> str:
    """Convert a camelCase or PascalCase identifier to snake_case, splitting acronyms from the next word."""
    if not isinstance(s, str) or not _IDENTIFIER.fullmatch(s):
        return s
    snake = _ACRONYM_BOUNDARY.sub(r"\1_\2", s)
    snake = _WORD_BOUNDARY.sub(r"\1_\2", snake)
    return snake.lower()

"""
ASGI middleware that transcodes JSON bodies at the API boundary.
Incoming camelCase request bodies are converted to snake_case before routing; outgoing
snake_case JSON responses are converted to camelCase before they reach the client.
Routes outside the configured prefixes, skip paths, requests carrying the skip header,
and non-JSON bodies (forms, multipart uploads, files) pass through untouched.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from config import settings
from utils.transcoding import map_camel_to_snake, map_snake_to_camel

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def should_process_path(path: str, prefixes: Iterable[str]) -> bool:
    return any(path.startswith(prefix) for prefix in prefixes)


def is_json_content(content_type: Optional[str]) -> bool:
    return bool(content_type) and "application/json" in content_type.lower()


def is_form_content(content_type: Optional[str]) -> bool:
    return bool(content_type) and any(t in content_type.lower() for t in FORM_CONTENT_TYPES)


def _transcode_json(body: bytes, transform) -> Optional[bytes]:
    """Return the transformed body, or None when it is not a JSON object/array."""
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, (dict, list)):
        return None
    return json.dumps(transform(data), ensure_ascii=False, separators=(",", ":")).encode("utf-8")


async def _read_body(receive: Receive) -> tuple[bytes, list[Message]]:
    chunks: list[bytes] = []
    extra: list[Message] = []
    while True:
        message = await receive()
        if message["type"] != "http.request":
            extra.append(message)
            break
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return b"".join(chunks), extra


class CaseTransformMiddleware:
    def __init__(
        self,
        app: ASGIApp,
        prefixes: Optional[Iterable[str]] = None,
        skip_paths: Optional[Iterable[str]] = None,
        skip_header: Optional[str] = None,
        enabled: Optional[bool] = None,
    ) -> None:
        self.app = app
        self.prefixes = tuple(settings.case_transform_prefix_list if prefixes is None else prefixes)
        self.skip_paths = tuple(settings.case_transform_skip_path_list if skip_paths is None else skip_paths)
        self.skip_header = (skip_header or settings.case_transform_skip_header).lower()
        self.enabled = settings.case_transform_enabled if enabled is None else enabled

    def applies_to(self, scope: Scope) -> bool:
        if scope["type"] != "http" or not self.enabled:
            return False
        path = scope.get("path", "")
        if not should_process_path(path, self.prefixes):
            return False
        if should_process_path(path, self.skip_paths):
            return False
        return not Headers(scope=scope).get(self.skip_header)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not self.applies_to(scope):
            await self.app(scope, receive, send)
            return
        scope, receive = await self._decode_request(scope, receive)
        await self.app(scope, receive, _ResponseEncoder(send).send)

    async def _decode_request(self, scope: Scope, receive: Receive) -> tuple[Scope, Receive]:
        content_type = Headers(scope=scope).get("content-type")
        if is_form_content(content_type) or not is_json_content(content_type):
            return scope, receive

        body, extra = await _read_body(receive)
        converted = _transcode_json(body, map_camel_to_snake) if body else None
        if converted is None:
            logger.debug("Request body on %s left as-is (empty or not a JSON object/array)", scope.get("path"))
        else:
            body = converted
            scope = dict(scope)
            MutableHeaders(scope=scope)["content-length"] = str(len(body))

        pending: list[Message] = [{"type": "http.request", "body": body, "more_body": False}, *extra]

        async def replay() -> Message:
            if pending:
                return pending.pop(0)
            return await receive()

        return scope, replay


class _ResponseEncoder:
    """Buffers a JSON response so its keys can be converted; other responses stream through."""

    def __init__(self, send: Send) -> None:
        self._send = send
        self._start: Optional[Message] = None
        self._chunks: list[bytes] = []
        self._buffering = False

    async def send(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            if is_json_content(Headers(raw=message.get("headers", [])).get("content-type")):
                self._start = message
                self._buffering = True
                return
            await self._send(message)
            return

        if message["type"] != "http.response.body" or not self._buffering:
            await self._send(message)
            return

        self._chunks.append(message.get("body", b""))
        if message.get("more_body", False):
            return

        body = b"".join(self._chunks)
        converted = _transcode_json(body, map_snake_to_camel) if body else None
        start: Any = self._start
        if converted is not None:
            body = converted
            MutableHeaders(scope=start)["content-length"] = str(len(body))
        self._buffering = False
        await self._send(start)
        await self._send({"type": "http.response.body", "body": body, "more_body": False})

"""The standard JSON envelope every endpoint answers with."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from flask import Response

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_HTML_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _encode(payload: Any) -> str:
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _HTML_ESCAPES:
        text = text.replace(char, escaped)
    return text + "\n"


def _timestamp() -> str:
    return datetime.now().strftime(TIME_FORMAT)


@dataclass
class StandardResponse:
    """Status, timestamp, message and optional data of a reply."""

    response_status: int
    time_date: str
    response_message: str
    response_data: Any = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "responseStatus": self.response_status,
            "timedate": self.time_date,
            "responseMessage": self.response_message,
        }
        if self.response_data is not None:
            body["responseData"] = _plain(self.response_data)
        return body


def _send(status: int, response: StandardResponse) -> Response:
    return Response(
        _encode(response.to_dict()),
        status=status,
        content_type="application/json",
    )


def json_response(data: Any, message: str) -> Response:
    """A 200 reply carrying ``data`` and ``message``."""
    return _send(200, StandardResponse(200, _timestamp(), message, data))


def error_response(status: int, message: str) -> Response:
    """An error reply with the given HTTP status and no data."""
    return _send(status, StandardResponse(status, _timestamp(), message))
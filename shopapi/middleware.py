"""Request deadlines, cancellation checks and CORS headers."""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable

from flask import Flask, Response, current_app, g, has_app_context, request

from .responses import error_response

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "درخواست کنسل شد"
DELAY_INTERVAL_KEY = "DELAY_ABORT_INTERVAL"
DEFAULT_DELAY_INTERVAL = 1.0
DEFAULT_DELAY_STEPS = 5

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}
_DEADLINE_ATTR = "shopapi_deadline"


@dataclass(frozen=True)
class Deadline:
    """A point on the monotonic clock after which a request is abandoned."""

    at: float

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(time.monotonic() + seconds)

    def expired(self) -> bool:
        return time.monotonic() >= self.at

    def remaining(self) -> float:
        """Seconds left, never negative."""
        return max(0.0, self.at - time.monotonic())


def install_cors(app: Flask) -> Flask:
    """Allow any origin and answer preflight requests with 200."""

    @app.before_request
    def _preflight() -> Response | None:
        if request.method == "OPTIONS":
            return Response(status=200)
        return None

    @app.after_request
    def _cors_headers(response: Response) -> Response:
        for name, value in _CORS_HEADERS.items():
            response.headers[name] = value
        return response

    return app


def install_timeout(app: Flask, timeout: float | timedelta) -> Flask:
    """Give every request a deadline ``timeout`` from its start."""
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)

    @app.before_request
    def _set_deadline() -> None:
        setattr(g, _DEADLINE_ATTR, Deadline.after(seconds))

    return app


def current_deadline() -> Deadline | None:
    """The deadline of the request being handled, if one was set."""
    if not has_app_context():
        return None
    return g.get(_DEADLINE_ATTR)


def _request_done() -> bool:
    deadline = current_deadline()
    return deadline is not None and deadline.expired()


def _plain_error(message: str, status: int) -> Response:
    return Response(
        message + "\n",
        status=status,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def context_abort(view: Callable[..., Any]) -> Callable[..., Any]:
    """Refuse with 408 if the request is already past its deadline."""

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if _request_done():
            logger.info("Client Cancel Call-Service")
            return _plain_error(CANCELLED_MESSAGE, 408)
        return view(*args, **kwargs)

    return wrapper


def context_delay_abort(
    view: Callable[..., Any],
    steps: int = DEFAULT_DELAY_STEPS,
    interval: float | None = None,
) -> Callable[..., Any]:
    """Wait ``steps`` intervals before running ``view``, giving up with 408
    as soon as the deadline passes.

    Without an explicit ``interval`` the application's DELAY_ABORT_INTERVAL
    setting is used, one second by default.
    """

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        pause = interval
        if pause is None:
            pause = float(current_app.config.get(DELAY_INTERVAL_KEY, DEFAULT_DELAY_INTERVAL))
        for _ in range(steps):
            deadline = current_deadline()
            if deadline is not None and deadline.remaining() < pause:
                time.sleep(deadline.remaining())
                logger.info("DELETE Services Cancel By Client")
                return error_response(408, CANCELLED_MESSAGE)
            time.sleep(pause)
        return view(*args, **kwargs)

    return wrapper
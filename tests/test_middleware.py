import time

import pytest
from flask import Flask, jsonify

from shopapi.middleware import (
    CANCELLED_MESSAGE,
    DELAY_INTERVAL_KEY,
    Deadline,
    context_abort,
    context_delay_abort,
    current_deadline,
    install_cors,
    install_timeout,
)


def make_app(timeout=None):
    app = Flask(__name__)
    install_cors(app)
    calls = []

    def hello():
        calls.append(1)
        deadline = current_deadline()
        return jsonify(remaining=None if deadline is None else deadline.remaining())

    app.add_url_rule("/hello", "hello", context_abort(hello), methods=["GET"])
    app.add_url_rule("/delay", "delay", context_delay_abort(hello, steps=2, interval=0.0), methods=["DELETE"])
    app.add_url_rule("/slow", "slow", context_delay_abort(hello, steps=3, interval=0.5), methods=["DELETE"])
    app.add_url_rule("/configured", "configured", context_delay_abort(hello), methods=["DELETE"])
    if timeout is not None:
        install_timeout(app, timeout)
    return app, calls


def test_deadline_in_past_is_expired():
    deadline = Deadline(time.monotonic() - 1)
    assert deadline.expired()
    assert deadline.remaining() == 0.0


def test_deadline_in_future():
    deadline = Deadline.after(60)
    assert not deadline.expired()
    assert 0 < deadline.remaining() <= 60


def test_current_deadline_outside_request():
    assert current_deadline() is None


def test_no_timeout_means_no_deadline():
    app, calls = make_app()
    response = app.test_client().get("/hello")
    assert response.get_json() == {"remaining": None}
    assert calls == [1]


def test_cors_headers_on_normal_request():
    app, _ = make_app()
    response = app.test_client().get("/hello")
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"
    assert response.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"


def test_preflight_short_circuits():
    app, calls = make_app()
    response = app.test_client().options("/hello")
    assert response.status_code == 200
    assert response.data == b""
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert calls == []


def test_timeout_sets_deadline():
    app, _ = make_app(timeout=30)
    remaining = app.test_client().get("/hello").get_json()["remaining"]
    assert 0 < remaining <= 30


def test_context_abort_when_expired():
    app, calls = make_app(timeout=0)
    response = app.test_client().get("/hello")
    assert response.status_code == 408
    assert response.get_data(as_text=True) == CANCELLED_MESSAGE + "\n"
    assert response.mimetype == "text/plain"
    assert calls == []


def test_delay_abort_runs_view_when_time_allows():
    app, calls = make_app(timeout=30)
    response = app.test_client().delete("/delay")
    assert response.status_code == 200
    assert calls == [1]


def test_delay_abort_cancels_on_expired_deadline():
    app, calls = make_app(timeout=0)
    response = app.test_client().delete("/delay")
    body = response.get_json()
    assert response.status_code == 408
    assert body["responseStatus"] == 408
    assert body["responseMessage"] == CANCELLED_MESSAGE
    assert calls == []


def test_delay_abort_cancels_when_deadline_falls_inside_wait():
    app, calls = make_app(timeout=0.05)
    started = time.monotonic()
    response = app.test_client().delete("/slow")
    assert response.status_code == 408
    assert time.monotonic() - started < 1.0
    assert calls == []


@pytest.mark.parametrize("interval", [0, 0.0])
def test_delay_interval_read_from_config(interval):
    app, calls = make_app()
    app.config[DELAY_INTERVAL_KEY] = interval
    started = time.monotonic()
    response = app.test_client().delete("/configured")
    assert response.status_code == 200
    assert time.monotonic() - started < 1.0
    assert calls == [1]
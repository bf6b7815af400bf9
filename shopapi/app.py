"""Application assembly and the server entry point."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from flask import Flask, Response, jsonify, request

from .controller import create_blueprint
from .database import init_database
from .docs import SwaggerInfo, swagger_spec
from .middleware import install_cors, install_timeout
from .repository import ProductRepository
from .service import ProductService

DEFAULT_PORT = ":9004"
REQUEST_TIMEOUT = timedelta(seconds=7)
_RULE = "═══════════════════════════════════════════════"


def create_app(service: ProductService) -> Flask:
    """A Flask application serving the product API and its Swagger document."""
    app = Flask(__name__)
    install_cors(app)
    app.register_blueprint(create_blueprint(service))

    @app.get("/swagger/doc.json")
    def swagger_doc() -> Response:
        return jsonify(swagger_spec(SwaggerInfo(host=request.host)))

    install_timeout(app, REQUEST_TIMEOUT)
    return app


def _split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    try:
        number = int(port)
    except ValueError as exc:
        raise ValueError(f"invalid listen address {address!r}") from exc
    return host or "0.0.0.0", number


@dataclass
class App:
    """The server: a listen address and the routed application."""

    port: str = DEFAULT_PORT
    service: ProductService | None = None
    router: Flask | None = field(default=None, init=False)

    def init(self) -> None:
        if self.service is None:
            raise ValueError("a product service is required")
        self.router = create_app(self.service)

    def run(self) -> None:
        """Serve until interrupted."""
        if self.router is None:
            self.init()
        host, port = _split_address(self.port)
        self.router.run(host=host, port=port, threaded=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="shopapi", description="Online shop REST API server.")
    parser.add_argument("--port", default=DEFAULT_PORT, help="listen address, e.g. :9004")
    args = parser.parse_args(argv)

    print(_RULE)
    print("🧩      API Server      ")
    print("🚀   OnlineShop REST API   ")
    print(_RULE)

    connection = init_database()
    try:
        app = App(port=args.port, service=ProductService(ProductRepository(connection)))
        app.init()
        print(f"✅ Server successfully started on port {app.port}")
        print("🟢 Running... Press Ctrl+C to stop")
        print(f"📅 Startup time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        app.run()
    finally:
        connection.close()
    return 0
import sqlite3

import pytest

from shopapi.app import App, create_app, main
from shopapi.database import DatabaseError
from shopapi.repository import ProductRepository
from shopapi.service import ProductService


@pytest.fixture
def service():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE products (id INTEGER PRIMARY KEY AUTOINCREMENT, productCode TEXT, "
        "name TEXT, price INTEGER, status TEXT, inventory TEXT)"
    )
    yield ProductService(ProductRepository(conn, placeholder="?"))
    conn.close()


def test_products_route_with_cors(service):
    response = create_app(service).test_client().get("/products")
    assert response.status_code == 200
    assert response.get_json()["responseData"] == []
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_preflight(service):
    response = create_app(service).test_client().options("/products")
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"


def test_swagger_document(service):
    response = create_app(service).test_client().get("/swagger/doc.json")
    spec = response.get_json()
    assert response.status_code == 200
    assert spec["swagger"] == "2.0"
    assert spec["info"]["title"] == "Product API"
    assert spec["host"] == "localhost"
    assert set(spec["paths"]) == {"/products", "/products/{id}"}


def test_app_init_builds_router(service):
    app = App(service=service)
    app.init()
    rules = {rule.rule for rule in app.router.url_map.iter_rules()}
    assert {"/products", "/products/<id>", "/swagger/doc.json"} <= rules
    assert app.port == ":9004"


def test_app_init_requires_service():
    with pytest.raises(ValueError):
        App().init()


def test_main_fails_without_database(monkeypatch, capsys):
    monkeypatch.setenv("DB_PORT", "notaport")
    with pytest.raises(DatabaseError):
        main([])
    assert "OnlineShop REST API" in capsys.readouterr().out
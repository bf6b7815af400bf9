"""The Swagger 2.0 description of the product API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_PRODUCT_REF = "#/definitions/repository.Product"
_ERROR_REF = "#/definitions/util.ErrorResponse"
_JSON = ["application/json"]
_TAGS = ["products"]


@dataclass(frozen=True)
class SwaggerInfo:
    """The adjustable header fields of the specification."""

    version: str = "1.0"
    host: str = "localhost:9004"
    base_path: str = "/"
    schemes: tuple[str, ...] = ()
    title: str = "Product API"
    description: str = "Online Shop REST API"


def _ref(target: str) -> dict[str, str]:
    return {"$ref": target}


def _reply(description: str, schema: dict[str, Any]) -> dict[str, Any]:
    return {"description": description, "schema": schema}


def _error(description: str) -> dict[str, Any]:
    return _reply(description, _ref(_ERROR_REF))


def _id_param() -> dict[str, Any]:
    return {
        "type": "integer",
        "description": "شناسه محصول",
        "name": "id",
        "in": "path",
        "required": True,
    }


def _body_param(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "name": "product",
        "in": "body",
        "required": True,
        "schema": _ref(_PRODUCT_REF),
    }


def _object() -> dict[str, Any]:
    return {"type": "object", "additionalProperties": True}


def _paths() -> dict[str, Any]:
    return {
        "/products": {
            "get": {
                "description": "این API لیست کامل محصولات را برمی‌گرداند.",
                "produces": list(_JSON),
                "tags": list(_TAGS),
                "summary": "دریافت همه محصولات",
                "responses": {
                    "200": _reply("OK", {"type": "array", "items": _ref(_PRODUCT_REF)}),
                    "500": _error("Internal Server Error"),
                },
            },
            "put": {
                "description": "بروزرسانی اطلاعات یک محصول موجود",
                "consumes": list(_JSON),
                "produces": list(_JSON),
                "tags": list(_TAGS),
                "summary": "بروزرسانی محصول",
                "parameters": [_body_param("اطلاعات جدید محصول")],
                "responses": {
                    "200": _reply("OK", _ref(_PRODUCT_REF)),
                    "400": _error("Bad Request"),
                    "500": _error("Internal Server Error"),
                },
            },
            "post": {
                "description": "ایجاد یک محصول جدید با استفاده از اطلاعات ارسال شده",
                "consumes": list(_JSON),
                "produces": list(_JSON),
                "tags": list(_TAGS),
                "summary": "ایجاد محصول جدید",
                "parameters": [_body_param("اطلاعات محصول جدید")],
                "responses": {
                    "201": _reply("Created", _ref(_PRODUCT_REF)),
                    "400": _error("Bad Request"),
                    "500": _error("Internal Server Error"),
                },
            },
            "delete": {
                "description": "حذف همه محصولات موجود در دیتابیس",
                "produces": list(_JSON),
                "tags": list(_TAGS),
                "summary": "حذف همه محصولات",
                "responses": {
                    "200": _reply("OK", _object()),
                    "500": _error("Internal Server Error"),
                },
            },
        },
        "/products/{id}": {
            "get": {
                "description": "دریافت اطلاعات یک محصول با استفاده از شناسه",
                "produces": list(_JSON),
                "tags": list(_TAGS),
                "summary": "دریافت محصول با شناسه",
                "parameters": [_id_param()],
                "responses": {
                    "200": _reply("OK", _ref(_PRODUCT_REF)),
                    "400": _error("Bad Request"),
                    "500": _error("Internal Server Error"),
                },
            },
            "delete": {
                "description": "حذف یک محصول با استفاده از شناسه",
                "produces": list(_JSON),
                "tags": list(_TAGS),
                "summary": "حذف یک محصول",
                "parameters": [_id_param()],
                "responses": {
                    "200": _reply("OK", _object()),
                    "400": _error("Bad Request"),
                    "500": _error("Internal Server Error"),
                },
            },
        },
    }


def _definitions() -> dict[str, Any]:
    return {
        "repository.Product": {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "inventory": {"type": "string"},
                "name": {"type": "string"},
                "price": {"type": "integer"},
                "productCode": {"type": "string"},
                "status": {"type": "string"},
            },
        },
        "util.ErrorResponse": {
            "type": "object",
            "properties": {
                "code": {"type": "integer"},
                "message": {"type": "string"},
            },
        },
    }


def swagger_spec(info: SwaggerInfo | None = None) -> dict[str, Any]:
    """The full specification as a JSON-ready dictionary."""
    info = info or SwaggerInfo()
    return {
        "schemes": list(info.schemes),
        "swagger": "2.0",
        "info": {
            "description": info.description,
            "title": info.title,
            "contact": {"name": "Support", "email": "example@example.com"},
            "license": {"name": "MIT"},
            "version": info.version,
        },
        "host": info.host,
        "basePath": info.base_path,
        "paths": _paths(),
        "definitions": _definitions(),
    }
"""HTTP handlers for the product endpoints."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Blueprint, Response, request

from .middleware import context_abort, context_delay_abort, current_deadline
from .models import Product
from .repository import RepositoryError
from .responses import error_response, json_response
from .service import ProductService

TIMEOUT_MESSAGE = "درخواست شما Timeout شد"
INVALID_ID_MESSAGE = "شناسه نامعتبر است"
READ_BODY_MESSAGE = "خطا در خواندن بدنه درخواست"
INVALID_JSON_MESSAGE = "فرمت JSON نامعتبر است"
ID_REQUIRED_MESSAGE = "شناسه (ID) الزامی است"
FETCHED_MESSAGE = "فراخوانی با موفقیت انجام شد"
CREATED_MESSAGE = "اطلاعات جدید با موفقیت ذخیره شد"
DELETED_MESSAGE = "محصول با موفقیت حذف شد"
DELETE_FAILED_MESSAGE = "خطا در حذف محصول"
DELETED_ALL_MESSAGE = "همه محصولات با موفقیت حذف شدند"
DELETE_ALL_FAILED_MESSAGE = "خطا در حذف همه محصولات"
UPDATED_MESSAGE = "محصول با موفقیت بروزرسانی شد"
UPDATE_FAILED_MESSAGE = "خطا در بروزرسانی محصول"

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class _BodyError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _parse_id(text: str) -> int | None:
    if not _ID_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _read_product() -> Product:
    try:
        body = request.get_data()
    # Any failure while receiving the body is the client's problem.
    except Exception as exc:
        raise _BodyError(READ_BODY_MESSAGE) from exc
    try:
        data = json.loads(body, parse_constant=_reject_constant)
        return Product() if data is None else Product.from_dict(data)
    except ValueError as exc:
        raise _BodyError(INVALID_JSON_MESSAGE) from exc


def _failure(message: str) -> Response:
    deadline = current_deadline()
    if deadline is not None and deadline.expired():
        return error_response(408, TIMEOUT_MESSAGE)
    return error_response(500, message)


def create_blueprint(service: ProductService) -> Blueprint:
    """The /products routes, served by ``service``."""
    blueprint = Blueprint("products", __name__)

    def all_products() -> Response:
        try:
            products = service.all_products()
        except RepositoryError as exc:
            return _failure(str(exc))
        return json_response(products, FETCHED_MESSAGE)

    def get_product(id: str) -> Response:
        product_id = _parse_id(id)
        if product_id is None:
            return error_response(400, INVALID_ID_MESSAGE)
        try:
            product = service.fetch_product(product_id)
        except RepositoryError as exc:
            return _failure(str(exc))
        return json_response(product, FETCHED_MESSAGE)

    def create_product() -> Response:
        try:
            product = _read_product()
        except _BodyError as exc:
            return error_response(400, exc.message)
        try:
            created = service.create_product(product)
        except RepositoryError as exc:
            return _failure(str(exc))
        return json_response(created, CREATED_MESSAGE)

    def update_product() -> Response:
        try:
            product = _read_product()
        except _BodyError as exc:
            return error_response(400, exc.message)
        if product.id == 0:
            return error_response(400, ID_REQUIRED_MESSAGE)
        try:
            service.update_product(product)
        except RepositoryError:
            return _failure(UPDATE_FAILED_MESSAGE)
        return json_response(product, UPDATED_MESSAGE)

    def delete_product(id: str) -> Response:
        product_id = _parse_id(id)
        if product_id is None:
            return error_response(400, INVALID_ID_MESSAGE)
        try:
            service.delete_product(product_id)
        except RepositoryError:
            return _failure(DELETE_FAILED_MESSAGE)
        return json_response(None, DELETED_MESSAGE)

    def delete_all_products() -> Response:
        try:
            service.delete_all_products()
        except RepositoryError:
            return _failure(DELETE_ALL_FAILED_MESSAGE)
        return json_response(None, DELETED_ALL_MESSAGE)

    routes = (
        ("/products", "all_products", context_abort(all_products), "GET"),
        ("/products/<id>", "get_product", context_abort(get_product), "GET"),
        ("/products", "create_product", context_abort(create_product), "POST"),
        ("/products", "update_product", context_abort(update_product), "PUT"),
        ("/products/<id>", "delete_product", context_delay_abort(delete_product), "DELETE"),
        ("/products", "delete_all_products", context_delay_abort(delete_all_products), "DELETE"),
    )
    for rule, endpoint, view, method in routes:
        blueprint.add_url_rule(rule, endpoint, view, methods=[method])
    return blueprint
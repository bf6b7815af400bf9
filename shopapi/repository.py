"""SQL access to the products table."""

from __future__ import annotations

from contextlib import closing
from dataclasses import replace
from typing import Any, Sequence

from .models import Product

_COLUMNS = "id, productCode, name, price, status, inventory"


class RepositoryError(RuntimeError):
    """Raised when a query against the products table fails."""


class ProductNotFound(RepositoryError, LookupError):
    """Raised when no product has the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__("no rows in result set")
        self.product_id = product_id


class ProductRepository:
    """Reads and writes products through a DB-API connection.

    Queries are written with ``?`` markers, replaced by ``placeholder``
    so the same statements run on drivers with other parameter styles.
    """

    def __init__(self, connection: Any, placeholder: str = "%s") -> None:
        self._connection = connection
        self._placeholder = placeholder

    def _run(self, query: str, params: Sequence[Any] = (), *, fetch: bool = False) -> Any:
        try:
            with closing(self._connection.cursor()) as cursor:
                cursor.execute(query.replace("?", self._placeholder), tuple(params))
                if fetch:
                    return cursor.fetchall()
                self._connection.commit()
                return cursor.lastrowid
        # Driver errors differ per database module; report them uniformly.
        except Exception as exc:
            raise RepositoryError(str(exc)) from exc

    def get_products(self) -> list[Product]:
        """Every product in the table."""
        rows = self._run(f"SELECT {_COLUMNS} FROM products", fetch=True)
        return [Product(*row) for row in rows]

    def get_product(self, product_id: int) -> Product:
        """The product with ``product_id``; ProductNotFound if there is none."""
        rows = self._run(
            "SELECT productCode, name, price, status, inventory FROM products WHERE id = ?",
            (product_id,),
            fetch=True,
        )
        if not rows:
            raise ProductNotFound(product_id)
        return Product(product_id, *rows[0])

    def create_product(self, product: Product) -> Product:
        """Insert ``product`` and return it with the id the database assigned."""
        new_id = self._run(
            "INSERT INTO products(productCode, name, price, status, inventory) VALUES(?,?,?,?,?)",
            (product.product_code, product.name, product.price, product.status, product.inventory),
        )
        if new_id is None:
            raise RepositoryError("database did not report the inserted id")
        return replace(product, id=int(new_id))

    def delete_product(self, product_id: int) -> None:
        self._run("DELETE FROM products WHERE id = ?", (product_id,))

    def delete_all_products(self) -> None:
        self._run("DELETE FROM products")

    def update_product(self, product: Product) -> None:
        """Overwrite every column of the row whose id is ``product.id``."""
        self._run(
            "UPDATE products SET productCode = ?, name = ?, price = ?, status = ?, inventory = ? "
            "WHERE id = ?",
            (
                product.product_code,
                product.name,
                product.price,
                product.status,
                product.inventory,
                product.id,
            ),
        )
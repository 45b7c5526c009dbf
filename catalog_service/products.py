"""
Product repository: CRUD persistence for the catalog.
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from .errors import InternalError, NotFoundError
from .models import Product
from .schemas import ProductIn

logger = logging.getLogger(__name__)


class ProductRepository:
    """Repository for product database operations."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError) -> InternalError:
        self.db.rollback()
        return InternalError(f"product {action} failed: {exc}")

    def list(self) -> List[Product]:
        try:
            return self.db.query(Product).order_by(Product.product_id).all()
        except SQLAlchemyError as e:
            raise self._fail("list", e) from e

    def get(self, product_id: int) -> Product:
        """
        Raises:
            NotFoundError: If no product has this id
        """
        try:
            product = self.db.get(Product, product_id)
        except SQLAlchemyError as e:
            raise self._fail("lookup", e) from e
        if product is None:
            raise NotFoundError(product_id)
        return product

    def create(self, fields: ProductIn) -> Product:
        product = Product(
            product_name=fields.product_name,
            description=fields.description,
            quantity=fields.quantity,
            price=fields.price,
        )
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            raise self._fail("insert", e) from e
        logger.info("Product created: id=%s", product.product_id)
        return product

    def update(self, product_id: int, fields: ProductIn) -> Product:
        """
        Replace all fields of an existing product.

        Raises:
            NotFoundError: If the update matched zero rows
        """
        try:
            updated = (
                self.db.query(Product)
                .filter(Product.product_id == product_id)
                .update(
                    {
                        Product.product_name: fields.product_name,
                        Product.description: fields.description,
                        Product.quantity: fields.quantity,
                        Product.price: fields.price,
                    },
                    synchronize_session=False,
                )
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e
        if not updated:
            raise NotFoundError(product_id)
        logger.info("Product updated: id=%s", product_id)
        return self.get(product_id)

    def delete(self, product_id: int) -> None:
        """
        Raises:
            NotFoundError: If the delete matched zero rows
        """
        try:
            deleted = (
                self.db.query(Product)
                .filter(Product.product_id == product_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
        if not deleted:
            raise NotFoundError(product_id)
        logger.info("Product deleted: id=%s", product_id)

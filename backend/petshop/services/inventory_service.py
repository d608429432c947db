"""Inventory ledger service.

Stock and price changes are everyday user input, so a refused change is
reported through ``OperationResult.failure`` and leaves the product untouched;
only product registration raises.
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from petshop.core.exceptions import NotFoundError, ValidationError
from petshop.core.validation import BaseValidator, ValidationResult, validate_product
from petshop.domain.entities import Product, to_cents
from petshop.domain.interfaces import IProductRepository
from petshop.schemas.dtos import OperationResult

logger = logging.getLogger(__name__)

MAX_DISCOUNT_PERCENT = Decimal("100")


class StockDirection(str, Enum):
    ADD = "add"
    REMOVE = "remove"


class InventoryService:
    def __init__(self, repository: IProductRepository):
        self.repository = repository

    def register_product(
        self, name: Any, price: Any, stock: Any, category: Any, code: Any
    ) -> Product:
        """Register a new product; codes are unique across the inventory."""
        cleaned = validate_product(
            {
                "name": name,
                "price": price,
                "stock": stock,
                "category": category,
                "code": code,
            }
        ).raise_if_invalid()

        if self.repository.get_by_code(cleaned["code"]) is not None:
            raise ValidationError(
                f"Product code {cleaned['code']} is already registered.", "code"
            )

        product = self.repository.add(Product(**cleaned))
        logger.info(
            "Product registered",
            extra={
                "context": {
                    "code": product.code,
                    "name": product.name,
                    "stock": product.stock,
                }
            },
        )
        return product

    def get_product(self, code: int) -> Product:
        product = self.repository.get_by_code(code)
        if product is None:
            raise NotFoundError("Product", code)
        return product

    def list_products(self) -> List[Product]:
        return self.repository.get_all()

    def add_stock(self, product: Product, quantity: Any) -> OperationResult:
        if not self._is_shelved(product):
            return self._not_shelved(product)
        qty = self._positive_quantity(quantity)
        if qty is None:
            return self._refuse(product, "Invalid quantity! Enter a positive value.")

        product.stock += qty
        return self._stock_updated(product)

    def remove_stock(self, product: Product, quantity: Any) -> OperationResult:
        if not self._is_shelved(product):
            return self._not_shelved(product)
        qty = self._positive_quantity(quantity)
        if qty is None or not product.has_sufficient_stock(qty):
            return self._refuse(product, "Insufficient stock or invalid quantity!")

        product.stock -= qty
        return self._stock_updated(product)

    def adjust_stock(
        self, product: Product, delta: Any, direction: Any
    ) -> OperationResult:
        """Add or remove ``delta`` units depending on ``direction``."""
        try:
            direction = StockDirection(str(direction).strip().lower())
        except ValueError:
            return self._refuse(
                product, "Invalid direction! Use 'add' or 'remove'."
            )

        if direction is StockDirection.ADD:
            return self.add_stock(product, delta)
        return self.remove_stock(product, delta)

    def has_sufficient_stock(self, product: Product, quantity: Any) -> bool:
        qty = self._positive_quantity(quantity)
        return qty is not None and product.has_sufficient_stock(qty)

    def apply_discount(self, product: Product, percent: Any) -> OperationResult:
        """Reduce the price by ``percent`` (0 < percent <= 100).

        The new price is rounded half-up to whole cents, so 33.3% off 9.99 gives
        6.66. A 100% discount leaves the product at 0.00.
        """
        if not self._is_shelved(product):
            return self._not_shelved(product)
        result = ValidationResult()
        value = BaseValidator.validate_decimal(
            percent,
            "percent",
            result,
            min_value=Decimal("0"),
            max_value=MAX_DISCOUNT_PERCENT,
            min_exclusive=True,
        )
        if value is None:
            return self._refuse(
                product,
                "Invalid discount percentage! Enter a value between 1% and 100%.",
            )

        product.price = to_cents(product.price * (1 - value / 100))
        logger.info(
            "Discount applied",
            extra={
                "context": {
                    "code": product.code,
                    "percent": str(value),
                    "price": str(product.price),
                }
            },
        )
        return OperationResult.ok(
            f"New discounted price: {product.price:.2f}", value=product.price
        )

    def set_price(self, product: Product, new_price: Any) -> OperationResult:
        if not self._is_shelved(product):
            return self._not_shelved(product)
        result = ValidationResult()
        value = BaseValidator.validate_decimal(
            new_price, "price", result, min_value=Decimal("0"), min_exclusive=True
        )
        if value is None:
            return self._refuse(
                product, "Invalid price! The value must be greater than zero."
            )

        product.price = value
        logger.info(
            "Price updated",
            extra={"context": {"code": product.code, "price": str(product.price)}},
        )
        return OperationResult.ok(f"New price set: {product.price:.2f}", value=product.price)

    def _is_shelved(self, product: Product) -> bool:
        return (
            product is not None
            and self.repository.get_by_code(product.code) is product
        )

    def _not_shelved(self, product: Product) -> OperationResult:
        return self._refuse(
            product,
            f"Product {getattr(product, 'code', product)} is not registered in this inventory.",
        )

    @staticmethod
    def _positive_quantity(quantity: Any) -> Optional[int]:
        result = ValidationResult()
        return BaseValidator.validate_integer(quantity, "quantity", result, min_value=1)

    @staticmethod
    def _stock_updated(product: Product) -> OperationResult:
        logger.info(
            "Stock updated",
            extra={"context": {"code": product.code, "stock": product.stock}},
        )
        return OperationResult.ok(
            f"Stock updated! New total: {product.stock}", value=product.stock
        )

    @staticmethod
    def _refuse(product: Product, message: str) -> OperationResult:
        logger.warning(
            message,
            extra={"context": {"code": getattr(product, "code", None)}},
        )
        return OperationResult.failure(message)

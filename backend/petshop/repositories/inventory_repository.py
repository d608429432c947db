from typing import Dict, List, Optional

from petshop.domain.entities import Product
from petshop.domain.interfaces import IProductRepository


class InventoryRepository(IProductRepository):
    """In-memory product shelf keyed by product code."""

    def __init__(self):
        self._products: Dict[int, Product] = {}

    def add(self, product: Product) -> Product:
        if product.code in self._products:
            raise ValueError(f"Product code {product.code} already stored")
        self._products[product.code] = product
        return product

    def get_by_code(self, code: int) -> Optional[Product]:
        return self._products.get(code)

    def get_all(self) -> List[Product]:
        return list(self._products.values())

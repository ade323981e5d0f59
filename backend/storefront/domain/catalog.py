"""
Fish Parque Product Catalog
Single source of truth for the products customers can order

The catalog is fixed for the lifetime of the process. A Catalog instance is
built at startup (see AppContext) and handed to whoever needs it.

Author: Fish Parque
Date: 2026-10-19
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from storefront.core.exceptions import ValidationError

Number = Union[int, float]


def format_amount(value: Number) -> str:
    """Render a number without a trailing .0 when it is integral (12.0 -> "12")"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Product:
    """Catalog entry; key is the stable id referenced by cart items"""
    key: str
    name: str
    min_qty: float
    price: int
    unit: str

    def to_dict(self) -> dict:
        """Convert to the JSON shape served by /api/products"""
        return {
            "name": self.name,
            "minQty": self.min_qty,
            "price": self.price,
            "unit": self.unit,
        }


# ================================================================================
# DEFAULT PRODUCT CATALOG
# ================================================================================
# Prices are integer naira per unit
# ================================================================================

DEFAULT_PRODUCTS: List[Product] = [
    Product(key="fish_feed", name="Fish Feed", min_qty=10, price=500, unit="kg"),
    Product(key="catfish", name="Catfish", min_qty=1, price=1500, unit="kg"),
    Product(key="materials", name="Materials", min_qty=50, price=300, unit="kg"),
]

DEFAULT_UNIT = "kg"


class Catalog:
    """Read-only product lookup"""

    def __init__(self, products: Iterable[Product] = None):
        products = DEFAULT_PRODUCTS if products is None else products
        self._products: Dict[str, Product] = {product.key: product for product in products}

    def get(self, key: str) -> Optional[Product]:
        return self._products.get(key)

    def keys(self) -> List[str]:
        return list(self._products.keys())

    def unit_for(self, key: Optional[str]) -> str:
        """Unit label for a product key, falling back to kg for unknown keys"""
        product = self._products.get(key) if key else None
        return product.unit if product else DEFAULT_UNIT

    def to_dict(self) -> Dict[str, dict]:
        return {key: product.to_dict() for key, product in self._products.items()}

    def check_minimum_quantity(self, key: str, quantity: Number) -> Product:
        """
        Validate a quantity against the product's minimum order.

        This is the rule the browser client applies before a line goes into
        the cart. Order placement itself does not re-run it.

        Raises:
            ValidationError: unknown product or quantity below minimum
        """
        product = self._products.get(key)
        if product is None:
            raise ValidationError(f"Unknown product: {key}")

        if quantity < product.min_qty:
            raise ValidationError(
                f"Minimum order for {product.name} is {format_amount(product.min_qty)}{product.unit}"
            )

        return product

    def __contains__(self, key: str) -> bool:
        return key in self._products

    def __len__(self) -> int:
        return len(self._products)

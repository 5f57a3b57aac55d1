"""
Product catalog: product lookup plus recommendation-to-product resolution.
"""

import logging
import re
from typing import Iterable, Optional

from pura.config import Settings, get_settings
from pura.errors import NotFoundError
from pura.products import ROUTINE_PRODUCTS, STORE_PRODUCTS
from pura.schemas import Product, Recommendation

logger = logging.getLogger(__name__)

ALL_PRODUCTS = "All Products"


def slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip().lower())


class ProductCatalog:
    """In-memory catalog over the store and routine product records."""

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        routine_products: Optional[dict[str, Product]] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.products = list(STORE_PRODUCTS if products is None else products)
        self.routine_products = dict(ROUTINE_PRODUCTS if routine_products is None else routine_products)
        self._by_id: dict[str, Product] = {p.id: p for p in self.products}
        for p in self.routine_products.values():
            self._by_id.setdefault(p.id, p)

    # ── Shop ────────────────────────────────────────────────────────────────

    def get_product(self, product_id: str) -> Product:
        product = self._by_id.get(product_id)
        if product is None:
            raise NotFoundError(f"Product not found: {product_id}")
        return product

    def products_by_category(self, category: Optional[str]) -> list[Product]:
        if not category or category == ALL_PRODUCTS:
            return list(self.products)
        return [p for p in self.products if p.category == category]

    def categories(self) -> list[str]:
        """The catch-all entry, then each category in first-seen order."""
        seen = dict.fromkeys(p.category for p in self.products if p.category)
        return [ALL_PRODUCTS, *seen]

    def search(self, query: str) -> list[Product]:
        q = (query or "").strip().lower()
        if not q:
            return list(self.products)
        return [
            p for p in self.products
            if q in p.name.lower() or q in p.description.lower() or q in p.category.lower()
        ]

    def featured(self) -> list[Product]:
        return [p for p in self.products if p.is_bestseller or p.is_new]

    # ── Quiz results ────────────────────────────────────────────────────────

    def resolve(self, rec: Recommendation) -> Optional[Product]:
        return self.routine_products.get(rec.product)

    def product_for(self, rec: Recommendation) -> Product:
        """Resolved product, or a placeholder priced at the default price."""
        product = self.resolve(rec)
        if product is not None:
            return product
        logger.info(f"No product record for recommendation {rec.product!r}, using placeholder")
        return Product(
            id=slugify(rec.product),
            name=rec.product,
            price=self.settings.placeholder_price,
            image=self.settings.placeholder_image,
        )

    def routine_products_for(self, recs: Iterable[Recommendation]) -> list[Product]:
        """Resolvable products for a routine, deduplicated by id, in order."""
        products: dict[str, Product] = {}
        for rec in recs:
            product = self.resolve(rec)
            if product is not None and product.id not in products:
                products[product.id] = product
        return list(products.values())

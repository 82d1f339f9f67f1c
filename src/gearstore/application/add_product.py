"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from gearstore.application.dto import ProductDTO
from gearstore.application.mapping import product_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.model.product import Product
from gearstore.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        inventory: str | int,
        category: str,
        quality: str,
        image_urls: list[str] | None = None,
        **optional: str | None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            description=description,
            price=price,
            inventory=inventory,
            category=category,
            quality=quality,
            image_urls=image_urls,
            **optional,
        )
        product = self._product_repo.add(product)
        logger.info("Product %s '%s' added at %s", product.id, product.name, product.price)
        return product_to_dto(product, [], self._clock())

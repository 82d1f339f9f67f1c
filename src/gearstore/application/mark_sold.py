"""Application service: Mark Sold use case.

Used when an item sells outside the hold flow. Inventory is forced to
zero; no Sale record is written.
"""

from __future__ import annotations

import logging

from gearstore.application.dto import ProductDTO
from gearstore.application.mapping import product_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import EntityNotFoundError, ValidationError
from gearstore.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class MarkSoldHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: str) -> ProductDTO:
        if not product_id:
            raise ValidationError("Product ID is required")
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product = self._product_repo.set_inventory(product_id, 0)
        logger.info("Product %s marked as sold", product_id)
        return product_to_dto(product, [], self._clock())

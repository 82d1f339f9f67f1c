"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from gearstore.domain.exceptions import ValidationError
from gearstore.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not product_id:
            raise ValidationError("Product ID is required")
        self._product_repo.delete(product_id)
        logger.info("Product %s deleted", product_id)

"""Application service: Update Product use case (partial admin edit)."""

from __future__ import annotations

import logging
from typing import Any

from gearstore.application.dto import ProductDTO
from gearstore.application.mapping import product_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import EntityNotFoundError, ValidationError
from gearstore.domain.model.product import OPTIONAL_TEXT_FIELDS, parse_inventory
from gearstore.domain.model.value_objects import Money
from gearstore.domain.repository.hold_repository import HoldRepository
from gearstore.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("name", "description", "category", "quality")
EDITABLE_FIELDS = REQUIRED_TEXT_FIELDS + OPTIONAL_TEXT_FIELDS + ("price", "inventory", "image_urls")


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        hold_repo: HoldRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._hold_repo = hold_repo
        self._clock = clock

    def handle(self, product_id: str, changes: dict[str, Any]) -> ProductDTO:
        """Apply only the given fields.

        Blank optional text clears the field; required text cannot be
        blanked.
        """
        if not product_id:
            raise ValidationError("Product ID is required")
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown product fields: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        for key, value in changes.items():
            if key in REQUIRED_TEXT_FIELDS:
                text = (value or "").strip()
                if not text:
                    raise ValidationError(f"Product {key} cannot be empty")
                setattr(product, key, text)
            elif key in OPTIONAL_TEXT_FIELDS:
                text = (value or "").strip()
                setattr(product, key, text or None)
            elif key == "price":
                product.price = Money.of(value)
            elif key == "inventory":
                product.inventory = parse_inventory(value)
            elif key == "image_urls":
                product.set_images(list(value or []))

        product = self._product_repo.save(product)
        logger.info("Product %s updated (%s)", product.id, ", ".join(sorted(changes)))
        return product_to_dto(product, self._hold_repo.list_all(), self._clock())

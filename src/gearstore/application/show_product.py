"""Application service: Show Product use case (query)."""

from __future__ import annotations

from gearstore.application.dto import ProductDTO
from gearstore.application.mapping import product_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import EntityNotFoundError
from gearstore.domain.repository.hold_repository import HoldRepository
from gearstore.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        hold_repo: HoldRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._hold_repo = hold_repo
        self._clock = clock

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product_to_dto(product, self._hold_repo.list_all(), self._clock())

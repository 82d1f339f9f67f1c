"""Application service: List Products use case (query).

Serves both the storefront grid and the admin product table, so both
show the same effective status.
"""

from __future__ import annotations

from gearstore.application.dto import ProductDTO
from gearstore.application.mapping import product_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import ValidationError
from gearstore.domain.repository.hold_repository import HoldRepository
from gearstore.domain.repository.product_repository import ProductRepository
from gearstore.domain.service.availability import ProductAvailability


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        hold_repo: HoldRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._hold_repo = hold_repo
        self._clock = clock

    def handle(self, status: str | None = None) -> list[ProductDTO]:
        """Return every product, optionally only those with ``status``
        (Active, On Hold or Sold)."""
        wanted = None
        if status:
            try:
                wanted = ProductAvailability(status)
            except ValueError as exc:
                valid = ", ".join(s.value for s in ProductAvailability)
                raise ValidationError(
                    f"Invalid status {status!r} (expected one of: {valid})"
                ) from exc

        now = self._clock()
        holds = self._hold_repo.list_all()
        dtos = [product_to_dto(p, holds, now) for p in self._product_repo.list_all()]
        if wanted is not None:
            dtos = [d for d in dtos if d.status == wanted.value]
        return dtos

"""Application service: Field Values use case (autocomplete suggestions)."""

from __future__ import annotations

from gearstore.domain.exceptions import ValidationError
from gearstore.domain.repository.product_repository import ProductRepository

AUTOCOMPLETE_FIELDS = ("category", "quality", "brand", "size", "weight", "color")


class FieldValuesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, field: str) -> list[str]:
        """Distinct, trimmed, sorted values of ``field`` across the catalog."""
        if not field:
            raise ValidationError("Field parameter is required")
        if field not in AUTOCOMPLETE_FIELDS:
            raise ValidationError("Invalid field name")

        values: set[str] = set()
        for product in self._product_repo.list_all():
            value = getattr(product, field)
            if value and value.strip():
                values.add(value.strip())
        return sorted(values)

"""Product aggregate.

Every product is a single physical item: "sold" is binary and is
expressed by forcing inventory to zero, never by decrementing it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gearstore.domain.exceptions import ValidationError
from gearstore.domain.model.value_objects import Money

SOLD_STATUS = "Sold"
MAX_IMAGES = 4

# Optional free-text attributes; blank values are dropped on create and
# cleared on update.
OPTIONAL_TEXT_FIELDS = ("brand", "size", "weight", "color")


@dataclass
class Product:
    """A product listed in the store.

    ``status`` is an explicit override written by an admin (e.g. "Sold").
    Effective availability is derived by the availability resolver and is
    never stored here.
    """

    id: str
    name: str
    description: str
    price: Money
    inventory: int
    category: str
    quality: str
    brand: str | None = None
    size: str | None = None
    weight: str | None = None
    color: str | None = None
    image_urls: list[str] = field(default_factory=list)
    status: str | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        price: str | int | float,
        inventory: str | int,
        category: str,
        quality: str,
        image_urls: list[str] | None = None,
        **optional: str | None,
    ) -> Product:
        """Create a new product, enforcing all invariants.

        The record store assigns the id, so it is empty until saved.
        """
        required = {
            "name": name,
            "description": description,
            "price": price,
            "inventory": inventory,
            "category": category,
            "quality": quality,
        }
        missing = [k for k, v in required.items() if v is None or not str(v).strip()]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        unknown = set(optional) - set(OPTIONAL_TEXT_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown product fields: {', '.join(sorted(unknown))}")

        product = Product(
            id="",
            name=name.strip(),
            description=description.strip(),
            price=Money.of(price),
            inventory=parse_inventory(inventory),
            category=category.strip(),
            quality=quality.strip(),
        )
        for key in OPTIONAL_TEXT_FIELDS:
            value = optional.get(key)
            setattr(product, key, value.strip() if value and value.strip() else None)
        product.set_images(image_urls or [])
        return product

    # --- Mutations ------------------------------------------------------------

    def set_images(self, urls: list[str]) -> None:
        cleaned = [u.strip() for u in urls if u and u.strip()]
        if len(cleaned) > MAX_IMAGES:
            raise ValidationError(f"A product can have at most {MAX_IMAGES} images")
        self.image_urls = cleaned

    # --- Computed properties --------------------------------------------------

    @property
    def is_sold(self) -> bool:
        return self.status == SOLD_STATUS or self.inventory <= 0


def parse_inventory(value: str | int) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid inventory: {value!r}")
    try:
        count = int(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid inventory: {value!r}") from exc
    if count < 0:
        raise ValidationError("Inventory cannot be negative")
    return count

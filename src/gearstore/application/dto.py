"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductQuestionSpec:
    """Input: the storefront "ask about this item" form."""

    product_id: str | None
    name: str | None
    email: str | None
    phone: str | None
    question: str | None
    notes: str | None = None


@dataclass(frozen=True)
class PurchaseRequestSpec:
    """Input: the storefront purchase form, exactly as submitted."""

    product_ids: list[str]
    name: str | None
    email: str | None
    phone: str | None
    pickup_day: str | None
    other_pickup: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product with its effective status."""

    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "$150.00"
    price_amount: str
    inventory: int
    category: str
    quality: str
    brand: str | None
    size: str | None
    weight: str | None
    color: str | None
    images: list[str]
    status: str  # Active / On Hold / Sold
    held_by: str | None = None  # id of the blocking hold


@dataclass(frozen=True)
class HoldDTO:
    """Output: a hold as shown to the admin."""

    id: str
    product_ids: list[str]
    customer_name: str
    customer_email: str
    customer_phone: str
    hold_status: str
    created_at: str | None
    expires_at: str | None
    expires_display: str
    pickup_day: str
    pickup_custom: str
    pickup_display: str
    notes: str
    urgency: str  # none / expired / critical / warning / good
    hours_remaining: float | None
    is_blocking: bool


@dataclass(frozen=True)
class HoldListDTO:
    holds: list[HoldDTO]
    total_active: int
    expiring_soon: int
    expired: int


@dataclass(frozen=True)
class SaleDTO:
    id: str
    hold_id: str
    product_ids: list[str]
    customer_name: str
    customer_email: str
    customer_phone: str
    sale_date: str
    final_price: str
    payment_method: str
    transaction_id: str
    admin_notes: str


@dataclass(frozen=True)
class ConversionDTO:
    sale: SaleDTO
    hold: HoldDTO
    updated_products: list[ProductDTO] = field(default_factory=list)

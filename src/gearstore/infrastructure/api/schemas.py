"""Request bodies accepted by the HTTP API.

Field names follow the storefront/admin forms (camelCase ids, snake_case
record fields); snake_case ids are accepted too. Content rules live in
the application handlers, so these models only check shape.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PurchaseRequest(_Body):
    product_id: str | None = Field(default=None, alias="productId")
    product_ids: list[str] = Field(default_factory=list, alias="productIds")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    pickup_day: str | None = Field(default=None, alias="pickupDay")
    other_pickup: str | None = Field(default=None, alias="otherPickup")
    notes: str | None = None

    def all_product_ids(self) -> list[str]:
        ids = list(self.product_ids)
        if self.product_id:
            ids.insert(0, self.product_id)
        return ids


class ProductQuestionRequest(_Body):
    product_id: str | None = Field(default=None, alias="productId")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    question: str | None = None
    notes: str | None = None


class ProductFields(_Body):
    name: str | None = None
    description: str | None = None
    price: str | float | None = None
    inventory: str | int | None = None
    category: str | None = None
    quality: str | None = None
    brand: str | None = None
    size: str | None = None
    weight: str | None = None
    color: str | None = None
    image_urls: list[str] | None = Field(default=None, alias="imageUrls")


class UpdateProductRequest(ProductFields):
    id: str


class ProductIdRequest(_Body):
    id: str


class UpdateHoldRequest(_Body):
    hold_id: str = Field(alias="holdId")
    action: Literal["extend", "cancel"] | None = None
    hours: float | None = None
    pickup_day: str | None = None
    pickup_custom: str | None = None
    notes: str | None = None


class CompleteHoldSaleRequest(_Body):
    hold_id: str = Field(alias="holdId")
    payment_method: str | None = None
    transaction_id: str | None = None
    final_price: str | float | None = None
    admin_notes: str | None = None


class LoginRequest(_Body):
    email: str | None = None
    password: str | None = None

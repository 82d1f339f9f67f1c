"""Domain -> DTO mapping shared by the handlers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from gearstore.application.dto import HoldDTO, ProductDTO, SaleDTO
from gearstore.domain.model.hold import Hold
from gearstore.domain.model.product import Product
from gearstore.domain.model.sale import Sale
from gearstore.domain.service.availability import blocking_hold, resolve_status
from gearstore.domain.service.pickup_schedule import format_date, format_pickup_day, to_iso


def product_to_dto(product: Product, holds: Iterable[Hold], now: datetime) -> ProductDTO:
    holds = list(holds)
    status = resolve_status(product, holds, now)
    blocker = None if product.is_sold else blocking_hold(product.id, holds, now)
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        price_amount=f"{product.price.amount:.2f}",
        inventory=product.inventory,
        category=product.category,
        quality=product.quality,
        brand=product.brand,
        size=product.size,
        weight=product.weight,
        color=product.color,
        images=list(product.image_urls),
        status=status.value,
        held_by=blocker.id if blocker else None,
    )


def hold_to_dto(hold: Hold, now: datetime, tz: tzinfo) -> HoldDTO:
    hours = hold.hours_remaining(now)
    return HoldDTO(
        id=hold.id,
        product_ids=list(hold.product_ids),
        customer_name=hold.customer_name,
        customer_email=hold.customer_email,
        customer_phone=hold.customer_phone,
        hold_status=hold.hold_status,
        created_at=to_iso(hold.created_at) if hold.created_at else None,
        expires_at=to_iso(hold.expires_at) if hold.expires_at else None,
        expires_display=format_date(hold.expires_at, tz),
        pickup_day=hold.pickup_day,
        pickup_custom=hold.pickup_custom,
        pickup_display=format_pickup_day(hold.pickup_day, hold.pickup_custom, tz),
        notes=hold.notes,
        urgency=hold.urgency(now),
        hours_remaining=round(hours, 2) if hours is not None else None,
        is_blocking=hold.is_blocking(now),
    )


def sale_to_dto(sale: Sale) -> SaleDTO:
    return SaleDTO(
        id=sale.id,
        hold_id=sale.hold_id,
        product_ids=list(sale.product_ids),
        customer_name=sale.customer_name,
        customer_email=sale.customer_email,
        customer_phone=sale.customer_phone,
        sale_date=to_iso(sale.sale_date),
        final_price=str(sale.final_price),
        payment_method=sale.payment_method,
        transaction_id=sale.transaction_id,
        admin_notes=sale.admin_notes,
    )

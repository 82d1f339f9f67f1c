"""Admin routes: catalog maintenance and hold management.

Every route here requires a valid admin session.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, status

from gearstore.application.add_product import AddProductHandler
from gearstore.application.cancel_hold import CancelHoldHandler
from gearstore.application.complete_hold_sale import CompleteHoldSaleHandler
from gearstore.application.delete_product import DeleteProductHandler
from gearstore.application.expire_holds import ExpireHoldsHandler
from gearstore.application.extend_hold import ExtendHoldHandler
from gearstore.application.list_holds import ListHoldsHandler
from gearstore.application.mark_sold import MarkSoldHandler
from gearstore.application.update_hold import UpdateHoldHandler
from gearstore.application.update_product import UpdateProductHandler
from gearstore.infrastructure.api.dependencies import get_container, require_admin
from gearstore.infrastructure.api.schemas import (
    CompleteHoldSaleRequest,
    ProductFields,
    ProductIdRequest,
    UpdateHoldRequest,
    UpdateProductRequest,
)
from gearstore.infrastructure.bootstrap import Container

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# --- Products -----------------------------------------------------------------


@router.post("/products", status_code=status.HTTP_201_CREATED)
def create_product(body: ProductFields, container: Container = Depends(get_container)):
    handler = AddProductHandler(container.products, container.clock)
    fields = body.model_dump(exclude={"image_urls"})
    product = handler.handle(image_urls=body.image_urls, **fields)
    return {"success": True, "product": asdict(product)}


@router.post("/update-product")
def update_product(body: UpdateProductRequest, container: Container = Depends(get_container)):
    handler = UpdateProductHandler(container.products, container.holds, container.clock)
    changes = body.model_dump(exclude_unset=True, exclude={"id"})
    product = handler.handle(body.id, changes)
    return {"success": True, "product": asdict(product)}


@router.post("/delete-product")
def delete_product(body: ProductIdRequest, container: Container = Depends(get_container)):
    DeleteProductHandler(container.products).handle(body.id)
    return {"success": True, "id": body.id}


@router.post("/mark-sold")
def mark_sold(body: ProductIdRequest, container: Container = Depends(get_container)):
    product = MarkSoldHandler(container.products, container.clock).handle(body.id)
    return {"success": True, "product": asdict(product)}


# --- Holds --------------------------------------------------------------------


@router.get("/refresh-holds")
def refresh_holds(active_only: bool = False, container: Container = Depends(get_container)):
    """Full hold list for the admin view, soonest-expiring first."""
    handler = ListHoldsHandler(container.holds, container.clock, container.settings.display_tz)
    result = handler.handle(active_only=active_only)
    return {
        "success": True,
        "holds": [asdict(h) for h in result.holds],
        "summary": {
            "totalActive": result.total_active,
            "expiringSoon": result.expiring_soon,
            "expired": result.expired,
        },
    }


@router.post("/update-hold")
def update_hold(body: UpdateHoldRequest, container: Container = Depends(get_container)):
    """Extend or cancel a hold and/or edit its pickup details.

    With ``action`` omitted at least one detail field must be given.
    """
    lifecycle = container.lifecycle()
    tz = container.settings.display_tz
    hold = None

    if body.action == "extend":
        hold = ExtendHoldHandler(lifecycle, container.clock, tz).handle(body.hold_id, body.hours)
    elif body.action == "cancel":
        hold = CancelHoldHandler(lifecycle, container.clock, tz).handle(body.hold_id)

    has_details = any(v is not None for v in (body.pickup_day, body.pickup_custom, body.notes))
    if has_details or hold is None:
        hold = UpdateHoldHandler(lifecycle, container.clock, tz).handle(
            body.hold_id, body.pickup_day, body.pickup_custom, body.notes
        )
    return {"success": True, "hold": asdict(hold)}


@router.post("/complete-hold-sale")
def complete_hold_sale(body: CompleteHoldSaleRequest, container: Container = Depends(get_container)):
    handler = CompleteHoldSaleHandler(container.lifecycle(), container.clock, container.settings.display_tz)
    result = handler.handle(
        body.hold_id,
        payment_method=body.payment_method,
        transaction_id=body.transaction_id,
        final_price=body.final_price,
        admin_notes=body.admin_notes,
    )
    return {
        "success": True,
        "sale": asdict(result.sale),
        "hold": asdict(result.hold),
        "updatedProducts": [asdict(p) for p in result.updated_products],
    }


@router.post("/expire-holds")
def expire_holds(container: Container = Depends(get_container)):
    handler = ExpireHoldsHandler(container.lifecycle(), container.clock, container.settings.display_tz)
    expired = handler.handle()
    return {"success": True, "expired": [asdict(h) for h in expired]}

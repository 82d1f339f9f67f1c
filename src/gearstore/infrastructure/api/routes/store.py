"""Public storefront routes: catalog reads, purchase (hold) requests and
product questions."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from gearstore.application.create_hold import CreateHoldHandler
from gearstore.application.dto import ProductQuestionSpec, PurchaseRequestSpec
from gearstore.application.field_values import FieldValuesHandler
from gearstore.application.list_products import ListProductsHandler
from gearstore.application.product_question import ProductQuestionHandler
from gearstore.application.show_product import ShowProductHandler
from gearstore.infrastructure.api.dependencies import get_container
from gearstore.infrastructure.api.schemas import ProductQuestionRequest, PurchaseRequest
from gearstore.infrastructure.bootstrap import Container

router = APIRouter(prefix="/api", tags=["store"])


@router.get("/products")
def list_products(status: str | None = None, container: Container = Depends(get_container)):
    handler = ListProductsHandler(container.products, container.holds, container.clock)
    products = handler.handle(status=status)
    return {"success": True, "products": [asdict(p) for p in products]}


# Declared before /products/{product_id} so "field-values" is not taken as an id.
@router.get("/products/field-values")
def field_values(field: str = "", container: Container = Depends(get_container)):
    values = FieldValuesHandler(container.products).handle(field)
    return {"success": True, "values": values}


@router.get("/products/{product_id}")
def get_product(product_id: str, container: Container = Depends(get_container)):
    handler = ShowProductHandler(container.products, container.holds, container.clock)
    return {"success": True, "product": asdict(handler.handle(product_id))}


@router.post("/purchase")
def purchase(body: PurchaseRequest, container: Container = Depends(get_container)):
    """Place a hold on the requested gear and email the admin and customer."""
    handler = CreateHoldHandler(
        lifecycle=container.lifecycle(),
        dispatcher=container.dispatcher(),
        clock=container.clock,
        display_tz=container.settings.display_tz,
    )
    hold = handler.handle(
        PurchaseRequestSpec(
            product_ids=body.all_product_ids(),
            name=body.name,
            email=body.email,
            phone=body.phone,
            pickup_day=body.pickup_day,
            other_pickup=body.other_pickup,
            notes=body.notes,
        )
    )
    return {"success": True, "hold": asdict(hold)}


@router.post("/question")
def ask_question(body: ProductQuestionRequest, container: Container = Depends(get_container)):
    handler = ProductQuestionHandler(container.products, container.dispatcher())
    handler.handle(
        ProductQuestionSpec(
            product_id=body.product_id,
            name=body.name,
            email=body.email,
            phone=body.phone,
            question=body.question,
            notes=body.notes,
        )
    )
    return {"success": True, "message": "Question sent successfully"}

"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from gearstore.application.email_sender import EmailSender
from gearstore.application.notification_dispatcher import HoldNotificationDispatcher
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import ConfigurationError
from gearstore.domain.repository.record_store import Collection, RecordStore
from gearstore.domain.service.hold_lifecycle_service import HoldLifecycleService
from gearstore.infrastructure.config import Settings, get_settings
from gearstore.infrastructure.email.resend_email_sender import ResendEmailSender
from gearstore.infrastructure.persistence.record_hold_repository import RecordHoldRepository
from gearstore.infrastructure.persistence.record_product_repository import (
    RecordProductRepository,
)
from gearstore.infrastructure.persistence.record_sale_repository import RecordSaleRepository
from gearstore.infrastructure.record_store.airtable_record_store import AirtableRecordStore
from gearstore.infrastructure.record_store.json_record_store import JsonFileRecordStore


def record_store(settings: Settings, clock: Clock = utc_now) -> RecordStore:
    backend = settings.store_backend.lower()
    if backend == "json":
        return JsonFileRecordStore(settings.data_dir, clock=clock)
    if backend == "airtable":
        return AirtableRecordStore(
            token=settings.airtable_pat,
            base_id=settings.airtable_base_id,
            tables={
                Collection.PRODUCTS: settings.airtable_products_table,
                Collection.HOLDS: settings.airtable_holds_table,
                Collection.SALES: settings.airtable_sales_table,
            },
            api_url=settings.airtable_api_url,
            timeout=settings.http_timeout,
        )
    raise ConfigurationError(
        f"Unknown STORE_BACKEND {settings.store_backend!r} (expected airtable or json)"
    )


def email_sender(settings: Settings) -> EmailSender:
    return ResendEmailSender(
        api_key=settings.resend_api_key,
        from_email=settings.resend_from_email,
        api_url=settings.resend_api_url,
        timeout=settings.http_timeout,
    )


@dataclass
class Container:
    """Everything a request or command needs, built once per process."""

    settings: Settings
    store: RecordStore
    clock: Clock = utc_now
    sender: EmailSender | None = None

    @property
    def products(self) -> RecordProductRepository:
        return RecordProductRepository(self.store)

    @property
    def holds(self) -> RecordHoldRepository:
        return RecordHoldRepository(self.store)

    @property
    def sales(self) -> RecordSaleRepository:
        return RecordSaleRepository(self.store)

    def lifecycle(self) -> HoldLifecycleService:
        return HoldLifecycleService(
            product_repo=self.products,
            hold_repo=self.holds,
            sale_repo=self.sales,
            clock=self.clock,
            hold_duration=timedelta(hours=self.settings.hold_duration_hours),
            extension=timedelta(hours=self.settings.hold_extension_hours),
            display_tz=self.settings.display_tz,
        )

    def dispatcher(self) -> HoldNotificationDispatcher:
        self.settings.require("admin_email")
        if self.sender is None:
            self.sender = email_sender(self.settings)
        return HoldNotificationDispatcher(
            sender=self.sender,
            admin_email=self.settings.admin_email,
            hold_hours=self.settings.hold_duration_hours,
            display_tz=self.settings.display_tz,
        )


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()
    return Container(settings=settings, store=record_store(settings))

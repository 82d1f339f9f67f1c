"""Tests for the ProductQuestion use case (storefront contact form)."""

import pytest

from gearstore.application.dto import ProductQuestionSpec
from gearstore.application.notification_dispatcher import HoldNotificationDispatcher
from gearstore.application.product_question import ProductQuestionHandler
from gearstore.domain.exceptions import EntityNotFoundError, NotificationError, ValidationError
from tests.fakes import ADMIN_EMAIL, RecordingEmailSender, make_container, seed_product


def _setup(failing: set[str] | None = None):
    sender = RecordingEmailSender(failing_recipients=failing)
    container = make_container(sender=sender)
    handler = ProductQuestionHandler(container.products, HoldNotificationDispatcher(sender, ADMIN_EMAIL))
    return handler, container.store, sender


def _spec(product_id, /, **overrides):
    values = dict(
        product_id=product_id,
        name="Alex Fighter",
        email="Alex@Example.com",
        phone="(555) 123-4567",
        question="Do these gloves still have their original padding?",
    )
    values.update(overrides)
    return ProductQuestionSpec(**values)


class TestProductQuestion:

    def test_emails_admin_and_customer(self):
        handler, store, sender = _setup()
        p1 = seed_product(store, "Hayabusa Gloves", 120)

        report = handler.handle(_spec(p1, notes="Size 16oz please"))

        assert report.ok
        assert sender.recipients() == [ADMIN_EMAIL, "alex@example.com"]
        admin, customer = sender.sent
        assert admin.subject == "Product Question: Hayabusa Gloves"
        assert "original padding" in admin.html
        assert "Size 16oz please" in admin.html
        assert customer.subject == "Question Received: Hayabusa Gloves"

    def test_nothing_is_written(self):
        handler, store, _ = _setup()
        p1 = seed_product(store)

        handler.handle(_spec(p1))

        assert store.writes == []

    def test_question_too_short(self):
        handler, store, sender = _setup()
        p1 = seed_product(store)

        with pytest.raises(ValidationError, match="at least 10 characters"):
            handler.handle(_spec(p1, question="  Size?   "))
        assert sender.sent == []

    @pytest.mark.parametrize("field", ["product_id", "question"])
    def test_required_fields(self, field):
        handler, store, _ = _setup()
        p1 = seed_product(store)

        with pytest.raises(ValidationError, match="required fields"):
            handler.handle(_spec(p1, **{field: ""}))

    def test_short_phone_rejected(self):
        handler, store, _ = _setup()
        p1 = seed_product(store)

        with pytest.raises(ValidationError, match="phone"):
            handler.handle(_spec(p1, phone="555-1234"))

    def test_unknown_product(self):
        handler, _, sender = _setup()

        with pytest.raises(EntityNotFoundError):
            handler.handle(_spec("recMissing"))
        assert sender.sent == []

    def test_failed_leg_reported(self):
        handler, store, sender = _setup(failing={"alex@example.com"})
        p1 = seed_product(store)

        with pytest.raises(NotificationError) as excinfo:
            handler.handle(_spec(p1))

        assert excinfo.value.hold is None
        assert excinfo.value.report.admin.sent is True
        assert excinfo.value.report.customer.sent is False
        assert sender.recipients() == [ADMIN_EMAIL]

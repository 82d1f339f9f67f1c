"""Application service: Product Question use case (storefront contact form).

Nothing is stored. The product's name and price come from the catalog,
not from the form, and both emails go out through the same dispatcher
as hold requests.
"""

from __future__ import annotations

import logging

from gearstore.application.dto import ProductQuestionSpec
from gearstore.application.notification_dispatcher import (
    DispatchReport,
    HoldNotificationDispatcher,
)
from gearstore.domain.exceptions import EntityNotFoundError, NotificationError, ValidationError
from gearstore.domain.model.value_objects import Customer
from gearstore.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

MIN_QUESTION_LENGTH = 10
MAX_TEXT_LENGTH = 2000


class ProductQuestionHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        dispatcher: HoldNotificationDispatcher,
    ) -> None:
        self._product_repo = product_repo
        self._dispatcher = dispatcher

    def handle(self, spec: ProductQuestionSpec) -> DispatchReport:
        product_id = (spec.product_id or "").strip()
        question = (spec.question or "").strip()
        if not product_id or not question:
            raise ValidationError("Please fill in all required fields")
        customer = Customer.create(spec.name, spec.email, spec.phone)
        if len(question) < MIN_QUESTION_LENGTH:
            raise ValidationError(
                f"Question must be at least {MIN_QUESTION_LENGTH} characters long"
            )
        notes = (spec.notes or "").strip()
        if len(question) > MAX_TEXT_LENGTH or len(notes) > MAX_TEXT_LENGTH:
            raise ValidationError(f"Question and notes must be at most {MAX_TEXT_LENGTH} characters")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        report = self._dispatcher.notify_product_question(product, customer, question, notes)
        if not report.ok:
            raise NotificationError(
                f"Question about {product.id} could not be sent: {report.describe_failures()}",
                report=report,
            )
        logger.info("Question about product %s sent for %s", product.id, customer.email)
        return report

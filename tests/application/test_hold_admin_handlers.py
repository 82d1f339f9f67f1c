"""Integration tests for the admin hold use cases."""

from datetime import timedelta

import pytest

from gearstore.application.cancel_hold import CancelHoldHandler
from gearstore.application.complete_hold_sale import CompleteHoldSaleHandler
from gearstore.application.expire_holds import ExpireHoldsHandler
from gearstore.application.extend_hold import ExtendHoldHandler
from gearstore.application.list_holds import ListHoldsHandler
from gearstore.application.update_hold import UpdateHoldHandler
from gearstore.domain.exceptions import HoldNotFoundError, ValidationError
from gearstore.domain.repository.record_store import Collection
from tests.fakes import NOW, make_container, seed_hold, seed_product


def _setup():
    container = make_container()
    return container, container.store


class TestExtendHoldHandler:

    def test_default_extension(self):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store)], expires_at=NOW + timedelta(hours=1))
        handler = ExtendHoldHandler(container.lifecycle(), container.clock)

        dto = handler.handle(hold_id)

        assert dto.expires_at == "2024-03-16T15:30:00.000Z"
        assert dto.urgency == "good"

    def test_hours_must_be_positive(self):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store)])
        handler = ExtendHoldHandler(container.lifecycle(), container.clock)

        with pytest.raises(ValidationError, match="positive"):
            handler.handle(hold_id, hours=-2)

    @pytest.mark.parametrize("hours", [float("inf"), float("nan"), 1e12, 1e9])
    def test_unusable_hours_rejected(self, hours):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store)])
        handler = ExtendHoldHandler(container.lifecycle(), container.clock)

        with pytest.raises(ValidationError):
            handler.handle(hold_id, hours=hours)
        assert store.writes == []

    def test_requires_id(self):
        container, _ = _setup()
        with pytest.raises(ValidationError, match="Hold ID is required"):
            ExtendHoldHandler(container.lifecycle()).handle("")


class TestCancelHoldHandler:

    def test_idempotent(self):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store)])
        handler = CancelHoldHandler(container.lifecycle(), container.clock)

        assert handler.handle(hold_id).hold_status == "Cancelled"
        assert handler.handle(hold_id).hold_status == "Cancelled"
        assert len(store.writes) == 1

    def test_unknown_hold(self):
        container, _ = _setup()
        with pytest.raises(HoldNotFoundError):
            CancelHoldHandler(container.lifecycle()).handle("recNope")


class TestCompleteHoldSaleHandler:

    def test_final_price_and_products(self):
        container, store = _setup()
        p1, p2 = seed_product(store, "Gloves", 75), seed_product(store, "Shorts", 90)
        hold_id = seed_hold(store, [p1, p2])
        handler = CompleteHoldSaleHandler(container.lifecycle(), container.clock)

        result = handler.handle(hold_id, payment_method="venmo", final_price="150")

        assert result.sale.final_price == "$150.00"
        assert result.sale.hold_id == hold_id
        assert result.hold.hold_status == "Completed"
        assert {p.status for p in result.updated_products} == {"Sold"}
        assert store.fields(Collection.SALES, result.sale.id)["final_price"] == 150

    @pytest.mark.parametrize("price", ["abc", "-5"])
    def test_bad_price_rejected_before_write(self, price):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store)])
        handler = CompleteHoldSaleHandler(container.lifecycle(), container.clock)

        with pytest.raises(ValidationError, match="non-negative number"):
            handler.handle(hold_id, final_price=price)
        assert store.writes == []

    def test_blank_price_means_listed_total(self):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store, price=60)])

        result = CompleteHoldSaleHandler(container.lifecycle()).handle(hold_id, final_price="")

        assert result.sale.final_price == "$60.00"


class TestUpdateHoldHandler:

    def test_nothing_to_update(self):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store)])
        with pytest.raises(ValidationError, match="Nothing to update"):
            UpdateHoldHandler(container.lifecycle()).handle(hold_id)

    def test_pickup_display_follows_new_values(self):
        container, store = _setup()
        hold_id = seed_hold(store, [seed_product(store)])

        dto = UpdateHoldHandler(container.lifecycle(), container.clock).handle(
            hold_id, pickup_day="2024-03-16T18:00:00.000Z", pickup_custom=""
        )

        assert dto.pickup_display == "Mar 16, 2024, 6:00 PM"


class TestListAndExpire:

    def _seed(self, store):
        p = seed_product(store)
        ids = {
            "later": seed_hold(store, [p], expires_at=NOW + timedelta(hours=30)),
            "soon": seed_hold(store, [p], expires_at=NOW + timedelta(hours=1)),
            "warning": seed_hold(store, [p], expires_at=NOW + timedelta(hours=4)),
            "overdue": seed_hold(store, [p], expires_at=NOW - timedelta(hours=2)),
            "done": seed_hold(store, [p], status="Completed"),
        }
        return ids

    def test_sorted_by_expiry_with_counts(self):
        container, store = _setup()
        ids = self._seed(store)
        handler = ListHoldsHandler(container.holds, container.clock)

        result = handler.handle()

        assert [h.id for h in result.holds][:4] == [ids["overdue"], ids["soon"], ids["warning"], ids["later"]]
        assert result.total_active == 4
        assert result.expiring_soon == 2
        assert result.expired == 1

    def test_active_only(self):
        container, store = _setup()
        ids = self._seed(store)

        result = ListHoldsHandler(container.holds, container.clock).handle(active_only=True)

        assert ids["done"] not in {h.id for h in result.holds}
        assert len(result.holds) == 4

    def test_expire_sweep(self):
        container, store = _setup()
        ids = self._seed(store)

        expired = ExpireHoldsHandler(container.lifecycle(), container.clock).handle()

        assert [h.id for h in expired] == [ids["overdue"]]
        assert expired[0].hold_status == "Expired"
        assert expired[0].urgency == "expired"

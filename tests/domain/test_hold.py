"""Unit tests for the Hold aggregate and its state machine."""

from datetime import datetime, timedelta, timezone

import pytest

from gearstore.domain.exceptions import NoExpirationSetError, ValidationError
from gearstore.domain.model.hold import Hold, HoldStatus
from gearstore.domain.model.value_objects import Customer

NOW = datetime(2024, 3, 15, 14, 30, tzinfo=timezone.utc)


def _hold(status: str = "Active", expires_in: float | None = 48) -> Hold:
    return Hold(
        id="recH1",
        product_ids=["recP1"],
        customer_name="Alex",
        customer_email="alex@example.com",
        customer_phone="5551234567",
        hold_status=status,
        created_at=NOW,
        expires_at=NOW + timedelta(hours=expires_in) if expires_in is not None else None,
    )


class TestHoldCreation:

    def test_new_hold_is_active(self):
        customer = Customer.create("Alex", "alex@example.com", "5551234567")
        hold = Hold.create(
            ["recP1", "recP2", "recP1"], customer, NOW, NOW + timedelta(hours=48), "Today", notes=" hi "
        )
        assert hold.hold_status == HoldStatus.ACTIVE.value
        assert hold.product_ids == ["recP1", "recP2"]
        assert hold.notes == "hi"
        assert hold.id == ""

    def test_past_expiry_is_kept_as_given(self):
        customer = Customer.create("Alex", "alex@example.com", "5551234567")
        hold = Hold.create(["recP1"], customer, NOW, NOW - timedelta(minutes=1), "Other")
        assert hold.expires_at == NOW - timedelta(minutes=1)
        assert not hold.is_blocking(NOW)

    def test_requires_products(self):
        customer = Customer.create("Alex", "alex@example.com", "5551234567")
        with pytest.raises(ValidationError, match="at least one product"):
            Hold.create([], customer, NOW, None, "Today")


class TestBlocking:

    def test_active_unexpired_blocks(self):
        assert _hold().is_blocking(NOW)

    def test_expiry_boundary_does_not_block(self):
        hold = _hold(expires_in=1)
        assert not hold.is_blocking(NOW + timedelta(hours=1))

    def test_no_expiration_blocks_forever(self):
        assert _hold(expires_in=None).is_blocking(NOW + timedelta(days=365))

    def test_status_match_is_case_sensitive(self):
        assert not _hold(status="active").is_blocking(NOW)

    @pytest.mark.parametrize("status", ["Cancelled", "Completed", "Expired"])
    def test_other_statuses_never_block(self, status):
        assert not _hold(status=status).is_blocking(NOW)


class TestUrgency:

    @pytest.mark.parametrize(
        "expires_in, expected",
        [(None, "none"), (-1, "expired"), (0, "expired"), (1.5, "critical"), (5, "warning"), (6, "good")],
    )
    def test_bands(self, expires_in, expected):
        assert _hold(expires_in=expires_in).urgency(NOW) == expected


class TestExtend:

    def test_adds_to_stored_expiration(self):
        hold = _hold(expires_in=10)
        hold.extend(timedelta(hours=24))
        hold.extend(timedelta(hours=24))
        assert hold.expires_at == NOW + timedelta(hours=58)

    def test_extends_from_stored_time_even_when_already_past(self):
        hold = _hold(expires_in=-30)
        hold.extend(timedelta(hours=24))
        assert hold.expires_at == NOW - timedelta(hours=6)

    def test_expired_status_returns_to_active(self):
        hold = _hold(status="Expired", expires_in=-1)
        hold.extend(timedelta(hours=24))
        assert hold.hold_status == "Active"

    def test_no_expiration_rejected(self):
        with pytest.raises(NoExpirationSetError):
            _hold(expires_in=None).extend(timedelta(hours=24))

    @pytest.mark.parametrize("status", ["Cancelled", "Completed"])
    def test_terminal_hold_rejected(self, status):
        with pytest.raises(ValidationError, match="Cannot extend"):
            _hold(status=status).extend(timedelta(hours=24))

    def test_non_positive_duration_rejected(self):
        with pytest.raises(ValidationError, match="positive"):
            _hold().extend(timedelta(0))

    def test_out_of_range_expiration_rejected(self):
        hold = _hold()
        with pytest.raises(ValidationError, match="out of range"):
            hold.extend(timedelta.max)
        assert hold.expires_at == NOW + timedelta(hours=48)


class TestCancelCompleteExpire:

    def test_cancel_active(self):
        hold = _hold()
        assert hold.cancel() is True
        assert hold.hold_status == "Cancelled"

    def test_cancel_terminal_is_noop(self):
        hold = _hold(status="Completed")
        assert hold.cancel() is False
        assert hold.hold_status == "Completed"

    def test_complete_cancelled_rejected(self):
        with pytest.raises(ValidationError, match="cancelled"):
            _hold(status="Cancelled").complete()

    def test_complete_expired_allowed(self):
        hold = _hold(status="Expired", expires_in=-5)
        hold.complete()
        assert hold.hold_status == "Completed"

    def test_mark_expired_only_moves_overdue_active(self):
        overdue = _hold(expires_in=-1)
        live = _hold(expires_in=1)
        cancelled = _hold(status="Cancelled", expires_in=-1)
        assert overdue.mark_expired(NOW) is True
        assert overdue.hold_status == "Expired"
        assert live.mark_expired(NOW) is False
        assert cancelled.mark_expired(NOW) is False

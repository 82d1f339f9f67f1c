"""Unit tests for pickup slot resolution and date formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from gearstore.domain.model.value_objects import PickupRequest
from gearstore.domain.service.pickup_schedule import (
    format_date,
    format_pickup_day,
    parse_datetime,
    resolve_pickup,
    to_iso,
)

NOW = datetime(2024, 3, 15, 14, 30, tzinfo=timezone.utc)
EASTERN = timezone(timedelta(hours=-4))
HOLD = timedelta(hours=48)


class TestParseDatetime:

    def test_iso_with_z(self):
        assert parse_datetime("2024-03-15T14:30:00.000Z") == NOW

    def test_naive_text_read_in_given_zone(self):
        parsed = parse_datetime("2024-03-20 3:00 PM", EASTERN)
        assert parsed == datetime(2024, 3, 20, 19, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("text", ["", None, "not a date", "Saturday 2pm", "Today"])
    def test_unparseable_is_none(self, text):
        assert parse_datetime(text) is None


class TestFormatting:

    def test_to_iso_uses_utc_millis(self):
        assert to_iso(datetime(2024, 3, 15, 10, 30, tzinfo=EASTERN)) == "2024-03-15T14:30:00.000Z"

    def test_format_date(self):
        assert format_date("2024-03-15T14:30:00.000Z") == "Mar 15, 2024, 2:30 PM"

    def test_format_date_in_display_zone(self):
        assert format_date("2024-03-15T14:05:00Z", EASTERN) == "Mar 15, 2024, 10:05 AM"

    def test_midnight_is_twelve_am(self):
        assert format_date("2024-01-01T00:00:00Z") == "Jan 1, 2024, 12:00 AM"

    @pytest.mark.parametrize("value", [None, "", "invalid-date"])
    def test_format_date_placeholder(self, value):
        assert format_date(value) == "-"

    def test_pickup_day_date_rendered(self):
        assert format_pickup_day("2024-03-15T14:30:00Z", "") == "Mar 15, 2024, 2:30 PM"

    def test_pickup_custom_used_when_day_is_not_a_date(self):
        assert format_pickup_day("not-a-date", "Saturday 2pm") == "Saturday 2pm"

    def test_pickup_day_token_used_verbatim(self):
        assert format_pickup_day("Next Monday", "") == "Next Monday"

    @pytest.mark.parametrize("day, custom", [("", ""), (None, ""), ("", None)])
    def test_pickup_placeholder(self, day, custom):
        assert format_pickup_day(day, custom) == "-"


class TestResolvePickup:

    def test_today_is_noon_with_default_expiry(self):
        slot = resolve_pickup(PickupRequest.create("Today"), NOW, HOLD)
        assert slot.pickup_day == "2024-03-15T12:00:00.000Z"
        assert slot.pickup_custom == ""
        assert slot.expires_at == NOW + HOLD

    def test_tomorrow_noon_in_display_zone(self):
        slot = resolve_pickup(PickupRequest.create("Tomorrow"), NOW, HOLD, EASTERN)
        assert slot.pickup_day == "2024-03-16T16:00:00.000Z"
        assert slot.expires_at == NOW + HOLD

    def test_other_parseable_sets_expiry(self):
        slot = resolve_pickup(PickupRequest.create("Other", "2024-03-20 15:00"), NOW, HOLD)
        assert slot.pickup_day == "2024-03-20T15:00:00.000Z"
        assert slot.pickup_custom == ""
        assert slot.expires_at == datetime(2024, 3, 20, 15, 0, tzinfo=timezone.utc)

    def test_other_free_text_falls_back(self):
        slot = resolve_pickup(PickupRequest.create("Other", "not a date"), NOW, HOLD)
        assert slot.pickup_day == "Other"
        assert slot.pickup_custom == "not a date"
        assert slot.expires_at == NOW + HOLD

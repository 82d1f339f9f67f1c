"""Application service: Update Hold use case (admin edits pickup details)."""

from __future__ import annotations

from datetime import timezone, tzinfo

from gearstore.application.dto import HoldDTO
from gearstore.application.mapping import hold_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import ValidationError
from gearstore.domain.service.hold_lifecycle_service import HoldLifecycleService


class UpdateHoldHandler:

    def __init__(
        self,
        lifecycle: HoldLifecycleService,
        clock: Clock = utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._lifecycle = lifecycle
        self._clock = clock
        self._display_tz = display_tz

    def handle(
        self,
        hold_id: str,
        pickup_day: str | None = None,
        pickup_custom: str | None = None,
        notes: str | None = None,
    ) -> HoldDTO:
        if not hold_id:
            raise ValidationError("Hold ID is required")
        if pickup_day is None and pickup_custom is None and notes is None:
            raise ValidationError("Nothing to update")
        hold = self._lifecycle.update_hold_details(hold_id, pickup_day, pickup_custom, notes)
        return hold_to_dto(hold, self._clock(), self._display_tz)

"""Application service: Cancel Hold use case.

Cancelling an already cancelled or completed hold succeeds without a
write, so the admin can safely click twice.
"""

from __future__ import annotations

from datetime import timezone, tzinfo

from gearstore.application.dto import HoldDTO
from gearstore.application.mapping import hold_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import ValidationError
from gearstore.domain.service.hold_lifecycle_service import HoldLifecycleService


class CancelHoldHandler:

    def __init__(
        self,
        lifecycle: HoldLifecycleService,
        clock: Clock = utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._lifecycle = lifecycle
        self._clock = clock
        self._display_tz = display_tz

    def handle(self, hold_id: str) -> HoldDTO:
        if not hold_id:
            raise ValidationError("Hold ID is required")
        hold = self._lifecycle.cancel_hold(hold_id)
        return hold_to_dto(hold, self._clock(), self._display_tz)

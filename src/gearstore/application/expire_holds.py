"""Application service: Expire Holds use case (sweep)."""

from __future__ import annotations

from datetime import timezone, tzinfo

from gearstore.application.dto import HoldDTO
from gearstore.application.mapping import hold_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.service.hold_lifecycle_service import HoldLifecycleService


class ExpireHoldsHandler:

    def __init__(
        self,
        lifecycle: HoldLifecycleService,
        clock: Clock = utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._lifecycle = lifecycle
        self._clock = clock
        self._display_tz = display_tz

    def handle(self) -> list[HoldDTO]:
        expired = self._lifecycle.expire_overdue_holds()
        now = self._clock()
        return [hold_to_dto(h, now, self._display_tz) for h in expired]

"""Application service: Extend Hold use case."""

from __future__ import annotations

import math
from datetime import timedelta, timezone, tzinfo

from gearstore.application.dto import HoldDTO
from gearstore.application.mapping import hold_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import ValidationError
from gearstore.domain.service.hold_lifecycle_service import HoldLifecycleService


class ExtendHoldHandler:

    def __init__(
        self,
        lifecycle: HoldLifecycleService,
        clock: Clock = utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._lifecycle = lifecycle
        self._clock = clock
        self._display_tz = display_tz

    def handle(self, hold_id: str, hours: float | None = None) -> HoldDTO:
        """Add ``hours`` (default: the configured extension) to the stored
        expiration."""
        if not hold_id:
            raise ValidationError("Hold ID is required")
        additional = None
        if hours is not None:
            if not math.isfinite(hours) or hours <= 0:
                raise ValidationError("Extension hours must be a positive number")
            try:
                additional = timedelta(hours=hours)
            except OverflowError as exc:
                raise ValidationError(f"Extension of {hours:g} hours is too large") from exc
        hold = self._lifecycle.extend_hold(hold_id, additional)
        return hold_to_dto(hold, self._clock(), self._display_tz)

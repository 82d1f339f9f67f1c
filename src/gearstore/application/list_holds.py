"""Application service: List Holds use case (admin hold management view).

The admin page polls this every couple of minutes and re-renders the
whole list; nothing is cached between calls.
"""

from __future__ import annotations

from datetime import timezone, tzinfo

from gearstore.application.dto import HoldListDTO
from gearstore.application.mapping import hold_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.model.hold import HoldStatus
from gearstore.domain.repository.hold_repository import HoldRepository


class ListHoldsHandler:

    def __init__(
        self,
        hold_repo: HoldRepository,
        clock: Clock = utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._hold_repo = hold_repo
        self._clock = clock
        self._display_tz = display_tz

    def handle(self, active_only: bool = False) -> HoldListDTO:
        """Return holds soonest-expiring first.

        ``active_only`` keeps holds whose status is exactly "Active",
        expired or not, so the admin can still extend or cancel them.
        """
        now = self._clock()
        holds = self._hold_repo.list_all()
        if active_only:
            holds = [h for h in holds if h.hold_status == HoldStatus.ACTIVE.value]

        holds.sort(key=lambda h: (h.expires_at is None, h.expires_at or now))
        dtos = [hold_to_dto(h, now, self._display_tz) for h in holds]

        active = [d for d in dtos if d.hold_status == HoldStatus.ACTIVE.value]
        return HoldListDTO(
            holds=dtos,
            total_active=len(active),
            expiring_soon=sum(1 for d in active if d.urgency in ("critical", "warning")),
            expired=sum(1 for d in active if d.urgency == "expired"),
        )

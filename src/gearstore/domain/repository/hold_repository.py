"""Abstract repository for Hold aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gearstore.domain.model.hold import Hold


class HoldRepository(ABC):

    @abstractmethod
    def get_by_id(self, hold_id: str) -> Hold | None:
        """Return a hold by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Hold]:
        """Return every hold regardless of status."""

    @abstractmethod
    def add(self, hold: Hold) -> Hold:
        """Persist a new hold and return it with its assigned ID."""

    @abstractmethod
    def save_lifecycle(self, hold: Hold) -> Hold:
        """Write the hold's status and expiration."""

    @abstractmethod
    def save_details(self, hold: Hold) -> Hold:
        """Write the hold's pickup details and notes."""

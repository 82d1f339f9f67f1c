"""JSON-file-backed implementation of RecordStore.

One file per collection inside ``data_dir``. Used for local development
and offline CLI use; it mirrors Airtable's semantics (generated ``rec``
ids, partial updates, ``createdTime``).
"""

from __future__ import annotations

import json
import secrets
from pathlib import Path
from typing import Any

from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import EntityNotFoundError
from gearstore.domain.repository.record_store import Collection, Record, RecordStore
from gearstore.domain.service.pickup_schedule import to_iso


class JsonFileRecordStore(RecordStore):

    def __init__(self, data_dir: Path, clock: Clock = utc_now) -> None:
        self._data_dir = data_dir
        self._clock = clock
        for collection in Collection:
            self._ensure_file(collection)

    # --- RecordStore interface ------------------------------------------------

    def list(self, collection: Collection) -> list[Record]:
        return [self._to_record(raw) for raw in self._load_raw(collection)]

    def get(self, collection: Collection, record_id: str) -> Record:
        for raw in self._load_raw(collection):
            if raw["id"] == record_id:
                return self._to_record(raw)
        raise EntityNotFoundError(f"Record not found: {record_id}")

    def create(self, collection: Collection, fields: dict[str, Any]) -> Record:
        rows = self._load_raw(collection)
        raw = {
            "id": self._new_id(rows),
            "createdTime": to_iso(self._clock()),
            "fields": _compact(fields),
        }
        rows.append(raw)
        self._persist_raw(collection, rows)
        return self._to_record(raw)

    def update(
        self, collection: Collection, record_id: str, fields: dict[str, Any]
    ) -> Record:
        rows = self._load_raw(collection)
        for raw in rows:
            if raw["id"] == record_id:
                raw["fields"] = _compact({**raw["fields"], **fields})
                self._persist_raw(collection, rows)
                return self._to_record(raw)
        raise EntityNotFoundError(f"Record not found: {record_id}")

    def delete(self, collection: Collection, record_id: str) -> None:
        rows = self._load_raw(collection)
        remaining = [raw for raw in rows if raw["id"] != record_id]
        if len(remaining) == len(rows):
            raise EntityNotFoundError(f"Record not found: {record_id}")
        self._persist_raw(collection, remaining)

    # --- File helpers ---------------------------------------------------------

    def _path(self, collection: Collection) -> Path:
        return self._data_dir / f"{collection.value}.json"

    def _load_raw(self, collection: Collection) -> list[dict]:
        return json.loads(self._path(collection).read_text(encoding="utf-8"))

    def _persist_raw(self, collection: Collection, rows: list[dict]) -> None:
        self._path(collection).write_text(
            json.dumps(rows, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, collection: Collection) -> None:
        path = self._path(collection)
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")

    @staticmethod
    def _new_id(rows: list[dict]) -> str:
        taken = {raw["id"] for raw in rows}
        while True:
            candidate = "rec" + secrets.token_hex(7)
            if candidate not in taken:
                return candidate

    @staticmethod
    def _to_record(raw: dict) -> Record:
        return Record(
            id=raw["id"],
            fields=dict(raw["fields"]),
            created_time=raw.get("createdTime"),
        )


def _compact(fields: dict[str, Any]) -> dict[str, Any]:
    # Airtable drops empty cells; None clears a field.
    return {k: v for k, v in fields.items() if v is not None}

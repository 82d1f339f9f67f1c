"""Airtable REST implementation of RecordStore.

Endpoints (all under ``{api_url}/{base_id}``):

* list:   ``GET /{table}`` (follows the ``offset`` pagination token)
* get:    ``GET /{table}/{id}``
* create: ``POST /{table}`` with ``{"fields": ...}``
* update: ``PATCH /{table}/{id}`` with ``{"fields": ..., "typecast": true}``
* delete: ``DELETE /{table}/{id}``
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from gearstore.domain.exceptions import (
    BackendUnavailableError,
    ConfigurationError,
    EntityNotFoundError,
)
from gearstore.domain.repository.record_store import Collection, Record, RecordStore

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.airtable.com/v0"
DEFAULT_TABLES = {
    Collection.PRODUCTS: "Products",
    Collection.HOLDS: "Holds",
    Collection.SALES: "Sales",
}


class AirtableRecordStore(RecordStore):

    def __init__(
        self,
        token: str | None,
        base_id: str | None,
        tables: dict[Collection, str] | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not token or not base_id:
            raise ConfigurationError("Missing Airtable API configuration")
        self._tables = {**DEFAULT_TABLES, **(tables or {})}
        self._client = client or httpx.Client(timeout=timeout)
        self._base_url = f"{api_url.rstrip('/')}/{base_id}"
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    # --- RecordStore interface ------------------------------------------------

    def list(self, collection: Collection) -> list[Record]:
        records: list[Record] = []
        params: dict[str, str] = {}
        while True:
            data = self._request("GET", self._url(collection), params=params or None)
            records.extend(self._to_record(raw) for raw in data.get("records", []))
            offset = data.get("offset")
            if not offset:
                return records
            params = {"offset": offset}

    def get(self, collection: Collection, record_id: str) -> Record:
        return self._to_record(self._request("GET", self._url(collection, record_id)))

    def create(self, collection: Collection, fields: dict[str, Any]) -> Record:
        data = self._request("POST", self._url(collection), json={"fields": fields})
        logger.debug("Created %s record %s", collection.value, data.get("id"))
        return self._to_record(data)

    def update(
        self, collection: Collection, record_id: str, fields: dict[str, Any]
    ) -> Record:
        data = self._request(
            "PATCH",
            self._url(collection, record_id),
            json={"fields": fields, "typecast": True},
        )
        return self._to_record(data)

    def delete(self, collection: Collection, record_id: str) -> None:
        self._request("DELETE", self._url(collection, record_id))

    # --- HTTP helpers ---------------------------------------------------------

    def _url(self, collection: Collection, record_id: str | None = None) -> str:
        url = f"{self._base_url}/{self._tables[collection]}"
        return f"{url}/{record_id}" if record_id else url

    def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._client.request(method, url, headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("Airtable %s %s failed: %s", method, url, exc)
            raise BackendUnavailableError(
                f"Airtable request failed: {str(exc) or type(exc).__name__}"
            ) from exc

        if response.status_code == 404:
            raise EntityNotFoundError(f"Record not found: {url.rsplit('/', 1)[-1]}")
        if response.is_error:
            logger.error(
                "Airtable %s %s returned %s: %s",
                method, url, response.status_code, response.text,
            )
            raise BackendUnavailableError(
                f"Airtable {method} failed: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )
        return response.json() if response.content else {}

    @staticmethod
    def _to_record(raw: dict[str, Any]) -> Record:
        return Record(
            id=raw["id"],
            fields=dict(raw.get("fields") or {}),
            created_time=raw.get("createdTime"),
        )

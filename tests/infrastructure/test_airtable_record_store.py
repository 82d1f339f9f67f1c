"""Tests for the Airtable adapter using httpx.MockTransport."""

import json

import httpx
import pytest

from gearstore.domain.exceptions import BackendUnavailableError, ConfigurationError, EntityNotFoundError
from gearstore.domain.repository.record_store import Collection
from gearstore.infrastructure.record_store.airtable_record_store import AirtableRecordStore


def _store(handler, **kwargs):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return AirtableRecordStore("pat_test", "appBase", client=client, **kwargs)


class TestConfiguration:

    @pytest.mark.parametrize("token, base", [("", "appBase"), ("pat", None)])
    def test_missing_credentials(self, token, base):
        with pytest.raises(ConfigurationError, match="Missing Airtable API configuration"):
            AirtableRecordStore(token, base)


class TestList:

    def test_follows_offset_pagination(self):
        seen = []

        def handler(request):
            seen.append(request)
            if "offset" not in request.url.params:
                return httpx.Response(200, json={"records": [{"id": "rec1", "fields": {"name": "A"}}], "offset": "itr2"})
            return httpx.Response(200, json={"records": [{"id": "rec2", "fields": {"name": "B"}}]})

        records = _store(handler).list(Collection.PRODUCTS)

        assert [r.id for r in records] == ["rec1", "rec2"]
        assert seen[1].url.params["offset"] == "itr2"
        assert seen[0].url.path == "/v0/appBase/Products"
        assert seen[0].headers["Authorization"] == "Bearer pat_test"

    def test_custom_table_names(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, json={"records": []})

        _store(handler, tables={Collection.HOLDS: "Holds 2024"}).list(Collection.HOLDS)

        assert paths == ["/v0/appBase/Holds 2024"]


class TestWrites:

    def test_create_posts_fields(self):
        bodies = []

        def handler(request):
            bodies.append((request.method, json.loads(request.content)))
            return httpx.Response(200, json={"id": "recNew", "createdTime": "2024-03-15T14:30:00.000Z", "fields": {"name": "A"}})

        record = _store(handler).create(Collection.PRODUCTS, {"name": "A"})

        assert record.id == "recNew"
        assert record.created_time == "2024-03-15T14:30:00.000Z"
        assert bodies == [("POST", {"fields": {"name": "A"}})]

    def test_update_patches_with_typecast(self):
        bodies = []

        def handler(request):
            bodies.append((request.method, request.url.path, json.loads(request.content)))
            return httpx.Response(200, json={"id": "recH1", "fields": {"hold_status": "Cancelled"}})

        _store(handler).update(Collection.HOLDS, "recH1", {"hold_status": "Cancelled"})

        assert bodies == [
            ("PATCH", "/v0/appBase/Holds/recH1", {"fields": {"hold_status": "Cancelled"}, "typecast": True})
        ]

    def test_delete(self):
        methods = []

        def handler(request):
            methods.append(request.method)
            return httpx.Response(200, json={"id": "recP1", "deleted": True})

        _store(handler).delete(Collection.PRODUCTS, "recP1")
        assert methods == ["DELETE"]


class TestErrors:

    def test_404_is_not_found(self):
        store = _store(lambda request: httpx.Response(404, json={"error": "NOT_FOUND"}))
        with pytest.raises(EntityNotFoundError, match="recMissing"):
            store.get(Collection.HOLDS, "recMissing")

    def test_error_status_keeps_upstream_message(self):
        store = _store(lambda request: httpx.Response(422, text="INVALID_VALUE_FOR_COLUMN"))
        with pytest.raises(BackendUnavailableError, match="422 - INVALID_VALUE_FOR_COLUMN") as info:
            store.update(Collection.PRODUCTS, "recP1", {"inventory": "x"})
        assert info.value.status_code == 422

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        with pytest.raises(BackendUnavailableError, match="connection refused"):
            _store(handler).list(Collection.SALES)

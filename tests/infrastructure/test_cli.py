"""Tests for the click CLI, run against an in-memory container."""

from datetime import timedelta

from click.testing import CliRunner

from gearstore.domain.repository.record_store import Collection
from gearstore.infrastructure.cli.main import cli
from tests.fakes import NOW, RecordingEmailSender, make_container, seed_hold, seed_product


def _invoke(container, *args, **kwargs):
    return CliRunner().invoke(cli, list(args), obj=container, **kwargs)


class TestHoldCommands:

    def test_create(self):
        container = make_container()
        pid = seed_product(container.store)

        result = _invoke(
            container, "hold", "create", "--product", pid, "--name", "Alex Fighter",
            "--email", "alex@example.com", "--phone", "555-123-4567", "--pickup", "Today",
        )

        assert result.exit_code == 0, result.output
        assert "status=Active" in result.output
        assert container.store.count(Collection.HOLDS) == 1

    def test_create_reports_notification_failure(self):
        sender = RecordingEmailSender(failing_recipients={"alex@example.com"})
        container = make_container(sender=sender)
        pid = seed_product(container.store)

        result = _invoke(
            container, "hold", "create", "--product", pid, "--name", "Alex Fighter",
            "--email", "alex@example.com", "--phone", "555-123-4567", "--pickup", "Today",
        )

        assert result.exit_code == 1
        assert "created, but notifications failed" in result.output
        assert container.store.count(Collection.HOLDS) == 1

    def test_create_validation_error(self):
        container = make_container()
        pid = seed_product(container.store)

        result = _invoke(
            container, "hold", "create", "--product", pid, "--name", "Alex",
            "--email", "nope", "--phone", "555-123-4567", "--pickup", "Today",
        )

        assert result.exit_code == 1
        assert "Invalid email format" in result.output

    def test_list(self):
        container = make_container()
        hold_id = seed_hold(container.store, [seed_product(container.store)], expires_at=NOW + timedelta(hours=1))

        result = _invoke(container, "hold", "list")

        assert result.exit_code == 0
        assert hold_id in result.output
        assert "Expiring soon: 1" in result.output

    def test_list_empty(self):
        result = _invoke(make_container(), "hold", "list")
        assert "No holds found." in result.output

    def test_extend_and_cancel(self):
        container = make_container()
        hold_id = seed_hold(container.store, [seed_product(container.store)])

        extended = _invoke(container, "hold", "extend", "--id", hold_id, "--hours", "12")
        cancelled = _invoke(container, "hold", "cancel", "--id", hold_id)

        assert "now expires Mar 18, 2024, 2:30 AM" in extended.output
        assert f"Hold {hold_id} is Cancelled." in cancelled.output

    def test_complete(self):
        container = make_container()
        hold_id = seed_hold(container.store, [seed_product(container.store)])

        result = _invoke(container, "hold", "complete", "--id", hold_id, "--price", "70", "--payment-method", "cash")

        assert result.exit_code == 0, result.output
        assert "at $70.00" in result.output
        assert "Sold" in result.output

    def test_unknown_hold(self):
        result = _invoke(make_container(), "hold", "cancel", "--id", "recNope")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_expire(self):
        container = make_container()
        seed_hold(container.store, [seed_product(container.store)], expires_at=NOW - timedelta(hours=1))

        result = _invoke(container, "hold", "expire")

        assert "1 hold(s) expired." in result.output


class TestProductCommands:

    def test_add_and_list(self):
        container = make_container()

        added = _invoke(
            container, "product", "add", "--name", "Venum Gloves", "--description", "16oz",
            "--price", "75", "--category", "Gloves", "--quality", "Used - Good",
        )
        listed = _invoke(container, "product", "list")

        assert added.exit_code == 0, added.output
        assert "added at $75.00" in added.output
        assert "Venum Gloves" in listed.output
        assert "Active" in listed.output

    def test_update_only_given_fields(self):
        container = make_container()
        pid = seed_product(container.store)

        result = _invoke(container, "product", "update", "--id", pid, "--price", "60")

        assert result.exit_code == 0, result.output
        assert container.store.fields(Collection.PRODUCTS, pid)["price"] == 60
        assert container.store.fields(Collection.PRODUCTS, pid)["name"] == "Venum Gloves"

    def test_mark_sold_and_show(self):
        container = make_container()
        pid = seed_product(container.store)

        _invoke(container, "product", "mark-sold", "--id", pid)
        shown = _invoke(container, "product", "show", "--id", pid)

        assert "[Sold]" in shown.output

    def test_delete_requires_confirmation(self):
        container = make_container()
        pid = seed_product(container.store)

        aborted = _invoke(container, "product", "delete", "--id", pid, input="n\n")
        deleted = _invoke(container, "product", "delete", "--id", pid, "--yes")

        assert aborted.exit_code == 1
        assert deleted.exit_code == 0
        assert container.store.count(Collection.PRODUCTS) == 0

    def test_field_values(self):
        container = make_container()
        seed_product(container.store, brand="Venum")
        seed_product(container.store, brand="Hayabusa")

        result = _invoke(container, "product", "field-values", "--field", "brand")

        assert result.output.splitlines() == ["Hayabusa", "Venum"]

"""CLI commands for the Hold aggregate."""

from __future__ import annotations

import click

from gearstore.application.cancel_hold import CancelHoldHandler
from gearstore.application.complete_hold_sale import CompleteHoldSaleHandler
from gearstore.application.create_hold import CreateHoldHandler
from gearstore.application.dto import HoldDTO, PurchaseRequestSpec
from gearstore.application.expire_holds import ExpireHoldsHandler
from gearstore.application.extend_hold import ExtendHoldHandler
from gearstore.application.list_holds import ListHoldsHandler
from gearstore.application.update_hold import UpdateHoldHandler
from gearstore.domain.exceptions import DomainException, NotificationError
from gearstore.infrastructure.bootstrap import Container

pass_container = click.make_pass_decorator(Container)


def _display_hold(dto: HoldDTO) -> None:
    """Shared formatting for displaying a hold."""
    click.echo(f"Hold {dto.id}  (status={dto.hold_status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}> {dto.customer_phone}")
    click.echo(f"Products: {', '.join(dto.product_ids)}")
    click.echo(f"Pickup:   {dto.pickup_display}")
    click.echo(f"Expires:  {dto.expires_display}  [{dto.urgency}]")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")


@click.command("create")
@click.option("--product", "product_ids", required=True, multiple=True, help="Product ID (repeatable).")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--phone", required=True, help="Customer phone.")
@click.option(
    "--pickup",
    "pickup_day",
    required=True,
    type=click.Choice(["Today", "Tomorrow", "Other"]),
    help="Preferred pickup day.",
)
@click.option("--other", "other_pickup", default=None, help="Pickup time when --pickup=Other.")
@click.option("--notes", default=None, help="Free-text notes.")
@pass_container
def hold_create(
    container: Container,
    product_ids: tuple[str, ...],
    name: str,
    email: str,
    phone: str,
    pickup_day: str,
    other_pickup: str | None,
    notes: str | None,
) -> None:
    """Place a hold for a customer and send the notification emails."""
    spec = PurchaseRequestSpec(
        product_ids=list(product_ids),
        name=name,
        email=email,
        phone=phone,
        pickup_day=pickup_day,
        other_pickup=other_pickup,
        notes=notes,
    )

    try:
        handler = CreateHoldHandler(
            lifecycle=container.lifecycle(),
            dispatcher=container.dispatcher(),
            clock=container.clock,
            display_tz=container.settings.display_tz,
        )
        dto = handler.handle(spec)
    except NotificationError as exc:
        if exc.hold is not None:
            click.echo(f"Hold {exc.hold.id} created, but notifications failed.")
        raise click.ClickException(str(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_hold(dto)


@click.command("list")
@click.option("--active", "active_only", is_flag=True, default=False, help="Only holds with status Active.")
@pass_container
def hold_list(container: Container, active_only: bool) -> None:
    """List holds, soonest-expiring first."""
    handler = ListHoldsHandler(
        hold_repo=container.holds,
        clock=container.clock,
        display_tz=container.settings.display_tz,
    )

    try:
        result = handler.handle(active_only=active_only)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.holds:
        click.echo("No holds found.")
        return

    click.echo(
        f"Active: {result.total_active}  Expiring soon: {result.expiring_soon}  "
        f"Expired: {result.expired}"
    )
    click.echo()
    click.echo(f"{'ID':<20} {'Status':<10} {'Customer':<20} {'Expires':<24} {'Left':>8}")
    click.echo("-" * 86)
    for h in result.holds:
        left = "-" if h.hours_remaining is None else f"{h.hours_remaining:.1f}h"
        click.echo(
            f"{h.id:<20} {h.hold_status:<10} {h.customer_name:<20} "
            f"{h.expires_display:<24} {left:>8}"
        )


@click.command("extend")
@click.option("--id", "hold_id", required=True, help="Hold ID to extend.")
@click.option("--hours", type=float, default=None, help="Hours to add (default: HOLD_EXTENSION_HOURS).")
@pass_container
def hold_extend(container: Container, hold_id: str, hours: float | None) -> None:
    """Extend a hold from its current expiration."""
    handler = ExtendHoldHandler(container.lifecycle(), container.clock, container.settings.display_tz)

    try:
        dto = handler.handle(hold_id, hours)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Hold {dto.id} now expires {dto.expires_display}.")


@click.command("cancel")
@click.option("--id", "hold_id", required=True, help="Hold ID to cancel.")
@pass_container
def hold_cancel(container: Container, hold_id: str) -> None:
    """Cancel a hold (no-op if already cancelled or completed)."""
    handler = CancelHoldHandler(container.lifecycle(), container.clock, container.settings.display_tz)

    try:
        dto = handler.handle(hold_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Hold {dto.id} is {dto.hold_status}.")


@click.command("complete")
@click.option("--id", "hold_id", required=True, help="Hold ID to convert into a sale.")
@click.option("--payment-method", default=None, help="e.g. cash, venmo.")
@click.option("--transaction-id", default=None, help="Payment reference.")
@click.option("--price", "final_price", default=None, help="Final price (default: sum of listed prices).")
@click.option("--notes", "admin_notes", default=None, help="Admin notes.")
@pass_container
def hold_complete(
    container: Container,
    hold_id: str,
    payment_method: str | None,
    transaction_id: str | None,
    final_price: str | None,
    admin_notes: str | None,
) -> None:
    """Record the sale for a hold and mark its products sold."""
    handler = CompleteHoldSaleHandler(container.lifecycle(), container.clock, container.settings.display_tz)

    try:
        result = handler.handle(
            hold_id,
            payment_method=payment_method,
            transaction_id=transaction_id,
            final_price=final_price,
            admin_notes=admin_notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale {result.sale.id} recorded for hold {result.hold.id} at {result.sale.final_price}.")
    for p in result.updated_products:
        click.echo(f"  {p.id:<20} {p.name:<30} {p.status}")


@click.command("update")
@click.option("--id", "hold_id", required=True, help="Hold ID to edit.")
@click.option("--pickup-day", default=None, help="Pickup day (ISO date/time or text).")
@click.option("--pickup-custom", default=None, help="Free-text pickup arrangement.")
@click.option("--notes", default=None, help="Replace the notes.")
@pass_container
def hold_update(
    container: Container,
    hold_id: str,
    pickup_day: str | None,
    pickup_custom: str | None,
    notes: str | None,
) -> None:
    """Edit a hold's pickup details or notes."""
    handler = UpdateHoldHandler(container.lifecycle(), container.clock, container.settings.display_tz)

    try:
        dto = handler.handle(hold_id, pickup_day, pickup_custom, notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_hold(dto)


@click.command("expire")
@pass_container
def hold_expire(container: Container) -> None:
    """Mark every overdue Active hold as Expired."""
    handler = ExpireHoldsHandler(container.lifecycle(), container.clock, container.settings.display_tz)

    try:
        expired = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{len(expired)} hold(s) expired.")
    for h in expired:
        click.echo(f"  {h.id}  {h.customer_name}  (expired {h.expires_display})")

import click
import uvicorn

from gearstore.domain.exceptions import DomainException
from gearstore.infrastructure.bootstrap import build_container
from gearstore.infrastructure.cli.hold_commands import (
    hold_cancel,
    hold_complete,
    hold_create,
    hold_expire,
    hold_extend,
    hold_list,
    hold_update,
)
from gearstore.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_field_values,
    product_list,
    product_mark_sold,
    product_show,
    product_update,
)
from gearstore.infrastructure.config import get_settings
from gearstore.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Gear Store — products, holds and sales"""
    if ctx.obj is not None:
        return
    settings = get_settings()
    configure_logging(log_level or settings.log_level)
    try:
        ctx.obj = build_container(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def hold() -> None:
    """Manage holds (reservations)."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    uvicorn.run("gearstore.infrastructure.api.app:app", host=host, port=port, log_config=None)


# Register subcommands
hold.add_command(hold_cancel)
hold.add_command(hold_complete)
hold.add_command(hold_create)
hold.add_command(hold_expire)
hold.add_command(hold_extend)
hold.add_command(hold_list)
hold.add_command(hold_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_field_values)
product.add_command(product_list)
product.add_command(product_mark_sold)
product.add_command(product_show)
product.add_command(product_update)

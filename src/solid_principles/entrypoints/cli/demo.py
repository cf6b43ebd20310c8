"""``solid demo``: run the illustration of one principle, or all of them.

Illustration output is written to **stdout**; warnings, errors and logs go to
**stderr**.

Failure modes
- A "before" design hitting the failure it illustrates (unsupported printer
  operation, unknown customer type, unwired store) → red error line and exit
  status 1.
- Invalid ``SOLID_*`` environment settings → ``ClickException``.
"""

from __future__ import annotations

import click

from solid_principles import config
from solid_principles.bootstrap import bootstrap
from solid_principles.domain.errors import DomainError
from solid_principles.domain.principles import PRINCIPLES, Principle
from solid_principles.service_layer.commands import (
    COMMAND_FOR_PRINCIPLE,
    DEFAULT_PAYMENTS,
    Command,
)

from .helpers import error, success, warn

ALL = "all"
PRINCIPLE_CHOICES = [principle.value for principle in Principle] + [ALL]
DEFAULT_STORES = ("mysql", "mongodb")
STORE_CHOICES = ["mysql", "mongodb", "postgresql"]


def build_command(  # pylint: disable=too-many-arguments
    principle: Principle,
    *,
    compliant: bool,
    amount: float | None = None,
    tiers: tuple[str, ...] = (),
    data: str | None = None,
    stores: tuple[str, ...] = (),
) -> Command:
    """Translate CLI options into the command for `principle`.

    Options that do not concern `principle` are ignored. Without `--data`,
    `--store` or `SOLID_DEFAULT_PAYLOAD` the DIP illustration saves its own
    sample payloads. Tiers are matched case-insensitively by both OCP forms.
    """
    options: dict[str, object] = {}
    if principle is Principle.OCP:
        options["amount"] = amount if amount is not None else config.get_default_amount()
        options["tiers"] = tuple(tier.lower() for tier in tiers) or None
    elif principle is Principle.LSP and amount is not None:
        options["payments"] = tuple((method, amount) for method, _ in DEFAULT_PAYMENTS)
    elif principle is Principle.DIP:
        payload = data if data is not None else config.get_default_payload(fallback=None)
        if payload is not None or stores:
            payload = payload if payload is not None else config.DEFAULT_PAYLOAD
            options["saves"] = tuple(
                (store, payload) for store in stores or DEFAULT_STORES
            )
    return COMMAND_FOR_PRINCIPLE[principle](compliant=compliant, **options)


@click.command()
@click.argument(
    "principle", type=click.Choice(PRINCIPLE_CHOICES, case_sensitive=False)
)
@click.option(
    "--before/--after",
    "before",
    default=False,
    help="Show the design that violates the principle instead of the compliant one.",
)
@click.option(
    "--amount",
    type=float,
    default=None,
    help=(
        "Purchase amount for OCP (default: SOLID_DEFAULT_AMOUNT or 1000) or the "
        "amount charged to every payment method for LSP."
    ),
)
@click.option(
    "--tier",
    "tiers",
    multiple=True,
    help="Customer tier for OCP (repeatable), e.g. --tier gold --tier premium.",
)
@click.option(
    "--data",
    default=None,
    help="Payload saved by the DIP illustration (default: SOLID_DEFAULT_PAYLOAD).",
)
@click.option(
    "--store",
    "stores",
    multiple=True,
    type=click.Choice(STORE_CHOICES, case_sensitive=False),
    help="Backing store for DIP (repeatable).",
)
@click.pass_context
def demo(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    principle: str,
    before: bool,
    amount: float | None,
    tiers: tuple[str, ...],
    data: str | None,
    stores: tuple[str, ...],
) -> None:
    """Run the illustration of PRINCIPLE (srp, ocp, lsp, isp, dip or all)."""
    container = bootstrap()
    selected = list(Principle) if principle.lower() == ALL else [Principle(principle.lower())]
    show_headers = len(selected) > 1

    for current in selected:
        info = PRINCIPLES[current]
        if show_headers:
            form = "before" if before else "after"
            click.secho(f"== {info.code}: {info.title} ({form}) ==", bold=True)
        if before and current is Principle.LSP:
            warn(f"{info.title} has no violating form; showing the compliant design.")
        try:
            cmd = build_command(
                current,
                compliant=not before,
                amount=amount,
                tiers=tiers,
                data=data,
                stores=tuple(store.lower() for store in stores),
            )
            container.demo_bus.handle(cmd)
        except config.InvalidSettingError as e:
            raise click.ClickException(str(e)) from e
        except DomainError as e:
            error(f"{info.code}: {e}")
        if show_headers:
            click.echo()

    runs = container.demo_bus.runs
    if not all(run.ok for run in runs):
        ctx.exit(1)
    if show_headers:
        success(f"Ran {len(runs)} illustrations.")

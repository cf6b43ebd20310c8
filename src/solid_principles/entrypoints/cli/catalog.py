"""Reference commands: ``overview``, ``principles`` and ``explain``."""

import click

from solid_principles.domain.principles import (
    OVERVIEW,
    PRINCIPLES,
    Principle,
    get_principle,
)

from .helpers.render import (
    make_console,
    principles_table,
    render_overview,
    render_principle,
)

PRINCIPLE_CODES = [principle.value for principle in Principle]


@click.command()
@click.pass_context
def overview(ctx: click.Context) -> None:
    """Explain what SOLID is, with its advantages and disadvantages."""
    render_overview(make_console(color=ctx.color is not False), OVERVIEW)


@click.command()
@click.pass_context
def principles(ctx: click.Context) -> None:
    """List the five principles in a summary table."""
    console = make_console(color=ctx.color is not False)
    console.print(principles_table(list(PRINCIPLES.values())))


@click.command()
@click.argument(
    "principle", type=click.Choice(PRINCIPLE_CODES, case_sensitive=False)
)
@click.pass_context
def explain(ctx: click.Context, principle: str) -> None:
    """Describe one PRINCIPLE in detail."""
    render_principle(make_console(color=ctx.color is not False), get_principle(principle))

"""Rich rendering of the principle catalogue."""

from rich.console import Console
from rich.table import Table

from solid_principles.domain.principles import Overview, PrincipleInfo


def make_console(color: bool = True) -> Console:
    """Return a stdout console, honouring ``--color/--no-color``."""
    return Console(
        color_system="auto" if color else None, highlight=False, soft_wrap=True
    )


def principles_table(principles: list[PrincipleInfo]) -> Table:
    """Build a one-row-per-principle summary table."""
    table = Table(title="SOLID principles", show_lines=False)
    table.add_column("Code", style="bold cyan", no_wrap=True)
    table.add_column("Principle", style="bold")
    table.add_column("Statement")
    table.add_column("Illustrated with", style="dim")
    for info in principles:
        table.add_row(info.code, info.title, info.statement, info.domain)
    return table


def render_overview(console: Console, overview: Overview) -> None:
    """Print the general overview, advantages, disadvantages and conclusion."""
    sections = (
        ("Overview of SOLID Principles", overview.summary),
        ("Advantages of SOLID Principles", overview.advantages),
        ("Disadvantages of SOLID Principles", overview.disadvantages),
        ("Conclusion", overview.conclusion),
    )
    for index, (heading, lines) in enumerate(sections):
        if index:
            console.print()
        console.print(f"[bold underline]{heading}[/]")
        numbered = heading.startswith(("Advantages", "Disadvantages"))
        for number, line in enumerate(lines, start=1):
            bullet = f"{number}." if numbered else "-"
            console.print(f"  {bullet} {line}", markup=False)


def render_principle(console: Console, info: PrincipleInfo) -> None:
    """Print one principle in detail."""
    console.print(f"[bold cyan]{info.code}[/] [bold]{info.title}[/]")
    rows = (
        ("Statement", info.statement),
        ("Why use", info.why_use),
        ("Advantages", info.advantages),
        ("Disadvantages", info.disadvantages),
        ("Illustrated with", info.domain),
    )
    for label, text in rows:
        console.print(f"  [bold]{label}:[/] ", end="")
        console.print(text, markup=False)
    url = info.reference_url
    console.print(f"  [bold]See also:[/] [link={url}]{url}[/link]")

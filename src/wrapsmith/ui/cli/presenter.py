"""Rich-aware presenters for CLI diagnostics."""

from __future__ import annotations

from collections.abc import Sequence

import typer

from .state import CLIState


def present_layout_stats(
    state: CLIState,
    widths: Sequence[int],
    width: int,
    cost: float,
) -> None:
    """Render the width and slack of every output line, followed by the cost."""
    console = state.err_console

    if console.is_terminal:
        from rich import box
        from rich.table import Table

        table = Table(
            title="Layout",
            box=box.SQUARE,
            show_edge=True,
            header_style="bold cyan",
            caption=f"{len(widths)} lines, cost {cost:g}",
        )
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Width", justify="right")
        table.add_column("Slack", justify="right")
        for number, line_width in enumerate(widths, start=1):
            slack = width - line_width
            style = "red" if slack < 0 else "magenta"
            table.add_row(str(number), str(line_width), f"[{style}]{slack}[/{style}]")
        console.print(table)
        return

    typer.echo("Layout:", err=True)
    for number, line_width in enumerate(widths, start=1):
        typer.echo(f"  {number:>4}  width {line_width:>4}  slack {width - line_width:>4}", err=True)
    typer.echo(f"Lines: {len(widths)}", err=True)
    typer.echo(f"Cost: {cost:g}", err=True)


__all__ = ["present_layout_stats"]

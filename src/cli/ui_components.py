"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets `resolve` and `doctor` share tables and panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.services.identity_pipeline import PipelineResult

_STATUS_STYLES = {
    "OK": "green",
    "FAIL": "bold red",
    "SKIP": "dim",
}


def print_banner(console: Console) -> None:
    """Print the welcome banner (only for human-oriented output)."""

    title = Text("build-identity", style="bold cyan")
    subtitle = Text("Ref • Tag grammar • Manifest • Consistency", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_identity_table(result: PipelineResult) -> Table:
    """Table with the published entries of a resolved identity."""

    table = Table(title=result.build_kind.label())
    table.add_column("Entry", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in result.identity.as_env().items():
        table.add_row(key, value)
    table.add_row("MANIFEST", result.manifest.raw, style="dim")
    return table


def build_plan_panel(result: PipelineResult) -> Panel:
    """Panel listing the names the downstream steps will use."""

    plan = result.plan
    body = Text()
    body.append("Archive:      ", style="bold")
    body.append(f"{plan.archive_path}\n")
    body.append("Artifact set: ", style="bold")
    body.append(f"{plan.artifact_set_name}\n")
    body.append("Release:      ", style="bold")
    if plan.publish_release and plan.release_name:
        body.append(plan.release_name, style="green")
    else:
        body.append("not published (snapshot)", style="dim")
    return Panel(body, title=Text("Downstream", style="bold yellow"), border_style="yellow")


def build_checks_table() -> Table:
    table = Table(title="build-identity doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def add_check_row(table: Table, check: str, status: str, details: str) -> None:
    table.add_row(check, Text(status, style=_STATUS_STYLES.get(status, "white")), details)

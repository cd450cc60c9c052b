"""Doctor command: run every check and report them all at once."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.manifest_reader import ManifestFileReader
from cli._settings import load_settings
from cli.ui_components import add_check_row, build_checks_table
from core.domain.errors import BuildIdentityError
from core.domain.models import BranchRef, ManifestVersion, ParsedTag, RefKind
from core.services.consistency import release_identity, snapshot_identity
from core.services.ref_parser import classify_ref, parse_tag

app = typer.Typer(no_args_is_help=True, help="Diagnose the build identity checks without aborting.")

_console = Console()


@app.command()
def run(
    ref: Optional[str] = typer.Option(None, "--ref", help="Build ref (default: $GITHUB_REF)."),
    run_number: Optional[int] = typer.Option(
        None, "--run-number", min=0, help="CI run counter (default: $GITHUB_RUN_NUMBER)."
    ),
    manifest: Optional[Path] = typer.Option(None, "--manifest", "-m", help="Manifest path."),
) -> None:
    """Run every check, render a table and exit non-zero if one fails."""

    settings = load_settings()
    ref = ref or settings.ref
    if run_number is None:
        run_number = settings.run_number
    manifest_path = manifest or settings.manifest_path

    table = build_checks_table()
    failed = False

    ref_kind: RefKind | None = None
    if not ref:
        add_check_row(table, "Ref", "FAIL", "no ref given (pass --ref or set GITHUB_REF)")
        failed = True
    else:
        try:
            ref_kind = classify_ref(ref)
            add_check_row(table, "Ref", "OK", f"{ref_kind.build_kind.label()}: {ref}")
        except BuildIdentityError as exc:
            add_check_row(table, "Ref", "FAIL", str(exc))
            failed = True

    parsed: ParsedTag | None = None
    if ref_kind is None:
        add_check_row(table, "Tag grammar", "SKIP", "ref not classified")
    elif isinstance(ref_kind, BranchRef):
        add_check_row(table, "Tag grammar", "SKIP", "branch build")
        if run_number is None:
            add_check_row(table, "Run number", "FAIL", "missing (set --run-number or GITHUB_RUN_NUMBER)")
            failed = True
        else:
            add_check_row(table, "Run number", "OK", str(run_number))
    else:
        try:
            parsed = parse_tag(ref_kind)
            add_check_row(
                table,
                "Tag grammar",
                "OK",
                f"version={parsed.version} build={parsed.build_number}",
            )
        except BuildIdentityError as exc:
            add_check_row(table, "Tag grammar", "FAIL", str(exc))
            failed = True

    version: ManifestVersion | None = None
    try:
        version = ManifestFileReader(manifest_path).read_version()
        add_check_row(table, "Manifest", "OK", f"{manifest_path}: {version.raw}")
    except BuildIdentityError as exc:
        add_check_row(table, "Manifest", "FAIL", str(exc))
        failed = True

    if version is not None and parsed is not None:
        try:
            identity = release_identity(parsed, version)
            add_check_row(table, "Consistency", "OK", f"{identity.app_version} == tag version")
        except BuildIdentityError as exc:
            add_check_row(table, "Consistency", "FAIL", str(exc))
            failed = True
    elif version is not None and isinstance(ref_kind, BranchRef) and run_number is not None:
        identity = snapshot_identity(version, run_number)
        add_check_row(table, "Consistency", "OK", f"snapshot tag {identity.tag}")
    else:
        add_check_row(table, "Consistency", "SKIP", "earlier check did not pass")

    _console.print(table)

    if failed:
        raise typer.Exit(code=1)

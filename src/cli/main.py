"""build-identity CLI (Typer).

Why the CLI is thin:
- All decisions live in `core.services.identity_pipeline`; this module only
  gathers inputs (flags > env/settings), renders output and maps failures to
  exit codes: 0 success, 1 failed check, 2 usage error.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from adapters.github_env import GitHubEnvFileSink
from adapters.json_exporter import export_result_json, result_payload
from adapters.manifest_reader import ManifestFileReader
from cli import doctor
from cli._settings import load_settings
from cli.ui_components import build_identity_table, build_plan_panel, print_banner
from core.domain.errors import BuildIdentityError
from core.logging_setup import setup_logging
from core.services.identity_pipeline import IdentityRequest, resolve_build_identity
from core.services.publisher import EnvironmentPublisher

app = typer.Typer(
    no_args_is_help=True,
    help="Resolve and validate the build identity (APP_VERSION, TAG, BUILD) of a CI build event.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    ENV = "env"
    JSON = "json"
    TABLE = "table"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _fail(exc: BuildIdentityError) -> NoReturn:
    _err_console.print(
        f"ERR [{exc.check}] {exc}",
        style="bold red",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    raise typer.Exit(code=1) from exc


@app.callback()
def main(
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", case_sensitive=False, help="Logging level (default: WARNING)."
    ),
) -> None:
    """Configure logging before any command runs."""

    level = log_level.value if log_level is not None else load_settings().log_level
    setup_logging(level)


@app.command()
def resolve(
    ref: Optional[str] = typer.Option(None, "--ref", help="Build ref (default: $GITHUB_REF)."),
    run_number: Optional[int] = typer.Option(
        None, "--run-number", min=0, help="CI run counter for snapshot builds (default: $GITHUB_RUN_NUMBER)."
    ),
    manifest: Optional[Path] = typer.Option(None, "--manifest", "-m", help="Manifest path (default: Cargo.toml)."),
    github_env: Optional[Path] = typer.Option(
        None, "--github-env", help="Append APP_VERSION/TAG/BUILD to this file (default: $GITHUB_ENV)."
    ),
    artifact_basename: Optional[str] = typer.Option(
        None, "--artifact-basename", help="Base name of the packaged tarball."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.ENV, "--format", "-f", case_sensitive=False, help="Output format."
    ),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Also write the result as JSON."),
) -> None:
    """Validate the build event and publish its identity.

    Exits non-zero, naming the failing check, if the ref is unsupported, the
    tag is malformed, the manifest is unreadable or the versions disagree.
    """

    settings = load_settings()

    ref = ref or settings.ref
    if not ref:
        raise typer.BadParameter("no build ref given; pass --ref or set GITHUB_REF", param_hint="--ref")
    if run_number is None:
        run_number = settings.run_number

    request = IdentityRequest(
        ref=ref,
        run_number=run_number,
        artifact_basename=artifact_basename or settings.artifact_basename,
    )
    reader = ManifestFileReader(manifest or settings.manifest_path)

    env_path = github_env or settings.github_env
    publisher = EnvironmentPublisher(sinks=[GitHubEnvFileSink(env_path)] if env_path else [])

    try:
        result = resolve_build_identity(request=request, reader=reader)
        entries = publisher.publish(result.identity)
    except BuildIdentityError as exc:
        _fail(exc)

    if json_out:
        export_result_json(result=result, output_path=json_out)

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(result_payload(result), ensure_ascii=False, indent=2, sort_keys=True))
    elif output_format is OutputFormat.TABLE:
        print_banner(_console)
        _console.print(build_identity_table(result))
        _console.print(build_plan_panel(result))
    else:
        for key, value in entries.items():
            typer.echo(f"{key}={value}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()

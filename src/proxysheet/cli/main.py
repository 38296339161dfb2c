"""Command line entry point: ``proxysheet``."""

import sys
import webbrowser

import click

from proxysheet.cli.common import ProgressPrinter, exit_with_message, resolve_output_path
from proxysheet.cli.handlers import handle_lookup, handle_sheet
from proxysheet.config import get_settings
from proxysheet.core.logging import setup_logging
from proxysheet.result import error_message
from proxysheet.session import ProxySession

DEFAULT_SHEET_PATH = "proxy-sheet.html"


@click.group()
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log debug output (also honored when PS_LOG_LEVEL=DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Look up cards on Scryfall and print them as proxies."""
    settings = get_settings()
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings)
    ctx.obj = settings


@cli.command()
@click.option("--host", default=None, help="Interface to bind (default: PS_WEB_HOST).")
@click.option("--port", type=int, default=None, help="Port to bind (default: PS_WEB_PORT).")
@click.pass_obj
def serve(settings, host, port) -> None:
    """Run the browser UI."""
    from proxysheet.web import run

    run(host=host, port=port, settings=settings)


@cli.command()
@click.argument("name")
@click.pass_obj
def lookup(settings, name: str) -> None:
    """Resolve NAME (fuzzy match, then broad search) and list the cards."""
    session = ProxySession.from_settings(settings)
    result = handle_lookup(session.lookup, name)
    if not result["ok"]:
        exit_with_message(error_message(result), code=1)

    for record in result["value"]["cards"]:
        click.echo(f"{record.name} [{record.set_code.upper()}] {record.id}")


@cli.command()
@click.argument("names_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--out",
    "out_path",
    default=DEFAULT_SHEET_PATH,
    show_default=True,
    help="Where to write the printable HTML sheet.",
)
@click.option(
    "--open/--no-open",
    "open_browser",
    default=True,
    show_default=True,
    help="Open the sheet in the browser to print it.",
)
@click.pass_obj
def sheet(settings, names_file, out_path: str, open_browser: bool) -> None:
    """Build a proxy sheet from NAMES_FILE (one card name per line, '-' for stdin)."""
    session = ProxySession.from_settings(settings)
    progress = ProgressPrinter()

    result = handle_sheet(
        session,
        names_file.read(),
        resolve_output_path(out_path, DEFAULT_SHEET_PATH),
        on_progress=lambda done, total, name: progress.update(
            f"Looking up {done}/{total}: {name}"
        ),
    )
    progress.close()

    if not result["ok"]:
        exit_with_message(error_message(result), code=1)

    summary = result["value"]
    for message in summary["errors"]:
        click.echo(message, err=True)
    click.echo(f"Wrote {summary['count']} card(s) to {summary['path']}")

    if open_browser:
        webbrowser.open(summary["path"].as_uri())


def main() -> None:
    cli(prog_name="proxysheet")


if __name__ == "__main__":
    sys.exit(main())

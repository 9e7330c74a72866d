"""Typer application and CLI entry point for oasvc.

The root app carries the global output and configuration options; the
``extract`` command and the ``inspect`` group are registered on it at import
time. :func:`main` is the console-script entry point declared in
``pyproject.toml``.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any, Optional

import typer

from oasvc import __version__
from oasvc.commands.extract import extract_command
from oasvc.commands.inspect import inspect_app
from oasvc.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="oasvc",
    help="Extract services and operations from OpenAPI 3.x documents.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("extract")(extract_command)
app.add_typer(inspect_app, name="inspect", help="Inspect extracted services and operations.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"oasvc {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="[debug] %(name)s: %(message)s",
        )


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to an oasvc.json configuration file."
    ),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Write extracted JSON to this file."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~oasvc.output.OutputManager`, enables debug
    logging for ``--verbose``, and stores the ``--config`` path in
    ``ctx.obj`` for the commands to resolve.
    """
    from oasvc.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(
            format=fmt,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
            output_file=output_file,
        )
    )
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``oasvc`` console script.

    Unhandled :class:`~oasvc.exceptions.OasvcError` instances cause a clean
    exit with the error's ``exit_code``; any other exception is reported
    and exits with a generic failure.
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from oasvc.exceptions import OasvcError
        from oasvc.output import get_output

        if isinstance(exc, OasvcError):
            get_output().error(str(exc))
            sys.exit(exc.exit_code)
        else:
            logging.getLogger(__name__).debug("Unhandled exception", exc_info=True)
            get_output().error(f"Unexpected error: {exc}")
            sys.exit(EXIT_GENERIC_FAILURE)

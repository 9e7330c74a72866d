"""Extract command -- dump every service of a document as camelCase JSON."""

from __future__ import annotations

import typer

from oasvc.config import resolve_config
from oasvc.exceptions import OasvcError
from oasvc.extractor import extract_services
from oasvc.models import Service
from oasvc.output import get_output
from oasvc.parser import load_document


def load_services(ctx: typer.Context, source: str) -> list[Service]:
    """Load *source* and extract its services with the active configuration.

    Errors are reported on stderr and turned into an exit with the error's
    exit code.
    """
    output = get_output()
    config_path = (ctx.obj or {}).get("config_path")
    try:
        config = resolve_config(config_path)
        output.debug(f"Loading document: {source}")
        document = load_document(source)
        return extract_services(document, config)
    except OasvcError as exc:
        output.error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def extract_command(
    ctx: typer.Context,
    spec: str = typer.Argument(..., help="OpenAPI document: file path, URL, or - for stdin."),
) -> None:
    """Extract services and operations as JSON.

    Example::

        oasvc extract openapi.yaml -o services.json
    """
    services = load_services(ctx, spec)
    output = get_output()
    output.print_document([service.model_dump(mode="json", by_alias=True) for service in services])
    output.info(
        f"Extracted {len(services)} services, "
        f"{sum(len(s.operations) for s in services)} operations."
    )

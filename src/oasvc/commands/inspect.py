"""Inspect commands -- examine the services extracted from a document.

Provides the ``oasvc inspect`` sub-command group with read-only views:
a table of services, a table of operations, and the details of a single
operation. Every command loads and extracts the document it is given.
"""

from __future__ import annotations

from typing import Optional

import typer

from oasvc.commands.extract import load_services
from oasvc.exceptions import InvalidUsageError
from oasvc.models import Operation, Service
from oasvc.output import OutputFormat, get_output


inspect_app = typer.Typer(no_args_is_help=True)


def _select_services(services: list[Service], service_name: Optional[str]) -> list[Service]:
    if service_name is None:
        return services
    selected = [s for s in services if s.name == service_name]
    if not selected:
        raise InvalidUsageError(f"Unknown service: {service_name}")
    return selected


def _type_label(model_type: str, is_required: bool) -> str:
    return model_type if is_required else f"{model_type}?"


@inspect_app.command("services")
def inspect_services(
    ctx: typer.Context,
    spec: str = typer.Argument(..., help="OpenAPI document: file path, URL, or - for stdin."),
) -> None:
    """List the services (one per tag).

    Example::

        oasvc inspect services openapi.yaml
    """
    services = load_services(ctx, spec)
    rows = [
        [service.name, str(len(service.operations)), service.description or "-"]
        for service in services
    ]
    get_output().print_table(
        ["Service", "Operations", "Description"], rows, title=f"Services ({len(rows)})"
    )


@inspect_app.command("operations")
def inspect_operations(
    ctx: typer.Context,
    spec: str = typer.Argument(..., help="OpenAPI document: file path, URL, or - for stdin."),
    service: Optional[str] = typer.Option(None, "--service", "-s", help="Only this service."),
) -> None:
    """List operations with their results and errors.

    Example::

        oasvc inspect operations openapi.yaml --service pets
    """
    output = get_output()
    services = load_services(ctx, spec)
    try:
        selected = _select_services(services, service)
    except InvalidUsageError as exc:
        output.error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    rows: list[list[str]] = []
    for svc in selected:
        for op in svc.operations:
            rows.append([
                svc.name,
                op.method,
                op.path,
                op.name,
                ", ".join(result.type for result in op.results),
                ", ".join(str(err.code) for err in op.errors) or "-",
            ])

    output.print_table(
        ["Service", "Method", "Path", "Name", "Results", "Errors"],
        rows,
        title=f"Operations ({len(rows)})",
    )


def _find_operation(services: list[Service], name: str) -> tuple[Service, Operation]:
    for svc in services:
        for op in svc.operations:
            if name in (op.name, op.id):
                return svc, op
    raise InvalidUsageError(f"Unknown operation: {name}")


@inspect_app.command("operation")
def inspect_operation(
    ctx: typer.Context,
    spec: str = typer.Argument(..., help="OpenAPI document: file path, URL, or - for stdin."),
    name: str = typer.Argument(..., help="Operation name or operationId."),
    service: Optional[str] = typer.Option(None, "--service", "-s", help="Only this service."),
) -> None:
    """Show one operation in detail.

    With ``--json`` the full operation descriptor is printed.

    Example::

        oasvc inspect operation openapi.yaml getThreadSubscriptionForAuthenticatedUser
    """
    output = get_output()
    services = load_services(ctx, spec)
    try:
        svc, op = _find_operation(_select_services(services, service), name)
    except InvalidUsageError as exc:
        output.error(str(exc))
        output.suggest(f"List operations with: oasvc inspect operations {spec}")
        raise typer.Exit(code=exc.exit_code) from None

    if output.format == OutputFormat.JSON:
        output.print_document(op.model_dump(mode="json", by_alias=True))
        return

    parameters = ", ".join(
        f"{p.name}: {_type_label(p.type, p.is_required)} ({p.location.value})"
        for p in op.parameters
    )
    output.print_details(
        {
            "Name": op.name,
            "Id": op.id,
            "Service": svc.name,
            "Method": op.method,
            "Path": op.path,
            "Summary": op.summary or "-",
            "Deprecated": "yes" if op.deprecated else "no",
            "Parameters": parameters or "-",
            "Results": ", ".join(f"{r.code} {r.type}" for r in op.results),
            "Errors": ", ".join(f"{e.code} {e.description}" for e in op.errors) or "-",
            "Response header": op.response_header or "-",
        },
        title=op.name,
    )

"""oasvc -- extract service and operation descriptors from OpenAPI 3.x documents.

A document is loaded (file, URL or stdin), its ``$ref`` pointers are followed
on demand, and every tagged operation is turned into a template-ready
:class:`~oasvc.models.Operation` grouped under a :class:`~oasvc.models.Service`.

Typical workflow::

    oasvc extract openapi.yaml > services.json
    oasvc inspect operations openapi.yaml --service pets

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: Project configuration loading and precedence.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"

"""Build the :class:`~oasvc.models.Operation` for one path + method pair.

:func:`get_operation` composes the other extractor modules:

1. the id and generated name (:mod:`oasvc.extractor.naming`);
2. parameters inherited from the path item, then the operation's own
   (:mod:`oasvc.extractor.parameters`);
3. the request body, negotiated by :mod:`oasvc.extractor.content`;
4. results, errors and the response header
   (:mod:`oasvc.extractor.responses`);
5. a final stable sort putting required parameters without a default first,
   so generated signatures list mandatory arguments before optional ones.

Nothing here raises for an incomplete operation object: missing pieces
degrade to ``any``/``void`` types and empty lists.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from oasvc.constants import BASIC_MEDIA_TYPES
from oasvc.extractor.content import is_form_media_type, select_content
from oasvc.extractor.naming import operation_name
from oasvc.extractor.parameters import get_operation_parameters
from oasvc.extractor.propagation import apply_model, apply_reference
from oasvc.extractor.responses import (
    get_operation_errors,
    get_operation_response_header,
    get_operation_responses,
    get_operation_results,
)
from oasvc.models import (
    ExtractorConfig,
    Operation,
    OperationParameter,
    OperationParameters,
    ParameterLocation,
)
from oasvc.parser.references import Reference, classify_reference, dereference
from oasvc.parser.schema import resolve_model, resolve_reference_type


def operation_id(path: str, method: str, declared_id: Optional[str] = None) -> str:
    """Return the declared ``operationId``, or ``"<method>:<path>"``."""
    if declared_id:
        return declared_id
    return f"{method}:{path}"


def get_operation_request_body(
    doc: dict[str, Any],
    body: Any,
    media_types: Iterable[str] = BASIC_MEDIA_TYPES,
) -> OperationParameter:
    """Convert an (already dereferenced) ``requestBody`` into a body parameter.

    Form-encoded and ``multipart/form-data`` bodies are relocated to
    ``formData`` and named ``formData``; the media type stays on the
    parameter so a generator still knows how to encode it.
    """
    if not isinstance(body, dict):
        body = {}

    description = body.get("description")
    request_body = OperationParameter(
        location=ParameterLocation.BODY,
        prop="body",
        name="body",
        export="interface",
        description=description if isinstance(description, str) and description else None,
        is_required=body.get("required") is True,
    )

    content = select_content(body.get("content"), media_types)
    if content is None:
        return request_body

    request_body.media_type = content.media_type
    if is_form_media_type(content.media_type):
        request_body.location = ParameterLocation.FORM_DATA
        request_body.name = "formData"
        request_body.prop = "formData"

    tagged = classify_reference(content.schema_)
    if isinstance(tagged, Reference):
        apply_reference(request_body, resolve_reference_type(tagged.pointer))
    else:
        apply_model(request_body, resolve_model(doc, "", tagged.value))

    return request_body


def _required_first(parameter: OperationParameter) -> int:
    return 0 if parameter.is_required and parameter.default is None else 1


def get_operation(
    doc: dict[str, Any],
    path: str,
    method: str,
    op: dict[str, Any],
    path_parameters: OperationParameters,
    config: Optional[ExtractorConfig] = None,
) -> Operation:
    """Extract one operation.

    Args:
        doc: The root document.
        path: The path template the operation lives under.
        method: The lower-case HTTP method.
        op: The operation object.
        path_parameters: The path item's classified parameters. They are
            copied, never shared with other operations.
        config: Extraction settings; defaults apply when omitted.

    Returns:
        The fully populated :class:`~oasvc.models.Operation`.
    """
    config = config or ExtractorConfig()
    declared_id = op.get("operationId")
    if not isinstance(declared_id, str):
        declared_id = None
    summary = op.get("summary")
    description = op.get("description")

    inherited = path_parameters.model_copy(deep=True)
    operation = Operation(
        id=operation_id(path, method, declared_id),
        name=operation_name(
            path,
            method,
            declared_id,
            config.operation_reserved_words,
            config.version_placeholder,
        ),
        summary=summary if isinstance(summary, str) and summary else None,
        description=description if isinstance(description, str) and description else None,
        deprecated=op.get("deprecated") is True,
        method=method.upper(),
        path=path,
        imports=inherited.imports,
        parameters=inherited.parameters,
        parameters_path=inherited.parameters_path,
        parameters_query=inherited.parameters_query,
        parameters_form=inherited.parameters_form,
        parameters_cookie=inherited.parameters_cookie,
        parameters_header=inherited.parameters_header,
        parameters_body=inherited.parameters_body,
    )

    if op.get("parameters"):
        parameters = get_operation_parameters(doc, op["parameters"], config)
        operation.imports.extend(parameters.imports)
        operation.parameters.extend(parameters.parameters)
        operation.parameters_path.extend(parameters.parameters_path)
        operation.parameters_query.extend(parameters.parameters_query)
        operation.parameters_form.extend(parameters.parameters_form)
        operation.parameters_cookie.extend(parameters.parameters_cookie)
        operation.parameters_header.extend(parameters.parameters_header)

    if op.get("requestBody"):
        request_body = get_operation_request_body(
            doc, dereference(doc, op["requestBody"]), config.media_types
        )
        operation.imports.extend(request_body.imports)
        operation.parameters.append(request_body)
        operation.parameters_body = request_body

    operation_responses = get_operation_responses(
        doc, op.get("responses"), config.media_types
    )
    operation_results = get_operation_results(operation_responses)
    operation.errors = get_operation_errors(operation_responses)
    operation.response_header = get_operation_response_header(operation_results)
    for result in operation_results:
        operation.results.append(result)
        operation.imports.extend(result.imports)

    operation.parameters = sorted(operation.parameters, key=_required_first)
    return operation

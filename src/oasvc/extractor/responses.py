"""Classify an operation's ``responses`` map into results and errors.

:func:`get_operation_responses` turns every usable entry of the map into an
:class:`~oasvc.models.OperationResponse`, sorted by status code. The helpers
then partition that list:

* :func:`get_operation_results` -- 2xx responses except ``204``, collapsed
  when they describe the same type; an operation without one gets a single
  ``void`` result at 200.
* :func:`get_operation_errors` -- responses with a code of 300 or more that
  carry a description.
* :func:`get_operation_response_header` -- the header a generated method
  returns when its only documented output is a response header.

Two status-code rules are kept on purpose: ``default`` counts as 200, and a
described ``304`` is reported as an error.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any, Final, Optional

from oasvc.constants import BASIC_MEDIA_TYPES
from oasvc.extractor.content import select_content
from oasvc.extractor.propagation import apply_model, apply_reference
from oasvc.models import Model, OperationError, OperationResponse, ResponseLocation
from oasvc.parser.references import Reference, classify_reference, dereference, is_reference
from oasvc.parser.schema import resolve_model, resolve_reference_type

_CODE_PATTERN: Final = re.compile(r"\s*([-+]?\d+)")
_RESPONSE_REF_PREFIX: Final = "#/components/responses/"


def response_code(value: Any) -> Optional[int]:
    """Parse a ``responses`` key into a status code.

    ``"default"`` maps to 200. A key starting with digits is parsed and its
    absolute value used (``"2XX"`` gives 2, which is neither a result nor an
    error). Anything else, and a code of 0, gives None.
    """
    text = str(value)
    if text == "default":
        return 200
    match = _CODE_PATTERN.match(text)
    if match is None:
        return None
    return abs(int(match.group(1))) or None


def get_operation_response(
    doc: dict[str, Any],
    response: Any,
    code: int,
    media_types: Iterable[str] = BASIC_MEDIA_TYPES,
) -> OperationResponse:
    """Build the descriptor for one (already dereferenced) response object.

    A body schema wins over headers. A ``$ref`` body schema becomes a named
    reference; an inline one is resolved with all its constraints. Without a
    body, the first declared header becomes a ``string`` header result.
    Without either, the response is ``any``.
    """
    if not isinstance(response, dict):
        response = {}

    description = response.get("description")
    operation_response = OperationResponse(
        code=code,
        description=description if isinstance(description, str) and description else None,
    )

    content = select_content(response.get("content"), media_types)
    if content is not None:
        schema: Any = content.schema_
        if is_reference(schema) and schema["$ref"].startswith(_RESPONSE_REF_PREFIX):
            schema = dereference(doc, schema)

        tagged = classify_reference(schema)
        if isinstance(tagged, Reference):
            apply_reference(operation_response, resolve_reference_type(tagged.pointer))
        else:
            apply_model(
                operation_response, resolve_model(doc, "", tagged.value), merge_flags=False
            )
        return operation_response

    # Header types are flattened to string: fetch and XHR transports only
    # expose header values as text.
    headers = response.get("headers")
    if isinstance(headers, dict) and headers:
        operation_response.location = ResponseLocation.HEADER
        operation_response.name = str(next(iter(headers)))
        operation_response.type = "string"
        operation_response.base = "string"

    return operation_response


def get_operation_responses(
    doc: dict[str, Any],
    responses: Any,
    media_types: Iterable[str] = BASIC_MEDIA_TYPES,
) -> list[OperationResponse]:
    """Build descriptors for every usable entry of a ``responses`` map.

    Entries whose key is not a status code are skipped. The result is sorted
    by code (stable), so 2xx responses precede redirects and errors.
    """
    if not isinstance(responses, dict):
        return []

    operation_responses: list[OperationResponse] = []
    for key, response_or_reference in responses.items():
        code = response_code(key)
        if code is None:
            continue
        response = dereference(doc, response_or_reference)
        operation_responses.append(
            get_operation_response(doc, response, code, media_types)
        )

    return sorted(operation_responses, key=lambda r: r.code)


def models_equal(a: Model, b: Model) -> bool:
    """Structural equality on ``type``/``base``/``template``, recursing through ``link``.

    Two models without a link are equal at that level; a link on only one
    side makes them different. Older generators treated a one-sided link as
    equal, which merged e.g. an ``array`` of ``string`` with a ``string``
    alias of the same name.
    """
    if (a.type, a.base, a.template) != (b.type, b.base, b.template):
        return False
    if a.link is None or b.link is None:
        return a.link is None and b.link is None
    return models_equal(a.link, b.link)


def void_result() -> OperationResponse:
    """The placeholder result of an operation without a documented success body."""
    return OperationResponse(code=200, description="", type="void", base="void")


def get_operation_results(
    operation_responses: list[OperationResponse],
) -> list[OperationResponse]:
    """Return the success results, deduplicated, first occurrence wins."""
    results = [
        response
        for response in operation_responses
        if 200 <= response.code < 300 and response.code != 204
    ]
    if not results:
        results.append(void_result())

    unique: list[OperationResponse] = []
    for result in results:
        if not any(models_equal(seen, result) for seen in unique):
            unique.append(result)
    return unique


def get_operation_errors(
    operation_responses: list[OperationResponse],
) -> list[OperationError]:
    """Return ``{code, description}`` for described responses with code >= 300."""
    return [
        OperationError(code=response.code, description=response.description)
        for response in operation_responses
        if response.code >= 300 and response.description
    ]


def get_operation_response_header(
    operation_results: list[OperationResponse],
) -> Optional[str]:
    """Return the name of the first header result, if any."""
    for result in operation_results:
        if result.location == ResponseLocation.HEADER:
            return result.name
    return None

"""Convert declared parameters into location buckets.

OpenAPI 3 declares parameters in two places: on the path item (shared by
every method under the path) and on the operation. Both lists go through
:func:`get_operation_parameters`, which dereferences each entry, converts it
with :func:`get_operation_parameter`, and files it under its ``in`` location.

Parameters named in :attr:`~oasvc.models.ExtractorConfig.ignored_parameters`
(``api-version`` by default) are pinned by the transport and dropped.
Parameters with an unknown location, and ``in: body`` entries, are skipped:
bodies only arrive through ``requestBody`` (see
:mod:`oasvc.extractor.operations`).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final, Optional

from oasvc.constants import PARAMETER_RESERVED_WORDS
from oasvc.extractor.naming import parameter_name
from oasvc.extractor.propagation import apply_model, apply_reference
from oasvc.models import (
    ExtractorConfig,
    OperationParameter,
    OperationParameters,
    ParameterLocation,
)
from oasvc.parser.references import Reference, classify_reference, dereference, is_reference
from oasvc.parser.schema import model_default, resolve_model, resolve_reference_type

_PARAMETER_REF_PREFIX: Final = "#/components/parameters/"

# Location -> OperationParameters attribute. BODY has no bucket.
_BUCKETS: Final = {
    ParameterLocation.PATH: "parameters_path",
    ParameterLocation.QUERY: "parameters_query",
    ParameterLocation.FORM_DATA: "parameters_form",
    ParameterLocation.COOKIE: "parameters_cookie",
    ParameterLocation.HEADER: "parameters_header",
}


def get_operation_parameter(
    doc: dict[str, Any],
    parameter: Any,
    reserved_words: Iterable[str] = PARAMETER_RESERVED_WORDS,
) -> Optional[OperationParameter]:
    """Convert one (already dereferenced) parameter object.

    Args:
        doc: The root document.
        parameter: The parameter object.
        reserved_words: Parameter names that get an underscore prefix.

    Returns:
        The parameter descriptor, or None when ``in`` is not a known
        location.
    """
    if not isinstance(parameter, dict):
        return None
    try:
        location = ParameterLocation(parameter.get("in"))
    except ValueError:
        return None

    prop = str(parameter.get("name", ""))
    description = parameter.get("description")
    operation_parameter = OperationParameter(
        location=location,
        prop=prop,
        name=parameter_name(prop, reserved_words),
        export="interface",
        description=description if isinstance(description, str) and description else None,
        deprecated=parameter.get("deprecated") is True,
        is_required=parameter.get("required") is True,
    )

    schema = parameter.get("schema")
    if is_reference(schema) and schema["$ref"].startswith(_PARAMETER_REF_PREFIX):
        schema = dereference(doc, schema)

    tagged = classify_reference(schema)
    if isinstance(tagged, Reference):
        apply_reference(operation_parameter, resolve_reference_type(tagged.pointer))
        operation_parameter.default = model_default(schema)
    elif isinstance(schema, dict):
        model = resolve_model(doc, "", schema)
        apply_model(operation_parameter, model)
        operation_parameter.default = model.default

    return operation_parameter


def get_operation_parameters(
    doc: dict[str, Any],
    parameters: Any,
    config: Optional[ExtractorConfig] = None,
) -> OperationParameters:
    """Classify a list of parameters (or parameter references) by location.

    Args:
        doc: The root document.
        parameters: A path-item or operation ``parameters`` list.
        config: Extraction settings; defaults apply when omitted.

    Returns:
        The buckets, the flat ``parameters`` list in processing order, and
        the concatenated imports. ``parameters_body`` is always None.
    """
    config = config or ExtractorConfig()
    result = OperationParameters()
    if not isinstance(parameters, list):
        return result

    for parameter_or_reference in parameters:
        parameter = get_operation_parameter(
            doc,
            dereference(doc, parameter_or_reference),
            config.parameter_reserved_words,
        )
        if parameter is None or parameter.prop in config.ignored_parameters:
            continue

        bucket = _BUCKETS.get(parameter.location)
        if bucket is None:
            continue

        getattr(result, bucket).append(parameter)
        result.parameters.append(parameter)
        result.imports.extend(parameter.imports)

    return result

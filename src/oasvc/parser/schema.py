"""Resolve schema fragments into :class:`~oasvc.models.Model` descriptors.

This is the model resolver the extraction engine consumes. It is deliberately
best-effort: it never raises on a malformed schema, falling back to an
``any``-typed generic model instead, so that one odd fragment cannot abort an
extraction.

Two entry points:

* :func:`resolve_reference_type` -- a lightweight named-type handle for a
  ``$ref`` pointer (no lookup, just the name and its import).
* :func:`resolve_model` -- a full descriptor for an inline schema fragment,
  recursing into array items, dictionary values, compositions and object
  properties.

Schema-to-type mapping::

    integer, number     -> number
    boolean             -> boolean
    string              -> string   (format: binary -> binary)
    null                -> null
    array               -> export "array", link = item model
    object + additionalProperties schema -> export "dictionary"
    object + properties -> export "interface"
    oneOf/anyOf/allOf   -> export "one-of"/"any-of"/"all-of"
    anything else       -> any
"""

from __future__ import annotations

import re
from typing import Any, Final, Optional

from oasvc.models import EnumValue, Model
from oasvc.parser.references import Reference, classify_reference, ref_name

_PRIMITIVE_TYPES: Final = {
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "string": "string",
    "null": "null",
    "file": "binary",
}

_COMPOSITIONS: Final = (
    ("oneOf", "one-of"),
    ("anyOf", "any-of"),
    ("allOf", "all-of"),
)

# Schema keyword -> Model attribute, copied verbatim.
_CONSTRAINT_KEYWORDS: Final = {
    "format": "format",
    "maximum": "maximum",
    "exclusiveMaximum": "exclusive_maximum",
    "minimum": "minimum",
    "exclusiveMinimum": "exclusive_minimum",
    "multipleOf": "multiple_of",
    "maxLength": "max_length",
    "minLength": "min_length",
    "maxItems": "max_items",
    "minItems": "min_items",
    "uniqueItems": "unique_items",
    "maxProperties": "max_properties",
    "minProperties": "min_properties",
}

_GENERIC_NAME_PATTERN: Final = re.compile(r"^(.*?)\[(.*)\]$")
_LEADING_INVALID_PATTERN: Final = re.compile(r"^[^a-zA-Z_$]+")
_INVALID_NAME_PATTERN: Final = re.compile(r"[^\w$]+", re.ASCII)
_ENUM_WORD_PATTERN: Final = re.compile(r"\W+", re.ASCII)
_ENUM_LEADING_DIGITS_PATTERN: Final = re.compile(r"^(\d+)")
_ENUM_CASE_BOUNDARY_PATTERN: Final = re.compile(r"([a-z])([A-Z]+)")


def type_name(raw: str) -> str:
    """Turn a component name into a valid type identifier.

    Examples:
        >>> type_name("pet-store.Pet")
        'pet_store_Pet'
    """
    cleaned = _LEADING_INVALID_PATTERN.sub("", raw)
    return _INVALID_NAME_PATTERN.sub("_", cleaned)


def resolve_reference_type(ref: str) -> Model:
    """Build a reference-typed model for a ``$ref`` pointer.

    A component named like a generic, ``Page[Pet]``, is split into a base
    type and a template argument and both names are imported.

    Args:
        ref: The pointer, e.g. ``"#/components/schemas/Pet"``.

    Returns:
        A :class:`~oasvc.models.Model` with ``export == "reference"``.
    """
    name = ref_name(ref)
    match = _GENERIC_NAME_PATTERN.match(name)
    if match:
        base = type_name(match.group(1))
        template = type_name(match.group(2))
        return Model(
            export="reference",
            type=f"{base}<{template}>",
            base=base,
            template=template,
            imports=[base, template],
        )

    base = type_name(name)
    return Model(export="reference", type=base, base=base, imports=[base])


def model_default(schema: Any) -> Any:
    """Return the ``default`` declared on *schema*, or None."""
    if not isinstance(schema, dict):
        return None
    return schema.get("default")


def escape_pattern(pattern: Optional[str]) -> Optional[str]:
    """Double backslashes so a pattern survives being written into a string literal."""
    if pattern is None:
        return None
    return pattern.replace("\\", "\\\\")


def schema_type(schema: dict[str, Any]) -> tuple[Optional[str], bool]:
    """Return the effective type of *schema* and whether it is nullable.

    OpenAPI 3.1 allows ``type`` to be a list (``["string", "null"]``); the
    first non-null entry wins and the presence of ``null`` marks the schema
    nullable. Without a ``type``, ``properties`` implies an object and
    ``items`` an array.
    """
    nullable = schema.get("nullable") is True
    value = schema.get("type")

    if isinstance(value, list):
        non_null = [t for t in value if t != "null"]
        nullable = nullable or len(non_null) < len(value)
        value = non_null[0] if non_null else ("null" if value else None)

    if not isinstance(value, str):
        if "properties" in schema:
            return "object", nullable
        if "items" in schema:
            return "array", nullable
        return None, nullable

    return value, nullable


def resolve_model(
    doc: dict[str, Any],
    name: str,
    schema: Any,
    is_definition: bool = False,
) -> Model:
    """Resolve an inline schema fragment into a :class:`~oasvc.models.Model`.

    Args:
        doc: The root document (used for nested resolution).
        name: Name given to the model, e.g. the property name.
        schema: The schema fragment. Non-mapping values yield an ``any`` model.
        is_definition: Whether the fragment is a top-level component.

    Returns:
        The resolved model. Never raises for malformed schemas.
    """
    if not isinstance(schema, dict):
        return Model(name=name, is_definition=is_definition)

    tagged = classify_reference(schema)
    if isinstance(tagged, Reference):
        model = resolve_reference_type(tagged.pointer)
        model.name = name
        model.is_definition = is_definition
        return model

    kind, nullable = schema_type(schema)
    model = Model(
        name=name,
        description=_text(schema.get("description")),
        deprecated=schema.get("deprecated") is True,
        default=model_default(schema),
        is_definition=is_definition,
        is_read_only=schema.get("readOnly") is True,
        is_nullable=nullable,
        pattern=escape_pattern(_text(schema.get("pattern"))),
    )
    for keyword, attribute in _CONSTRAINT_KEYWORDS.items():
        if keyword in schema:
            setattr(model, attribute, schema[keyword])

    enum_values = schema.get("enum")
    if isinstance(enum_values, list) and enum_values and kind != "array":
        _resolve_enum(model, enum_values)
        return model

    if kind == "array":
        _resolve_container(doc, model, "array", schema.get("items"))
        return model

    additional = schema.get("additionalProperties")
    if kind == "object" and isinstance(additional, dict) and "properties" not in schema:
        _resolve_container(doc, model, "dictionary", additional)
        return model

    for keyword, export in _COMPOSITIONS:
        members = schema.get(keyword)
        if isinstance(members, list) and members:
            model.export = export
            for member in members:
                child = resolve_model(doc, name, member)
                model.imports.extend(child.imports)
                model.properties.append(child)
            return model

    if kind == "object" and isinstance(schema.get("properties"), dict):
        _resolve_interface(doc, model, schema)
        return model

    model.export = "generic"
    model.type = model.base = _primitive(kind, schema.get("format"))
    return model


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _primitive(kind: Optional[str], schema_format: Any) -> str:
    if kind == "string" and schema_format == "binary":
        return "binary"
    if kind is None:
        return "any"
    return _PRIMITIVE_TYPES.get(kind, "any")


def _resolve_enum(model: Model, values: list[Any]) -> None:
    model.export = "enum"
    numeric = all(
        isinstance(v, (int, float)) and not isinstance(v, bool)
        for v in values
        if v is not None
    )
    model.type = model.base = "number" if numeric else "string"
    for value in values:
        if value is None:
            model.is_nullable = True
            continue
        model.enum.append(_enum_value(value))


def _enum_value(value: Any) -> EnumValue:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        name = "_" + str(value).replace("-", "MINUS_").replace(".", "_")
        return EnumValue(name=name, value=str(value), type="number")

    text = str(value)
    name = _ENUM_WORD_PATTERN.sub("_", text)
    name = _ENUM_LEADING_DIGITS_PATTERN.sub(r"_\1", name)
    name = _ENUM_CASE_BOUNDARY_PATTERN.sub(r"\1_\2", name).upper()
    escaped = text.replace("'", "\\'")
    return EnumValue(name=name, value=f"'{escaped}'", type="string")


def _resolve_container(
    doc: dict[str, Any], model: Model, export: str, element: Any
) -> None:
    model.export = export
    tagged = classify_reference(element)
    if isinstance(tagged, Reference):
        ref_model = resolve_reference_type(tagged.pointer)
        model.type = ref_model.type
        model.base = ref_model.base
        model.template = ref_model.template
        model.imports.extend(ref_model.imports)
        return

    item = resolve_model(doc, model.name, element)
    model.type = item.type
    model.base = item.base
    model.template = item.template
    model.link = item
    model.imports.extend(item.imports)


def _resolve_interface(doc: dict[str, Any], model: Model, schema: dict[str, Any]) -> None:
    model.export = "interface"
    required = schema.get("required")
    required_names = (
        {r for r in required if isinstance(r, str)} if isinstance(required, list) else set()
    )

    for prop_name, prop_schema in schema["properties"].items():
        child = resolve_model(doc, str(prop_name), prop_schema)
        child.is_required = prop_name in required_names
        model.imports.extend(child.imports)
        model.properties.append(child)
        if child.export == "enum":
            model.enums.append(child)

"""Canonical Pydantic models shared across all oasvc modules.

This is the single source of truth for data shapes in the project. The models
fall into two groups:

**Configuration model** -- loaded from ``oasvc.json`` by :mod:`oasvc.config`:
    :class:`ExtractorConfig`.

**Extraction output models** -- produced by :mod:`oasvc.extractor` and
consumed by template rendering:
    :class:`Model`, :class:`EnumValue`, :class:`OperationParameter`,
    :class:`OperationResponse`, :class:`OperationError`,
    :class:`OperationParameters`, :class:`Operation`, :class:`Service`, and
    the transient :class:`Content`.

Attribute names are snake_case in Python. Every model carries a camelCase
alias generator so that ``model_dump(by_alias=True)`` produces the field names
templates expect (``isRequired``, ``parametersPath``, ``responseHeader``, ...).
The ``in`` attribute of parameters and responses is exposed as ``location``
because ``in`` is a Python keyword.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from oasvc.constants import (
    BASIC_MEDIA_TYPES,
    HTTP_METHODS,
    IGNORED_PARAMETERS,
    OPERATION_RESERVED_WORDS,
    PARAMETER_RESERVED_WORDS,
    VERSION_PLACEHOLDER,
)

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Config ---


class ExtractorConfig(BaseModel):
    """Design inputs of the extraction engine.

    The defaults reproduce the naming and negotiation rules for a
    TypeScript target. A project can override any field from ``oasvc.json``
    (see :func:`~oasvc.config.resolve_config`); keys may be given in
    snake_case or camelCase.

    Example::

        ExtractorConfig(ignored_parameters=frozenset({"api-version", "tenant"}))
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    operation_reserved_words: frozenset[str] = Field(
        default=OPERATION_RESERVED_WORDS,
        description="Operation names that are disambiguated with a group or method",
    )
    parameter_reserved_words: frozenset[str] = Field(
        default=PARAMETER_RESERVED_WORDS,
        description="Parameter names that are prefixed with an underscore",
    )
    ignored_parameters: frozenset[str] = Field(
        default=IGNORED_PARAMETERS,
        description="Declared parameter names never emitted on an operation",
    )
    version_placeholder: str = Field(
        default=VERSION_PLACEHOLDER,
        description="Path placeholder whose segment is dropped from synthesized names",
    )
    media_types: tuple[str, ...] = Field(
        default=BASIC_MEDIA_TYPES,
        description="Preferred body media types, highest priority first",
    )
    http_methods: tuple[str, ...] = Field(
        default=HTTP_METHODS,
        description="Path-item methods turned into operations, in emission order",
    )


# --- Extraction Output Models ---


class ParameterLocation(str, enum.Enum):
    """Locations an :class:`OperationParameter` can be sent in.

    ``BODY`` only ever comes from a request body. ``FORM_DATA`` is used for
    form-encoded request bodies and for legacy ``in: formData`` parameters.
    """

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"
    FORM_DATA = "formData"
    BODY = "body"


class ResponseLocation(str, enum.Enum):
    """Where the value of an :class:`OperationResponse` is read from."""

    RESPONSE = "response"
    HEADER = "header"


class EnumValue(BaseModel):
    """One literal of an enum model."""

    model_config = _CAMEL_CONFIG

    name: str
    value: str
    type: str
    description: Optional[str] = None


class Model(BaseModel):
    """A resolved model descriptor for one schema fragment.

    ``type``/``base``/``template`` name the type a generator should emit,
    ``link`` points at the element model of arrays and dictionaries, and the
    remaining fields mirror the schema's constraints.
    """

    model_config = _CAMEL_CONFIG

    name: str = ""
    export: str = Field(
        default="generic",
        description="reference, generic, enum, array, dictionary, interface, "
        "one-of, any-of or all-of",
    )
    type: str = "any"
    base: str = "any"
    template: Optional[str] = None
    link: Optional[Model] = None
    description: Optional[str] = None
    deprecated: bool = False
    default: Any = None
    is_definition: bool = False
    is_read_only: bool = False
    is_required: bool = False
    is_nullable: bool = False
    format: Optional[str] = None
    maximum: Optional[int | float] = None
    exclusive_maximum: Any = None
    minimum: Optional[int | float] = None
    exclusive_minimum: Any = None
    multiple_of: Optional[int | float] = None
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    max_items: Optional[int] = None
    min_items: Optional[int] = None
    unique_items: Optional[bool] = None
    max_properties: Optional[int] = None
    min_properties: Optional[int] = None
    pattern: Optional[str] = None
    imports: list[str] = Field(default_factory=list)
    enum: list[EnumValue] = Field(default_factory=list)
    enums: list[Model] = Field(default_factory=list)
    properties: list[Model] = Field(default_factory=list)


class OperationParameter(Model):
    """One input of an :class:`Operation`.

    ``prop`` keeps the name declared in the document (what goes on the wire),
    ``name`` is the sanitized identifier a generated signature uses.
    """

    location: ParameterLocation = Field(alias="in")
    prop: str
    media_type: Optional[str] = None


class OperationResponse(Model):
    """One documented response of an :class:`Operation`.

    ``name`` is the header name when ``location`` is ``header`` and empty
    for body responses. ``code`` is the numeric status (``default`` is 200).
    """

    location: ResponseLocation = Field(default=ResponseLocation.RESPONSE, alias="in")
    code: int


class OperationError(BaseModel):
    """A documented non-success status code."""

    model_config = _CAMEL_CONFIG

    code: int
    description: str


class OperationParameters(BaseModel):
    """Parameters of a path item or operation, bucketed by location.

    ``parameters`` holds every bucketed parameter in processing order and
    ``imports`` the concatenation of their imports.
    """

    model_config = _CAMEL_CONFIG

    imports: list[str] = Field(default_factory=list)
    parameters: list[OperationParameter] = Field(default_factory=list)
    parameters_path: list[OperationParameter] = Field(default_factory=list)
    parameters_query: list[OperationParameter] = Field(default_factory=list)
    parameters_form: list[OperationParameter] = Field(default_factory=list)
    parameters_cookie: list[OperationParameter] = Field(default_factory=list)
    parameters_header: list[OperationParameter] = Field(default_factory=list)
    parameters_body: Optional[OperationParameter] = None


class Operation(OperationParameters):
    """A single extracted API operation (one URL path + HTTP method pair).

    Invariant: ``parameters`` is the concatenation of the five location
    buckets plus ``parameters_body``, ordered so that required parameters
    without a default come first.
    """

    id: str
    name: str
    summary: Optional[str] = None
    description: Optional[str] = None
    deprecated: bool = False
    method: str
    path: str
    errors: list[OperationError] = Field(default_factory=list)
    results: list[OperationResponse] = Field(default_factory=list)
    response_header: Optional[str] = None


class Service(BaseModel):
    """Operations sharing one declared tag.

    ``imports`` is the concatenation of the operations' imports;
    duplicates are kept and left for the renderer to collapse.
    """

    model_config = _CAMEL_CONFIG

    name: str
    description: Optional[str] = None
    operations: list[Operation] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list)


class Content(BaseModel):
    """The (media type, schema) pair chosen for a request or response body."""

    model_config = _CAMEL_CONFIG

    media_type: str
    schema_: Any = Field(alias="schema")


Model.model_rebuild()

"""Copy a resolved model's type and constraints onto a parameter or response."""

from __future__ import annotations

from typing import Final

from oasvc.models import Model

_CONSTRAINT_FIELDS: Final = (
    "format",
    "maximum",
    "exclusive_maximum",
    "minimum",
    "exclusive_minimum",
    "multiple_of",
    "max_length",
    "min_length",
    "max_items",
    "min_items",
    "unique_items",
    "max_properties",
    "min_properties",
    "pattern",
)


def apply_reference(target: Model, reference: Model) -> None:
    """Make *target* a handle on the named type described by *reference*."""
    target.export = "reference"
    target.type = reference.type
    target.base = reference.base
    target.template = reference.template
    target.imports.extend(reference.imports)


def apply_model(target: Model, model: Model, merge_flags: bool = True) -> None:
    """Copy type, link, flags, constraints and nested models from *model*.

    With *merge_flags*, ``is_required``/``is_nullable`` already set on
    *target* (from the parameter or body declaration) are kept; otherwise
    the model's values replace them.
    """
    target.export = model.export
    target.type = model.type
    target.base = model.base
    target.template = model.template
    target.link = model.link
    target.is_read_only = model.is_read_only
    if merge_flags:
        target.is_required = target.is_required or model.is_required
        target.is_nullable = target.is_nullable or model.is_nullable
    else:
        target.is_required = model.is_required
        target.is_nullable = model.is_nullable
    for field in _CONSTRAINT_FIELDS:
        setattr(target, field, getattr(model, field))
    target.imports.extend(model.imports)
    target.enum.extend(model.enum)
    target.enums.extend(model.enums)
    target.properties.extend(model.properties)

"""Look up ``$ref`` JSON Reference pointers inside an in-memory document.

The extraction engine never inlines the whole document up front. Instead,
each place that may hold a reference (a parameter, a request body, a
response, a schema) dereferences it exactly one level at the point of use via
:func:`dereference`. A resolved value that is itself a reference is handled
by the caller, which knows whether a reference at that position should be
followed again or kept as a named type.

Only **internal** references (those starting with ``#/``) are supported.
External file or URL references raise :class:`~oasvc.exceptions.SpecParseError`.

:func:`classify_reference` turns a raw value into a :class:`Reference` or an
:class:`Inline` so that callers branch on the variant once instead of probing
for a ``$ref`` key repeatedly.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Union

from oasvc.exceptions import SpecParseError


@dataclass(frozen=True)
class Reference:
    """A ``{"$ref": pointer}`` value."""

    pointer: str


@dataclass(frozen=True)
class Inline:
    """Any value that is not a reference."""

    value: Any


def is_reference(value: Any) -> bool:
    """Return True if *value* is a mapping carrying a string ``$ref``."""
    return isinstance(value, dict) and isinstance(value.get("$ref"), str)


def classify_reference(value: Any) -> Union[Reference, Inline]:
    """Tag *value* as a :class:`Reference` or an :class:`Inline` fragment."""
    if is_reference(value):
        return Reference(value["$ref"])
    return Inline(value)


def ref_name(ref: str) -> str:
    """Return the last segment of a ``$ref`` pointer."""
    return ref.rsplit("/", 1)[-1]


def resolve_pointer(doc: dict[str, Any], ref: str) -> Any:
    """Resolve a single ``$ref`` string against *doc*.

    Parses JSON Pointer references like ``#/components/schemas/Pet`` and
    navigates the document to locate the referenced value. Handles
    RFC 6901 JSON Pointer escaping (``~0`` for ``~``, ``~1`` for ``/``).

    Args:
        doc: The root document to resolve against.
        ref: The ``$ref`` string (e.g., ``"#/components/schemas/Pet"``).

    Returns:
        The value found at the referenced path (not copied).

    Raises:
        SpecParseError: If the reference is external (does not start with
            ``#/``), or if any segment in the pointer path does not exist
            in the document.
    """
    if ref == "#":
        return doc
    if not ref.startswith("#/"):
        raise SpecParseError(
            f"External $ref not supported: {ref}. "
            "Bundle the document before extracting services."
        )

    current: Any = doc
    for segment in ref[2:].split("/"):
        segment = segment.replace("~1", "/").replace("~0", "~")

        if isinstance(current, dict):
            if segment not in current:
                raise SpecParseError(
                    f"Cannot resolve $ref '{ref}': key '{segment}' not found"
                )
            current = current[segment]
        elif isinstance(current, list):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError) as exc:
                raise SpecParseError(
                    f"Cannot resolve $ref '{ref}': invalid array index '{segment}'"
                ) from exc
        else:
            raise SpecParseError(
                f"Cannot resolve $ref '{ref}': "
                f"cannot navigate into {type(current).__name__}"
            )

    return current


def dereference(doc: dict[str, Any], value: Any) -> Any:
    """Follow *value* one level if it is a reference.

    Args:
        doc: The root document.
        value: A fragment that may be a ``{"$ref": ...}`` mapping.

    Returns:
        A deep copy of the referenced object when *value* is a reference,
        otherwise *value* unchanged. The copy keeps callers from aliasing
        (and accidentally mutating) shared components of *doc*.

    Raises:
        SpecParseError: If the reference cannot be resolved.
    """
    tagged = classify_reference(value)
    if isinstance(tagged, Reference):
        return copy.deepcopy(resolve_pointer(doc, tagged.pointer))
    return value

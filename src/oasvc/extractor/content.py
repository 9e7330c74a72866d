"""Pick the one (media type, schema) pair that represents a body.

A request body or response may document several representations. Generated
clients send and parse exactly one, so :func:`select_content` chooses:

1. the first declared media type on the allow-list (compared without any
   ``;charset=...`` style parameters) that carries a schema;
2. otherwise the first declared media type that carries a schema;
3. otherwise nothing.

The allow-list keeps a documented but unused XML variant from winning over
JSON without the document having to state a preference.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from oasvc.constants import BASIC_MEDIA_TYPES, FORM_MEDIA_TYPES
from oasvc.models import Content


def base_media_type(media_type: str) -> str:
    """Strip parameters from a media type: ``text/plain; charset=utf-8`` -> ``text/plain``."""
    return media_type.split(";", 1)[0].strip()


def is_form_media_type(media_type: Optional[str]) -> bool:
    """Return True if a body of *media_type* is sent as form fields."""
    return media_type is not None and base_media_type(media_type) in FORM_MEDIA_TYPES


def _has_schema(entry: Any) -> bool:
    # Boolean schemas (``schema: true``) count; empty values do not.
    if not isinstance(entry, dict):
        return False
    schema = entry.get("schema")
    return schema is not None and schema != ""


def select_content(
    content: Any,
    media_types: Iterable[str] = BASIC_MEDIA_TYPES,
) -> Optional[Content]:
    """Select the media type and schema to extract from a ``content`` map.

    Non-string media-type keys, such as the integers YAML produces for bare
    numbers, are compared and reported in their string form.

    Args:
        content: The ``content`` object of a request body or response.
        media_types: Preferred media types.

    Returns:
        The chosen :class:`~oasvc.models.Content`, or None when no media
        type declares a schema.
    """
    if not isinstance(content, dict):
        return None

    preferred = frozenset(media_types)
    candidates = [key for key in content if base_media_type(str(key)) in preferred]
    candidates.extend(key for key in content if key not in candidates)

    for key in candidates:
        entry = content[key]
        if _has_schema(entry):
            return Content(media_type=str(key), schema=entry["schema"])

    return None

"""Document access -- load API descriptions, follow ``$ref`` pointers, resolve schemas.

This sub-package holds the collaborators the extraction engine in
:mod:`oasvc.extractor` is built on:

* :mod:`~oasvc.parser.loader` -- I/O layer (URL, file, stdin) plus format
  detection and OpenAPI version validation.
* :mod:`~oasvc.parser.references` -- one-level ``$ref`` lookup within a
  document and the reference/inline tagged union.
* :mod:`~oasvc.parser.schema` -- best-effort resolution of schema fragments
  into :class:`~oasvc.models.Model` descriptors.

Typical usage::

    from oasvc.parser import load_document, validate_openapi_version

    doc = load_document("openapi.yaml")
    validate_openapi_version(doc)
"""

from oasvc.parser.loader import load_document, validate_openapi_version
from oasvc.parser.references import dereference
from oasvc.parser.schema import resolve_model, resolve_reference_type

__all__ = [
    "dereference",
    "load_document",
    "resolve_model",
    "resolve_reference_type",
    "validate_openapi_version",
]

"""Extraction engine -- turn an OpenAPI 3.x document into services.

The pipeline runs per tag and per path item:

* :mod:`~oasvc.extractor.naming` -- identifier sanitizing and operation /
  parameter names.
* :mod:`~oasvc.extractor.content` -- media type negotiation for bodies.
* :mod:`~oasvc.extractor.parameters` -- parameter conversion and location
  buckets.
* :mod:`~oasvc.extractor.responses` -- results, errors and response headers.
* :mod:`~oasvc.extractor.operations` -- one :class:`~oasvc.models.Operation`
  per path + method.
* :mod:`~oasvc.extractor.services` -- one :class:`~oasvc.models.Service`
  per tag.

Typical usage::

    from oasvc.extractor import extract_services
    from oasvc.parser import load_document

    services = extract_services(load_document("openapi.yaml"))
"""

from oasvc.extractor.operations import get_operation
from oasvc.extractor.services import extract_services, get_service, get_services

__all__ = ["extract_services", "get_operation", "get_service", "get_services"]

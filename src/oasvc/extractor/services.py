"""Group operations into one :class:`~oasvc.models.Service` per declared tag."""

from __future__ import annotations

import logging
from typing import Any, Optional

from oasvc.extractor.operations import get_operation
from oasvc.extractor.parameters import get_operation_parameters
from oasvc.models import ExtractorConfig, Service
from oasvc.parser.loader import validate_openapi_version

logger = logging.getLogger(__name__)


def _tag_name(tag: Any) -> Optional[str]:
    if isinstance(tag, dict) and isinstance(tag.get("name"), str):
        return tag["name"]
    return None


def get_service(
    doc: dict[str, Any],
    tag: dict[str, Any],
    config: Optional[ExtractorConfig] = None,
) -> Service:
    """Build the service for one tag object.

    Every path item is visited in declaration order. Its parameters are
    classified once, then each configured method whose operation lists the
    tag is built from them.
    """
    config = config or ExtractorConfig()
    name = _tag_name(tag) or ""
    description = tag.get("description")
    service = Service(
        name=name,
        description=description if isinstance(description, str) and description else None,
    )

    paths = doc.get("paths")
    if not isinstance(paths, dict):
        return service

    for path, path_item in paths.items():
        if not isinstance(path_item, dict) or not path_item:
            continue

        path_parameters = get_operation_parameters(doc, path_item.get("parameters"), config)
        for method in config.http_methods:
            op = path_item.get(method)
            if not isinstance(op, dict):
                continue
            tags = op.get("tags")
            if not isinstance(tags, list) or name not in tags:
                continue

            operation = get_operation(doc, path, method, op, path_parameters, config)
            service.imports.extend(operation.imports)
            service.operations.append(operation)

    return service


def get_services(
    doc: dict[str, Any],
    config: Optional[ExtractorConfig] = None,
) -> list[Service]:
    """Build one service per named entry of the document's ``tags`` list.

    Operations without a declared tag belong to no service.
    """
    config = config or ExtractorConfig()
    tags = doc.get("tags")
    if not isinstance(tags, list):
        return []
    return [get_service(doc, tag, config) for tag in tags if _tag_name(tag) is not None]


def extract_services(
    raw_document: dict[str, Any],
    config: Optional[ExtractorConfig] = None,
) -> list[Service]:
    """Validate an OpenAPI 3.x document and extract its services.

    Args:
        raw_document: The parsed document, e.g. from
            :func:`~oasvc.parser.loader.load_document`.
        config: Extraction settings; defaults apply when omitted.

    Returns:
        The services in tag declaration order.

    Raises:
        SpecParseError: If the document is not OpenAPI 3.x.
    """
    version = validate_openapi_version(raw_document)
    services = get_services(raw_document, config)
    logger.debug(
        "Extracted %d services with %d operations from OpenAPI %s document",
        len(services),
        sum(len(service.operations) for service in services),
        version,
    )
    return services

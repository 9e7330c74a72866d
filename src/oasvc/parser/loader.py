"""Load API description documents from a URL, local file, or stdin.

This is the only module of the parser that performs I/O. It turns a source
string into a plain ``dict`` and checks that the document declares an
OpenAPI 3.x version; everything downstream works on that in-memory tree.

The two public functions are:

* :func:`load_document` -- read and parse a JSON or YAML document.
* :func:`validate_openapi_version` -- return the ``openapi`` version string,
  rejecting Swagger 2.x and unsupported versions.

A loaded document must already be bundled: ``$ref`` pointers into other
files are not followed by :mod:`oasvc.parser.references`.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from oasvc.exceptions import SpecParseError

logger = logging.getLogger(__name__)

_FETCH_TIMEOUT = 30.0

# Fragment of a file suffix or content type -> parser to try first.
_FORMAT_HINTS = (
    ("json", "json"),
    ("yaml", "yaml"),
    ("yml", "yaml"),
)


def load_document(source: str) -> dict[str, Any]:
    """Load an API description from URL, file path, or stdin (``-``).

    Args:
        source: An ``http(s)://`` URL, a file path, or ``-`` for stdin.

    Returns:
        The parsed document.

    Raises:
        SpecParseError: If the source cannot be read or parsed.
    """
    if source == "-":
        logger.debug("Reading document from stdin")
        return _read_stdin()
    if source.startswith(("http://", "https://")):
        logger.debug("Fetching document from %s", source)
        return _fetch_url(source)
    logger.debug("Reading document from %s", source)
    return _read_file(source)


def _format_hint(label: str) -> str:
    label = label.lower()
    for marker, hint in _FORMAT_HINTS:
        if marker in label:
            return hint
    return ""


def _require_text(content: str, empty_message: str) -> str:
    if not content.strip():
        raise SpecParseError(empty_message)
    return content


def _read_stdin() -> dict[str, Any]:
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc
    return _parse_content(_require_text(content, "No input received from stdin"))


def _fetch_url(url: str) -> dict[str, Any]:
    try:
        response = httpx.get(url, timeout=_FETCH_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching document from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch document from {url}: {exc}") from exc

    hint = _format_hint(response.headers.get("content-type", ""))
    return _parse_content(response.text, hint=hint)


def _read_file(path: str) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Document not found: {path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecParseError(f"Failed to read {path}: {exc}") from exc
    content = _require_text(content, f"Document is empty: {path}")
    return _parse_content(content, hint=_format_hint(file_path.suffix))


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse *content* as JSON, falling back to YAML.

    A ``"yaml"`` hint skips the JSON attempt; a ``"json"`` hint disables the
    YAML fallback so a broken ``.json`` file reports the JSON error.

    Raises:
        SpecParseError: If no parser accepts the content, or the top-level
            value is not a mapping.
    """
    errors: list[str] = []

    if hint != "yaml":
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            errors.append(f"JSON error: {exc}")
        else:
            return _expect_mapping(parsed)

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        errors.append(f"YAML error: {exc}")
        raise SpecParseError(
            "Failed to parse document as JSON or YAML\n  " + "\n  ".join(errors)
        ) from exc
    return _expect_mapping(parsed)


def _expect_mapping(result: Any) -> dict[str, Any]:
    if isinstance(result, dict):
        return result
    kind = "empty document" if result is None else type(result).__name__
    raise SpecParseError(f"Document must be a JSON/YAML object (got {kind})")


def validate_openapi_version(doc: dict[str, Any]) -> str:
    """Return the document's ``openapi`` version, which must be 3.x.

    Raises:
        SpecParseError: For Swagger 2.x documents, a missing ``openapi``
            field, or any other major version.
    """
    if "swagger" in doc:
        raise SpecParseError(
            f"Swagger {doc['swagger']} is not supported. "
            "Only OpenAPI 3.x documents can be extracted. "
            "Consider converting with https://converter.swagger.io"
        )

    version = doc.get("openapi")
    if version is None:
        raise SpecParseError("Missing 'openapi' field. Is this an OpenAPI 3.x document?")

    version = str(version)
    if not version.startswith("3."):
        raise SpecParseError(
            f"Unsupported OpenAPI version: {version}. "
            "Only OpenAPI 3.x documents can be extracted."
        )
    return version

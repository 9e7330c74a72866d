"""Tests for oasvc.parser.loader."""

from __future__ import annotations

import io
import json
import textwrap
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from oasvc.exceptions import SpecParseError
from oasvc.parser.loader import (
    _fetch_url,
    _format_hint,
    _parse_content,
    _read_file,
    _read_stdin,
    load_document,
    validate_openapi_version,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# load_document dispatch
# ---------------------------------------------------------------------------


class TestLoadDocument:
    """load_document routes each kind of source to the right reader."""

    def test_loads_from_file_json(self) -> None:
        result = load_document(str(FIXTURES_DIR / "activity.json"))
        assert result["openapi"] == "3.0.3"
        assert result["info"]["title"] == "Activity API"

    def test_loads_from_file_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "doc.yaml"
        yaml_file.write_text(
            textwrap.dedent("""\
                openapi: "3.1.0"
                info:
                  title: YAML Test
                  version: "1.0.0"
                paths: {}
            """),
            encoding="utf-8",
        )
        result = load_document(str(yaml_file))
        assert result["openapi"] == "3.1.0"
        assert result["info"]["title"] == "YAML Test"

    def test_loads_from_stdin(self) -> None:
        doc = json.dumps({"openapi": "3.0.3", "info": {"title": "stdin test", "version": "1.0"}})
        with patch("oasvc.parser.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO(doc)
            result = load_document("-")
        assert result["info"]["title"] == "stdin test"

    def test_loads_from_url(self) -> None:
        doc = {"openapi": "3.0.3", "info": {"title": "URL test", "version": "1.0"}}
        mock_response = httpx.Response(
            status_code=200,
            json=doc,
            request=httpx.Request("GET", "https://example.com/openapi.json"),
        )
        with patch("oasvc.parser.loader.httpx.get", return_value=mock_response) as mock_get:
            result = load_document("https://example.com/openapi.json")
        assert result["info"]["title"] == "URL test"
        assert mock_get.call_args.kwargs["follow_redirects"] is True


class TestReadFile:
    def test_file_not_found_raises(self) -> None:
        with pytest.raises(SpecParseError, match="not found"):
            _read_file("/nonexistent/path/to/openapi.json")

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.json"
        empty.write_text("", encoding="utf-8")
        with pytest.raises(SpecParseError, match="empty"):
            _read_file(str(empty))

    def test_invalid_json_file_raises(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{invalid json", encoding="utf-8")
        with pytest.raises(SpecParseError, match="Invalid JSON"):
            _read_file(str(bad))

    def test_yaml_with_integer_response_keys(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "codes.yml"
        yaml_file.write_text(
            textwrap.dedent("""\
                openapi: "3.0.0"
                paths:
                  /hello:
                    get:
                      responses:
                        200:
                          description: OK
            """),
            encoding="utf-8",
        )
        result = _read_file(str(yaml_file))
        assert 200 in result["paths"]["/hello"]["get"]["responses"]


class TestReadStdin:
    def test_reads_yaml_from_stdin(self) -> None:
        with patch("oasvc.parser.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO("openapi: '3.0.0'\ninfo:\n  title: YAML stdin\n")
            result = _read_stdin()
        assert result["info"]["title"] == "YAML stdin"

    def test_whitespace_only_stdin_raises(self) -> None:
        with patch("oasvc.parser.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO("   \n\t\n  ")
            with pytest.raises(SpecParseError, match="No input"):
                _read_stdin()


class TestFetchUrl:
    def test_loads_yaml_by_content_type(self) -> None:
        mock_response = httpx.Response(
            status_code=200,
            text="openapi: '3.0.0'\ninfo:\n  title: YAML Remote\n",
            headers={"content-type": "application/x-yaml"},
            request=httpx.Request("GET", "https://example.com/openapi.yaml"),
        )
        with patch("oasvc.parser.loader.httpx.get", return_value=mock_response):
            result = _fetch_url("https://example.com/openapi.yaml")
        assert result["info"]["title"] == "YAML Remote"

    def test_http_error_raises(self) -> None:
        mock_response = httpx.Response(
            status_code=404,
            request=httpx.Request("GET", "https://example.com/missing.json"),
        )
        with patch("oasvc.parser.loader.httpx.get", return_value=mock_response):
            with pytest.raises(SpecParseError, match="HTTP 404"):
                _fetch_url("https://example.com/missing.json")

    def test_connection_error_raises(self) -> None:
        with patch(
            "oasvc.parser.loader.httpx.get",
            side_effect=httpx.ConnectError("Connection refused"),
        ):
            with pytest.raises(SpecParseError, match="Failed to fetch"):
                _fetch_url("https://unreachable.example.com/openapi.json")


class TestParseContent:
    def test_parses_json(self) -> None:
        assert _parse_content('{"key": "value"}') == {"key": "value"}

    def test_parses_yaml(self) -> None:
        assert _parse_content("key: value\nnested:\n  a: 1") == {
            "key": "value",
            "nested": {"a": 1},
        }

    def test_json_hint_disables_yaml_fallback(self) -> None:
        with pytest.raises(SpecParseError, match="Invalid JSON"):
            _parse_content("key: value", hint="json")

    def test_invalid_content_raises(self) -> None:
        with pytest.raises(SpecParseError, match="Failed to parse"):
            _parse_content("}{not valid at all][")

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(SpecParseError, match="must be a JSON/YAML object"):
            _parse_content("[1, 2, 3]")

    def test_null_yaml_raises(self) -> None:
        with pytest.raises(SpecParseError, match="empty document"):
            _parse_content("---\n", hint="yaml")


@pytest.mark.parametrize(
    ("label", "hint"),
    [
        (".json", "json"),
        (".YML", "yaml"),
        ("application/x-yaml; charset=utf-8", "yaml"),
        ("application/vnd.oai.openapi+json", "json"),
        ("text/plain", ""),
        ("", ""),
    ],
)
def test_format_hint(label: str, hint: str) -> None:
    assert _format_hint(label) == hint


class TestValidateOpenAPIVersion:
    @pytest.mark.parametrize("version", ["3.0.0", "3.0.3", "3.1.0", "3.2.0"])
    def test_accepts_3x(self, version: str) -> None:
        assert validate_openapi_version({"openapi": version}) == version

    def test_rejects_swagger_2_0(self) -> None:
        with pytest.raises(SpecParseError, match="Swagger 2.0 is not supported"):
            validate_openapi_version({"swagger": "2.0"})

    def test_rejects_missing_openapi_field(self) -> None:
        with pytest.raises(SpecParseError, match="Missing 'openapi' field"):
            validate_openapi_version({"info": {"title": "test"}})

    def test_rejects_unsupported_version(self) -> None:
        with pytest.raises(SpecParseError, match="Unsupported OpenAPI version"):
            validate_openapi_version({"openapi": "4.0.0"})

    def test_version_as_number(self) -> None:
        assert validate_openapi_version({"openapi": 3.0}) == "3.0"

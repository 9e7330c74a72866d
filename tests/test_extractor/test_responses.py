"""Tests for oasvc.extractor.responses."""

from __future__ import annotations

from typing import Any

import pytest

from oasvc.extractor.responses import (
    get_operation_errors,
    get_operation_response,
    get_operation_response_header,
    get_operation_responses,
    get_operation_results,
    models_equal,
    response_code,
    void_result,
)
from oasvc.models import Model, OperationResponse, ResponseLocation


def _json(schema: dict[str, Any]) -> dict[str, Any]:
    return {"application/json": {"schema": schema}}


def _response(code: int, type_: str, **kwargs: Any) -> OperationResponse:
    return OperationResponse(code=code, type=type_, base=type_, **kwargs)


class TestResponseCode:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("200", 200),
            (201, 201),
            ("default", 200),
            ("2XX", 2),
            ("-404", 404),
            ("0", None),
            ("x-extension", None),
            ("", None),
        ],
    )
    def test_response_code(self, key: Any, expected: Any) -> None:
        assert response_code(key) == expected


class TestGetOperationResponse:
    def test_referenced_body_schema(self) -> None:
        response = get_operation_response(
            {},
            {"description": "OK", "content": _json({"$ref": "#/components/schemas/Pet"})},
            200,
        )
        assert response.export == "reference"
        assert response.type == "Pet"
        assert response.imports == ["Pet"]
        assert response.description == "OK"
        assert response.location == ResponseLocation.RESPONSE

    def test_inline_body_schema(self) -> None:
        response = get_operation_response(
            {},
            {
                "description": "OK",
                "content": _json({"type": "array", "items": {"type": "string"}, "maxItems": 5}),
            },
            200,
        )
        assert response.export == "array"
        assert response.type == "string"
        assert response.max_items == 5
        assert response.link is not None

    def test_header_only_response(self) -> None:
        response = get_operation_response(
            {},
            {"description": "OK", "headers": {"X-RateLimit": {"schema": {"type": "integer"}}}},
            200,
        )
        assert response.location == ResponseLocation.HEADER
        assert response.name == "X-RateLimit"
        assert response.type == "string"

    def test_body_wins_over_headers(self) -> None:
        response = get_operation_response(
            {},
            {
                "description": "OK",
                "content": _json({"type": "integer"}),
                "headers": {"ETag": {}},
            },
            200,
        )
        assert response.location == ResponseLocation.RESPONSE
        assert response.type == "number"

    def test_empty_response_is_any(self) -> None:
        response = get_operation_response({}, {}, 200)
        assert response.type == "any"
        assert response.description is None

    def test_responses_component_in_schema_is_dereferenced(self) -> None:
        doc = {"components": {"responses": {"Shared": {"type": "integer"}}}}
        response = get_operation_response(
            doc,
            {"content": _json({"$ref": "#/components/responses/Shared"})},
            200,
        )
        assert response.export == "generic"
        assert response.type == "number"


class TestGetOperationResponses:
    def test_sorted_and_dereferenced(self) -> None:
        doc = {"components": {"responses": {"NotFound": {"description": "Not found"}}}}
        responses = get_operation_responses(
            doc,
            {
                "404": {"$ref": "#/components/responses/NotFound"},
                "x-skip": {"description": "ignored"},
                "201": {"description": "Created"},
            },
        )
        assert [(r.code, r.description) for r in responses] == [
            (201, "Created"),
            (404, "Not found"),
        ]

    def test_not_a_mapping(self) -> None:
        assert get_operation_responses({}, None) == []


class TestModelsEqual:
    def test_equal_without_links(self) -> None:
        assert models_equal(Model(type="Pet", base="Pet"), Model(type="Pet", base="Pet"))

    def test_different_template(self) -> None:
        assert not models_equal(
            Model(type="Page", base="Page", template="Pet"),
            Model(type="Page", base="Page", template="Cat"),
        )

    def test_recurses_into_links(self) -> None:
        a = Model(type="string", base="string", link=Model(type="string", base="string"))
        b = Model(type="string", base="string", link=Model(type="string", base="string"))
        c = Model(type="string", base="string", link=Model(type="number", base="number"))
        assert models_equal(a, b)
        assert not models_equal(a, c)

    def test_link_on_one_side_only(self) -> None:
        a = Model(type="string", base="string", link=Model(type="string", base="string"))
        b = Model(type="string", base="string")
        assert not models_equal(a, b)
        assert not models_equal(b, a)


class TestGetOperationResults:
    def test_keeps_2xx_except_204(self) -> None:
        results = get_operation_results(
            [_response(200, "Pet"), _response(204, "any"), _response(404, "Error")]
        )
        assert [(r.code, r.type) for r in results] == [(200, "Pet")]

    def test_void_placeholder(self) -> None:
        results = get_operation_results([_response(204, "any"), _response(500, "Error")])
        assert len(results) == 1
        assert results[0] == void_result()
        assert (results[0].code, results[0].type, results[0].description) == (200, "void", "")

    def test_void_placeholder_for_no_responses(self) -> None:
        assert get_operation_results([]) == [void_result()]

    def test_deduplicates_first_wins(self) -> None:
        results = get_operation_results(
            [
                _response(200, "Pet", description="first"),
                _response(201, "Pet", description="second"),
                _response(202, "Job"),
            ]
        )
        assert [(r.code, r.description) for r in results] == [
            (200, "first"),
            (202, None),
        ]


class TestGetOperationErrors:
    def test_described_codes_from_300(self) -> None:
        errors = get_operation_errors(
            [
                _response(200, "Pet", description="OK"),
                _response(304, "any", description="Not modified"),
                _response(401, "any", description="Unauthorized"),
                _response(500, "any"),
            ]
        )
        assert [(e.code, e.description) for e in errors] == [
            (304, "Not modified"),
            (401, "Unauthorized"),
        ]


class TestGetOperationResponseHeader:
    def test_first_header_result(self) -> None:
        results = [
            _response(200, "Pet"),
            OperationResponse(code=201, location=ResponseLocation.HEADER, name="Location"),
        ]
        assert get_operation_response_header(results) == "Location"

    def test_none(self) -> None:
        assert get_operation_response_header([_response(200, "Pet")]) is None

"""Tests for oasvc.extractor.services."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from oasvc.exceptions import SpecParseError
from oasvc.extractor.services import extract_services, get_service, get_services
from oasvc.models import ExtractorConfig


class TestGetServices:
    def test_one_service_per_tag_in_order(self, activity_doc: dict[str, Any]) -> None:
        services = get_services(activity_doc)
        assert [s.name for s in services] == ["activity", "admin", "empty"]
        assert services[0].description.startswith("Activity APIs")
        assert services[2].operations == []
        assert services[2].description is None

    def test_operations_in_path_and_method_order(self, activity_doc: dict[str, Any]) -> None:
        activity, admin, _ = get_services(activity_doc)
        assert [op.name for op in activity.operations] == [
            "getThreadSubscriptionForAuthenticatedUser",
            "setThreadSubscription",
            "deleteThreadSubscription",
            "getRateLimit",
        ]
        assert [op.name for op in admin.operations] == [
            "getRateLimit",
            "getUsers",
            "createGlobalWebhook",
            "uploadAsset",
        ]

    def test_multi_tag_operation_built_independently(self, activity_doc: dict[str, Any]) -> None:
        activity, admin, _ = get_services(activity_doc)
        in_activity = activity.operations[-1]
        in_admin = admin.operations[0]
        assert in_activity == in_admin
        assert in_activity is not in_admin
        assert in_activity.results[0] is not in_admin.results[0]

    def test_untagged_operation_excluded(self, activity_doc: dict[str, Any]) -> None:
        names = [op.id for s in get_services(activity_doc) for op in s.operations]
        assert "untagged" not in names

    def test_service_imports_concatenated(self, activity_doc: dict[str, Any]) -> None:
        activity = get_services(activity_doc)[0]
        assert activity.imports == [
            imp for op in activity.operations for imp in op.imports
        ]
        assert activity.imports.count("thread_subscription") == 2

    def test_configured_methods(self, activity_doc: dict[str, Any]) -> None:
        config = ExtractorConfig(http_methods=("delete", "get"))
        activity = get_services(activity_doc, config)[0]
        assert [op.method for op in activity.operations] == ["DELETE", "GET", "GET"]

    def test_no_tags(self) -> None:
        assert get_services({"paths": {"/x": {"get": {"tags": ["a"]}}}}) == []

    def test_tags_without_name_skipped(self) -> None:
        assert [s.name for s in get_services({"tags": [{"description": "x"}, {"name": "a"}]})] == ["a"]


class TestGetService:
    def test_document_without_paths(self) -> None:
        service = get_service({}, {"name": "pets", "description": "Pets"})
        assert service.name == "pets"
        assert service.operations == []

    def test_non_list_tags_ignored(self) -> None:
        doc = {"paths": {"/pets": {"get": {"tags": "pets"}}}}
        assert get_service(doc, {"name": "pets"}).operations == []

    def test_dump_is_camel_case(self, activity_doc: dict[str, Any]) -> None:
        service = get_service(activity_doc, {"name": "activity"})
        dumped = service.model_dump(mode="json", by_alias=True)
        operation = dumped["operations"][0]
        assert set(operation) >= {
            "parametersPath",
            "parametersQuery",
            "parametersBody",
            "responseHeader",
        }
        assert operation["parameters"][0]["in"] == "path"
        assert operation["parameters"][0]["isRequired"] is True


class TestExtractServices:
    def test_extracts(self, activity_doc: dict[str, Any]) -> None:
        services = extract_services(activity_doc)
        assert len(services) == 3

    def test_rejects_swagger(self) -> None:
        with pytest.raises(SpecParseError, match="Swagger"):
            extract_services({"swagger": "2.0", "paths": {}})

    def test_logs_summary(
        self, activity_doc: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="oasvc.extractor.services"):
            extract_services(activity_doc)
        assert "Extracted 3 services with 8 operations from OpenAPI 3.0.3 document" in caplog.text

    def test_dangling_reference_raises(self, activity_doc: dict[str, Any]) -> None:
        activity_doc["paths"]["/rate_limit"]["get"]["responses"]["404"] = {
            "$ref": "#/components/responses/missing"
        }
        with pytest.raises(SpecParseError, match="missing"):
            extract_services(activity_doc)

"""Tests for oasvc.extractor.naming."""

from __future__ import annotations

import re

import pytest

from oasvc.extractor.naming import camelcase, operation_name, parameter_name, sanitize


class TestSanitize:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("get-thread-subscription", "getThreadSubscription"),
            ("123-filter.some Property", "filterSomeProperty"),
            ("X-Trace", "xTrace"),
            ("thread_id", "threadId"),
            ("getHTTPResponse", "getHttpResponse"),
            ("v1beta_items", "v1BetaItems"),
            ("__", ""),
            ("", ""),
        ],
    )
    def test_sanitize(self, raw: str, expected: str) -> None:
        assert sanitize(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["a$b", "héllo wörld", "foo/{bar}/baz", "--x--", "9 lives!", "a.b.c"],
    )
    def test_output_is_alphanumeric(self, raw: str) -> None:
        assert re.fullmatch(r"[A-Za-z0-9]*", sanitize(raw))

    def test_camelcase_keeps_single_word(self) -> None:
        assert camelcase("users") == "users"


class TestOperationName:
    def test_uses_last_segment_of_declared_id(self) -> None:
        name = operation_name(
            "/x", "get", "activity/get-thread-subscription-for-authenticated-user"
        )
        assert name == "getThreadSubscriptionForAuthenticatedUser"

    def test_reserved_name_uses_group(self) -> None:
        assert operation_name("/repos", "delete", "repos/delete") == "deleteRepos"

    def test_reserved_name_without_group_uses_method(self) -> None:
        assert operation_name("/x", "delete", "delete") == "deleteDelete"

    def test_custom_reserved_words(self) -> None:
        assert operation_name("/x", "get", "users/list", reserved_words={"list"}) == "listUsers"
        assert operation_name("/x", "get", "repos/delete", reserved_words=()) == "delete"

    def test_fallback_name_from_path(self) -> None:
        assert operation_name("/users/{id}/repos", "GET") == "getUsersRepos"

    def test_fallback_drops_version_segment(self) -> None:
        assert operation_name("/{api-version}/users/{id}", "get") == "getUsers"
        assert operation_name("/v{api-version}/users", "post") == "postUsers"

    def test_custom_version_placeholder(self) -> None:
        assert operation_name("/{ver}/items", "get", version_placeholder="{ver}") == "getItems"


class TestParameterName:
    def test_sanitized(self) -> None:
        assert parameter_name("filter.someProperty") == "filterSomeProperty"

    def test_reserved_gets_underscore_prefix(self) -> None:
        assert parameter_name("default") == "_default"
        assert parameter_name("in") == "_in"

    def test_reserved_match_is_whole_word(self) -> None:
        assert parameter_name("index") == "index"

    def test_empty_reserved_words(self) -> None:
        assert parameter_name("default", reserved_words=()) == "default"

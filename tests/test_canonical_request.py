"""
Unit tests for canonical request construction
"""

import pytest

from chef_sdk.signing import (
    Request,
    HttpMethod,
    CanonicalRequestBuilder,
    build_canonical_request,
    normalize_path,
    hash_content,
    EMPTY_CONTENT_HASH,
)
from chef_sdk.exceptions import ValidationError, ErrorCodes

from conftest import USERS_CANONICAL_REQUEST


class TestRequest:
    """Test cases for the Request value type"""

    def test_method_string_is_coerced(self):
        request = Request(method="post", path="/users")
        assert request.method is HttpMethod.POST

    def test_str_body_is_utf8_encoded(self):
        request = Request(method="PUT", path="/nodes/n1", body="café")
        assert request.body == "café".encode("utf-8")

    def test_none_body_is_empty(self):
        assert Request(method="GET", path="/", body=None).body == b""

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Request(method="BREW", path="/coffee")
        assert exc_info.value.error_code == ErrorCodes.INVALID_METHOD

    def test_empty_method_rejected(self):
        with pytest.raises(ValidationError):
            Request(method="", path="/")

    def test_non_string_path_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Request(method="GET", path=None)
        assert exc_info.value.error_code == ErrorCodes.INVALID_PATH

    def test_unsupported_body_type_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Request(method="POST", path="/", body={"a": 1})
        assert exc_info.value.error_code == ErrorCodes.INVALID_BODY

    def test_request_is_immutable(self):
        request = Request(method="GET", path="/nodes")
        with pytest.raises(AttributeError):
            request.path = "/clients"


class TestNormalizePath:
    """Test cases for path normalization"""

    @pytest.mark.parametrize("raw, expected", [
        ("/users", "/users"),
        ("users", "/users"),
        ("/users?limit=10", "/users"),
        ("/search/node?q=name:*&rows=1000", "/search/node"),
        ("/users#top", "/users"),
        ("//organizations///acme/nodes", "/organizations/acme/nodes"),
        ("/nodes/", "/nodes"),
        ("/", "/"),
        ("", "/"),
        ("?q=1", "/"),
    ])
    def test_normalization(self, raw, expected):
        assert normalize_path(raw) == expected

    def test_control_characters_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_path("/users\nX-Injected: 1")
        assert exc_info.value.error_code == ErrorCodes.INVALID_PATH


class TestCanonicalRequest:
    """Test cases for build_canonical_request"""

    def test_known_layout(self, users_request):
        canonical = build_canonical_request(users_request, "user", "timestamp")
        assert canonical == USERS_CANONICAL_REQUEST

    def test_five_lines_in_fixed_order(self):
        request = Request(method="GET", path="/nodes?all=true")
        lines = build_canonical_request(request, "client", "2026-10-19T12:00:00Z").split("\n")

        assert lines == [
            "get",
            hash_content("/nodes"),
            EMPTY_CONTENT_HASH,
            "client",
            "2026-10-19T12:00:00Z",
        ]

    def test_query_string_does_not_change_output(self):
        plain = Request(method="GET", path="/nodes")
        with_query = Request(method="GET", path="/nodes?rows=5")
        assert build_canonical_request(plain, "u", "t") == build_canonical_request(with_query, "u", "t")

    @pytest.mark.parametrize("field", ["method", "path", "body", "principal", "timestamp"])
    def test_each_field_changes_output(self, field):
        base = dict(method="POST", path="/users", body=b"{}", principal="user", timestamp="t1")
        changed = dict(base)
        changed[field] = {
            "method": "PUT",
            "path": "/clients",
            "body": b"{ }",
            "principal": "other",
            "timestamp": "t2",
        }[field]

        def canonical(values):
            request = Request(method=values["method"], path=values["path"], body=values["body"])
            return build_canonical_request(request, values["principal"], values["timestamp"])

        assert canonical(base) != canonical(changed)

    def test_builder_exposes_hashes(self, users_request):
        builder = CanonicalRequestBuilder(users_request, "user", "timestamp")
        assert builder.hashed_path() == "5u9zB6L9cu/4TGJqhpkBCEHw5h0="
        assert builder.hashed_body() == "yLHOxvgIEtNw5UrZDxslOeMw1gw="

    @pytest.mark.parametrize("principal", ["", None, "bad\nuser"])
    def test_invalid_principal(self, users_request, principal):
        with pytest.raises(ValidationError) as exc_info:
            build_canonical_request(users_request, principal, "timestamp")
        assert exc_info.value.error_code == ErrorCodes.INVALID_PRINCIPAL

    @pytest.mark.parametrize("timestamp", ["", None, "2026-10-19 12:00:00", "t\n"])
    def test_invalid_timestamp(self, users_request, timestamp):
        with pytest.raises(ValidationError) as exc_info:
            build_canonical_request(users_request, "user", timestamp)
        assert exc_info.value.error_code == ErrorCodes.INVALID_TIMESTAMP

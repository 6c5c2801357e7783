"""Tests for path template helpers."""

from procapi.server.services.openapi import get_path_parameters, normalize_path, route_key


def test_get_path_parameters_in_order():
    assert get_path_parameters("/users/{id}/posts/{postId}") == ["id", "postId"]


def test_get_path_parameters_deduplicates():
    assert get_path_parameters("/copy/{id}/to/{id}") == ["id"]


def test_get_path_parameters_none():
    assert get_path_parameters("/users") == []


def test_normalize_path_strips_single_trailing_slash():
    assert normalize_path("/procedure/") == "/procedure"
    assert normalize_path("/procedure//") == "/procedure/"
    assert normalize_path("/procedure") == "/procedure"


def test_normalize_root_path():
    assert normalize_path("/") == "/"


def test_route_key_uppercases_method():
    assert route_key("get", "/users/") == ("GET", "/users")

"""
Testes de core/request_body_types.py
"""
import pytest

from core.constants import WebHookBodyType
from core.exceptions import InvalidArgumentError
from core.request_body_types import is_form, is_json, is_xml, matches_body_type


# ── Sem Content-Type ─────────────────────────────────────────────────────────


@pytest.mark.parametrize("check", [is_json, is_xml, is_form])
def test_missing_content_type_is_false(make_request, check):
    assert check(make_request()) is False


@pytest.mark.parametrize("check", [is_json, is_xml, is_form])
def test_none_request_raises_invalid_argument(check):
    with pytest.raises(InvalidArgumentError):
        check(None)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        is_json(None)


# ── JSON ─────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "content_type",
    [
        "application/json",
        "text/json",
        "application/hal+json",
        "APPLICATION/JSON",
        "Application/Vnd.Api+JSON",
        "application/json; charset=utf-8",
        "text/json; charset=utf-8",
        "application/problem+json; charset=utf-8",
    ],
)
def test_is_json_true(make_request, content_type):
    assert is_json(make_request(content_type)) is True


@pytest.mark.parametrize(
    "content_type",
    [
        "text/hal+json",
        "application/octet-stream",
        "application/xml",
        "application/jsonp",
        "application/json-patch",
        "text/plain",
        "json",
        "application/",
        ";;",
    ],
)
def test_is_json_false(make_request, content_type):
    assert is_json(make_request(content_type)) is False


# ── XML ──────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "content_type",
    [
        "application/xml",
        "text/xml",
        "application/rdf+xml",
        "TEXT/XML; charset=utf-8",
        "application/atom+xml",
    ],
)
def test_is_xml_true(make_request, content_type):
    assert is_xml(make_request(content_type)) is True


@pytest.mark.parametrize(
    "content_type",
    [
        "text/rdf+xml",
        "application/octet-stream",
        "application/json",
        "image/svg+xml",
        "xml",
    ],
)
def test_is_xml_false(make_request, content_type):
    assert is_xml(make_request(content_type)) is False


# ── Formulários ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "content_type",
    [
        "application/x-www-form-urlencoded",
        "application/x-www-form-urlencoded; charset=utf-8",
        "multipart/form-data; boundary=abc123",
    ],
)
def test_is_form_true(make_request, content_type):
    assert is_form(make_request(content_type)) is True


def test_is_form_false_for_json(make_request):
    assert is_form(make_request("application/json")) is False


# ── matches_body_type ────────────────────────────────────────────────────────


def test_matches_body_type_dispatches(make_request):
    request = make_request("application/hal+json")

    assert matches_body_type(request, WebHookBodyType.JSON) is True
    assert matches_body_type(request, WebHookBodyType.XML) is False
    assert matches_body_type(request, WebHookBodyType.FORM) is False


def test_matches_body_type_accepts_strings(make_request):
    assert matches_body_type(make_request("text/xml"), "XML") is True


def test_matches_body_type_rejects_unknown_body_type(make_request):
    with pytest.raises(ValueError):
        matches_body_type(make_request("application/json"), "yaml")


def test_matches_body_type_none_request():
    with pytest.raises(InvalidArgumentError):
        matches_body_type(None, WebHookBodyType.JSON)


# ── Pureza ───────────────────────────────────────────────────────────────────


def test_repeated_calls_return_same_result(make_request):
    request = make_request("application/hal+json")

    assert [is_json(request) for _ in range(5)] == [True] * 5
    assert [is_xml(request) for _ in range(5)] == [False] * 5
    assert request.headers.get("Content-Type") == "application/hal+json"

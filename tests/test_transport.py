"""Tests for the authenticated request executor."""

from __future__ import annotations

import pytest

from witclient.errors import HttpError, ProtocolError, RemoteError, TransportError
from witclient.transport.client import WitTransport, build_path

from tests.conftest import FakeResponse, FakeSession


def _transport(session: FakeSession) -> WitTransport:
    return WitTransport("tok", "https://wit.test/", "20170307", session=session, timeout=7)


def test_request_sets_auth_and_versioned_accept_headers() -> None:
    session = FakeSession([{"ok": True}])
    result = _transport(session).request("GET", "/message", {"q": "hi", "n": None})

    assert result == {"ok": True}
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://wit.test/message"
    assert call["params"] == {"q": "hi"}
    assert call["timeout"] == 7
    assert call["headers"]["Authorization"] == "Bearer tok"
    assert call["headers"]["Accept"] == "application/vnd.wit.20170307+json"
    assert call["headers"]["Content-Type"] == "application/json"


def test_non_200_raises_http_error_regardless_of_body() -> None:
    session = FakeSession([FakeResponse(status_code=404, body={"text": "fine"})])
    with pytest.raises(HttpError) as excinfo:
        _transport(session).request("GET", "/entities")
    assert excinfo.value.status_code == 404


def test_error_field_raises_remote_error() -> None:
    session = FakeSession([{"error": "bad token"}])
    with pytest.raises(RemoteError) as excinfo:
        _transport(session).request("GET", "/message")
    assert excinfo.value.remote_error == "bad token"


def test_list_bodies_are_returned_as_is() -> None:
    session = FakeSession([["wit$location", "intent"]])
    assert _transport(session).request("GET", "/entities") == ["wit$location", "intent"]


def test_non_json_body_raises_protocol_error() -> None:
    session = FakeSession([FakeResponse(raw="<html>")])
    with pytest.raises(ProtocolError):
        _transport(session).request("GET", "/message")


def test_connection_failure_raises_transport_error(transport_error) -> None:
    session = FakeSession([transport_error])
    with pytest.raises(TransportError) as excinfo:
        _transport(session).request("GET", "/message")
    assert excinfo.value.__cause__ is transport_error


def test_build_path_escapes_every_segment() -> None:
    assert build_path("entities", "a b/c", "values", "x?y") == "/entities/a%20b%2Fc/values/x%3Fy"

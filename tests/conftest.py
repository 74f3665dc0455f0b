"""Shared fixtures: a scripted stand-in for `requests.Session`."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable

import pytest
import requests

from witclient.client import Wit


@dataclass
class FakeResponse:
    status_code: int = 200
    body: Any = field(default_factory=dict)
    raw: str | None = None

    def json(self) -> Any:
        if self.raw is not None:
            return json.loads(self.raw)
        return self.body


class FakeSession:
    """Records every request and replays queued responses in order.

    Queue entries may be `FakeResponse`, a plain JSON value (wrapped in a 200),
    an exception instance (raised), or a callable taking the recorded call.
    """

    def __init__(self, responses: list | None = None):
        self.responses: list = list(responses or [])
        self.calls: list[dict[str, Any]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        call = {
            "method": method,
            "url": url,
            "params": dict(params or {}),
            "json": json,
            "headers": dict(headers or {}),
            "timeout": timeout,
        }
        self.calls.append(call)
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        item = self.responses.pop(0)
        if callable(item):
            item = item(call)
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, FakeResponse):
            return item
        return FakeResponse(body=item)

    def converse_calls(self) -> list[dict[str, Any]]:
        return [c for c in self.calls if c["url"].endswith("/converse")]


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def make_client(fake_session: FakeSession) -> Callable[..., Wit]:
    def _make(**kwargs: Any) -> Wit:
        kwargs.setdefault("access_token", "secret-token")
        kwargs.setdefault("api_host", "https://wit.test")
        kwargs.setdefault("api_version", "20160516")
        return Wit(session=fake_session, **kwargs)

    return _make


@pytest.fixture
def transport_error() -> requests.exceptions.ConnectionError:
    return requests.exceptions.ConnectionError("connection refused")

"""Authenticated HTTP transport for the Wit API.

Architectural role:
    Executes one request per call against the configured host and normalizes the
    response into parsed JSON or a raised `WitError`.

Request flow:
    `Wit.<operation>` -> `WitTransport.request(method, path, params, payload)`
    -> `requests.Session.request(...)` -> status/body checks -> parsed JSON.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the
    configured timeout.

Failure handling model:
    - Connection/timeout failures -> `TransportError`.
    - Status other than 200 -> `HttpError` (body ignored).
    - Non-JSON 200 body -> `ProtocolError`.
    - JSON object with an `error` field -> `RemoteError`.
"""

import logging
from urllib.parse import quote

import requests

from witclient.config import REQUEST_TIMEOUT, accept_header
from witclient.errors import HttpError, ProtocolError, RemoteError, TransportError


def quote_segment(segment) -> str:
    """Percent-escape one URL path segment, slashes included."""
    return quote(str(segment), safe="")


def build_path(*segments) -> str:
    """Join escaped path segments into an absolute API path."""
    return "/" + "/".join(quote_segment(s) for s in segments)


class WitTransport:
    """Bearer-token HTTP executor bound to one host and API version."""

    def __init__(
        self,
        access_token: str,
        api_host: str,
        api_version: str,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
        logger: logging.Logger | None = None,
    ):
        self._access_token = access_token
        self._api_host = api_host.rstrip("/")
        self._api_version = api_version
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    @property
    def api_host(self) -> str:
        return self._api_host

    @property
    def api_version(self) -> str:
        return self._api_version

    def headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._access_token}",
            "Accept": accept_header(self._api_version),
            "Content-Type": "application/json",
        }

    def request(self, method: str, path: str, params: dict | None = None, payload=None):
        """Send one request and return the parsed JSON body.

        Args:
            method: HTTP verb (`GET`, `POST`, `PUT`, `DELETE`).
            path: API path starting with `/`, already segment-escaped.
            params: Query parameters; `None` values are dropped.
            payload: JSON body, or `None` for no body.

        Returns:
            Parsed JSON value.
        """
        url = self._api_host + path
        query = {k: v for k, v in (params or {}).items() if v is not None}

        self._logger.debug("%s %s %s", method, url, query)

        try:
            response = self._session.request(
                method,
                url,
                params=query,
                json=payload,
                headers=self.headers(),
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as err:
            raise TransportError(f"{method} {url} failed: {err}") from err

        if response.status_code != 200:
            raise HttpError(response.status_code)

        try:
            data = response.json()
        except ValueError as err:
            raise ProtocolError(f"{method} {url} returned a non-JSON body") from err

        if isinstance(data, dict) and "error" in data:
            raise RemoteError(data["error"])

        self._logger.debug("%s %s %s", method, url, data)
        return data

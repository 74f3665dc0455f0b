"""Python client for the Wit.ai natural-language-understanding HTTP API.

Architectural role:
    Exposes the `Wit` facade and the error taxonomy. Lower layers are split into
    `transport` (HTTP execution and payload checks), `core` (conversation loop,
    session tracking, action registry) and `api` (interactive CLI adapter).
"""

from witclient.client import Wit
from witclient.errors import (
    WitError,
    ConfigurationError,
    InvalidArgument,
    StepLimitExceeded,
    ProtocolError,
    RemoteRefusal,
    UnknownAction,
    UnknownResponseType,
    HttpError,
    RemoteError,
    SchemaError,
    TransportError,
)

__all__ = [
    "Wit",
    "WitError",
    "ConfigurationError",
    "InvalidArgument",
    "StepLimitExceeded",
    "ProtocolError",
    "RemoteRefusal",
    "UnknownAction",
    "UnknownResponseType",
    "HttpError",
    "RemoteError",
    "SchemaError",
    "TransportError",
]

"""`/converse` response tags consumed by `witclient.core.conversation`.

Decoding is closed: any tag not listed in `ResponseType` raises
`UnknownResponseType`. The legacy `merge` tag (API version 20160516) is
rewritten to an `action` response naming the `merge` action.
"""

from enum import Enum

from witclient.errors import ProtocolError, UnknownResponseType


class ResponseType(str, Enum):
    MSG = "msg"
    ACTION = "action"
    STOP = "stop"
    ERROR = "error"
    MERGE = "merge"


def read_type(response) -> str:
    """Return the raw `type` tag, raising `ProtocolError` when absent."""
    if not isinstance(response, dict) or response.get("type") is None:
        raise ProtocolError("Couldn't find type in Wit response")
    return response["type"]


def normalize_response(response: dict) -> dict:
    """Return a copy of `response` with legacy `merge` mapped to an action."""
    normalized = dict(response)
    if normalized.get("type") == ResponseType.MERGE.value:
        normalized["type"] = ResponseType.ACTION.value
        normalized["action"] = "merge"
    return normalized


def decode_type(response: dict) -> ResponseType:
    """Map a normalized response onto one of the dispatchable tags.

    `merge` is only valid before `normalize_response`, so it is rejected here.
    """
    tag = read_type(response)
    try:
        response_type = ResponseType(tag)
    except ValueError:
        raise UnknownResponseType(tag) from None
    if response_type is ResponseType.MERGE:
        raise UnknownResponseType(tag)
    return response_type

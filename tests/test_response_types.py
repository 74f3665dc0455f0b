"""Tests for `/converse` response tag decoding."""

from __future__ import annotations

import pytest

from witclient.core.response_types import ResponseType, decode_type, normalize_response
from witclient.errors import ProtocolError, UnknownResponseType


def test_legacy_merge_is_decoded_only_after_normalizing() -> None:
    raw = {"type": "merge"}
    with pytest.raises(UnknownResponseType):
        decode_type(raw)

    normalized = normalize_response(raw)
    assert decode_type(normalized) is ResponseType.ACTION
    assert normalized["action"] == "merge"
    assert raw == {"type": "merge"}


def test_unknown_and_missing_tags() -> None:
    with pytest.raises(UnknownResponseType) as excinfo:
        decode_type({"type": "dance"})
    assert excinfo.value.response_type == "dance"
    with pytest.raises(ProtocolError):
        decode_type({"msg": "no type"})

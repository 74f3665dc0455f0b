"""Whitelisting and shape checks for entity-management request bodies.

Unknown fields are dropped before validation; known fields must match the
shape in `FIELD_TYPES` (string or list). The first mismatch, in payload order,
raises `SchemaError`.
"""

from witclient.errors import InvalidArgument, SchemaError


FIELD_TYPES = {
    "id": str,
    "doc": str,
    "value": str,
    "values": list,
    "lookups": list,
    "expression": str,
    "expressions": list,
    "metadata": str,
}

_SHAPE_NAMES = {str: "String", list: "Array"}

# Accepted fields per endpoint.
ENTITY_CREATE_FIELDS = ("id", "doc", "values", "lookups")
ENTITY_UPDATE_FIELDS = ("id", "doc", "values")
VALUE_CREATE_FIELDS = ("value", "expressions", "metadata")
EXPRESSION_CREATE_FIELDS = ("expression",)


def whitelist(payload: dict, allowed) -> dict:
    """Return a copy of `payload` restricted to the `allowed` keys."""
    if not isinstance(payload, dict):
        raise InvalidArgument("payload should be a dict")
    return {str(k): v for k, v in payload.items() if str(k) in allowed}


def validate_payload(payload: dict) -> dict:
    """Raise `SchemaError` for the first field whose value has the wrong shape."""
    for field, value in payload.items():
        expected = FIELD_TYPES[field]
        if not isinstance(value, expected):
            raise SchemaError(field, _SHAPE_NAMES[expected])
    return payload


def prepare_payload(payload: dict, allowed) -> dict:
    """Whitelist then validate an entity request body."""
    return validate_payload(whitelist(payload, allowed))

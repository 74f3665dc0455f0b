"""Exception taxonomy for the Wit client.

All library failures derive from `WitError` so callers (and the CLI) can catch
a single type. Nothing here is retried internally.
"""


class WitError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(WitError):
    """Client was built without something an operation needs."""


class InvalidArgument(WitError, ValueError):
    """Caller passed a malformed argument, e.g. a non-dict context."""


class StepLimitExceeded(WitError):
    """The conversation loop used up its step budget."""


class ProtocolError(WitError):
    """Remote response did not have the expected shape."""


class UnknownResponseType(ProtocolError):
    """Remote response carried a `type` tag the loop does not handle."""

    def __init__(self, response_type):
        super().__init__(f"unknown type: {response_type}")
        self.response_type = response_type


class RemoteRefusal(WitError):
    """Remote conversation step answered with `type == "error"`."""


class UnknownAction(WitError):
    """No callback is registered for the action the loop must run."""

    def __init__(self, action_name):
        super().__init__(f"unknown action: {action_name}")
        self.action_name = action_name


class HttpError(WitError):
    """HTTP status other than 200."""

    def __init__(self, status_code):
        super().__init__(f"HTTP error code={status_code}")
        self.status_code = status_code


class RemoteError(WitError):
    """HTTP 200 whose JSON body carries an `error` field."""

    def __init__(self, remote_error):
        super().__init__(f"Wit responded with an error: {remote_error}")
        self.remote_error = remote_error


class SchemaError(WitError):
    """Request payload field has the wrong shape."""

    def __init__(self, field, expected):
        super().__init__(f"{field} in request body must be {expected} type")
        self.field = field
        self.expected = expected


class TransportError(WitError):
    """Request never produced an HTTP response (DNS, TLS, timeout, ...)."""

"""Environment-driven defaults for the Wit client.

Architectural role:
    Centralizes API host/version selection and access-token lookup for
    `witclient.client.Wit` and `witclient.transport.client.WitTransport`.

Determinism:
    Values are resolved at import time from the process environment (after
    `load_dotenv()`), plus runtime key-file reads in `load_access_token`.

Failure behavior:
    Missing token material is represented as `None`; `Wit` turns it into a
    `ConfigurationError`.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Endpoint and contract version.
WIT_API_HOST = os.getenv("WIT_URL", "https://api.wit.ai")
WIT_API_VERSION = os.getenv("WIT_API_VERSION", "20160516")

# Conversation loop budget used when callers do not pass `max_steps`.
DEFAULT_MAX_STEPS = 5

# Seconds before the HTTP layer gives up on a single request.
REQUEST_TIMEOUT = 120

LEARN_MORE = "Learn more at https://wit.ai/docs/quickstart"

DEPRECATION_NOTICE = (
    "Stories and POST /converse have been deprecated. "
    "This will break in February 2018!"
)

# Consumed by the CLI only; the library never configures logging handlers.
LOG_LEVEL = os.getenv("WIT_LOG_LEVEL", "INFO")


def accept_header(api_version: str) -> str:
    """Return the versioned `accept` header value for `api_version`."""
    return f"application/vnd.wit.{api_version}+json"


def load_access_token(path=None):
    """Load the server access token from the environment or a key file.

    Resolution order:
        1. `WIT_ACCESS_TOKEN` environment variable.
        2. Raw file contents at `path`, when given.

    Args:
        path: Optional key file path.

    Returns:
        Token string or `None` when not available.

    Edge cases:
        - Missing or empty file returns `None`.
    """
    env_value = os.getenv("WIT_ACCESS_TOKEN")
    if env_value:
        return env_value
    if not path or not os.path.exists(path):
        return None
    with open(path, "r") as f:
        token = f.read().strip()
    return token or None

"""`Wit` facade: the public entrypoint of the client library.

Architectural role:
    Binds configuration (token, host, version, logger) to a `WitTransport`,
    owns the per-client `SessionTracker` and optional `ActionRegistry`, and
    exposes one method per API operation.

Operations:
    - NLU: `message`, `converse`, `run_actions`.
    - Entities: `get_entities`, `post_entities`, `get_entity`, `put_entities`,
      `delete_entities`, `post_values`, `delete_values`, `post_expressions`,
      `delete_expressions`.
    - Interactive: `interactive` (REPL over `message`).

Failure behavior:
    Every operation raises a `WitError` subclass synchronously; nothing is
    retried.
"""

import logging

from witclient.config import (
    DEFAULT_MAX_STEPS,
    DEPRECATION_NOTICE,
    REQUEST_TIMEOUT,
    WIT_API_HOST,
    WIT_API_VERSION,
    load_access_token,
)
from witclient.core.actions import ActionRegistry
from witclient.core.conversation import ConversationRunner
from witclient.core.session_tracker import SessionTracker
from witclient.errors import ConfigurationError, InvalidArgument
from witclient.transport.client import WitTransport, build_path
from witclient.transport.payload import (
    ENTITY_CREATE_FIELDS,
    ENTITY_UPDATE_FIELDS,
    EXPRESSION_CREATE_FIELDS,
    VALUE_CREATE_FIELDS,
    prepare_payload,
)


DEFAULT_LOGGER_NAME = "witclient"


class Wit:
    """Client for one Wit app, identified by its server access token."""

    def __init__(
        self,
        access_token=None,
        actions=None,
        logger=None,
        api_host=None,
        api_version=None,
        session=None,
        timeout=REQUEST_TIMEOUT,
        token_file=None,
    ):
        access_token = access_token or load_access_token(token_file)
        if not access_token:
            raise ConfigurationError(
                "An access token is required (pass access_token or token_file, or set WIT_ACCESS_TOKEN)"
            )

        self._logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self._transport = WitTransport(
            access_token,
            api_host or WIT_API_HOST,
            api_version or WIT_API_VERSION,
            session=session,
            timeout=timeout,
            logger=self._logger,
        )

        self._actions = None
        if actions is not None:
            self._logger.warning(DEPRECATION_NOTICE)
            self._actions = ActionRegistry(actions, self._logger)

        self._sessions = SessionTracker()
        self._runner = ConversationRunner(
            self.converse, self._actions, self._sessions, self._logger
        )

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def api_host(self) -> str:
        return self._transport.api_host

    @property
    def api_version(self) -> str:
        return self._transport.api_version

    @property
    def actions(self) -> ActionRegistry | None:
        return self._actions

    @property
    def sessions(self) -> SessionTracker:
        return self._sessions

    # =========================================================
    # NLU
    # =========================================================

    def message(self, msg):
        """Parse `msg` with `GET /message` and return the raw result."""
        return self._transport.request("GET", "/message", {"q": msg})

    def converse(self, session_id, msg, context=None, reset=None):
        """Run one `POST /converse` exchange.

        Args:
            session_id: Caller-defined conversation id.
            msg: User text, or `None` to ask for the next step.
            context: JSON-object context sent as the request body.
            reset: When truthy, asks the server to reset the last turn.
        """
        if context is None:
            context = {}
        if not isinstance(context, dict):
            raise InvalidArgument("context should be a dict")
        params = {
            "session_id": session_id,
            "q": msg,
            "reset": "true" if reset else None,
        }
        return self._transport.request("POST", "/converse", params, context)

    def run_actions(self, session_id, message, context=None, max_steps=DEFAULT_MAX_STEPS):
        """Drive `/converse` with the registered actions until `stop`.

        A later call for the same `session_id` preempts this one; the stale
        call then returns its last context without running more callbacks.
        """
        return self._runner.run(session_id, message, context, max_steps)

    # =========================================================
    # ENTITIES
    # =========================================================

    def get_entities(self):
        return self._transport.request("GET", "/entities")

    def post_entities(self, payload):
        body = prepare_payload(payload, ENTITY_CREATE_FIELDS)
        return self._transport.request("POST", "/entities", payload=body)

    def get_entity(self, entity_id):
        return self._transport.request("GET", build_path("entities", entity_id))

    def put_entities(self, entity_id, payload):
        body = prepare_payload(payload, ENTITY_UPDATE_FIELDS)
        return self._transport.request("PUT", build_path("entities", entity_id), payload=body)

    def delete_entities(self, entity_id):
        return self._transport.request("DELETE", build_path("entities", entity_id))

    def post_values(self, entity_id, payload):
        body = prepare_payload(payload, VALUE_CREATE_FIELDS)
        return self._transport.request(
            "POST", build_path("entities", entity_id, "values"), payload=body
        )

    def delete_values(self, entity_id, value):
        return self._transport.request(
            "DELETE", build_path("entities", entity_id, "values", value)
        )

    def post_expressions(self, entity_id, value, payload):
        body = prepare_payload(payload, EXPRESSION_CREATE_FIELDS)
        return self._transport.request(
            "POST",
            build_path("entities", entity_id, "values", value, "expressions"),
            payload=body,
        )

    def delete_expressions(self, entity_id, value, expression):
        return self._transport.request(
            "DELETE",
            build_path("entities", entity_id, "values", value, "expressions", expression),
        )

    # =========================================================
    # INTERACTIVE
    # =========================================================

    def interactive(self):
        """Read lines from stdin and print `message` results until EOF/Ctrl-C."""
        # Imported lazily; the CLI module imports this one.
        from witclient.api.cli import run_repl

        run_repl(self)

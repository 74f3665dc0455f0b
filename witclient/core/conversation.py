"""Client-side conversation loop over the `/converse` endpoint.

Control flow (per `run` call):
    1. Validate configuration and context, take a request number for the session.
    2. Repeat converse steps until a terminal outcome or the step budget runs out.
    3. Release the session entry if this call still owns it.

Step semantics:
    - `stop` ends the loop with the current context.
    - `msg` calls `send(request, response)`; the context is unchanged.
    - `action` calls the named callback; its return value becomes the context.
    - `error` raises `RemoteRefusal`; unknown tags raise `UnknownResponseType`.

Preemption:
    A newer `run` call for the same session supersedes an older one. The older
    loop checks ownership after each converse response and again after the
    callback, and returns its current context as soon as it is stale. An HTTP
    call already in flight is not cancelled.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from witclient.config import DEFAULT_MAX_STEPS, LEARN_MORE
from witclient.core.actions import ActionRegistry
from witclient.core.response_types import (
    ResponseType,
    decode_type,
    normalize_response,
    read_type,
)
from witclient.core.session_tracker import SessionTracker
from witclient.errors import (
    ConfigurationError,
    InvalidArgument,
    RemoteRefusal,
    StepLimitExceeded,
)


class StepStatus(Enum):
    CONTINUE = "continue"
    STOP = "stop"
    PREEMPTED = "preempted"


@dataclass
class StepOutcome:
    """Result of one converse step: what to do next and the context to carry."""

    status: StepStatus
    context: dict


class ConversationRunner:
    """Drives `/converse` and dispatches responses to registered actions."""

    def __init__(
        self,
        converse: Callable[[str, str | None, dict], dict],
        actions: ActionRegistry | None,
        tracker: SessionTracker | None = None,
        logger: logging.Logger | None = None,
    ):
        self._converse = converse
        self._actions = actions
        self._tracker = tracker if tracker is not None else SessionTracker()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def tracker(self) -> SessionTracker:
        return self._tracker

    def run(self, session_id: str, message: str | None, context: dict | None = None,
            max_steps: int = DEFAULT_MAX_STEPS) -> dict:
        """Run converse steps for `session_id` and return the final context.

        Raises:
            ConfigurationError: no action registry was supplied.
            InvalidArgument: `context` is not a dict.
            StepLimitExceeded: `max_steps` converse calls did not reach `stop`.
        """
        if self._actions is None:
            raise ConfigurationError(
                "You must provide the `actions` parameter to be able to use run_actions. "
                + LEARN_MORE
            )
        if context is None:
            context = {}
        if not isinstance(context, dict):
            raise InvalidArgument("context should be a dict")

        request_number = self._tracker.begin(session_id)
        try:
            return self._loop(session_id, request_number, message, context, max_steps)
        finally:
            self._tracker.end_if_latest(session_id, request_number)

    def _loop(self, session_id, request_number, message, context, steps_left):
        while True:
            if steps_left <= 0:
                raise StepLimitExceeded("Max steps reached, stopping.")

            outcome = self.step(session_id, request_number, message, context)
            context = outcome.context

            if outcome.status is StepStatus.PREEMPTED:
                self._logger.debug(
                    "Session %s request %s superseded, returning early",
                    session_id,
                    request_number,
                )
            if outcome.status is not StepStatus.CONTINUE:
                return context

            message = None
            steps_left -= 1

    def step(self, session_id: str, request_number: int, message: str | None,
             context: dict) -> StepOutcome:
        """Run a single converse exchange and at most one callback."""
        response = self._converse(session_id, message, context)
        read_type(response)

        if not self._tracker.is_latest(session_id, request_number):
            return StepOutcome(StepStatus.PREEMPTED, context)

        response = normalize_response(response)

        self._logger.debug("Context: %s", context)
        self._logger.debug("Response type: %s", response["type"])

        response_type = decode_type(response)

        if response_type is ResponseType.ERROR:
            raise RemoteRefusal("Oops, I don't know what to do.")

        if response_type is ResponseType.STOP:
            return StepOutcome(StepStatus.STOP, context)

        request = {
            "session_id": session_id,
            "context": dict(context),
            "text": message,
            "entities": response.get("entities"),
        }

        if response_type is ResponseType.MSG:
            self._actions.send(request, {
                "text": response.get("msg"),
                "quickreplies": response.get("quickreplies"),
            })
        else:
            context = self._actions.run(response.get("action"), request)
            if context is None:
                self._logger.warning("missing context - did you forget to return it?")
                context = {}

        if not self._tracker.is_latest(session_id, request_number):
            return StepOutcome(StepStatus.PREEMPTED, context)

        return StepOutcome(StepStatus.CONTINUE, context)

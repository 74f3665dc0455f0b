"""Caller-supplied action callbacks for the conversation loop.

Two callback shapes are recognized:
    - `send(request, response)`: renders a bot message; return value ignored.
    - `<name>(request)`: runs a named action and returns the new context.

Validation is soft. Defects found at construction are logged as warnings and
the registry is still built, so existing integrations keep working.
"""

import inspect
import logging
from typing import Any, Mapping, Protocol

from witclient.config import LEARN_MORE
from witclient.errors import UnknownAction


SEND_ACTION = "send"
REQUIRED_ACTIONS = (SEND_ACTION,)


class SendHandler(Protocol):
    def __call__(self, request: dict, response: dict) -> Any:
        ...


class ActionHandler(Protocol):
    def __call__(self, request: dict) -> dict | None:
        ...


def _accepts_positional(func, count: int) -> bool | None:
    """Return whether `func` can be called with `count` positional args.

    `None` means the signature could not be inspected (some builtins).
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True


def validate_actions(actions: Mapping, logger: logging.Logger) -> Mapping:
    """Log a warning for every defect in `actions` and return it unchanged."""
    for name in REQUIRED_ACTIONS:
        if name not in actions:
            logger.warning("The %s action is missing. %s", name, LEARN_MORE)

    for name, handler in actions.items():
        if not isinstance(name, str) or not name.isidentifier():
            logger.warning("The '%s' action name should be an identifier string", name)

        if not callable(handler):
            logger.warning("The '%s' action should be a callable", name)
            continue

        if name == SEND_ACTION:
            if _accepts_positional(handler, 2) is False:
                logger.warning(
                    "The 'send' action should take 2 arguments: request and response. %s",
                    LEARN_MORE,
                )
        elif _accepts_positional(handler, 1) is False:
            logger.warning(
                "The '%s' action should take 1 argument: request. %s", name, LEARN_MORE
            )

    return actions


class ActionRegistry:
    """Read-only view over validated action callbacks."""

    def __init__(self, actions: Mapping, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(__name__)
        self._actions = dict(validate_actions(actions, self._logger))

    def __contains__(self, name) -> bool:
        return name in self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def names(self) -> list:
        return list(self._actions)

    def require(self, name):
        if name not in self._actions:
            raise UnknownAction(name)
        return self._actions[name]

    def send(self, request: dict, response: dict) -> None:
        handler: SendHandler = self.require(SEND_ACTION)
        handler(request, response)

    def run(self, name: str, request: dict):
        handler: ActionHandler = self.require(name)
        return handler(request)

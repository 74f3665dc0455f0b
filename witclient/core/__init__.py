"""Conversation core package.

Architectural role:
    Implements the client-side conversation loop that drives `/converse` and
    dispatches to caller callbacks.

Composition:
    - `session_tracker`: last-caller-wins request counters per session id.
    - `actions`: caller callback registry with soft validation.
    - `response_types`: closed set of `/converse` response tags.
    - `conversation`: the step loop itself (`ConversationRunner`).
"""

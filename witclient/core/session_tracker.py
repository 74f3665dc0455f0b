"""Per-session request counters used to preempt stale conversation loops.

Each `run_actions` call for a session takes the next request number. A loop
holding an older number is stale and must stop producing side effects; the
entry is removed only by the call that still holds the latest number.
"""

import threading


class SessionTracker:
    """Thread-safe mapping of session id -> latest request number."""

    def __init__(self):
        self._sessions: dict[str, int] = {}
        self._lock = threading.Lock()

    def begin(self, session_id: str) -> int:
        """Record a new call for `session_id` and return its request number."""
        with self._lock:
            request_number = self._sessions.get(session_id, 0) + 1
            self._sessions[session_id] = request_number
            return request_number

    def is_latest(self, session_id: str, request_number: int) -> bool:
        with self._lock:
            return self._sessions.get(session_id) == request_number

    def end_if_latest(self, session_id: str, request_number: int) -> bool:
        """Drop the entry when `request_number` still owns it.

        Returns:
            True when the entry was removed.
        """
        with self._lock:
            if self._sessions.get(session_id) != request_number:
                return False
            del self._sessions[session_id]
            return True

    def current(self, session_id: str) -> int | None:
        with self._lock:
            return self._sessions.get(session_id)

    def __contains__(self, session_id) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

# users/services/session.py

"""
SESSION CONTEXT

An explicit object carrying "who is signed in", passed by reference to every
gate instead of living in module-level state.

- loading=True until the identity check resolves; gates must not redirect
  while loading (see permissions.guards.evaluate_gate)
- subscribe(callback) registers a listener called with the new principal on
  every change; it returns the matching unsubscribe function
"""

from __future__ import annotations

from typing import Callable, Optional

Listener = Callable[[Optional[object]], None]


class SessionContext:
    def __init__(self, principal=None, *, loading: bool = True):
        self._principal = principal
        self._loading = loading
        self._listeners: list[Listener] = []

    @classmethod
    def for_request(cls, request) -> "SessionContext":
        """A resolved session for a DRF/Django request (authentication already ran)."""
        user = getattr(request, "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            user = None
        return cls(principal=user, loading=False)

    @property
    def principal(self):
        return self._principal

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def is_authenticated(self) -> bool:
        return not self._loading and self._principal is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def resolve(self, principal) -> None:
        """Identity check finished (principal may be None)."""
        self._principal = principal
        self._loading = False
        self._notify()

    def sign_out(self) -> None:
        self.resolve(None)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._principal)

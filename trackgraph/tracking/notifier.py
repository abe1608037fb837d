"""Listener lists and named-action forwarding for tracking notifications."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional


class Notifier:
    """Keeps per-event listener lists and invokes them in registration order."""

    def __init__(
        self,
        action_names: Optional[Dict[str, Optional[str]]] = None,
        action_handler: Optional[Callable[[str, Any], None]] = None,
    ):
        """Initialize the notifier.

        Args:
            action_names: Mapping from event name to the action name to send
            action_handler: Callable receiving (action_name, payload)
        """
        self._listeners: Dict[str, List[Callable[[Any], None]]] = {}
        self.action_names: Dict[str, Optional[str]] = dict(action_names or {})
        self.action_handler = action_handler

    def on(self, event: str, listener: Callable[[Any], None]) -> None:
        """Register ``listener`` for ``event``."""
        self._listeners.setdefault(event, []).append(listener)

    def off(self, event: str, listener: Callable[[Any], None]) -> None:
        """Remove ``listener`` from ``event``; unknown listeners are ignored."""
        listeners = self._listeners.get(event)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def trigger(self, event: str, payload: Any = None) -> None:
        """Call every listener of ``event`` with ``payload``."""
        # Copy so listeners may unsubscribe while being called
        for listener in list(self._listeners.get(event, ())):
            listener(payload)

    def send_action(self, event: str, payload: Any = None) -> bool:
        """Forward ``payload`` to the action handler if ``event`` has an action name.

        Returns:
            True if the action was sent
        """
        action = self.action_names.get(event)
        if not action or self.action_handler is None:
            return False
        self.action_handler(action, payload)
        return True

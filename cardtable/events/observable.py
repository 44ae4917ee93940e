"""
Observer registry for the table engine.

Observers are plain callables taking the observable as their only argument.
They read whatever state they need from it; no payload is sent.
"""

import logging
from typing import Callable, List

logger = logging.getLogger("cardtable.events")

Observer = Callable[["Observable"], None]


class Observable:
    """
    Holds an explicit list of observer callbacks.

    Notification is synchronous and in registration order. Observers must not
    mutate the observable while being notified.
    """

    def __init__(self):
        self._observers: List[Observer] = []

    def register_observer(self, callback: Observer) -> Callable[[], None]:
        """
        Register a callback to run on every notification.

        Args:
            callback: Function called with this observable

        Returns:
            Unsubscribe function that removes the callback again
        """
        self._observers.append(callback)

        def unsubscribe():
            self.remove_observer(callback)

        return unsubscribe

    def remove_observer(self, callback: Observer) -> None:
        try:
            self._observers.remove(callback)
        except ValueError:
            logger.debug("Observer %r was not registered", callback)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def notify_observers(self) -> None:
        """Invoke every registered observer with this observable."""
        for callback in list(self._observers):
            try:
                callback(self)
            except Exception as e:
                logger.error(f"Error in observer {callback!r}: {e}", exc_info=True)

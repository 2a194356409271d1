"""
Events Module
Minimal event target and a self-detaching handler factory.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


@dataclass
class Event:
    """
    Represents one dispatched event.
    """
    type: str
    detail: Any = None
    current_target: Optional['EventTarget'] = None


class EventTarget:
    """
    Keeps listeners per event type and calls them on dispatch.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Callable[[Event], Any]]] = {}

    def add_event_listener(self, event_type: str, handler: Callable[[Event], Any]) -> None:
        handlers = self._listeners.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def remove_event_listener(self, event_type: str, handler: Callable[[Event], Any]) -> None:
        handlers = self._listeners.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def listeners(self, event_type: str) -> List[Callable[[Event], Any]]:
        return list(self._listeners.get(event_type, []))

    def dispatch_event(self, event: Event) -> None:
        """
        Call every listener registered for event.type.

        Listeners are snapshotted first, so a listener removing itself does
        not skip the next one.
        """
        event.current_target = self
        for handler in self.listeners(event.type):
            handler(event)


def until(callback: Callable[[Event], Any], checker: Callable[[Event], Any]) -> Callable[[Event], None]:
    """
    Respond to an event only until a condition is met.

    Args:
        callback: Called with every event the handler receives
        checker: Once it returns a truthy value, the handler removes itself
            from event.current_target (callback still gets that event)

    Returns:
        callable: Handler to register with EventTarget.add_event_listener

    Example:
        >>> counter = {"n": 0}
        >>> handler = until(lambda e: counter.update(n=counter["n"] + 1),
        ...                 lambda e: counter["n"] >= 4)
        >>> button.add_event_listener("click", handler)
    """
    def handler(event: Event) -> None:
        if checker(event):
            event.current_target.remove_event_listener(event.type, handler)

        callback(event)

    return handler

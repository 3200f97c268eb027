"""Named events delivered to subscribed callbacks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

EventData = Union[int, bool, float, str]
EventFunction = Callable[["Event"], Any]


@dataclass
class Event:
    """A named message; a ``receiver`` restricts delivery to that subscriber."""

    name: str = ""
    receiver: Optional[object] = None
    data: EventData = 0


class Notifiable(ABC):
    """Something that handles events."""

    @abstractmethod
    def on_notify(self, event: Event) -> None:
        """Handle ``event``."""


@dataclass
class _Observer:
    receiver: Optional[object]
    function: EventFunction


class EventManager:
    """Keeps subscribers per event name and calls them on notify."""

    def __init__(self) -> None:
        self._events: Dict[str, List[_Observer]] = {}

    def initialize(self) -> None:
        """Start with no subscribers."""
        self._events.clear()

    def shutdown(self) -> None:
        """Drop all subscribers."""
        self._events.clear()

    def update(self) -> None:
        """Forget event names that no longer have any subscribers."""
        for name in [name for name, observers in self._events.items() if not observers]:
            del self._events[name]

    def subscribe(self, name: str, function: EventFunction, receiver: Optional[object] = None) -> None:
        self._events.setdefault(name, []).append(_Observer(receiver, function))

    def unsubscribe(self, name: str, receiver: Optional[object]) -> None:
        """Remove the first subscription to ``name`` made for ``receiver``."""
        observers = self._events.get(name, [])
        for index, observer in enumerate(observers):
            if observer.receiver is receiver:
                del observers[index]
                break

    def notify(self, event: Event) -> None:
        """Call every subscriber of ``event.name`` that matches its receiver."""
        for observer in list(self._events.get(event.name, ())):
            if event.receiver is None or event.receiver is observer.receiver:
                observer.function(event)
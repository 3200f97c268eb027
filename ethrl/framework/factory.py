"""Game-object base class and the registry that creates objects by name."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Type

from ethrl.core.logger import log


class GameObject(ABC):
    """Base of everything the factory can create."""

    def clone(self) -> GameObject:
        """Return an independent copy of this object."""
        return copy.deepcopy(self)

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the object after it has been configured."""

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""


class Factory:
    """Creates game objects from registered classes or prefab instances."""

    _instance: Optional[Factory] = None

    def __init__(self) -> None:
        self._registry: Dict[str, Callable[[], GameObject]] = {}

    @classmethod
    def instance(cls) -> Factory:
        """The shared factory."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, key: str, cls: Type[GameObject]) -> None:
        """Make ``create(key)`` build a fresh ``cls()``."""
        self._registry[key] = cls

    def register_prefab(self, key: str, instance: GameObject) -> None:
        """Make ``create(key)`` return a clone of ``instance``."""
        self._registry[key] = instance.clone

    def create(self, key: str) -> Optional[GameObject]:
        """A new object for ``key``, or None if nothing is registered under it."""
        creator = self._registry.get(key)
        if creator is None:
            log("Error could not find key %s", key)
            return None
        return creator()

    def shutdown(self) -> None:
        self._registry.clear()
"""Named, shared resources created on first request and cached."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

R = TypeVar("R", bound="Resource")


class Resource(ABC):
    """Something loaded by name, such as a texture, font or model."""

    @abstractmethod
    def create(self, name: str, *args: Any) -> None:
        """Load the resource called ``name``; raise if it cannot be loaded."""


class ResourceManager:
    """Caches resources by name so each is loaded once."""

    def __init__(self) -> None:
        self._resources: Dict[str, Resource] = {}

    def initialize(self) -> None:
        """Start with an empty cache."""
        self._resources.clear()

    def shutdown(self) -> None:
        """Forget every cached resource."""
        self._resources.clear()

    def get(self, name: str, resource_type: Type[R], *args: Any) -> Optional[R]:
        """The cached resource ``name``, creating it with ``args`` on first use.

        Returns None if a resource of another type is already cached under ``name``.
        """
        cached = self._resources.get(name)
        if cached is not None:
            return cached if isinstance(cached, resource_type) else None
        resource = resource_type()
        resource.create(name, *args)
        self._resources[name] = resource
        return resource
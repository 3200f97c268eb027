"""Base class for a game: owns a scene and keeps the score."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ethrl.framework.scene import Scene


class Game(ABC):
    """A game drives its scene each frame and accumulates points."""

    def __init__(self) -> None:
        self.scene: Optional[Scene] = None
        self.score = 0

    @abstractmethod
    def initialize(self) -> None:
        """Build the scene and set up the game."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release the scene."""

    @abstractmethod
    def update(self) -> None:
        """Advance the game by one frame."""

    @abstractmethod
    def draw(self, renderer: Any) -> None:
        """Draw the current frame."""

    def add_points(self, points: int) -> None:
        self.score += points
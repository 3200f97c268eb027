"""Frame animation from sprite sheets, in named sequences."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, TypeVar

from ethrl.components.render import RenderComponent
from ethrl.framework.actor import Actor
from ethrl.maths.color import Rect
from ethrl.maths.mathutils import mod
from ethrl.maths.vector2 import Vector2
from ethrl.renderer.texture import Texture
from ethrl.serialization import get_float, get_int, get_string

T = TypeVar("T")


def _or(found: Optional[T], default: T) -> T:
    return default if found is None else found


@dataclass
class Sequence:
    """A run of frames on a sheet of ``num_columns`` by ``num_rows`` cells, numbered from 1."""

    name: str = ""
    fps: float = 0.0
    num_columns: int = 0
    num_rows: int = 0
    start_frame: int = 0
    end_frame: int = 0
    loop: bool = True
    texture: Optional[Texture] = None


class SpriteAnimComponent(RenderComponent):
    """Plays the current sequence, advancing ``frame`` at the sequence's rate."""

    def __init__(self) -> None:
        super().__init__()
        self.frame = 0
        self.frame_timer = 0.0
        self.sequences: Dict[str, Sequence] = {}
        self.sequence: Optional[Sequence] = None

    def update(self) -> None:
        sequence = self.sequence
        if sequence is None:
            return
        self.frame_timer += Actor.clock.delta_time
        if sequence.fps <= 0 or self.frame_timer < 1.0 / sequence.fps:
            return
        self.frame_timer = 0.0
        self.frame += 1
        if self.frame > sequence.end_frame:
            self.frame = sequence.start_frame if sequence.loop else sequence.end_frame

    def draw(self, renderer: Any) -> None:
        if self.sequence is None:
            return
        renderer.draw_region(self.sequence.texture, self.source, self.owner.transform,
                             self.registration, self.horizontal_flip)

    def set_sequence(self, name: str) -> None:
        """Switch to the sequence ``name`` from its start; unknown names are ignored."""
        if self.sequence is not None and self.sequence.name == name:
            return
        sequence = self.sequences.get(name)
        if sequence is not None:
            self.sequence = sequence
            self.frame = sequence.start_frame
            self.frame_timer = 0.0

    @property
    def source(self) -> Rect:
        """The sheet cell of the current frame."""
        sequence = self.sequence
        if sequence is None or sequence.texture is None or sequence.num_columns <= 0 or sequence.num_rows <= 0:
            return self._source
        cell = sequence.texture.size / Vector2(sequence.num_columns, sequence.num_rows)
        index = self.frame - 1
        column = mod(index, sequence.num_columns)
        row = int(index / sequence.num_columns)
        self._source = Rect(int(column * cell.x), int(row * cell.y), int(cell.x), int(cell.y))
        return self._source

    def read(self, value: Mapping) -> None:
        """Read the ``sequences`` array and start ``DefaultSequence`` (else the first by name)."""
        sequences = value.get("sequences") if isinstance(value, Mapping) else None
        if isinstance(sequences, list):
            for item in sequences:
                sequence = Sequence(
                    name=_or(get_string(item, "sequence.Name"), ""),
                    fps=_or(get_float(item, "sequence.fps"), 0.0),
                    num_columns=_or(get_int(item, "sequence.num_columns"), 0),
                    num_rows=_or(get_int(item, "sequence.num_rows"), 0),
                    start_frame=_or(get_int(item, "sequence.start_frame"), 0),
                    end_frame=_or(get_int(item, "sequence.end_frame"), 0),
                )
                texture_name = _or(get_string(item, "TextureName"), "")
                sequence.texture = self.resources.get(texture_name, Texture, self.graphics)
                self.sequences[sequence.name] = sequence

        default = get_string(value, "DefaultSequence")
        if default is None and self.sequences:
            default = min(self.sequences)
        if default is not None:
            self.set_sequence(default)
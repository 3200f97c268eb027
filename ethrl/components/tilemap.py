"""A component that lays out a grid of prefab tiles around its actor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import List, Optional

from ethrl.framework.actor import Actor
from ethrl.framework.component import Component
from ethrl.framework.factory import Factory
from ethrl.maths.vector2 import Vector2
from ethrl.serialization import get_int, get_int_list, get_string_list, get_vector2


class TilemapComponent(Component):
    """Creates one actor per non-zero tile, named by ``tile_names[index]``.

    ``factory`` defaults to the shared factory.
    """

    def __init__(self) -> None:
        super().__init__()
        self.column_num = 0
        self.row_num = 0
        self.size = Vector2()
        self.tile_names: List[str] = []
        self.tiles: List[int] = []
        self.factory: Optional[Factory] = None

    def initialize(self) -> None:
        """Add the tile actors to the owner's scene, offset by grid cell and ``size``."""
        factory = self.factory if self.factory is not None else Factory.instance()
        origin = self.owner.transform.position
        for position, index in enumerate(self.tiles):
            if index == 0:
                continue
            actor = factory.create(self.tile_names[index])
            if not isinstance(actor, Actor):
                continue
            column, row = divmod(position, self.column_num)[::-1]
            actor.transform.position = origin + Vector2(column, row) * self.size
            self.owner.scene.add(actor)

    def update(self) -> None:
        """Tiles are independent actors once created."""

    def read(self, value: Mapping) -> None:
        """Read the grid; tile names and tiles are appended to what is already held."""
        columns = get_int(value, "ColumnNum")
        if columns is not None:
            self.column_num = columns
        rows = get_int(value, "RowNum")
        if rows is not None:
            self.row_num = rows
        size = get_vector2(value, "Size")
        if size is not None:
            self.size = size
        self.tile_names.extend(get_string_list(value, "TileNames") or [])
        self.tiles.extend(get_int_list(value, "Tiles") or [])
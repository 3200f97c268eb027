"""Line-strip models loaded from text files."""

from __future__ import annotations

from itertools import pairwise
from typing import Any, Iterable, List, Optional

from ethrl.core.files import read_file
from ethrl.core.logger import log
from ethrl.framework.resources import Resource
from ethrl.maths.color import Color, parse_color
from ethrl.maths.transform import Transform
from ethrl.maths.vector2 import Vector2, parse_vector2


class Model(Resource):
    """A coloured polyline drawn by connecting consecutive points."""

    def __init__(self, points: Optional[Iterable[Vector2]] = None, color: Optional[Color] = None) -> None:
        self.points: List[Vector2] = list(points) if points is not None else []
        self.color = color if color is not None else Color(0, 0, 0, 0)
        self.radius = self.calculate_radius()

    def create(self, name: str, *args: Any) -> None:
        try:
            self.load(name)
        except (OSError, ValueError):
            log("Error could not create file %s", name)
            raise

    def draw(self, renderer: Any, transform: Transform) -> None:
        """Draw the model through the transform's matrix."""
        matrix = transform.matrix
        for start, end in pairwise(self.points):
            renderer.draw_line(matrix * start, matrix * end, self.color)

    def draw_at(self, renderer: Any, position: Vector2, angle: float, scale: Vector2 = Vector2(1, 1)) -> None:
        """Draw scaled, rotated by ``angle`` radians and moved to ``position``."""
        for start, end in pairwise(self.points):
            renderer.draw_line(
                Vector2.rotate(start * scale, angle) + position,
                Vector2.rotate(end * scale, angle) + position,
                self.color,
            )

    def load(self, filename: str) -> None:
        """Read the model from ``filename``; raises FileNotFoundError or ValueError."""
        self.parse(read_file(filename))

    def parse(self, text: str) -> None:
        """Parse a colour line, a point-count line and that many ``{x, y}`` lines."""
        lines = text.splitlines()
        if len(lines) < 2:
            raise ValueError("model needs a colour line and a point count")
        color = parse_color(lines[0])
        count = int(lines[1])
        point_lines = lines[2:2 + count]
        if len(point_lines) < count:
            raise ValueError(f"model declares {count} points but has {len(point_lines)}")
        self.color = color
        self.points = [parse_vector2(line) for line in point_lines]
        self.radius = self.calculate_radius()

    def calculate_radius(self) -> float:
        """Distance of the farthest point from the origin."""
        return max((point.length() for point in self.points), default=0.0)
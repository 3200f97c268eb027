"""RGBA colour and integer rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]

    def __post_init__(self) -> None:
        for channel in self:
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __getitem__(self, index: int) -> int:
        if index not in (0, 1, 2, 3):
            raise IndexError(f"Color index out of range: {index}")
        return (self.r, self.g, self.b, self.a)[index]

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b} {self.a}"


Color.WHITE = Color(255, 255, 255, 255)
Color.BLACK = Color(0, 0, 0, 255)
Color.RED = Color(255, 0, 0, 255)
Color.GREEN = Color(0, 255, 0, 255)
Color.BLUE = Color(0, 0, 255, 255)


@dataclass
class Rect:
    """An integer rectangle: position and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def parse_color(text: str) -> Color:
    """Parse the first line of ``text`` written as ``{r, g, b}`` with channels in [0, 1]."""
    line = text.partition("\n")[0]
    start = line.find("{") + 1
    comma = line.find(",")
    if comma < 0:
        raise ValueError(f"not a colour: {line!r}")
    red = line[start:comma]
    rest = line[comma + 1:]
    comma = rest.find(",")
    if comma < 0:
        raise ValueError(f"not a colour: {line!r}")
    green = rest[:comma]
    close = rest.find("}")
    blue = rest[comma + 1:close if close >= 0 else len(rest)]
    return Color(*(int(float(part) * 255) for part in (red, green, blue)), 255)
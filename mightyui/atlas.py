"""Named sprite rectangles in a texture atlas and the geometry for drawing them."""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from mightyui.layout import Rect

NOT_FOUND = Rect(0, 0, 0, 0)


@dataclass(frozen=True)
class Vertex:
    """A vertex position together with its normalised texture coordinate."""

    x: float
    y: float
    z: float
    u: float
    v: float


class TextureAtlas:
    """Sprite rectangles of one texture, keyed by name.

    ``flipped`` tells whether the texture's vertical orientation differs from
    the screen's; if it does, quads are emitted with their top and bottom swapped.
    """

    NOT_FOUND = NOT_FOUND

    def __init__(self, texture_width: float, texture_height: float,
                 flipped: bool = False) -> None:
        if texture_width <= 0 or texture_height <= 0:
            raise ValueError("texture dimensions must be positive")
        self.texture_width = texture_width
        self.texture_height = texture_height
        self.flipped = flipped
        self.rects: dict[str, Rect] = {}
        self.loaded = False
        self._added: list[Vertex] = []

    def parse(self, xml_text: str) -> None:
        """Read sprite rectangles from an atlas description.

        The document root is ``TextureAtlas``; each child carries the
        attributes ``n`` (name), ``x``, ``y``, ``w`` and ``h``.
        """
        root = ElementTree.fromstring(xml_text)
        if root.tag == "TextureAtlas":
            for sprite in root:
                self.rects[sprite.get("n", "")] = Rect(
                    _int_attr(sprite, "x"),
                    _int_attr(sprite, "y"),
                    _int_attr(sprite, "w"),
                    _int_attr(sprite, "h"),
                )
        self.loaded = True

    def load(self, xml_path: str | PathLike[str]) -> None:
        """Read sprite rectangles from an atlas description file."""
        self.parse(Path(xml_path).read_text(encoding="utf-8"))

    def rect(self, name: str) -> Rect:
        """Return the rectangle of a sprite, or ``NOT_FOUND`` if there is none."""
        return self.rects.get(name, NOT_FOUND)

    def _corners(self, x: float, y: float, z: float, w: float, h: float,
                 sx: float, sy: float, sw: float, sh: float):
        px0, py0 = x, y
        px1, py1 = x + w, y + h
        if self.flipped:
            py0, py1 = py1, py0
        tx0 = sx / self.texture_width
        ty0 = sy / self.texture_height
        tx1 = (sx + sw) / self.texture_width
        ty1 = (sy + sh) / self.texture_height
        return (
            Vertex(px0, py0, z, tx0, ty0),
            Vertex(px1, py0, z, tx1, ty0),
            Vertex(px1, py1, z, tx1, ty1),
            Vertex(px0, py1, z, tx0, ty1),
        )

    def subsection(self, x: float, y: float, z: float, w: float, h: float,
                   sx: float, sy: float, sw: float, sh: float) -> tuple[Vertex, ...]:
        """Return a four-vertex fan drawing texture area (sx, sy, sw, sh) at (x, y, w, h)."""
        return self._corners(x, y, z, w, h, sx, sy, sw, sh)

    def quad(self, name: str, x: float, y: float, w: float | None = None,
             h: float | None = None) -> tuple[Vertex, ...]:
        """Return the fan for a named sprite; the size defaults to the sprite's own."""
        r = self.rect(name)
        return self.subsection(x, y, 0, r.width if w is None else w,
                               r.height if h is None else h,
                               r.x, r.y, r.width, r.height)

    def add_subsection(self, x: float, y: float, z: float, w: float, h: float,
                       sx: float, sy: float, sw: float, sh: float) -> None:
        """Queue two triangles drawing texture area (sx, sy, sw, sh) at (x, y, w, h)."""
        a, b, c, d = self._corners(x, y, z, w, h, sx, sy, sw, sh)
        self._added.extend((a, b, c, a, c, d))

    def add_draw(self, name: str, x: float, y: float, w: float, h: float) -> None:
        """Queue two triangles drawing a named sprite."""
        r = self.rect(name)
        self.add_subsection(x, y, 0, w, h, r.x, r.y, r.width, r.height)

    def take_added(self) -> list[Vertex]:
        """Return the queued triangle vertices and empty the queue."""
        added, self._added = self._added, []
        return added


def _int_attr(element: ElementTree.Element, name: str) -> int:
    value = element.get(name)
    return 0 if value is None else int(value)
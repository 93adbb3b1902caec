# # Preview node tree: what the markup parser hands to a display layer.

from __future__ import annotations

import dataclasses
import enum
from typing import Iterator, Optional, Tuple


class NodeKind(str, enum.Enum):
    CONTAINER = "container"
    HEADING = "heading"
    EMPHASIS = "emphasis"
    TEXT = "text"


@dataclasses.dataclass(frozen=True)
class Thickness:
    left: float = 0
    top: float = 0
    right: float = 0
    bottom: float = 0

    @classmethod
    def uniform(cls, v: float) -> "Thickness":
        return cls(v, v, v, v)

    @property
    def is_uniform(self) -> bool:
        return self.left == self.top == self.right == self.bottom


DEFAULT_MARGIN = Thickness.uniform(8)
# # What a display layer should use for a container with no padding declared
CONTAINER_PADDING = Thickness.uniform(16)


@dataclasses.dataclass(frozen=True)
class StyleRecord:
    background: Optional[str] = None
    border_color: Optional[str] = None
    border_thickness: Optional[Thickness] = None
    padding: Optional[Thickness] = None
    margin: Thickness = DEFAULT_MARGIN
    corner_radius: Optional[float] = None


@dataclasses.dataclass(frozen=True)
class TextStyle:
    bold: bool = False
    color: Optional[str] = None
    size: Optional[float] = None


@dataclasses.dataclass(frozen=True)
class Node:
    kind: NodeKind
    style: Optional[StyleRecord] = None
    children: Tuple["Node", ...] = ()
    text: Optional[str] = None
    font: Optional[TextStyle] = None

    @classmethod
    def container(cls, children=(), style: Optional[StyleRecord] = None) -> "Node":
        return cls(NodeKind.CONTAINER, style=style, children=tuple(children))

    @classmethod
    def leaf(cls, kind: NodeKind, text: str, font: Optional[TextStyle] = None) -> "Node":
        return cls(kind, text=text, font=font)

    def walk(self) -> Iterator["Node"]:
        yield self
        for c in self.children:
            yield from c.walk()

    def texts(self) -> list:
        return [n.text for n in self.walk() if n.text is not None]

"""
Container elements: groups (one per module instance) and boards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Union

from .component import Component
from .net import Net, Trace

Element = Union[Component, Net, Trace, "Group"]


@dataclass
class Group:
    """
    Ordered collection of elements.

    Groups nest; the views below (components, nets, traces) walk the
    whole subtree in declaration order.

    Example:
        g = Group("BUF1")
        g.add(u, vcc, Trace(u["VCC"], vcc))
    """
    kind: ClassVar[str] = "group"

    name: str = ""
    children: list[Element] = field(default_factory=list)

    def add(self, *elements: Element) -> Group:
        """Append elements, returning self for chaining."""
        for element in elements:
            if not isinstance(element, (Component, Net, Trace, Group)):
                raise TypeError(f"Cannot add {type(element).__name__} to {self.kind}")
            self.children.append(element)
        return self

    def __iadd__(self, other) -> Group:
        if isinstance(other, (list, tuple)):
            return self.add(*other)
        return self.add(other)

    def walk(self) -> Iterator[Element]:
        """Depth-first iteration over leaf elements."""
        for child in self.children:
            if isinstance(child, Group):
                yield from child.walk()
            else:
                yield child

    @property
    def components(self) -> list[Component]:
        return [e for e in self.walk() if isinstance(e, Component)]

    @property
    def nets(self) -> list[Net]:
        return [e for e in self.walk() if isinstance(e, Net)]

    @property
    def traces(self) -> list[Trace]:
        return [e for e in self.walk() if isinstance(e, Trace)]

    @property
    def groups(self) -> list[Group]:
        """Direct child groups."""
        return [c for c in self.children if isinstance(c, Group)]

    def find(self, name: str) -> Component | Net:
        """Find a component or net by name anywhere in the subtree."""
        for element in self.walk():
            if isinstance(element, (Component, Net)) and element.name == name:
                return element
        raise KeyError(f"No component or net named {name!r}")

    def props(self) -> dict[str, Any]:
        return {"name": self.name} if self.name else {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "props": self.props(),
            "children": [child.to_dict() for child in self.children],
        }

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, components={len(self.components)}, "
            f"nets={len(self.nets)}, traces={len(self.traces)})"
        )


@dataclass(repr=False)
class Board(Group):
    """
    Top-level board.

    Attributes:
        width: Board width with unit, e.g. "80mm".
        height: Board height with unit.
    """
    kind: ClassVar[str] = "board"

    width: str = ""
    height: str = ""

    def props(self) -> dict[str, Any]:
        props = super().props()
        if self.width:
            props["width"] = self.width
        if self.height:
            props["height"] = self.height
        return props

"""
Net and trace declarations.

A Net is a named label for a set of connections; a Trace joins two
endpoint selectors. Connectivity itself is resolved by the rendering
engine, these classes only carry the names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

NET_PREFIX = "net."


@dataclass
class Net:
    """
    Named net, e.g. Net("BUF1_GND").

    Attributes:
        name: Net name, used as the schematic label.
    """
    kind: ClassVar[str] = "net"

    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Net name must not be empty")

    @property
    def endpoint(self) -> str:
        """Trace endpoint selector for this net."""
        return f"{NET_PREFIX}{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "props": {"name": self.name}, "children": []}


@dataclass
class Trace:
    """
    Connection between two endpoints.

    Endpoints are selector strings ('.U1 > .VCC', 'net.GND'); a Net is
    accepted in place of its selector.

    Example:
        Trace(u["VCC"], vcc)
    """
    kind: ClassVar[str] = "trace"

    from_: str
    to: str

    def __post_init__(self):
        self.from_ = self._selector(self.from_)
        self.to = self._selector(self.to)

    @staticmethod
    def _selector(end) -> str:
        if isinstance(end, Net):
            return end.endpoint
        if not isinstance(end, str):
            raise TypeError(f"Trace endpoint must be str or Net, got {type(end).__name__}")
        return end

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "props": {"from": self.from_, "to": self.to},
            "children": [],
        }

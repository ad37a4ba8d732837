"""Data models for the element tree."""

from .component import (
    Component, Chip, SideArrangement, Passive, Resistor, Capacitor,
    endpoint, TOP_TO_BOTTOM, LEFT_TO_RIGHT,
)
from .net import Net, Trace
from .group import Group, Board

__all__ = [
    "Component", "Chip", "SideArrangement", "Passive", "Resistor", "Capacitor",
    "endpoint", "TOP_TO_BOTTOM", "LEFT_TO_RIGHT",
    "Net", "Trace", "Group", "Board",
]

"""
Component models: chips and two-pin passives.

Components are leaves of the element tree. Each one knows its pin labels
and turns them into trace endpoint selectors for the rendering engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from ..layout import GridPosition


# Chip sides as the rendering engine names them
SIDES = {
    "left": "leftSide",
    "right": "rightSide",
    "top": "topSide",
    "bottom": "bottomSide",
}

TOP_TO_BOTTOM = "top-to-bottom"
LEFT_TO_RIGHT = "left-to-right"


def endpoint(component: str, pin: str) -> str:
    """Trace endpoint selector for a component pin, e.g. '.U1 > .VCC'."""
    return f".{component} > .{pin}"


@dataclass
class Component:
    """
    Base for anything placed on the schematic and the board.

    Attributes:
        name: Unique component name (e.g., "BUF1_U").
        footprint: Footprint name understood by the engine (e.g., "0805").
        sch_x, sch_y: Schematic position, None to let the engine decide.
        pcb_x, pcb_y: Board position in mm.
    """
    kind: ClassVar[str] = "component"

    name: str
    footprint: str = ""
    sch_x: float | None = None
    sch_y: float | None = None
    pcb_x: float | None = None
    pcb_y: float | None = None

    @property
    def pin_names(self) -> list[str]:
        """Pin labels accepted in trace endpoints."""
        return []

    def has_pin(self, label: str) -> bool:
        return label in self.pin_names

    def pin(self, key: str | int) -> str:
        """
        Endpoint selector for one pin.

        Examples:
            u.pin("VCC")  # '.U > .VCC'
        """
        key = str(key)
        if not self.has_pin(key):
            raise KeyError(f"Component {self.name} has no pin {key!r}")
        return endpoint(self.name, key)

    def __getitem__(self, key: str | int) -> str:
        return self.pin(key)

    def place(self, position: "GridPosition") -> Component:
        """Set the schematic position from a grid position."""
        self.sch_x, self.sch_y = position
        return self

    def props(self) -> dict[str, Any]:
        """Props in the rendering engine's naming, unset values omitted."""
        props: dict[str, Any] = {"name": self.name}
        if self.footprint:
            props["footprint"] = self.footprint
        for key, value in (
            ("schX", self.sch_x),
            ("schY", self.sch_y),
            ("pcbX", self.pcb_x),
            ("pcbY", self.pcb_y),
        ):
            if value is not None:
                props[key] = value
        return props

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "props": self.props(), "children": []}


@dataclass
class SideArrangement:
    """Ordered pins on one side of a chip's schematic box."""
    pins: list[str] = field(default_factory=list)
    direction: str = TOP_TO_BOTTOM

    def to_dict(self) -> dict[str, Any]:
        return {"direction": self.direction, "pins": list(self.pins)}


@dataclass
class Chip(Component):
    """
    A multi-pin part with a pin-label table.

    Pins are addressed by label, by number, or by "pinN":
        u["INA_P"]  # '.U > .INA_P'
        u[3]        # same pin
        u["pin3"]   # same pin

    Attributes:
        pin_labels: Pin number key ("pin1") -> label ("OUTA").
        sch_pin_arrangement: Side ("left", "right", "top", "bottom")
            -> SideArrangement.
        supplier_part_numbers: Supplier -> part numbers.
    """
    kind: ClassVar[str] = "chip"

    pin_labels: dict[str, str] = field(default_factory=dict)
    sch_pin_arrangement: dict[str, SideArrangement] = field(default_factory=dict)
    supplier_part_numbers: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self):
        labels = set(self.pin_labels.values())
        for side, arrangement in self.sch_pin_arrangement.items():
            if side not in SIDES:
                raise ValueError(f"Chip {self.name}: unknown side {side!r}")
            missing = [p for p in arrangement.pins if p not in labels]
            if missing:
                raise ValueError(
                    f"Chip {self.name}: {side} side lists unknown pins {missing}"
                )

    @property
    def pin_names(self) -> list[str]:
        return list(self.pin_labels.values())

    def has_pin(self, label: str) -> bool:
        return label in self.pin_labels or label in self.pin_labels.values()

    def pin(self, key: str | int) -> str:
        if isinstance(key, int):
            key = f"pin{key}"
        # Number lookup resolves to the label
        key = self.pin_labels.get(key, key)
        return super().pin(key)

    def props(self) -> dict[str, Any]:
        props = super().props()
        props["pinLabels"] = dict(self.pin_labels)
        if self.sch_pin_arrangement:
            props["schPinArrangement"] = {
                SIDES[side]: arrangement.to_dict()
                for side, arrangement in self.sch_pin_arrangement.items()
            }
        if self.supplier_part_numbers:
            props["supplierPartNumbers"] = {
                supplier: list(numbers)
                for supplier, numbers in self.supplier_part_numbers.items()
            }
        return props


@dataclass
class Passive(Component):
    """Two-pin passive part, pins 'pin1' and 'pin2'."""
    value: str = ""
    footprint: str = "0805"

    # Engine prop carrying the component value
    value_prop: ClassVar[str] = "value"

    @property
    def pin_names(self) -> list[str]:
        return ["pin1", "pin2"]

    def pin(self, key: str | int) -> str:
        if isinstance(key, int):
            key = f"pin{key}"
        return super().pin(key)

    def props(self) -> dict[str, Any]:
        props = super().props()
        if self.value:
            props[self.value_prop] = self.value
        return props


@dataclass
class Resistor(Passive):
    kind: ClassVar[str] = "resistor"
    value_prop: ClassVar[str] = "resistance"


@dataclass
class Capacitor(Passive):
    kind: ClassVar[str] = "capacitor"
    value_prop: ClassVar[str] = "capacitance"

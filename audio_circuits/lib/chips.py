"""
Chip definitions.

TL072 dual JFET-input op-amp, DIP-8 / SOIC-8 pinout:
    1  Output A          8  V+ (positive supply)
    2  Inverting A (-)   7  Output B
    3  Non-inv. A (+)    6  Inverting B (-)
    4  V- (neg. supply)  5  Non-inv. B (+)
"""

from __future__ import annotations

from ..models.component import Chip, SideArrangement, TOP_TO_BOTTOM, LEFT_TO_RIGHT


TL072_PIN_LABELS: dict[str, str] = {
    "pin1": "OUTA",
    "pin2": "INA_N",
    "pin3": "INA_P",
    "pin4": "VEE",
    "pin5": "INB_P",
    "pin6": "INB_N",
    "pin7": "OUTB",
    "pin8": "VCC",
}

TL072_SUPPLIER_PART_NUMBERS: dict[str, list[str]] = {
    "jlcpcb": ["C6961"],  # TL072CDT
}


def tl072_pin_arrangement() -> dict[str, SideArrangement]:
    """Inputs left, outputs right, supplies top and bottom."""
    return {
        "left": SideArrangement(["INA_P", "INA_N", "INB_P", "INB_N"], TOP_TO_BOTTOM),
        "right": SideArrangement(["OUTA", "OUTB"], TOP_TO_BOTTOM),
        "top": SideArrangement(["VCC"], LEFT_TO_RIGHT),
        "bottom": SideArrangement(["VEE"], LEFT_TO_RIGHT),
    }


def tl072(name: str, footprint: str = "soic8", **kwargs) -> Chip:
    """
    Create a TL072 chip.

    Args:
        name: Component name.
        footprint: Package footprint (default SOIC-8).
        **kwargs: Placement (sch_x, sch_y, pcb_x, pcb_y).
    """
    return Chip(
        name=name,
        footprint=footprint,
        pin_labels=dict(TL072_PIN_LABELS),
        sch_pin_arrangement=tl072_pin_arrangement(),
        supplier_part_numbers={k: list(v) for k, v in TL072_SUPPLIER_PART_NUMBERS.items()},
        **kwargs,
    )

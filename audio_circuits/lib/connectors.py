"""
Connector definitions.

Phoenix Contact style screw terminals, 5.08mm (0.2") pitch, and
audio jacks. All connector pins sit on the left side of the symbol.
"""

from __future__ import annotations

from ..models.component import Chip, SideArrangement, TOP_TO_BOTTOM


def _numbered_labels(count: int) -> dict[str, str]:
    return {f"pin{i}": f"P{i}" for i in range(1, count + 1)}


# 2-position: signal + ground
SCREW_TERMINAL2_PIN_LABELS = _numbered_labels(2)
# 3-position: +V, GND, -V or control connections
SCREW_TERMINAL3_PIN_LABELS = _numbered_labels(3)
# 6-position: frequency selector send/return
SCREW_TERMINAL6_PIN_LABELS = _numbered_labels(6)

MONO_JACK_PIN_LABELS = {
    "pin1": "TIP",
    "pin2": "SLEEVE",
}

STEREO_JACK_PIN_LABELS = {
    "pin1": "TIP",
    "pin2": "RING",
    "pin3": "SLEEVE",
}


def _left_side_connector(
    name: str,
    pin_labels: dict[str, str],
    footprint: str,
    **kwargs,
) -> Chip:
    return Chip(
        name=name,
        footprint=footprint,
        pin_labels=dict(pin_labels),
        sch_pin_arrangement={
            "left": SideArrangement(list(pin_labels.values()), TOP_TO_BOTTOM),
        },
        **kwargs,
    )


def screw_terminal2(name: str, footprint: str = "pinrow2", **kwargs) -> Chip:
    """2-position screw terminal (P1, P2)."""
    return _left_side_connector(name, SCREW_TERMINAL2_PIN_LABELS, footprint, **kwargs)


def screw_terminal3(name: str, footprint: str = "pinrow3", **kwargs) -> Chip:
    """3-position screw terminal (P1..P3)."""
    return _left_side_connector(name, SCREW_TERMINAL3_PIN_LABELS, footprint, **kwargs)


def screw_terminal6(name: str, footprint: str = "pinrow6", **kwargs) -> Chip:
    """6-position screw terminal (P1..P6)."""
    return _left_side_connector(name, SCREW_TERMINAL6_PIN_LABELS, footprint, **kwargs)


# TODO: replace the pin-row footprints with real jack footprints
def mono_jack(name: str, footprint: str = "pinrow2", **kwargs) -> Chip:
    """Mono jack, tip + sleeve."""
    return _left_side_connector(name, MONO_JACK_PIN_LABELS, footprint, **kwargs)


def stereo_jack(name: str, footprint: str = "pinrow3", **kwargs) -> Chip:
    """Stereo jack, tip + ring + sleeve."""
    return _left_side_connector(name, STEREO_JACK_PIN_LABELS, footprint, **kwargs)

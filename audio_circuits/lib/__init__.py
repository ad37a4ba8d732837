"""Part library: chips and connectors."""

from .chips import tl072, TL072_PIN_LABELS, TL072_SUPPLIER_PART_NUMBERS
from .connectors import (
    screw_terminal2, screw_terminal3, screw_terminal6,
    mono_jack, stereo_jack,
    SCREW_TERMINAL2_PIN_LABELS, SCREW_TERMINAL3_PIN_LABELS, SCREW_TERMINAL6_PIN_LABELS,
    MONO_JACK_PIN_LABELS, STEREO_JACK_PIN_LABELS,
)

__all__ = [
    "tl072", "TL072_PIN_LABELS", "TL072_SUPPLIER_PART_NUMBERS",
    "screw_terminal2", "screw_terminal3", "screw_terminal6",
    "mono_jack", "stereo_jack",
    "SCREW_TERMINAL2_PIN_LABELS", "SCREW_TERMINAL3_PIN_LABELS", "SCREW_TERMINAL6_PIN_LABELS",
    "MONO_JACK_PIN_LABELS", "STEREO_JACK_PIN_LABELS",
]

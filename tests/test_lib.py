"""
Tests for the chip and connector library.
"""

import pytest

from audio_circuits import (
    tl072, screw_terminal2, screw_terminal3, screw_terminal6,
    mono_jack, stereo_jack,
)
from audio_circuits.lib import TL072_PIN_LABELS


class TestTL072:
    """Tests for the TL072 dual op-amp."""

    def test_pinout(self):
        """Pin table matches the DIP-8 / SOIC-8 pinout."""
        u = tl072("U1")
        assert u.pin_labels == {
            "pin1": "OUTA", "pin2": "INA_N", "pin3": "INA_P", "pin4": "VEE",
            "pin5": "INB_P", "pin6": "INB_N", "pin7": "OUTB", "pin8": "VCC",
        }

    def test_endpoints(self):
        """Pins resolve by label and by number."""
        u = tl072("BUF_U")
        assert u["INA_P"] == ".BUF_U > .INA_P"
        assert u[8] == ".BUF_U > .VCC"

    def test_pin_arrangement(self):
        """Inputs left, outputs right, supplies top and bottom."""
        arrangement = tl072("U1").to_dict()["props"]["schPinArrangement"]
        assert arrangement["leftSide"]["pins"] == ["INA_P", "INA_N", "INB_P", "INB_N"]
        assert arrangement["rightSide"]["pins"] == ["OUTA", "OUTB"]
        assert arrangement["topSide"] == {"direction": "left-to-right", "pins": ["VCC"]}
        assert arrangement["bottomSide"] == {"direction": "left-to-right", "pins": ["VEE"]}

    def test_footprint_and_supplier(self):
        """Defaults to SOIC-8 with the JLCPCB part number."""
        u = tl072("U1")
        assert u.footprint == "soic8"
        assert u.supplier_part_numbers == {"jlcpcb": ["C6961"]}

    def test_footprint_override(self):
        """Footprint can be overridden."""
        assert tl072("U1", footprint="dip8").footprint == "dip8"

    def test_instances_do_not_share_tables(self):
        """Mutating one chip's labels leaves the library table intact."""
        u = tl072("U1")
        u.pin_labels["pin1"] = "X"
        assert TL072_PIN_LABELS["pin1"] == "OUTA"
        assert tl072("U2").pin_labels["pin1"] == "OUTA"

    def test_placement_kwargs(self):
        """Placement keywords pass through to the chip."""
        u = tl072("U1", pcb_x=5, pcb_y=-2, sch_x=0, sch_y=3)
        assert (u.pcb_x, u.pcb_y, u.sch_x, u.sch_y) == (5, -2, 0, 3)


class TestConnectors:
    """Tests for screw terminals and audio jacks."""

    @pytest.mark.parametrize("factory,count", [
        (screw_terminal2, 2), (screw_terminal3, 3), (screw_terminal6, 6),
    ])
    def test_screw_terminals(self, factory, count):
        """Terminals have P1..Pn on a pinrow footprint, all on the left."""
        j = factory("J1")
        labels = [f"P{i}" for i in range(1, count + 1)]
        assert j.pin_names == labels
        assert j.footprint == f"pinrow{count}"
        assert j.sch_pin_arrangement["left"].pins == labels
        assert list(j.sch_pin_arrangement) == ["left"]

    def test_terminal_endpoint(self):
        """Terminal pins are addressed by label."""
        assert screw_terminal3("J_PWR")["P3"] == ".J_PWR > .P3"

    def test_mono_jack(self):
        """Mono jack is tip + sleeve."""
        j = mono_jack("J1")
        assert j.pin_names == ["TIP", "SLEEVE"]
        assert j.footprint == "pinrow2"

    def test_stereo_jack(self):
        """Stereo jack is tip + ring + sleeve."""
        j = stereo_jack("J1")
        assert j.pin_names == ["TIP", "RING", "SLEEVE"]
        assert j.footprint == "pinrow3"
        assert j["RING"] == ".J1 > .RING"

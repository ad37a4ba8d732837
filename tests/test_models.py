"""
Tests for element models: components, nets, traces, groups and boards.
"""

import pytest

from audio_circuits import (
    Chip, SideArrangement, Resistor, Capacitor,
    Net, Trace, Group, Board, GridPosition,
)


def make_chip(**kwargs):
    return Chip(
        name="U1",
        pin_labels={"pin1": "IN", "pin2": "OUT", "pin3": "GND"},
        sch_pin_arrangement={
            "left": SideArrangement(["IN"]),
            "right": SideArrangement(["OUT"]),
        },
        **kwargs,
    )


class TestChip:
    """Tests for Chip pin access and props."""

    def test_pin_by_label(self):
        """chip['LABEL'] returns the endpoint selector."""
        assert make_chip()["OUT"] == ".U1 > .OUT"

    def test_pin_by_number(self):
        """Integer and 'pinN' keys resolve to the label."""
        chip = make_chip()
        assert chip[2] == ".U1 > .OUT"
        assert chip["pin2"] == ".U1 > .OUT"
        assert chip.pin(3) == ".U1 > .GND"

    def test_unknown_pin_raises(self):
        """Unknown labels raise KeyError."""
        with pytest.raises(KeyError, match="VCC"):
            make_chip()["VCC"]

    def test_arrangement_with_unknown_pin_raises(self):
        """The pin arrangement may only list declared labels."""
        with pytest.raises(ValueError, match="unknown pins"):
            Chip(
                name="U2",
                pin_labels={"pin1": "A"},
                sch_pin_arrangement={"left": SideArrangement(["A", "B"])},
            )

    def test_unknown_side_raises(self):
        """Sides are left, right, top or bottom."""
        with pytest.raises(ValueError, match="side"):
            Chip(
                name="U3",
                pin_labels={"pin1": "A"},
                sch_pin_arrangement={"middle": SideArrangement(["A"])},
            )

    def test_to_dict(self):
        """Chip exports engine props and omits unset coordinates."""
        chip = make_chip(footprint="soic8", pcb_x=5, pcb_y=0)
        data = chip.to_dict()
        assert data["type"] == "chip"
        assert data["children"] == []
        props = data["props"]
        assert props["name"] == "U1"
        assert props["footprint"] == "soic8"
        assert props["pcbX"] == 5
        assert props["pcbY"] == 0
        assert "schX" not in props
        assert props["pinLabels"] == {"pin1": "IN", "pin2": "OUT", "pin3": "GND"}
        assert props["schPinArrangement"]["leftSide"] == {
            "direction": "top-to-bottom",
            "pins": ["IN"],
        }
        assert "supplierPartNumbers" not in props

    def test_place_sets_schematic_position(self):
        """place() copies a grid position and returns the component."""
        chip = make_chip()
        assert chip.place(GridPosition(3, -6)) is chip
        assert (chip.sch_x, chip.sch_y) == (3, -6)


class TestPassives:
    """Tests for Resistor and Capacitor."""

    def test_pins(self):
        """Passives have pin1 and pin2."""
        r = Resistor("R1", value="10k")
        assert r["pin1"] == ".R1 > .pin1"
        assert r[2] == ".R1 > .pin2"
        with pytest.raises(KeyError):
            r["pin3"]

    def test_default_footprint(self):
        """Passives default to 0805."""
        assert Capacitor("C1").footprint == "0805"

    def test_value_props(self):
        """Values export as resistance / capacitance."""
        r = Resistor("R1", value="100k").to_dict()
        c = Capacitor("C1", value="100nF", footprint="0603").to_dict()
        assert r["type"] == "resistor"
        assert r["props"]["resistance"] == "100k"
        assert c["type"] == "capacitor"
        assert c["props"]["capacitance"] == "100nF"
        assert c["props"]["footprint"] == "0603"


class TestNetAndTrace:
    """Tests for Net and Trace."""

    def test_net_endpoint(self):
        """Net endpoint is 'net.NAME'."""
        assert Net("GND").endpoint == "net.GND"

    def test_empty_net_name_raises(self):
        """Nets need a name."""
        with pytest.raises(ValueError):
            Net("")

    def test_trace_accepts_net(self):
        """A Net is converted to its selector."""
        gnd = Net("GND")
        trace = Trace(Resistor("R1")["pin2"], gnd)
        assert trace.from_ == ".R1 > .pin2"
        assert trace.to == "net.GND"

    @pytest.mark.parametrize("end", [3, None, ("R1", "pin2")])
    def test_trace_rejects_non_selector(self, end):
        """Endpoints other than a selector string or Net are rejected."""
        with pytest.raises(TypeError, match="Trace endpoint"):
            Trace(end, Net("GND"))

    def test_trace_to_dict(self):
        """Trace props are 'from' and 'to'."""
        data = Trace("net.A", "net.B").to_dict()
        assert data == {
            "type": "trace",
            "props": {"from": "net.A", "to": "net.B"},
            "children": [],
        }


class TestGroup:
    """Tests for Group and Board containers."""

    def test_add_and_views(self):
        """components, nets and traces walk nested groups in order."""
        r1, r2 = Resistor("R1"), Resistor("R2")
        a, b = Net("A"), Net("B")
        inner = Group("inner").add(r2, b, Trace(r2[1], b))
        outer = Group("outer").add(r1, a, Trace(r1[1], a), inner)

        assert [c.name for c in outer.components] == ["R1", "R2"]
        assert [n.name for n in outer.nets] == ["A", "B"]
        assert len(outer.traces) == 2
        assert outer.groups == [inner]

    def test_iadd(self):
        """group += element or list of elements."""
        g = Group()
        g += Net("A")
        g += [Net("B"), Net("C")]
        assert len(g) == 3

    def test_add_rejects_other_types(self):
        """Only elements can be added."""
        with pytest.raises(TypeError, match="Cannot add"):
            Group().add("R1")

    def test_find(self):
        """find() looks up components and nets by name."""
        r1 = Resistor("R1")
        g = Group().add(Group().add(r1), Net("A"))
        assert g.find("R1") is r1
        assert g.find("A").name == "A"
        with pytest.raises(KeyError):
            g.find("R9")

    def test_board_to_dict(self):
        """Board exports width, height and nested children."""
        board = Board(width="40mm", height="30mm")
        board.add(Group("BUF1").add(Net("X")))
        data = board.to_dict()
        assert data["type"] == "board"
        assert data["props"] == {"width": "40mm", "height": "30mm"}
        assert data["children"][0]["type"] == "group"
        assert data["children"][0]["props"] == {"name": "BUF1"}
        assert data["children"][0]["children"][0]["props"] == {"name": "X"}

    def test_repr(self):
        """Group repr shows element counts."""
        g = Group("G").add(Resistor("R1"), Net("A"))
        assert "components=1" in repr(g)
        assert "nets=1" in repr(g)

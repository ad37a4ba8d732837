"""
Unity-gain op-amp buffer module.

A single-channel unity-gain buffer using one half of a TL072:
- DC blocking input capacitor
- Bias resistor to ground
- Unity-gain feedback (OUTA -> INA_N)
- DC blocking output capacitor

Interface nets (prefixed with the module name):
    IN   audio input, AC coupled
    OUT  buffered output, AC coupled
    VCC  positive supply (+15V typical)
    VEE  negative supply (-15V typical)
    GND  ground reference
"""

from __future__ import annotations

from ..layout import create_grid
from ..lib.chips import tl072
from ..lib.connectors import screw_terminal2, screw_terminal3
from ..models.component import Capacitor, Resistor
from ..models.group import Group
from ..models.net import Net, Trace


# Board offsets in mm from the module's pcb origin
PCB_OFFSETS: dict[str, tuple[float, float]] = {
    "J_IN": (-25, 0),
    "C_IN": (-15, 0),
    "R_BIAS": (-5, 5),
    "U": (5, 0),
    "C_OUT": (20, 0),
    "J_OUT": (30, 0),
    "J_PWR": (0, 15),
    "C_VCC": (5, 10),
    "C_VEE": (5, -10),
}

NET_SUFFIXES = ("GND", "VCC", "VEE", "IN", "FB", "OUT")

DECOUPLING_CAP = "100nF"


def opamp_buffer(
    name: str,
    input_cap: str = "100nF",
    output_cap: str = "100nF",
    bias_resistor: str = "100k",
    pcb_x: float = 0,
    pcb_y: float = 0,
    sch_x: float = 0,
    sch_y: float = 0,
) -> Group:
    """
    Build one buffer channel.

    Args:
        name: Module instance name, prefixed to every part and net.
        input_cap: Input coupling capacitor value.
        output_cap: Output coupling capacitor value.
        bias_resistor: Input bias resistor value.
        pcb_x, pcb_y: Module origin on the board (mm).
        sch_x, sch_y: Module origin on the schematic.

    Returns:
        Group holding the parts, nets and traces of the channel.

    Example:
        buf = opamp_buffer("BUF1", bias_resistor="1M")
        buf.find("BUF1_U")["OUTA"]  # '.BUF1_U > .OUTA'
    """
    grid = create_grid(sch_x, sch_y)

    def pcb(key: str) -> dict[str, float]:
        dx, dy = PCB_OFFSETS[key]
        return {"pcb_x": pcb_x + dx, "pcb_y": pcb_y + dy}

    # Signal path left to right, supplies above/below the op-amp
    j_in = screw_terminal2(f"{name}_J_IN", **pcb("J_IN")).place(grid.signal(-4))
    c_in = Capacitor(f"{name}_C_IN", value=input_cap, **pcb("C_IN")).place(grid.signal(-2.5))
    r_bias = Resistor(f"{name}_R_BIAS", value=bias_resistor, **pcb("R_BIAS")).place(grid.below(-1.5))
    u = tl072(f"{name}_U", **pcb("U")).place(grid.signal(0))
    c_out = Capacitor(f"{name}_C_OUT", value=output_cap, **pcb("C_OUT")).place(grid.signal(2.5))
    j_out = screw_terminal2(f"{name}_J_OUT", **pcb("J_OUT")).place(grid.signal(4))
    j_pwr = screw_terminal3(f"{name}_J_PWR", **pcb("J_PWR")).place(grid.below(-4, 2))
    c_vcc = Capacitor(f"{name}_C_VCC", value=DECOUPLING_CAP, **pcb("C_VCC")).place(grid.above(1.5))
    c_vee = Capacitor(f"{name}_C_VEE", value=DECOUPLING_CAP, **pcb("C_VEE")).place(grid.below(1.5))

    nets = {suffix: Net(f"{name}_{suffix}") for suffix in NET_SUFFIXES}
    gnd, vcc, vee = nets["GND"], nets["VCC"], nets["VEE"]
    sig_in, fb, sig_out = nets["IN"], nets["FB"], nets["OUT"]

    traces = [
        # Input: J_IN -> C_IN -> bias resistor and non-inverting input
        Trace(j_in["P1"], c_in["pin1"]),
        Trace(c_in["pin2"], sig_in),
        Trace(r_bias["pin1"], sig_in),
        Trace(u["INA_P"], sig_in),
        # Unity gain feedback
        Trace(u["OUTA"], fb),
        Trace(u["INA_N"], fb),
        # Output: OUTA -> C_OUT -> J_OUT
        Trace(fb, c_out["pin1"]),
        Trace(c_out["pin2"], sig_out),
        Trace(j_out["P1"], sig_out),
        # Supplies
        Trace(j_pwr["P1"], vcc),
        Trace(c_vcc["pin1"], vcc),
        Trace(u["VCC"], vcc),
        Trace(j_pwr["P3"], vee),
        Trace(c_vee["pin1"], vee),
        Trace(u["VEE"], vee),
        # Ground
        Trace(j_in["P2"], gnd),
        Trace(j_out["P2"], gnd),
        Trace(j_pwr["P2"], gnd),
        Trace(r_bias["pin2"], gnd),
        Trace(c_vcc["pin2"], gnd),
        Trace(c_vee["pin2"], gnd),
    ]

    group = Group(name)
    group.add(j_in, c_in, r_bias, u, c_out, j_out, j_pwr, c_vcc, c_vee)
    group.add(*nets.values())
    group.add(*traces)
    return group

"""
audio-circuits: declarative audio circuit modules with grid-based layout.

Circuit modules are built as element trees (chips, passives, nets,
traces) for an external rendering/netlisting engine. Schematic positions
come from a small grid layout system.

Example:
    from audio_circuits import *

    # Two buffer channels stacked on the schematic
    board = dual_buffer_board(["BUF_A", "BUF_B"])

    # Check references and export
    check_board(board)
    export_board(board, "dual_buffer.json")

    # Layout helpers on their own
    grid = create_grid(10, -5)
    grid.below(-1, 1.5)   # GridPosition(sch_x=7, sch_y=-0.5)
    column_layout(2)      # origins at Y = -5 and Y = 5
"""

__version__ = "0.1.0"

# Layout
from .layout import (
    GRID, SIGNAL_ROW, ROW_UP, ROW_DOWN,
    LayoutConfig, GridPosition, ModuleLayout, GridCalculator,
    create_grid, column_layout, row_layout,
)

# Element models
from .models import (
    Component, Chip, SideArrangement, Resistor, Capacitor,
    Net, Trace, Group, Board,
)

# Part library
from .lib import (
    tl072, screw_terminal2, screw_terminal3, screw_terminal6,
    mono_jack, stereo_jack,
)

# Modules and boards
from .modules import opamp_buffer
from .boards import buffer_board, dual_buffer_board

# Checks and export
from .verify import check_board, CheckError
from .export import board_to_json, export_board

__all__ = [
    # Version
    "__version__",
    # Layout
    "GRID", "SIGNAL_ROW", "ROW_UP", "ROW_DOWN",
    "LayoutConfig", "GridPosition", "ModuleLayout", "GridCalculator",
    "create_grid", "column_layout", "row_layout",
    # Models
    "Component", "Chip", "SideArrangement", "Resistor", "Capacitor",
    "Net", "Trace", "Group", "Board",
    # Library
    "tl072", "screw_terminal2", "screw_terminal3", "screw_terminal6",
    "mono_jack", "stereo_jack",
    # Modules and boards
    "opamp_buffer", "buffer_board", "dual_buffer_board",
    # Checks and export
    "check_board", "CheckError", "board_to_json", "export_board",
]

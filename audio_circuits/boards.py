"""
Board composition.

Boards place module instances using the arrangement helpers in
`layout`; each module then lays out its own parts around its origin.
"""

from __future__ import annotations

from typing import Sequence

from .layout import column_layout
from .models.group import Board
from .modules.opamp_buffer import opamp_buffer


# Board-level PCB arrangement of buffer channels (mm)
BUFFER_PCB_X = -20
BUFFER_PCB_HEIGHT = 18
BUFFER_PCB_GAP = 2


def buffer_board(name: str = "BUF1") -> Board:
    """Standalone single-channel buffer board, for testing/export."""
    board = Board(width="40mm", height="30mm")
    board.add(opamp_buffer(name, pcb_x=0, pcb_y=0))
    return board


def dual_buffer_board(names: Sequence[str] = ("BUF_A", "BUF_B")) -> Board:
    """
    Buffer channels stacked in a column.

    With the default two channels the buffers sit at (-20, -10) and
    (-20, 10) on the board, and at Y = -5 / 5 on the schematic.

    Args:
        names: One module name per channel, top to bottom.
    """
    sch_slots = column_layout(len(names))
    pcb_slots = column_layout(len(names), BUFFER_PCB_HEIGHT, BUFFER_PCB_GAP)

    board = Board(width="80mm", height="50mm")
    for name, sch, pcb in zip(names, sch_slots, pcb_slots):
        board.add(opamp_buffer(
            name,
            pcb_x=BUFFER_PCB_X + pcb.sch_x,
            pcb_y=pcb.sch_y,
            sch_x=sch.sch_x,
            sch_y=sch.sch_y,
        ))
    return board

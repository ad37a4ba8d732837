#!/usr/bin/env python3
"""
Dual Channel Buffer Example

Composes two op-amp buffer modules into one board. Module origins come
from column_layout(), so the channels are stacked and centered.
"""

from audio_circuits import *

board = dual_buffer_board(["BUF_A", "BUF_B"])

print("Module origins:")
for slot, group in zip(column_layout(len(board.groups)), board.groups):
    print(f"  {group.name}: schY={slot.sch_y}")

print("\nChecking references...")
errors = check_board(board)

print("\nExporting board...")
export_board(board, "dual_buffer.json")

print("\nBoard summary:")
print(f"  Components: {len(board.components)}")
print(f"  Nets: {len(board.nets)}")
print(f"  Traces: {len(board.traces)}")

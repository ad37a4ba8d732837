#!/usr/bin/env python3
"""
Standalone Op-amp Buffer Example

Builds a single unity-gain buffer channel on its own board, checks its
references and exports the element tree.
"""

from audio_circuits import *

board = buffer_board("BUF1")

# Check that every trace endpoint resolves
print("Checking references...")
errors = check_board(board)

print("\nExporting board...")
export_board(board, "opamp_buffer.json")

print("\nBoard summary:")
print(f"  Components: {len(board.components)}")
print(f"  Nets: {len(board.nets)}")
for part in board.components:
    print(f"    {part.name}: sch=({part.sch_x}, {part.sch_y}) pcb=({part.pcb_x}, {part.pcb_y})")

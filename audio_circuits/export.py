"""
JSON export of element trees for the rendering engine.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.group import Group


def board_to_json(board: "Group", indent: int | None = 2) -> str:
    """Serialize a board (or group) tree to a JSON string."""
    return json.dumps(board.to_dict(), indent=indent)


def export_board(board: "Group", path: str | Path) -> str:
    """
    Write a board tree to a JSON file.

    Args:
        board: Board to export.
        path: Output file path.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.write_text(board_to_json(board), encoding="utf-8")

    print(f"Board written to: {path}")
    return str(path)

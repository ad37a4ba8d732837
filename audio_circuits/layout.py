"""
Schematic layout utilities.

Grid-based positioning for parts inside a module, and board-level
arrangement of module origins. Conventions:

- Signal flow: left to right (X increases)
- Voltage drop: top to bottom (Y increases, VCC at top, GND/VEE at bottom)

All functions here are pure; they return fresh values on every call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# Default grid spacing in schematic units
GRID = 3

# Row of the signal path inside a module
SIGNAL_ROW = 0

# Row step directions. Schematic Y grows downward, so "up" is negative.
ROW_UP = -1
ROW_DOWN = 1


@dataclass(frozen=True)
class LayoutConfig:
    """Default parameters for module and board layout."""
    grid_size: float = GRID
    module_height: float = 8  # schematic units per module in a column
    module_width: float = 12  # schematic units per module in a row
    gap: float = 2  # spacing between neighbouring modules


DEFAULT_CONFIG = LayoutConfig()


@dataclass(frozen=True)
class GridPosition:
    """A resolved schematic coordinate."""
    sch_x: float
    sch_y: float

    def __iter__(self):
        return iter((self.sch_x, self.sch_y))

    def as_props(self) -> dict[str, float]:
        """Coordinate props as the rendering engine names them."""
        return {"schX": self.sch_x, "schY": self.sch_y}


@dataclass(frozen=True)
class ModuleLayout(GridPosition):
    """Origin of one module within a board-level arrangement."""


@dataclass(frozen=True)
class GridCalculator:
    """
    Grid-based position calculator for part layout within a module.

    Columns count left/right from the module origin, rows count down from
    the signal path. Fractional columns and rows give half-step offsets.

    Example:
        grid = create_grid(10, -5)
        grid.signal(0)      # the op-amp, on the signal path
        grid.above(1)       # VCC decoupling, one row up
        grid.below(-1, 1.5) # bias resistor, a row and a half down
    """
    origin_x: float = 0
    origin_y: float = 0
    grid_size: float = DEFAULT_CONFIG.grid_size

    def __post_init__(self):
        if not math.isfinite(self.grid_size) or self.grid_size <= 0:
            raise ValueError(f"grid_size must be a positive finite number, got {self.grid_size}")

    def at(self, col: float, row: float) -> GridPosition:
        """
        Calculate schematic position from grid coordinates.

        Args:
            col: Column (0 = origin, negative = left, positive = right).
            row: Row (0 = signal path, negative = up, positive = down).
        """
        return GridPosition(
            sch_x=self.origin_x + col * self.grid_size,
            sch_y=self.origin_y + row * self.grid_size,
        )

    def signal(self, col: float) -> GridPosition:
        """Position on the signal path."""
        return self.at(col, SIGNAL_ROW)

    def above(self, col: float, rows: float = 1) -> GridPosition:
        """Position above the signal path (VCC, etc.)."""
        return self.at(col, ROW_UP * rows)

    def below(self, col: float, rows: float = 1) -> GridPosition:
        """Position below the signal path (GND, VEE, etc.)."""
        return self.at(col, ROW_DOWN * rows)


def create_grid(
    origin_x: float = 0,
    origin_y: float = 0,
    grid_size: float = DEFAULT_CONFIG.grid_size,
) -> GridCalculator:
    """
    Create a grid-based position calculator for one module.

    Args:
        origin_x: X origin for this module.
        origin_y: Y origin for this module.
        grid_size: Grid cell spacing.

    Raises:
        ValueError: If grid_size is not a positive finite number.
    """
    return GridCalculator(origin_x, origin_y, grid_size)


def _check_arrangement(count: int, size: float, gap: float, size_name: str):
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if not math.isfinite(size) or size < 0:
        raise ValueError(f"{size_name} must be a finite, non-negative number, got {size}")
    if not math.isfinite(gap) or gap < 0:
        raise ValueError(f"gap must be a finite, non-negative number, got {gap}")


def _centered_offsets(count: int, size: float, gap: float) -> list[float]:
    """Evenly spaced offsets of `count` slots, symmetric about zero."""
    total = count * size + (count - 1) * gap
    start = -total / 2 + size / 2
    return [start + i * (size + gap) for i in range(count)]


def column_layout(
    count: int,
    module_height: float = DEFAULT_CONFIG.module_height,
    gap: float = DEFAULT_CONFIG.gap,
) -> list[ModuleLayout]:
    """
    Arrange modules in a vertical stack (column).

    Args:
        count: Number of modules, a plain int (integral floats such as 2.0
            and numpy integers are rejected).
        module_height: Height of each module.
        gap: Gap between modules.

    Returns:
        One ModuleLayout per module, in order, centered around Y=0.

    Example:
        column_layout(2)  # [ModuleLayout(0, -5.0), ModuleLayout(0, 5.0)]
    """
    _check_arrangement(count, module_height, gap, "module_height")
    return [
        ModuleLayout(sch_x=0, sch_y=y)
        for y in _centered_offsets(count, module_height, gap)
    ]


def row_layout(
    count: int,
    module_width: float = DEFAULT_CONFIG.module_width,
    gap: float = DEFAULT_CONFIG.gap,
) -> list[ModuleLayout]:
    """
    Arrange modules in a horizontal row.

    Args:
        count: Number of modules, a plain int (integral floats such as 2.0
            and numpy integers are rejected).
        module_width: Width of each module.
        gap: Gap between modules.

    Returns:
        One ModuleLayout per module, in order, centered around X=0.
    """
    _check_arrangement(count, module_width, gap, "module_width")
    return [
        ModuleLayout(sch_x=x, sch_y=0)
        for x in _centered_offsets(count, module_width, gap)
    ]

from dataclasses import dataclass
from typing import Tuple

from .game_logic import Cell

# drawing requests emitted by the controller, consumed by the renderer

Point = Tuple[float, float]
Address = Tuple[int, int]


@dataclass(frozen=True)
class ClearSurface:
    pass


@dataclass(frozen=True)
class DrawGrid:
    cell_width: float
    cell_height: float


@dataclass(frozen=True)
class DrawMark:
    mark: Cell
    row: int
    col: int
    x: float  # cell top-left
    y: float


@dataclass(frozen=True)
class DrawWinLine:
    mark: Cell
    start: Address
    end: Address
    start_point: Point  # centre of the first cell
    end_point: Point    # centre of the last cell

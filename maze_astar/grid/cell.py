"Contains the value types describing a single maze cell"

from enum import IntEnum
from typing import NamedTuple, Optional


class Coordinate(NamedTuple):
    "The position of a cell. `x` is the column, `y` the row, both counted from zero."
    x: int
    y: int


class CellType(IntEnum):
    "What a cell of the maze is made of"
    PATH = 0
    WALL = 1
    ENTRANCE = 2
    EXIT = 3


class Cell(NamedTuple):
    """A snapshot of the search state of one grid position.

    The search itself works on the arrays of a :py:class:`~maze_astar.grid.model.Grid`;
    this type is what the grid hands out when asked for a single cell."""
    #: The type of the cell, fixed when the grid is built
    cell_type: CellType
    #: Position of the cell
    coordinate: Coordinate
    #: Predecessor on the best known path from the entrance.
    #: It is `None` while the search has not reached the cell.
    parent_coordinate: Optional[Coordinate] = None
    #: Manhattan distance from this cell to the exit
    heuristic: int = 0
    #: Number of steps on the best known path from the entrance.
    #: Unreached cells keep 0, which never overestimates.
    cost: int = 0

    @property
    def traversable(self) -> bool:
        "Whether a path may lead through this cell"
        return self.cell_type != CellType.WALL


def manhattan(a: Coordinate, b: Coordinate) -> int:
    "Returns |dx| + |dy| between two coordinates"
    return abs(a.x - b.x) + abs(a.y - b.y)

"""Contains the `Grid` class, the in-memory form of a parsed maze.

The grid is an arena of cell records. Every cell is addressed by its flat index
``row * width + column``, and each field of a cell record lives in its own numpy
array:

* ``cell_types``: the :py:class:`~maze_astar.grid.cell.CellType` of the cell
* ``heuristics``: the Manhattan distance to the exit, computed once at construction
* ``costs``: the best known number of steps from the entrance
* ``parents``: the flat index of the predecessor on that path, or -1 if unreached

The search writes ``costs`` and ``parents`` in place. Call :py:meth:`Grid.reset`
before searching the same grid a second time.
"""

from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np

from .cell import Cell, CellType, Coordinate

#: Marks a cell without predecessor in the `parents` array
NO_PARENT = -1


class Grid:
    "A rectangular maze, its endpoints and the search state of its cells"

    def __init__(
            self,
            width: int,
            height: int,
            cell_types: Sequence[CellType],
            entrance_location: Coordinate,
            exit_location: Coordinate,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cell_types = np.asarray(cell_types, dtype=np.int8)
        if self.cell_types.shape != (width * height,):
            raise ValueError(
                f"Expected {width * height} cell types for a {width}x{height} grid, "
                f"got {self.cell_types.size}"
            )
        for location in (entrance_location, exit_location):
            if not self.in_bounds(location):
                raise ValueError(f"{location} lies outside of the grid")
        if entrance_location == exit_location:
            raise ValueError("Entrance and exit must be different cells")
        self.entrance_location = Coordinate(*entrance_location)
        self.exit_location = Coordinate(*exit_location)

        # Manhattan distance of every cell to the exit
        columns, rows = np.meshgrid(np.arange(width), np.arange(height))
        self.heuristics = (
            np.abs(columns - self.exit_location.x) + np.abs(rows - self.exit_location.y)
        ).ravel().astype(np.int64)

        self.costs = np.zeros(width * height, dtype=np.int64)
        self.parents = np.full(width * height, NO_PARENT, dtype=np.int64)

    def __repr__(self) -> str:
        return (
            f"Grid({self.width}x{self.height}, entrance={tuple(self.entrance_location)}, "
            f"exit={tuple(self.exit_location)})"
        )

    @property
    def size(self) -> int:
        "Number of cells in the grid"
        return self.width * self.height

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, coord: Coordinate) -> int:
        "Returns the flat index of a coordinate"
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} lies outside of the grid")
        return coord[1] * self.width + coord[0]

    def coordinate(self, index: int) -> Coordinate:
        "Returns the coordinate of a flat index"
        row, column = divmod(int(index), self.width)
        return Coordinate(column, row)

    def cell_type(self, index: int) -> CellType:
        return CellType(int(self.cell_types[index]))

    def is_reached(self, index: int) -> bool:
        "Whether the search has found any path to this cell"
        return index == self.index(self.entrance_location) or self.parents[index] != NO_PARENT

    def cell(self, coord: Coordinate) -> Cell:
        "Returns a snapshot of the cell at `coord`"
        index = self.index(coord)
        parent = int(self.parents[index])
        return Cell(
            self.cell_type(index),
            Coordinate(*coord),
            self.coordinate(parent) if parent != NO_PARENT else None,
            int(self.heuristics[index]),
            int(self.costs[index]),
        )

    def cells(self) -> Iterator[Cell]:
        "Yields all cells in row-major order"
        for index in range(self.size):
            yield self.cell(self.coordinate(index))

    def neighbors(self, index: int) -> List[int]:
        "Returns the flat indices of the up to four orthogonal neighbours inside the grid"
        row, column = divmod(index, self.width)
        result = []
        if row > 0:
            result.append(index - self.width)
        if column > 0:
            result.append(index - 1)
        if column < self.width - 1:
            result.append(index + 1)
        if row < self.height - 1:
            result.append(index + self.width)
        return result

    def reset(self):
        "Forgets all search results, so the grid can be searched again"
        self.costs.fill(0)
        self.parents.fill(NO_PARENT)

    def render(self, path: Optional[Iterable[Coordinate]] = None,
               open_char: str = "-", wall_char: str = "#", path_char: str = "*") -> str:
        """Draws the grid as text, one line per row.

        Entrance and exit are drawn as ``S`` and ``E``; cells on `path` as `path_char`."""
        symbols = {
            CellType.PATH: open_char,
            CellType.WALL: wall_char,
            CellType.ENTRANCE: "S",
            CellType.EXIT: "E",
        }
        chars = [symbols[CellType(int(t))] for t in self.cell_types]
        for coord in path or ():
            index = self.index(coord)
            if self.cell_types[index] == CellType.PATH:
                chars[index] = path_char
        return "\n".join(
            "".join(chars[row * self.width:(row + 1) * self.width])
            for row in range(self.height)
        )

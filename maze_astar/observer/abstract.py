"Contains the abstract observer class for the solver"
from abc import abstractmethod
from typing import Sequence

from ..grid import Coordinate, Grid


class SolverObserver:
    "Abstract class representing an observer to the maze solving process"

    @abstractmethod
    def on_grid_built(self, grid: Grid):
        "Called by the solver after the maze text has been parsed"

    @abstractmethod
    def on_expand(self, coordinate: Coordinate, cost: int):
        "Called by the search when it expands a cell, reached with `cost` steps"

    @abstractmethod
    def on_push(self, coordinate: Coordinate, cost: int, estimate: int):
        """Called by the search when it queues a cell, reached with `cost` steps and
        an estimated total path length of `estimate`"""

    @abstractmethod
    def on_solved(self, path: Sequence[Coordinate]):
        "Called after the solver found the path from entrance to exit"

    def on_no_path(self):
        """Called after the search ran out of cells without reaching the exit.

        The solver raises NoPathFoundError right after this."""

"Contains a simple SolverObserver implementation"
from typing import Sequence
from ..grid import Coordinate, Grid
from .abstract import SolverObserver


class SimpleObserver(SolverObserver):
    """A simple observer that collects the information and can be
    queried after the solving process is finished"""

    def __init__(self):
        self.grid = None
        self.expanded = []
        self.pushed = 0
        self.path = None
        self.failed = False

    def on_grid_built(self, grid: Grid):
        self.grid = grid

    def on_expand(self, coordinate: Coordinate, cost: int):
        self.expanded.append(coordinate)

    def on_push(self, coordinate: Coordinate, cost: int, estimate: int):
        self.pushed += 1

    def on_solved(self, path: Sequence[Coordinate]):
        self.path = list(path)

    def on_no_path(self):
        self.failed = True

"Builds the solution path out of a searched grid"

from typing import List, Sequence

from .cell import Coordinate
from .error import IncompletePathError
from .model import Grid, NO_PARENT


def reconstruct_path(grid: Grid) -> List[Coordinate]:
    """Follows the parent links from the exit back to the entrance.

    The grid must have been searched successfully. Since a path cannot visit more cells
    than the grid has, the walk gives up after `grid.size` steps.

    Returns:
        The coordinates from the entrance to the exit, both included
    Raises:
        IncompletePathError:
            If a cell on the way has no parent or the links form a cycle.
    """
    entrance = grid.index(grid.entrance_location)
    current = grid.index(grid.exit_location)
    path = []
    for _ in range(grid.size):
        path.append(grid.coordinate(current))
        if current == entrance:
            path.reverse()
            return path
        parent = int(grid.parents[current])
        if parent == NO_PARENT:
            raise IncompletePathError(f"{grid.coordinate(current)} was never reached")
        current = parent
    raise IncompletePathError(f"No way back to the entrance within {grid.size} steps")


def path_length(path: Sequence[Coordinate]) -> int:
    "Number of steps along a path"
    return max(len(path) - 1, 0)

"Helper functions for A*"

from ..cell import Coordinate, manhattan


class NoPathFoundError(Exception):
    "No path leads from the entrance to the exit"


def heuristic(current: Coordinate, target: Coordinate) -> int:
    """Estimated cost from current to target.

    On a grid with four neighbours per cell and unit steps, the Manhattan distance
    never overestimates and is consistent."""
    return manhattan(current, target)

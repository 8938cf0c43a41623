"""
Provides the shortest_path(grid) -> List[Coordinate] function, which
finds a shortest path from the entrance of a maze to its exit.
"""
from typing import List, Optional, NamedTuple, TYPE_CHECKING
from heapq import heapify, heappush, heappop
from functools import total_ordering
from itertools import count
from logging import debug
from ..cell import CellType, Coordinate
from ..model import Grid
from ..backtrack import reconstruct_path
from .tools import heuristic, NoPathFoundError

if TYPE_CHECKING:
    from ...observer import SolverObserver


class Score(NamedTuple):
    """The score of a single item in the search priority queue"""
    f: int
    g: int


@total_ordering
class PQItem(NamedTuple):
    """A single item in the search priority queue"""
    score: Score
    sequence: int
    index: int

    def __lt__(self, other):
        return (self.score.f, self.sequence) < (other.score.f, other.sequence)


def a_star_search(
        grid: Grid,
        observer: Optional["SolverObserver"] = None,
        max_cost: Optional[int] = None,
) -> int:
    """
    Searches the grid from its entrance until the exit is reached.

    Uses the `A*`_ algorithm with the Manhattan distance as heuristic.

    The cost and parent of every reached cell are written into the grid. Afterwards,
    :py:func:`~maze_astar.grid.backtrack.reconstruct_path` builds the path.

    Improving the cost of a queued cell pushes a new item instead of updating the old
    one. Popped items whose cost is no longer the one stored in the grid are stale
    and get skipped. Since the heuristic is consistent, an expanded cell never needs
    to be opened again.

    .. _A*: https://en.wikipedia.org/wiki/A*_search_algorithm

    Args:
        grid:
            The maze to search. It must not have been searched since it was built or reset.
        observer:
            Optionally gets notified about every expanded and every queued cell
        max_cost:
            Maximum allowed path length.
            Cells that can only be part of a longer path are not queued.

    Returns:
        The number of steps from the entrance to the exit
    Raises:
        NoPathFoundError:
            Raised if the exit cannot be reached from the entrance (within `max_cost`).
    """
    start = grid.index(grid.entrance_location)
    goal = grid.index(grid.exit_location)
    debug(
        f"Searching {grid} with estimated distance "
        f"{heuristic(grid.entrance_location, grid.exit_location)}"
    )

    sequence = count()

    # The initial queue item
    initial = PQItem(Score(int(grid.heuristics[start]), 0), next(sequence), start)
    grid.costs[start] = 0

    # The queue
    open_set = [initial]
    heapify(open_set)

    # The expanded cells
    closed_set = set()

    while open_set:
        current = heappop(open_set)
        current_index = current.index

        # Skip items that were superseded by a cheaper one
        if current_index in closed_set or current.score.g != grid.costs[current_index]:
            continue

        # Check if the goal has been reached
        if current_index == goal:
            debug(f"Reached exit at cost {current.score.g} after {len(closed_set)} expansions")
            return current.score.g

        closed_set.add(current_index)
        if observer is not None:
            observer.on_expand(grid.coordinate(current_index), current.score.g)

        for neighbor in grid.neighbors(current_index):
            if neighbor in closed_set:
                continue
            if grid.cell_types[neighbor] in (CellType.WALL, CellType.ENTRANCE):
                continue

            tentative_cost = current.score.g + 1
            if grid.is_reached(neighbor) and tentative_cost >= grid.costs[neighbor]:
                continue

            estimate = tentative_cost + int(grid.heuristics[neighbor])
            if max_cost is not None and estimate > max_cost:
                continue

            grid.parents[neighbor] = current_index
            grid.costs[neighbor] = tentative_cost
            heappush(open_set, PQItem(Score(estimate, tentative_cost), next(sequence), neighbor))
            if observer is not None:
                observer.on_push(grid.coordinate(neighbor), tentative_cost, estimate)

    debug(f"Frontier exhausted after {len(closed_set)} expansions")
    raise NoPathFoundError("No path found")


def shortest_path(
        grid: Grid,
        observer: Optional["SolverObserver"] = None,
        max_cost: Optional[int] = None,
) -> List[Coordinate]:
    """Returns a shortest path from the entrance to the exit, both included.

    See :py:func:`a_star_search` for the arguments.

    Raises:
        NoPathFoundError:
            Raised if no path between entrance and exit could be found.
    """
    a_star_search(grid, observer, max_cost)
    return reconstruct_path(grid)

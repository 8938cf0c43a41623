"""The module doing the actual solving work.
This includes parsing the maze, searching it and building the path"""

from logging import debug
from typing import List, Optional
from ..observer import SolverObserver
from ..grid import (
    Coordinate,
    Grid,
    build_grid,
    read_maze,
    shortest_path,
    path_length,
    MazeReadError,
    MazeParseError,
    IncompletePathError,
    NoPathFoundError,
)
from .configuration import Config, DEFAULT_CONFIG, load_config, save_config


def parse(maze_text: str, config: Config = DEFAULT_CONFIG) -> Grid:
    "Builds the grid for `maze_text` with the characters defined in `config`"
    return build_grid(
        maze_text,
        open_char=config.open_char,
        wall_char=config.wall_char,
        entrance_marker=config.entrance_marker,
        exit_marker=config.exit_marker,
    )


def solve(
    maze_text: str,
    config: Config = DEFAULT_CONFIG,
    observer: Optional[SolverObserver] = None,
) -> List[Coordinate]:
    """Finds a shortest path through a maze.

    Args:
        maze_text:
            The maze, one row per line
        config:
            A definition of the maze characters and the search limits
        observer:
            An observer that collects information when events of interest happen at the solver

    Returns:
        The coordinates from the entrance to the exit, both included.
        Consecutive coordinates differ by one step in exactly one direction.
    Raises:
        MazeParseError:
            Raised if the maze text is not a valid maze.
        NoPathFoundError:
            Raised if the exit cannot be reached from the entrance.
        IncompletePathError:
            Raised if the search left the grid in an inconsistent state.
    """
    grid = parse(maze_text, config)
    if observer is not None:
        observer.on_grid_built(grid)
    try:
        path = shortest_path(grid, observer, config.max_cost)
    except NoPathFoundError:
        debug(f"No path through {grid}")
        if observer is not None:
            observer.on_no_path()
        raise
    debug(f"Found path of length {path_length(path)}")
    if observer is not None:
        observer.on_solved(path)
    return path


def solve_file(
    path: str,
    config: Config = DEFAULT_CONFIG,
    observer: Optional[SolverObserver] = None,
) -> List[Coordinate]:
    """Reads a maze file and solves it. See :py:func:`solve`.

    Raises:
        MazeReadError:
            Raised if the file cannot be read.
    """
    return solve(read_maze(path), config, observer)

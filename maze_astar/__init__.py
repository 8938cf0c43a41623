#!/usr/bin/env python3
"""
Maze solver package.
"""

from .solving import (
    solve,
    solve_file,
    parse,
    Config,
    load_config,
    save_config,
    DEFAULT_CONFIG,
    MazeReadError,
    MazeParseError,
    NoPathFoundError,
    IncompletePathError,
)
from .grid import Coordinate, CellType, Cell, Grid, path_length
from .observer import SolverObserver, SimpleObserver

from ._version import (
    __title__,
    __description__,
    __url__,
    __version__,
    __author__,
    __author_email__,
    __license__,
)

"""
This module describes the maze grid: its cells, how it is built from text,
and how it is searched.
"""

from .cell import Cell, CellType, Coordinate, manhattan
from .model import Grid
from .builder import build_grid, read_maze
from .error import MazeReadError, MazeParseError, IncompletePathError
from .backtrack import reconstruct_path, path_length
from .a_star import a_star_search, shortest_path, NoPathFoundError

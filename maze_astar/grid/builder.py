"Turns maze text into a `Grid`"

from logging import debug
from typing import List, Optional, Tuple

from .cell import CellType, Coordinate
from .error import MazeParseError, MazeReadError
from .model import Grid


def read_maze(path: str) -> str:
    """Reads the text of a maze file

    Raises:
        MazeReadError:
            If the file cannot be opened or read.
    """
    try:
        with open(path, "r") as maze_file:
            return maze_file.read()
    except OSError as err:
        raise MazeReadError(f"Could not read maze {path}: {err}") from err


def _check_symbols(open_char: str, wall_char: str,
                   entrance_marker: Optional[str], exit_marker: Optional[str]):
    symbols = [open_char, wall_char]
    symbols += [marker for marker in (entrance_marker, exit_marker) if marker is not None]
    for symbol in symbols:
        if len(symbol) != 1 or symbol.isspace():
            raise ValueError(f"Maze symbols must be single printable characters, got {symbol!r}")
    if len(set(symbols)) != len(symbols):
        raise ValueError(f"Maze symbols must be distinct, got {symbols}")


def _split_rows(maze_text: str, known: str) -> List[str]:
    """Removes every character that is not in `known` and drops rows that end up empty.

    Raises MazeParseError if no row is left or the rows differ in length."""
    rows = []
    for line in maze_text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        row = "".join(char for char in line if char in known)
        if row:
            rows.append(row)
    if not rows:
        raise MazeParseError("The maze is empty")
    width = len(rows[0])
    for number, row in enumerate(rows):
        if len(row) != width:
            raise MazeParseError(
                f"Row {number} has {len(row)} cells, but the first row has {width}"
            )
    return rows


def _find_marker(rows: List[str], marker: str, name: str) -> Coordinate:
    found = [
        Coordinate(x, y)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char == marker
    ]
    if len(found) != 1:
        raise MazeParseError(
            f"Expected exactly one {name} marker {marker!r}, found {len(found)}"
        )
    return found[0]


def _boundary_openings(rows: List[str], open_char: str) -> List[Coordinate]:
    "All open cells on the outer edge of the maze, in row-major order"
    height, width = len(rows), len(rows[0])
    return [
        Coordinate(x, y)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char == open_char and (y in (0, height - 1) or x in (0, width - 1))
    ]


def _locate_endpoints(
        rows: List[str],
        open_char: str,
        entrance_marker: Optional[str],
        exit_marker: Optional[str],
) -> Tuple[Coordinate, Coordinate]:
    entrance = _find_marker(rows, entrance_marker, "entrance") if entrance_marker else None
    exit_ = _find_marker(rows, exit_marker, "exit") if exit_marker else None
    if entrance is not None and exit_ is not None:
        return entrance, exit_

    openings = _boundary_openings(rows, open_char)
    needed = (entrance is None) + (exit_ is None)
    if len(openings) < needed:
        raise MazeParseError(
            f"The maze needs {needed} more boundary opening(s) for entrance and exit, "
            f"found {len(openings)}"
        )
    if len(openings) > needed:
        debug(f"Ignoring {len(openings) - needed} additional boundary opening(s)")
    if entrance is None:
        entrance = openings.pop(0)
    if exit_ is None:
        exit_ = openings.pop(0)
    return entrance, exit_


def build_grid(
        maze_text: str,
        open_char: str = "-",
        wall_char: str = "#",
        entrance_marker: Optional[str] = None,
        exit_marker: Optional[str] = None,
) -> Grid:
    """Parses maze text into a grid.

    Every line of the text is a row of the maze. `open_char` marks a cell that can be walked
    on, `wall_char` one that cannot. All other characters, including whitespace, are dropped
    before the rows are read; rows that are empty afterwards are skipped.

    Without markers, the first open cell on the edge of the maze (in row-major order) becomes
    the entrance and the second one the exit. Any further openings on the edge are plain path
    cells.

    Args:
        maze_text:
            The maze as text
        open_char:
            Character for an open cell
        wall_char:
            Character for a wall
        entrance_marker:
            If given, the single cell with this character is the entrance, wherever it is.
        exit_marker:
            If given, the single cell with this character is the exit, wherever it is.

    Returns:
        The grid, with entrance, exit and the heuristic of every cell set.
    Raises:
        MazeParseError:
            If the maze is empty, the rows differ in length, or entrance and exit cannot
            be determined.
        ValueError:
            If the given characters are not distinct single characters.
    """
    _check_symbols(open_char, wall_char, entrance_marker, exit_marker)
    known = open_char + wall_char + (entrance_marker or "") + (exit_marker or "")
    rows = _split_rows(maze_text, known)
    width, height = len(rows[0]), len(rows)
    entrance, exit_ = _locate_endpoints(rows, open_char, entrance_marker, exit_marker)

    cell_types = []
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if (x, y) == entrance:
                cell_types.append(CellType.ENTRANCE)
            elif (x, y) == exit_:
                cell_types.append(CellType.EXIT)
            elif char == wall_char:
                cell_types.append(CellType.WALL)
            else:
                cell_types.append(CellType.PATH)

    debug(f"Built {width}x{height} maze with entrance {entrance} and exit {exit_}")
    return Grid(width, height, cell_types, entrance, exit_)

class MazeReadError(OSError):
    "The maze source could not be read"


class MazeParseError(Exception):
    "The maze text does not describe a valid rectangular maze"


class IncompletePathError(Exception):
    "The parent links of a searched grid do not lead back to the entrance"

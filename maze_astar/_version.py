__title__ = "maze-astar"
__description__ = "Shortest paths through text mazes using A* search"
__url__ = "https://github.com/maze-astar/maze-astar-python"
__version__ = "1.0.0"
__author__ = "maze-astar contributors"
__author_email__ = "maze-astar@users.noreply.github.com"
__license__ = "Apache License 2.0"

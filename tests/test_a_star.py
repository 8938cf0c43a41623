"Contains a testcase for the grid.a_star and grid.backtrack modules"

import unittest
from contextlib import suppress
from itertools import pairwise

from maze_astar.grid import (
    build_grid,
    shortest_path,
    a_star_search,
    reconstruct_path,
    path_length,
    CellType,
    Coordinate,
    NoPathFoundError,
    IncompletePathError,
    manhattan,
)
from maze_astar.grid.a_star.tools import heuristic
from maze_astar.observer import SimpleObserver

from .example_mazes import (
    SMALL_MAZE,
    CORRIDOR_MAZE,
    WALLED_MAZE,
    TWO_ROUTES_MAZE,
    ROOM_MAZE,
    IMPROVEMENT_MAZE,
    random_maze,
    bfs_length,
)


class PushRecorder(SimpleObserver):
    "Remembers the cost of every queued item per coordinate"

    def __init__(self):
        super().__init__()
        self.costs = {}

    def on_push(self, coordinate, cost, estimate):
        super().on_push(coordinate, cost, estimate)
        self.costs.setdefault(coordinate, []).append(cost)


class AStarTests(unittest.TestCase):
    "Tests the A* module"

    def assertValidPath(self, grid, path):
        "Checks that `path` leads from entrance to exit in single steps over open cells"
        self.assertEqual(path[0], grid.entrance_location)
        self.assertEqual(path[-1], grid.exit_location)
        self.assertEqual(path.count(grid.entrance_location), 1)
        self.assertEqual(path.count(grid.exit_location), 1)
        for a, b in pairwise(path):
            self.assertEqual(manhattan(a, b), 1, f"{a} and {b} are not adjacent")
        for coord in path:
            self.assertNotEqual(grid.cell(coord).cell_type, CellType.WALL)

    def test_shortest_path_small(self):
        "The only path through the small maze"
        grid = build_grid(SMALL_MAZE)
        path = shortest_path(grid)
        self.assertSequenceEqual(path, [
            Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1),
            Coordinate(2, 1), Coordinate(2, 0),
        ])
        self.assertEqual(path_length(path), 4)

    def test_shortest_path_corridor(self):
        "A corridor of N cells gives a path of N coordinates in order"
        grid = build_grid(CORRIDOR_MAZE)
        path = shortest_path(grid)
        self.assertSequenceEqual(path, [Coordinate(x, 1) for x in range(5)])
        self.assertEqual(path_length(path), 4)

    def test_search_returns_exit_cost(self):
        "The search result is the cost stored at the exit"
        grid = build_grid(TWO_ROUTES_MAZE)
        cost = a_star_search(grid)
        self.assertEqual(cost, 10)
        self.assertEqual(grid.cell(grid.exit_location).cost, cost)
        self.assertEqual(len(reconstruct_path(grid)), cost + 1)

    def test_shortest_path_two_routes(self):
        "One of two equally long routes is taken"
        grid = build_grid(TWO_ROUTES_MAZE)
        path = shortest_path(grid)
        self.assertValidPath(grid, path)
        self.assertEqual(path_length(path), 10)

    def test_shortest_path_room(self):
        "In an open room the path is as long as the Manhattan distance"
        grid = build_grid(ROOM_MAZE)
        path = shortest_path(grid)
        self.assertValidPath(grid, path)
        self.assertEqual(path_length(path), manhattan(grid.entrance_location, grid.exit_location))

    def test_no_path(self):
        "Walls between entrance and exit"
        grid = build_grid(WALLED_MAZE)
        with self.assertRaises(NoPathFoundError):
            shortest_path(grid)

    def test_max_cost(self):
        "Paths longer than max_cost are not found"
        with self.assertRaises(NoPathFoundError):
            shortest_path(build_grid(SMALL_MAZE), max_cost=3)
        path = shortest_path(build_grid(SMALL_MAZE), max_cost=4)
        self.assertEqual(path_length(path), 4)

    def test_entrance_is_not_reentered(self):
        "The entrance never gets a parent"
        grid = build_grid(ROOM_MAZE)
        shortest_path(grid)
        entrance = grid.cell(grid.entrance_location)
        self.assertIsNone(entrance.parent_coordinate)
        self.assertEqual(entrance.cost, 0)

    def test_parents_form_paths(self):
        "Every reached cell's cost is one more than its parent's"
        for seed in range(10):
            grid = build_grid(random_maze(seed))
            with suppress(NoPathFoundError):
                a_star_search(grid)
            for cell in grid.cells():
                if cell.parent_coordinate is not None:
                    parent = grid.cell(cell.parent_coordinate)
                    self.assertEqual(cell.cost, parent.cost + 1)
                    self.assertEqual(manhattan(cell.coordinate, parent.coordinate), 1)

    def test_optimal_against_bfs(self):
        "Path lengths match a brute-force breadth-first search"
        for seed in range(60):
            text = random_maze(seed)
            expected = bfs_length(build_grid(text))
            grid = build_grid(text)
            if expected is None:
                with self.assertRaises(NoPathFoundError, msg=f"seed {seed}"):
                    shortest_path(grid)
                continue
            path = shortest_path(grid)
            self.assertValidPath(grid, path)
            self.assertEqual(path_length(path), expected, f"seed {seed}")

    def test_deterministic(self):
        "Solving fresh copies of the same maze gives the same path"
        text = random_maze(3, width=20, height=15, density=0.2)
        self.assertSequenceEqual(
            shortest_path(build_grid(text)), shortest_path(build_grid(text))
        )

    def test_reset(self):
        "A reset grid can be searched again"
        grid = build_grid(ROOM_MAZE)
        first = shortest_path(grid)
        grid.reset()
        self.assertIsNone(grid.cell(grid.exit_location).parent_coordinate)
        self.assertSequenceEqual(shortest_path(grid), first)

    def test_observer(self):
        "The observer sees the expansions and queued cells"
        grid = build_grid(SMALL_MAZE)
        observer = SimpleObserver()
        path = shortest_path(grid, observer)
        self.assertEqual(observer.expanded[0], grid.entrance_location)
        self.assertNotIn(grid.exit_location, observer.expanded)
        self.assertGreaterEqual(observer.pushed, path_length(path))

    def test_queued_cell_improved(self):
        "A cheaper path to a queued cell replaces its parent and cost"
        grid = build_grid(IMPROVEMENT_MAZE, entrance_marker="S", exit_marker="E")
        observer = PushRecorder()
        path = shortest_path(grid, observer)
        improved = Coordinate(4, 2)
        self.assertSequenceEqual(observer.costs[improved], [6, 4])
        self.assertEqual(observer.expanded.count(improved), 1)
        cell = grid.cell(improved)
        self.assertEqual(cell.cost, 4)
        self.assertEqual(cell.parent_coordinate, Coordinate(3, 2))
        self.assertSequenceEqual(path[:5], [
            Coordinate(4, 0), Coordinate(3, 0), Coordinate(3, 1),
            Coordinate(3, 2), Coordinate(4, 2),
        ])
        self.assertEqual(path_length(path), 14)
        self.assertEqual(path_length(path), bfs_length(build_grid(
            IMPROVEMENT_MAZE, entrance_marker="S", exit_marker="E")))

    def test_heuristic(self):
        "The heuristic is the Manhattan distance"
        self.assertEqual(heuristic(Coordinate(1, 2), Coordinate(4, 0)), 5)
        self.assertEqual(heuristic(Coordinate(3, 3), Coordinate(3, 3)), 0)


class BacktrackTests(unittest.TestCase):
    "Tests the path reconstruction"

    def test_unsearched_grid(self):
        "Without a search, the exit has no parent"
        grid = build_grid(SMALL_MAZE)
        with self.assertRaises(IncompletePathError):
            reconstruct_path(grid)

    def test_parent_cycle(self):
        "Cyclic parent links are detected"
        grid = build_grid(SMALL_MAZE)
        grid.parents[2] = 5
        grid.parents[5] = 2
        with self.assertRaises(IncompletePathError):
            reconstruct_path(grid)

    def test_path_length(self):
        "The length of a path counts steps"
        self.assertEqual(path_length([]), 0)
        self.assertEqual(path_length([Coordinate(0, 0)]), 0)
        self.assertEqual(path_length([Coordinate(0, 0), Coordinate(0, 1)]), 1)

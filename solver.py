"""
* A script that solves maze files and prints the results

    - Inputs:
        - one or more maze text files
        - optionally a JSON config file
    - Outputs:
        - the length of the shortest path through each maze
        - the path, as coordinates or drawn into the maze
"""

import argparse
import logging
import sys

from tqdm import tqdm

from maze_astar import (
    solve_file,
    load_config,
    path_length,
    SimpleObserver,
    DEFAULT_CONFIG,
    MazeReadError,
    MazeParseError,
    NoPathFoundError,
    IncompletePathError,
)


def report(maze_path, path, grid, config, render):
    "Prints the result for a single maze"
    print(f"{maze_path}: path length {path_length(path)}")
    if render:
        print(grid.render(path, open_char=config.open_char, wall_char=config.wall_char))
    else:
        print(" ".join(f"({x},{y})" for x, y in path))


def run_solver(maze_paths, config=DEFAULT_CONFIG, render=False, quiet=False):
    """Solves every maze and returns the number of mazes that could not be solved"""
    failures = 0
    for maze_path in tqdm(maze_paths, disable=len(maze_paths) < 2 or quiet):
        try:
            observer = SimpleObserver()
            path = solve_file(maze_path, config, observer)
        except (MazeReadError, MazeParseError) as err:
            print(f"{maze_path}: {err}", file=sys.stderr)
            failures += 1
            continue
        except NoPathFoundError:
            print(f"{maze_path}: no path from entrance to exit", file=sys.stderr)
            failures += 1
            continue
        except IncompletePathError as err:
            print(f"{maze_path}: internal error: {err}", file=sys.stderr)
            failures += 1
            continue
        if not quiet:
            report(maze_path, path, observer.grid, config, render)
    return failures


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Find the shortest path through text mazes")
    parser.add_argument("mazes", nargs="+", help="paths to maze files")
    parser.add_argument("-c", "--config", action="store", help="JSON config file.")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode.")
    parser.add_argument("-r", "--render", action="store_true", help="Draw the path into the maze.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report failures.")
    args = parser.parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    failures = run_solver(args.mazes, config, render=args.render, quiet=args.quiet)
    sys.exit(1 if failures else 0)

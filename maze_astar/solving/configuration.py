"Contains the configuration object that can be passed to the solver, as well as default values"
from io import TextIOBase
from json import loads, dumps
from typing import NamedTuple, Union, Optional


class Config(NamedTuple):
    """A config object that provides all settings that influence the solver's behaviour

    Customize the values where the default won't fit you:

        >>> myconfig = Config(open_char=".", entrance_marker="S", exit_marker="E")
    """

    #: The character of a cell that can be walked on
    open_char: str = "-"
    #: The character of a wall
    wall_char: str = "#"
    #: If set, the single cell with this character is the entrance.
    #:
    #: Otherwise, the first open cell on the edge of the maze is the entrance.
    entrance_marker: Optional[str] = None
    #: If set, the single cell with this character is the exit.
    #:
    #: Otherwise, the next open cell on the edge of the maze after the entrance is the exit.
    exit_marker: Optional[str] = None
    #: Paths longer than this number of steps are not considered.
    #: `None` means no limit.
    max_cost: Optional[int] = None


DEFAULT_CONFIG = Config()


def load_config(source: Union[str, TextIOBase, dict]) -> Config:
    """Load config from a source

    Keys missing from the source keep their default value.

    Args:
        source:
            Either an open text file containing a JSON dict, or the path to it, or a dictionary
    Returns:
        The read Config object
    """
    opened_source = source
    if isinstance(opened_source, str):
        with open(source, "r") as config_file:
            opened_source = loads(config_file.read())
    elif isinstance(opened_source, TextIOBase):
        opened_source = loads(opened_source.read())
    if not isinstance(opened_source, dict):
        raise TypeError("Surprising type")
    unknown = set(opened_source) - set(Config._fields)
    if unknown:
        raise TypeError(f"Unknown config keys: {sorted(unknown)}")
    return DEFAULT_CONFIG._replace(**opened_source)


NoneType: object = type(None)


def save_config(config: Config, dest: Union[str, TextIOBase, NoneType] = None) -> Optional[dict]:
    """Saves a config to a file or a dictionary

    Args:
        config:
            The config.
        dest:
            Either a path, or an already write-opened text file, or nothing.
    Returns:
        If no destination was given, returns the config as dictionary"""
    if dest is None:
        return dict(config._asdict())
    if isinstance(dest, str):
        with open(dest, "w") as filepointer:
            # Call the TextIOBase code path
            save_config(config, filepointer)
    elif isinstance(dest, TextIOBase):
        dest.write(dumps(save_config(config)))
    else:
        raise TypeError("`dest` has to be a valid destination")
    return None

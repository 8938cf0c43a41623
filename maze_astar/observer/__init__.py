"""
Observers get notified while a maze is parsed and searched.
"""

from .abstract import SolverObserver
from .simple_observer import SimpleObserver

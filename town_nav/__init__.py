"""
Town Navigator: Turn-by-Turn Directions in a Grid Town

Breadth-first route search over (intersection, direction) poses and a
compiler that turns the route into landmark-referencing directions.
"""

__version__ = "0.1.0"

from .grid import Landmark, TownGrid
from .pose import Action, Direction, IllegalActionError, Pose, apply_action, legal_actions
from .search import search
from .instructions import compile_instructions, describe_route
from .town_generator import generate_town, generate_scenario
from .session import NavigationSession

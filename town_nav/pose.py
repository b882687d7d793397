"""
Pose State Machine

Directions, actions and the legal transitions between poses
(intersection + facing direction).
"""

from enum import Enum, IntEnum
from typing import Dict, List, NamedTuple, Optional, Tuple


class Direction(IntEnum):
    """Facing direction, cyclic in clockwise order."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


# (row_change, col_change) for one block forward
# Moving North decreases the row, East increases the column
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


class Action(Enum):
    """Player actions, valued by their command letter."""
    FORWARD = "f"
    TURN_LEFT = "l"
    TURN_RIGHT = "r"


ACTION_NAMES = {
    Action.FORWARD: "FORWARD",
    Action.TURN_LEFT: "LEFT",
    Action.TURN_RIGHT: "RIGHT",
}

# Expansion order for search: forward first, then left, then right
ACTION_ORDER = (Action.FORWARD, Action.TURN_LEFT, Action.TURN_RIGHT)

_COMMAND_ALIASES = {
    "f": Action.FORWARD,
    "forward": Action.FORWARD,
    "l": Action.TURN_LEFT,
    "left": Action.TURN_LEFT,
    "r": Action.TURN_RIGHT,
    "right": Action.TURN_RIGHT,
}


class IllegalActionError(ValueError):
    """An action was applied to a pose where it is not legal."""


class Pose(NamedTuple):
    """Complete navigational state: intersection plus facing direction."""
    row: int
    col: int
    direction: Direction

    @property
    def intersection(self) -> Tuple[int, int]:
        return (self.row, self.col)


def _on_lattice(row: int, col: int, size: int) -> bool:
    return 0 <= row <= size and 0 <= col <= size


def forward_intersection(pose: Pose) -> Tuple[int, int]:
    """Intersection one block ahead, ignoring bounds."""
    dr, dc = DIRECTION_VECTORS[pose.direction]
    return (pose.row + dr, pose.col + dc)


def legal_actions(pose: Pose, size: int) -> List[Action]:
    """
    Get the actions available from a pose.

    Args:
        pose: Current pose
        size: Grid size N (intersections span 0..N)

    Returns:
        Legal actions in expansion order. Turns are always legal on the
        lattice; forward only if the next intersection stays on it.
    """
    if not _on_lattice(pose.row, pose.col, size):
        return []

    actions = []
    if _on_lattice(*forward_intersection(pose), size):
        actions.append(Action.FORWARD)
    actions.append(Action.TURN_LEFT)
    actions.append(Action.TURN_RIGHT)
    return actions


def apply_action(pose: Pose, action: Action, size: int) -> Pose:
    """
    Compute the pose that results from taking an action.

    Args:
        pose: Current pose
        action: Action to take
        size: Grid size N

    Returns:
        New pose

    Raises:
        IllegalActionError: If the action is not in legal_actions(pose)
    """
    if action not in legal_actions(pose, size):
        raise IllegalActionError(
            f"{ACTION_NAMES.get(action, action)} is not legal at "
            f"({pose.row}, {pose.col}) facing {Direction(pose.direction).label} "
            f"on a {size}x{size} grid"
        )

    if action is Action.FORWARD:
        row, col = forward_intersection(pose)
        return Pose(row, col, pose.direction)
    if action is Action.TURN_LEFT:
        return Pose(pose.row, pose.col, Direction((pose.direction - 1) % 4))
    return Pose(pose.row, pose.col, Direction((pose.direction + 1) % 4))


def pose_key(pose: Pose, size: int) -> int:
    """Encode a pose as a single integer in [0, (N+1)^2 * 4)."""
    return pose.row * (size + 1) * 4 + pose.col * 4 + int(pose.direction)


def parse_command(text: str) -> Optional[Action]:
    """Parse a player command ('f', 'l', 'r' or the full word)."""
    return _COMMAND_ALIASES.get(text.strip().lower())

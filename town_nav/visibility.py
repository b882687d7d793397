"""
Visibility Oracle

Which landmarks a player sees ahead-left and ahead-right from a pose.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple

from .grid import Landmark, TownGrid
from .pose import Direction, Pose


class Quadrant(Enum):
    FRONT_LEFT = "Front-Left"
    FRONT_RIGHT = "Front-Right"
    BACK_LEFT = "Back-Left"
    BACK_RIGHT = "Back-Right"

    @property
    def side(self) -> str:
        """'left' or 'right'."""
        return self.value.split("-")[1].lower()


# Display order of the cells around an intersection (row, col offsets)
QUADRANT_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 0), (-1, -1), (-1, 0))

# Offset -> player-relative quadrant, per facing direction
RELATIVE_QUADRANTS: Dict[Direction, Dict[Tuple[int, int], Quadrant]] = {
    Direction.NORTH: {
        (-1, -1): Quadrant.FRONT_LEFT,
        (-1, 0): Quadrant.FRONT_RIGHT,
        (0, -1): Quadrant.BACK_LEFT,
        (0, 0): Quadrant.BACK_RIGHT,
    },
    Direction.EAST: {
        (-1, -1): Quadrant.BACK_LEFT,
        (-1, 0): Quadrant.FRONT_LEFT,
        (0, -1): Quadrant.BACK_RIGHT,
        (0, 0): Quadrant.FRONT_RIGHT,
    },
    Direction.SOUTH: {
        (-1, -1): Quadrant.BACK_RIGHT,
        (-1, 0): Quadrant.BACK_LEFT,
        (0, -1): Quadrant.FRONT_RIGHT,
        (0, 0): Quadrant.FRONT_LEFT,
    },
    Direction.WEST: {
        (-1, -1): Quadrant.FRONT_RIGHT,
        (-1, 0): Quadrant.BACK_RIGHT,
        (0, -1): Quadrant.FRONT_LEFT,
        (0, 0): Quadrant.BACK_LEFT,
    },
}


class VisibleLandmarks(NamedTuple):
    """Landmarks ahead of the player; None means the edge of town."""
    left: Optional[Landmark]
    right: Optional[Landmark]


def quadrant_landmarks(
    grid: TownGrid,
    pose: Pose
) -> Dict[Quadrant, Optional[Landmark]]:
    """
    Map each quadrant around the player to its landmark.

    Args:
        grid: Town grid
        pose: Player pose

    Returns:
        Dict with all four quadrants; out-of-town cells map to None
    """
    mapping = RELATIVE_QUADRANTS[Direction(pose.direction)]
    result: Dict[Quadrant, Optional[Landmark]] = {}

    for dr, dc in QUADRANT_OFFSETS:
        result[mapping[(dr, dc)]] = grid.landmark_at(pose.row + dr, pose.col + dc)

    return result


def visible_landmarks(grid: TownGrid, pose: Pose) -> VisibleLandmarks:
    """Front-left and front-right landmarks for a pose."""
    quadrants = quadrant_landmarks(grid, pose)
    return VisibleLandmarks(
        left=quadrants[Quadrant.FRONT_LEFT],
        right=quadrants[Quadrant.FRONT_RIGHT],
    )

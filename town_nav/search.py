"""
Breadth-First Route Search

Finds the shortest sequence of forward/turn actions from a pose to any
intersection touching a target landmark. Every action costs one step.
"""

from collections import deque
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from .grid import TownGrid
from .pose import Action, Pose, apply_action, legal_actions, pose_key


class PathStep(NamedTuple):
    """One action and the pose it leads to."""
    action: Action
    pose: Pose


Path = List[PathStep]


def get_neighbors(pose: Pose, size: int) -> List[PathStep]:
    """
    Get the poses reachable in one action.

    Args:
        pose: Current pose
        size: Grid size N

    Returns:
        List of (action, next_pose) in forward, left, right order
    """
    return [
        PathStep(action, apply_action(pose, action, size))
        for action in legal_actions(pose, size)
    ]


def search(grid: TownGrid, start: Pose, target: str) -> Optional[Path]:
    """
    Compute the shortest action path to a landmark with BFS.

    Args:
        grid: Town grid
        start: Start pose
        target: Unique name of the destination landmark

    Returns:
        List of (action, resulting pose) steps, empty if the start is
        already adjacent, or None if no adjacent pose can be reached
    """
    size = grid.size

    if not grid.contains_intersection(start.intersection):
        return None  # Start is off the street lattice
    if grid.find_landmark(target) is None:
        return None  # Target not in town

    queue = deque([start])
    visited = {pose_key(start, size)}

    # Back-references: pose key -> (parent pose, action taken)
    came_from: Dict[int, Tuple[Pose, Action]] = {}

    while queue:
        current = queue.popleft()

        if grid.is_adjacent(current.intersection, target):
            # Reconstruct path
            path = []
            key = pose_key(current, size)
            while key in came_from:
                parent, action = came_from[key]
                path.append(PathStep(action, current))
                current = parent
                key = pose_key(current, size)
            return list(reversed(path))

        for action, neighbor in get_neighbors(current, size):
            key = pose_key(neighbor, size)
            if key in visited:
                continue
            visited.add(key)
            came_from[key] = (current, action)
            queue.append(neighbor)

    return None  # No path found


def pose_distances(start: Pose, size: int) -> Dict[Pose, int]:
    """
    Exhaustive BFS distance from a start pose to every reachable pose.

    Args:
        start: Start pose
        size: Grid size N

    Returns:
        Dict mapping pose to action count
    """
    distances = {start: 0}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for _, neighbor in get_neighbors(current, size):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)

    return distances


def shortest_distance(grid: TownGrid, start: Pose, target: str) -> Optional[int]:
    """Length of the shortest action path to the target, or None."""
    distances = pose_distances(start, grid.size)
    candidates = [
        dist for pose, dist in distances.items()
        if grid.is_adjacent(pose.intersection, target)
    ]
    return min(candidates) if candidates else None


def path_to_actions(path: Path) -> List[Action]:
    """Strip the poses from a path."""
    return [step.action for step in path]


def replay(start: Pose, actions: Iterable[Action], size: int) -> Pose:
    """
    Apply a sequence of actions to a pose.

    Raises:
        IllegalActionError: If any action is not legal where it is taken
    """
    pose = start
    for action in actions:
        pose = apply_action(pose, action, size)
    return pose


def next_action(grid: TownGrid, pose: Pose, target: str) -> Optional[Action]:
    """
    Get the first action of a shortest route toward the target.

    Returns:
        The action, or None if already adjacent or the target is unreachable
    """
    path = search(grid, pose, target)
    if not path:
        return None
    return path[0].action

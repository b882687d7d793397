"""
Test 4: Breadth-First Route Search

Run with:
    python tests/test_search.py
    pytest tests/test_search.py -v
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from town_nav.grid import TownGrid
from town_nav.pose import ACTION_NAMES, Action, Direction, Pose, apply_action, legal_actions
from town_nav.search import (
    next_action, path_to_actions, pose_distances, replay, search, shortest_distance,
)
from tests.helpers import LUKE, luke_town, small_town


F, L, R = Action.FORWARD, Action.TURN_LEFT, Action.TURN_RIGHT


def brute_force_distances(grid: TownGrid, target: str) -> dict:
    """Distance-to-goal for every pose by repeated relaxation."""
    size = grid.size
    poses = [
        Pose(r, c, d)
        for r in range(size + 1) for c in range(size + 1) for d in Direction
    ]
    inf = float('inf')
    dist = {p: (0 if grid.is_adjacent(p.intersection, target) else inf) for p in poses}

    changed = True
    while changed:
        changed = False
        for pose in poses:
            for action in legal_actions(pose, size):
                candidate = dist[apply_action(pose, action, size)] + 1
                if candidate < dist[pose]:
                    dist[pose] = candidate
                    changed = True
    return dist


def test_luke_example():
    """From (0,0) facing East, reach Luke's Diner at cell (2,2)."""
    grid = luke_town()
    start = Pose(0, 0, Direction.EAST)

    path = search(grid, start, LUKE)

    assert path is not None, "Path should exist"
    final = path[-1].pose
    assert final.intersection in {(2, 2), (2, 3), (3, 2), (3, 3)}
    assert grid.is_adjacent(final.intersection, LUKE)
    assert path_to_actions(path) == [F, F, R, F, F]
    assert [step.pose for step in path] == [
        Pose(0, 1, Direction.EAST),
        Pose(0, 2, Direction.EAST),
        Pose(0, 2, Direction.SOUTH),
        Pose(1, 2, Direction.SOUTH),
        Pose(2, 2, Direction.SOUTH),
    ]

    print(f"✓ Luke's Diner: {[ACTION_NAMES[a] for a in path_to_actions(path)]}")


def test_matches_brute_force():
    """Path length equals the true shortest distance for every start and target."""
    grid = small_town(3)
    size = grid.size
    checked = 0

    for landmark in grid.landmarks:
        reference = brute_force_distances(grid, landmark.name)
        for pose, expected in reference.items():
            path = search(grid, pose, landmark.name)
            assert path is not None
            assert len(path) == expected, f"{pose} -> {landmark.name}: {len(path)} != {expected}"

            final = replay(pose, path_to_actions(path), size)
            assert grid.is_adjacent(final.intersection, landmark.name)
            checked += 1

    print(f"✓ Brute force: {checked} (start, target) pairs optimal on 3x3")


def test_pose_distances_agree():
    """The exhaustive distance map gives the same shortest length."""
    grid = luke_town()
    start = Pose(5, 0, Direction.NORTH)

    distances = pose_distances(start, grid.size)
    assert len(distances) == 6 * 6 * 4, "Every pose is reachable"
    assert distances[start] == 0

    path = search(grid, start, LUKE)
    assert shortest_distance(grid, start, LUKE) == len(path)
    print(f"✓ Distance map: {len(distances)} poses, shortest = {len(path)}")


def test_already_adjacent():
    """Start next to the target gives an empty path."""
    grid = luke_town()
    path = search(grid, Pose(3, 3, Direction.WEST), LUKE)
    assert path == []
    print("✓ Already adjacent: empty path")


def test_target_not_present():
    """Unknown targets return None, not an error."""
    grid = luke_town()
    assert search(grid, Pose(0, 0, Direction.EAST), "Nowhere Cafe") is None
    assert shortest_distance(grid, Pose(0, 0, Direction.EAST), "Nowhere Cafe") is None
    print("✓ Missing target: None")


def test_start_off_grid():
    grid = luke_town()
    assert search(grid, Pose(9, 9, Direction.NORTH), LUKE) is None
    print("✓ Off-grid start: None")


def test_tie_break_prefers_left():
    """Turning around goes left-left when both ways are equally short."""
    grid = small_town(4)
    # A9 is cell (2, 1); facing North at the top edge we must turn around
    path = search(grid, Pose(0, 2, Direction.NORTH), "A9")

    assert path_to_actions(path) == [L, L, F, F]
    assert path[-1].pose == Pose(2, 2, Direction.SOUTH)
    print("✓ Tie-break: FORWARD, LEFT, RIGHT expansion order")


def test_deterministic():
    grid = luke_town()
    start = Pose(5, 5, Direction.WEST)
    first = search(grid, start, "New Post")
    for _ in range(3):
        assert search(grid, start, "New Post") == first
    print("✓ Deterministic: identical paths across runs")


def test_next_action():
    grid = luke_town()
    assert next_action(grid, Pose(0, 0, Direction.EAST), LUKE) is F
    assert next_action(grid, Pose(2, 2, Direction.EAST), LUKE) is None
    assert next_action(grid, Pose(0, 0, Direction.EAST), "Nowhere") is None
    print("✓ Next action: FORWARD toward target, None when there")


def run_all():
    """Run all tests with visual output."""
    print("\n" + "=" * 50)
    print("TEST 4: Route Search")
    print("=" * 50 + "\n")

    test_luke_example()
    test_matches_brute_force()
    test_pose_distances_agree()
    test_already_adjacent()
    test_target_not_present()
    test_start_off_grid()
    test_tie_break_prefers_left()
    test_deterministic()
    test_next_action()

    print("\n" + "-" * 50)
    print("All search tests passed!")
    print("-" * 50)


if __name__ == "__main__":
    run_all()

"""
Test 7: Navigation Session

Run with:
    python tests/test_session.py
    pytest tests/test_session.py -v
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from town_nav.pose import Direction, Pose
from town_nav.session import NavigationSession
from tests.helpers import LUKE, luke_town


def test_edge_blocks_forward():
    """Walking off the town is refused and the pose is unchanged."""
    session = NavigationSession(luke_town(), LUKE, Pose(0, 0, Direction.WEST))

    messages = session.handle_command("f")

    assert messages[0].style == "error"
    assert messages[0].text.startswith("You hit the edge of the town!")
    assert session.pose == Pose(0, 0, Direction.WEST)
    assert session.moves == 0
    print(f"✓ Edge: {messages[0].text}")


def test_turn_and_move():
    session = NavigationSession(luke_town(), LUKE, Pose(0, 0, Direction.WEST))

    messages = session.handle_command("l")
    assert messages[0].text == "You turned left."
    assert session.pose == Pose(0, 0, Direction.SOUTH)

    messages = session.handle_command("f")
    assert messages[0].text == "You moved forward one block."
    assert session.pose == Pose(1, 0, Direction.SOUTH)
    assert session.trace == [(0, 0), (1, 0)]
    assert session.moves == 2
    print("✓ Turn and move update the pose and trace")


def test_invalid_command():
    session = NavigationSession(luke_town(), LUKE, Pose(0, 0, Direction.EAST))
    messages = session.handle_command("jump")
    assert messages[0].style == "error"
    assert "Invalid command" in messages[0].text
    assert session.pose == Pose(0, 0, Direction.EAST)
    print("✓ Invalid command rejected")


def test_status_lines():
    """Status shows what is ahead, or the edge of the town."""
    session = NavigationSession(luke_town(), LUKE, Pose(0, 0, Direction.EAST))

    assert session.status_lines() == [
        "Now, you are facing East.",
        "In front of you, you can see:",
        "  - The edge of the town on your left.",
        "  - New Post on your right.",
    ]
    print("✓ Status lines with edge of town")


def test_follow_directions_to_win():
    """Following the computed route wins the game."""
    session = NavigationSession(luke_town(), LUKE, Pose(0, 0, Direction.EAST))
    assert not session.is_won()

    messages = []
    for command in ["f", "f", "r", "f", "f"]:
        messages = session.handle_command(command)

    assert session.is_won()
    assert messages[-1].style == "success"
    assert messages[-1].text == (
        "Congratulations! You found the Luke's Diner near your current position!"
    )
    print(f"✓ Win after {session.moves} moves")


def test_directions_and_hint():
    session = NavigationSession(luke_town(), LUKE, Pose(0, 0, Direction.EAST))

    directions = session.directions()
    assert directions.startswith("Here is how to go to the Luke's Diner.")
    assert "Turn right." in directions

    assert session.hint().text == "Try: forward ('f')."
    print("✓ Directions and hint")


def test_new_game_and_restart():
    session = NavigationSession.new_game(seed=7)
    assert session.grid.find_landmark(session.target) is not None
    assert not session.is_won()

    session.handle_command("l")
    session.restart(seed=8)
    assert session.moves == 0
    assert session.trace == [session.pose.intersection]
    assert session.target_category == "Restaurant"
    print(f"✓ New game and restart (target {session.target})")


def test_start_outside_rejected():
    try:
        NavigationSession(luke_town(), LUKE, Pose(9, 0, Direction.NORTH))
    except ValueError:
        print("✓ Start outside the town rejected")
    else:
        raise AssertionError("Start outside the town should be rejected")


def run_all():
    """Run all tests with visual output."""
    print("\n" + "=" * 50)
    print("TEST 7: Navigation Session")
    print("=" * 50 + "\n")

    test_edge_blocks_forward()
    test_turn_and_move()
    test_invalid_command()
    test_status_lines()
    test_follow_directions_to_win()
    test_directions_and_hint()
    test_new_game_and_restart()
    test_start_outside_rejected()

    print("\n" + "-" * 50)
    print("All session tests passed!")
    print("-" * 50)


if __name__ == "__main__":
    run_all()

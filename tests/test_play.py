"""
Test 9: Interactive Game

Run with:
    python tests/test_play.py
    pytest tests/test_play.py -v
"""

import io
import sys
from contextlib import redirect_stdout
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use("Agg")

from town_nav.play import main


def run_game(argv, commands):
    """Run the game with a scripted stdin and return everything printed."""
    out = io.StringIO()
    old_stdin = sys.stdin
    sys.stdin = io.StringIO("".join(line + "\n" for line in commands))
    try:
        with redirect_stdout(out):
            main(argv)
    finally:
        sys.stdin = old_stdin
    return out.getvalue()


def test_command_dispatch():
    """map, hint, directions, restart and quit are handled by the loop."""
    output = run_game(
        ["--seed", "7", "--no-directions"],
        ["map", "hint", "directions", "restart", "quit", "f"],
    )

    assert output.count("Your mission: Find the ") == 2  # start and restart
    assert output.count("--- Town Map Layout ---") == 1
    assert "Try: " in output
    assert "Here is how to go to the " in output
    assert output.rstrip().endswith("Bye!")
    # 'f' comes after quit and is never processed
    assert "moved forward" not in output and "hit the edge" not in output
    print("✓ Dispatch: map, hint, directions, restart, quit")


def test_moves_and_end_of_input():
    """Movement commands go to the session and EOF ends the game."""
    output = run_game(["--seed", "7", "--no-directions"], ["l", "xyz"])

    assert "You turned left." in output
    assert "! Invalid command. Please use 'f', 'l', or 'r'." in output
    assert output.rstrip().endswith("Bye!")
    print("✓ Moves, invalid input and end of input")


def test_ansi_markup():
    output = run_game(["--seed", "7", "--markup", "ansi"], ["quit"])

    assert "Your mission: Find the \033[1m" in output
    assert "\033[1mMake sure to read and remember this carefully\033[0m:" in output
    print("✓ ANSI markup in game output")


def test_bad_options_exit():
    """Generator errors are reported as ERROR: and exit with status 1."""
    for argv in (["--target-category", "Empty Lot"], ["--size", "0"]):
        out = io.StringIO()
        try:
            with redirect_stdout(out):
                main(argv)
        except SystemExit as e:
            assert e.code == 1
        else:
            raise AssertionError(f"{argv} should exit")
        assert out.getvalue().startswith("ERROR: ")

    print("✓ Bad options: ERROR: and exit 1")


def run_all():
    """Run all tests with visual output."""
    print("\n" + "=" * 50)
    print("TEST 9: Interactive Game")
    print("=" * 50 + "\n")

    test_command_dispatch()
    test_moves_and_end_of_input()
    test_ansi_markup()
    test_bad_options_exit()

    print("\n" + "-" * 50)
    print("All game tests passed!")
    print("-" * 50)


if __name__ == "__main__":
    run_all()

"""
Interactive Town Navigator

Play in the terminal: read the directions, then walk to the target with
'f' (forward), 'l' (turn left) and 'r' (turn right).

Usage:
    python -m town_nav.play
    python -m town_nav.play --seed 7 --size 6 --markup ansi --show-map
"""

import argparse
import sys

from .instructions import EMPHASIS_STYLES
from .session import Message, NavigationSession
from .town_generator import GRID_SIZE, TARGET_CATEGORY
from .visualize import town_map_ascii


COMMANDS_HELP = (
    "Commands: 'f' (forward), 'l' (turn left), 'r' (turn right), "
    "'map', 'directions', 'hint', 'restart', 'quit'"
)

STYLE_PREFIX = {
    'info': "",
    'error': "! ",
    'success': "* ",
}


def show(message: Message) -> None:
    print(STYLE_PREFIX.get(message.style, "") + message.text)


def start_game(session: NavigationSession, show_map: bool, show_directions: bool) -> None:
    print("=" * 50)
    print("Town Navigator")
    print("=" * 50)
    if show_map:
        print(town_map_ascii(session.grid, session.pose))
        print()
    show(Message(session.mission()))
    if show_directions:
        print()
        show(Message(session.directions(), 'success'))
    print()
    print(COMMANDS_HELP)
    print()
    show(Message("\n".join(session.status_lines())))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Town Navigator")
    parser.add_argument("--size", type=int, default=GRID_SIZE, help="Town size (buildings per side)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--target-category", default=TARGET_CATEGORY,
                        help="Building category to look for")
    parser.add_argument("--markup", choices=sorted(EMPHASIS_STYLES), default="plain",
                        help="How key words are emphasized")
    parser.add_argument("--show-map", action="store_true", help="Print the town map at start")
    parser.add_argument("--no-directions", action="store_true",
                        help="Do not print the route directions at start")
    args = parser.parse_args(argv)

    try:
        session = NavigationSession.new_game(
            size=args.size,
            target_category=args.target_category,
            seed=args.seed,
            emphasis=EMPHASIS_STYLES[args.markup],
        )
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    start_game(session, args.show_map, not args.no_directions)

    while True:
        try:
            command = input("> ").strip().lower()
        except EOFError:
            print()
            break

        if command in ("q", "quit", "exit"):
            break
        elif command == "map":
            print(town_map_ascii(session.grid, session.pose, show_legend=False))
        elif command == "directions":
            show(Message(session.directions(), 'success'))
        elif command == "hint":
            show(session.hint())
        elif command == "restart":
            session.restart()
            start_game(session, args.show_map, not args.no_directions)
        else:
            for message in session.handle_command(command):
                show(message)
            if session.is_won():
                print(f"\nYou made it in {session.moves} moves. Type 'restart' to play again.")

    print("Bye!")


if __name__ == "__main__":
    main()

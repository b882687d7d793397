"""
Navigation Session

Game state for one town: the player's pose, the trace of visited
intersections, command handling and the win check.
"""

from typing import List, NamedTuple, Optional, Tuple

from .grid import TownGrid
from .instructions import Emphasis, describe_route, format_directions, plain
from .pose import (
    ACTION_NAMES, Action, Direction, Pose, apply_action, legal_actions, parse_command,
)
from .search import next_action
from .town_generator import GRID_SIZE, TARGET_CATEGORY, generate_scenario
from .visibility import Quadrant, quadrant_landmarks


class Message(NamedTuple):
    """Text for the player, with a style of 'info', 'error' or 'success'."""
    text: str
    style: str = "info"


class NavigationSession:
    """
    A single game: fixed town and target, one mutable pose slot.

    The pose only changes through apply_action, so it is always legal.
    """

    def __init__(
        self,
        grid: TownGrid,
        target: str,
        start: Pose,
        emphasis: Emphasis = plain
    ):
        """
        Args:
            grid: Town grid
            target: Unique name of the landmark to find
            start: Initial player pose
            emphasis: Markup for key words in messages

        Raises:
            ValueError: If the start pose is off the grid
        """
        if not grid.contains_intersection(start.intersection):
            raise ValueError(f"Start {start.intersection} is outside the town")

        self.grid = grid
        self.target = target
        self.start = start
        self.emphasis = emphasis
        self.pose = start
        self.trace: List[Tuple[int, int]] = [start.intersection]
        self.moves = 0

    @property
    def target_category(self) -> str:
        cell = self.grid.find_landmark(self.target)
        if cell is None:
            return TARGET_CATEGORY
        return self.grid.landmark_at(*cell).category

    @classmethod
    def new_game(
        cls,
        size: int = GRID_SIZE,
        target_category: str = TARGET_CATEGORY,
        seed: Optional[int] = None,
        emphasis: Emphasis = plain
    ) -> "NavigationSession":
        """Start a session in a freshly generated town."""
        grid, target, start = generate_scenario(
            size=size, target_category=target_category, seed=seed
        )
        return cls(grid, target, start, emphasis=emphasis)

    def restart(self, seed: Optional[int] = None) -> None:
        """Replace the town, target and pose with a new random game."""
        game = self.new_game(
            size=self.grid.size,
            target_category=self.target_category,
            seed=seed,
            emphasis=self.emphasis,
        )
        self.grid = game.grid
        self.target = game.target
        self.start = game.start
        self.pose = game.pose
        self.trace = game.trace
        self.moves = 0

    def is_won(self) -> bool:
        """True once the player stands next to the target."""
        return self.grid.is_adjacent(self.pose.intersection, self.target)

    def mission(self) -> str:
        return f"Your mission: Find the {self.emphasis(self.target)}."

    def directions(self) -> str:
        """Narrated route from the current pose."""
        lines = describe_route(self.grid, self.pose, self.target, self.emphasis)
        if len(lines) == 1:
            return lines[0]  # No route
        return format_directions(lines, self.target, self.emphasis)

    def hint(self) -> Message:
        action = next_action(self.grid, self.pose, self.target)
        if action is None:
            if self.is_won():
                return Message("You are already there!", "success")
            return Message("No hint available from here.", "error")
        return Message(f"Try: {ACTION_NAMES[action].lower()} ('{action.value}').")

    def status_lines(self) -> List[str]:
        """Describe the facing direction and what lies ahead."""
        em = self.emphasis
        lines = [
            f"Now, you are facing {em(Direction(self.pose.direction).label)}.",
            "In front of you, you can see:",
        ]

        quadrants = quadrant_landmarks(self.grid, self.pose)
        if all(landmark is None for landmark in quadrants.values()):
            lines.append("  (No buildings immediately visible from this edge of town)")
            return lines

        for quadrant in (Quadrant.FRONT_LEFT, Quadrant.FRONT_RIGHT):
            landmark = quadrants[quadrant]
            if landmark is not None:
                lines.append(f"  - {em(landmark.name)} on your {em(quadrant.side)}.")
            else:
                lines.append(f"  - The edge of the town on your {em(quadrant.side)}.")
        return lines

    def move(self, action: Action) -> Message:
        """Apply an action if legal and describe the outcome."""
        if action not in legal_actions(self.pose, self.grid.size):
            return Message(
                "You hit the edge of the town! Cannot move further in that direction.",
                "error",
            )

        self.pose = apply_action(self.pose, action, self.grid.size)
        self.moves += 1

        if action is Action.FORWARD:
            self.trace.append(self.pose.intersection)
            return Message(f"You {self.emphasis('moved forward')} one block.")
        side = "left" if action is Action.TURN_LEFT else "right"
        return Message(f"You turned {self.emphasis(side)}.")

    def handle_command(self, text: str) -> List[Message]:
        """
        Process one player command.

        Args:
            text: Raw command ('f', 'l', 'r')

        Returns:
            Messages in display order: move outcome, status, and a
            congratulation once the target is reached
        """
        action = parse_command(text)
        if action is None:
            messages = [Message("Invalid command. Please use 'f', 'l', or 'r'.", "error")]
        else:
            messages = [self.move(action)]

        messages.append(Message("\n".join(self.status_lines())))

        if self.is_won():
            messages.append(Message(
                f"Congratulations! You found the {self.target} near your current position!",
                "success",
            ))
        return messages

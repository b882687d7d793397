"""
Instruction Compiler

Turns a raw action path into short, landmark-referencing directions.
Consecutive forward moves collapse into one "go straight" step and every
turn is narrated with what the player sees before and after it.
"""

from typing import Callable, Iterable, List, NamedTuple, Optional

from .grid import TownGrid
from .pose import Action, Direction, Pose
from .search import Path, search
from .visibility import visible_landmarks


NO_PATH_MESSAGE = (
    "I cannot find a clear path to that destination from your current location."
)

Emphasis = Callable[[str], str]


def plain(text: str) -> str:
    return text


def html_bold(text: str) -> str:
    return f"<b>{text}</b>"


def ansi_bold(text: str) -> str:
    return f"\033[1m{text}\033[0m"


EMPHASIS_STYLES = {
    "plain": plain,
    "html": html_bold,
    "ansi": ansi_bold,
}


class RouteStep(NamedTuple):
    """A grouped step: action, how many times, and the pose after it."""
    action: Action
    count: int
    pose: Pose


def group_path(path: Iterable) -> List[RouteStep]:
    """
    Run-length encode a path.

    Maximal runs of forward moves in one direction become a single step
    with a count. Turns are never merged. Grouped steps are accepted as
    input too, so grouping is idempotent.

    Args:
        path: PathStep or RouteStep sequence

    Returns:
        List of RouteStep
    """
    groups: List[RouteStep] = []

    for step in path:
        count = getattr(step, "count", 1)
        previous = groups[-1] if groups else None

        if (
            step.action is Action.FORWARD
            and previous is not None
            and previous.action is Action.FORWARD
            and previous.pose.direction == step.pose.direction
        ):
            groups[-1] = RouteStep(Action.FORWARD, previous.count + count, step.pose)
        else:
            groups.append(RouteStep(step.action, count, step.pose))

    return groups


def describe_visible(
    grid: TownGrid,
    pose: Pose,
    emphasis: Emphasis = plain
) -> List[str]:
    """Phrases for the landmarks ahead-left and ahead-right of a pose."""
    visible = visible_landmarks(grid, pose)
    descriptions = []
    if visible.left is not None:
        descriptions.append(
            f"the {emphasis(visible.left.name)} on your {emphasis('left')}"
        )
    if visible.right is not None:
        descriptions.append(
            f"the {emphasis(visible.right.name)} on your {emphasis('right')}"
        )
    return descriptions


def _direction_label(pose: Pose) -> str:
    return Direction(pose.direction).label


def compile_instructions(
    path: Path,
    start: Pose,
    grid: TownGrid,
    target: str,
    emphasis: Emphasis = plain
) -> List[str]:
    """
    Compile a path into narration lines.

    Args:
        path: Steps returned by search
        start: Pose the path starts from
        grid: Town grid
        target: Destination landmark name
        emphasis: Markup applied to key words (plain text by default)

    Returns:
        Ordered narration lines: orientation, steps, arrival
    """
    instructions = []

    # Initial description of surroundings
    initial_visible = describe_visible(grid, start, emphasis)
    facing = f"You are facing {emphasis(_direction_label(start))}."
    if initial_visible:
        instructions.append(
            f"{facing} In front of your current position, you can see "
            f"{', '.join(initial_visible)}."
        )
    else:
        instructions.append(
            f"{facing} In front of your current position, "
            f"no buildings are in front of you."
        )

    previous: Optional[RouteStep] = None

    for step in group_path(path):
        if step.action is Action.FORWARD:
            if step.count > 1:
                instructions.append(f"{emphasis('Go straight')} several blocks.")
            else:
                instructions.append(f"{emphasis('Go straight')} one block.")
        else:
            if previous is not None and previous.action is Action.FORWARD:
                before_turn = describe_visible(grid, previous.pose, emphasis)
                if before_turn:
                    instructions.append(f"You will see {', '.join(before_turn)}.")

            side = "left" if step.action is Action.TURN_LEFT else "right"
            instructions.append(emphasis(f"Turn {side}."))

            after_turn = describe_visible(grid, step.pose, emphasis)
            if after_turn:
                instructions.append(
                    f"You will face {emphasis(_direction_label(step.pose))}, "
                    f"and you will see {', '.join(after_turn)}."
                )

        previous = step

    instructions.append(f"You will arrive near {emphasis(target)}.")
    return instructions


def describe_route(
    grid: TownGrid,
    start: Pose,
    target: str,
    emphasis: Emphasis = plain
) -> List[str]:
    """
    Search for a route and narrate it.

    Returns:
        Narration lines, or a single apology line if no route exists
    """
    path = search(grid, start, target)
    if path is None:
        return [NO_PATH_MESSAGE]
    return compile_instructions(path, start, grid, target, emphasis)


def format_directions(
    lines: List[str],
    target: str,
    emphasis: Emphasis = plain
) -> str:
    """Join narration lines under a header, separated by blank lines."""
    header = (
        f"Here is how to go to the {target}. "
        f"{emphasis('Make sure to read and remember this carefully')}:"
    )
    return header + "\n" + "".join(f"\n{line}\n" for line in lines)

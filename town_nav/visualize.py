"""
Visualization Utilities

ASCII town maps for the terminal and matplotlib plots of towns, routes
and action sequences.
"""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib import colormaps
import numpy as np
from typing import Dict, List, Optional, Sequence, Tuple
from pathlib import Path

from .grid import TownGrid
from .pose import ACTION_NAMES, DIRECTION_VECTORS, Action, Direction, Pose
from .search import PathStep
from .town_generator import BUILDING_CODE_MAP, CODE_FOR_CATEGORY


# Color scheme
COLORS = {
    'street': '#ECEFF1',      # Light gray
    'target': '#F44336',      # Red
    'start': '#4CAF50',       # Green
    'route': '#2196F3',       # Blue
    'trace': '#FF9800',       # Orange
}

# Player marker per facing direction
DIRECTION_MARKERS = {
    Direction.NORTH: '^',
    Direction.EAST: '>',
    Direction.SOUTH: 'v',
    Direction.WEST: '<',
}

ACTION_COLORS = {
    Action.FORWARD: '#E3F2FD',     # light blue
    Action.TURN_LEFT: '#F3E5F5',   # light purple
    Action.TURN_RIGHT: '#E8F5E9',  # light green
}


def _finish(fig: plt.Figure, save_path: Optional[str], show: bool) -> plt.Figure:
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight', facecolor='white')
        print(f"Saved: {save_path}")

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig


def town_map_ascii(
    grid: TownGrid,
    pose: Optional[Pose] = None,
    path: Optional[Sequence[PathStep]] = None,
    show_legend: bool = True
) -> str:
    """
    Render the town as ASCII art.

    Cells show their building code; intersections are '+', the player's
    intersection shows a direction arrow and route intersections '*'.

    Args:
        grid: Town grid
        pose: Player pose to mark
        path: Route to mark
        show_legend: Prepend the building code legend

    Returns:
        Multi-line map string
    """
    size = grid.size
    route = {step.pose.intersection for step in path} if path else set()

    def corner(r: int, c: int) -> str:
        if pose is not None and (r, c) == pose.intersection:
            return DIRECTION_MARKERS[Direction(pose.direction)]
        if (r, c) in route:
            return '*'
        return '+'

    lines = ["--- Town Map Layout ---"]
    if show_legend:
        lines.append("Legend (each character represents a unique instance of that building type):")
        for code, category in BUILDING_CODE_MAP.items():
            lines.append(f"  '{code}': {category}")
        lines.append("-" * (size * 4 + 3))

    # Column headers (intersection indices)
    lines.append("  " + " ".join(str(i).rjust(3) for i in range(size + 1)))

    for r in range(size + 1):
        border = "".join(corner(r, c) + "---" for c in range(size)) + corner(r, size)
        lines.append(f"{str(r).ljust(2)} {border}")
        if r == size:
            break

        row_str = "   |"
        for c in range(size):
            landmark = grid.landmark_at(r, c)
            code = CODE_FOR_CATEGORY.get(landmark.category, '?')
            row_str += f" {code} |"
        lines.append(row_str)

    return "\n".join(lines)


def print_town_ascii(
    grid: TownGrid,
    pose: Optional[Pose] = None,
    path: Optional[Sequence[PathStep]] = None,
    show_legend: bool = True
) -> None:
    """Print the town as ASCII art (for terminal output)."""
    print(town_map_ascii(grid, pose, path, show_legend))


def _category_colors(grid: TownGrid) -> Dict[str, Tuple[float, float, float]]:
    categories = sorted({lm.category for lm in grid.landmarks})
    cmap = colormaps['Pastel1' if len(categories) <= 9 else 'tab20']
    return {cat: cmap(i % cmap.N)[:3] for i, cat in enumerate(categories)}


def plot_town(
    grid: TownGrid,
    target: Optional[str] = None,
    start: Optional[Pose] = None,
    path: Optional[Sequence[PathStep]] = None,
    trace: Optional[List[Tuple[int, int]]] = None,
    title: str = "Town Map",
    show_names: bool = True,
    figsize: Tuple[int, int] = (8, 8),
    save_path: Optional[str] = None,
    show: bool = True
) -> plt.Figure:
    """
    Plot the town with an optional route.

    Cell (r, c) spans x in [c, c+1], y in [r, r+1]; intersection (r, c)
    sits at the point (c, r).

    Args:
        grid: Town grid
        target: Target landmark name (highlighted)
        start: Start pose (arrow marker)
        path: Route from search
        trace: Intersections the player actually visited
        title: Plot title
        show_names: Write landmark names in the cells
        figsize: Figure size
        save_path: Path to save figure
        show: Whether to display

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=figsize)
    size = grid.size
    colors = _category_colors(grid)

    display = np.zeros((size, size, 3))
    for r in range(size):
        for c in range(size):
            display[r, c] = colors[grid.landmark_at(r, c).category]

    ax.imshow(display, origin='upper', extent=(0, size, size, 0), aspect='equal')

    # Streets
    for i in range(size + 1):
        ax.axhline(i, color=COLORS['street'], linewidth=6, zorder=1)
        ax.axvline(i, color=COLORS['street'], linewidth=6, zorder=1)

    # Cell labels
    for r in range(size):
        for c in range(size):
            landmark = grid.landmark_at(r, c)
            code = CODE_FOR_CATEGORY.get(landmark.category, '?')
            text = f"{code}\n{landmark.name}" if show_names else code
            ax.text(c + 0.5, r + 0.5, text, ha='center', va='center',
                    fontsize=7 if show_names else 12, wrap=True, zorder=2)

            if target is not None and landmark.name == target:
                ax.add_patch(mpatches.Rectangle(
                    (c + 0.05, r + 0.05), 0.9, 0.9, fill=False,
                    edgecolor=COLORS['target'], linewidth=3, zorder=3
                ))

    if trace and len(trace) > 1:
        ax.plot([p[1] for p in trace], [p[0] for p in trace],
                color=COLORS['trace'], linewidth=3, alpha=0.7,
                marker='o', markersize=5, zorder=4, label=f'Trace ({len(trace)-1} blocks)')

    if start is not None and path:
        points = [start.intersection] + [step.pose.intersection for step in path]
        ax.plot([p[1] for p in points], [p[0] for p in points],
                color=COLORS['route'], linewidth=4, alpha=0.8,
                marker='o', markersize=6, zorder=5, label=f'Route ({len(path)} actions)')

    if start is not None:
        dr, dc = DIRECTION_VECTORS[Direction(start.direction)]
        ax.plot(start.col, start.row, 'o', color=COLORS['start'],
                markersize=16, markeredgecolor='white', markeredgewidth=2, zorder=6)
        ax.annotate('', xy=(start.col + 0.35 * dc, start.row + 0.35 * dr),
                    xytext=(start.col, start.row),
                    arrowprops=dict(arrowstyle='->', color=COLORS['start'], lw=2),
                    zorder=7)

    ax.set_xticks(range(size + 1))
    ax.set_yticks(range(size + 1))
    ax.set_xlabel('Column')
    ax.set_ylabel('Row')
    ax.set_xlim(-0.3, size + 0.3)
    ax.set_ylim(size + 0.3, -0.3)
    ax.set_title(title, fontsize=14, fontweight='bold')

    if path or (trace and len(trace) > 1):
        ax.legend(loc='upper right', fontsize=9)

    return _finish(fig, save_path, show)


def plot_action_sequence(
    actions: List[Action],
    title: str = "Action Sequence",
    figsize: Tuple[int, int] = (12, 2),
    save_path: Optional[str] = None,
    show: bool = True
) -> plt.Figure:
    """
    Visualize a sequence of actions as colored boxes.
    """
    fig, ax = plt.subplots(figsize=figsize)

    for i, action in enumerate(actions):
        rect = mpatches.FancyBboxPatch(
            (i, 0), 0.9, 0.9,
            boxstyle="round,pad=0.05",
            facecolor=ACTION_COLORS.get(action, '#FFFFFF'),
            edgecolor='gray',
            linewidth=1
        )
        ax.add_patch(rect)
        ax.text(i + 0.45, 0.45, ACTION_NAMES[action][0],
                ha='center', va='center', fontsize=9, fontweight='bold')

    ax.set_xlim(-0.2, len(actions) + 0.2)
    ax.set_ylim(-0.2, 1.2)
    ax.set_aspect('equal')
    ax.axis('off')
    ax.set_title(title, fontsize=12, fontweight='bold')

    return _finish(fig, save_path, show)

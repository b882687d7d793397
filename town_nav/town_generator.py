"""
Town Generator

Generates random towns of uniquely named buildings with a guaranteed
target landmark, and places the player a few blocks away from it.
"""

import numpy as np
from typing import Dict, List, Optional, Tuple

from .grid import MAX_GRID_SIZE, Landmark, TownGrid
from .pose import Direction, Pose


# The town is a GRID_SIZE x GRID_SIZE square of buildings
GRID_SIZE = 5

BUILDING_TYPES = [
    "Post Office", "Hospital", "Municipality", "Shop", "Restaurant",
    "Park", "Library", "Cafe", "Bank", "School", "Museum", "Apartments",
]

# Generic category the player is sent to find
TARGET_CATEGORY = "Restaurant"

EMPTY_LOT = "Empty Lot"

UNIQUE_NAMES_POOL: Dict[str, List[str]] = {
    "Post Office": ["New Post", "City Mail", "Express Post", "Old Town Post"],
    "Hospital": ["General Hospital", "City Clinic", "Mercy Hospital", "St. Jude's Medical"],
    "Municipality": ["City Hall", "Town Council", "Civic Center", "Grand Municipality"],
    "Shop": ["Corner Mart", "Grand Bazaar", "Fashion Boutique", "Tech Emporium",
             "Book Nook", "Green Grocer"],
    "Restaurant": ["Luke's Diner", "The Golden Spoon", "Pizza Palace", "Sushi Spot",
                   "Burger Joint", "The Hungry Bear"],
    "Park": ["New Park", "River Park", "Green Oasis", "Rose Garden"],
    "Library": ["Main Library", "Quiet Reads", "Community Library", "Knowledge Hub"],
    "Cafe": ["The Daily Grind", "Coffee Corner", "Sweet Treats Cafe", "Brew House"],
    "Bank": ["First National Bank", "Secure Vault Bank", "City Bank", "Trust Union"],
    "School": ["Northwood School", "Science Academy", "Maple Street School",
               "Bright Minds School"],
    "Museum": ["History Museum", "Art Gallery", "Science Center", "Natural History Museum"],
    "Apartments": ["City View Apartments", "Sunset Towers", "Green Valley Homes",
                   "Riverwalk Residences"],
    EMPTY_LOT: [EMPTY_LOT],
}

# Single-character map codes
BUILDING_CODE_MAP = {
    'P': "Post Office",
    'H': "Hospital",
    'M': "Municipality",
    'S': "Shop",
    'R': "Restaurant",
    'K': "Park",
    'L': "Library",
    'C': "Cafe",
    'B': "Bank",
    'O': "School",      # 'S' is taken by Shop
    'U': "Museum",      # 'M' is taken by Municipality
    'A': "Apartments",
    'X': EMPTY_LOT,
}

CODE_FOR_CATEGORY = {category: code for code, category in BUILDING_CODE_MAP.items()}


def category_of(name: str) -> str:
    """Generic category of a landmark name, or 'Unknown'."""
    for category, names in UNIQUE_NAMES_POOL.items():
        if name in names:
            return category
    for category in BUILDING_TYPES:
        # Forced fallback names look like "Restaurant 7"
        if name.startswith(category + " "):
            return category
    return "Unknown"


def generate_town(
    size: int = GRID_SIZE,
    target_category: str = TARGET_CATEGORY,
    seed: Optional[int] = None,
    rng: Optional[np.random.RandomState] = None
) -> Tuple[TownGrid, str]:
    """
    Generate a random town and choose the target landmark.

    Args:
        size: Grid size (size x size buildings)
        target_category: Category the target is drawn from
        seed: Random seed for reproducibility
        rng: Random state to draw from (overrides seed)

    Returns:
        Tuple of (grid, target_name)

    Raises:
        ValueError: If size is outside 1..MAX_GRID_SIZE or the target
            category is the empty-lot filler
    """
    if not 1 <= size <= MAX_GRID_SIZE:
        raise ValueError(
            f"Grid size must be between 1 and {MAX_GRID_SIZE}, got {size}"
        )
    if target_category == EMPTY_LOT:
        raise ValueError(f"{EMPTY_LOT!r} is filler and cannot be a target category")

    if rng is None:
        rng = np.random.RandomState(seed)

    used_names: Dict[str, List[str]] = {bt: [] for bt in BUILDING_TYPES}
    landmarks: List[Landmark] = []
    target_names: List[str] = []
    cells = np.zeros((size, size), dtype=np.int32)

    for r in range(size):
        for c in range(size):
            category = BUILDING_TYPES[rng.randint(len(BUILDING_TYPES))]
            available = [
                name for name in UNIQUE_NAMES_POOL.get(category, [])
                if name not in used_names[category]
            ]

            if available:
                name = available[rng.randint(len(available))]
                used_names[category].append(name)
            else:
                # Names for this category are exhausted
                name, category = EMPTY_LOT, EMPTY_LOT

            cells[r, c] = len(landmarks)
            landmarks.append(Landmark(name, category))
            if category == target_category:
                target_names.append(name)

    if target_names:
        target = target_names[rng.randint(len(target_names))]
    else:
        # Force one target building into a random cell
        r = rng.randint(size)
        c = rng.randint(size)
        used = used_names.setdefault(target_category, [])
        available = [
            name for name in UNIQUE_NAMES_POOL.get(target_category, [])
            if name not in used
        ]
        if available:
            target = available[rng.randint(len(available))]
        else:
            target = f"{target_category} {len(used) + 1}"

        used.append(target)
        cells[r, c] = len(landmarks)
        landmarks.append(Landmark(target, target_category))

    return TownGrid(cells, landmarks), target


def place_player(
    grid: TownGrid,
    target: str,
    rng: np.random.RandomState,
    min_distance: int = 2,
    max_attempts: int = 1000
) -> Pose:
    """
    Pick a random start pose away from the target.

    The intersection's Manhattan distance to the target cell must be
    greater than min_distance.

    Raises:
        ValueError: If the target is missing or no intersection qualifies
            within max_attempts
    """
    cell = grid.find_landmark(target)
    if cell is None:
        raise ValueError(f"Target {target!r} is not in the town")

    target_r, target_c = cell
    for _ in range(max_attempts):
        row = rng.randint(grid.size + 1)
        col = rng.randint(grid.size + 1)
        if abs(row - target_r) + abs(col - target_c) > min_distance:
            return Pose(int(row), int(col), Direction(int(rng.randint(len(Direction)))))

    raise ValueError(f"Could not place player after {max_attempts} attempts")


def generate_scenario(
    size: int = GRID_SIZE,
    target_category: str = TARGET_CATEGORY,
    seed: Optional[int] = None,
    min_distance: int = 2,
    max_attempts: int = 100
) -> Tuple[TownGrid, str, Pose]:
    """
    Generate a town, its target and a start pose.

    Args:
        size: Grid size
        target_category: Category the target is drawn from
        seed: Random seed
        min_distance: Start must be farther than this from the target
        max_attempts: Towns to try before giving up

    Returns:
        Tuple of (grid, target_name, start_pose)

    Raises:
        ValueError: If no valid scenario found
    """
    rng = np.random.RandomState(seed)

    for attempt in range(max_attempts):
        grid, target = generate_town(size, target_category, rng=rng)
        try:
            start = place_player(grid, target, rng, min_distance=min_distance)
        except ValueError:
            # Town too small for the distance rule, try another layout
            continue
        return grid, target, start

    raise ValueError(f"Could not generate scenario after {max_attempts} attempts")


def generate_scenarios(
    num_scenarios: int,
    size: int = GRID_SIZE,
    target_category: str = TARGET_CATEGORY,
    base_seed: int = 42
) -> list:
    """
    Generate multiple scenarios for benchmarking.

    Returns:
        List of (grid, target_name, start_pose) tuples
    """
    scenarios = []

    for i in range(num_scenarios):
        try:
            scenarios.append(generate_scenario(
                size=size,
                target_category=target_category,
                seed=base_seed + i
            ))
        except ValueError:
            # Skip failed attempts
            continue

    return scenarios

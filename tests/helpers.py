"""
Shared test towns.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from town_nav.grid import TownGrid
from town_nav.town_generator import category_of


# 5x5 town with Luke's Diner in cell (2, 2)
LUKE_TOWN = [
    ["New Post", "City Clinic", "City Hall", "Corner Mart", "New Park"],
    ["Main Library", "Coffee Corner", "City Bank", "Art Gallery", "Sunset Towers"],
    ["Grand Bazaar", "River Park", "Luke's Diner", "Quiet Reads", "Brew House"],
    ["Science Academy", "Trust Union", "Green Oasis", "History Museum", "Book Nook"],
    ["Rose Garden", "Civic Center", "Express Post", "Tech Emporium", "Knowledge Hub"],
]

LUKE = "Luke's Diner"


def luke_town() -> TownGrid:
    return TownGrid.from_names(LUKE_TOWN, category_of)


def small_town(size: int = 3) -> TownGrid:
    """size x size town named A0, A1, ... row by row."""
    return TownGrid.from_names(
        [[f"A{r * size + c}" for c in range(size)] for r in range(size)]
    )

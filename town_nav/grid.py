"""
Town Grid

Immutable town layout: a square matrix of landmarks bounded by a lattice
of intersections the agent walks on.
"""

import numpy as np
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence, Tuple


# Largest supported grid. Bounds the pose space at (N+1)^2 * 4 states.
MAX_GRID_SIZE = 64

# Offsets from an intersection to the up-to-four cells sharing that corner
# North-West, North-East, South-West, South-East
ADJACENT_OFFSETS = ((-1, -1), (-1, 0), (0, -1), (0, 0))

Intersection = Tuple[int, int]


class Landmark(NamedTuple):
    """A building instance: unique display name plus generic category."""
    name: str
    category: str


class TownGrid:
    """
    Read-only N x N town of landmarks.

    Cells are stored as an int32 index array into a tuple of landmarks, so
    several cells may share one landmark entry (e.g. filler lots).
    """

    def __init__(self, cells: np.ndarray, landmarks: Sequence[Landmark]):
        """
        Args:
            cells: 2D square array of indices into ``landmarks``
            landmarks: Landmark table

        Raises:
            ValueError: If the grid is not square, its size is outside
                1..MAX_GRID_SIZE, or an index has no landmark
        """
        cells = np.array(cells, dtype=np.int32)

        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Town grid must be square, got shape {cells.shape}")

        size = cells.shape[0]
        if not 1 <= size <= MAX_GRID_SIZE:
            raise ValueError(
                f"Grid size must be between 1 and {MAX_GRID_SIZE}, got {size}"
            )

        landmarks = tuple(Landmark(*lm) for lm in landmarks)
        if cells.min() < 0 or cells.max() >= len(landmarks):
            raise ValueError("Cell index out of range of the landmark table")

        cells.flags.writeable = False
        self._cells = cells
        self._landmarks = landmarks

    @classmethod
    def from_names(
        cls,
        rows: Sequence[Sequence[str]],
        category_of: Optional[Callable[[str], str]] = None
    ) -> "TownGrid":
        """
        Build a grid from nested lists of landmark names.

        Args:
            rows: Landmark names, row by row
            category_of: Maps a name to its category (default: the name itself)

        Returns:
            TownGrid with one landmark entry per distinct name
        """
        index = {}
        landmarks: List[Landmark] = []
        cells = []

        for row in rows:
            cell_row = []
            for name in row:
                if name not in index:
                    category = category_of(name) if category_of else name
                    index[name] = len(landmarks)
                    landmarks.append(Landmark(name, category))
                cell_row.append(index[name])
            cells.append(cell_row)

        return cls(np.array(cells, dtype=np.int32), landmarks)

    @property
    def size(self) -> int:
        """Number of cells per side (N)."""
        return self._cells.shape[0]

    @property
    def cells(self) -> np.ndarray:
        """Read-only landmark index array."""
        return self._cells

    @property
    def landmarks(self) -> Tuple[Landmark, ...]:
        return self._landmarks

    def landmark_at(self, row: int, col: int) -> Optional[Landmark]:
        """Landmark in cell (row, col), or None outside the town."""
        if 0 <= row < self.size and 0 <= col < self.size:
            return self._landmarks[self._cells[row, col]]
        return None

    def contains_intersection(self, intersection: Intersection) -> bool:
        """True if the intersection lies on the street lattice [0, N]^2."""
        row, col = intersection
        return 0 <= row <= self.size and 0 <= col <= self.size

    def bounding_cells(
        self,
        intersection: Intersection
    ) -> Iterator[Tuple[Tuple[int, int], Optional[Landmark]]]:
        """Yield (offset, landmark or None) for the four cells at a corner."""
        row, col = intersection
        for dr, dc in ADJACENT_OFFSETS:
            yield (dr, dc), self.landmark_at(row + dr, col + dc)

    def is_adjacent(self, intersection: Intersection, landmark_name: str) -> bool:
        """
        Check whether a landmark touches an intersection.

        Args:
            intersection: (row, col) on the street lattice
            landmark_name: Unique landmark name

        Returns:
            True if one of the four bounding cells holds the landmark
        """
        for _, landmark in self.bounding_cells(intersection):
            if landmark is not None and landmark.name == landmark_name:
                return True
        return False

    def find_landmark(self, landmark_name: str) -> Optional[Tuple[int, int]]:
        """Cell (row, col) of the first landmark with this name, or None."""
        for row in range(self.size):
            for col in range(self.size):
                if self._landmarks[self._cells[row, col]].name == landmark_name:
                    return (row, col)
        return None

    def names(self) -> List[List[str]]:
        """Landmark names, row by row."""
        return [
            [self._landmarks[idx].name for idx in row]
            for row in self._cells.tolist()
        ]

    def __repr__(self) -> str:
        return f"TownGrid(size={self.size}, landmarks={len(self._landmarks)})"

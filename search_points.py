from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

from config import DEFAULT_TOLERANCE
from geometry import GeoPoint, direction
from graham_scan import GrahamScan


@dataclass(frozen=True)
class SearchPoint:
    """A boundary point: its location plus whatever the caller attached to it."""
    location: GeoPoint
    payload: Any = None


class SearchPointVector(list):
    """Ordered ring of search points, in the caller's winding order."""

    @classmethod
    def from_locations(cls, coords: Iterable[Tuple[float, float]]) -> "SearchPointVector":
        return cls(SearchPoint(GeoPoint(lon, lat), i) for i, (lon, lat) in enumerate(coords))

    def locations(self) -> List[GeoPoint]:
        return [sp.location for sp in self]

    def replace(self, points: Iterable[SearchPoint]):
        """Replace the whole contents at once.

        Indices and iterators taken over the old contents are invalid
        afterwards.
        """
        self[:] = list(points)

    def swap(self, other: "SearchPointVector"):
        self[:], other[:] = list(other), list(self)

    def prune_interior(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Drop every point inside the convex hull; True if anything was removed."""
        return GrahamScan(self, tolerance).prune_interior()

    def is_convex(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        # every corner must turn the same way, straight corners are fine
        locs = self.locations()
        n = len(locs)
        if n < 3:
            return True
        turns = {direction(locs[i - 1], locs[i], locs[(i + 1) % n], tolerance) for i in range(n)}
        turns.discard(0)
        return len(turns) <= 1

import logging
from dataclasses import dataclass, field
from enum import Enum
from itertools import chain
from typing import TYPE_CHECKING, List, Sequence, Tuple

from config import DEFAULT_TOLERANCE
from geometry import direction

if TYPE_CHECKING:
    from search_points import SearchPoint, SearchPointVector

logger = logging.getLogger(__name__)


class HullSide(Enum):
    """Half of the hull being built.

    The value multiplies the turn direction in the convexity test: the lower
    hull keeps a point only if it lies below the line through its neighbours,
    the upper hull only if it lies above.
    """
    LOWER = 1
    UPPER = -1


@dataclass
class Partition:
    left: "SearchPoint"
    right: "SearchPoint"
    upper: List["SearchPoint"] = field(default_factory=list)
    lower: List["SearchPoint"] = field(default_factory=list)


def _sort_key(sp: "SearchPoint") -> Tuple[float, float]:
    return sp.location.longitude, sp.location.latitude


def partition_points(points: Sequence["SearchPoint"], tolerance: float = DEFAULT_TOLERANCE) -> Partition:
    """Split points into the far left/right points and two candidate chains.

    After sorting by longitude then latitude, the first and last points are
    the left and right extremes. Each point in between goes to ``upper`` when
    it lies on the negative side of the left->right line and to ``lower``
    otherwise, collinear points included. A point at the same location as the
    previous kept one is dropped. Both chains stay in sorted order.
    """
    assert len(points) >= 2
    ordered = sorted(points, key=_sort_key)
    partition = Partition(left=ordered[0], right=ordered[-1])
    left = partition.left.location
    right = partition.right.location

    last = left
    for sp in ordered[1:-1]:
        if sp.location == last:
            continue
        last = sp.location

        if direction(left, right, sp.location, tolerance) < 0:
            partition.upper.append(sp)
        else:
            partition.lower.append(sp)

    return partition


def build_half_hull(candidates: Sequence["SearchPoint"], left: "SearchPoint", right: "SearchPoint",
                    side: HullSide, tolerance: float = DEFAULT_TOLERANCE) -> Tuple[List["SearchPoint"], bool]:
    """Build one half of the hull from left to right through ``candidates``.

    ``candidates`` must be sorted left to right. Each point is pushed onto the
    hull; then, while the last three points fail the convexity test for
    ``side``, the middle one is removed. Returns the half hull (starting with
    ``left``, ending with ``right``) and whether any point was removed.
    """
    factor = side.value
    hull = [left]
    pruned = False

    for sp in chain(candidates, (right,)):
        hull.append(sp)

        while len(hull) >= 3:
            if factor * direction(hull[-3].location, hull[-1].location, hull[-2].location, tolerance) > 0:
                break

            del hull[-2]
            pruned = True

    return hull, pruned


class GrahamScan:
    """Prunes the interior points of a boundary, keeping its convex hull in order."""

    def __init__(self, points: "SearchPointVector", tolerance: float = DEFAULT_TOLERANCE):
        self.points = points
        self.tolerance = tolerance

    def prune_interior(self) -> bool:
        size = len(self.points)
        if size < 3:
            return False

        partition = partition_points(self.points, self.tolerance)
        logger.debug("partitioned %d points: %d upper, %d lower",
                     size, len(partition.upper), len(partition.lower))

        lower_hull, lower_pruned = build_half_hull(partition.lower, partition.left, partition.right,
                                                   HullSide.LOWER, self.tolerance)
        upper_hull, upper_pruned = build_half_hull(partition.upper, partition.left, partition.right,
                                                   HullSide.UPPER, self.tolerance)

        if not (lower_pruned or upper_pruned):
            logger.debug("boundary already convex, nothing pruned")
            return False

        # lower hull left->right, then upper hull right->left; each shared
        # endpoint appears once
        result = lower_hull[:-1] + upper_hull[:0:-1]

        assert len(result) <= size
        self.points.replace(result)
        logger.debug("pruned %d of %d points", size - len(result), size)
        return True


def prune_interior(points: "SearchPointVector", tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return GrahamScan(points, tolerance).prune_interior()

from typing import List, NamedTuple, Sequence, Tuple


class GeoPoint(NamedTuple):
    longitude: float
    latitude: float

    def __sub__(self, other: "GeoPoint") -> "GeoPoint":
        return GeoPoint(self.longitude - other.longitude, self.latitude - other.latitude)


Segment = Tuple[GeoPoint, GeoPoint]


def sign(value: float, tolerance: float) -> int:
    if value > tolerance:
        return 1
    if value < -tolerance:
        return -1
    return 0


def _cross_terms(p0: GeoPoint, p1: GeoPoint, p2: GeoPoint) -> Tuple[float, float]:
    # p1 translated to the origin
    delta_a = p0 - p1
    delta_b = p2 - p1
    return delta_a.longitude * delta_b.latitude, delta_b.longitude * delta_a.latitude


def direction(p0: GeoPoint, p1: GeoPoint, p2: GeoPoint, tolerance: float) -> int:
    """Turn direction of the path p0 -> p1 -> p2.

    Returns 1 or -1 depending on which side of p1 the path bends to, and 0
    when the three points are collinear within ``tolerance``. A negative
    tolerance asks for auto-tolerance: a tenth of the larger cross product
    term, so the dead zone scales with the coordinates involved.
    """
    a, b = _cross_terms(p0, p1, p2)
    if tolerance < 0:
        tolerance = max(abs(a), abs(b)) / 10
    return sign(a - b, tolerance)


def boundary_edges(points: Sequence[GeoPoint]) -> List[Segment]:
    if len(points) < 2:
        return []
    if len(points) == 2:
        return [(points[0], points[1])]
    return [(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]

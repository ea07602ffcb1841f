import unittest
from geometry import GeoPoint, boundary_edges, direction, sign
from config import AUTO_TOLERANCE


class TestSign(unittest.TestCase):

    def test_outside_dead_zone(self):
        self.assertEqual(sign(2.0, 1.0), 1)
        self.assertEqual(sign(-2.0, 1.0), -1)

    def test_inside_dead_zone(self):
        self.assertEqual(sign(0.5, 1.0), 0)
        self.assertEqual(sign(-0.5, 1.0), 0)
        # the edges of the dead zone still count as zero
        self.assertEqual(sign(1.0, 1.0), 0)
        self.assertEqual(sign(-1.0, 1.0), 0)

    def test_zero_tolerance(self):
        self.assertEqual(sign(1e-300, 0.0), 1)
        self.assertEqual(sign(0.0, 0.0), 0)


class TestGeoPoint(unittest.TestCase):

    def test_subtraction(self):
        delta = GeoPoint(7.5, 48.0) - GeoPoint(2.5, 50.0)
        self.assertEqual(delta, GeoPoint(5.0, -2.0))
        self.assertEqual(delta.longitude, 5.0)
        self.assertEqual(delta.latitude, -2.0)

    def test_equality_by_value(self):
        self.assertEqual(GeoPoint(1.0, 2.0), GeoPoint(1.0, 2.0))
        self.assertNotEqual(GeoPoint(1.0, 2.0), GeoPoint(2.0, 1.0))


class TestDirection(unittest.TestCase):

    def test_turns(self):
        p0, p1 = GeoPoint(0, 0), GeoPoint(10, 0)
        self.assertEqual(direction(p0, p1, GeoPoint(10, 10), 0), -1)
        self.assertEqual(direction(p0, p1, GeoPoint(10, -10), 0), 1)

    def test_collinear(self):
        self.assertEqual(direction(GeoPoint(0, 0), GeoPoint(5, 5), GeoPoint(10, 10), 0), 0)

    def test_reversing_path_flips_direction(self):
        p0, p1, p2 = GeoPoint(0, 0), GeoPoint(4, 1), GeoPoint(6, 7)
        self.assertEqual(direction(p0, p1, p2, 0), -direction(p2, p1, p0, 0))

    def test_fixed_tolerance_hides_small_turns(self):
        p0, p1, p2 = GeoPoint(0, 0), GeoPoint(10, 10), GeoPoint(5, 5.1)
        # a - b == -1 for these points
        self.assertEqual(direction(p0, p1, p2, 0), -1)
        self.assertEqual(direction(p0, p1, p2, 0.5), -1)
        self.assertEqual(direction(p0, p1, p2, 2.0), 0)

    def test_auto_tolerance_scales_with_coordinates(self):
        p0, p1, p2 = GeoPoint(0, 0), GeoPoint(10, 10), GeoPoint(5, 5.1)
        # tolerance becomes max(49, 50) / 10
        self.assertEqual(direction(p0, p1, p2, AUTO_TOLERANCE), 0)

        q2 = GeoPoint(5, 8)
        self.assertEqual(direction(p0, p1, q2, AUTO_TOLERANCE), -1)

    def test_any_negative_tolerance_is_auto(self):
        p0, p1, p2 = GeoPoint(0, 0), GeoPoint(10, 10), GeoPoint(5, 5.1)
        self.assertEqual(direction(p0, p1, p2, -1000.0), direction(p0, p1, p2, AUTO_TOLERANCE))


class TestBoundaryEdges(unittest.TestCase):

    def test_degenerate(self):
        self.assertEqual(boundary_edges([]), [])
        self.assertEqual(boundary_edges([GeoPoint(0, 0)]), [])
        a, b = GeoPoint(0, 0), GeoPoint(1, 1)
        self.assertEqual(boundary_edges([a, b]), [(a, b)])

    def test_closed_ring(self):
        a, b, c = GeoPoint(0, 0), GeoPoint(1, 0), GeoPoint(0, 1)
        self.assertEqual(boundary_edges([a, b, c]), [(a, b), (b, c), (c, a)])


if __name__ == '__main__':
    unittest.main()

import unittest
from geometry import GeoPoint
from search_points import SearchPoint, SearchPointVector


class TestSearchPointVector(unittest.TestCase):

    def test_from_locations(self):
        points = SearchPointVector.from_locations([(1.5, 2.5), (3, 4)])
        self.assertEqual(len(points), 2)
        self.assertEqual(points[0], SearchPoint(GeoPoint(1.5, 2.5), 0))
        self.assertEqual(points[1].payload, 1)
        self.assertEqual(points.locations(), [GeoPoint(1.5, 2.5), GeoPoint(3, 4)])

    def test_search_point_is_frozen(self):
        p = SearchPoint(GeoPoint(0, 0), "x")
        with self.assertRaises(AttributeError):
            p.payload = "y"

    def test_replace_keeps_container(self):
        points = SearchPointVector.from_locations([(0, 0), (1, 1), (2, 2)])
        container_id = id(points)
        points.replace(p for p in list(points) if p.payload != 1)
        self.assertEqual(id(points), container_id)
        self.assertEqual([p.payload for p in points], [0, 2])

    def test_swap(self):
        a = SearchPointVector.from_locations([(0, 0)])
        b = SearchPointVector.from_locations([(5, 5), (6, 6)])
        a.swap(b)
        self.assertEqual(a.locations(), [GeoPoint(5, 5), GeoPoint(6, 6)])
        self.assertEqual(b.locations(), [GeoPoint(0, 0)])

    def test_prune_interior(self):
        points = SearchPointVector.from_locations([(0, 0), (2, 1), (4, 0), (2, 4)])
        self.assertTrue(points.prune_interior())
        self.assertEqual([p.payload for p in points], [0, 2, 3])
        self.assertFalse(points.prune_interior())


class TestIsConvex(unittest.TestCase):

    def test_small_rings_are_convex(self):
        self.assertTrue(SearchPointVector().is_convex())
        self.assertTrue(SearchPointVector.from_locations([(0, 0), (1, 1)]).is_convex())

    def test_square_either_winding(self):
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        self.assertTrue(SearchPointVector.from_locations(square).is_convex())
        self.assertTrue(SearchPointVector.from_locations(reversed(square)).is_convex())

    def test_straight_corner_allowed(self):
        ring = [(0, 0), (5, 0), (10, 0), (10, 10), (0, 10)]
        self.assertTrue(SearchPointVector.from_locations(ring).is_convex(0))

    def test_dent(self):
        ring = [(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)]
        self.assertFalse(SearchPointVector.from_locations(ring).is_convex())


if __name__ == '__main__':
    unittest.main()

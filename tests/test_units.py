"""
Tests for the unit system.
"""

import math
import unittest

from simlocate.geo import Latitude, Longitude
from simlocate.unit import Degree, Foot, Kilometer, Meter, Millisecond, Radian, Second


class TestConversions(unittest.TestCase):
    """Test SI storage and conversion between units."""

    def test_degree_stored_as_radians(self):
        """Test that degrees are stored in radians."""
        self.assertAlmostEqual(float(Degree(180)), math.pi)
        self.assertAlmostEqual(Degree(90).degrees, 90.0)

    def test_distance_scales(self):
        """Test kilometer and foot conversion to meters."""
        self.assertEqual(float(Kilometer(6371)), 6371000.0)
        self.assertAlmostEqual(float(Foot(1000)), 304.8)
        self.assertAlmostEqual(Meter(304.8).to(Foot), 1000.0)

    def test_time_scales(self):
        """Test millisecond conversion to seconds."""
        self.assertAlmostEqual(Millisecond(250).to(Second), 0.25)

    def test_as_unit_keeps_value(self):
        """Test re-typing a value within its family."""
        meters = Foot(10).as_unit(Meter)
        self.assertIsInstance(meters, Meter)
        self.assertAlmostEqual(float(meters), 3.048)


class TestFamilies(unittest.TestCase):
    """Test that unit families do not mix."""

    def test_same_family_arithmetic(self):
        """Test adding units of one family."""
        total = Meter(100) + Kilometer(1)
        self.assertAlmostEqual(float(total), 1100.0)

    def test_cross_family_addition_raises(self):
        """Test that adding a distance to a time fails."""
        with self.assertRaises(TypeError):
            Meter(1) + Second(1)

    def test_latitude_is_its_own_family(self):
        """Test that latitudes and longitudes cannot be compared."""
        self.assertIs(Latitude.ROOT, Latitude)
        self.assertIs(Degree.ROOT, Radian)
        with self.assertRaises(TypeError):
            Latitude(1) < Longitude(2)

    def test_scaling_by_unit_raises(self):
        """Test that units only scale by plain numbers."""
        with self.assertRaises(TypeError):
            Meter(2) * Meter(3)
        self.assertAlmostEqual(float(Meter(2) * 3), 6.0)

    def test_equality_with_plain_number(self):
        """Test that bare numbers compare with the SI value."""
        self.assertEqual(Meter(1), 1.0)
        self.assertNotEqual(Kilometer(1), 1.0)

    def test_units_are_hashable(self):
        """Test that units can be used as dict keys."""
        self.assertEqual({Meter(5): "x"}[Meter(5)], "x")


if __name__ == '__main__':
    unittest.main()

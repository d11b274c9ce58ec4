"""
Tests for the unit system.
"""

import math
import unittest

from geonorm.unit import Degree, Kilometer, Meter, Mile, Radian


class TestUnitFamilies(unittest.TestCase):
    """Test family root assignment."""

    def test_roots(self):
        self.assertIs(Degree.ROOT, Radian)
        self.assertIs(Kilometer.ROOT, Meter)
        self.assertIs(Mile.ROOT, Meter)

    def test_cross_family_arithmetic_rejected(self):
        """Angles and lengths never mix."""
        with self.assertRaises(TypeError):
            Degree(10) + Meter(10)
        with self.assertRaises(TypeError):
            Kilometer(1).to(Degree)


class TestAngleUnits(unittest.TestCase):
    """Test Degree and Radian conversions."""

    def test_degree_stored_in_radians(self):
        self.assertAlmostEqual(float(Degree(180)), math.pi)
        self.assertAlmostEqual(float(Degree(90)), math.pi / 2)

    def test_round_trip(self):
        self.assertAlmostEqual(Degree(48.858056).to(Degree), 48.858056, places=12)
        self.assertAlmostEqual(Radian(math.pi).to(Degree), 180.0)

    def test_difference_keeps_unit(self):
        delta = Degree(10) - Degree(4)
        self.assertIsInstance(delta, Degree)
        self.assertAlmostEqual(delta.to(Degree), 6.0)


class TestLengthUnits(unittest.TestCase):
    """Test Meter, Kilometer and Mile."""

    def test_kilometer_to_meter(self):
        self.assertEqual(Kilometer(2.5).to(Meter), 2500.0)

    def test_kilometer_to_mile(self):
        self.assertAlmostEqual(Kilometer(100).to(Mile), 62.1371, places=9)

    def test_addition_across_units(self):
        total = Kilometer(1) + Meter(500)
        self.assertAlmostEqual(total.to(Kilometer), 1.5)

    def test_scalar_multiplication(self):
        self.assertAlmostEqual((Kilometer(3) * 2).to(Kilometer), 6.0)
        self.assertAlmostEqual((2 * Kilometer(3)).to(Kilometer), 6.0)

    def test_comparisons(self):
        self.assertTrue(Meter(999) < Kilometer(1))
        self.assertTrue(Kilometer(1) == Meter(1000))
        self.assertTrue(Mile(1) > Kilometer(1))

    def test_equality_with_plain_numbers(self):
        """Plain numbers compare against the SI value."""
        self.assertEqual(Kilometer(0), 0)
        self.assertEqual(Kilometer(1), 1000)
        self.assertNotEqual(Kilometer(1), 1)
        self.assertEqual(Degree(0), 0.0)
        self.assertNotEqual(Kilometer(1), "1")

    def test_str(self):
        self.assertEqual(str(Kilometer(5)), "5.0 km")


if __name__ == '__main__':
    unittest.main()

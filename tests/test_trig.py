"""
Tests for the pure trigonometry: normalization, snapping and the construction.
"""
import math
import unittest

import numpy as np

from unitcircle.model.trig import (
    ALL_FUNCTIONS, BASIC_FUNCTIONS, TWO_PI, TrigFunction, TrigValues,
    angle_from_vector, construction_segments, normalize_angle, normalize_degrees,
    snap_to_degrees, snap_to_radians,
)

ANGLES = np.concatenate([np.linspace(-4 * np.pi, 4 * np.pi, 721), [-1e-20, 1e-20, TWO_PI, -TWO_PI]])


class TestTrigValues(unittest.TestCase):

    def test_pythagorean_identity(self):
        for angle in ANGLES:
            values = TrigValues.from_angle(float(angle))
            self.assertTrue(np.isclose(values.cos ** 2 + values.sin ** 2, 1.0))

    def test_reciprocals_of_zero_are_signed_infinity(self):
        values = TrigValues.from_angle(0.0)
        self.assertEqual(values.cot, math.inf)
        self.assertEqual(values.csc, math.inf)
        self.assertEqual(values.sec, 1.0)

    def test_value_of(self):
        values = TrigValues.from_angle(math.pi / 6)
        self.assertTrue(np.isclose(values.value_of(TrigFunction.SIN), 0.5))
        self.assertTrue(np.isclose(values.value_of(TrigFunction.CSC), 2.0))


class TestNormalization(unittest.TestCase):

    def test_normalized_angle_in_range(self):
        for angle in ANGLES:
            wrapped = normalize_angle(float(angle))
            self.assertGreaterEqual(wrapped, 0.0)
            self.assertLess(wrapped, TWO_PI)

    def test_normalized_degrees_in_range(self):
        for degrees in np.linspace(-1000.0, 1000.0, 401):
            wrapped = normalize_degrees(float(degrees))
            self.assertGreaterEqual(wrapped, 0.0)
            self.assertLess(wrapped, 360.0)

    def test_normalize_keeps_direction(self):
        self.assertTrue(np.isclose(normalize_angle(-math.pi / 2), 3 * math.pi / 2))
        self.assertTrue(np.isclose(normalize_angle(5 * math.pi), math.pi))


class TestSnapping(unittest.TestCase):

    def test_degree_snap_is_idempotent(self):
        for angle in ANGLES:
            once = snap_to_degrees(float(angle))
            self.assertEqual(snap_to_degrees(once), once)

    def test_radian_snap_is_idempotent(self):
        for angle in ANGLES:
            once = snap_to_radians(float(angle))
            self.assertEqual(snap_to_radians(once), once)

    def test_degree_snap_lands_on_whole_degrees(self):
        snapped = snap_to_degrees(math.radians(10.4))
        self.assertTrue(np.isclose(math.degrees(snapped), 10.0))
        snapped = snap_to_degrees(math.radians(10.6))
        self.assertTrue(np.isclose(math.degrees(snapped), 11.0))

    def test_radian_snap_lands_on_pi_over_24(self):
        step = math.pi / 24
        for angle in ANGLES:
            multiple = snap_to_radians(float(angle)) / step
            self.assertTrue(np.isclose(multiple, round(multiple)))
        self.assertTrue(np.isclose(snap_to_radians(math.radians(10.0)), step))

    def test_snap_wraps_full_turn_to_zero(self):
        self.assertEqual(snap_to_degrees(math.radians(359.7)), 0.0)
        self.assertEqual(snap_to_radians(TWO_PI - 0.01), 0.0)


class TestAngleFromVector(unittest.TestCase):

    def test_axes(self):
        self.assertEqual(angle_from_vector(1.0, 0.0), 0.0)
        self.assertTrue(np.isclose(angle_from_vector(0.0, 1.0), math.pi / 2))
        self.assertTrue(np.isclose(angle_from_vector(-1.0, 0.0), math.pi))
        self.assertTrue(np.isclose(angle_from_vector(0.0, -1.0), 3 * math.pi / 2))

    def test_zero_vector_is_undefined(self):
        self.assertIsNone(angle_from_vector(0.0, 0.0))


class TestConstruction(unittest.TestCase):

    def test_tangent_and_secant_suppressed_at_90_degrees(self):
        construction = construction_segments(math.pi / 2)
        self.assertIsNone(construction.tangent)
        self.assertIsNone(construction.secant)
        self.assertIsNotNone(construction.cotangent)

    def test_cotangent_and_cosecant_suppressed_at_0_degrees(self):
        construction = construction_segments(0.0)
        self.assertIsNone(construction.cotangent)
        self.assertIsNone(construction.cosecant)
        self.assertIsNotNone(construction.tangent)

    def test_tangent_lies_on_the_near_vertical_tangent_line(self):
        # 135 deg: cos < 0, so the tangent sits on x = -1
        angle = 3 * math.pi / 4
        construction = construction_segments(angle)
        self.assertTrue(construction.tangent.is_vertical)
        self.assertEqual(construction.tangent.start.x, -1.0)
        self.assertTrue(np.isclose(construction.tangent.end.y, math.tan(angle) * -1.0))
        self.assertEqual(construction.secant.end, construction.tangent.end)

    def test_cotangent_lies_on_the_near_horizontal_tangent_line(self):
        # 300 deg: sin < 0, so the cotangent sits on y = -1
        angle = math.radians(300.0)
        construction = construction_segments(angle)
        self.assertTrue(construction.cotangent.is_horizontal)
        self.assertEqual(construction.cotangent.start.y, -1.0)
        self.assertTrue(np.isclose(construction.cotangent.end.x, -1.0 / math.tan(angle)))
        self.assertEqual(construction.cosecant.end, construction.cotangent.end)

    def test_secant_length_matches_ratio(self):
        angle = math.radians(40.0)
        construction = construction_segments(angle)
        self.assertTrue(np.isclose(construction.secant.length, abs(1.0 / math.cos(angle))))
        self.assertTrue(np.isclose(construction.cosecant.length, abs(1.0 / math.sin(angle))))

    def test_triangle(self):
        angle = math.radians(30.0)
        construction = construction_segments(angle)
        self.assertTrue(construction.cosine.is_horizontal)
        self.assertTrue(construction.sine.is_vertical)
        self.assertTrue(np.isclose(construction.radius.length, 1.0))

    def test_basic_preset_drops_reciprocals(self):
        construction = construction_segments(math.radians(30.0), BASIC_FUNCTIONS)
        self.assertIsNotNone(construction.tangent)
        self.assertIsNone(construction.secant)
        self.assertIsNone(construction.cotangent)
        self.assertIsNone(construction.cosecant)
        self.assertEqual(len(ALL_FUNCTIONS), 6)


if __name__ == "__main__":
    unittest.main()

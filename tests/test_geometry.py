#!/usr/bin/env python3
"""Geometry helper tests: angle-in-arc, arc flags, spline grouping, helix sampling."""

import math
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'scripts'))
from _geometry import (
    arc_flags,
    arc_extreme_points,
    helix_spiral_points,
    is_angle_in_arc,
    normalize_angle,
    rotation_angle_deg,
    spline_bezier_groups,
    vector_length,
)


class TestAngleInArc(unittest.TestCase):

    def test_simple_quarter(self):
        self.assertTrue(is_angle_in_arc(math.pi / 4, 0.0, math.pi / 2))
        self.assertFalse(is_angle_in_arc(math.pi, 0.0, math.pi / 2))

    def test_endpoints_inclusive(self):
        self.assertTrue(is_angle_in_arc(0.0, 0.0, math.pi / 2))
        self.assertTrue(is_angle_in_arc(math.pi / 2, 0.0, math.pi / 2))

    def test_wraps_past_zero(self):
        """start=3pi/2, end=pi/2 crosses 0: 0 is inside, pi is outside."""
        start, end = 3 * math.pi / 2, math.pi / 2
        self.assertTrue(is_angle_in_arc(0.0, start, end))
        self.assertFalse(is_angle_in_arc(math.pi, start, end))
        self.assertTrue(is_angle_in_arc(7 * math.pi / 4, start, end))

    def test_angles_outside_range_are_normalized(self):
        self.assertTrue(is_angle_in_arc(-math.pi / 4, 3 * math.pi / 2, math.pi / 2))
        self.assertTrue(is_angle_in_arc(math.pi / 4 + 2 * math.pi, 0.0, math.pi / 2))

    def test_normalize_angle_range(self):
        self.assertEqual(normalize_angle(-1e-18), 0.0)
        self.assertAlmostEqual(normalize_angle(-math.pi / 2), 3 * math.pi / 2)


class TestArcFlags(unittest.TestCase):

    def test_quarter_ccw(self):
        self.assertEqual(arc_flags(0, 90), (0, 1))

    def test_large_arc(self):
        self.assertEqual(arc_flags(0, 270), (1, 1))

    def test_end_below_start(self):
        # 350 -> 10 degrees: end < start so sweep is 0; the raw span is 340 deg.
        self.assertEqual(arc_flags(350, 10), (1, 0))

    def test_extreme_points_include_quadrants(self):
        pts = arc_extreme_points((0, 0), 1.0, 45, 135)
        self.assertEqual(len(pts), 3)
        self.assertAlmostEqual(max(p[1] for p in pts), 1.0)


class TestVectors(unittest.TestCase):

    def test_length(self):
        self.assertEqual(vector_length((3, 4)), 5.0)

    def test_rotation(self):
        self.assertAlmostEqual(rotation_angle_deg((0, 2)), 90.0)
        self.assertAlmostEqual(rotation_angle_deg((-1, 0)), 180.0)


class TestSplineGroups(unittest.TestCase):

    def test_stride_three_from_index_one(self):
        pts = [(float(i), 0.0) for i in range(7)]
        groups = spline_bezier_groups(pts)
        self.assertEqual(len(groups), 2)
        self.assertEqual(groups[0], ((1.0, 0.0), (2.0, 0.0), (3.0, 0.0)))
        self.assertEqual(groups[1][0], (4.0, 0.0))

    def test_remainder_dropped(self):
        pts = [(float(i), 0.0) for i in range(6)]
        self.assertEqual(len(spline_bezier_groups(pts)), 1)
        self.assertEqual(spline_bezier_groups(pts[:3]), [])


class TestHelixSpiral(unittest.TestCase):

    def test_sample_count(self):
        self.assertEqual(len(helix_spiral_points((0, 0), 4.0, 2)), 32)

    def test_radius_grows_linearly(self):
        pts = helix_spiral_points((10, 20), 4.0, 2)
        self.assertEqual(pts[0], (10.0, 20.0))
        # sample 16: one full turn, half the total samples
        self.assertAlmostEqual(pts[16][0], 12.0)
        self.assertAlmostEqual(pts[16][1], 20.0)

    def test_zero_turns(self):
        self.assertEqual(helix_spiral_points((0, 0), 1.0, 0), [])


if __name__ == "__main__":
    unittest.main()

# tests/test_angles.py

import math
import unittest

import numpy as np

from geometry.angles import angle_deficit, angle_sums, corner_angles, face_normal

import _meshes


def _ring_corners(ring):
    k = len(ring)
    return ([ring[i - 1] for i in range(k)], list(ring), [ring[(i + 1) % k] for i in range(k)])


class TestFaceNormal(unittest.TestCase):

    def test_counter_clockwise_polygon_points_up(self):
        pts, faces = _meshes.l_shape()
        np.testing.assert_allclose(face_normal(pts, faces[0]), [0.0, 0.0, 1.0])
        np.testing.assert_allclose(face_normal(pts, faces[0][::-1]), [0.0, 0.0, -1.0])

    def test_degenerate_polygon_has_zero_normal(self):
        pts = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
        np.testing.assert_array_equal(face_normal(pts, [0, 1, 2]), np.zeros(3))


class TestCornerAngles(unittest.TestCase):

    def test_unsigned_angles_fold_reflex_corners(self):
        pts, faces = _meshes.l_shape()
        prev, cur, nxt = _ring_corners(faces[0])
        ang = corner_angles(pts, prev, cur, nxt)
        self.assertAlmostEqual(ang[3], math.pi / 2.0)

    def test_normal_gives_reflex_angle(self):
        pts, faces = _meshes.l_shape()
        prev, cur, nxt = _ring_corners(faces[0])
        normals = np.tile(face_normal(pts, faces[0]), (6, 1))
        ang = corner_angles(pts, prev, cur, nxt, normals)
        self.assertAlmostEqual(ang[3], 1.5 * math.pi)
        self.assertAlmostEqual(float(ang.sum()), 4.0 * math.pi)

    def test_winding_does_not_change_angles(self):
        pts, faces = _meshes.l_shape()
        ring = faces[0][::-1]
        prev, cur, nxt = _ring_corners(ring)
        normals = np.tile(face_normal(pts, ring), (6, 1))
        ang = corner_angles(pts, prev, cur, nxt, normals)
        self.assertAlmostEqual(float(ang[ring.index(3)]), 1.5 * math.pi)

    def test_zero_normal_falls_back_to_unsigned(self):
        pts, faces = _meshes.triangle()
        prev, cur, nxt = _ring_corners(faces[0])
        ang = corner_angles(pts, prev, cur, nxt, np.zeros((3, 3)))
        np.testing.assert_allclose(ang, [math.pi / 2.0, math.pi / 4.0, math.pi / 4.0])

    def test_sums_and_deficit(self):
        sums = angle_sums(3, np.array([0, 0, 2]), np.array([1.0, 2.0, 0.5]))
        np.testing.assert_allclose(sums, [3.0, 0.0, 0.5])
        deficit = angle_deficit(sums, np.array([False, True, False]))
        np.testing.assert_allclose(deficit, [2.0 * math.pi - 3.0, math.pi, 2.0 * math.pi - 0.5])


if __name__ == "__main__":
    unittest.main()

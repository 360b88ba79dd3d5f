# -*- coding: utf-8 -*-
# Halftopo/geometry/angles.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Small numerical kernels for polygon corners in 3D: interior angles and per-vertex
angle sums, used by the discrete curvature computation.

Main Tasks:
-----------
    1. `face_normal`: unit Newell normal of a polygon.
    2. `corner_angles`: vectorized angle at `cur` between edges to `prev` and `nxt`,
       measured about the face normal when one is given.
    3. `angle_sums`: accumulate corner angles per vertex id.
    4. `angle_deficit`: 2*pi (interior) or pi (boundary) minus the angle sum.

Notes:
------
- Zero-length edges give a zero angle instead of NaN.
- Cosines are clipped to [-1, 1] before arccos.
- Without a normal a reflex corner reads as 2*pi minus its true angle.
"""

import numpy as np


def face_normal(points: np.ndarray, ring) -> np.ndarray:
    """
    Unit Newell normal of a polygon given by vertex ids `ring` (zero vector when
    the polygon has no area).
    """
    P = np.asarray(points, dtype=float)[np.asarray(ring, dtype=np.int64)]
    n = np.cross(P, np.roll(P, -1, axis=0)).sum(axis=0)
    norm = np.linalg.norm(n)
    return n / norm if norm > 0.0 else np.zeros(3)


def corner_angles(points: np.ndarray, prev: np.ndarray, cur: np.ndarray, nxt: np.ndarray,
                  normals: np.ndarray = None) -> np.ndarray:
    """
    Interior angles (radians) at vertices `cur` for corners prev -> cur -> nxt.

    Parameters
    ----------
    points : np.ndarray
        (N,3) vertex positions.
    prev, cur, nxt : np.ndarray
        (K,) integer vertex ids, one corner per entry.
    normals : np.ndarray, optional
        (K,3) unit normal of the face owning each corner. When given, angles are
        measured counter-clockwise about the normal, so reflex corners of
        non-convex polygons come out in (pi, 2*pi). Rows with a zero normal fall
        back to the unsigned angle.

    Returns
    -------
    np.ndarray
        (K,) angles in [0, pi], or [0, 2*pi) with `normals`.
    """
    P = np.asarray(points, dtype=float)
    a = P[np.asarray(prev, dtype=np.int64)] - P[np.asarray(cur, dtype=np.int64)]
    b = P[np.asarray(nxt, dtype=np.int64)] - P[np.asarray(cur, dtype=np.int64)]
    na = np.linalg.norm(a, axis=1)
    nb = np.linalg.norm(b, axis=1)
    den = na * nb
    ok = den > 0.0
    cos = np.zeros_like(den)
    cos[ok] = np.einsum("ij,ij->i", a[ok], b[ok]) / den[ok]
    ang = np.arccos(np.clip(cos, -1.0, 1.0))

    if normals is not None:
        N = np.asarray(normals, dtype=float).reshape(-1, 3)
        signed = np.linalg.norm(N, axis=1) > 0.0
        sin = np.einsum("ij,ij->i", np.cross(b, a), N)
        turn = np.mod(np.arctan2(sin, np.einsum("ij,ij->i", a, b)), 2.0 * np.pi)
        ang = np.where(signed, turn, ang)

    ang[~ok] = 0.0
    return ang


def angle_sums(n_vertices: int, cur: np.ndarray, angles: np.ndarray) -> np.ndarray:
    """Sum corner angles per vertex id; (n_vertices,) array."""
    out = np.zeros(int(n_vertices), dtype=float)
    np.add.at(out, np.asarray(cur, dtype=np.int64), angles)
    return out


def angle_deficit(sums: np.ndarray, on_boundary: np.ndarray) -> np.ndarray:
    """
    Discrete Gaussian curvature per vertex: 2*pi - sum at interior vertices,
    pi - sum at boundary vertices (geodesic turning of the boundary).
    """
    full = np.where(np.asarray(on_boundary, dtype=bool), np.pi, 2.0 * np.pi)
    return full - sums

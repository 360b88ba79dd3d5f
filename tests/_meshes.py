# tests/_meshes.py

"""Small in-memory meshes shared by the test modules: (points, faces) tuples."""

import math
import numpy as np


def tetrahedron():
    pts = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    faces = [[0, 2, 1], [0, 1, 3], [1, 2, 3], [0, 3, 2]]
    return np.array(pts), faces


def tetrahedron_scrambled():
    """Same tetrahedron with two faces given in the wrong winding."""
    pts, faces = tetrahedron()
    faces = [list(f) for f in faces]
    faces[1] = faces[1][::-1]
    faces[3] = faces[3][::-1]
    return pts, faces


def triangle():
    return np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]), [[0, 1, 2]]


def two_triangles():
    pts = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0],
           [5.0, 0.0, 0.0], [6.0, 0.0, 0.0], [5.0, 1.0, 0.0]]
    return np.array(pts), [[0, 1, 2], [3, 4, 5]]


def bowtie():
    """Two triangles touching at vertex 0 only."""
    pts = [[0.0, 0.0, 0.0], [1.0, 1.0, 0.0], [1.0, -1.0, 0.0], [-1.0, 1.0, 0.0], [-1.0, -1.0, 0.0]]
    return np.array(pts), [[0, 1, 2], [0, 3, 4]]


def fin():
    """Three triangles on edge (0, 1)."""
    pts = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.5, 1.0, 0.0], [0.5, -1.0, 0.0], [0.5, 0.0, 1.0]]
    return np.array(pts), [[0, 1, 2], [1, 0, 3], [0, 1, 4]]


def l_shape():
    """Single planar non-convex hexagon with a reflex corner at vertex 3."""
    pts = [[0, 0, 0], [2, 0, 0], [2, 1, 0], [1, 1, 0], [1, 2, 0], [0, 2, 0]]
    return np.array(pts, dtype=float), [[0, 1, 2, 3, 4, 5]]


def l_prism():
    """The L hexagon extruded to height 1: closed, two non-convex caps."""
    base, _ = l_shape()
    pts = np.vstack([base, base + np.array([0.0, 0.0, 1.0])])
    faces = [[5, 4, 3, 2, 1, 0], [6, 7, 8, 9, 10, 11]]
    for i in range(6):
        j = (i + 1) % 6
        faces.append([i, j, 6 + j, 6 + i])
    return pts, faces


def cube():
    pts = [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0],
           [0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1]]
    faces = [[0, 3, 2, 1], [4, 5, 6, 7], [0, 1, 5, 4],
             [1, 2, 6, 5], [2, 3, 7, 6], [3, 0, 4, 7]]
    return np.array(pts, dtype=float), faces


def square_grid(n=3):
    """Flat n x n grid of quads in the XY plane (a disc)."""
    pts = [[i, j, 0.0] for j in range(n + 1) for i in range(n + 1)]
    faces = []
    for j in range(n):
        for i in range(n):
            a = j * (n + 1) + i
            faces.append([a, a + 1, a + n + 2, a + n + 1])
    return np.array(pts, dtype=float), faces


def torus(n=6, m=4, R=3.0, r=1.0):
    """Quad torus on an n x m parameter grid."""
    pts = []
    for i in range(n):
        t = 2.0 * math.pi * i / n
        for j in range(m):
            p = 2.0 * math.pi * j / m
            pts.append([(R + r * math.cos(p)) * math.cos(t),
                        (R + r * math.cos(p)) * math.sin(t),
                        r * math.sin(p)])
    faces = []
    for i in range(n):
        for j in range(m):
            a = i * m + j
            b = ((i + 1) % n) * m + j
            c = ((i + 1) % n) * m + (j + 1) % m
            d = i * m + (j + 1) % m
            faces.append([a, b, c, d])
    return np.array(pts), faces


def open_tube(n=8):
    """Cylinder side without caps: two boundary loops."""
    pts = []
    for z in (0.0, 1.0):
        for i in range(n):
            t = 2.0 * math.pi * i / n
            pts.append([math.cos(t), math.sin(t), z])
    faces = [[i, (i + 1) % n, n + (i + 1) % n, n + i] for i in range(n)]
    return np.array(pts), faces


def moebius(n=6, R=3.0, w=0.5):
    """Triangulated Moebius strip; top/bottom rows swap across the seam."""
    pts = []
    for i in range(n):
        t = 2.0 * math.pi * i / n
        radial = np.array([math.cos(t), math.sin(t), 0.0])
        offset = w * (math.cos(t / 2.0) * radial + math.sin(t / 2.0) * np.array([0.0, 0.0, 1.0]))
        pts.append(R * radial + offset)   # top t_i = 2i
        pts.append(R * radial - offset)   # bottom b_i = 2i + 1
    faces = []
    for i in range(n):
        ti, bi = 2 * i, 2 * i + 1
        if i < n - 1:
            tn, bn = 2 * (i + 1), 2 * (i + 1) + 1
        else:
            tn, bn = 1, 0
        faces.append([ti, bi, bn])
        faces.append([ti, bn, tn])
    return np.array(pts), faces


def combine(*meshes, spacing=10.0):
    """Disjoint union of (points, faces) pairs, each shifted along x."""
    pts, faces = [], []
    offset = 0
    for k, (p, f) in enumerate(meshes):
        p = np.asarray(p, dtype=float) + np.array([k * spacing, 0.0, 0.0])
        pts.append(p)
        faces.extend([v + offset for v in face] for face in f)
        offset += len(p)
    return np.vstack(pts), faces


def write_obj(path, points, faces):
    """Plain Wavefront OBJ (1-based face indices)."""
    with open(path, "w", encoding="utf-8") as f:
        for p in points:
            f.write("v {} {} {}\n".format(*[float(c) for c in p]))
        for face in faces:
            f.write("f " + " ".join(str(v + 1) for v in face) + "\n")
    return path

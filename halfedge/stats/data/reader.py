# -*- coding: utf-8 -*-
# Halftopo/halfedge/stats/data/reader.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Provide a lightweight `MeshData` container (vertex positions + polygon faces) and a
`read` function that loads surface meshes from files using `meshio`.

Main Tasks:
-----------
    1) Define `MeshData` with points (N,3) and a ragged list of faces.
    2) Read mesh file with `meshio.read` (OBJ, OFF, PLY, STL, VTK, MSH, ...).
    3) Flatten every 2D cell block (triangle, quad, polygon) into one face list,
       keeping block order.
    4) Skip 0D/1D/3D blocks (vertex, line, tetra, ...) with a debug record.

Notes:
------
- meshio reports mixed polygon files as several blocks; face ids follow block order.
- Points with two coordinates are padded with z=0.
"""

import logging
from typing import List, Sequence
import numpy as np

logger = logging.getLogger(__name__)

_SURFACE_TYPES = ("triangle", "quad", "quadrilateral", "polygon")


class MeshData:
    """
    Lightweight container for a polygon surface mesh.

    Attributes
    ----------
    points : np.ndarray
        (N,3) array of vertex coordinates.
    faces : list of list of int
        0-based vertex ids per face (ragged; degree >= 3 expected).
    path : str or None
        Source file, if loaded from disk.
    """

    def __init__(self, points: np.ndarray, faces: List[List[int]], path: str = None):
        self.points = points
        self.faces = faces
        self.path = path

    def __repr__(self):
        return "MeshData(n_points={}, n_faces={})".format(len(self.points), len(self.faces))

    @classmethod
    def from_arrays(cls, points, faces: Sequence[Sequence[int]]) -> "MeshData":
        """Build from array-likes; (N,2) points are padded with z=0."""
        pts = np.asarray(points, dtype=float)
        if pts.ndim == 2 and pts.shape[1] == 2:
            pts = np.hstack([pts, np.zeros((pts.shape[0], 1))])
        return cls(points=pts, faces=[[int(v) for v in f] for f in faces])


def _is_surface_block(cell_type: str) -> bool:
    return cell_type in _SURFACE_TYPES or cell_type.startswith("polygon")


def read(path: str) -> MeshData:
    """
    Load a surface mesh file into a `MeshData` container.

    Parameters
    ----------
    path : str
        Path to any surface format meshio understands.

    Returns
    -------
    MeshData
        Points and faces (all 2D cell blocks concatenated).

    Raises
    ------
    ValueError
        If meshio cannot read the file, or it holds no polygon faces.
    """
    import meshio

    try:
        m = meshio.read(path)
    except meshio.ReadError as e:
        raise ValueError("Failed to read mesh file '{}': {}".format(path, e)) from e
    pts = np.asarray(m.points, dtype=float)
    if pts.ndim == 2 and pts.shape[1] == 2:
        pts = np.hstack([pts, np.zeros((pts.shape[0], 1))])

    faces: List[List[int]] = []
    for cb in m.cells:
        t = getattr(cb, "type", "")
        if not _is_surface_block(t):
            logger.debug("[read] skipping %d '%s' cells", len(cb.data), t)
            continue
        for conn in cb.data:
            faces.append([int(v) for v in conn])

    if not faces:
        raise ValueError("Mesh file '{}' has no polygon faces.".format(path))

    logger.info("[read] %s: %d points, %d faces", path, pts.shape[0], len(faces))
    return MeshData(points=pts, faces=faces, path=path)

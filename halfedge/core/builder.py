# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/builder.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Turn a raw polygon mesh (vertex positions + faces as cyclic index lists) into the linked
half-edge graph. Each face keeps the winding it was given; consistency across faces is
established later by the orientation pass.

Main Tasks:
-----------
    1) Validate positions and face connectivity (`InvalidTopology` on bad input).
    2) Create one Vertex per position.
    3) Per face: one HalfEdge per corner, `next` cycle in input order, face seed,
       vertex `out` seeds (last writer wins).
    4) Pair opposite half-edges through a transient `EdgeKeyIndex`.
    5) Reject vertices that no face references.

Notes:
------
- Half-edge i of a face runs face[i-1] -> face[i].
- `NonManifoldEdge` is raised from the edge index when a third face claims an edge.
"""

import logging
from typing import List, Sequence
import numpy as np

from .edge_index import EdgeKeyIndex, form_key
from .errors import InvalidTopology
from .mesh import HalfEdgeMesh
from .primitives import Vertex, Face, HalfEdge

logger = logging.getLogger(__name__)


def _as_points(points) -> np.ndarray:
    """
    Coerce positions to a finite (N,3) float array; (N,2) input gets z=0.
    """
    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return np.zeros((0, 3), dtype=float)
    if pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise InvalidTopology("Expected (N,3) array for vertex positions.", {"shape": pts.shape})
    if not np.isfinite(pts).all():
        bad = np.unique(np.argwhere(~np.isfinite(pts))[:, 0])
        raise InvalidTopology("Non-finite vertex positions.", {"vertices": bad.tolist()})
    if pts.shape[1] == 2:
        pts = np.hstack([pts, np.zeros((pts.shape[0], 1))])
    return pts


def _as_indices(fid: int, raw: Sequence) -> List[int]:
    """Face entries as ints; non-integral values (e.g. 1.7) are rejected, not truncated."""
    face = []
    for v in raw:
        iv = int(v)
        if iv != v:
            raise InvalidTopology("Face has a non-integer vertex index.", {"face": fid, "index": v})
        face.append(iv)
    return face


def _check_face(fid: int, face: Sequence[int], n_vertices: int) -> None:
    if len(face) < 3:
        raise InvalidTopology("Face has fewer than 3 vertices.", {"face": fid, "degree": len(face)})
    for v in face:
        if v < 0 or v >= n_vertices:
            raise InvalidTopology(
                "Face references a vertex index out of range.",
                {"face": fid, "index": v, "n_vertices": n_vertices},
            )
    if len(set(face)) != len(face):
        raise InvalidTopology("Face repeats a vertex (degenerate face).", {"face": fid, "vertices": list(face)})


def build(points, faces: Sequence[Sequence[int]]) -> HalfEdgeMesh:
    """
    Build the half-edge graph for a polygon mesh.

    Parameters
    ----------
    points : array-like
        (N,3) (or (N,2)) vertex positions.
    faces : sequence of sequences of int
        0-based vertex indices per face, cyclic, degree >= 3. Ragged input is fine.

    Returns
    -------
    HalfEdgeMesh
        Unoriented graph; every face has `oriented=False`.

    Raises
    ------
    InvalidTopology
        Bad positions, non-integer or out-of-range index, degenerate face, or
        unreferenced vertex.
    NonManifoldEdge
        An edge shared by more than two faces.
    """
    pts = _as_points(points)
    vertices = [Vertex(position=p) for p in pts]
    he_faces = []
    half_edges = []
    index = EdgeKeyIndex(half_edges)

    for fid, raw in enumerate(faces):
        face = _as_indices(fid, raw)
        _check_face(fid, face, len(vertices))

        base = len(half_edges)
        half_edges.extend(HalfEdge(end=v, face=fid) for v in face)
        he_faces.append(Face(half_edge=base))

        k = len(face)
        for i in range(k):
            h = base + i
            prev = base + (i - 1) % k
            half_edges[prev].next = h
            vertices[face[i - 1]].out = h
            index.record(form_key(face[i - 1], face[i]), h)

    orphans = [i for i, v in enumerate(vertices) if v.out is None]
    if orphans:
        raise InvalidTopology("Vertices not referenced by any face.", {"vertices": orphans[:25]})

    logger.debug("[build] %d vertices, %d faces, %d half-edges, %d edges",
                 len(vertices), len(he_faces), len(half_edges), len(index))
    return HalfEdgeMesh(vertices, he_faces, half_edges)


def build_from_data(data) -> HalfEdgeMesh:
    """Build from a `MeshData` container (points + faces)."""
    return build(data.points, data.faces)

# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/mesh.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Arena container (`HalfEdgeMesh`) for the half-edge graph plus a read-only view
(`MeshPart`) over a subset of its faces. The whole mesh and every disconnected group
are analysed through the same `MeshPart` interface.

Main Tasks:
-----------
   - Hold flat lists of vertices, faces and half-edges (index-linked).
   - Walk face cycles, resolve the origin of a half-edge, stack vertex positions.
   - Build `MeshPart` views and re-express them as independent `MeshData`.

Notes:
------
   - `groups` is None until the orientation pass has run.
   - After orientation the graph is read-only.
"""

from typing import Iterable, List, Optional
import numpy as np

from .primitives import Vertex, Face, HalfEdge


class HalfEdgeMesh:
    """
    Half-edge graph with index-based links.

    Attributes
    ----------
    vertices : list of Vertex
    faces : list of Face
    half_edges : list of HalfEdge
    groups : list of list of int or None
        Face ids per disconnected group (filled by the orientation pass).
    """

    def __init__(self, vertices: List[Vertex], faces: List[Face], half_edges: List[HalfEdge]):
        self.vertices = vertices
        self.faces = faces
        self.half_edges = half_edges
        self.groups: Optional[List[List[int]]] = None

    def __repr__(self):
        return "HalfEdgeMesh(V={}, F={}, H={})".format(
            len(self.vertices), len(self.faces), len(self.half_edges))

    @property
    def points(self) -> np.ndarray:
        """(N,3) stacked vertex positions."""
        if not self.vertices:
            return np.zeros((0, 3), dtype=float)
        return np.vstack([v.position for v in self.vertices])

    def face_half_edges(self, f: int) -> List[int]:
        """Half-edge ids of face `f`, in `next` order starting at the face seed."""
        start = self.faces[f].half_edge
        out = [start]
        h = self.half_edges[start].next
        while h != start:
            out.append(h)
            h = self.half_edges[h].next
        return out

    def face_vertices(self, f: int) -> List[int]:
        """Vertex ids of face `f` in traversal order."""
        return [self.half_edges[h].end for h in self.face_half_edges(f)]

    def origin(self, h: int) -> int:
        """Start vertex of half-edge `h` (end of its predecessor in the face cycle)."""
        prev = h
        while self.half_edges[prev].next != h:
            prev = self.half_edges[prev].next
        return self.half_edges[prev].end

    def whole(self) -> "MeshPart":
        return MeshPart(self, range(len(self.faces)))

    def part(self, face_ids: Iterable[int]) -> "MeshPart":
        return MeshPart(self, face_ids)

    def group_parts(self) -> List["MeshPart"]:
        """One view per disconnected group; requires the orientation pass."""
        if self.groups is None:
            raise RuntimeError("Mesh is not oriented yet; call orient_and_find_groups() first.")
        return [MeshPart(self, g) for g in self.groups]


class MeshPart:
    """
    Read-only view over a set of faces of a `HalfEdgeMesh`.

    Vertices of the part are the `end` vertices of its half-edges.
    """

    def __init__(self, mesh: HalfEdgeMesh, face_ids: Iterable[int]):
        self.mesh = mesh
        self.face_ids = list(face_ids)
        self.half_edge_ids = [h for f in self.face_ids for h in mesh.face_half_edges(f)]
        self.vertex_ids = sorted({mesh.half_edges[h].end for h in self.half_edge_ids})

    def __repr__(self):
        return "MeshPart(V={}, F={}, H={})".format(
            len(self.vertex_ids), len(self.face_ids), len(self.half_edge_ids))

    def to_mesh_data(self):
        """
        Re-express the part as an independent `MeshData` (vertices re-indexed, faces
        in their current traversal order).
        """
        from ..stats.data.reader import MeshData

        remap = {v: i for i, v in enumerate(self.vertex_ids)}
        points = self.mesh.points[self.vertex_ids] if self.vertex_ids else np.zeros((0, 3))
        faces = [[remap[v] for v in self.mesh.face_vertices(f)] for f in self.face_ids]
        return MeshData(points=np.asarray(points, dtype=float), faces=faces)

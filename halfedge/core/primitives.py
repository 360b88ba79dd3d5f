# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/primitives.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Half-edge records. All cross references are integer indices into the flat arenas
owned by `HalfEdgeMesh` (vertices, faces, half_edges), so the cyclic structure is
plain data with O(1) adjacency lookups.

Notes:
------
- `HalfEdge.opposite is None` marks a boundary edge.
- `Vertex.out` is a traversal seed (any half-edge starting at the vertex), not ownership.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass
class Vertex:
    """
    Mesh vertex: 3D position and one outgoing half-edge.
    """
    position: np.ndarray               # (3,)
    out: Optional[int] = None          # half-edge index


@dataclass
class Face:
    """
    Mesh face: one bounding half-edge and the orientation flag.
    """
    half_edge: Optional[int] = None    # half-edge index
    oriented: bool = False


@dataclass
class HalfEdge:
    """
    Directed traversal of one edge, owned by exactly one face.
    """
    end: int                           # vertex the half-edge points to
    face: int                          # owning face
    next: Optional[int] = None         # next half-edge around the same face
    opposite: Optional[int] = None     # reverse half-edge in the adjacent face

    @property
    def is_boundary(self) -> bool:
        return self.opposite is None

# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/__init__.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Modules:
--------
- primitives:  Vertex / Face / HalfEdge records (index-linked).
- edge_index:  Build-time undirected-edge lookup that pairs opposite half-edges.
- mesh:        HalfEdgeMesh arenas and MeshPart views (whole mesh or one group).
- builder:     Raw positions + faces -> half-edge graph.
- orientation: Consistent winding propagation and disconnected-group discovery.
- boundary:    Boundary half-edges, boundary vertices and boundary loops.
- errors:      InvalidTopology, NonManifoldEdge, NonManifoldBoundaryVertex.
"""

from .builder import build, build_from_data
from .mesh import HalfEdgeMesh, MeshPart
from .orientation import orient_and_find_groups, all_faces_oriented, inconsistent_edges
from .errors import TopologyError, InvalidTopology, NonManifoldEdge, NonManifoldBoundaryVertex

__all__ = [
    "build",
    "build_from_data",
    "HalfEdgeMesh",
    "MeshPart",
    "orient_and_find_groups",
    "all_faces_oriented",
    "inconsistent_edges",
    "TopologyError",
    "InvalidTopology",
    "NonManifoldEdge",
    "NonManifoldBoundaryVertex",
]

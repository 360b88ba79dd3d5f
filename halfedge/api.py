# -*- coding: utf-8 -*-
# Halftopo/halfedge/api.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose
-------
High-level API tying the reader, builder, orientation pass and report together, so
callers get an oriented half-edge mesh or a finished topology summary in one call.

Main Tasks
----------
    1. `build_oriented`: positions + faces -> oriented HalfEdgeMesh (groups found).
    2. `load_mesh`: file -> oriented HalfEdgeMesh (meshio reader).
    3. `analyze`: positions + faces -> summary dict (see `stats.report.summarize`).
    4. `split_groups`: one independent MeshData per disconnected group.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .core.builder import build
from .core.mesh import HalfEdgeMesh
from .core.orientation import orient_and_find_groups
from .stats.data.reader import MeshData, read
from .stats.report import summarize

logger = logging.getLogger(__name__)


def build_oriented(points, faces: Sequence[Sequence[int]]) -> HalfEdgeMesh:
    """
    Build the half-edge graph and run the orientation pass.

    Raises
    ------
    InvalidTopology, NonManifoldEdge
        Propagated from the builder.
    """
    mesh = build(points, faces)
    orient_and_find_groups(mesh)
    logger.info("[build_oriented] %r, %d group(s)", mesh, len(mesh.groups))
    return mesh


def load_mesh(path: str) -> HalfEdgeMesh:
    """Read a surface mesh file and return it oriented."""
    data = read(path)
    return build_oriented(data.points, data.faces)


def analyze(points, faces: Sequence[Sequence[int]], thresholds: Optional[Dict[str, float]] = None) -> Dict:
    """
    Topology summary for an in-memory mesh.

    Raises
    ------
    InvalidTopology, NonManifoldEdge, NonManifoldBoundaryVertex
    """
    return summarize(build_oriented(points, faces), thresholds=thresholds)


def split_groups(mesh: HalfEdgeMesh) -> List[MeshData]:
    """Re-express each disconnected group of an oriented mesh as its own MeshData."""
    return [p.to_mesh_data() for p in mesh.group_parts()]

# -*- coding: utf-8 -*-
# Halftopo/halfedge/stats/invariants.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Topological and discrete-geometric invariants of an oriented mesh part (whole mesh or
one disconnected group).

Main Tasks:
-----------
    1) Counts: V, F and E = boundary half-edges + interior half-edges / 2.
    2) Euler characteristic chi = V - E + F, genus g = 1 - (chi + b) / 2.
    3) Total angle-deficit curvature and the Gauss-Bonnet residual |kappa - 2*pi*chi|.
    4) Boundary validation (bow-tie detection) before anything else is reported.
    5) `compute_invariants`: all of the above as one dict.

Notes:
------
- With the boundary convention used here (pi minus the angle sum at boundary
  vertices) and corner angles measured about each face normal, the discrete
  Gauss-Bonnet identity is exact up to round-off for planar faces, convex or not.
- Genus is an int when chi + b is even; odd sums (non-orientable input) give a
  half-integer float.
"""

from typing import Any, Dict, List, Optional
import math
import numpy as np

from geometry.angles import face_normal, corner_angles, angle_sums, angle_deficit
from ..core.boundary import (
    boundary_edge_count,
    boundary_loops,
    boundary_vertex_count,
    boundary_vertices,
)
from ..core.errors import InvalidTopology, NonManifoldBoundaryVertex
from ..core.mesh import MeshPart


def vertex_count(part: MeshPart) -> int:
    return len(part.vertex_ids)


def face_count(part: MeshPart) -> int:
    return len(part.face_ids)


def edge_count(part: MeshPart) -> int:
    """
    Undirected edges: each boundary edge owns one half-edge, each interior edge two.
    """
    n_boundary = boundary_edge_count(part)
    n_interior, rem = divmod(len(part.half_edge_ids) - n_boundary, 2)
    if rem:
        raise InvalidTopology("Interior half-edges do not pair up.", {"unpaired": rem})
    return n_boundary + n_interior


def characteristic(part: MeshPart) -> int:
    return vertex_count(part) - edge_count(part) + face_count(part)


def genus(part: MeshPart, n_loops: Optional[int] = None):
    """g = 1 - (chi + b) / 2, with b the number of boundary loops."""
    b = len(boundary_loops(part)) if n_loops is None else n_loops
    total = characteristic(part) + b
    if total % 2 == 0:
        return 1 - total // 2
    return 1 - total / 2


def is_closed(part: MeshPart) -> bool:
    return boundary_edge_count(part) == 0


def _corners(part: MeshPart):
    """
    (prev, cur, next) vertex ids for every corner of every face in the part, plus
    the unit normal of the owning face per corner.
    """
    mesh = part.mesh
    points = mesh.points
    normals: List[np.ndarray] = []
    prev: List[int] = []
    cur: List[int] = []
    nxt: List[int] = []
    for f in part.face_ids:
        ring = mesh.face_vertices(f)
        k = len(ring)
        normals.extend([face_normal(points, ring)] * k)
        for i in range(k):
            prev.append(ring[i - 1])
            cur.append(ring[i])
            nxt.append(ring[(i + 1) % k])
    return (np.array(prev, dtype=np.int64), np.array(cur, dtype=np.int64),
            np.array(nxt, dtype=np.int64), np.array(normals, dtype=float).reshape(-1, 3))


def vertex_curvature(part: MeshPart) -> Dict[int, float]:
    """
    Angle deficit per vertex of the part: 2*pi - sum(theta) inside, pi - sum(theta)
    on the boundary.
    """
    mesh = part.mesh
    n = len(mesh.vertices)
    prev, cur, nxt, normals = _corners(part)
    sums = angle_sums(n, cur, corner_angles(mesh.points, prev, cur, nxt, normals))

    on_boundary = np.zeros(n, dtype=bool)
    on_boundary[boundary_vertices(part)] = True
    deficit = angle_deficit(sums, on_boundary)
    return {v: float(deficit[v]) for v in part.vertex_ids}


def curvature(part: MeshPart) -> float:
    """Total discrete curvature kappa (sum of vertex angle deficits)."""
    return float(math.fsum(vertex_curvature(part).values()))


def gauss_bonnet_residual(part: MeshPart) -> float:
    return abs(curvature(part) - 2.0 * math.pi * characteristic(part))


def validate_boundary(part: MeshPart) -> None:
    """
    Refuse parts whose boundary is not a union of simple cycles.

    Raises
    ------
    NonManifoldBoundaryVertex
        If boundary-vertex count != boundary-edge count.
    """
    nv = boundary_vertex_count(part)
    ne = boundary_edge_count(part)
    if nv < ne:
        raise NonManifoldBoundaryVertex(
            "Fewer boundary vertices than boundary edges; the mesh has a non-manifold "
            "boundary vertex (picture a bow-tie).",
            {"boundary_vertices": nv, "boundary_edges": ne},
        )
    if nv > ne:
        raise NonManifoldBoundaryVertex(
            "More boundary vertices than boundary edges; the boundary is not a set of "
            "simple loops.",
            {"boundary_vertices": nv, "boundary_edges": ne},
        )


def compute_invariants(part: MeshPart) -> Dict[str, Any]:
    """
    Validate the boundary and return every invariant of the part.

    Returns
    -------
    dict
        {
          "vertices", "edges", "faces": int,
          "closed": bool,
          "boundaries": int,              # number of boundary loops b
          "boundary_vertices", "boundary_edges": int,
          "characteristic": int,          # chi
          "genus": int or float,
          "curvature": float,             # kappa
          "gauss_bonnet_residual": float, # |kappa - 2*pi*chi|
        }
    """
    validate_boundary(part)

    loops = boundary_loops(part)
    chi = characteristic(part)
    kappa = curvature(part)
    return {
        "vertices": vertex_count(part),
        "edges": edge_count(part),
        "faces": face_count(part),
        "closed": is_closed(part),
        "boundaries": len(loops),
        "boundary_vertices": boundary_vertex_count(part),
        "boundary_edges": boundary_edge_count(part),
        "characteristic": chi,
        "genus": genus(part, n_loops=len(loops)),
        "curvature": kappa,
        "gauss_bonnet_residual": abs(kappa - 2.0 * math.pi * chi),
    }

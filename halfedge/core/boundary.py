# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/boundary.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Boundary structure of an oriented mesh part: boundary half-edges, boundary vertices,
and their grouping into boundary loops.

Main Tasks:
-----------
    1) `boundary_half_edges` / `boundary_edge_count`: half-edges without an opposite.
    2) `boundary_vertices` / `boundary_vertex_count`: ends of boundary half-edges.
    3) `boundary_loops`: depth-first search over boundary adjacency, one vertex group per loop.

Notes:
------
- On a manifold boundary each loop is a simple cycle, so its vertex count equals its
  edge count; `stats.invariants.validate_boundary` enforces that globally.
"""

from typing import Dict, List, Set

from .mesh import MeshPart


def boundary_half_edges(part: MeshPart) -> List[int]:
    he = part.mesh.half_edges
    return [h for h in part.half_edge_ids if he[h].is_boundary]


def boundary_edge_count(part: MeshPart) -> int:
    return len(boundary_half_edges(part))


def boundary_vertices(part: MeshPart) -> List[int]:
    """Sorted ids of vertices that end at least one boundary half-edge."""
    he = part.mesh.half_edges
    return sorted({he[h].end for h in boundary_half_edges(part)})


def boundary_vertex_count(part: MeshPart) -> int:
    return len(boundary_vertices(part))


def _boundary_adjacency(part: MeshPart) -> Dict[int, Set[int]]:
    """{vertex: neighbours joined by a boundary half-edge (either direction)}."""
    mesh = part.mesh
    adj: Dict[int, Set[int]] = {}
    for h in boundary_half_edges(part):
        a = mesh.origin(h)
        b = mesh.half_edges[h].end
        adj.setdefault(a, set()).add(b)
        adj.setdefault(b, set()).add(a)
    return adj


def boundary_loops(part: MeshPart) -> List[List[int]]:
    """
    Group boundary vertices into loops.

    Returns
    -------
    list of list of int
        Disjoint vertex groups covering every boundary vertex; seeds are taken in
        ascending vertex order.
    """
    adj = _boundary_adjacency(part)
    undiscovered = boundary_vertices(part)
    allowed = set(undiscovered)
    seen: Set[int] = set()
    loops: List[List[int]] = []

    for seed in undiscovered:
        if seed in seen:
            continue
        seen.add(seed)
        stack = [seed]
        loop = []
        while stack:
            v = stack.pop()
            loop.append(v)
            for w in sorted(adj.get(v, ())):
                if w in allowed and w not in seen:
                    seen.add(w)
                    stack.append(w)
        loops.append(loop)
    return loops

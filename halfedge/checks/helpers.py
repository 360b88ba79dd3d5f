# -*- coding: utf-8 -*-
# Halftopo/halfedge/checks/helpers.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
One-time precomputations shared by all topology checks, plus the common finding
builder, so every rule reads the same boundary/orientation data.

Main Tasks:
-----------
- precompute_cache: build once per run
    * whole:               MeshPart over every face.
    * groups:              MeshPart per disconnected group.
    * boundary_half_edges: list of half-edge ids without an opposite.
    * boundary_vertices:   sorted vertex ids ending a boundary half-edge.
    * boundary_in_degree:  {vertex: number of boundary half-edges ending there}.
    * inconsistent_edges:  half-edges whose opposite runs the same direction.
- finding: normalized result dict (id, severity, ok, count, examples, details).

Notes:
------
- The mesh must already be oriented (`mesh.groups` set).
"""

from collections import Counter
from typing import Any, Dict, List

from ..core.boundary import boundary_half_edges, boundary_vertices
from ..core.mesh import HalfEdgeMesh
from ..core.orientation import inconsistent_edges


def finding(rule_id: str, severity: str, ok: bool, count: int, examples: List,
            details: Dict, max_examples: int = 25) -> Dict[str, Any]:
    return {
        "id": rule_id,
        "severity": severity,
        "ok": bool(ok),
        "count": int(count),
        "examples": list(examples)[:max_examples],
        "details": details or {},
    }


def precompute_cache(mesh: HalfEdgeMesh) -> Dict[str, Any]:
    whole = mesh.whole()
    bhe = boundary_half_edges(whole)
    return {
        "whole": whole,
        "groups": mesh.group_parts(),
        "boundary_half_edges": bhe,
        "boundary_vertices": boundary_vertices(whole),
        "boundary_in_degree": Counter(mesh.half_edges[h].end for h in bhe),
        "inconsistent_edges": inconsistent_edges(mesh),
    }

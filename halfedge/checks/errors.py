# -*- coding: utf-8 -*-
# Halftopo/halfedge/checks/errors.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
ERROR-tier topology rules. Each rule inspects an oriented `HalfEdgeMesh` and returns
one normalized finding record that CLI/CI tooling can aggregate or turn into exit codes.

Main Tasks:
-----------
   - Uniform signature: `<rule_id>(mesh, th, cache) -> dict`.
   - Read shared data from `cache` (see `helpers.precompute_cache`).

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,
      "count": int,
      "examples": [...],      # capped by th["max_examples"]
      "details": {...},
    }
"""

from typing import Dict

from .helpers import finding


# ------------------------------------------------------------------------------------
# 1) nonmanifold_boundary
# ------------------------------------------------------------------------------------
def nonmanifold_boundary(mesh, th, cache) -> Dict:
    """
    Boundary-vertex count must equal boundary-edge count. Examples are the vertices
    where more than one boundary half-edge ends (bow-tie centres).
    """
    nv = len(cache["boundary_vertices"])
    ne = len(cache["boundary_half_edges"])
    pinched = sorted(v for v, n in cache["boundary_in_degree"].items() if n > 1)
    return finding(
        "nonmanifold_boundary",
        "error",
        ok=(nv == ne),
        count=max(len(pinched), abs(nv - ne)),
        examples=pinched,
        details={"boundary_vertices": nv, "boundary_edges": ne},
        max_examples=int(th.get("max_examples", 25)),
    )


# ------------------------------------------------------------------------------------
# 2) orientation_consistency
# ------------------------------------------------------------------------------------
def orientation_consistency(mesh, th, cache) -> Dict:
    """
    After propagation every interior edge must be traversed in opposite directions.
    Leftover conflicts mean the surface is non-orientable (e.g. a Moebius strip).
    Examples are (origin, end) vertex pairs of the conflicting edges.
    """
    bad = cache["inconsistent_edges"]
    he = mesh.half_edges
    pairs = [(mesh.origin(h), he[h].end) for h in bad[: int(th.get("max_examples", 25))]]
    unoriented = sum(1 for f in mesh.faces if not f.oriented)
    return finding(
        "orientation_consistency",
        "error",
        ok=(not bad and unoriented == 0),
        count=len(bad) + unoriented,
        examples=pairs,
        details={"note": "Adjacent faces must run a shared edge in opposite directions.",
                 "unoriented_faces": unoriented},
        max_examples=int(th.get("max_examples", 25)),
    )

# -*- coding: utf-8 -*-
# Halftopo/halfedge/checks/warnings.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
WARN-tier topology rules. Advisory signals: they never fail a mesh, but flag open
surfaces, split meshes and a drifting Gauss-Bonnet balance.

Notes:
------
- Same signature and finding schema as `errors.py`, with severity "warn".
- `gauss_bonnet` is skipped when the boundary is non-manifold (invariants undefined).
"""

from typing import Dict

from ..core.errors import NonManifoldBoundaryVertex
from ..stats.invariants import gauss_bonnet_residual, validate_boundary
from .helpers import finding


def open_surface(mesh, th, cache) -> Dict:
    """Report boundary edges; examples are half-edge ids on the boundary."""
    bhe = cache["boundary_half_edges"]
    return finding(
        "open_surface",
        "warn",
        ok=not bhe,
        count=len(bhe),
        examples=bhe,
        details={"boundary_vertices": len(cache["boundary_vertices"])},
        max_examples=int(th.get("max_examples", 25)),
    )


def disconnected_groups(mesh, th, cache) -> Dict:
    """More than one edge-connected group; examples are the group sizes (faces)."""
    sizes = [len(p.face_ids) for p in cache["groups"]]
    return finding(
        "disconnected_groups",
        "warn",
        ok=len(sizes) <= 1,
        count=len(sizes) if len(sizes) > 1 else 0,
        examples=sizes,
        details={"n_groups": len(sizes)},
        max_examples=int(th.get("max_examples", 25)),
    )


def gauss_bonnet(mesh, th, cache) -> Dict:
    """|kappa - 2*pi*chi| per group against th["gauss_bonnet_atol"]."""
    atol = float(th.get("gauss_bonnet_atol", 1e-6))
    try:
        validate_boundary(cache["whole"])
    except NonManifoldBoundaryVertex as e:
        return finding("gauss_bonnet", "warn", ok=True, count=0, examples=[],
                       details={"skipped": str(e)})

    residuals = [gauss_bonnet_residual(p) for p in cache["groups"]]
    bad = [(i, r) for i, r in enumerate(residuals) if r > atol]
    return finding(
        "gauss_bonnet",
        "warn",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"max_residual": max(residuals) if residuals else 0.0, "atol": atol},
        max_examples=int(th.get("max_examples", 25)),
    )

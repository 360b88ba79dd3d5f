# -*- coding: utf-8 -*-
# Halftopo/halfedge/stats/report.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Compute a compact topology summary of a mesh (whole surface plus every disconnected
group) and return a structured dictionary ready for export (CSV/JSON) or printing.

Main Tasks:
-----------
    1) Accept a file path, a `MeshData`, or an already built `HalfEdgeMesh`.
    2) Build + orient if needed, then validate the boundary of the whole mesh
       (globally fatal) before any invariant is reported.
    3) Compute invariants for the whole mesh and for each group.
    4) Compare the Gauss-Bonnet residual with a threshold and set an overall "ok" flag.
    5) Render the summary as human-readable text (`format_summary`).

Notes:
------
- Thresholds are user-tunable via `thresholds` (merged over defaults).
- A bow-tie made of two triangles sharing a single vertex splits into two
  edge-disconnected groups that each look fine; only the whole-mesh check sees it.
"""

import logging
import os
from typing import Any, Dict, Optional

from ..core.builder import build_from_data
from ..core.mesh import HalfEdgeMesh
from ..core.orientation import orient_and_find_groups, inconsistent_edges
from .data.reader import MeshData, read
from .invariants import compute_invariants, validate_boundary

logger = logging.getLogger(__name__)

# ----------------------------
# Default thresholds
# ----------------------------
DEFAULT_THRESHOLDS: Dict[str, float] = {
    "gauss_bonnet_atol": 1e-6,   # |kappa - 2*pi*chi| must be <= this
}


def prepare_mesh(source) -> HalfEdgeMesh:
    """Return an oriented HalfEdgeMesh from a path, MeshData or HalfEdgeMesh."""
    if isinstance(source, HalfEdgeMesh):
        mesh = source
    else:
        data = read(str(source)) if isinstance(source, (str, os.PathLike)) else source
        if not isinstance(data, MeshData):
            raise TypeError("Expected a path, MeshData or HalfEdgeMesh, got {!r}".format(type(source)))
        mesh = build_from_data(data)
    if mesh.groups is None:
        orient_and_find_groups(mesh)
    return mesh


def summarize(source, thresholds: Optional[Dict[str, float]] = None) -> Dict[str, Any]:
    """
    Build the topology summary of a mesh.

    Parameters
    ----------
    source : str | MeshData | HalfEdgeMesh
        Mesh to analyse; paths are read with meshio.
    thresholds : dict, optional
        Overrides merged over `DEFAULT_THRESHOLDS`.

    Returns
    -------
    dict
        {
          "mesh":   {invariants..., "n_groups": int, "orientable": bool,
                     "inconsistent_edges": int},
          "groups": [ {invariants...}, ... ],   # one per disconnected group
          "thresholds": {...},
          "flags": {"ok": bool, "violations": {"gauss_bonnet_residual": {...}}}
        }

    Raises
    ------
    NonManifoldBoundaryVertex
        If the whole mesh (or any group) has a non-manifold boundary.
    """
    thr = dict(DEFAULT_THRESHOLDS)
    if thresholds:
        thr.update(thresholds)

    mesh = prepare_mesh(source)
    whole = mesh.whole()
    validate_boundary(whole)

    n_bad = len(inconsistent_edges(mesh))
    top = compute_invariants(whole)
    top["n_groups"] = len(mesh.groups)
    top["orientable"] = n_bad == 0
    top["inconsistent_edges"] = n_bad

    groups = [compute_invariants(p) for p in mesh.group_parts()]

    flags = {"violations": {}, "ok": True}
    worst = max([top["gauss_bonnet_residual"]] + [g["gauss_bonnet_residual"] for g in groups])
    bad = worst > thr["gauss_bonnet_atol"]
    flags["violations"]["gauss_bonnet_residual"] = {
        "value": worst,
        "max_allowed": thr["gauss_bonnet_atol"],
        "ok": not bad,
    }
    flags["ok"] = not bad

    logger.info("[summarize] V=%d E=%d F=%d chi=%d groups=%d",
                top["vertices"], top["edges"], top["faces"], top["characteristic"], len(groups))
    return {"mesh": top, "groups": groups, "thresholds": thr, "flags": flags}


def _format_block(inv: Dict[str, Any]) -> str:
    lines = [
        "Number of vertices............. V = {}".format(inv["vertices"]),
        "Number of edges................ E = {}".format(inv["edges"]),
        "Number of faces................ F = {}".format(inv["faces"]),
        "",
    ]
    if inv["closed"]:
        lines.append("Surface is closed. No boundaries!")
    else:
        lines += [
            "Surface is not closed and has boundaries.",
            "",
            "Number of boundaries........... b = {}".format(inv["boundaries"]),
            "- boundary vertices............ {}".format(inv["boundary_vertices"]),
            "- boundary edges............... {}".format(inv["boundary_edges"]),
        ]
    lines += [
        "",
        "Euler characteristic........... χ = {}".format(inv["characteristic"]),
        "Genus.......................... g = {}".format(inv["genus"]),
        "Curvature of surface........... κ = {:.12g}".format(inv["curvature"]),
        "Check Gauss-Bonnet..... |κ - 2πχ| = {:.3e}".format(inv["gauss_bonnet_residual"]),
    ]
    return "\n".join(lines)


def format_summary(summary: Dict[str, Any]) -> str:
    """
    Human-readable report: the whole surface when it is one group, otherwise each
    group separately.
    """
    groups = summary["groups"]
    out = []
    if len(groups) == 1:
        out.append("Here is some information about the surface:")
        out.append("")
        out.append(_format_block(summary["mesh"]))
    else:
        out.append("This mesh has {} disconnected mesh groups!".format(len(groups)))
        out.append("Here is the information for each mesh group separately.")
        for i, g in enumerate(groups):
            out += ["", "=" * 36, "========== Mesh Group {:2d} ===========".format(i + 1), "=" * 36, ""]
            out.append(_format_block(g))
    if not summary["mesh"].get("orientable", True):
        out += ["", "WARNING: surface is not orientable ({} conflicting edges).".format(
            summary["mesh"]["inconsistent_edges"])]
    return "\n".join(out)

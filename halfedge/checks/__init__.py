# -*- coding: utf-8 -*-
# Halftopo/halfedge/checks/__init__.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Public API for running topology checks on a half-edge mesh and returning normalized
findings suitable for CLI/CI consumption.

Main Tasks
----------
   - Provide defaults (`DEFAULTS`) for enable/disable policy and thresholds.
   - Orchestrate registry-defined rules over an oriented mesh and a shared cache.
   - Aggregate findings and compute a top-level `ok` status.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "n_vertices": int, "n_faces": int, "n_half_edges": int, "n_groups": int,
    "thresholds": dict, "enabled": dict
  }
}
"""

from typing import Dict, Any, Optional
import copy
import logging

from ..stats.report import prepare_mesh
from .helpers import precompute_cache
from .registry import REGISTRY, get_enabled_ids

logger = logging.getLogger(__name__)


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {
        # errors
        "nonmanifold_boundary": True,
        "orientation_consistency": True,
        # warnings
        "open_surface": True,
        "disconnected_groups": True,
        "gauss_bonnet": True,
    },
    "thresholds": {
        "gauss_bonnet_atol": 1e-6,
        "max_examples": 25,
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased) without mutating inputs.
    """
    out = copy.deepcopy(base)
    if not upd:
        return out
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _meta(mesh, cfg):
    return {
        "n_vertices": len(mesh.vertices),
        "n_faces": len(mesh.faces),
        "n_half_edges": len(mesh.half_edges),
        "n_groups": len(mesh.groups),
        "thresholds": copy.deepcopy(cfg.get("thresholds", {})),
        "enabled": copy.deepcopy(cfg.get("enabled", {})),
    }


def run_checks(source, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (registry order) and return findings.

    Parameters
    ----------
    source : str | MeshData | HalfEdgeMesh
        Mesh to check; built and oriented if needed.
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure ("enabled", "thresholds").

    Returns
    -------
    dict
        "ok" is False iff any ERROR-severity rule fails.

    Raises
    ------
    InvalidTopology, NonManifoldEdge
        The mesh cannot be built at all.
    """
    cfg = _deep_merge(DEFAULTS, config)
    mesh = prepare_mesh(source)
    cache = precompute_cache(mesh)
    th = cfg.get("thresholds", {})

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY.get(rid)
        if spec is None:
            continue
        f = spec.fn(mesh, th, cache)
        f["severity"] = spec.severity
        f["id"] = rid
        results[rid] = f

    ok = all(f["ok"] for rid, f in results.items() if REGISTRY[rid].severity == "error")
    failed = [rid for rid, f in results.items() if not f["ok"]]
    if failed:
        logger.info("[run_checks] rules not passing: %s", ", ".join(failed))

    return {"ok": ok, "rules": results, "meta": _meta(mesh, cfg)}

# -*- coding: utf-8 -*-
# Halftopo/halfedge/checks/registry.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Central registry of topology rules: id, function and severity defined once, with a
deterministic execution order.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import errors as _err
from . import warnings as _wrn


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # fn(mesh, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


_add(RuleSpec("nonmanifold_boundary",    _err.nonmanifold_boundary,    "error"))
_add(RuleSpec("orientation_consistency", _err.orientation_consistency, "error"))
_add(RuleSpec("open_surface",            _wrn.open_surface,            "warn"))
_add(RuleSpec("disconnected_groups",     _wrn.disconnected_groups,     "warn"))
_add(RuleSpec("gauss_bonnet",            _wrn.gauss_bonnet,            "warn"))


# Boundary validity first (invariants depend on it), then orientation, then advisories.
RULES_ORDER: List[str] = [
    "nonmanifold_boundary",
    "orientation_consistency",
    "open_surface",
    "disconnected_groups",
    "gauss_bonnet",
]


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER by an enable/disable map; absent ids default to enabled.
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]

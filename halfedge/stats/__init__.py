# -*- coding: utf-8 -*-
# Halftopo/halfedge/stats/__init__.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Modules:
--------
- data:       MeshData container and meshio reader.
- invariants: V/E/F, Euler characteristic, genus, curvature, Gauss-Bonnet residual,
              boundary validation.
- report:     Whole-mesh + per-group summary dict and its text rendering.
- export:     CSV / JSON writers for the summary.
"""

__all__ = ["data", "invariants", "report", "export"]

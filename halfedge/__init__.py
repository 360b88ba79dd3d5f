# -*- coding: utf-8 -*-
# Halftopo/halfedge/__init__.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Modules:
--------
- core:   half-edge records, builder, orientation/connectivity pass, boundary loops, errors.
- stats:  mesh reader, invariants (chi, genus, curvature, Gauss-Bonnet), report and export.
- checks: registry-driven topology findings for CLI/CI.
- api:    high-level load / build / analyze pipeline.
"""

__all__ = ["core", "stats", "checks", "api"]

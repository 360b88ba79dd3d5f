# -*- coding: utf-8 -*-
# Halftopo/halfedge/stats/data/__init__.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Modules:
--------
- reader: MeshData container and meshio-based surface mesh loader.
"""

from .reader import MeshData, read

__all__ = ["MeshData", "read"]

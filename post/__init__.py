# -*- coding: utf-8 -*-
# Halftopo/post/__init__.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Modules:
--------
- plot_mesh: 3D wireframe of an oriented half-edge mesh, coloured by disconnected
             group, boundary loops highlighted. matplotlib with a headless-safe backend.
"""

__all__ = ["plot_mesh"]

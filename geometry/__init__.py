# -*- coding: utf-8 -*-
# Halftopo/geometry/__init__.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Modules:
--------
- angles: Corner angles of polygon faces in 3D, per-vertex angle sums and
          angle deficits (discrete curvature).

Exports:
--------
- face_normal
- corner_angles
- angle_sums
- angle_deficit
"""

from .angles import face_normal, corner_angles, angle_sums, angle_deficit

__all__ = ["face_normal", "corner_angles", "angle_sums", "angle_deficit"]

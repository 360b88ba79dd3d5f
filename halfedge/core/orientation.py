# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/orientation.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Make face windings consistent across every edge-connected patch and partition faces
into disconnected groups, in one depth-first sweep.

Main Tasks:
-----------
    1) `orient_and_find_groups`: seed each group with the first unoriented face, then
       pop/push faces on a LIFO stack, flipping neighbours that run a shared edge in
       the same direction as the current face.
    2) `reverse_face`: flip a face's half-edge cycle in place (ends and `next` links).
    3) `all_faces_oriented`, `inconsistent_edges`: post-pass predicates.

Notes:
------
- Adjacent faces are consistent iff they traverse the shared edge in opposite
  directions, i.e. `end(opposite(h)) != end(h)`.
- Visit order is an implementation detail; group membership is fixed by the
  `opposite` adjacency.
- On a non-orientable surface (Moebius strip) the sweep still terminates; the leftover
  conflicts are counted by `inconsistent_edges`.
"""

import logging
from typing import List

from .mesh import HalfEdgeMesh

logger = logging.getLogger(__name__)


def reverse_face(mesh: HalfEdgeMesh, f: int) -> None:
    """
    Reverse the traversal direction of face `f`.

    Half-edge objects and their opposite links are kept; each half-edge now ends at
    its former origin and `next` points to its former predecessor. Vertex `out`
    seeds of the face's vertices are refreshed so they start at their vertex.
    """
    he = mesh.half_edges
    cycle = mesh.face_half_edges(f)
    ends = [he[h].end for h in cycle]
    for i, h in enumerate(cycle):
        he[h].end = ends[i - 1]
        he[h].next = cycle[i - 1]
    for i, h in enumerate(cycle):
        mesh.vertices[ends[i]].out = h


def orient_and_find_groups(mesh: HalfEdgeMesh) -> List[List[int]]:
    """
    Orient all faces consistently and return the disconnected groups.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Freshly built (unoriented) graph; mutated in place.

    Returns
    -------
    list of list of int
        Face ids per group. Also stored on `mesh.groups`. A mesh that already
        went through this pass keeps and returns its existing groups.
    """
    if mesh.groups is not None:
        return mesh.groups

    he = mesh.half_edges
    faces = mesh.faces
    groups: List[List[int]] = []
    flipped = 0

    cursor = 0
    while True:
        while cursor < len(faces) and faces[cursor].oriented:
            cursor += 1
        if cursor == len(faces):
            break

        faces[cursor].oriented = True
        stack = [cursor]
        group = []

        while stack:
            f = stack.pop()
            group.append(f)
            for h in mesh.face_half_edges(f):
                opp = he[h].opposite
                if opp is None:
                    continue
                g = he[opp].face
                if faces[g].oriented:
                    continue
                if he[opp].end == he[h].end:
                    reverse_face(mesh, g)
                    flipped += 1
                faces[g].oriented = True
                stack.append(g)

        groups.append(group)

    mesh.groups = groups
    logger.debug("[orient] %d group(s), %d face(s) flipped", len(groups), flipped)
    return groups


def all_faces_oriented(mesh: HalfEdgeMesh) -> bool:
    return all(f.oriented for f in mesh.faces)


def inconsistent_edges(mesh: HalfEdgeMesh) -> List[int]:
    """
    Half-edges whose opposite runs the same direction (one id per conflicting pair).
    Non-empty after orientation only for non-orientable surfaces.
    """
    he = mesh.half_edges
    return [
        h for h, e in enumerate(he)
        if e.opposite is not None and h < e.opposite and he[e.opposite].end == e.end
    ]

# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/edge_index.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose:
--------
Build-time lookup from an undirected vertex pair to the half-edge(s) traversing it.
Used once by the builder to pair opposite half-edges, then dropped.

Main Tasks:
-----------
   - `form_key`: canonical (sorted) key for an undirected edge.
   - `EdgeKeyIndex.record`: remember a pending half-edge or link it with its partner.

Notes:
------
   - Partners are linked whatever their current direction; face winding is arbitrary
     at build time and is fixed later by the orientation pass.
   - A third half-edge on the same key raises `NonManifoldEdge`.
"""

from typing import Dict, List, Tuple
from .errors import InvalidTopology, NonManifoldEdge
from .primitives import HalfEdge


def form_key(a: int, b: int) -> Tuple[int, int]:
    """Undirected edge key with sorted endpoints."""
    return (a, b) if a < b else (b, a)


class EdgeKeyIndex:
    """
    Mapping {edge_key: [half_edge_ids]} holding at most two entries per key.
    """

    def __init__(self, half_edges: List[HalfEdge]):
        self._half_edges = half_edges
        self._slots: Dict[Tuple[int, int], List[int]] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def record(self, key: Tuple[int, int], h: int) -> None:
        """
        Register half-edge `h` under `key`; link it to the pending partner if any.
        """
        if key[0] == key[1]:
            raise InvalidTopology("Edge joins a vertex to itself.", {"edge": key, "half_edge": h})

        slot = self._slots.setdefault(key, [])
        if len(slot) >= 2:
            raise NonManifoldEdge(
                "Edge is shared by more than two faces.",
                {"edge": key, "faces": [self._half_edges[i].face for i in slot + [h]]},
            )
        if slot:
            partner = slot[0]
            self._half_edges[partner].opposite = h
            self._half_edges[h].opposite = partner
        slot.append(h)

# -*- coding: utf-8 -*-
# Halftopo/halfedge/core/errors.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose
-------
Typed exceptions for the half-edge core with compact, context-aware messages so that
build, orientation and invariant failures are reported the same way everywhere.

Main Tasks
----------
    1. Define TopologyError(message, context) with a compact context suffix in __str__.
    2. Provide the failure kinds: InvalidTopology, NonManifoldEdge, NonManifoldBoundaryVertex.
    3. Expose public names via __all__.

Notes
-----
- All kinds are fatal for the mesh (or group) they were raised on; nothing here retries.
- Context is optional; long values are truncated for readability.
"""

__all__ = [
    "TopologyError",
    "InvalidTopology",
    "NonManifoldEdge",
    "NonManifoldBoundaryVertex",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class TopologyError(Exception):
    """
    Base class for all half-edge topology errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"face": 12, "index": 40}).
    """
    kind = "TopologyError"

    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class InvalidTopology(TopologyError):
    """
    Malformed input detected while building:
      - vertex index out of range
      - face with fewer than 3 vertices, or a vertex repeated inside one face
      - vertex that no face references
      - positions that are not an (N,3) finite array
    """
    kind = "InvalidTopology"


class NonManifoldEdge(TopologyError):
    """
    An undirected edge claimed by more than two half-edges.
    """
    kind = "NonManifoldEdge"


class NonManifoldBoundaryVertex(TopologyError):
    """
    Boundary-vertex count and boundary-edge count disagree (picture a bow-tie).
    Genus and characteristic are undefined for such a boundary.
    """
    kind = "NonManifoldBoundaryVertex"

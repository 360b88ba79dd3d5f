# -*- coding: utf-8 -*-
# Halftopo/post/plot_mesh.py

"""
Project: Halftopo
Author: Erfan Vaezi
Date: 10/18/2026

Purpose
-------
Quick 3D visualization of an oriented half-edge mesh using matplotlib: wireframe
coloured by disconnected group, with boundary edges drawn on top.

Main Tasks
----------
    1) Import pyplot with a headless-safe backend.
    2) Collect edge segments per group (each undirected edge once).
    3) Overlay boundary half-edges in a heavier line.
"""

import os
import numpy as np


def _get_pyplot():
    """
    Import matplotlib.pyplot, choosing Agg when no DISPLAY is available.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def _segments(mesh, half_edge_ids, boundary_only=False):
    """(K,2,3) segments; interior edges emitted once (lower id of the opposite pair)."""
    pts = mesh.points
    he = mesh.half_edges
    segs = []
    for h in half_edge_ids:
        opp = he[h].opposite
        if boundary_only and opp is not None:
            continue
        if opp is not None and opp < h:
            continue
        segs.append((pts[mesh.origin(h)], pts[he[h].end]))
    return np.asarray(segs, dtype=float).reshape(-1, 2, 3)


def plot_halfedge_mesh(mesh, show=True, save_path=None, *, linewidth=0.5, boundary_linewidth=2.0):
    """
    Wireframe of an oriented HalfEdgeMesh, one colour per group, boundaries in black.

    Parameters
    ----------
    mesh : HalfEdgeMesh
        Mesh with `groups` set (run the orientation pass first).
    show : bool, optional
        Display the figure (ignored on non-GUI backends). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.

    Returns
    -------
    matplotlib.figure.Figure
    """
    from mpl_toolkits.mplot3d.art3d import Line3DCollection

    plt = _get_pyplot()
    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection="3d")
    cmap = plt.get_cmap("tab10")

    for i, part in enumerate(mesh.group_parts()):
        segs = _segments(mesh, part.half_edge_ids)
        if len(segs):
            ax.add_collection3d(Line3DCollection(segs, colors=[cmap(i % 10)], linewidths=linewidth))
        bsegs = _segments(mesh, part.half_edge_ids, boundary_only=True)
        if len(bsegs):
            ax.add_collection3d(Line3DCollection(bsegs, colors="k", linewidths=boundary_linewidth))

    pts = mesh.points
    if len(pts):
        lo, hi = pts.min(axis=0), pts.max(axis=0)
        pad = 0.05 * float(np.max(hi - lo) or 1.0)
        ax.set_xlim(lo[0] - pad, hi[0] + pad)
        ax.set_ylim(lo[1] - pad, hi[1] + pad)
        ax.set_zlim(lo[2] - pad, hi[2] + pad)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title("Half-edge mesh ({} group(s))".format(len(mesh.groups)))

    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches="tight")

    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    else:
        plt.close(fig)
    return fig

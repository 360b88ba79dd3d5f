# tests/test_invariants.py

import math
import unittest

import numpy as np

from halfedge.api import build_oriented, split_groups
from halfedge.core.boundary import (
    boundary_half_edges,
    boundary_loops,
    boundary_vertex_count,
    boundary_vertices,
)
from halfedge.core.errors import NonManifoldBoundaryVertex
from halfedge.stats.invariants import (
    characteristic,
    compute_invariants,
    curvature,
    edge_count,
    gauss_bonnet_residual,
    genus,
    is_closed,
    validate_boundary,
    vertex_curvature,
)

import _meshes


def _whole(pair):
    return build_oriented(*pair).whole()


class TestBoundary(unittest.TestCase):

    def test_closed_surface_has_no_boundary(self):
        part = _whole(_meshes.cube())
        self.assertEqual(boundary_half_edges(part), [])
        self.assertEqual(boundary_loops(part), [])
        self.assertTrue(is_closed(part))

    def test_single_triangle_is_one_loop(self):
        part = _whole(_meshes.triangle())
        self.assertEqual(len(boundary_half_edges(part)), 3)
        self.assertEqual(boundary_vertices(part), [0, 1, 2])
        loops = boundary_loops(part)
        self.assertEqual(len(loops), 1)
        self.assertEqual(sorted(loops[0]), [0, 1, 2])

    def test_tube_has_two_loops(self):
        part = _whole(_meshes.open_tube(8))
        loops = sorted(sorted(l) for l in boundary_loops(part))
        self.assertEqual(loops, [list(range(8)), list(range(8, 16))])

    def test_boundary_edges_stay_inside_one_loop(self):
        part = _whole(_meshes.square_grid(3))
        loops = boundary_loops(part)
        self.assertEqual(len(loops), 1)
        self.assertEqual(len(loops[0]), 12)
        member = {v: i for i, loop in enumerate(loops) for v in loop}
        mesh = part.mesh
        for h in boundary_half_edges(part):
            self.assertEqual(member[mesh.origin(h)], member[mesh.half_edges[h].end])

    def test_loops_cover_boundary_vertices_once(self):
        pts, faces = _meshes.combine(_meshes.open_tube(6), _meshes.triangle())
        part = _whole((pts, faces))
        loops = boundary_loops(part)
        self.assertEqual(len(loops), 3)
        flat = [v for loop in loops for v in loop]
        self.assertEqual(sorted(flat), boundary_vertices(part))


class TestInvariants(unittest.TestCase):

    def test_tetrahedron(self):
        inv = compute_invariants(_whole(_meshes.tetrahedron()))
        self.assertEqual((inv["vertices"], inv["edges"], inv["faces"]), (4, 6, 4))
        self.assertEqual(inv["characteristic"], 2)
        self.assertEqual(inv["genus"], 0)
        self.assertTrue(inv["closed"])
        self.assertEqual(inv["boundaries"], 0)
        self.assertAlmostEqual(inv["curvature"], 4.0 * math.pi, places=9)
        self.assertLess(inv["gauss_bonnet_residual"], 1e-9)

    def test_scrambled_input_gives_same_invariants(self):
        a = compute_invariants(_whole(_meshes.tetrahedron()))
        b = compute_invariants(_whole(_meshes.tetrahedron_scrambled()))
        for key in ("vertices", "edges", "faces", "characteristic", "genus", "boundaries"):
            self.assertEqual(a[key], b[key])
        self.assertAlmostEqual(a["curvature"], b["curvature"], places=9)

    def test_single_triangle(self):
        inv = compute_invariants(_whole(_meshes.triangle()))
        self.assertEqual((inv["vertices"], inv["edges"], inv["faces"]), (3, 3, 1))
        self.assertEqual(inv["characteristic"], 1)
        self.assertEqual(inv["genus"], 0)
        self.assertFalse(inv["closed"])
        self.assertEqual(inv["boundaries"], 1)
        self.assertEqual(inv["boundary_vertices"], 3)
        self.assertEqual(inv["boundary_edges"], 3)
        self.assertAlmostEqual(inv["curvature"], 2.0 * math.pi, places=9)

    def test_cube_of_quads(self):
        part = _whole(_meshes.cube())
        self.assertEqual(edge_count(part), 12)
        self.assertEqual(characteristic(part), 2)
        self.assertEqual(genus(part), 0)
        self.assertAlmostEqual(curvature(part), 4.0 * math.pi, places=9)
        for k in vertex_curvature(part).values():
            self.assertAlmostEqual(k, math.pi / 2.0, places=9)

    def test_torus(self):
        inv = compute_invariants(_whole(_meshes.torus()))
        self.assertEqual((inv["vertices"], inv["edges"], inv["faces"]), (24, 48, 24))
        self.assertEqual(inv["characteristic"], 0)
        self.assertEqual(inv["genus"], 1)
        self.assertTrue(inv["closed"])
        self.assertLess(inv["gauss_bonnet_residual"], 1e-9)

    def test_open_tube(self):
        inv = compute_invariants(_whole(_meshes.open_tube(8)))
        self.assertEqual(inv["characteristic"], 0)
        self.assertEqual(inv["boundaries"], 2)
        self.assertEqual(inv["genus"], 0)
        self.assertLess(inv["gauss_bonnet_residual"], 1e-9)

    def test_flat_disc_has_flat_interior(self):
        part = _whole(_meshes.square_grid(3))
        inv = compute_invariants(part)
        self.assertEqual(inv["characteristic"], 1)
        self.assertEqual(inv["genus"], 0)
        kv = vertex_curvature(part)
        on_b = set(boundary_vertices(part))
        for v, k in kv.items():
            if v not in on_b:
                self.assertAlmostEqual(k, 0.0, places=12)
        self.assertLess(gauss_bonnet_residual(part), 1e-9)

    def test_gauss_bonnet_on_curved_mesh(self):
        rng = np.random.default_rng(7)
        pts, faces = _meshes.square_grid(4)
        pts = pts.copy()
        pts[:, 2] = rng.uniform(-0.3, 0.3, size=len(pts))
        tris = []
        for a, b, c, d in faces:
            tris += [[a, b, c], [a, c, d]]
        part = _whole((pts, tris))
        self.assertLess(gauss_bonnet_residual(part), 1e-9)

    def test_non_convex_face(self):
        part = _whole(_meshes.l_shape())
        inv = compute_invariants(part)
        self.assertEqual(inv["characteristic"], 1)
        self.assertAlmostEqual(inv["curvature"], 2.0 * math.pi, places=9)
        self.assertLess(inv["gauss_bonnet_residual"], 1e-9)
        self.assertAlmostEqual(vertex_curvature(part)[3], -math.pi / 2.0, places=9)

    def test_closed_prism_with_non_convex_caps(self):
        part = _whole(_meshes.l_prism())
        inv = compute_invariants(part)
        self.assertEqual((inv["vertices"], inv["edges"], inv["faces"]), (12, 18, 8))
        self.assertEqual(inv["characteristic"], 2)
        self.assertAlmostEqual(inv["curvature"], 4.0 * math.pi, places=9)
        kv = vertex_curvature(part)
        self.assertAlmostEqual(kv[3], -math.pi / 2.0, places=9)
        self.assertAlmostEqual(kv[9], -math.pi / 2.0, places=9)
        self.assertAlmostEqual(kv[0], math.pi / 2.0, places=9)

    def test_genus_uses_loop_override(self):
        part = _whole(_meshes.triangle())
        self.assertEqual(genus(part, n_loops=1), 0)
        self.assertEqual(genus(part, n_loops=0), 0.5)

    def test_bowtie_is_rejected_on_whole_mesh(self):
        mesh = build_oriented(*_meshes.bowtie())
        self.assertEqual(len(mesh.groups), 2)
        whole = mesh.whole()
        self.assertEqual(boundary_vertex_count(whole), 5)
        self.assertEqual(len(boundary_half_edges(whole)), 6)
        with self.assertRaises(NonManifoldBoundaryVertex) as ctx:
            validate_boundary(whole)
        self.assertEqual(ctx.exception.context, {"boundary_vertices": 5, "boundary_edges": 6})
        with self.assertRaises(NonManifoldBoundaryVertex):
            compute_invariants(whole)
        for part in mesh.group_parts():
            validate_boundary(part)


class TestSplitGroups(unittest.TestCase):

    def test_groups_match_standalone_triangles(self):
        mesh = build_oriented(*_meshes.two_triangles())
        single = compute_invariants(_whole(_meshes.triangle()))
        datas = split_groups(mesh)
        self.assertEqual(len(datas), 2)
        for data in datas:
            self.assertEqual(data.points.shape, (3, 3))
            self.assertEqual(sorted(data.faces[0]), [0, 1, 2])
            inv = compute_invariants(_whole((data.points, data.faces)))
            for key in ("vertices", "edges", "faces", "characteristic", "genus", "boundaries"):
                self.assertEqual(inv[key], single[key])

    def test_group_parts_equal_whole_for_connected_mesh(self):
        mesh = build_oriented(*_meshes.cube())
        (part,) = mesh.group_parts()
        self.assertEqual(compute_invariants(part)["characteristic"],
                         compute_invariants(mesh.whole())["characteristic"])


if __name__ == "__main__":
    unittest.main()

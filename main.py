# -*- coding: utf-8 -*-
# Halftopo/main.py

"""
End-to-end driver:
  1) Load a surface mesh (OBJ/OFF/PLY/STL/... via meshio)
  2) Build the half-edge graph, orient it, find disconnected groups
  3) Topology checks (hard stop on errors)
  4) Topology summary per surface / group (+ optional CSV/JSON export)
  5) Optional wireframe plot
"""

import argparse
import logging
import sys

from halfedge.api import load_mesh
from halfedge.checks import run_checks
from halfedge.core.errors import TopologyError
from halfedge.stats.export import write_findings_json, write_summary_csv, write_summary_json
from halfedge.stats.report import format_summary, summarize


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Half-edge topology report for a polygon surface mesh")
    parser.add_argument("mesh_file", help="Path to a surface mesh (.obj, .off, .ply, .stl, ...)")
    parser.add_argument("--json", dest="json_path", help="Write the summary as JSON")
    parser.add_argument("--csv", dest="csv_path", help="Write the summary as key,value CSV")
    parser.add_argument("--checks", dest="checks_path", help="Write the check findings as JSON")
    parser.add_argument("--plot", dest="plot_path", help="Save a wireframe PNG")
    parser.add_argument("--gb-atol", type=float, default=1e-6, help="Gauss-Bonnet residual tolerance")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)

    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Halftopo")

    # ------------------------------------------------------------------
    # 1-2) Load, build, orient
    # ------------------------------------------------------------------
    try:
        mesh = load_mesh(args.mesh_file)
    except TopologyError as e:
        print("{}: {}".format(e.kind, e), file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print("Cannot read mesh '{}': {}".format(args.mesh_file, e), file=sys.stderr)
        return 1

    # ------------------------------------------------------------------
    # 3) Checks (hard stop on errors)
    # ------------------------------------------------------------------
    findings = run_checks(mesh, {"thresholds": {"gauss_bonnet_atol": args.gb_atol}})
    if args.checks_path:
        log.info("Findings JSON: %s", write_findings_json(findings, args.checks_path))

    # ------------------------------------------------------------------
    # 4) Summary
    # ------------------------------------------------------------------
    try:
        summary = summarize(mesh, thresholds={"gauss_bonnet_atol": args.gb_atol})
    except TopologyError as e:
        print("{}: {}".format(e.kind, e), file=sys.stderr)
        return 1

    print(format_summary(summary))

    if args.json_path:
        log.info("Summary JSON: %s", write_summary_json(summary, args.json_path))
    if args.csv_path:
        log.info("Summary CSV: %s", write_summary_csv(summary, args.csv_path))

    # ------------------------------------------------------------------
    # 5) Plot (optional)
    # ------------------------------------------------------------------
    if args.plot_path:
        from post.plot_mesh import plot_halfedge_mesh
        plot_halfedge_mesh(mesh, show=False, save_path=args.plot_path)
        log.info("Plot saved to: %s", args.plot_path)

    if not findings["ok"]:
        failures = [rid for rid, f in findings["rules"].items()
                    if f["severity"] == "error" and not f["ok"]]
        print("Topology checks failed: {}".format(", ".join(failures)), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

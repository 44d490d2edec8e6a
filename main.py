#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Landau Phase Diagram - Command Line Interface
================================================================================

Project:        Landau Phase Diagram
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Command line interface for computing, saving and inspecting phase diagrams
of the 3m Landau potential.
"""

import argparse
import logging
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from phasediagram.diagram import DiagramConfig, DiagramGrid, compute_diagram
from phasediagram.logging_config import setup_logging
from phasediagram.thermodynamics import COEFFICIENT_SYMBOLS, POTENTIAL_EXPRESSION
from phasediagram.visualization import (
    DiagramViewConfig, SURFACE_QUANTITIES, phase_table,
    render_diagram_matplotlib, render_legend, render_surface
)


def build_config(args: argparse.Namespace) -> DiagramConfig:
    """Diagram configuration from parsed command line arguments."""
    return DiagramConfig(
        width=args.width,
        height=args.height,
        alpha1_range=(args.alpha1_min, args.alpha1_max),
        beta1_range=(args.beta1_min, args.beta1_max),
        alpha2=args.alpha2,
        alpha3=args.alpha3,
        alpha4=args.alpha4,
        beta2=args.beta2,
        delta1=args.delta1,
        delta2=args.delta2,
        delta3=args.delta3,
    )


def print_point(grid: DiagramGrid, point: Tuple[int, int]):
    """Print the coefficients and stable phases at one grid point."""
    coefficients = grid.coefficients_at(point)
    print(f"\nPoint {point}:")
    for symbol, value in zip(COEFFICIENT_SYMBOLS, coefficients.as_tuple()):
        print(f"  {symbol:3s} = {value:.6g}")

    rows = phase_table(grid.cell(point))
    if not rows:
        print("  No stable phases")
        return

    print(f"\n  {'Phase':>5s} {'η1':>12s} {'η2':>12s} {'Φ':>14s}")
    for row in rows:
        phi = f"{row['Φ']:.6g}" if row['Φ'] != "" else ""
        print(f"  {str(row['Phase']):>5s} {row['η1']:12.6g} {row['η2']:12.6g} {phi:>14s}")

    if grid.is_transition(point):
        print("  Point lies on a first-order transition line")


def run_diagram(
    config: DiagramConfig,
    view: DiagramViewConfig,
    save: Optional[str] = None,
    surfaces: Optional[List[str]] = None,
    points: Optional[List[Tuple[int, int]]] = None,
    show: bool = True
) -> DiagramGrid:
    """
    Compute a phase diagram and report the results.

    Args:
        config: Diagram configuration
        view: Display options
        save: Optional image path for the diagram
        surfaces: Surface quantities to plot
        points: Grid points to describe
        show: Open the Matplotlib windows

    Returns:
        Computed DiagramGrid
    """
    print("=" * 60)
    print("Landau Phase Diagram - Computation")
    print("=" * 60)
    print(f"\n{POTENTIAL_EXPRESSION}")
    print(f"\nGrid: {config.width} x {config.height}")
    print(f"β1 range: {config.beta1_range}")
    print(f"α1 range: {config.alpha1_range}")

    last_decade = [-1]

    def report(percent: int):
        # Print once per 10%
        if percent // 10 > last_decade[0]:
            last_decade[0] = percent // 10
            print(f"  {percent:3d}% done")

    grid = compute_diagram(config, progress=report)
    n_cells = config.width * config.height
    print(f"\nDiagram completed in {grid.elapsed:.2f} seconds")
    if grid.elapsed > 0:
        print(f"Cells per second: {n_cells / grid.elapsed:.1f}")

    for point in points or []:
        print_point(grid, point)

    fig, (ax_diagram, ax_legend) = plt.subplots(
        1, 2, figsize=(view.figsize[0] + 4, view.figsize[1]),
        gridspec_kw={"width_ratios": [3, 1]}
    )
    render_diagram_matplotlib(grid, view, ax=ax_diagram, show_legend=False)
    render_legend(ax=ax_legend)
    fig.tight_layout()
    if save:
        fig.savefig(save, dpi=150, bbox_inches='tight')
        print(f"\nDiagram saved to {save}")

    for quantity in surfaces or []:
        render_surface(grid, quantity)

    if show:
        plt.show()
    else:
        plt.close('all')

    return grid


def parse_point(text: str) -> Tuple[int, int]:
    """Parse a 'col,row' grid point."""
    try:
        col, row = (int(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Point must be 'col,row', got '{text}'")
    return col, row


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Landau Phase Diagram - stable phases of the 3m potential",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --compute                         Default 500x500 diagram
  python main.py --compute --width 200 --height 200 --save diagram.png
  python main.py --compute --surface potential --point 100,100
  python main.py --app                             Launch Streamlit app
        """
    )

    parser.add_argument('--compute', action='store_true',
                       help='Compute and show a phase diagram')
    parser.add_argument('--app', action='store_true',
                       help='Launch Streamlit web app')

    grid_group = parser.add_argument_group('grid')
    grid_group.add_argument('--width', type=int, default=500,
                           help='Number of β1 columns (default: 500)')
    grid_group.add_argument('--height', type=int, default=500,
                           help='Number of α1 rows (default: 500)')
    grid_group.add_argument('--alpha1-min', type=float, default=-10.0)
    grid_group.add_argument('--alpha1-max', type=float, default=10.0)
    grid_group.add_argument('--beta1-min', type=float, default=-10.0)
    grid_group.add_argument('--beta1-max', type=float, default=10.0)

    model_group = parser.add_argument_group('model constants')
    model_group.add_argument('--alpha2', type=float, default=1.0)
    model_group.add_argument('--alpha3', type=float, default=1.0)
    model_group.add_argument('--alpha4', type=float, default=0.0)
    model_group.add_argument('--beta2', type=float, default=1.0)
    model_group.add_argument('--delta1', type=float, default=1.0)
    model_group.add_argument('--delta2', type=float, default=0.0)
    model_group.add_argument('--delta3', type=float, default=0.0)

    view_group = parser.add_argument_group('display')
    view_group.add_argument('--all-stable', action='store_true',
                           help='Colour by the set of all stable phases')
    view_group.add_argument('--no-transitions', action='store_true',
                           help='Hide first-order transition lines')
    view_group.add_argument('--isosymmetric', action='store_true',
                           help='Mark coexisting isosymmetric phases')
    view_group.add_argument('--save', type=str, default=None,
                           help='Save the diagram image to this path')
    view_group.add_argument('--surface', action='append', default=[],
                           choices=list(SURFACE_QUANTITIES),
                           help='Plot a surface of the most stable phase (repeatable)')
    view_group.add_argument('--point', action='append', default=[], type=parse_point,
                           help="Describe the phases at grid point 'col,row' (repeatable)")
    view_group.add_argument('--no-show', action='store_true',
                           help='Do not open plot windows')

    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Debug logging')
    parser.add_argument('--log-file', type=str, default=None,
                       help='Also write the log to this file')

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    if args.compute:
        config = build_config(args)
        try:
            config.validate()
        except ValueError as e:
            parser.error(str(e))
        view = DiagramViewConfig(
            most_stable_only=not args.all_stable,
            show_transitions=not args.no_transitions,
            show_isosymmetric=args.isosymmetric,
        )
        run_diagram(config, view, save=args.save, surfaces=args.surface,
                    points=args.point, show=not args.no_show)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --compute or --app")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Phase Diagram Visualization Module
================================================================================

Project:        Landau Phase Diagram
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module provides visualization tools for computed phase diagrams:
- Raster image of the diagram, one pixel per grid cell
- Legend of the phase colour table
- 3D surfaces of the potential and order parameter of the most stable phase
- Table of the stable phases and their domains at one point
"""

import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from typing import Tuple, Optional, List, Dict
from dataclasses import dataclass
import io

from .diagram import DiagramGrid, GridCellResult
from .thermodynamics import PhaseFamily


# Colour table: entries 0..15 are indexed by the bitmask of stable phase
# families (bit k-1 set for phase k), 16..18 mark coexisting isosymmetric
# phases of families 2..4, 19 marks first-order transition lines.
PHASE_COLORS = (
    0xffffff, 0x008000, 0x000080, 0xff7f00,
    0x800080, 0xffff00, 0x5959ab, 0x5c3317,
    0x800000, 0x70db93, 0x4d4dff, 0x97694f,
    0xff1cae, 0x99cc32, 0x80aead, 0xff0000,
    0xc0d9d9, 0x38b0de, 0xd8bfd8,
    0x00ffff,
)

ISOSYMMETRIC_COLOR_OFFSET = 14
TRANSITION_COLOR_INDEX = 19
AXIS_COLOR = 0x000000

# Order of the phase sets in the legend
LEGEND_ORDER = (
    0b0001, 0b0010, 0b0100, 0b1000,
    0b0011, 0b0101, 0b1001, 0b0110, 0b1010, 0b1100,
    0b0111, 0b1011, 0b1101, 0b1110, 0b1111,
    0b0000,
)

SURFACE_QUANTITIES = {
    "potential": "Thermodynamic potential",
    "eta1": "First order parameter component",
    "eta2": "Second order parameter component",
}


@dataclass
class DiagramViewConfig:
    """Display options for a phase diagram."""
    most_stable_only: bool = True       # Colour by the most stable phase only
    show_transitions: bool = True       # Draw first-order transition lines
    show_isosymmetric: bool = False     # Mark coexisting isosymmetric phases
    figsize: Tuple[int, int] = (8, 8)


def hex_to_rgb(color: int) -> Tuple[int, int, int]:
    """Split a 0xRRGGBB colour into its byte components."""
    return (color >> 16) & 0xff, (color >> 8) & 0xff, color & 0xff


def phase_set_mask(families) -> int:
    """Bitmask of a collection of phase families (bit k-1 for phase k)."""
    mask = 0
    for family in families:
        mask |= 1 << (int(family) - 1)
    return mask


def cell_color_index(cell: GridCellResult, view: DiagramViewConfig) -> int:
    """
    Colour table index of a non-axis cell.

    Coexisting isosymmetric phases take precedence over transition lines,
    which take precedence over the phase colours.
    """
    if view.show_isosymmetric:
        detected = None
        for family in (PhaseFamily.NEGATIVE, PhaseFamily.POSITIVE, PhaseFamily.TWO_COMPONENT):
            count = sum(1 for phase in cell.phases if phase.family == family)
            if count > 1:
                detected = int(family) + ISOSYMMETRIC_COLOR_OFFSET
        if detected is not None:
            return detected

    if view.show_transitions and cell.transition:
        return TRANSITION_COLOR_INDEX

    if view.most_stable_only:
        phase = cell.stablest_phase
        return 0 if phase is None else phase_set_mask([phase.family])
    return phase_set_mask(cell.families)


def render_diagram_image(
    grid: DiagramGrid,
    view: Optional[DiagramViewConfig] = None
) -> np.ndarray:
    """
    Render the diagram as an RGB raster, one pixel per grid cell.

    Args:
        grid: Computed diagram
        view: Display options

    Returns:
        (height, width, 3) uint8 array, row 0 at the top (largest α1)
    """
    if view is None:
        view = DiagramViewConfig()

    palette = np.array([hex_to_rgb(c) for c in PHASE_COLORS], dtype=np.uint8)
    indices = np.zeros((grid.height, grid.width), dtype=np.intp)

    for i in range(grid.width):
        for j in range(grid.height):
            indices[j, i] = cell_color_index(grid.cell((i, j)), view)

    image = palette[indices]

    # Coordinate axes where β1 = 0 and α1 = 0
    zero_col, zero_row = grid.zero_indexes()
    if 0 <= zero_col < grid.width:
        image[:, zero_col] = hex_to_rgb(AXIS_COLOR)
    if 0 <= zero_row < grid.height:
        image[zero_row, :] = hex_to_rgb(AXIS_COLOR)

    return image


def legend_entries() -> List[Tuple[str, str]]:
    """
    Labels and colours of the diagram legend.

    Returns:
        List of (label, '#rrggbb') pairs
    """
    entries = []
    for mask in LEGEND_ORDER:
        families = [k + 1 for k in range(4) if mask & (1 << k)]
        if not families:
            label = "No stable phases"
        elif len(families) == 1:
            label = f"Phase {families[0]}"
        else:
            label = "Phases " + " ".join(str(k) for k in families)
        entries.append((label, f"#{PHASE_COLORS[mask]:06x}"))

    for family in (2, 3, 4):
        color = PHASE_COLORS[family + ISOSYMMETRIC_COLOR_OFFSET]
        entries.append((f"Several phases {family}", f"#{color:06x}"))

    entries.append(("First-order transition", f"#{PHASE_COLORS[TRANSITION_COLOR_INDEX]:06x}"))
    return entries


def legend_handles() -> List[Patch]:
    return [
        Patch(facecolor=color, edgecolor='black', linewidth=0.5, label=label)
        for label, color in legend_entries()
    ]


def render_legend(ax: Optional[plt.Axes] = None) -> plt.Figure:
    """Draw the legend of the colour table on its own axes."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(4, 6))
    else:
        fig = ax.figure

    ax.clear()
    ax.legend(handles=legend_handles(), loc='center', ncol=2, fontsize=8, frameon=False)
    ax.axis('off')
    return fig


def render_diagram_matplotlib(
    grid: DiagramGrid,
    view: Optional[DiagramViewConfig] = None,
    ax: Optional[plt.Axes] = None,
    show_legend: bool = True
) -> plt.Figure:
    """
    Render the diagram with labelled β1 and α1 axes.

    Args:
        grid: Computed diagram
        view: Display options
        ax: Optional existing axes to draw on
        show_legend: Attach the colour legend beside the diagram

    Returns:
        Matplotlib figure
    """
    if view is None:
        view = DiagramViewConfig()

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=view.figsize)
    else:
        fig = ax.figure

    ax.clear()
    image = render_diagram_image(grid, view)

    x_left, y_top = grid.coordinates((0, 0))
    x_right, y_bottom = grid.coordinates((grid.width - 1, grid.height - 1))
    ax.imshow(
        image,
        extent=[x_left, x_right + grid.step_x, y_bottom, y_top + grid.step_y],
        aspect='auto',
        interpolation='nearest'
    )
    ax.set_xlabel('β1')
    ax.set_ylabel('α1')
    ax.set_title('Phase Diagram')

    if show_legend:
        ax.legend(handles=legend_handles(), loc='upper left', bbox_to_anchor=(1.02, 1.0),
                  fontsize=7, frameon=False)

    return fig


def render_diagram_png(
    grid: DiagramGrid,
    view: Optional[DiagramViewConfig] = None
) -> bytes:
    """
    Render the raw diagram raster and return PNG bytes for Streamlit.

    Args:
        grid: Computed diagram
        view: Display options

    Returns:
        PNG image as bytes
    """
    buf = io.BytesIO()
    plt.imsave(buf, render_diagram_image(grid, view), format='png')
    buf.seek(0)
    return buf.getvalue()


def surface_data(
    grid: DiagramGrid,
    quantity: str = "potential",
    stride: int = 5
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sample a property of the most stable phase over the diagram.

    Points without a stable phase are skipped.

    Args:
        grid: Computed diagram
        quantity: 'potential', 'eta1' or 'eta2'
        stride: Sampling step in grid cells along both axes

    Returns:
        (beta1, alpha1, values) flat arrays of equal length
    """
    if quantity not in SURFACE_QUANTITIES:
        raise ValueError(
            f"Unknown quantity '{quantity}', expected one of {list(SURFACE_QUANTITIES)}"
        )
    if stride < 1:
        raise ValueError(f"Stride must be positive, got {stride}")

    xs, ys, zs = [], [], []
    for i in range(0, grid.width, stride):
        for j in range(0, grid.height, stride):
            phase = grid.cell((i, j)).stablest_phase
            if phase is None:
                continue
            if quantity == "potential":
                z = phase.potential
            elif quantity == "eta1":
                z = phase.order_parameter[0]
            else:
                z = phase.order_parameter[1]
            x, y = grid.coordinates((i, j))
            xs.append(x)
            ys.append(y)
            zs.append(z)

    return np.array(xs), np.array(ys), np.array(zs)


def render_surface(
    grid: DiagramGrid,
    quantity: str = "potential",
    stride: int = 5,
    figsize: Tuple[int, int] = (9, 7)
) -> plt.Figure:
    """
    Render a 3D surface of a property of the most stable phase.

    Args:
        grid: Computed diagram
        quantity: 'potential', 'eta1' or 'eta2'
        stride: Sampling step in grid cells
        figsize: Figure size

    Returns:
        Matplotlib figure
    """
    x, y, z = surface_data(grid, quantity, stride)

    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(1, 1, 1, projection='3d')

    if len(z) >= 3:
        ax.plot_trisurf(x, y, z, cmap=matplotlib.colormaps['viridis'], linewidth=0.1)
    elif len(z):
        ax.scatter(x, y, z)

    ax.set_xlabel('β1')
    ax.set_ylabel('α1')
    ax.set_title(SURFACE_QUANTITIES[quantity])
    return fig


def phase_table(cell: GridCellResult) -> List[Dict[str, object]]:
    """
    Rows describing the stable phases at one point.

    Every phase contributes one row per domain. The phase number and the
    potential appear on the first row of each phase only.

    Args:
        cell: Grid cell result

    Returns:
        List of dicts with keys 'Phase', 'η1', 'η2', 'Φ'
    """
    rows = []
    for phase in cell.phases:
        for k, (eta1, eta2) in enumerate(phase.domains()):
            rows.append({
                "Phase": int(phase.family) if k == 0 else "",
                "η1": eta1,
                "η2": eta2,
                "Φ": phase.potential if k == 0 else "",
            })
    return rows

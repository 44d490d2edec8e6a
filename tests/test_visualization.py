#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from phasediagram.diagram import DiagramConfig, GridCellResult, compute_diagram
from phasediagram.thermodynamics import PhaseFamily, PhaseRecord
from phasediagram.visualization import (
    DiagramViewConfig, PHASE_COLORS, TRANSITION_COLOR_INDEX,
    cell_color_index, hex_to_rgb, legend_entries, phase_set_mask, phase_table,
    render_diagram_image, render_diagram_matplotlib, render_diagram_png,
    render_legend, render_surface, surface_data
)


@pytest.fixture(scope="module")
def grid():
    return compute_diagram(DiagramConfig(width=10, height=10))


def two_phase_cell(transition=False):
    phases = (
        PhaseRecord(PhaseFamily.SYMMETRIC, 0.0),
        PhaseRecord(PhaseFamily.POSITIVE, -1.0, (1.0, 0.0)),
    )
    return GridCellResult(0.5, 0.5, phases, 1, transition)


class TestColorTable:
    """Tests for the colour table and colour selection."""

    def test_table_size(self):
        assert len(PHASE_COLORS) == 20
        assert PHASE_COLORS[0] == 0xffffff

    def test_hex_to_rgb(self):
        assert hex_to_rgb(0xff7f00) == (255, 127, 0)

    def test_phase_set_mask(self):
        """Bit k-1 stands for phase k."""
        assert phase_set_mask([]) == 0
        assert phase_set_mask([PhaseFamily.SYMMETRIC]) == 0b0001
        assert phase_set_mask([PhaseFamily.NEGATIVE, PhaseFamily.TWO_COMPONENT]) == 0b1010

    def test_most_stable_only(self):
        """Only the most stable phase decides the colour."""
        view = DiagramViewConfig(most_stable_only=True, show_transitions=False)
        assert cell_color_index(two_phase_cell(), view) == 0b0100

    def test_all_stable(self):
        """The whole set of stable phases decides the colour."""
        view = DiagramViewConfig(most_stable_only=False, show_transitions=False)
        assert cell_color_index(two_phase_cell(), view) == 0b0101

    def test_empty_cell(self):
        """Cells without stable phases are white."""
        assert cell_color_index(GridCellResult(0.0, 0.0), DiagramViewConfig()) == 0

    def test_transition_priority(self):
        view = DiagramViewConfig(show_transitions=True)
        assert cell_color_index(two_phase_cell(True), view) == TRANSITION_COLOR_INDEX
        view.show_transitions = False
        assert cell_color_index(two_phase_cell(True), view) == 0b0100

    def test_isosymmetric_priority(self):
        """Coexisting phases of one family override transition lines."""
        phases = (
            PhaseRecord(PhaseFamily.TWO_COMPONENT, -1.0, (0.5, 0.5)),
            PhaseRecord(PhaseFamily.TWO_COMPONENT, -2.0, (0.3, 0.9)),
        )
        cell = GridCellResult(0.0, 0.0, phases, 1, True)
        view = DiagramViewConfig(show_isosymmetric=True, show_transitions=True)
        assert cell_color_index(cell, view) == 18
        view.show_isosymmetric = False
        assert cell_color_index(cell, view) == TRANSITION_COLOR_INDEX


class TestLegend:
    """Tests for legend entries."""

    def test_entries(self):
        entries = legend_entries()
        assert len(entries) == 20
        assert entries[0] == ("Phase 1", "#008000")
        assert entries[4] == ("Phases 1 2", "#ff7f00")
        assert entries[15] == ("No stable phases", "#ffffff")
        assert entries[-1] == ("First-order transition", "#00ffff")

    def test_render_legend(self):
        fig = render_legend()
        assert fig is not None
        plt.close(fig)

    def test_render_legend_on_axes(self):
        """The legend can share a figure with the diagram."""
        fig, (ax_diagram, ax_legend) = plt.subplots(1, 2)
        assert render_legend(ax=ax_legend) is fig
        labels = [text.get_text() for text in ax_legend.get_legend().get_texts()]
        assert labels == [label for label, _ in legend_entries()]
        plt.close(fig)


class TestDiagramRendering:
    """Tests for diagram images."""

    def test_image_shape(self, grid):
        image = render_diagram_image(grid)
        assert image.shape == (10, 10, 3)
        assert image.dtype == np.uint8

    def test_axes_black(self, grid):
        """The coordinate axes are drawn in black."""
        image = render_diagram_image(grid)
        col, row = grid.zero_indexes()
        assert np.all(image[:, col] == 0)
        assert np.all(image[row, :] == 0)

    def test_cells_use_table(self, grid):
        """Non-axis pixels take their colour from the table."""
        view = DiagramViewConfig()
        image = render_diagram_image(grid, view)
        col, row = grid.zero_indexes()
        for i in range(grid.width):
            for j in range(grid.height):
                if i == col or j == row:
                    continue
                index = cell_color_index(grid.cell((i, j)), view)
                assert tuple(image[j, i]) == hex_to_rgb(PHASE_COLORS[index])

    def test_matplotlib_figure(self, grid):
        fig = render_diagram_matplotlib(grid)
        assert len(fig.axes) >= 1
        plt.close(fig)

    def test_matplotlib_without_legend(self, grid):
        fig = render_diagram_matplotlib(grid, show_legend=False)
        assert fig.axes[0].get_legend() is None
        plt.close(fig)

    def test_png_bytes(self, grid):
        data = render_diagram_png(grid)
        assert data[:8] == b"\x89PNG\r\n\x1a\n"


class TestSurfaces:
    """Tests for surface sampling and plots."""

    def test_surface_data_stride(self, grid):
        """Sampling every fifth cell of a 10x10 grid gives at most 4 points."""
        x, y, z = surface_data(grid, "potential", stride=5)
        assert len(x) == len(y) == len(z)
        assert len(z) <= 4

    def test_surface_values(self, grid):
        """Samples are the most stable phase quantities."""
        x, y, z = surface_data(grid, "eta1", stride=1)
        for xi, yi, zi in zip(x, y, z):
            i = int(round((xi - grid.coordinates((0, 0))[0]) / grid.step_x))
            j = grid.height - 1 - int(round((yi - grid.coordinates((0, grid.height - 1))[1]) / grid.step_y))
            assert grid.stablest_first_order_parameter((i, j)) == zi

    def test_invalid_quantity(self, grid):
        with pytest.raises(ValueError):
            surface_data(grid, "entropy")

    def test_invalid_stride(self, grid):
        with pytest.raises(ValueError):
            surface_data(grid, "potential", stride=0)

    def test_render_surface(self, grid):
        fig = render_surface(grid, "potential", stride=1)
        assert fig is not None
        plt.close(fig)


class TestPhaseTable:
    """Tests for the per-point phase table."""

    def test_rows_per_domain(self):
        """Phase 1 has one row, phase 3 three rows."""
        rows = phase_table(two_phase_cell())
        assert len(rows) == 4
        assert rows[0]["Phase"] == 1
        assert rows[1]["Phase"] == 3
        assert rows[1]["Φ"] == -1.0
        assert rows[2]["Phase"] == "" and rows[2]["Φ"] == ""
        assert rows[2]["η1"] == pytest.approx(-0.5)

    def test_empty(self):
        assert phase_table(GridCellResult(0.0, 0.0)) == []

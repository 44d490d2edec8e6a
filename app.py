#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Landau Phase Diagram - Interactive Streamlit Application
================================================================================

Project:        Landau Phase Diagram
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This is the main Streamlit application for the Landau Phase Diagram.
Users can:
- Set the axis ranges and the fixed coefficients of the model potential
- Compute the diagram with a live progress bar
- Switch between most-stable and all-stable colouring, transition lines and
  isosymmetric regions
- Click a point to list its stable phases and their domains
- Plot the potential and order parameter of the most stable phase in 3D
"""

import streamlit as st
import matplotlib.pyplot as plt
import time
from typing import Tuple, Optional
from PIL import Image
import io

# Try to import image coordinates for interactive clicking
try:
    from streamlit_image_coordinates import streamlit_image_coordinates
    CLICK_AVAILABLE = True
except ImportError:
    CLICK_AVAILABLE = False

# Import our modules
from phasediagram.diagram import DiagramConfig, DiagramGrid, DiagramWorker
from phasediagram.logging_config import setup_logging
from phasediagram.thermodynamics import COEFFICIENT_SYMBOLS, POTENTIAL_EXPRESSION
from phasediagram.visualization import (
    DiagramViewConfig, SURFACE_QUANTITIES, legend_entries, phase_table,
    render_diagram_png, render_surface
)


# Page configuration
st.set_page_config(
    page_title="Landau Phase Diagram",
    page_icon="🧊",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
.legend-swatch {
    display: inline-block;
    width: 28px;
    height: 12px;
    border: 1px solid #444;
    margin-right: 8px;
    vertical-align: middle;
}
.legend-row {
    font-size: 13px;
    margin: 2px 0;
}
</style>
""", unsafe_allow_html=True)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'grid' not in st.session_state:
        st.session_state.grid = None
    if 'config' not in st.session_state:
        st.session_state.config = DiagramConfig()
    if 'view' not in st.session_state:
        st.session_state.view = DiagramViewConfig()
    if 'selected_point' not in st.session_state:
        st.session_state.selected_point = None
    if 'logging_ready' not in st.session_state:
        setup_logging()
        st.session_state.logging_ready = True


def render_sidebar() -> DiagramConfig:
    """Render the sidebar with the diagram parameters."""
    st.sidebar.title("🧊 Landau Phase Diagram")

    st.sidebar.markdown("""
    ---
    ### About

    Stable phases of a potential with a two-component order parameter
    (η1, η2) and symmetry 3m, in the plane of the coefficients β1 and α1:

    $$I_1 = \\eta_1^2 + \\eta_2^2, \\quad I_2 = \\eta_1^3 - 3\\eta_1\\eta_2^2$$

    $$\\Phi = \\alpha_1 I_1 + \\alpha_2 I_1^2 + \\alpha_3 I_1^3 + \\alpha_4 I_1^4
    + \\beta_1 I_2 + \\beta_2 I_2^2 + \\delta_1 I_1 I_2 + \\delta_2 I_1^2 I_2
    + \\delta_3 I_1 I_2^2$$

    ---
    """)

    defaults = st.session_state.config

    st.sidebar.subheader("📐 Axes")
    col_a, col_b = st.sidebar.columns(2)
    with col_a:
        beta1_min = st.number_input("β1 (min)", value=defaults.beta1_range[0])
        alpha1_min = st.number_input("α1 (min)", value=defaults.alpha1_range[0])
    with col_b:
        beta1_max = st.number_input("β1 (max)", value=defaults.beta1_range[1])
        alpha1_max = st.number_input("α1 (max)", value=defaults.alpha1_range[1])

    size = st.sidebar.slider(
        "Grid Size",
        min_value=50, max_value=500, value=defaults.width, step=50,
        help="Number of cells along each axis; larger grids take longer"
    )

    st.sidebar.subheader("⚙️ Model Constants")
    constants = {}
    for name, symbol in zip(
        ("alpha2", "alpha3", "alpha4", "beta2", "delta1", "delta2", "delta3"),
        ("α2", "α3", "α4", "β2", "δ1", "δ2", "δ3")
    ):
        constants[name] = st.sidebar.number_input(
            symbol, value=float(getattr(defaults, name)), format="%.4f"
        )

    st.sidebar.markdown("---")

    st.sidebar.subheader("🎨 Display")
    view = st.session_state.view
    view.most_stable_only = st.sidebar.radio(
        "Colouring",
        ["Most stable phase", "All stable phases"],
        index=0 if view.most_stable_only else 1
    ) == "Most stable phase"
    view.show_transitions = st.sidebar.checkbox(
        "First-order transition lines", value=view.show_transitions
    )
    view.show_isosymmetric = st.sidebar.checkbox(
        "Coexisting isosymmetric phases", value=view.show_isosymmetric
    )

    st.sidebar.markdown("---")

    st.sidebar.markdown("""
    ### 👤 Author
    **Ryan Kamp**
    University of Cincinnati
    Department of Computer Science
    📧 kamprj@mail.uc.edu
    🔗 [GitHub](https://github.com/ryanjosephkamp)
    """)

    return DiagramConfig(
        width=size,
        height=size,
        alpha1_range=(alpha1_min, alpha1_max),
        beta1_range=(beta1_min, beta1_max),
        **constants
    )


def run_computation(config: DiagramConfig) -> Optional[DiagramGrid]:
    """Compute a diagram on a worker thread while updating a progress bar."""
    try:
        grid = DiagramGrid.from_config(config)
    except ValueError as e:
        st.error(f"Range error: {e}")
        return None

    latest = [0]

    def on_progress(percent: int):
        latest[0] = percent

    progress_bar = st.progress(0, text="Computing phase diagram...")
    worker = DiagramWorker(grid, config, on_progress=on_progress)
    worker.start()

    while worker.is_alive():
        progress_bar.progress(latest[0], text=f"Computing phase diagram... {latest[0]}%")
        time.sleep(0.1)
    worker.join()
    progress_bar.empty()

    if worker.error is not None:
        st.error(f"Computation failed: {worker.error}")
        return None

    st.success(f"Diagram computed in {grid.elapsed:.1f} s")
    return grid


def render_legend_panel():
    """Render the colour legend as HTML swatches."""
    st.markdown("### Legend")
    html = "".join(
        f'<div class="legend-row"><span class="legend-swatch" '
        f'style="background-color: {color};"></span>{label}</div>'
        for label, color in legend_entries()
    )
    st.markdown(html, unsafe_allow_html=True)


def select_point(grid: DiagramGrid, img_bytes: bytes) -> Optional[Tuple[int, int]]:
    """Show the diagram and return the grid point picked by the user."""
    if CLICK_AVAILABLE:
        st.markdown("**Click on the diagram to list the stable phases at that point**")
        pil_image = Image.open(io.BytesIO(img_bytes))
        coords = streamlit_image_coordinates(pil_image, key="diagram_canvas")
        if coords is not None:
            col = min(max(int(coords["x"]), 0), grid.width - 1)
            row = min(max(int(coords["y"]), 0), grid.height - 1)
            st.session_state.selected_point = (col, row)
    else:
        st.image(img_bytes)
        st.markdown("*Install `streamlit-image-coordinates` for click selection, or use sliders:*")
        current = st.session_state.selected_point or (grid.width // 2, grid.height // 2)
        col = st.slider("Column (β1)", 0, grid.width - 1, current[0])
        row = st.slider("Row (α1)", 0, grid.height - 1, current[1])
        st.session_state.selected_point = (col, row)

    return st.session_state.selected_point


def render_point_info(grid: DiagramGrid, point: Tuple[int, int]):
    """Render the coefficients and the stable phases at a grid point."""
    beta1, alpha1 = grid.coordinates(point)
    st.markdown(f"### Point β1 = {beta1:.4g}, α1 = {alpha1:.4g}")

    coefficients = grid.coefficients_at(point)
    st.dataframe(
        [dict(zip(COEFFICIENT_SYMBOLS, coefficients.as_tuple()))],
        hide_index=True
    )

    rows = phase_table(grid.cell(point))
    if rows:
        st.markdown("**Thermodynamically stable phases**")
        st.dataframe(rows, hide_index=True)
    else:
        st.info("No stable phases at this point")

    if grid.is_transition(point):
        st.warning("This point lies on a first-order transition line")


def render_main_content(config: DiagramConfig):
    """Render the main diagram content."""
    st.title("🧊 Landau Phase Diagram")
    st.caption(POTENTIAL_EXPRESSION)

    if st.button("🚀 Compute Diagram", use_container_width=True):
        grid = run_computation(config)
        if grid is not None:
            st.session_state.grid = grid
            st.session_state.config = config
            st.session_state.selected_point = None

    grid = st.session_state.grid
    if grid is None:
        st.markdown("""
        ## Welcome!

        ### 🚀 Getting Started:
        1. Set the axis ranges and model constants in the sidebar
        2. Click **Compute Diagram**
        3. Click a point of the diagram to list its stable phases
        4. Plot the potential or the order parameter as a surface

        ---
        *👈 Use the sidebar to begin!*
        """)
        return

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Phase Diagram")
        img_bytes = render_diagram_png(grid, st.session_state.view)
        point = select_point(grid, img_bytes)

    with col2:
        render_legend_panel()

    if point is not None:
        render_point_info(grid, point)

    st.markdown("---")
    st.subheader("📈 Surfaces of the Most Stable Phase")
    quantity = st.selectbox(
        "Quantity",
        list(SURFACE_QUANTITIES),
        format_func=lambda q: SURFACE_QUANTITIES[q]
    )
    if st.button("Plot Surface"):
        fig = render_surface(grid, quantity)
        st.pyplot(fig)
        plt.close(fig)


def main():
    """Main application entry point."""
    initialize_session_state()
    config = render_sidebar()
    render_main_content(config)


if __name__ == "__main__":
    main()

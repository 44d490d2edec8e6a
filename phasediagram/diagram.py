#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Phase Diagram Grid Engine
================================================================================

Project:        Landau Phase Diagram
Module:         diagram.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Scans a rectangular grid of (β1, α1) values, solves for the stable phases
in every cell and marks the cells lying on first-order transition lines.

Grid layout follows a raster image: column i runs along β1 (left to right),
row j runs along α1 from the top (largest α1) to the bottom.
"""

import logging
import threading
import time
from dataclasses import dataclass, replace
from typing import Callable, FrozenSet, List, Optional, Tuple

from .polynomial import ZERO_EPS, ROOT_EPS
from .solver import PhaseSolver, most_stable_index
from .thermodynamics import Coefficients, PhaseFamily, PhaseRecord

logger = logging.getLogger(__name__)

Point = Tuple[int, int]
ProgressCallback = Callable[[int], None]
FinishedCallback = Callable[[], None]


@dataclass(frozen=True)
class GridCellResult:
    """Outcome of the phase analysis at one grid point."""
    x: float                                # β1
    y: float                                # α1
    phases: Tuple[PhaseRecord, ...] = ()
    stablest: Optional[int] = None          # Index into phases
    transition: bool = False                # On a first-order transition line

    @property
    def stablest_phase(self) -> Optional[PhaseRecord]:
        return None if self.stablest is None else self.phases[self.stablest]

    @property
    def families(self) -> FrozenSet[PhaseFamily]:
        """Set of stable phase families (isosymmetric copies collapsed)."""
        return frozenset(phase.family for phase in self.phases)


@dataclass
class DiagramConfig:
    """Configuration of a phase diagram computation."""
    # Grid size in cells (pixels of the rendered diagram)
    width: int = 500
    height: int = 500

    # Axis ranges (min, max)
    alpha1_range: Tuple[float, float] = (-10.0, 10.0)
    beta1_range: Tuple[float, float] = (-10.0, 10.0)

    # Fixed model constants
    alpha2: float = 1.0
    alpha3: float = 1.0
    alpha4: float = 0.0
    beta2: float = 1.0
    delta1: float = 1.0
    delta2: float = 0.0
    delta3: float = 0.0

    # Numerical tolerances
    zero_eps: float = ZERO_EPS
    root_eps: float = ROOT_EPS

    def validate(self) -> None:
        """
        Reject malformed grids and ranges.

        Raises:
            ValueError: if a grid dimension is not positive or a range is empty
        """
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid size must be positive, got {self.width}x{self.height}")
        for name, (low, high) in (("alpha1", self.alpha1_range), ("beta1", self.beta1_range)):
            if low >= high:
                raise ValueError(f"{name} (min) = {low} must be less than {name} (max) = {high}")

    def steps(self) -> Tuple[float, float]:
        """Grid steps (step_x along β1, step_y along α1)."""
        step_x = (self.beta1_range[1] - self.beta1_range[0]) / self.width
        step_y = (self.alpha1_range[1] - self.alpha1_range[0]) / self.height
        return step_x, step_y

    def coefficients(self) -> Coefficients:
        """Model coefficients with the axes at their starting values."""
        return Coefficients(
            alpha1=self.alpha1_range[0],
            alpha2=self.alpha2,
            alpha3=self.alpha3,
            alpha4=self.alpha4,
            beta1=self.beta1_range[0],
            beta2=self.beta2,
            delta1=self.delta1,
            delta2=self.delta2,
            delta3=self.delta3,
        )


def is_transition(cell: GridCellResult, neighbour: GridCellResult) -> bool:
    """
    First-order transition test between two neighbouring cells.

    Both cells must have the same set of several stable phase families
    while their most stable phases differ.
    """
    families = cell.families
    return (
        len(families) > 1
        and families == neighbour.families
        and cell.stablest != neighbour.stablest
    )


class DiagramGrid:
    """
    Phase diagram over a fixed width x height grid.

    The grid is written by compute() only. Readers on other threads must
    wait for the finished callback (or DiagramWorker.join()) before calling
    the query methods.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.step_x = 0.0
        self.step_y = 0.0
        self.is_complete = False
        self.elapsed = 0.0
        self._coefficients: Optional[Coefficients] = None
        self._cells: List[List[GridCellResult]] = self._empty_cells()

    def _empty_cells(self) -> List[List[GridCellResult]]:
        return [
            [GridCellResult(0.0, 0.0) for _ in range(self.height)] for _ in range(self.width)
        ]

    @classmethod
    def from_config(cls, config: DiagramConfig) -> "DiagramGrid":
        config.validate()
        return cls(config.width, config.height)

    def compute(
        self,
        coefficients: Coefficients,
        step_x: float,
        step_y: float,
        progress: Optional[ProgressCallback] = None,
        finished: Optional[FinishedCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        zero_eps: float = ZERO_EPS,
        root_eps: float = ROOT_EPS
    ) -> bool:
        """
        Compute every cell of the diagram.

        Args:
            coefficients: Model coefficients; alpha1 and beta1 are the
                starting (minimum) axis values
            step_x: Increment of β1 per column
            step_y: Increment of α1 per row
            progress: Called with the percentage of columns done
            finished: Called exactly once when the scan ends
            cancel_event: Checked between columns; when set the scan stops
            zero_eps: Coefficient zero threshold for the polynomials
            root_eps: Root tolerance for the polynomials

        Returns:
            True if every column was computed
        """
        solver = PhaseSolver(coefficients, zero_eps, root_eps)
        start_x = coefficients.beta1
        start_y = coefficients.alpha1
        self._coefficients = replace(coefficients)
        self.step_x = step_x
        self.step_y = step_y
        self.is_complete = False
        self._cells = self._empty_cells()

        logger.info(
            f"Computing {self.width}x{self.height} diagram: "
            f"β1 from {start_x} step {step_x}, α1 from {start_y} step {step_y}"
        )
        t_start = time.time()
        cancelled = False

        for i in range(self.width):
            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"Diagram computation cancelled after {i} of {self.width} columns")
                cancelled = True
                break

            beta1 = start_x + i * step_x
            column = self._cells[i]

            for j in range(self.height):
                alpha1 = start_y + (self.height - 1 - j) * step_y
                solver.set_axes(alpha1, beta1)

                phases = tuple(solver.phases())
                cell = GridCellResult(beta1, alpha1, phases, most_stable_index(phases))

                if i and j:
                    transition = (
                        is_transition(cell, self._cells[i - 1][j])
                        or is_transition(cell, column[j - 1])
                    )
                    if transition:
                        cell = replace(cell, transition=True)

                column[j] = cell

            if progress is not None:
                progress(100 * i // (self.width - 1) if self.width > 1 else 100)

        self.elapsed = time.time() - t_start
        self.is_complete = not cancelled
        if self.is_complete:
            n_cells = self.width * self.height
            rate = n_cells / self.elapsed if self.elapsed > 0 else float("inf")
            logger.info(f"Diagram computed in {self.elapsed:.2f} s ({rate:.0f} cells/s)")

        if finished is not None:
            finished()
        return self.is_complete

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _check_computed(self) -> None:
        if self._coefficients is None:
            raise RuntimeError("Diagram not computed")

    def cell(self, point: Point) -> GridCellResult:
        """Result stored for grid point (column, row)."""
        self._check_computed()
        col, row = point
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"Point {point} outside {self.width}x{self.height} grid")
        return self._cells[col][row]

    def _stablest(self, point: Point) -> PhaseRecord:
        phase = self.cell(point).stablest_phase
        if phase is None:
            raise LookupError(f"No stable phase at {point}")
        return phase

    def stablest_phase_family(self, point: Point) -> int:
        """Family (1..4) of the most stable phase, 0 if there is none."""
        phase = self.cell(point).stablest_phase
        return 0 if phase is None else int(phase.family)

    def stablest_potential(self, point: Point) -> float:
        """Potential of the most stable phase. Check stablest_phase_family() first."""
        return self._stablest(point).potential

    def stablest_order_parameter(self, point: Point) -> Tuple[float, float]:
        """Order parameter (η1, η2) of the most stable phase."""
        return self._stablest(point).order_parameter

    def stablest_first_order_parameter(self, point: Point) -> float:
        return self._stablest(point).order_parameter[0]

    def stablest_second_order_parameter(self, point: Point) -> float:
        return self._stablest(point).order_parameter[1]

    def is_phase_stable(self, point: Point, family: int) -> bool:
        return any(phase.family == family for phase in self.cell(point).phases)

    def is_transition(self, point: Point) -> bool:
        return self.cell(point).transition

    def isosymmetric_count(self, point: Point, family: int) -> int:
        """Number of coexisting stable phases of one family at a point."""
        return sum(1 for phase in self.cell(point).phases if phase.family == family)

    def coordinates(self, point: Point) -> Tuple[float, float]:
        """(β1, α1) of a grid point."""
        cell = self.cell(point)
        return cell.x, cell.y

    def zero_indexes(self) -> Point:
        """Column where β1 changes sign and row where α1 changes sign."""
        self._check_computed()
        col = int(-self._coefficients.beta1 / self.step_x)
        row = self.height - 1 + int(self._coefficients.alpha1 / self.step_y)
        return col, row

    def coefficients(self) -> Coefficients:
        """Snapshot of the coefficients with the starting axis values."""
        self._check_computed()
        return replace(self._coefficients)

    def coefficients_at(self, point: Point) -> Coefficients:
        """Snapshot of the coefficients with the axes set to a grid point."""
        cell = self.cell(point)
        return replace(self._coefficients, alpha1=cell.y, beta1=cell.x)


def compute_diagram(
    config: Optional[DiagramConfig] = None,
    progress: Optional[ProgressCallback] = None
) -> DiagramGrid:
    """
    Validate a configuration and compute its diagram synchronously.

    Args:
        config: Diagram configuration (default: DiagramConfig())
        progress: Optional percentage callback

    Returns:
        Computed DiagramGrid
    """
    config = config or DiagramConfig()
    grid = DiagramGrid.from_config(config)
    step_x, step_y = config.steps()
    grid.compute(
        config.coefficients(), step_x, step_y,
        progress=progress,
        zero_eps=config.zero_eps,
        root_eps=config.root_eps
    )
    return grid


class DiagramWorker(threading.Thread):
    """
    Runs a diagram computation on a background thread.

    Callbacks are invoked on the worker thread. The grid may be read once
    on_finished has fired or join() has returned.
    """

    def __init__(
        self,
        grid: DiagramGrid,
        config: DiagramConfig,
        on_progress: Optional[ProgressCallback] = None,
        on_finished: Optional[FinishedCallback] = None,
        on_error: Optional[Callable[[Exception], None]] = None
    ):
        super().__init__(name="diagram-worker", daemon=True)
        self.grid = grid
        self.config = config
        self.on_progress = on_progress
        self.on_finished = on_finished
        self.on_error = on_error
        self.error: Optional[Exception] = None
        self._cancel = threading.Event()

    def run(self):
        try:
            logger.info("Starting diagram computation in background thread...")
            step_x, step_y = self.config.steps()
            self.grid.compute(
                self.config.coefficients(), step_x, step_y,
                progress=self.on_progress,
                finished=self.on_finished,
                cancel_event=self._cancel,
                zero_eps=self.config.zero_eps,
                root_eps=self.config.root_eps
            )
        except Exception as e:
            logger.error(f"Error in DiagramWorker: {e}")
            self.error = e
            if self.on_error is not None:
                self.on_error(e)

    def cancel(self) -> None:
        """Ask the computation to stop after the current column."""
        self._cancel.set()

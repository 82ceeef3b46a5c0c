"""Simulated annealing schedule and cost breakdown records."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class AnnealingSchedule:
    """Cooling schedule for the layout optimizer.

    The loop runs while ``temperature > min_temperature`` and multiplies the
    temperature by ``1 - cooling_rate`` each iteration, so the iteration
    count depends only on these constants (about 57,000 with the defaults).

    Attributes:
        initial_temperature: Starting temperature.
        cooling_rate: Fractional temperature decrease per iteration.
        min_temperature: Loop stops once the temperature falls to this value.
        step_length: Translation step in meters for move perturbations.
        max_seconds: Optional wall-clock bound; the best layout so far is
            returned when it is exceeded.
        progress_interval: Iterations between progress snapshots and
            best-cost history samples.
    """

    initial_temperature: float = 1.0
    cooling_rate: float = 0.0002
    min_temperature: float = 0.00001
    step_length: float = 0.1
    max_seconds: float | None = None
    progress_interval: int = 1000

    def __post_init__(self) -> None:
        if self.initial_temperature <= 0:
            raise ValueError("Initial temperature must be positive")
        if not 0 < self.cooling_rate < 1:
            raise ValueError("Cooling rate must be between 0 and 1")
        if self.min_temperature <= 0:
            raise ValueError("Minimum temperature must be positive")
        if self.step_length <= 0:
            raise ValueError("Step length must be positive")
        if self.max_seconds is not None and self.max_seconds <= 0:
            raise ValueError("max_seconds must be positive when set")
        if self.progress_interval < 1:
            raise ValueError("Progress interval must be at least 1")

    @property
    def expected_iterations(self) -> int:
        """Number of iterations the loop runs without a time bound."""
        if self.initial_temperature <= self.min_temperature:
            return 0
        ratio = math.log(self.min_temperature / self.initial_temperature)
        return math.ceil(ratio / math.log(1 - self.cooling_rate))


@dataclass(frozen=True)
class FittingCostBreakdown:
    """Individual cost terms for one fitting, each roughly in ``[0, 1]``."""

    overlap: float
    clearance_overlap: float
    wall_overlap: float
    wall_distance: float
    wall_orientation: float
    relation: float
    total: float
    is_center_inside_room: bool

"""Room furnisher: fitting selection followed by simulated annealing."""

from __future__ import annotations

import logging
import math
import random
import threading
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..entities import FittingModel, FittingSemantics, Room
from ..errors import FurnishingCancelledError
from ..fitting_cost import FittingCostFunction
from ..fitting_layout import FittingLayout
from ..value_objects import AnnealingSchedule
from .priority import FittingModelSelector

if TYPE_CHECKING:
    from furnishing.contracts import ProgressSinkProtocol

logger = logging.getLogger(__name__)

__all__ = [
    "AnnealingProgress",
    "FurnishingResult",
    "RoomFurnisher",
    "acceptance_probability",
    "report_progress",
]


def report_progress(
    progress_sink: ProgressSinkProtocol | None, snapshot: Any, label: str
) -> None:
    """Hand a snapshot to the sink, logging and ignoring any failure."""
    if progress_sink is None:
        return
    try:
        progress_sink.try_render(snapshot, label)
    except Exception as e:
        logger.warning(f"Progress sink failed for '{label}': {e}")


def acceptance_probability(
    current_cost: float, neighbour_cost: float, temperature: float
) -> float:
    """Metropolis acceptance probability for moving to a neighbour.

    Better neighbours are always accepted; worse ones with probability
    ``exp((current - neighbour) / temperature)``.
    """
    if neighbour_cost < current_cost:
        return 1.0
    return math.exp((current_cost - neighbour_cost) / temperature)


@dataclass(frozen=True)
class AnnealingProgress:
    """Periodic snapshot of the annealing loop."""

    iteration: int
    temperature: float
    current_cost: float
    best_cost: float


@dataclass
class FurnishingResult:
    """Outcome of one furnishing run.

    Attributes:
        layout: Best layout found.
        initial_cost: Cost of the all-at-origin starting layout.
        best_cost: Cost of ``layout``.
        iterations: Annealing iterations performed.
        elapsed_seconds: Wall-clock duration of the annealing loop.
        timed_out: True when the time bound stopped the loop early.
        best_cost_history: Best cost at the start and after every
            progress interval; non-increasing.
    """

    layout: FittingLayout
    initial_cost: float
    best_cost: float
    iterations: int
    elapsed_seconds: float
    timed_out: bool = False
    best_cost_history: list[float] = field(default_factory=list)


class RoomFurnisher:
    """Selects fittings for a room and arranges them by simulated annealing.

    One instance owns its random source; furnish concurrent rooms with
    separate instances.

    Attributes:
        fitting_semantics: Catalog models and room priorities.
        schedule: Annealing constants.
        rng: Random source for selection and perturbation.
        cost_function: Scores fittings in a layout.
        progress_sink: Optional best-effort progress receiver.
    """

    def __init__(
        self,
        fitting_semantics: FittingSemantics,
        schedule: AnnealingSchedule | None = None,
        rng: random.Random | None = None,
        cost_function: FittingCostFunction | None = None,
        progress_sink: ProgressSinkProtocol | None = None,
    ) -> None:
        self.fitting_semantics = fitting_semantics
        self.schedule = schedule or AnnealingSchedule()
        self.rng = rng or random.Random()
        self.cost_function = cost_function or FittingCostFunction()
        self.progress_sink = progress_sink

    def furnish(
        self,
        room: Room,
        fill_target: float,
        cancel_event: threading.Event | None = None,
    ) -> FurnishingResult:
        """Select fittings for ``room`` and return the best arrangement found.

        Args:
            room: Room to furnish.
            fill_target: Share of the floor area, in ``(0, 1]``, to cover.
            cancel_event: Optional token checked once per iteration.

        Returns:
            The best layout with run statistics.

        Raises:
            FurnishingConfigurationError: If selection cannot proceed.
            FurnishingCancelledError: If ``cancel_event`` is set mid-run.
        """
        fitting_models = self.select_fitting_models(room, fill_target)
        layout = FittingLayout.with_fittings_placed_at_origin(
            room, fitting_models, self.fitting_semantics, self.cost_function
        )
        self._report(layout, "initial fitting layout")

        result = self.anneal(layout, cancel_event)

        self._report(result.layout, "final fitting layout")
        logger.info(
            f"Furnished {room.description.room_category.value} with "
            f"{len(result.layout)} fittings: cost {result.initial_cost:.4f} -> "
            f"{result.best_cost:.4f} in {result.iterations} iterations"
        )
        return result

    def select_fitting_models(self, room: Room, fill_target: float) -> list[FittingModel]:
        """Phase one: weighted selection of models until the fill target is met."""
        selector = FittingModelSelector(self.fitting_semantics, self.rng)
        return selector.select(room, fill_target)

    def anneal(
        self,
        layout: FittingLayout,
        cancel_event: threading.Event | None = None,
    ) -> FurnishingResult:
        """Phase two: improve ``layout`` by simulated annealing.

        Even iterations move a random fitting by one step in a random
        direction; odd iterations rotate it by a random multiple of a
        quarter turn. The loop runs until the temperature cools below the
        schedule's minimum, the time bound is exceeded, or the run is
        cancelled.

        Returns:
            The best layout ever seen, not the last accepted one.

        Raises:
            FurnishingCancelledError: If ``cancel_event`` is set.
        """
        schedule = self.schedule
        started = time.monotonic()

        current = layout
        current_cost = current.get_cost()
        best = current
        best_cost = current_cost
        initial_cost = current_cost
        history = [best_cost]

        if not layout.placed_fittings:
            logger.warning("No fittings selected, skipping annealing")
            return FurnishingResult(
                layout=best,
                initial_cost=initial_cost,
                best_cost=best_cost,
                iterations=0,
                elapsed_seconds=time.monotonic() - started,
                best_cost_history=history,
            )

        temperature = schedule.initial_temperature
        iteration = 0
        timed_out = False

        while temperature > schedule.min_temperature:
            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"Furnishing cancelled after {iteration} iterations")
                raise FurnishingCancelledError(iteration)
            if (
                schedule.max_seconds is not None
                and time.monotonic() - started > schedule.max_seconds
            ):
                logger.info(
                    f"Time bound of {schedule.max_seconds}s reached after "
                    f"{iteration} iterations, returning best layout so far"
                )
                timed_out = True
                break

            neighbour = current.clone()
            fitting = neighbour.get_random_fitting(self.rng)
            if iteration % 2 == 0:
                fitting.move_in_direction(
                    schedule.step_length, self.rng.random() * 2 * math.pi
                )
            else:
                fitting.rotate_counter_clockwise(self.rng.randrange(4) * math.pi / 2)

            neighbour_cost = neighbour.get_cost()
            if (
                acceptance_probability(current_cost, neighbour_cost, temperature)
                > self.rng.random()
            ):
                # Accepted layouts are never mutated again, only cloned.
                current = neighbour
                current_cost = neighbour_cost
                if current_cost < best_cost:
                    best = current
                    best_cost = current_cost

            temperature *= 1 - schedule.cooling_rate
            iteration += 1

            if iteration % schedule.progress_interval == 0:
                history.append(best_cost)
                logger.debug(
                    f"Iteration {iteration}: temperature {temperature:.6f}, "
                    f"current {current_cost:.4f}, best {best_cost:.4f}"
                )
                self._report(
                    AnnealingProgress(iteration, temperature, current_cost, best_cost),
                    "annealing",
                )

        return FurnishingResult(
            layout=best,
            initial_cost=initial_cost,
            best_cost=best_cost,
            iterations=iteration,
            elapsed_seconds=time.monotonic() - started,
            timed_out=timed_out,
            best_cost_history=history,
        )

    def _report(self, snapshot: Any, label: str) -> None:
        report_progress(self.progress_sink, snapshot, label)

"""Weighted selection of fitting models for a room.

Each room category carries a list of fitting priorities. The importance of
a category decays geometrically with the number of fittings of that
category already selected, scaled by the room's target area so that large
rooms accept more of the same thing.
"""

from __future__ import annotations

import logging
import random
from collections import Counter

from ..entities import FittingModel, FittingSemantics, Room
from ..errors import FurnishingConfigurationError
from ..value_objects import FittingPriority

logger = logging.getLogger(__name__)

__all__ = [
    "REFERENCE_AREA",
    "FittingModelSelector",
    "importance",
]

# Target area, in square meters, at which one extra fitting applies the
# subsequent importance factor ten times.
REFERENCE_AREA = 10.0


def importance(priority: FittingPriority, target_area: float, selected_count: int) -> float:
    """Current importance of a priority given how many fittings of its category exist.

    Args:
        priority: Category priority with initial importance and decay factor.
        target_area: Floor area, in square meters, to be covered by fittings.
        selected_count: Fittings of the priority's category selected so far.

    Returns:
        ``initial_importance * factor ** (selected_count * REFERENCE_AREA / target_area)``.
    """
    if target_area <= 0:
        return priority.initial_importance
    exponent = selected_count * REFERENCE_AREA / target_area
    return priority.initial_importance * priority.subsequent_importance_factor**exponent


class FittingModelSelector:
    """Roulette-wheel selection of fitting models until a fill target is met.

    Attributes:
        fitting_semantics: Models and room priorities to select from.
        rng: Random source; inject a seeded instance for reproducible runs.
    """

    def __init__(self, fitting_semantics: FittingSemantics, rng: random.Random) -> None:
        self.fitting_semantics = fitting_semantics
        self.rng = rng

    def select(self, room: Room, fill_target: float) -> list[FittingModel]:
        """Select models until their base areas cover ``room.area() * fill_target``.

        Raises:
            FurnishingConfigurationError: If the room category has no
                priorities, or a sampled category has no fitting model.
        """
        room_semantics = self.fitting_semantics.room_semantics_for(
            room.description.room_category
        )
        priorities = room_semantics.fitting_priorities
        target_area = room.area() * fill_target

        selected: list[FittingModel] = []
        counts: Counter[str] = Counter()
        selected_area = 0.0

        while selected_area < target_area:
            weights = [
                importance(priority, target_area, counts[priority.fitting_category])
                for priority in priorities
            ]
            total = sum(weights)
            if total <= 0:
                logger.warning(
                    f"No remaining importance for room category "
                    f"'{room_semantics.room_category.value}', stopping selection at "
                    f"{selected_area:.2f} of {target_area:.2f} m2"
                )
                break

            priority = self._spin(priorities, weights, total)
            model = self._pick_model(priority)
            selected.append(model)
            counts[priority.fitting_category] += 1
            selected_area += model.base_area

        logger.debug(
            f"Selected {len(selected)} fittings covering {selected_area:.2f} m2 "
            f"(target {target_area:.2f} m2)"
        )
        return selected

    def _spin(
        self,
        priorities: tuple[FittingPriority, ...],
        weights: list[float],
        total: float,
    ) -> FittingPriority:
        """Roulette wheel: each priority wins with probability weight / total."""
        pointer = self.rng.random() * total
        cumulative = 0.0
        for priority, weight in zip(priorities, weights):
            cumulative += weight
            if pointer < cumulative:
                return priority
        # Rounding can leave the pointer just past the last boundary.
        for priority, weight in zip(reversed(priorities), reversed(weights)):
            if weight > 0:
                return priority
        return priorities[-1]

    def _pick_model(self, priority: FittingPriority) -> FittingModel:
        models = self.fitting_semantics.models_for_category(priority.fitting_category)
        if not models:
            raise FurnishingConfigurationError(
                f"No fitting model found for fitting priority with fitting category: "
                f"{priority.fitting_category}"
            )
        return models[self.rng.randrange(len(models))]

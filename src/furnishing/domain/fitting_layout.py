"""Fitting layout: the mutable solution state of the optimizer."""

from __future__ import annotations

import math
import random
import uuid
from typing import Callable, Sequence

from . import geometry
from .entities import Fitting, FittingModel, FittingSemantics, Room
from .fitting_cost import FittingCostFunction
from .value_objects import (
    ZERO_2D,
    FittingCostBreakdown,
    RoomConfiguration,
    RoomObject,
    Vector2D,
)

__all__ = ["FittingLayout"]


def _default_id() -> str:
    return uuid.uuid4().hex


class FittingLayout:
    """A room with one placed fitting per selected fitting model.

    ``placed_fittings`` always has the same length as
    ``fitting_models_to_be_placed``. Cloning copies the fittings and the
    room; the models and semantics are read-only and shared.

    Attributes:
        room: The room being furnished.
        fitting_models_to_be_placed: Selected models, one fitting each.
        fitting_semantics: Catalog and semantics the models came from.
        placed_fittings: Current fittings, mutated in place while annealing.
        cost_function: Scores individual fittings.
    """

    def __init__(
        self,
        room: Room,
        fitting_models_to_be_placed: Sequence[FittingModel],
        fitting_semantics: FittingSemantics,
        placed_fittings: list[Fitting],
        cost_function: FittingCostFunction | None = None,
    ) -> None:
        if len(placed_fittings) != len(fitting_models_to_be_placed):
            raise ValueError(
                f"Layout needs one fitting per model: {len(placed_fittings)} fittings "
                f"for {len(fitting_models_to_be_placed)} models"
            )
        self.room = room
        self.fitting_models_to_be_placed = fitting_models_to_be_placed
        self.fitting_semantics = fitting_semantics
        self.placed_fittings = placed_fittings
        self.cost_function = cost_function or FittingCostFunction()

    @classmethod
    def with_fittings_placed_at_origin(
        cls,
        room: Room,
        fitting_models: Sequence[FittingModel],
        fitting_semantics: FittingSemantics,
        cost_function: FittingCostFunction | None = None,
    ) -> FittingLayout:
        """Layout with every fitting at the room center, orientation 0."""
        fittings = [Fitting(ZERO_2D, 0.0, model) for model in fitting_models]
        return cls(room, fitting_models, fitting_semantics, fittings, cost_function)

    @classmethod
    def with_fittings_at_random_position(
        cls,
        room: Room,
        fitting_models: Sequence[FittingModel],
        fitting_semantics: FittingSemantics,
        rng: random.Random,
        cost_function: FittingCostFunction | None = None,
    ) -> FittingLayout:
        """Layout with fittings spread uniformly over the room floor.

        Orientations are continuous and uniform over ``[0, 359]`` degrees.
        """
        half_width = room.description.width_in_meters / 2
        half_depth = room.description.depth_in_meters / 2
        fittings = []
        for model in fitting_models:
            position = Vector2D(
                rng.uniform(-half_width, half_width),
                rng.uniform(-half_depth, half_depth),
            )
            orientation = rng.uniform(0, 359) * math.pi / 180
            fittings.append(Fitting(position, orientation, model))
        return cls(room, fitting_models, fitting_semantics, fittings, cost_function)

    def __len__(self) -> int:
        return len(self.placed_fittings)

    def get_cost(self) -> float:
        """Average cost per fitting; 0 for an empty or degenerate layout."""
        if not self.placed_fittings:
            return 0.0
        total = sum(
            self.cost_function.evaluate(self, fitting) for fitting in self.placed_fittings
        )
        cost = total / len(self.placed_fittings)
        if not math.isfinite(cost):
            return 0.0
        return cost

    def cost_breakdown(self) -> list[tuple[Fitting, FittingCostBreakdown]]:
        """Per-fitting cost terms, in placement order."""
        return [
            (fitting, self.cost_function.breakdown(self, fitting))
            for fitting in self.placed_fittings
        ]

    def relative_overlap(self, fitting: Fitting, other: Fitting) -> float:
        """Exact shared footprint of two fittings as a share of ``fitting``'s base area."""
        base_area = fitting.fitting_model.base_area
        if base_area <= 0:
            return 0.0
        return geometry.intersection_area(fitting.polygon, other.polygon) / base_area

    def max_relative_overlap(self, fitting: Fitting) -> float:
        """Largest share of ``fitting``'s footprint covered by any single other fitting."""
        return max(
            (
                self.relative_overlap(fitting, other)
                for other in self.placed_fittings
                if other is not fitting
            ),
            default=0.0,
        )

    def clone(self) -> FittingLayout:
        return FittingLayout(
            room=self.room.clone(),
            fitting_models_to_be_placed=self.fitting_models_to_be_placed,
            fitting_semantics=self.fitting_semantics,
            placed_fittings=[fitting.copy() for fitting in self.placed_fittings],
            cost_function=self.cost_function,
        )

    def get_random_fitting(self, rng: random.Random) -> Fitting:
        """Uniformly pick one placed fitting.

        Raises:
            IndexError: If the layout is empty.
        """
        if not self.placed_fittings:
            raise IndexError("Cannot pick a fitting from an empty layout")
        return self.placed_fittings[rng.randrange(len(self.placed_fittings))]

    def to_room_configuration(
        self, id_factory: Callable[[], str] | None = None
    ) -> RoomConfiguration:
        """Project the layout onto the flat room configuration format.

        Args:
            id_factory: Produces ids for the configuration and each object.
                Defaults to random hex UUIDs.
        """
        make_id = id_factory or _default_id
        description = self.room.description
        objects = tuple(
            RoomObject(
                id=make_id(),
                model_id=fitting.fitting_model.listing.id,
                name=fitting.category,
                category=fitting.category,
                x=fitting.position.x,
                y=0.0,
                z=fitting.position.z,
                orientation_degrees=math.degrees(fitting.orientation),
                colors=tuple(fitting.fitting_model.listing.color_list),
            )
            for fitting in self.placed_fittings
        )
        return RoomConfiguration(
            id=make_id(),
            area_size_x=description.width_in_meters,
            area_size_z=description.depth_in_meters,
            objects=objects,
        )

"""Application commands (use cases) for room furnishing."""

from __future__ import annotations

import logging
import random
import threading
from typing import TYPE_CHECKING, Callable

from furnishing.domain import AnnealingSchedule, Room, RoomFurnisher
from furnishing.domain.errors import FurnishingConfigurationError
from furnishing.domain.services.furnisher import report_progress

from .catalog import generate_fitting_semantics, missing_categories
from .dtos import FurnishRoomOutput, RoomCreationRequest

if TYPE_CHECKING:
    from furnishing.contracts import ListingSearchProtocol, ProgressSinkProtocol

logger = logging.getLogger(__name__)


class FurnishRoomCommand:
    """Command to furnish one room from a listing catalog.

    Builds fitting semantics from the catalog, validates the room against
    them, then runs selection and annealing.

    Each run draws one seed from ``rng`` and anneals with its own
    ``random.Random``, so runs never share optimizer state.
    """

    def __init__(
        self,
        listing_search: ListingSearchProtocol,
        schedule: AnnealingSchedule | None = None,
        rng: random.Random | None = None,
        progress_sink: ProgressSinkProtocol | None = None,
    ) -> None:
        self.listing_search = listing_search
        self.schedule = schedule or AnnealingSchedule()
        self.rng = rng or random.Random()
        self.progress_sink = progress_sink

    def execute(
        self,
        request: RoomCreationRequest,
        cancel_event: threading.Event | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> FurnishRoomOutput:
        """Execute the furnishing command.

        Args:
            request: Room description and listing selection settings.
            cancel_event: Optional cancellation token for the annealing loop.
            id_factory: Optional id source for the exported room configuration.

        Returns:
            FurnishRoomOutput with the exported layout, or with errors when a
            precondition is missing.

        Raises:
            FurnishingCancelledError: If ``cancel_event`` is set mid-run.
        """
        errors = request.validate()
        if errors:
            return FurnishRoomOutput(errors=errors)

        report_progress(self.progress_sink, request.room_description, "room description")

        try:
            fitting_semantics = generate_fitting_semantics(request, self.listing_search)
            skipped = missing_categories(fitting_semantics)
            if skipped:
                logger.info(f"{len(skipped)} fitting categories have no listing: {skipped}")

            room = Room.from_description(fitting_semantics, request.room_description)
            furnisher = RoomFurnisher(
                fitting_semantics,
                schedule=self.schedule,
                rng=random.Random(self.rng.getrandbits(64)),
                progress_sink=self.progress_sink,
            )
            result = furnisher.furnish(room, request.fill_target, cancel_event)
        except FurnishingConfigurationError as e:
            logger.error(f"Cannot furnish room: {e}")
            return FurnishRoomOutput(errors=[str(e)])

        return FurnishRoomOutput(
            room_configuration=result.layout.to_room_configuration(id_factory),
            result=result,
            skipped_categories=skipped,
        )

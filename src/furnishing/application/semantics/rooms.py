"""Fitting priorities per room category."""

from __future__ import annotations

from furnishing.domain.value_objects import FittingPriority, RoomCategory, RoomSemantics

from .categories import category_names

__all__ = [
    "BESPOKE_ROOM_PRIORITIES",
    "build_room_semantics",
    "generic_priorities",
]

_Row = tuple[str, float, float]


def _priorities(rows: list[_Row]) -> tuple[FittingPriority, ...]:
    return tuple(FittingPriority(category, initial, factor) for category, initial, factor in rows)


_LIVING_ROOM: list[_Row] = [
    ("chair", 1.0, 0.8),
    ("table", 0.8, 0.1),
    ("sofa", 0.5, 0.2),
    ("media cabinet", 0.5, 0.2),
    ("armchair", 0.4, 0.2),
    ("ottoman", 0.4, 0.2),
    ("floor light", 0.4, 0.5),
    ("coffee table", 0.3, 0.2),
    ("ceiling light", 0.2, 0.0),
]

BESPOKE_ROOM_PRIORITIES: dict[RoomCategory, tuple[FittingPriority, ...]] = {
    RoomCategory.LIVING_ROOM: _priorities(_LIVING_ROOM),
    RoomCategory.FAMILY_ROOM: _priorities(_LIVING_ROOM),
    RoomCategory.DINING_ROOM: _priorities(
        [
            ("table", 1.0, 0.1),
            ("chair", 0.8, 0.7),
            ("armchair", 0.6, 0.5),
            ("ottoman", 0.5, 0.0),
            ("side table", 0.5, 0.4),
            ("bookcase", 0.4, 0.3),
            ("floor light", 0.3, 0.2),
            ("ceiling light", 0.2, 0.0),
        ]
    ),
    RoomCategory.OFFICE: _priorities(
        [
            ("desk", 1.0, 0.0),
            ("chair", 0.9, 0.5),
            ("bookcase", 0.7, 0.2),
            ("wall planter", 0.5, 0.1),
            ("wall clock", 0.5, 0.0),
            ("wall art", 0.5, 0.2),
            ("floor light", 0.8, 0.2),
            ("ceiling light", 0.2, 0.0),
        ]
    ),
    RoomCategory.BEDROOM: _priorities(
        [
            ("bed", 0.9, 0.1),
            ("wardrobe", 0.8, 0.1),
            ("dresser", 0.7, 0.1),
            ("mirror", 0.7, 0.1),
            ("rug", 0.6, 0.1),
            ("armchair", 0.5, 0.2),
            ("bookcase", 0.4, 0.3),
            ("floor planter", 0.4, 0.3),
            ("floor light", 0.3, 0.2),
            ("ceiling light", 0.2, 0.0),
        ]
    ),
    RoomCategory.KITCHEN: _priorities(
        [
            ("table", 1.0, 0.1),
            ("chair", 0.8, 0.7),
            ("kitchen cart", 0.6, 0.5),
            ("stool", 0.5, 0.4),
            ("floor planter", 0.3, 0.2),
            ("ceiling light", 0.2, 0.0),
        ]
    ),
    RoomCategory.CONFERENCE_ROOM: _priorities(
        [
            ("table", 1.0, 0.1),
            ("chair", 0.8, 0.7),
            ("media cabinet", 0.7, 0.3),
            ("wall shelving unit", 0.6, 0.3),
            ("ceiling light", 0.2, 0.0),
        ]
    ),
}


def generic_priorities() -> tuple[FittingPriority, ...]:
    """Every known category, importance falling linearly with table position.

    The first category starts at 1 and the last one stays above 0.
    """
    names = category_names()
    step = 1 / len(names)
    return tuple(
        FittingPriority(name, 1 - index * step, 0.1) for index, name in enumerate(names)
    )


def build_room_semantics() -> list[RoomSemantics]:
    """One entry per room category; categories without a bespoke table use generic priorities."""
    fallback = generic_priorities()
    return [
        RoomSemantics(
            room_category=room_category,
            fitting_priorities=BESPOKE_ROOM_PRIORITIES.get(room_category, fallback),
        )
        for room_category in RoomCategory
    ]

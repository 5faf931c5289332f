"""Canonical enums for the care schedule.

Slot and category values are strings so view payloads serialize cleanly.
"""

from enum import IntEnum, StrEnum


# -----------------------------
# Weekday
# -----------------------------
class Weekday(IntEnum):
    """Sunday-based weekday index (0 = Sunday, 6 = Saturday)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# -----------------------------
# Time-of-day slot
# -----------------------------
class Slot(StrEnum):
    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"


# -----------------------------
# Treatment category
# -----------------------------
class TreatmentCategory(StrEnum):
    """Category tag on a treatment; presentation maps it to an icon and color."""

    MINOXIDIL = "minoxidil"
    TOPICAL = "topical"
    LIGHT_THERAPY = "light_therapy"
    SERUM = "serum"
    CLARIFYING_SHAMPOO = "clarifying_shampoo"
    GENTLE_SHAMPOO = "gentle_shampoo"
    MICRONEEDLING = "microneedling"
    HAIR_MASK = "hair_mask"
    PROCEDURE = "procedure"
    REST = "rest"
    RECOVERY = "recovery"

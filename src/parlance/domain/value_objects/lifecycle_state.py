"""Lifecycle state for sections and units."""

from enum import StrEnum


class LifecycleState(StrEnum):
    """Sections and units are deactivated, never deleted."""

    ACTIVE = "active"
    INACTIVE = "inactive"

"""Domain value objects."""

from parlance.domain.value_objects.fingerprint import Fingerprint
from parlance.domain.value_objects.import_state import (
    ImportFinished,
    ImportRequested,
    ImportState,
    NoImportInProgress,
)
from parlance.domain.value_objects.lifecycle_state import LifecycleState
from parlance.domain.value_objects.locale import Locale

__all__ = [
    "Fingerprint",
    "ImportFinished",
    "ImportRequested",
    "ImportState",
    "LifecycleState",
    "Locale",
    "NoImportInProgress",
]

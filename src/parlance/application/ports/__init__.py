"""Application ports - interfaces for external adapters."""

from parlance.application.ports.unit_extractor import UnitExtractor
from parlance.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "UnitExtractor",
    "UnitOfWork",
    "UnitOfWorkFactory",
]

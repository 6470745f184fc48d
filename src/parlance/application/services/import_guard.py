"""Import guard - source content is frozen while a requested import is unfinished."""

import logging
from datetime import datetime

from parlance.domain.entities import Document
from parlance.domain.exceptions import ImportInProgress

logger = logging.getLogger(__name__)


def check_content_update(document: Document) -> None:
    """Raise ImportInProgress when the latest requested import has not finished."""
    if document.import_state.blocks_content_update:
        logger.info(
            "Rejected content update of %s: import requested at %s not finished",
            document.name,
            document.last_import_requested_at,
        )
        raise ImportInProgress()


def request_import(document: Document, at: datetime) -> None:
    document.last_import_requested_at = at


def finish_import(document: Document, at: datetime) -> None:
    if document.last_import_requested_at is None or at < document.last_import_requested_at:
        raise ValueError("Import cannot finish before it was requested")
    document.last_import_finished_at = at

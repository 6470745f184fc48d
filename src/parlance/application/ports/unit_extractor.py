"""Unit extractor port - splits section content into translation units."""

from typing import Protocol

from parlance.application.dto.extraction import ExtractedSection


class UnitExtractor(Protocol):
    """Port for splitting section source into layout and unit segments."""

    def extract(self, content: str) -> ExtractedSection: ...

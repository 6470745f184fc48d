"""Extraction DTOs - a section split into layout and unit segments."""

from dataclasses import dataclass, field

from parlance.domain.value_objects import Fingerprint


@dataclass(frozen=True)
class Segment:
    """Contiguous slice of section source. Unit segments are translatable."""

    text: str
    is_unit: bool = False


@dataclass(frozen=True)
class ExtractedUnit:
    """Unit candidate in source order."""

    content: str
    fingerprint: Fingerprint
    position: int


@dataclass
class ExtractedSection:
    """Section source as an ordered sequence of segments covering every character."""

    segments: list[Segment] = field(default_factory=list)

    @property
    def units(self) -> list[ExtractedUnit]:
        contents = [s.text for s in self.segments if s.is_unit]
        return [
            ExtractedUnit(content=c, fingerprint=Fingerprint.of(c), position=i)
            for i, c in enumerate(contents)
        ]

    @property
    def source(self) -> str:
        return "".join(s.text for s in self.segments)

    def render(self, copies: list[str]) -> str:
        """Rebuild the section with each unit slot replaced by the matching copy."""
        slots = sum(1 for s in self.segments if s.is_unit)
        if len(copies) != slots:
            raise ValueError(f"Expected {slots} copies, got {len(copies)}")
        it = iter(copies)
        return "".join(next(it) if s.is_unit else s.text for s in self.segments)

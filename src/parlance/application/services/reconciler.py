"""Key reconciler - content-addressed reuse of unit identity across section versions."""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from parlance.application.dto.extraction import ExtractedUnit
from parlance.domain.entities import Section, Unit
from parlance.domain.exceptions import InvariantViolation
from parlance.domain.value_objects import LifecycleState


@dataclass
class SectionReconciliation:
    """Outcome of reconciling one section against its new unit list.

    ``units`` holds the section's active units in source order. ``moved`` are
    reused units whose position or literal source changed; ``released`` are
    dormant units left out of a reactivated section.
    """

    section: Section
    units: list[Unit] = field(default_factory=list)
    created: list[Unit] = field(default_factory=list)
    reused: list[Unit] = field(default_factory=list)
    reactivated: list[Unit] = field(default_factory=list)
    deactivated: list[Unit] = field(default_factory=list)
    moved: list[Unit] = field(default_factory=list)
    released: list[Unit] = field(default_factory=list)

    @property
    def changed(self) -> list[Unit]:
        """Existing units whose row must be written back."""
        return self.reactivated + self.deactivated + self.moved + self.released

    @property
    def needs_provisioning(self) -> list[Unit]:
        return self.created + self.reactivated


def _prior_pool(section: Section, units: list[Unit]) -> dict[bytes, deque[Unit]]:
    """Fingerprint -> prior units, each bucket in prior position order.

    An active section matches against its active units; a section coming back
    from deactivation matches against the units it had when it went away.
    """
    if section.active:
        prior = [u for u in units if u.active]
    else:
        prior = [u for u in units if u.dormant]
    pool: dict[bytes, deque[Unit]] = defaultdict(deque)
    for unit in sorted(prior, key=lambda u: u.position):
        pool[unit.fingerprint].append(unit)
    return pool


def reconcile_section(
    section: Section,
    units: list[Unit],
    extracted: list[ExtractedUnit],
    now: datetime,
) -> SectionReconciliation:
    """Match extracted units against the section's prior units by fingerprint.

    ``units`` are all units ever created for the section. Candidates consume
    prior units greedily in source order, so a fingerprint that occurs more
    often than before yields new units for the extra occurrences. The section
    is marked active; persisting it is up to the caller.
    """
    for unit in units:
        if unit.section_id != section.id:
            raise InvariantViolation(
                f"Unit {unit.id} belongs to section {unit.section_id}, not {section.id}"
            )

    pool = _prior_pool(section, units)
    result = SectionReconciliation(section=section)

    for candidate in extracted:
        bucket = pool.get(candidate.fingerprint.value)
        if not bucket:
            unit = Unit(
                id=uuid4(),
                section_id=section.id,
                source_copy=candidate.content,
                fingerprint=candidate.fingerprint.value,
                position=candidate.position,
                created_at=now,
                updated_at=now,
            )
            result.created.append(unit)
            result.units.append(unit)
            continue

        unit = bucket.popleft()
        relocated = (
            unit.position != candidate.position or unit.source_copy != candidate.content
        )
        unit.position = candidate.position
        unit.source_copy = candidate.content
        if unit.active:
            result.reused.append(unit)
            if relocated:
                unit.updated_at = now
                result.moved.append(unit)
        else:
            unit.state = LifecycleState.ACTIVE
            unit.dormant = False
            unit.updated_at = now
            result.reactivated.append(unit)
        result.units.append(unit)

    for bucket in pool.values():
        for unit in bucket:
            unit.updated_at = now
            if unit.active:
                unit.state = LifecycleState.INACTIVE
                result.deactivated.append(unit)
            else:
                unit.dormant = False
                result.released.append(unit)

    section.state = LifecycleState.ACTIVE
    return result


def deactivate_section(section: Section, units: list[Unit], now: datetime) -> list[Unit]:
    """Deactivate a section and its active units, remembering them as its dormant set."""
    section.state = LifecycleState.INACTIVE
    section.updated_at = now
    retired = []
    for unit in units:
        if unit.active:
            unit.state = LifecycleState.INACTIVE
            unit.dormant = True
            unit.updated_at = now
            retired.append(unit)
    return retired

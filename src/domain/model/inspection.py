# domain/model/inspection.py

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class ReportType(str, Enum):
    """Kind of report an inspection produces."""
    PROGRESS = 'PROGRESS'
    FINAL = 'FINAL'


# ── Value Objects ────────────────────────────────────────


@dataclass(frozen=True)
class Observation:
    """A single finding recorded during a site visit."""
    area: str
    description: str = ''
    photos: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class InspectionDetails:
    """Descriptive, user-editable part of an inspection."""
    project_name: str
    date: datetime
    report_type: ReportType = ReportType.PROGRESS
    address: str | None = None
    city_county: str | None = None
    inspector_name: str | None = None
    weather: str | None = None
    notes: str | None = None
    observations: list[Observation] = field(default_factory=list)


# Fields a partial update may touch. Identity, owner and creation time never change.
MUTABLE_FIELDS = (
    'project_name', 'date', 'report_type', 'address', 'city_county',
    'inspector_name', 'weather', 'notes', 'observations',
)


# ── Inspection Domain Model ──────────────────────────────


@dataclass
class Inspection:
    """Domain model representing one inspection, owned by exactly one user."""
    id: str
    user_id: str
    details: InspectionDetails
    created_at: datetime
    updated_at: datetime

    # ── factory ───────────────────────────────────────────

    @staticmethod
    def create(details: InspectionDetails, user_id: str) -> 'Inspection':
        now = datetime.now(timezone.utc)
        return Inspection(
            id=str(uuid.uuid4()),
            user_id=user_id,
            details=details,
            created_at=now,
            updated_at=now,
        )

    # ── queries ───────────────────────────────────────────

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    @property
    def date(self) -> datetime:
        return self.details.date

    @property
    def report_type(self) -> ReportType:
        return self.details.report_type

    # ── state transitions ─────────────────────────────────

    def apply_patch(self, changes: dict) -> None:
        """Apply a partial update of descriptive fields.

        Keys outside MUTABLE_FIELDS are ignored, so a patch can never move an
        inspection to another owner.
        """
        allowed = clean_patch(changes)
        if not allowed:
            return
        self.details = replace(self.details, **allowed)
        self.updated_at = datetime.now(timezone.utc)


def clean_patch(changes: dict) -> dict:
    """Drop keys a caller is not allowed to change and coerce value objects."""
    allowed = {k: v for k, v in changes.items() if k in MUTABLE_FIELDS}
    if 'report_type' in allowed and not isinstance(allowed['report_type'], ReportType):
        allowed['report_type'] = ReportType(allowed['report_type'])
    if 'observations' in allowed:
        allowed['observations'] = [
            o if isinstance(o, Observation) else Observation(**o)
            for o in allowed['observations'] or []
        ]
    return allowed


# ── Aggregate Counter ────────────────────────────────────


@dataclass
class InspectionStats:
    """Running per-user inspection count.

    Maintained separately from the inspections collection and without a
    transaction, so it may drift from the real count under concurrent deletes.
    """
    user_id: str
    total_inspections: int = 0

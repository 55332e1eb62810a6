"""Dashboard filtering, sorting and delete confirmation.

Everything here is pure: filters are immutable values and the filter
function only reorders and drops items it is given. Fetching the
inspections is the caller's job.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from domain.model.errors import ValidationError
from domain.model.inspection import Inspection, ReportType
from domain.model.timestamps import as_utc


class DateRange(str, Enum):
    ALL = 'all'
    LAST_7_DAYS = '7days'
    LAST_30_DAYS = '30days'
    LAST_90_DAYS = '90days'

    @property
    def days(self) -> int | None:
        return _RANGE_DAYS.get(self)


_RANGE_DAYS = {
    DateRange.LAST_7_DAYS: 7,
    DateRange.LAST_30_DAYS: 30,
    DateRange.LAST_90_DAYS: 90,
}


class SortOrder(str, Enum):
    NEWEST = 'newest'
    OLDEST = 'oldest'


ALL_REPORT_TYPES = 'all'
NO_ADDRESS = 'No address provided'


@dataclass(frozen=True)
class DashboardFilters:
    """Filter configuration for the inspection list."""
    date_range: DateRange = DateRange.ALL
    report_type: ReportType | None = None  # None means all report types
    sort_by: SortOrder = SortOrder.NEWEST

    @staticmethod
    def parse(
        date_range: str = DateRange.ALL.value,
        report_type: str = ALL_REPORT_TYPES,
        sort_by: str = SortOrder.NEWEST.value,
    ) -> 'DashboardFilters':
        """Build filters from raw query values.

        Raises:
            ValidationError: a value is not one of the known options
        """
        try:
            return DashboardFilters(
                date_range=DateRange(date_range),
                report_type=None if report_type == ALL_REPORT_TYPES else ReportType(report_type),
                sort_by=SortOrder(sort_by),
            )
        except ValueError as e:
            raise ValidationError(f"Invalid dashboard filter: {e}") from e

    def with_changes(self, **changes) -> 'DashboardFilters':
        current = {
            'date_range': self.date_range.value,
            'report_type': self.report_type.value if self.report_type else ALL_REPORT_TYPES,
            'sort_by': self.sort_by.value,
        }
        current.update(changes)
        return DashboardFilters.parse(**current)


def apply_filters(
    inspections: list[Inspection],
    filters: DashboardFilters,
    now: datetime | None = None,
) -> list[Inspection]:
    """Filter by date range, then report type, then sort by inspection date.

    The date cutoff is ``now - days`` and is inclusive.
    """
    now = now or datetime.now(timezone.utc)
    result = list(inspections)

    days = filters.date_range.days
    if days:
        cutoff = as_utc(now) - timedelta(days=days)
        result = [i for i in result if as_utc(i.date) >= cutoff]

    if filters.report_type is not None:
        result = [i for i in result if i.report_type == filters.report_type]

    result.sort(
        key=lambda i: as_utc(i.date),
        reverse=filters.sort_by == SortOrder.NEWEST,
    )
    return result


# ── Summaries ────────────────────────────────────────────


@dataclass(frozen=True)
class InspectionSummary:
    """One dashboard row."""
    id: str
    date: str
    project_name: str
    address: str
    report_type: ReportType

    @staticmethod
    def of(inspection: Inspection) -> 'InspectionSummary':
        d = inspection.details
        return InspectionSummary(
            id=inspection.id,
            date=as_utc(d.date).date().isoformat(),
            project_name=d.project_name,
            address=d.address or d.city_county or NO_ADDRESS,
            report_type=d.report_type,
        )


# ── Delete confirmation ──────────────────────────────────


@dataclass(frozen=True)
class DeleteConfirmation:
    """Two-phase delete: mark a candidate, then confirm or cancel."""
    candidate: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.candidate is not None

    def mark(self, inspection_id: str) -> 'DeleteConfirmation':
        if not inspection_id:
            raise ValidationError("Inspection id is required")
        return DeleteConfirmation(candidate=inspection_id)

    def cancel(self) -> 'DeleteConfirmation':
        return DeleteConfirmation()

    def confirm(self) -> tuple[str, 'DeleteConfirmation']:
        """Return the candidate id and the cleared state.

        Raises:
            ValidationError: nothing was marked for deletion
        """
        if self.candidate is None:
            raise ValidationError("No inspection selected for deletion")
        return self.candidate, DeleteConfirmation()

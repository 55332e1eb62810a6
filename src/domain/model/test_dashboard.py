"""Unit tests for dashboard filtering, sorting, summaries and delete confirmation."""

import itertools
import unittest
from datetime import datetime, timedelta, timezone

from domain.model.dashboard import (
    DashboardFilters, DateRange, DeleteConfirmation, InspectionSummary, NO_ADDRESS,
    SortOrder, apply_filters,
)
from domain.model.errors import ValidationError
from domain.model.inspection import Inspection, InspectionDetails, ReportType

NOW = datetime(2026, 6, 15, 9, 30, tzinfo=timezone.utc)


def _inspection(name: str, days_ago: int, report_type: ReportType, **details) -> Inspection:
    return Inspection(
        id=name,
        user_id='owner-1',
        details=InspectionDetails(
            project_name=name,
            date=NOW - timedelta(days=days_ago),
            report_type=report_type,
            **details,
        ),
        created_at=NOW,
        updated_at=NOW,
    )


class TestDashboardFiltersParse(unittest.TestCase):

    def test_defaults(self):
        filters = DashboardFilters.parse()
        self.assertEqual(filters.date_range, DateRange.ALL)
        self.assertIsNone(filters.report_type)
        self.assertEqual(filters.sort_by, SortOrder.NEWEST)

    def test_parse_known_values(self):
        filters = DashboardFilters.parse('30days', 'FINAL', 'oldest')
        self.assertEqual(filters.date_range, DateRange.LAST_30_DAYS)
        self.assertEqual(filters.report_type, ReportType.FINAL)
        self.assertEqual(filters.sort_by, SortOrder.OLDEST)

    def test_parse_rejects_unknown_values(self):
        with self.assertRaises(ValidationError):
            DashboardFilters.parse('14days')
        with self.assertRaises(ValidationError):
            DashboardFilters.parse(report_type='DRAFT')
        with self.assertRaises(ValidationError):
            DashboardFilters.parse(sort_by='alphabetical')

    def test_with_changes_returns_new_value(self):
        filters = DashboardFilters()
        changed = filters.with_changes(report_type='PROGRESS')

        self.assertIsNone(filters.report_type)
        self.assertEqual(changed.report_type, ReportType.PROGRESS)
        self.assertEqual(changed.date_range, DateRange.ALL)


class TestApplyFilters(unittest.TestCase):

    def setUp(self):
        self.a = _inspection('A', 0, ReportType.PROGRESS)
        self.b = _inspection('B', 40, ReportType.FINAL)
        self.c = _inspection('C', 3, ReportType.FINAL)
        self.d = _inspection('D', 7, ReportType.FINAL)
        self.e = _inspection('E', 95, ReportType.PROGRESS)
        self.items = [self.a, self.b, self.c, self.d, self.e]

    def test_scenario_30_days_all_types(self):
        result = apply_filters([self.a, self.b], DashboardFilters.parse('30days', 'all'), now=NOW)
        self.assertEqual(result, [self.a])

    def test_scenario_all_dates_final(self):
        result = apply_filters([self.a, self.b], DashboardFilters.parse('all', 'FINAL'), now=NOW)
        self.assertEqual(result, [self.b])

    def test_cutoff_is_inclusive(self):
        result = apply_filters(self.items, DashboardFilters.parse('7days'), now=NOW)
        self.assertIn(self.d, result)
        self.assertEqual({i.id for i in result}, {'A', 'C', 'D'})

    def test_90_days(self):
        result = apply_filters(self.items, DashboardFilters.parse('90days'), now=NOW)
        self.assertEqual({i.id for i in result}, {'A', 'B', 'C', 'D'})

    def test_7days_final_oldest(self):
        result = apply_filters(self.items, DashboardFilters.parse('7days', 'FINAL', 'oldest'), now=NOW)

        self.assertEqual([i.id for i in result], ['D', 'C'])
        for inspection in result:
            self.assertEqual(inspection.report_type, ReportType.FINAL)
            self.assertGreaterEqual(inspection.date, NOW - timedelta(days=7))

    def test_newest_sorts_descending(self):
        result = apply_filters(self.items, DashboardFilters(), now=NOW)
        self.assertEqual([i.id for i in result], ['A', 'C', 'D', 'B', 'E'])

    def test_oldest_sorts_ascending(self):
        result = apply_filters(self.items, DashboardFilters(sort_by=SortOrder.OLDEST), now=NOW)
        self.assertEqual([i.id for i in result], ['E', 'B', 'D', 'C', 'A'])

    def test_result_independent_of_input_order(self):
        filters = DashboardFilters.parse('90days', 'FINAL', 'newest')
        expected = [i.id for i in apply_filters(self.items, filters, now=NOW)]

        for perm in itertools.permutations(self.items):
            self.assertEqual([i.id for i in apply_filters(list(perm), filters, now=NOW)], expected)

    def test_predicates_commute(self):
        by_date = DashboardFilters.parse('30days')
        by_type = DashboardFilters.parse(report_type='FINAL')
        both = DashboardFilters.parse('30days', 'FINAL')

        date_then_type = apply_filters(apply_filters(self.items, by_date, now=NOW), by_type, now=NOW)
        type_then_date = apply_filters(apply_filters(self.items, by_type, now=NOW), by_date, now=NOW)
        combined = apply_filters(self.items, both, now=NOW)

        self.assertEqual(date_then_type, type_then_date)
        self.assertEqual(date_then_type, combined)

    def test_does_not_mutate_input(self):
        items = [self.e, self.a]
        apply_filters(items, DashboardFilters(), now=NOW)
        self.assertEqual(items, [self.e, self.a])

    def test_naive_dates_compare_as_utc(self):
        naive = _inspection('N', 0, ReportType.PROGRESS)
        naive.details = InspectionDetails(
            project_name='N', date=datetime(2026, 6, 14), report_type=ReportType.PROGRESS,
        )
        result = apply_filters([naive], DashboardFilters.parse('7days'), now=NOW)
        self.assertEqual(result, [naive])


class TestInspectionSummary(unittest.TestCase):

    def test_summary_uses_date_part(self):
        summary = InspectionSummary.of(_inspection('A', 0, ReportType.FINAL, address='1 Main St'))
        self.assertEqual(summary.date, '2026-06-15')
        self.assertEqual(summary.address, '1 Main St')

    def test_address_falls_back_to_city_county(self):
        summary = InspectionSummary.of(_inspection('A', 0, ReportType.FINAL, city_county='Kings County'))
        self.assertEqual(summary.address, 'Kings County')

    def test_address_placeholder(self):
        summary = InspectionSummary.of(_inspection('A', 0, ReportType.FINAL))
        self.assertEqual(summary.address, NO_ADDRESS)


class TestDeleteConfirmation(unittest.TestCase):

    def test_mark_then_confirm(self):
        state = DeleteConfirmation().mark('insp-1')
        self.assertTrue(state.is_pending)

        inspection_id, cleared = state.confirm()

        self.assertEqual(inspection_id, 'insp-1')
        self.assertFalse(cleared.is_pending)

    def test_cancel_clears_candidate(self):
        state = DeleteConfirmation().mark('insp-1').cancel()
        self.assertFalse(state.is_pending)

    def test_confirm_without_candidate_raises(self):
        with self.assertRaises(ValidationError):
            DeleteConfirmation().confirm()

    def test_mark_requires_id(self):
        with self.assertRaises(ValidationError):
            DeleteConfirmation().mark('')

    def test_mark_does_not_mutate_original(self):
        original = DeleteConfirmation()
        original.mark('insp-1')
        self.assertFalse(original.is_pending)


if __name__ == '__main__':
    unittest.main()

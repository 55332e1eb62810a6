"""Tests for /api/dashboard and the pending-delete confirmation flow."""

import os
import unittest
from datetime import datetime, timedelta, timezone

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-unit-tests")
os.environ.setdefault("COOKIE_SECURE", "false")

from fastapi.testclient import TestClient

from adapter.fake.inspection_repository import FakeInspectionRepository
from adapter.fake.inspection_stats_repository import FakeInspectionStatsRepository
from api.dependencies import get_inspection_repo, get_inspection_stats_repo
from api.main import app
from api.security import get_current_user_required
from domain.model.inspection import Inspection, InspectionDetails, ReportType
from domain.model.user import ROLE_ADMIN, User


def _user(user_id: str, role: str = 'user') -> User:
    now = datetime.now(timezone.utc)
    return User(id=user_id, name=user_id, email=f'{user_id}@repospector.io',
                created_at=now, updated_at=now, role=role)


class DashboardRoutesTestCase(unittest.TestCase):

    def setUp(self):
        self.repo = FakeInspectionRepository()
        self.stats = FakeInspectionStatsRepository()
        self.owner = _user('owner')
        self.current = self.owner

        now = datetime.now(timezone.utc)
        self.recent = self._add('Recent', now - timedelta(days=2), ReportType.PROGRESS, address='9 Oak Ave')
        self.old = self._add('Old', now - timedelta(days=45), ReportType.FINAL, city_county='Pine County')

        app.dependency_overrides[get_inspection_repo] = lambda: self.repo
        app.dependency_overrides[get_inspection_stats_repo] = lambda: self.stats
        app.dependency_overrides[get_current_user_required] = lambda: self.current
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _add(self, name, date, report_type, owner='owner', **extra) -> Inspection:
        inspection = Inspection.create(
            InspectionDetails(project_name=name, date=date, report_type=report_type, **extra),
            user_id=owner,
        )
        self.repo.save(inspection)
        self.stats.increment(owner)
        return inspection


class TestDashboard(DashboardRoutesTestCase):

    def test_defaults_show_everything_newest_first(self):
        response = self.client.get('/api/dashboard')

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['filters'], {'dateRange': 'all', 'reportType': 'all', 'sortBy': 'newest'})
        self.assertEqual([i['projectName'] for i in body['inspections']], ['Recent', 'Old'])
        self.assertEqual(body['userId'], 'owner')
        self.assertFalse(body['isForeign'])
        self.assertIsNone(body['pendingDelete'])

    def test_summary_fields(self):
        body = self.client.get('/api/dashboard', params={'sortBy': 'oldest'}).json()

        old = body['inspections'][0]
        self.assertEqual(old['id'], self.old.id)
        self.assertEqual(old['address'], 'Pine County')
        self.assertEqual(old['reportType'], 'FINAL')
        self.assertRegex(old['date'], r'^\d{4}-\d{2}-\d{2}$')

    def test_date_and_type_filters(self):
        body = self.client.get('/api/dashboard', params={'dateRange': '30days'}).json()
        self.assertEqual([i['id'] for i in body['inspections']], [self.recent.id])

        body = self.client.get('/api/dashboard', params={'reportType': 'FINAL'}).json()
        self.assertEqual([i['id'] for i in body['inspections']], [self.old.id])

    def test_unknown_filter_value_is_400(self):
        response = self.client.get('/api/dashboard', params={'dateRange': 'forever'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('error', response.json())

    def test_non_admin_foreign_dashboard_is_403(self):
        self.current = _user('stranger')
        response = self.client.get('/api/dashboard', params={'userId': 'owner'})
        self.assertEqual(response.status_code, 403)

    def test_admin_foreign_dashboard(self):
        self.current = _user('boss', role=ROLE_ADMIN)

        body = self.client.get('/api/dashboard', params={'userId': 'owner'}).json()

        self.assertTrue(body['isForeign'])
        self.assertEqual(body['userId'], 'owner')
        self.assertEqual(len(body['inspections']), 2)


class TestPendingDelete(DashboardRoutesTestCase):

    def test_mark_then_confirm_deletes(self):
        marked = self.client.post('/api/dashboard/pending-delete', json={'inspectionId': self.old.id})
        self.assertEqual(marked.status_code, 200)
        self.assertIn('cannot be undone', marked.json()['message'])

        dashboard = self.client.get('/api/dashboard').json()
        self.assertEqual(dashboard['pendingDelete'], self.old.id)
        self.assertEqual(len(dashboard['inspections']), 2)

        confirmed = self.client.post('/api/dashboard/pending-delete/confirm')
        self.assertEqual(confirmed.status_code, 200)
        self.assertNotIn(self.old.id, self.repo.store)
        self.assertEqual(self.stats.get('owner').total_inspections, 1)

        dashboard = self.client.get('/api/dashboard').json()
        self.assertIsNone(dashboard['pendingDelete'])
        self.assertEqual([i['id'] for i in dashboard['inspections']], [self.recent.id])

    def test_cancel_keeps_inspection(self):
        self.client.post('/api/dashboard/pending-delete', json={'inspectionId': self.old.id})

        cancelled = self.client.delete('/api/dashboard/pending-delete')
        self.assertEqual(cancelled.status_code, 200)

        confirm = self.client.post('/api/dashboard/pending-delete/confirm')
        self.assertEqual(confirm.status_code, 400)
        self.assertIn(self.old.id, self.repo.store)

    def test_confirm_without_mark_is_400(self):
        response = self.client.post('/api/dashboard/pending-delete/confirm')
        self.assertEqual(response.status_code, 400)

    def test_confirm_foreign_candidate_is_404(self):
        self.client.post('/api/dashboard/pending-delete', json={'inspectionId': self.old.id})
        self.current = _user('stranger')

        response = self.client.post('/api/dashboard/pending-delete/confirm')

        self.assertEqual(response.status_code, 404)
        self.assertIn(self.old.id, self.repo.store)

    def test_mark_requires_inspection_id(self):
        response = self.client.post('/api/dashboard/pending-delete', json={})
        self.assertEqual(response.status_code, 400)


if __name__ == '__main__':
    unittest.main()

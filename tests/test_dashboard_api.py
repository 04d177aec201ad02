"""Dashboard: /api/dashboard/."""

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.journal.models import DailyNote
from apps.notes.models import Note
from apps.projects.models import Project

pytestmark = pytest.mark.django_db


class TestDashboard:

    def test_requires_login(self, anon):
        assert anon.get('/api/dashboard/').status_code == 401

    def test_empty(self, api):
        body = api.get('/api/dashboard/').json()
        assert body['tasks'] == {'total': 0, 'completed': 0, 'pending': 0, 'overdue': 0}
        assert body['projects']['total'] == 0
        assert body['recent_notes'] == []
        assert body['has_today_entry'] is False

    def test_summary(self, api, user, make_task, make_project, make_note, other_user):
        make_task(completed=True)
        make_task(due_date=timezone.now() - timedelta(days=2))
        make_task(owner=other_user)
        make_project(status=Project.StatusChoices.IN_PROGRESS)
        make_project(status=Project.StatusChoices.COMPLETED)
        make_project(status=Project.StatusChoices.CANCELLED)
        for i in range(6):
            make_note(title=f'n{i}')
        make_note(title='old', status=Note.StatusChoices.ARCHIVED)
        DailyNote.objects.create(user=user, date=timezone.localdate(), content='today')

        body = api.get('/api/dashboard/').json()

        assert body['tasks'] == {'total': 2, 'completed': 1, 'pending': 1, 'overdue': 1}
        assert body['projects']['total'] == 3
        assert body['projects']['active'] == 1
        assert body['projects']['breakdown'] == {'IN_PROGRESS': 1, 'COMPLETED': 1, 'CANCELLED': 1}
        assert body['notes'] == {'total': 7, 'archived': 1}
        assert len(body['recent_notes']) == 5
        assert body['has_today_entry'] is True

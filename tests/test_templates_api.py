"""API szablonów notatek: /api/templates/."""

import pytest

from apps.note_templates.models import Template
from apps.notes.models import Note

pytestmark = pytest.mark.django_db


class TestTemplates:

    def test_create_and_list_by_category(self, api):
        api.post('/api/templates/', {'name': 'Standup', 'content': '- yesterday', 'category': 'Meetings'},
                 content_type='application/json')
        api.post('/api/templates/', {'name': 'Book', 'content': '## Quotes', 'category': 'Reading'},
                 content_type='application/json')

        body = api.get('/api/templates/').json()
        assert [t['name'] for t in body['templates']] == ['Book', 'Standup']

        body = api.get('/api/templates/?category=Meetings').json()
        assert [t['name'] for t in body['templates']] == ['Standup']

    def test_templates_are_shared(self, api, other_user):
        Template.objects.create(name='Shared', content='x')
        assert api.get('/api/templates/').json()['total'] == 1

    def test_use_creates_draft_note(self, api, user):
        template = Template.objects.create(name='Retro', content='## What went well')

        response = api.post(f'/api/templates/{template.id}/use/')

        assert response.status_code == 201
        body = response.json()
        assert body['title'] == 'From Template: Retro'
        assert body['content'] == '## What went well'
        assert body['status'] == 'DRAFT'
        assert Note.objects.get(pk=body['id']).user == user

    def test_update_and_delete(self, api):
        template = Template.objects.create(name='Old', content='x')

        response = api.put(f'/api/templates/{template.id}/', {'name': 'New'}, content_type='application/json')
        assert response.json()['name'] == 'New'
        assert response.json()['content'] == 'x'

        assert api.delete(f'/api/templates/{template.id}/').status_code == 200
        assert api.post(f'/api/templates/{template.id}/use/').status_code == 404

"""API projektów: /api/projects/."""

import pytest

from apps.projects.models import Project

pytestmark = pytest.mark.django_db


class TestProjectCollection:

    def test_requires_login(self, anon):
        assert anon.get('/api/projects/').status_code == 401

    def test_create_defaults(self, api):
        response = api.post('/api/projects/', {'name': 'Garden'}, content_type='application/json')

        assert response.status_code == 201
        body = response.json()
        assert body['status'] == 'PLANNING'
        assert body['progress'] == 0
        assert body['task_count'] == 0
        assert body['tasks'] == []

    def test_create_ignores_client_progress(self, api):
        response = api.post(
            '/api/projects/', {'name': 'Cheat', 'progress': 90}, content_type='application/json'
        )
        assert response.status_code == 201
        assert response.json()['progress'] == 0
        assert Project.objects.get(name='Cheat').progress == 0

    def test_create_validation(self, api):
        response = api.post(
            '/api/projects/', {'name': 'x' * 201, 'status': 'DONE'}, content_type='application/json'
        )
        assert response.status_code == 400
        details = response.json()['details']
        assert details['name'] == ['Name must be less than 200 characters']
        assert 'status' in details

    def test_list_with_counts(self, api, make_project, make_task, other_user):
        project = make_project(name='Mine', status=Project.StatusChoices.IN_PROGRESS)
        make_task(project=project, completed=True)
        make_task(project=project)
        make_project(owner=other_user, name='Theirs')

        body = api.get('/api/projects/').json()
        assert body['total'] == 1
        item = body['projects'][0]
        assert item['name'] == 'Mine'
        assert item['task_count'] == 2
        assert item['completed_task_count'] == 1
        assert item['progress'] == 50

    def test_list_status_filter(self, api, make_project):
        make_project(name='a', status=Project.StatusChoices.COMPLETED)
        make_project(name='b')

        body = api.get('/api/projects/?status=COMPLETED').json()
        assert [p['name'] for p in body['projects']] == ['a']


class TestProjectDetail:

    def test_get_includes_tasks(self, api, make_project, make_task):
        project = make_project()
        make_task(project=project, title='one')

        body = api.get(f'/api/projects/{project.id}/').json()
        assert [t['title'] for t in body['tasks']] == ['one']
        assert 'project' not in body['tasks'][0]

    def test_not_found(self, api, make_project, other_user):
        project = make_project(owner=other_user)
        response = api.get(f'/api/projects/{project.id}/')
        assert response.status_code == 404
        assert response.json() == {'error': 'Project not found'}

    def test_update_keeps_derived_progress(self, api, make_project, make_task):
        project = make_project()
        make_task(project=project, completed=True)

        response = api.put(
            f'/api/projects/{project.id}/',
            {'status': 'IN_PROGRESS', 'progress': 0},
            content_type='application/json',
        )

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'IN_PROGRESS'
        assert body['progress'] == 100
        assert body['name'] == 'Project'

    def test_delete_refused_with_tasks(self, api, make_project, make_task):
        project = make_project()
        make_task(project=project)

        response = api.delete(f'/api/projects/{project.id}/')
        assert response.status_code == 400
        assert Project.objects.filter(pk=project.pk).exists()

    def test_delete_empty_project(self, api, make_project):
        project = make_project()
        response = api.delete(f'/api/projects/{project.id}/')

        assert response.status_code == 200
        assert response.json() == {'message': 'Project deleted successfully'}
        assert not Project.objects.filter(pk=project.pk).exists()

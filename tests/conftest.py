"""Wspólne fixture'y: użytkownicy, zalogowany klient, fabryki obiektów."""

import pytest
from django.contrib.auth import get_user_model
from django.test import Client

from apps.notes.models import Category, Tag, Note
from apps.projects.models import Project
from apps.tasks.models import Task


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username='alice', password='secret')


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(username='bob', password='secret')


@pytest.fixture
def api(user):
    """Klient Django zalogowany jako `user`."""
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def anon(db):
    return Client()


@pytest.fixture
def make_project(user):
    def factory(owner=None, **kwargs):
        kwargs.setdefault('name', 'Project')
        return Project.objects.create(user=owner or user, **kwargs)
    return factory


@pytest.fixture
def make_task(user):
    def factory(owner=None, **kwargs):
        kwargs.setdefault('title', 'Task')
        return Task.objects.create(user=owner or user, **kwargs)
    return factory


@pytest.fixture
def make_category(user):
    def factory(owner=None, **kwargs):
        kwargs.setdefault('name', 'Work')
        return Category.objects.create(user=owner or user, **kwargs)
    return factory


@pytest.fixture
def make_tag(user):
    def factory(owner=None, **kwargs):
        kwargs.setdefault('name', 'urgent')
        return Tag.objects.create(user=owner or user, **kwargs)
    return factory


@pytest.fixture
def make_note(user):
    def factory(owner=None, **kwargs):
        kwargs.setdefault('title', 'Note')
        kwargs.setdefault('content', 'Body')
        return Note.objects.create(user=owner or user, **kwargs)
    return factory

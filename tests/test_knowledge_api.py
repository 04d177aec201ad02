"""API bazy wiedzy: /api/knowledge-articles/."""

import pytest

from apps.knowledge.models import KnowledgeArticle

pytestmark = pytest.mark.django_db


@pytest.fixture
def make_article(user):
    def factory(**kwargs):
        kwargs.setdefault('title', 'Article')
        kwargs.setdefault('content', 'Text')
        return KnowledgeArticle.objects.create(user=user, **kwargs)
    return factory


class TestKnowledgeArticles:

    def test_create_with_tags(self, api):
        response = api.post(
            '/api/knowledge-articles/',
            {'title': 'ORM', 'content': 'joins', 'category': 'Python', 'tags': ['django', 'orm']},
            content_type='application/json',
        )
        assert response.status_code == 201
        assert response.json()['tags'] == ['django', 'orm']

    def test_tags_must_be_strings(self, api):
        response = api.post(
            '/api/knowledge-articles/',
            {'title': 'Bad', 'content': 'x', 'tags': 'django'},
            content_type='application/json',
        )
        assert response.status_code == 400
        assert 'tags' in response.json()['details']

    def test_filters(self, api, make_article):
        make_article(title='Django tips', category='Python', tags=['django'])
        make_article(title='Rust notes', category='Rust', tags=['systems'])
        make_article(title='Flask', content='compared with django', category='Python', tags=[])

        def titles(query):
            return sorted(a['title'] for a in api.get('/api/knowledge-articles/' + query).json()['articles'])

        assert titles('?category=Python') == ['Django tips', 'Flask']
        assert titles('?tag=django') == ['Django tips']
        assert titles('?search=django') == ['Django tips', 'Flask']

    def test_detail_update_delete(self, api, make_article):
        article = make_article(tags=['a'])

        response = api.put(
            f'/api/knowledge-articles/{article.id}/', {'tags': ['a', 'b']}, content_type='application/json'
        )
        assert response.status_code == 200
        assert response.json()['tags'] == ['a', 'b']
        assert response.json()['title'] == 'Article'

        assert api.delete(f'/api/knowledge-articles/{article.id}/').status_code == 200
        response = api.get(f'/api/knowledge-articles/{article.id}/')
        assert response.status_code == 404
        assert response.json()['error'] == 'Knowledge article not found'

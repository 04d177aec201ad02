import django_filters
from django.db.models import Q
from .models import KnowledgeArticle


class KnowledgeArticleFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name='category')
    tag = django_filters.CharFilter(method='filter_tag')
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = KnowledgeArticle
        fields = ['category']

    def filter_tag(self, queryset, name, value):
        # JSONField `contains` nie działa na SQLite, więc filtrujemy po ID
        matching = [a.pk for a in queryset.only('pk', 'tags') if a.has_tag(value)]
        return queryset.filter(pk__in=matching)

    def filter_search(self, queryset, name, value):
        return queryset.filter(Q(title__icontains=value) | Q(content__icontains=value))

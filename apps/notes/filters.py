import django_filters
from django.db.models import Q
from .models import Note


class NoteFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Note.StatusChoices.choices)
    category_id = django_filters.NumberFilter(field_name='category_id')
    search = django_filters.CharFilter(method='filter_search', label="Tytuł lub treść zawiera")

    class Meta:
        model = Note
        fields = ['status']

    def filter_search(self, queryset, name, value):
        return queryset.filter(Q(title__icontains=value) | Q(content__icontains=value))

import django_filters
from apps.core.forms import IsoDateField
from .models import DailyNote


class IsoDateFilter(django_filters.Filter):
    field_class = IsoDateField


class DailyNoteFilter(django_filters.FilterSet):
    start_date = IsoDateFilter(field_name='date', lookup_expr='gte')
    end_date = IsoDateFilter(field_name='date', lookup_expr='lte')
    mood = django_filters.CharFilter(field_name='mood')

    class Meta:
        model = DailyNote
        fields = ['mood']

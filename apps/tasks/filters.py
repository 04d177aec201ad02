# apps/tasks/filters.py
import django_filters
from .models import Task


class TaskFilter(django_filters.FilterSet):
    completed = django_filters.BooleanFilter(field_name='completed')
    priority = django_filters.ChoiceFilter(choices=Task.PriorityChoices.choices)
    project_id = django_filters.NumberFilter(field_name='project_id')
    overdue = django_filters.BooleanFilter(method='filter_overdue', label="Po terminie")

    class Meta:
        model = Task
        fields = ['completed', 'priority']

    def filter_overdue(self, queryset, name, value):
        # overdue=false nic nie zmienia (jak w starym API)
        if value:
            return queryset.overdue()
        return queryset

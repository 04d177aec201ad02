#apps/tasks/forms.py
from django import forms
from apps.core.forms import IsoDateTimeField, PartialUpdateMixin
from apps.projects.models import Project
from .models import Task


class TaskForm(forms.Form):
    title = forms.CharField(
        max_length=200,
        error_messages={
            'required': 'Title is required',
            'max_length': 'Title must be less than 200 characters',
        }
    )
    description = forms.CharField(
        max_length=1000, required=False,
        error_messages={'max_length': 'Description must be less than 1000 characters'}
    )
    completed = forms.BooleanField(required=False)
    priority = forms.ChoiceField(choices=Task.PriorityChoices.choices, required=False)
    due_date = IsoDateTimeField(required=False)
    project_id = forms.ModelChoiceField(
        queryset=Project.objects.none(),
        required=False,
        error_messages={'invalid_choice': 'Project not found'}
    )

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        # Tylko projekty zalogowanego użytkownika
        if user is not None:
            self.fields['project_id'].queryset = Project.objects.filter(user=user)

    def clean_priority(self):
        return self.cleaned_data.get('priority') or Task.PriorityChoices.LOW

    def model_values(self, fields=None):
        """cleaned_data -> kwargs dla modelu Task (project_id -> project)."""
        data = fields if fields is not None else self.cleaned_data
        values = dict(data)
        if 'project_id' in values:
            values['project'] = values.pop('project_id')
        return values


class TaskUpdateForm(PartialUpdateMixin, TaskForm):
    def model_values(self, fields=None):
        return super().model_values(self.changed_fields())

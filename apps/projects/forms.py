from django import forms
from apps.core.forms import PartialUpdateMixin
from .models import Project


class ProjectForm(forms.Form):
    # `progress` celowo nie występuje: liczony przez serwer
    name = forms.CharField(
        max_length=200,
        error_messages={
            'required': 'Name is required',
            'max_length': 'Name must be less than 200 characters',
        }
    )
    description = forms.CharField(
        max_length=1000, required=False,
        error_messages={'max_length': 'Description must be less than 1000 characters'}
    )
    status = forms.ChoiceField(choices=Project.StatusChoices.choices, required=False)

    def clean_status(self):
        return self.cleaned_data.get('status') or Project.StatusChoices.PLANNING


class ProjectUpdateForm(PartialUpdateMixin, ProjectForm):
    pass

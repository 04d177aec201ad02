from django import forms
from apps.core.forms import PartialUpdateMixin


class TemplateForm(forms.Form):
    name = forms.CharField(
        max_length=200,
        error_messages={'required': 'Name is required', 'max_length': 'Name must be less than 200 characters'}
    )
    description = forms.CharField(
        max_length=500, required=False,
        error_messages={'max_length': 'Description must be less than 500 characters'}
    )
    content = forms.CharField(strip=False, error_messages={'required': 'Content is required'})
    category = forms.CharField(
        max_length=100, required=False,
        error_messages={'max_length': 'Category must be less than 100 characters'}
    )


class TemplateUpdateForm(PartialUpdateMixin, TemplateForm):
    pass

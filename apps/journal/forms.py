from django import forms
from apps.core.forms import IsoDateField, PartialUpdateMixin


class DailyNoteForm(forms.Form):
    date = IsoDateField(error_messages={'required': 'Date is required'})
    content = forms.CharField(strip=False, error_messages={'required': 'Content is required'})
    mood = forms.CharField(
        max_length=50, required=False,
        error_messages={'max_length': 'Mood must be less than 50 characters'}
    )


class DailyNoteUpdateForm(PartialUpdateMixin, DailyNoteForm):
    pass


class DailyNoteFilterForm(forms.Form):
    date = IsoDateField(error_messages={'required': 'Date parameter is required'})

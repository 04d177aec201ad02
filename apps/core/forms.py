from datetime import timezone as dt_timezone

from dateutil.parser import isoparse
from django import forms
from django.core.validators import RegexValidator
from django.utils import timezone

hex_color_validator = RegexValidator(
    regex=r'^#[0-9A-Fa-f]{6}$',
    message='Color must be a valid hex color (#RRGGBB format)'
)


class IsoDateTimeField(forms.Field):
    """Data i czas w formacie ISO 8601 (np. 2025-01-15T10:00:00Z)."""

    def to_python(self, value):
        if value in self.empty_values:
            return None
        try:
            parsed = isoparse(str(value))
        except (TypeError, ValueError):
            raise forms.ValidationError('Enter a valid ISO 8601 datetime.', code='invalid')
        if timezone.is_naive(parsed):
            parsed = timezone.make_aware(parsed, dt_timezone.utc)
        return parsed


class IsoDateField(IsoDateTimeField):
    """Data ISO 8601 znormalizowana do dnia w UTC (godzina jest odrzucana)."""

    def to_python(self, value):
        parsed = super().to_python(value)
        return parsed.astimezone(dt_timezone.utc).date() if parsed else None


class StringListField(forms.Field):
    def to_python(self, value):
        if value in self.empty_values:
            return []
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise forms.ValidationError('Expected a list of strings.', code='invalid')
        return list(value)


class PartialUpdateMixin:
    """
    Formularz aktualizacji częściowej: pola nieobecne w payloadzie są opcjonalne,
    a changed_fields() zwraca tylko te, które przyszły w żądaniu.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name, field in self.fields.items():
            if name not in self.data:
                field.required = False

    def changed_fields(self):
        return {
            name: value for name, value in self.cleaned_data.items()
            if name in self.data
        }

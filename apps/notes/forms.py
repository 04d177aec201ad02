from django import forms
from apps.core.forms import PartialUpdateMixin, hex_color_validator
from .models import Category, Note


class CategoryForm(forms.Form):
    name = forms.CharField(
        max_length=100,
        error_messages={'required': 'Name is required', 'max_length': 'Name must be less than 100 characters'}
    )
    description = forms.CharField(
        max_length=500, required=False,
        error_messages={'max_length': 'Description must be less than 500 characters'}
    )
    color = forms.CharField(
        validators=[hex_color_validator],
        error_messages={'required': 'Color is required'}
    )


class CategoryUpdateForm(PartialUpdateMixin, CategoryForm):
    pass


class TagForm(forms.Form):
    name = forms.CharField(
        max_length=50,
        error_messages={'required': 'Name is required', 'max_length': 'Name must be less than 50 characters'}
    )
    color = forms.CharField(
        validators=[hex_color_validator],
        error_messages={'required': 'Color is required'}
    )


class TagUpdateForm(PartialUpdateMixin, TagForm):
    pass


class NoteForm(forms.Form):
    title = forms.CharField(
        max_length=200,
        error_messages={'required': 'Title is required', 'max_length': 'Title must be less than 200 characters'}
    )
    content = forms.CharField(
        strip=False,
        error_messages={'required': 'Content is required'}
    )
    status = forms.ChoiceField(choices=Note.StatusChoices.choices, required=False)
    category_id = forms.ModelChoiceField(
        queryset=Category.objects.none(),
        required=False,
        error_messages={'invalid_choice': 'Category not found'}
    )

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        if user is not None:
            self.fields['category_id'].queryset = Category.objects.filter(user=user)

    def clean_status(self):
        return self.cleaned_data.get('status') or Note.StatusChoices.DRAFT

    def model_values(self, fields=None):
        values = dict(fields if fields is not None else self.cleaned_data)
        if 'category_id' in values:
            values['category'] = values.pop('category_id')
        return values


class NoteUpdateForm(PartialUpdateMixin, NoteForm):
    def model_values(self, fields=None):
        return super().model_values(self.changed_fields())


class UnarchiveForm(forms.Form):
    status = forms.ChoiceField(
        choices=[
            (Note.StatusChoices.PUBLISHED, 'Published'),
            (Note.StatusChoices.DRAFT, 'Draft'),
        ],
        required=False
    )

    def clean_status(self):
        return self.cleaned_data.get('status') or Note.StatusChoices.PUBLISHED


class AttachTagForm(forms.Form):
    tag_id = forms.IntegerField(error_messages={'required': 'tag_id is required'})

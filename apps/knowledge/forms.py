from django import forms
from apps.core.forms import PartialUpdateMixin, StringListField


class KnowledgeArticleForm(forms.Form):
    title = forms.CharField(
        max_length=200,
        error_messages={'required': 'Title is required', 'max_length': 'Title must be less than 200 characters'}
    )
    content = forms.CharField(strip=False, error_messages={'required': 'Content is required'})
    category = forms.CharField(
        max_length=100, required=False,
        error_messages={'max_length': 'Category must be less than 100 characters'}
    )
    tags = StringListField(required=False)


class KnowledgeArticleUpdateForm(PartialUpdateMixin, KnowledgeArticleForm):
    pass

# apps/note_templates/models.py
from django.db import models


class Template(models.Model):
    """Wspólna biblioteka szablonów notatek (bez właściciela)."""
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, max_length=500)
    content = models.TextField()
    category = models.CharField(max_length=100, blank=True)  # np. "Meetings"

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def note_title(self):
        return f"From Template: {self.name}"

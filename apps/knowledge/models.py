# apps/knowledge/models.py
from django.db import models
from django.conf import settings


class KnowledgeArticle(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='knowledge_articles')
    title = models.CharField(max_length=200)
    content = models.TextField(help_text="Markdown supported")
    category = models.CharField(max_length=100, blank=True)  # Wolny tekst, np. "Python"

    # Lista stringów, np. ["django", "orm"]
    tags = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def has_tag(self, tag):
        return tag in (self.tags or [])

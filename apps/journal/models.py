# apps/journal/models.py
from django.db import models
from django.conf import settings


class DailyNote(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='daily_notes')
    # Jeden wpis na dzień (data bez godziny)
    date = models.DateField()
    content = models.TextField()
    mood = models.CharField(max_length=50, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date']
        constraints = [
            models.UniqueConstraint(fields=['user', 'date'], name='unique_daily_note_per_day'),
        ]

    def __str__(self):
        return f"{self.date.isoformat()} ({self.user})"

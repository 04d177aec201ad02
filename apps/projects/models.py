# apps/projects/models.py
from django.db import models
from django.conf import settings
from django.core.validators import MaxValueValidator
from apps.projects.domain.entities import ProjectStatus


class Project(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='projects')
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, max_length=1000)

    # TextChoices dla Admina, wartości zgodne z Enumem domenowym
    class StatusChoices(models.TextChoices):
        PLANNING = ProjectStatus.PLANNING.value, 'Planning'
        IN_PROGRESS = ProjectStatus.IN_PROGRESS.value, 'In Progress'
        ON_HOLD = ProjectStatus.ON_HOLD.value, 'On Hold'
        COMPLETED = ProjectStatus.COMPLETED.value, 'Completed'
        CANCELLED = ProjectStatus.CANCELLED.value, 'Cancelled'

    status = models.CharField(
        max_length=20,
        choices=StatusChoices.choices,
        default=StatusChoices.PLANNING
    )

    # Postęp liczony z zadań (ProgressRecalculator), nie edytowalny z formularzy
    progress = models.PositiveSmallIntegerField(
        default=0,
        editable=False,
        validators=[MaxValueValidator(100)],
        help_text="Procent ukończonych zadań (0-100)"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['status', '-progress']

    def __str__(self):
        return self.name

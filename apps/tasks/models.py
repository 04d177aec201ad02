# apps/tasks/models.py
from django.db import models
from django.conf import settings
from django.utils import timezone
from apps.tasks.domain.entities import TaskPriority


class TaskQuerySet(models.QuerySet):
    def overdue(self):
        """Niedokończone zadania z terminem przed dzisiejszym dniem."""
        start_of_today = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
        return self.filter(completed=False, due_date__lt=start_of_today)

    def with_priority_rank(self):
        return self.annotate(
            priority_rank=models.Case(
                *[models.When(priority=p.value, then=models.Value(p.rank)) for p in TaskPriority],
                default=models.Value(0),
                output_field=models.IntegerField()
            )
        )

    def in_display_order(self):
        # Niedokończone najpierw, potem najbliższy termin, potem najwyższy priorytet
        return self.with_priority_rank().order_by(
            'completed',
            models.F('due_date').asc(nulls_last=True),
            '-priority_rank',
            '-created_at'
        )


class Task(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='tasks')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, max_length=1000)
    completed = models.BooleanField(default=False)

    # TextChoices dla Admina, mapowane na Enum domenowy
    class PriorityChoices(models.TextChoices):
        LOW = TaskPriority.LOW.value, 'Low'
        MEDIUM = TaskPriority.MEDIUM.value, 'Medium'
        HIGH = TaskPriority.HIGH.value, 'High'

    priority = models.CharField(
        max_length=10,
        choices=PriorityChoices.choices,
        default=PriorityChoices.LOW
    )
    due_date = models.DateTimeField(null=True, blank=True)

    # Powiązanie z projektem (zadanie należy do co najwyżej jednego)
    project = models.ForeignKey(
        'projects.Project',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='tasks'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TaskQuerySet.as_manager()

    def __str__(self):
        return self.title

    @property
    def is_overdue(self):
        if self.completed or not self.due_date:
            return False
        start_of_today = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
        return self.due_date < start_of_today

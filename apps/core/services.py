# apps/core/services.py
from django.db.models import Count
from django.utils import timezone
from apps.journal.models import DailyNote
from apps.notes.models import Note
from apps.projects.domain.entities import ProjectStatus
from apps.projects.models import Project
from apps.tasks.models import Task


class DashboardService:

    def get_summary(self, user):
        """Zwraca migawkę stanu użytkownika dla dashboardu."""
        tasks = Task.objects.filter(user=user)
        projects = Project.objects.filter(user=user)

        # 1. Zadania
        task_stats = {
            'total': tasks.count(),
            'completed': tasks.filter(completed=True).count(),
            'pending': tasks.filter(completed=False).count(),
            'overdue': tasks.overdue().count(),
        }

        # 2. Projekty (podział na statusy + aktywne)
        status_breakdown = projects.order_by().values('status').annotate(total=Count('id'))
        finished = [s.value for s in ProjectStatus.finished()]
        project_stats = {
            'total': projects.count(),
            'active': projects.exclude(status__in=finished).count(),
            'breakdown': {item['status']: item['total'] for item in status_breakdown},
        }

        # 3. Notatki
        notes = Note.objects.filter(user=user)
        recent_notes = notes.order_by('-updated_at')[:5]

        # 4. Dziennik
        today = timezone.localdate()
        has_today_entry = DailyNote.objects.filter(user=user, date=today).exists()

        return {
            'today': today,
            'tasks': task_stats,
            'projects': project_stats,
            'notes': {
                'total': notes.count(),
                'archived': notes.filter(status=Note.StatusChoices.ARCHIVED).count(),
            },
            'recent_notes': [
                {'id': n.id, 'title': n.title, 'status': n.status, 'updated_at': n.updated_at}
                for n in recent_notes
            ],
            'has_today_entry': has_today_entry,
        }

# apps/tasks/signals.py
import logging
from django.db.models.signals import pre_save, post_save, post_delete
from django.dispatch import receiver
from apps.projects.adapters.orm_repositories import DjangoProjectProgressRepository
from apps.projects.domain.exceptions import ProjectNotFound
from apps.projects.services.progress_service import ProgressRecalculator
from .domain.entities import TaskSnapshot
from .domain.services import projects_to_recalculate
from .models import Task

logger = logging.getLogger(__name__)


def _recalculate(project_ids):
    if not project_ids:
        return
    logger.debug("Recalculating progress of projects %s", sorted(project_ids))

    # Manual Dependency Injection (jak w widokach)
    service = ProgressRecalculator(DjangoProjectProgressRepository())
    service.recalculate_many(project_ids)


@receiver(pre_save, sender=Task)
def remember_progress_state(sender, instance, raw=False, **kwargs):
    """
    Przed zapisem odczytujemy stary stan zadania (projekt + completed),
    żeby po zapisie wiedzieć, które projekty przeliczyć.
    """
    instance._progress_snapshot = None
    if raw or not instance.pk:
        return

    old = Task.objects.filter(pk=instance.pk).values('project_id', 'completed').first()
    if old:
        instance._progress_snapshot = TaskSnapshot(project_id=old['project_id'], completed=old['completed'])


@receiver(post_save, sender=Task)
def update_project_progress_on_save(sender, instance, created, raw=False, **kwargs):
    """Przelicz postęp starego i nowego projektu po utworzeniu/zmianie zadania."""
    if raw:
        return

    before = None if created else getattr(instance, '_progress_snapshot', None)
    after = TaskSnapshot(project_id=instance.project_id, completed=instance.completed)

    _recalculate(projects_to_recalculate(before, after))


@receiver(post_delete, sender=Task)
def update_project_progress_on_delete(sender, instance, **kwargs):
    """Po usunięciu zadania przelicz jego (byłego) projekt."""
    before = TaskSnapshot(project_id=instance.project_id, completed=instance.completed)
    try:
        _recalculate(projects_to_recalculate(before, None))
    except ProjectNotFound:
        # Projekt usuwany razem z zadaniem (np. kaskada po usunięciu użytkownika)
        logger.info("Project %s no longer exists, skipping progress update", instance.project_id)

# apps/projects/adapters/orm_repositories.py
from typing import List
from django.db import DatabaseError
from django.utils import timezone
from apps.projects.domain.exceptions import ProjectNotFound, ProgressStorageError
from apps.projects.models import Project as ProjectModel
from apps.projects.ports.repositories import IProjectProgressRepository
from apps.tasks.models import Task as TaskModel


class DjangoProjectProgressRepository(IProjectProgressRepository):
    def get_completion_flags(self, project_id: int) -> List[bool]:
        try:
            return list(
                TaskModel.objects.filter(project_id=project_id).values_list('completed', flat=True)
            )
        except DatabaseError as e:
            raise ProgressStorageError(f"Failed to read tasks of project {project_id}") from e

    def set_progress(self, project_id: int, progress: int) -> None:
        # update() zamiast save(): jeden UPDATE, bez nadpisywania innych pól
        try:
            updated = ProjectModel.objects.filter(id=project_id).update(
                progress=progress,
                updated_at=timezone.now()
            )
        except DatabaseError as e:
            raise ProgressStorageError(f"Failed to store progress of project {project_id}") from e

        if updated == 0:
            raise ProjectNotFound(project_id)
